from __future__ import annotations

import pytest

from fri_schedule.params import InvalidParameter
from fri_schedule.schedule.validate import validate_schedule, validate_schedule_for


def test_validate_schedule_accepts_well_formed() -> None:
    validate_schedule([0])
    validate_schedule([0, 4, 1, 3])
    validate_schedule_for(1024, 2, [0, 4, 4, 1])


@pytest.mark.parametrize("schedule", [[], [2, 1], [0, -1], [0, 1.5], [0, True]])
def test_validate_schedule_rejects_malformed(schedule: list) -> None:
    with pytest.raises(InvalidParameter):
        validate_schedule(schedule)


def test_validate_schedule_for_rejects_overfolding() -> None:
    with pytest.raises(InvalidParameter):
        validate_schedule_for(1024, 2, [0, 4, 4, 2])


def test_validate_schedule_for_rejects_degree_below_blowup() -> None:
    with pytest.raises(InvalidParameter):
        validate_schedule_for(2, 4, [0])
