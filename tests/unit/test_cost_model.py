from __future__ import annotations

import random

import pytest

from fri_schedule.analysis.cost_model import (
    ELEMENTS_PER_HASH_OUTPUT,
    FIELD_ELEMENTS_PER_LEAF,
    estimate_proof_size,
    layer_degrees,
    proof_size_breakdown,
)
from fri_schedule.params import InvalidParameter


def test_constants() -> None:
    assert ELEMENTS_PER_HASH_OUTPUT == 4
    assert FIELD_ELEMENTS_PER_LEAF == 2


def test_unfolded_schedule_sends_whole_polynomial() -> None:
    # one path of depth 25 and two leaf elements, then 2**22 coefficients
    assert estimate_proof_size(2**25, 8, 1, [0]) == 25 * 4 + 2 + 2**22 * 2


def test_fixed_factor_schedule_matches_hand_count() -> None:
    # layers 1024, 1024, 256, 64, 16 then a remainder of degree 2
    assert estimate_proof_size(1024, 2, 1, [0, 2, 2, 2, 2]) == 42 + 48 + 40 + 32 + 24 + 4
    assert estimate_proof_size(1024, 2, 2, [0, 2, 2, 2, 2]) == 2 * (42 + 48 + 40 + 32 + 24) + 4


def test_zero_queries_only_counts_remainder() -> None:
    assert estimate_proof_size(64, 4, 0, [0, 1, 1]) == (16 // 4) * 2


def test_monotone_in_num_queries() -> None:
    for _ in range(50):
        schedule = [0] + [random.randint(1, 4) for _ in range(random.randint(0, 4))]
        sizes = [estimate_proof_size(2**20, 4, q, schedule) for q in range(0, 6)]
        assert sizes == sorted(sizes)


def test_breakdown_total_matches_estimate() -> None:
    schedule = [0, 3, 2, 4]
    breakdown = proof_size_breakdown(2**16, 4, 7, schedule)

    assert breakdown.total == estimate_proof_size(2**16, 4, 7, schedule)
    assert [layer.layer_degree for layer in breakdown.layers] == [2**16, 2**16, 2**13, 2**11]
    assert [layer.folding_bits for layer in breakdown.layers] == schedule
    assert breakdown.remainder_degree == 2**7 // 4
    assert breakdown.layers[1].leaf_elements == 7 * 8 * 2
    assert breakdown.layers[1].merkle_path_elements == 7 * 16 * 4


def test_layer_degrees_replays_schedule() -> None:
    assert layer_degrees(1024, [0, 2, 3]) == [1024, 1024, 256, 32]


@pytest.mark.parametrize(
    "degree, blowup, schedule",
    [
        (1000, 2, [0]),
        (1024, 3, [0]),
        (1024, 2, [0, -1]),
        # last round would start on an empty layer
        (16, 1, [0, 4, 1, 1]),
    ],
)
def test_estimate_rejects_invalid_input(degree: int, blowup: int, schedule: list) -> None:
    with pytest.raises(InvalidParameter):
        estimate_proof_size(degree, blowup, 1, schedule)
