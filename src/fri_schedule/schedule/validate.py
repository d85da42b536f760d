"""
Validation of folding schedules.
"""

from __future__ import annotations

from typing import Sequence

from fri_schedule.params import InvalidParameter, ilog2


def validate_schedule(folding_seq: Sequence[int]) -> None:
    """
    Structural checks shared by every entry point that accepts a schedule:
    - at least one round
    - round 0 does not fold
    - all folding exponents are non-negative integers
    """
    _ensure_non_empty(folding_seq)
    _ensure_unfolded_first_round(folding_seq)
    _ensure_non_negative_bits(folding_seq)


def validate_schedule_for(degree: int, blowup_factor: int, folding_seq: Sequence[int]) -> None:
    """
    As :func:`validate_schedule`, and additionally require that replaying the
    schedule keeps at least a degree-1 polynomial before blowup.
    """
    validate_schedule(folding_seq)
    if degree < blowup_factor:
        raise InvalidParameter(
            f"`degree` ({degree}) must be at least `blowup_factor` ({blowup_factor})."
        )
    total_bits = sum(folding_seq)
    if total_bits > ilog2(degree // blowup_factor):
        raise InvalidParameter(
            f"Schedule folds by 2**{total_bits}, beyond the working degree {degree // blowup_factor}."
        )


def _ensure_non_empty(folding_seq: Sequence[int]) -> None:
    if not folding_seq:
        raise InvalidParameter("Folding schedule must contain at least the initial round.")


def _ensure_unfolded_first_round(folding_seq: Sequence[int]) -> None:
    if folding_seq[0] != 0:
        raise InvalidParameter("The first round of a folding schedule must not fold.")


def _ensure_non_negative_bits(folding_seq: Sequence[int]) -> None:
    for round_index, bits in enumerate(folding_seq):
        if isinstance(bits, bool) or not isinstance(bits, int) or bits < 0:
            raise InvalidParameter(f"Round {round_index} has invalid folding bits: {bits!r}.")
