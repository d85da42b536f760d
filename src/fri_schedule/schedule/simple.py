"""
Fixed-factor folding schedules.

Every round after the first folds by the same factor until the remainder
polynomial is small enough. This is the conventional choice of production FRI
provers and serves as the baseline for :mod:`fri_schedule.schedule.optimal`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from fri_schedule.analysis.cost_model import estimate_proof_size
from fri_schedule.params import InvalidParameter, check_power_of_two, check_protocol, ilog2
from fri_schedule.utils import logger


@dataclass(frozen=True)
class AtMost:
    """Stop folding once the remainder degree is at or below ``degree``."""

    degree: int


@dataclass(frozen=True)
class ExactTarget:
    """Fold until the remainder degree is exactly ``degree`` (a power of two)."""

    degree: int


RemainderPolicy = Union[AtMost, ExactTarget]


def _coerce_policy(remainder: RemainderPolicy | int) -> RemainderPolicy:
    if isinstance(remainder, (AtMost, ExactTarget)):
        return remainder
    if isinstance(remainder, int) and not isinstance(remainder, bool):
        return AtMost(remainder)
    raise InvalidParameter(f"Unsupported remainder policy: {remainder!r}.")


def num_rounds(degree: int, folding_factor: int, remainder_max_degree: int) -> int:
    """
    Number of rounds, the unfolded first round included, needed to bring
    ``degree`` to at most ``remainder_max_degree`` with folds of
    ``2**folding_factor``.
    """
    rounds = 1
    current_degree = degree
    factor = 1 << folding_factor
    while current_degree > remainder_max_degree:
        current_degree //= factor
        rounds += 1
    return rounds


def _exact_rounds(degree: int, folding_factor: int, target: int) -> Tuple[int, int]:
    """Full fixed-factor folds that stay at or above ``target``, and the degree reached."""
    rounds = 0
    current_degree = degree
    factor = 1 << folding_factor
    while current_degree // factor >= target:
        current_degree //= factor
        rounds += 1
    return rounds, current_degree


def simple_schedule(
    degree: int,
    blowup_factor: int,
    num_queries: int,
    remainder: RemainderPolicy | int,
    folding_factor: int,
) -> Tuple[int, List[int]]:
    """
    Build the fixed-factor schedule and estimate its proof size.

    Args:
        degree: degree bound of the committed polynomial (power of two).
        blowup_factor: blowup factor of the evaluation domain (power of two).
        num_queries: number of FRI queries.
        remainder: :class:`AtMost` bound or :class:`ExactTarget` degree for the
            remainder polynomial. A plain ``int`` is read as ``AtMost``.
        folding_factor: folding exponent applied in every round after the
            first, e.g. ``2`` for a factor of 4.

    Returns:
        ``(size, schedule)`` with the size in field elements.
    """
    check_protocol(degree, blowup_factor, num_queries)
    policy = _coerce_policy(remainder)

    if degree < blowup_factor:
        raise InvalidParameter(
            f"`degree` ({degree}) must be at least `blowup_factor` ({blowup_factor})."
        )
    if folding_factor < 1:
        raise InvalidParameter(f"`folding_factor` must be at least 1, got {folding_factor}.")

    poly_degree = degree // blowup_factor
    if isinstance(policy.degree, bool) or not isinstance(policy.degree, int) or policy.degree < 0:
        raise InvalidParameter(f"Remainder degree must be a non-negative integer, got {policy.degree!r}.")
    if policy.degree > poly_degree:
        raise InvalidParameter(
            f"Remainder degree {policy.degree} exceeds the working degree {poly_degree}."
        )

    if isinstance(policy, AtMost):
        rounds = num_rounds(poly_degree, folding_factor, policy.degree)
        folding_schedule = [0] + [folding_factor] * (rounds - 1)
    else:
        check_power_of_two("remainder", policy.degree)
        rounds, current_degree = _exact_rounds(poly_degree, folding_factor, policy.degree)
        folding_schedule = [0] + [folding_factor] * rounds

        adjustment_bits = ilog2(current_degree // policy.degree)
        assert adjustment_bits >= 0, "adjustment round must fold by a power of two"
        if adjustment_bits > 0:
            folding_schedule.append(adjustment_bits)

    proof_size = estimate_proof_size(degree, blowup_factor, num_queries, folding_schedule)
    logger.debug(
        "fixed-factor schedule (2**%d, %r): %s (%d elements)",
        folding_factor,
        policy,
        folding_schedule,
        proof_size,
    )
    return proof_size, folding_schedule
