"""
Exhaustive search for the folding schedule with the smallest estimated proof.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from fri_schedule.analysis.cost_model import estimate_proof_size, remainder_cost, round_cost
from fri_schedule.params import InvalidParameter, check_protocol, ilog2
from fri_schedule.schedule.stats import SearchProfiler
from fri_schedule.schedule.validate import validate_schedule_for
from fri_schedule.utils import config, logger


def optimal_folding_strategy(
    degree: int,
    blowup_factor: int,
    num_queries: int,
    current_folding_seq: Optional[Sequence[int]] = None,
    *,
    max_folding_bits: Optional[int] = None,
    profiler: Optional[SearchProfiler] = None,
) -> Tuple[int, List[int]]:
    """
    Enumerate every schedule reachable from ``current_folding_seq`` and return
    the one with the smallest estimated proof size.

    Args:
        degree: degree bound of the committed polynomial (power of two).
        blowup_factor: blowup factor of the evaluation domain (power of two).
        num_queries: number of FRI queries.
        current_folding_seq: seed schedule, ``[0]`` when omitted. The seed is
            itself a candidate; each extension appends one round with a
            folding exponent between 1 and the per-round cap.
        max_folding_bits: per-round cap on the folding exponent. Defaults to
            ``config.max_folding_bits``.
        profiler: optional :class:`SearchProfiler` collecting search counters.

    Returns:
        ``(size, schedule)`` with the minimal size in field elements. Ties keep
        the candidate found first.
    """
    check_protocol(degree, blowup_factor, num_queries)
    seed = [0] if current_folding_seq is None else list(current_folding_seq)
    validate_schedule_for(degree, blowup_factor, seed)

    cap = config.max_folding_bits if max_folding_bits is None else max_folding_bits
    if cap < 0:
        raise InvalidParameter(f"`max_folding_bits` must be non-negative, got {cap}.")

    # rounds already in the seed are scored once; the remainder depends on where folding stops
    layer_degree = degree >> sum(seed)
    committed = estimate_proof_size(degree, blowup_factor, num_queries, seed)
    committed -= remainder_cost(layer_degree, blowup_factor)

    size, schedule = _search(
        blowup_factor, num_queries, seed, layer_degree, committed, cap, profiler
    )
    logger.debug(
        "optimal schedule for degree=%d blowup=%d queries=%d: %s (%d elements)",
        degree,
        blowup_factor,
        num_queries,
        schedule,
        size,
    )
    return size, schedule


def _search(
    blowup_factor: int,
    num_queries: int,
    folding_seq: List[int],
    current_layer_degree: int,
    committed: int,
    cap: int,
    profiler: Optional[SearchProfiler],
) -> Tuple[int, List[int]]:
    # `committed` is the cost of every round in `folding_seq`, so the
    # candidate's size equals estimate_proof_size(..., folding_seq)
    optimal_size = committed + remainder_cost(current_layer_degree, blowup_factor)
    optimal_seq = folding_seq
    if profiler is not None:
        profiler.record_candidate(len(folding_seq))

    max_bits = min(ilog2(current_layer_degree // blowup_factor), cap)
    for bits in range(1, max_bits + 1):
        size, candidate = _search(
            blowup_factor,
            num_queries,
            folding_seq + [bits],
            current_layer_degree >> bits,
            committed + round_cost(current_layer_degree, bits, num_queries),
            cap,
            profiler,
        )
        if size < optimal_size:
            optimal_size = size
            optimal_seq = candidate
            if profiler is not None:
                profiler.record_improvement(size)

    return optimal_size, optimal_seq
