"""
Closed-form proof-size model for a FRI folding schedule.

Sizes are counted in field elements. Every round opens one Merkle
authentication path per query (no path compression) together with the
sibling leaves needed to recompute one folded value; the remainder polynomial
is sent in coefficient form once folding stops.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from fri_schedule.params import InvalidParameter, check_protocol, ilog2

# digest size of a Merkle node
ELEMENTS_PER_HASH_OUTPUT = 4
# size of one opened leaf value
FIELD_ELEMENTS_PER_LEAF = 2


@dataclass(frozen=True)
class LayerCost:
    round_index: int
    layer_degree: int
    folding_bits: int
    merkle_path_elements: int
    leaf_elements: int

    @property
    def total(self) -> int:
        return self.merkle_path_elements + self.leaf_elements


@dataclass(frozen=True)
class ProofSizeBreakdown:
    layers: List[LayerCost] = field(default_factory=list)
    remainder_degree: int = 0
    remainder_elements: int = 0

    @property
    def total(self) -> int:
        return sum(layer.total for layer in self.layers) + self.remainder_elements


def _check_round(round_index: int, bits: int, layer_degree: int) -> None:
    if bits < 0:
        raise InvalidParameter(f"Round {round_index} has negative folding bits: {bits}.")
    if layer_degree == 0:
        raise InvalidParameter(
            f"Round {round_index} starts on an empty layer; the schedule folds past degree 1."
        )


def round_cost(layer_degree: int, folding_bits: int, num_queries: int) -> int:
    """Elements opened in one round: a Merkle path and the sibling leaves, per query."""
    merkle_path = ilog2(layer_degree) * ELEMENTS_PER_HASH_OUTPUT
    leaves = (1 << folding_bits) * FIELD_ELEMENTS_PER_LEAF
    return num_queries * (merkle_path + leaves)


def remainder_cost(layer_degree: int, blowup_factor: int) -> int:
    return (layer_degree // blowup_factor) * FIELD_ELEMENTS_PER_LEAF


def layer_degrees(degree: int, folding_seq: Sequence[int]) -> List[int]:
    """
    Replay a schedule and return the layer degree at every round boundary,
    starting with ``degree`` and ending with the final (unfolded) layer.
    """
    degrees = [degree]
    current = degree
    for bits in folding_seq:
        current >>= bits
        degrees.append(current)
    return degrees


def estimate_proof_size(
    degree: int,
    blowup_factor: int,
    num_queries: int,
    folding_seq: Sequence[int],
) -> int:
    """
    Estimate the FRI proof size for ``folding_seq`` in field elements.

    The estimate is an upper-bound style heuristic; it does not model Merkle
    path compression or batching across queries.
    """
    check_protocol(degree, blowup_factor, num_queries)

    current_layer_degree = degree
    num_elements = 0
    for round_index, bits in enumerate(folding_seq):
        _check_round(round_index, bits, current_layer_degree)
        num_elements += round_cost(current_layer_degree, bits, num_queries)
        current_layer_degree //= 1 << bits

    # the committed layer is blown up; the remainder is sent as coefficients
    num_elements += remainder_cost(current_layer_degree, blowup_factor)
    return num_elements


def proof_size_breakdown(
    degree: int,
    blowup_factor: int,
    num_queries: int,
    folding_seq: Sequence[int],
) -> ProofSizeBreakdown:
    """
    Per-layer view of :func:`estimate_proof_size`. ``total`` matches it exactly.
    """
    check_protocol(degree, blowup_factor, num_queries)

    layers: List[LayerCost] = []
    current_layer_degree = degree
    for round_index, bits in enumerate(folding_seq):
        _check_round(round_index, bits, current_layer_degree)
        factor = 1 << bits
        layers.append(
            LayerCost(
                round_index=round_index,
                layer_degree=current_layer_degree,
                folding_bits=bits,
                merkle_path_elements=num_queries * ilog2(current_layer_degree) * ELEMENTS_PER_HASH_OUTPUT,
                leaf_elements=num_queries * factor * FIELD_ELEMENTS_PER_LEAF,
            )
        )
        current_layer_degree //= factor

    remainder_degree = current_layer_degree // blowup_factor
    return ProofSizeBreakdown(
        layers=layers,
        remainder_degree=remainder_degree,
        remainder_elements=remainder_degree * FIELD_ELEMENTS_PER_LEAF,
    )
