"""
Proof-size analysis for FRI folding schedules.

Key responsibilities:
- Estimate proof size for a given schedule (the cost model).
- Compare the optimal schedule against fixed-factor baselines.
- Sweep the comparison across polynomial degrees.
"""

from .cost_model import (
    ELEMENTS_PER_HASH_OUTPUT,
    FIELD_ELEMENTS_PER_LEAF,
    LayerCost,
    ProofSizeBreakdown,
    estimate_proof_size,
    layer_degrees,
    proof_size_breakdown,
)
from .report import ScheduleEstimate, StrategyComparison, compare_strategies, elements_to_bytes, format_comparison
from .sweep import SweepResult, sweep_degrees

__all__ = [
    "ELEMENTS_PER_HASH_OUTPUT",
    "FIELD_ELEMENTS_PER_LEAF",
    "LayerCost",
    "ProofSizeBreakdown",
    "estimate_proof_size",
    "layer_degrees",
    "proof_size_breakdown",
    "ScheduleEstimate",
    "StrategyComparison",
    "compare_strategies",
    "elements_to_bytes",
    "format_comparison",
    "SweepResult",
    "sweep_degrees",
]
