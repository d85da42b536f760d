"""
fri-schedule

Proof-size estimation and folding-schedule search for FRI commitments.
"""

from .params import FriParameters, InvalidParameter
from .analysis.cost_model import estimate_proof_size, proof_size_breakdown
from .schedule.optimal import optimal_folding_strategy
from .schedule.simple import AtMost, ExactTarget, simple_schedule

__all__ = [
    "FriParameters",
    "InvalidParameter",
    "estimate_proof_size",
    "proof_size_breakdown",
    "optimal_folding_strategy",
    "AtMost",
    "ExactTarget",
    "simple_schedule",
]
