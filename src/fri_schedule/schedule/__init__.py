"""
Folding schedule construction.

This package turns protocol parameters into:
- The size-minimising schedule (exhaustive search).
- A fixed-factor baseline schedule (threshold or exact remainder).
"""

from .optimal import optimal_folding_strategy
from .simple import AtMost, ExactTarget, RemainderPolicy, num_rounds, simple_schedule
from .stats import SearchProfiler, SearchStats
from .validate import validate_schedule, validate_schedule_for

__all__ = [
    "optimal_folding_strategy",
    "AtMost",
    "ExactTarget",
    "RemainderPolicy",
    "num_rounds",
    "simple_schedule",
    "SearchProfiler",
    "SearchStats",
    "validate_schedule",
    "validate_schedule_for",
]
