"""
Optimal vs fixed-factor proof sizes across a range of polynomial degrees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from fri_schedule.schedule.optimal import optimal_folding_strategy
from fri_schedule.schedule.simple import AtMost, RemainderPolicy, simple_schedule


@dataclass(frozen=True)
class SweepResult:
    log_degrees: np.ndarray
    optimal_sizes: np.ndarray
    baseline_sizes: np.ndarray

    @property
    def savings(self) -> np.ndarray:
        """Per-degree fraction of the baseline size saved by the optimal schedule."""
        baseline = self.baseline_sizes.astype(np.float64)
        ratio = np.divide(
            self.optimal_sizes,
            baseline,
            out=np.ones_like(baseline),
            where=baseline > 0,
        )
        return 1.0 - ratio

    def best_log_degree(self) -> int:
        """Degree (as log2) where the optimal schedule saves the most."""
        return int(self.log_degrees[int(np.argmax(self.savings))])


def sweep_degrees(
    log_degrees: Iterable[int],
    blowup_factor: int,
    num_queries: int,
    *,
    folding_factor: int = 2,
    remainder: RemainderPolicy | int | None = None,
) -> SweepResult:
    policy = AtMost(1) if remainder is None else remainder
    logs = np.asarray(list(log_degrees), dtype=np.int64)

    optimal = np.zeros(logs.shape, dtype=np.int64)
    baseline = np.zeros(logs.shape, dtype=np.int64)
    for idx, log_degree in enumerate(logs.tolist()):
        degree = 1 << log_degree
        optimal[idx], _ = optimal_folding_strategy(degree, blowup_factor, num_queries)
        baseline[idx], _ = simple_schedule(degree, blowup_factor, num_queries, policy, folding_factor)

    return SweepResult(log_degrees=logs, optimal_sizes=optimal, baseline_sizes=baseline)
