from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from fri_schedule.params import FriParameters, InvalidParameter
from fri_schedule.schedule.optimal import optimal_folding_strategy
from fri_schedule.schedule.simple import AtMost, RemainderPolicy, simple_schedule
from fri_schedule.utils import config


@dataclass(frozen=True)
class ScheduleEstimate:
    strategy: str
    size_elements: int
    size_bytes: int
    schedule: List[int]


@dataclass(frozen=True)
class StrategyComparison:
    params: FriParameters
    optimal: ScheduleEstimate
    baselines: List[ScheduleEstimate] = field(default_factory=list)

    @property
    def best_baseline(self) -> Optional[ScheduleEstimate]:
        if not self.baselines:
            return None
        return min(self.baselines, key=lambda est: (est.size_elements, est.strategy))

    @property
    def savings_ratio(self) -> float:
        """Fraction of the best baseline's size saved by the optimal schedule."""
        best = self.best_baseline
        if best is None or best.size_elements == 0:
            return 0.0
        return 1.0 - self.optimal.size_elements / best.size_elements


def elements_to_bytes(num_elements: int, bytes_per_element: Optional[int] = None) -> int:
    width = config.bytes_per_element if bytes_per_element is None else bytes_per_element
    if width <= 0:
        raise InvalidParameter(f"`bytes_per_element` must be positive, got {width}.")
    return num_elements * width


def compare_strategies(
    degree: int,
    blowup_factor: int,
    num_queries: int,
    *,
    remainder: RemainderPolicy | int | None = None,
    folding_factors: Iterable[int] = (1, 2, 3, 4),
    bytes_per_element: Optional[int] = None,
) -> StrategyComparison:
    """
    Score the exhaustive-search schedule against fixed-factor baselines.

    ``remainder`` defaults to ``AtMost(1)``, i.e. fold all the way down.
    """
    params = FriParameters(degree, blowup_factor, num_queries)
    policy = AtMost(1) if remainder is None else remainder

    size, schedule = optimal_folding_strategy(*params.as_args())
    optimal = ScheduleEstimate(
        strategy="optimal",
        size_elements=size,
        size_bytes=elements_to_bytes(size, bytes_per_element),
        schedule=schedule,
    )

    baselines: List[ScheduleEstimate] = []
    for bits in folding_factors:
        size, schedule = simple_schedule(*params.as_args(), policy, bits)
        baselines.append(
            ScheduleEstimate(
                strategy=f"fixed_{1 << bits}",
                size_elements=size,
                size_bytes=elements_to_bytes(size, bytes_per_element),
                schedule=schedule,
            )
        )

    return StrategyComparison(
        params=params,
        optimal=optimal,
        baselines=baselines,
    )


def format_comparison(comparison: StrategyComparison) -> str:
    rows = [comparison.optimal, *comparison.baselines]
    header = f"{'strategy':<12} {'elements':>12} {'bytes':>12}  schedule"
    lines = [
        f"degree={comparison.params.degree} blowup={comparison.params.blowup_factor} "
        f"queries={comparison.params.num_queries}",
        header,
        "-" * len(header),
    ]
    for row in rows:
        lines.append(
            f"{row.strategy:<12} {row.size_elements:>12} {row.size_bytes:>12}  {row.schedule}"
        )
    if comparison.baselines:
        lines.append(f"savings vs best baseline: {comparison.savings_ratio:.1%}")
    return "\n".join(lines)
