"""
Lightweight profiling hooks for the exhaustive search.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class SearchStats:
    candidates_scored: int = 0
    longest_schedule: int = 0
    improvements: List[int] = field(default_factory=list)


class SearchProfiler:
    def __init__(self) -> None:
        self.stats = SearchStats()

    def record_candidate(self, schedule_length: int) -> None:
        self.stats.candidates_scored += 1
        if schedule_length > self.stats.longest_schedule:
            self.stats.longest_schedule = schedule_length

    def record_improvement(self, size: int) -> None:
        self.stats.improvements.append(size)

    def snapshot(self) -> SearchStats:
        return self.stats
