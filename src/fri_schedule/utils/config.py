"""
Global / experimental configuration flags.
"""

from dataclasses import dataclass


@dataclass
class FSConfig:
    # folding factor per round is capped at 2**max_folding_bits during search
    max_folding_bits: int = 4
    bytes_per_element: int = 8


config = FSConfig()
