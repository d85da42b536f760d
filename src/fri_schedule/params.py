from __future__ import annotations

from dataclasses import dataclass


class InvalidParameter(ValueError):
    """Raised when protocol parameters or a schedule violate a precondition."""


def is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


def ilog2(value: int) -> int:
    """Floor of log2 for a positive integer."""
    if value <= 0:
        raise InvalidParameter(f"ilog2 is undefined for {value}.")
    return value.bit_length() - 1


def check_power_of_two(name: str, value: int) -> None:
    if not is_power_of_two(value):
        raise InvalidParameter(f"`{name}` must be a power of two, got {value}.")


def check_protocol(degree: int, blowup_factor: int, num_queries: int) -> None:
    check_power_of_two("degree", degree)
    check_power_of_two("blowup_factor", blowup_factor)
    if num_queries < 0:
        raise InvalidParameter(f"`num_queries` must be non-negative, got {num_queries}.")


@dataclass(frozen=True)
class FriParameters:
    """
    Protocol parameters shared by the cost model and the schedulers.

    Attributes:
        degree: degree bound of the committed polynomial (power of two).
        blowup_factor: inverse code rate (power of two).
        num_queries: number of query positions opened in the proof.
    """

    degree: int
    blowup_factor: int
    num_queries: int

    def __post_init__(self) -> None:
        check_protocol(self.degree, self.blowup_factor, self.num_queries)

    @property
    def working_degree(self) -> int:
        return self.degree // self.blowup_factor

    def as_args(self) -> tuple[int, int, int]:
        return (self.degree, self.blowup_factor, self.num_queries)
