"""Request and result types for allocation queries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import rules


class AllocationError(str, Enum):
    """Closed set of reasons an allocation query can fail."""

    INVALID_QUANTITY = rules.ERROR_INVALID_QUANTITY
    INVALID_SPECIES = rules.ERROR_INVALID_SPECIES
    NO_VIABLE_ENCLOSURE = rules.ERROR_NO_VIABLE_ENCLOSURE


@dataclass(frozen=True)
class AllocationRequest:
    """A species name and how many animals of it need housing."""

    species: str
    quantity: int


@dataclass(frozen=True)
class EnclosureDescriptor:
    """Viable enclosure with the free space left after the allocation."""

    number: int
    free_space: int
    total_space: int


@dataclass(frozen=True)
class AllocationResult:
    """Either an error reason or the viable enclosures in registry order."""

    error: Optional[AllocationError] = None
    enclosures: tuple[EnclosureDescriptor, ...] = ()

    def __post_init__(self) -> None:
        if self.error is not None and self.enclosures:
            raise ValueError("A failed allocation cannot list enclosures")
        if self.error is None and not self.enclosures:
            raise ValueError("A successful allocation must list enclosures")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: AllocationError) -> AllocationResult:
        return cls(error=error)


__all__ = [
    "AllocationError",
    "AllocationRequest",
    "AllocationResult",
    "EnclosureDescriptor",
]
