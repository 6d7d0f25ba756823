"""Custom exception classes for the zoo allocator.

Allocation outcomes such as an invalid quantity are returned as result values;
these exceptions cover misuse of the API and broken reference data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .allocation import AllocationError


class RecintosError(Exception):
    """Base exception for all zoo allocator errors."""


class ConfigurationError(RecintosError):
    """Raised when reference data for species or enclosures is invalid."""


class UnknownEnclosureError(RecintosError):
    """Raised when an enclosure number is not in the registry."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Unknown enclosure: {number}")


class InvalidAllocationError(RecintosError):
    """Raised when a commit is attempted with an invalid request."""

    def __init__(self, error: AllocationError) -> None:
        self.error = error
        super().__init__(error.value)


class EnclosureNotViableError(RecintosError):
    """Raised when committing animals to an enclosure that cannot take them."""

    def __init__(self, number: int, species: str, quantity: int) -> None:
        self.number = number
        self.species = species
        self.quantity = quantity
        super().__init__(f"Enclosure {number} cannot take {quantity} {species}")


__all__ = [
    "ConfigurationError",
    "EnclosureNotViableError",
    "InvalidAllocationError",
    "RecintosError",
    "UnknownEnclosureError",
]
