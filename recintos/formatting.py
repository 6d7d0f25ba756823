"""Shared formatting utilities for allocation results."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .allocation import AllocationResult, EnclosureDescriptor


def enclosure_label(descriptor: EnclosureDescriptor) -> str:
    """
    Return a human-readable label for a viable enclosure.

    Args:
        descriptor: The enclosure to format

    Returns:
        A string like "Recinto 1 (espaço livre: 5 total: 10)"
    """
    return (
        f"Recinto {descriptor.number} "
        f"(espaço livre: {descriptor.free_space} total: {descriptor.total_space})"
    )


def enclosure_labels(result: AllocationResult) -> list[str]:
    """
    Format every viable enclosure of a result, keeping registry order.

    Args:
        result: A successful or failed allocation result

    Returns:
        One label per enclosure; empty for failed results
    """
    return [enclosure_label(descriptor) for descriptor in result.enclosures]


__all__ = ["enclosure_label", "enclosure_labels"]
