"""Species catalog lookups."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from . import rules
from .exceptions import ConfigurationError


class SpeciesCatalog:
    """Read-only mapping from species name to its static attributes."""

    def __init__(self, species: Iterable[rules.Species]) -> None:
        entries: dict[str, rules.Species] = {}
        for entry in species:
            if entry.name in entries:
                raise ConfigurationError(f"Duplicate species in catalog: {entry.name}")
            entries[entry.name] = entry
        self._species = entries

    def lookup(self, name: str) -> Optional[rules.Species]:
        """Return the species called ``name`` or None when it is not cataloged."""

        return self._species.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self._species)

    def __contains__(self, name: object) -> bool:
        return name in self._species

    def __iter__(self) -> Iterator[rules.Species]:
        return iter(self._species.values())

    def __len__(self) -> int:
        return len(self._species)


def default_catalog() -> SpeciesCatalog:
    """Catalog holding the built-in species table."""

    return SpeciesCatalog(rules.SPECIES.values())


__all__ = ["SpeciesCatalog", "default_catalog"]
