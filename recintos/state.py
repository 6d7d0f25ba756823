"""Enclosure entities and the registry holding them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from . import rules
from .exceptions import ConfigurationError, UnknownEnclosureError


@dataclass(frozen=True)
class Resident:
    """A group of animals of one species already living in an enclosure."""

    species: str
    count: int
    diet: str

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError("Resident count must be positive")
        if self.diet not in rules.DIETS:
            raise ValueError(f"Unknown diet: {self.diet}")


@dataclass
class Enclosure:
    """Mutable housing unit.

    ``occupied_space`` starts within ``total_space`` but legacy evaluation can
    push it past the limit, so the bound is only checked at construction.
    """

    number: int
    habitats: frozenset[str]
    total_space: int
    occupied_space: int = 0
    residents: List[Resident] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.habitats:
            raise ValueError(f"Enclosure {self.number} must provide at least one habitat")
        unknown = self.habitats - rules.HABITATS
        if unknown:
            raise ValueError(f"Unknown habitats for enclosure {self.number}: {sorted(unknown)}")
        if self.total_space <= 0:
            raise ValueError(f"Enclosure {self.number} must have a positive capacity")
        if not (0 <= self.occupied_space <= self.total_space):
            raise ValueError(f"Enclosure {self.number} occupied space out of range")

    @property
    def free_space(self) -> int:
        return self.total_space - self.occupied_space

    def has_other_species(self, species: str) -> bool:
        return any(resident.species != species for resident in self.residents)

    def add_residents(self, species: str, count: int, diet: str) -> None:
        """Record ``count`` more animals, merging into an existing group."""

        for index, resident in enumerate(self.residents):
            if resident.species == species:
                self.residents[index] = Resident(species, resident.count + count, resident.diet)
                return
        self.residents.append(Resident(species, count, diet))


class EnclosureRegistry:
    """Ordered collection of enclosures, exposed as mutable references."""

    def __init__(self, enclosures: Iterable[Enclosure]) -> None:
        ordered = sorted(enclosures, key=lambda enclosure: enclosure.number)
        numbers = [enclosure.number for enclosure in ordered]
        if len(set(numbers)) != len(numbers):
            raise ConfigurationError("Enclosure numbers must be unique")
        self._enclosures = ordered

    def all(self) -> List[Enclosure]:
        """Return the enclosures by ascending number."""

        return list(self._enclosures)

    def get(self, number: int) -> Enclosure:
        for enclosure in self._enclosures:
            if enclosure.number == number:
                return enclosure
        raise UnknownEnclosureError(number)

    def __iter__(self) -> Iterator[Enclosure]:
        return iter(self._enclosures)

    def __len__(self) -> int:
        return len(self._enclosures)


def default_registry() -> EnclosureRegistry:
    """Build a fresh registry with the zoo's initial enclosures."""

    savana = frozenset({rules.HABITAT_SAVANA})
    return EnclosureRegistry(
        [
            Enclosure(
                1,
                savana,
                total_space=10,
                occupied_space=3,
                residents=[Resident("MACACO", 3, rules.DIET_HERBIVORO)],
            ),
            Enclosure(2, frozenset({rules.HABITAT_FLORESTA}), total_space=5),
            Enclosure(
                3,
                frozenset({rules.HABITAT_SAVANA, rules.HABITAT_RIO}),
                total_space=7,
                occupied_space=2,
                residents=[Resident("GAZELA", 1, rules.DIET_HERBIVORO)],
            ),
            Enclosure(4, frozenset({rules.HABITAT_RIO}), total_space=8),
            Enclosure(
                5,
                savana,
                total_space=9,
                occupied_space=3,
                residents=[Resident("LEAO", 1, rules.DIET_CARNIVORO)],
            ),
        ]
    )


__all__ = [
    "Enclosure",
    "EnclosureRegistry",
    "Resident",
    "default_registry",
]
