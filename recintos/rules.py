"""Core rule constants and species metadata for the zoo allocator."""

from __future__ import annotations

from dataclasses import dataclass

# Habitat tags an enclosure can provide.
HABITAT_SAVANA = "SAVANA"
HABITAT_FLORESTA = "FLORESTA"
HABITAT_RIO = "RIO"

HABITATS: frozenset[str] = frozenset({HABITAT_SAVANA, HABITAT_FLORESTA, HABITAT_RIO})

# Diet classes governing which species may share an enclosure.
DIET_CARNIVORO = "CARNIVORO"
DIET_HERBIVORO = "HERBIVORO"
DIET_ONIVORO = "ONIVORO"

DIETS: frozenset[str] = frozenset({DIET_CARNIVORO, DIET_HERBIVORO, DIET_ONIVORO})

# Species with dedicated social rules.
HIPOPOTAMO = "HIPOPOTAMO"
MACACO = "MACACO"

# Extra space charged once when an enclosure already hosts another species.
MIXED_SPECIES_OVERHEAD = 1


@dataclass(frozen=True)
class Species:
    """Defines static properties for an animal species."""

    name: str
    size: int
    habitats: frozenset[str]
    diet: str

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Species {self.name} must have a positive size")
        if not self.habitats:
            raise ValueError(f"Species {self.name} must accept at least one habitat")
        unknown = self.habitats - HABITATS
        if unknown:
            raise ValueError(f"Unknown habitats for {self.name}: {sorted(unknown)}")
        if self.diet not in DIETS:
            raise ValueError(f"Unknown diet for {self.name}: {self.diet}")


SPECIES: dict[str, Species] = {
    "LEAO": Species("LEAO", size=3, habitats=frozenset({HABITAT_SAVANA}), diet=DIET_CARNIVORO),
    "LEOPARDO": Species("LEOPARDO", size=2, habitats=frozenset({HABITAT_SAVANA}), diet=DIET_CARNIVORO),
    "CROCODILO": Species("CROCODILO", size=3, habitats=frozenset({HABITAT_RIO}), diet=DIET_CARNIVORO),
    "MACACO": Species(
        "MACACO",
        size=1,
        habitats=frozenset({HABITAT_SAVANA, HABITAT_FLORESTA}),
        diet=DIET_HERBIVORO,
    ),
    "GAZELA": Species("GAZELA", size=2, habitats=frozenset({HABITAT_SAVANA}), diet=DIET_HERBIVORO),
    "HIPOPOTAMO": Species(
        "HIPOPOTAMO",
        size=4,
        habitats=frozenset({HABITAT_SAVANA, HABITAT_RIO}),
        diet=DIET_ONIVORO,
    ),
}

SPECIES_NAMES: tuple[str, ...] = tuple(SPECIES.keys())

# Error reasons surfaced to callers as result values.
ERROR_INVALID_QUANTITY = "Quantidade inválida"
ERROR_INVALID_SPECIES = "Animal inválido"
ERROR_NO_VIABLE_ENCLOSURE = "Não há recinto viável"

if HIPOPOTAMO not in SPECIES or MACACO not in SPECIES:
    raise ValueError("Default species table must define the specially ruled species")

__all__ = [
    "DIETS",
    "DIET_CARNIVORO",
    "DIET_HERBIVORO",
    "DIET_ONIVORO",
    "ERROR_INVALID_QUANTITY",
    "ERROR_INVALID_SPECIES",
    "ERROR_NO_VIABLE_ENCLOSURE",
    "HABITATS",
    "HABITAT_FLORESTA",
    "HABITAT_RIO",
    "HABITAT_SAVANA",
    "HIPOPOTAMO",
    "MACACO",
    "MIXED_SPECIES_OVERHEAD",
    "SPECIES",
    "SPECIES_NAMES",
    "Species",
]
