"""Validated reference data for the species catalog and the enclosure registry."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from . import rules
from .catalog import SpeciesCatalog
from .exceptions import ConfigurationError
from .state import Enclosure, EnclosureRegistry, Resident, default_registry

logger = logging.getLogger(__name__)


def _check_habitats(habitats: list[str]) -> list[str]:
    unknown = sorted(set(habitats) - rules.HABITATS)
    if unknown:
        raise ValueError(f"unknown habitats: {unknown}")
    return habitats


def _check_diet(diet: str) -> str:
    if diet not in rules.DIETS:
        raise ValueError(f"unknown diet: {diet}")
    return diet


class SpeciesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    name: str = Field(min_length=1)
    size: int = Field(gt=0)
    habitats: list[str] = Field(min_length=1)
    diet: str

    habitats_known = field_validator("habitats")(_check_habitats)
    diet_known = field_validator("diet")(_check_diet)


class ResidentConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    species: str
    count: int = Field(gt=0)
    diet: Optional[str] = None

    @field_validator("diet")
    @classmethod
    def diet_known(cls, diet: Optional[str]) -> Optional[str]:
        return diet if diet is None else _check_diet(diet)


class EnclosureConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    number: int = Field(gt=0)
    habitats: list[str] = Field(min_length=1)
    total_space: int = Field(gt=0)
    occupied_space: int = Field(default=0, ge=0)
    residents: list[ResidentConfig] = Field(default_factory=list)

    habitats_known = field_validator("habitats")(_check_habitats)

    @model_validator(mode="after")
    def occupied_within_capacity(self) -> EnclosureConfig:
        if self.occupied_space > self.total_space:
            raise ValueError(
                f"enclosure {self.number} occupies {self.occupied_space} of {self.total_space}"
            )
        return self


def _default_species() -> list[SpeciesConfig]:
    return [
        SpeciesConfig(
            name=species.name,
            size=species.size,
            habitats=sorted(species.habitats),
            diet=species.diet,
        )
        for species in rules.SPECIES.values()
    ]


def _default_enclosures() -> list[EnclosureConfig]:
    return [
        EnclosureConfig(
            number=enclosure.number,
            habitats=sorted(enclosure.habitats),
            total_space=enclosure.total_space,
            occupied_space=enclosure.occupied_space,
            residents=[
                ResidentConfig(species=r.species, count=r.count, diet=r.diet)
                for r in enclosure.residents
            ],
        )
        for enclosure in default_registry()
    ]


class ZooConfig(BaseModel):
    """Complete zoo setup handed to the allocator at construction time."""

    model_config = ConfigDict(extra="forbid", frozen=True)
    species: list[SpeciesConfig] = Field(default_factory=_default_species, min_length=1)
    enclosures: list[EnclosureConfig] = Field(default_factory=_default_enclosures, min_length=1)
    legacy_mutation: bool = False

    @model_validator(mode="after")
    def references_consistent(self) -> ZooConfig:
        diets: dict[str, str] = {}
        for species in self.species:
            if species.name in diets:
                raise ValueError(f"duplicate species: {species.name}")
            diets[species.name] = species.diet

        numbers: set[int] = set()
        for enclosure in self.enclosures:
            if enclosure.number in numbers:
                raise ValueError(f"duplicate enclosure number: {enclosure.number}")
            numbers.add(enclosure.number)
            for resident in enclosure.residents:
                if resident.species not in diets:
                    raise ValueError(
                        f"enclosure {enclosure.number} houses unknown species {resident.species}"
                    )
                if resident.diet is not None and resident.diet != diets[resident.species]:
                    raise ValueError(
                        f"enclosure {enclosure.number}: {resident.species} diet is "
                        f"{diets[resident.species]}, not {resident.diet}"
                    )
        return self


def default_config() -> ZooConfig:
    return ZooConfig()


def load_config(path: str | Path) -> ZooConfig:
    """Load and validate a zoo setup from a YAML file.

    Keys left out of the file fall back to the built-in reference data.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file is not valid YAML or fails validation.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    try:
        config = ZooConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid zoo config in {config_path}: {exc}") from exc

    logger.info(
        "Loaded %d species and %d enclosures from %s",
        len(config.species),
        len(config.enclosures),
        config_path,
    )
    return config


def build_catalog(config: ZooConfig) -> SpeciesCatalog:
    return SpeciesCatalog(
        rules.Species(
            name=entry.name,
            size=entry.size,
            habitats=frozenset(entry.habitats),
            diet=entry.diet,
        )
        for entry in config.species
    )


def build_registry(config: ZooConfig) -> EnclosureRegistry:
    """Create a fresh registry; each call returns independent enclosures."""

    diets = {entry.name: entry.diet for entry in config.species}
    return EnclosureRegistry(
        Enclosure(
            number=entry.number,
            habitats=frozenset(entry.habitats),
            total_space=entry.total_space,
            occupied_space=entry.occupied_space,
            residents=[
                Resident(r.species, r.count, r.diet or diets[r.species])
                for r in entry.residents
            ],
        )
        for entry in config.enclosures
    )


__all__ = [
    "EnclosureConfig",
    "ResidentConfig",
    "SpeciesConfig",
    "ZooConfig",
    "build_catalog",
    "build_registry",
    "default_config",
    "load_config",
]
