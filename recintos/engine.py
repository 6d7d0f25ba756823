"""Allocation rule engine entry points."""

from __future__ import annotations

import logging
from typing import List, Optional

from . import rules
from .allocation import AllocationError, AllocationRequest, AllocationResult, EnclosureDescriptor
from .catalog import SpeciesCatalog
from .exceptions import EnclosureNotViableError, InvalidAllocationError
from .state import Enclosure, EnclosureRegistry

logger = logging.getLogger(__name__)


def evaluate(
    catalog: SpeciesCatalog,
    registry: EnclosureRegistry,
    species_name: str,
    quantity: int,
    *,
    legacy_mutation: bool = False,
) -> AllocationResult:
    """Return the enclosures able to take ``quantity`` animals of ``species_name``.

    By default the registry is left untouched. With ``legacy_mutation`` every
    enclosure's occupied space is overwritten with its projected occupancy,
    viable or not, so repeated calls accumulate and are not idempotent.
    """

    error = validate(catalog, species_name, quantity)
    if error is not None:
        logger.debug("Rejected request for %r x %r: %s", species_name, quantity, error.name)
        return AllocationResult.failure(error)

    species = catalog.lookup(species_name)
    demand = species.size * quantity

    viable: List[EnclosureDescriptor] = []
    for enclosure in registry.all():
        projected = projected_occupancy(enclosure, species.name, demand)
        if legacy_mutation:
            enclosure.occupied_space = projected
        if _is_viable(enclosure, species, quantity, demand, projected):
            viable.append(
                EnclosureDescriptor(
                    number=enclosure.number,
                    free_space=enclosure.total_space - projected,
                    total_space=enclosure.total_space,
                )
            )

    if not viable:
        logger.debug("No enclosure can take %d %s", quantity, species.name)
        return AllocationResult.failure(AllocationError.NO_VIABLE_ENCLOSURE)

    logger.debug(
        "%d %s fit in enclosures %s",
        quantity,
        species.name,
        [descriptor.number for descriptor in viable],
    )
    return AllocationResult(enclosures=tuple(viable))


def evaluate_request(
    catalog: SpeciesCatalog,
    registry: EnclosureRegistry,
    request: AllocationRequest,
    *,
    legacy_mutation: bool = False,
) -> AllocationResult:
    return evaluate(
        catalog,
        registry,
        request.species,
        request.quantity,
        legacy_mutation=legacy_mutation,
    )


def commit(
    catalog: SpeciesCatalog,
    registry: EnclosureRegistry,
    number: int,
    species_name: str,
    quantity: int,
) -> EnclosureDescriptor:
    """Move the animals into enclosure ``number`` and return its new state."""

    error = validate(catalog, species_name, quantity)
    if error is not None:
        raise InvalidAllocationError(error)

    enclosure = registry.get(number)
    species = catalog.lookup(species_name)
    demand = species.size * quantity
    projected = projected_occupancy(enclosure, species.name, demand)
    if not _is_viable(enclosure, species, quantity, demand, projected):
        raise EnclosureNotViableError(number, species.name, quantity)

    enclosure.occupied_space = projected
    enclosure.add_residents(species.name, quantity, species.diet)
    logger.info("Allocated %d %s to enclosure %d", quantity, species.name, number)
    return EnclosureDescriptor(
        number=enclosure.number,
        free_space=enclosure.free_space,
        total_space=enclosure.total_space,
    )


def validate(catalog: SpeciesCatalog, species_name: str, quantity: int) -> Optional[AllocationError]:
    """Return the first input error, quantity before species, or None."""

    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        return AllocationError.INVALID_QUANTITY
    if not isinstance(species_name, str) or catalog.lookup(species_name) is None:
        return AllocationError.INVALID_SPECIES
    return None


def habitat_compatible(species: rules.Species, enclosure: Enclosure) -> bool:
    return not species.habitats.isdisjoint(enclosure.habitats)


def projected_occupancy(enclosure: Enclosure, species_name: str, demand: int) -> int:
    """Occupied space once the new group moves in.

    Sharing with another species costs a fixed overhead, charged once no
    matter how many other species live there.
    """

    projected = enclosure.occupied_space + demand
    if enclosure.has_other_species(species_name):
        projected += rules.MIXED_SPECIES_OVERHEAD
    return projected


def space_sufficient(enclosure: Enclosure, projected: int, demand: int) -> bool:
    # Demand is already part of ``projected`` and is added a second time here.
    # Free space reported to callers uses ``projected`` alone.
    return projected + demand <= enclosure.total_space


def socially_compatible(species: rules.Species, quantity: int, enclosure: Enclosure) -> bool:
    """Check the new group against the current residents."""

    residents = enclosure.residents
    if species.name == rules.HIPOPOTAMO:
        if {rules.HABITAT_RIO, rules.HABITAT_SAVANA} <= enclosure.habitats:
            return all(resident.diet == rules.DIET_HERBIVORO for resident in residents)
        return all(resident.species == rules.HIPOPOTAMO for resident in residents)

    if species.name == rules.MACACO and quantity == 1:
        # A lone monkey is never placed in an empty enclosure.
        if not residents:
            return False
        return species.diet == rules.DIET_HERBIVORO

    return all(resident.diet == species.diet for resident in residents)


def _is_viable(
    enclosure: Enclosure,
    species: rules.Species,
    quantity: int,
    demand: int,
    projected: int,
) -> bool:
    habitat_ok = habitat_compatible(species, enclosure)
    space_ok = space_sufficient(enclosure, projected, demand)
    social_ok = socially_compatible(species, quantity, enclosure)
    logger.debug(
        "Enclosure %d for %d %s: habitat=%s space=%s social=%s",
        enclosure.number,
        quantity,
        species.name,
        habitat_ok,
        space_ok,
        social_ok,
    )
    return habitat_ok and space_ok and social_ok


__all__ = [
    "commit",
    "evaluate",
    "evaluate_request",
    "habitat_compatible",
    "projected_occupancy",
    "socially_compatible",
    "space_sufficient",
    "validate",
]
