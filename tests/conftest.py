"""Shared fixtures for allocator tests.

Every fixture builds fresh objects so tests never observe occupancy changes
made by another test.
"""

import pytest

from recintos import catalog, rules, state


def make_enclosure(number, habitats, total, occupied=0, residents=()):
    """Helper to build an enclosure from plain values.

    ``residents`` holds (species, count) pairs; diets come from the default
    species table.
    """
    return state.Enclosure(
        number=number,
        habitats=frozenset(habitats),
        total_space=total,
        occupied_space=occupied,
        residents=[
            state.Resident(species, count, rules.SPECIES[species].diet)
            for species, count in residents
        ],
    )


def make_registry(*enclosures):
    return state.EnclosureRegistry(enclosures)


@pytest.fixture
def species_catalog():
    return catalog.default_catalog()


@pytest.fixture
def registry():
    return state.default_registry()
