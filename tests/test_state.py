import pytest

from recintos import rules, state
from recintos.exceptions import ConfigurationError, UnknownEnclosureError

from conftest import make_enclosure, make_registry


def test_default_registry_setup(registry):
    enclosures = registry.all()

    assert [e.number for e in enclosures] == [1, 2, 3, 4, 5]
    assert [e.total_space for e in enclosures] == [10, 5, 7, 8, 9]
    assert [e.occupied_space for e in enclosures] == [3, 0, 2, 0, 3]
    assert enclosures[0].residents == [state.Resident("MACACO", 3, rules.DIET_HERBIVORO)]
    assert enclosures[2].habitats == frozenset({"SAVANA", "RIO"})
    assert enclosures[4].residents == [state.Resident("LEAO", 1, rules.DIET_CARNIVORO)]


def test_default_registry_is_fresh_each_call():
    first = state.default_registry()
    second = state.default_registry()

    first.get(1).occupied_space = 9

    assert second.get(1).occupied_space == 3


def test_registry_orders_by_number():
    registry = make_registry(
        make_enclosure(7, ["RIO"], 8),
        make_enclosure(2, ["SAVANA"], 5),
    )

    assert [e.number for e in registry.all()] == [2, 7]
    assert [e.number for e in registry] == [2, 7]
    assert len(registry) == 2


def test_registry_exposes_mutable_references(registry):
    registry.all()[1].occupied_space = 4

    assert registry.get(2).occupied_space == 4
    assert registry.get(2).free_space == 1


def test_registry_rejects_duplicate_numbers():
    with pytest.raises(ConfigurationError):
        make_registry(make_enclosure(1, ["RIO"], 8), make_enclosure(1, ["SAVANA"], 5))


def test_unknown_enclosure_lookup(registry):
    with pytest.raises(UnknownEnclosureError) as exc_info:
        registry.get(42)
    assert exc_info.value.number == 42


def test_has_other_species():
    enclosure = make_enclosure(1, ["SAVANA"], 10, 5, [("MACACO", 3), ("GAZELA", 1)])

    assert enclosure.has_other_species("MACACO")
    assert enclosure.has_other_species("LEAO")
    assert not make_enclosure(2, ["SAVANA"], 10, 3, [("MACACO", 3)]).has_other_species("MACACO")
    assert not make_enclosure(3, ["RIO"], 8).has_other_species("CROCODILO")


def test_add_residents_merges_same_species():
    enclosure = make_enclosure(1, ["SAVANA"], 10, 3, [("MACACO", 3)])

    enclosure.add_residents("MACACO", 2, rules.DIET_HERBIVORO)
    enclosure.add_residents("GAZELA", 1, rules.DIET_HERBIVORO)

    assert enclosure.residents == [
        state.Resident("MACACO", 5, rules.DIET_HERBIVORO),
        state.Resident("GAZELA", 1, rules.DIET_HERBIVORO),
    ]


class TestEnclosureValidation:
    def test_requires_habitat(self):
        with pytest.raises(ValueError, match="at least one habitat"):
            make_enclosure(1, [], 10)

    def test_rejects_unknown_habitat(self):
        with pytest.raises(ValueError, match="Unknown habitats"):
            make_enclosure(1, ["DESERTO"], 10)

    def test_requires_positive_capacity(self):
        with pytest.raises(ValueError, match="positive capacity"):
            make_enclosure(1, ["RIO"], 0)

    def test_initial_occupancy_within_capacity(self):
        with pytest.raises(ValueError, match="occupied space"):
            make_enclosure(1, ["RIO"], 5, occupied=6)

    def test_resident_count_positive(self):
        with pytest.raises(ValueError, match="count"):
            state.Resident("LEAO", 0, rules.DIET_CARNIVORO)
