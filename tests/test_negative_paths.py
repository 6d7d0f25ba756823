"""
Test suite for rejected requests.

Invalid quantities and unknown species come back as result values, checked
quantity first. Committing a group that cannot be housed raises.
"""

import pytest

from recintos import engine
from recintos.allocation import AllocationError, AllocationResult
from recintos.exceptions import (
    EnclosureNotViableError,
    InvalidAllocationError,
    RecintosError,
    UnknownEnclosureError,
)


class TestInvalidQuantity:
    @pytest.mark.parametrize("quantity", [0, -1, -10])
    def test_non_positive_quantity(self, species_catalog, registry, quantity):
        result = engine.evaluate(species_catalog, registry, "MACACO", quantity)

        assert result.error is AllocationError.INVALID_QUANTITY

    @pytest.mark.parametrize("species", ["LEAO", "UNICORNIO", "", "macaco"])
    def test_quantity_checked_before_species(self, species_catalog, registry, species):
        result = engine.evaluate(species_catalog, registry, species, 0)

        assert result.error is AllocationError.INVALID_QUANTITY

    @pytest.mark.parametrize("quantity", ["2", 1.5, None, True])
    def test_non_integer_quantity(self, species_catalog, registry, quantity):
        result = engine.evaluate(species_catalog, registry, "MACACO", quantity)

        assert result.error is AllocationError.INVALID_QUANTITY


class TestInvalidSpecies:
    @pytest.mark.parametrize("species", ["UNICORNIO", "leao", "", "LEAO "])
    def test_unknown_species(self, species_catalog, registry, species):
        result = engine.evaluate(species_catalog, registry, species, 1)

        assert result.error is AllocationError.INVALID_SPECIES

    def test_non_string_species(self, species_catalog, registry):
        result = engine.evaluate(species_catalog, registry, None, 1)

        assert result.error is AllocationError.INVALID_SPECIES


def test_error_messages(species_catalog):
    assert AllocationError.INVALID_QUANTITY.value == "Quantidade inválida"
    assert AllocationError.INVALID_SPECIES.value == "Animal inválido"
    assert AllocationError.NO_VIABLE_ENCLOSURE.value == "Não há recinto viável"


def test_result_cannot_mix_error_and_enclosures():
    from recintos.allocation import EnclosureDescriptor

    with pytest.raises(ValueError):
        AllocationResult(
            error=AllocationError.NO_VIABLE_ENCLOSURE,
            enclosures=(EnclosureDescriptor(1, 5, 10),),
        )
    with pytest.raises(ValueError):
        AllocationResult()


class TestCommitErrors:
    def test_invalid_quantity(self, species_catalog, registry):
        with pytest.raises(InvalidAllocationError) as exc_info:
            engine.commit(species_catalog, registry, 1, "MACACO", 0)

        assert exc_info.value.error is AllocationError.INVALID_QUANTITY

    def test_invalid_species(self, species_catalog, registry):
        with pytest.raises(InvalidAllocationError) as exc_info:
            engine.commit(species_catalog, registry, 1, "UNICORNIO", 1)

        assert exc_info.value.error is AllocationError.INVALID_SPECIES
        assert str(exc_info.value) == "Animal inválido"

    def test_unknown_enclosure(self, species_catalog, registry):
        with pytest.raises(UnknownEnclosureError):
            engine.commit(species_catalog, registry, 99, "MACACO", 2)

    def test_non_viable_enclosure_left_untouched(self, species_catalog, registry):
        with pytest.raises(EnclosureNotViableError) as exc_info:
            engine.commit(species_catalog, registry, 1, "LEAO", 1)

        assert exc_info.value.number == 1
        enclosure = registry.get(1)
        assert enclosure.occupied_space == 3
        assert [r.species for r in enclosure.residents] == ["MACACO"]

    def test_errors_share_base_class(self):
        assert issubclass(EnclosureNotViableError, RecintosError)
        assert issubclass(InvalidAllocationError, RecintosError)
        assert issubclass(UnknownEnclosureError, RecintosError)
