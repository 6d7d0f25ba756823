"""High-level facade answering which enclosures can take a group of animals."""

from __future__ import annotations

from typing import Optional, Union

from . import config as zoo_config
from . import engine, formatting
from .allocation import AllocationResult, EnclosureDescriptor
from .catalog import SpeciesCatalog
from .state import EnclosureRegistry

AnalysisResponse = dict[str, Union[str, list[str]]]


class RecintosZoo:
    """Owns one zoo's catalog and registry and answers allocation queries.

    Each instance builds its own registry from the configuration, so two zoos
    never share enclosure state.
    """

    def __init__(self, config: Optional[zoo_config.ZooConfig] = None) -> None:
        self.config = config or zoo_config.default_config()
        self.catalog: SpeciesCatalog = zoo_config.build_catalog(self.config)
        self.registry: EnclosureRegistry = zoo_config.build_registry(self.config)

    @property
    def legacy_mutation(self) -> bool:
        return self.config.legacy_mutation

    def avaliar(self, animal: str, quantidade: int) -> AllocationResult:
        """Evaluate every enclosure for ``quantidade`` animals of ``animal``."""

        return engine.evaluate(
            self.catalog,
            self.registry,
            animal,
            quantidade,
            legacy_mutation=self.legacy_mutation,
        )

    def analisa_recintos(self, animal: str, quantidade: int) -> AnalysisResponse:
        """Return ``{"erro": reason}`` or ``{"recintosViaveis": [labels]}``."""

        result = self.avaliar(animal, quantidade)
        if result.error is not None:
            return {"erro": result.error.value}
        return {"recintosViaveis": formatting.enclosure_labels(result)}

    def alocar(self, numero: int, animal: str, quantidade: int) -> EnclosureDescriptor:
        """Commit the animals to enclosure ``numero``.

        Raises:
            InvalidAllocationError: If the quantity or species is invalid.
            UnknownEnclosureError: If ``numero`` is not a known enclosure.
            EnclosureNotViableError: If the enclosure cannot take the group.
        """
        return engine.commit(self.catalog, self.registry, numero, animal, quantidade)


__all__ = ["AnalysisResponse", "RecintosZoo"]
