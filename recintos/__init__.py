"""Zoo enclosure allocation package."""

from . import allocation, catalog, config, engine, exceptions, formatting, rules, state, zoo
from .zoo import RecintosZoo

__all__ = [
    "RecintosZoo",
    "allocation",
    "catalog",
    "config",
    "engine",
    "exceptions",
    "formatting",
    "rules",
    "state",
    "zoo",
]
