"""Public interface for the PokeAPI adapter."""

from __future__ import annotations

from .client import PokeApiClient
from .schema import ErrorPayload, NamedResource, PokemonPayload, TypeSlot
from .translator import to_entity, to_entity_from_mapping

__all__ = [
    "ErrorPayload",
    "NamedResource",
    "PokeApiClient",
    "PokemonPayload",
    "TypeSlot",
    "to_entity",
    "to_entity_from_mapping",
]
