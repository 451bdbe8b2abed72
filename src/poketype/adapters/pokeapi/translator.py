"""Translate PokeAPI payloads into domain entities."""

from __future__ import annotations

from collections.abc import Mapping

from poketype.domain.model import PokemonEntity

from .schema import PokemonPayload


def to_entity(payload: PokemonPayload) -> PokemonEntity:
    return PokemonEntity(
        id=payload.id,
        name=payload.name,
        types=frozenset(slot.type.name.lower() for slot in payload.types),
    )


def to_entity_from_mapping(raw: Mapping[str, object]) -> PokemonEntity:
    """Validate a raw JSON mapping before translating it."""

    return to_entity(PokemonPayload.model_validate(raw))
