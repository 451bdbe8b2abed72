from __future__ import annotations

import pytest
from pydantic import ValidationError

from poketype.adapters.pokeapi import PokemonPayload, to_entity, to_entity_from_mapping
from tests.helpers.pokemon import make_payload


def test_to_entity_maps_id_name_and_lowercase_types() -> None:
    payload = PokemonPayload.model_validate(make_payload(1, "bulbasaur", ["Grass", "POISON"]))

    entity = to_entity(payload)

    assert entity.id == 1
    assert entity.name == "bulbasaur"
    assert entity.types == frozenset({"grass", "poison"})


def test_to_entity_from_mapping_ignores_unmodeled_keys() -> None:
    raw = make_payload(4, "charmander", ["fire"])
    raw["height"] = 6
    raw["abilities"] = [{"ability": {"name": "blaze"}}]

    assert to_entity_from_mapping(raw).types == frozenset({"fire"})


def test_to_entity_handles_missing_type_url() -> None:
    raw = {"id": 7, "name": "squirtle", "types": [{"type": {"name": "water"}}]}

    assert to_entity_from_mapping(raw).has_type("water")


@pytest.mark.parametrize(
    "raw",
    [
        {"name": "nobody", "types": []},
        {"id": 0, "name": "missingno", "types": []},
        {"id": 1, "name": "", "types": []},
        {"id": 1, "name": "bulbasaur", "types": [{"slot": 1}]},
    ],
)
def test_payload_rejects_malformed_shapes(raw: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        PokemonPayload.model_validate(raw)
