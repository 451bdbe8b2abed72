from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.pokemon import make_pokemon

if TYPE_CHECKING:
    from poketype.domain.model import PokemonEntity


@pytest.fixture
def charmander() -> PokemonEntity:
    return make_pokemon(4, "charmander", ["fire"])


@pytest.fixture
def squirtle() -> PokemonEntity:
    return make_pokemon(7, "squirtle", ["water"])


@pytest.fixture
def bulbasaur() -> PokemonEntity:
    return make_pokemon(1, "bulbasaur", ["grass", "poison"])


@pytest.fixture(autouse=True)
def _clear_poketype_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("POKETYPE_BASE_URL", "POKETYPE_TIMEOUT_SECONDS", "POKETYPE_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
