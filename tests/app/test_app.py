from __future__ import annotations

import asyncio
from types import TracebackType
from typing import TYPE_CHECKING

import pytest

from poketype import app as app_module
from poketype.config.http_client import ClientConfig
from poketype.config.pokeapi import DEFAULT_POKEAPI_BASE_URL, PokeApiConfig
from poketype.domain.normalization import LookupRequest
from tests.helpers.pokemon import FakePokemonFetcher, make_pokemon

if TYPE_CHECKING:
    from poketype.domain.model import PokemonEntity


class RecordingClient:
    instances: list[RecordingClient] = []

    def __init__(self, *, config: PokeApiConfig) -> None:
        self.config = config
        self.entered = False
        self.exited = False
        RecordingClient.instances.append(self)

    async def __aenter__(self) -> RecordingClient:
        self.entered = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.exited = True

    async def fetch_by_id(self, pokemon_id: int) -> PokemonEntity:
        return make_pokemon(pokemon_id, f"mon{pokemon_id}", ["fire"])


@pytest.fixture
def recording_client(monkeypatch: pytest.MonkeyPatch) -> type[RecordingClient]:
    RecordingClient.instances = []
    monkeypatch.setattr(app_module, "PokeApiClient", RecordingClient)
    return RecordingClient


def test_find_pokemon_by_type_uses_injected_fetcher() -> None:
    fetcher = FakePokemonFetcher({4: make_pokemon(4, "charmander", ["fire"])})

    names = asyncio.run(
        app_module.find_pokemon_by_type(
            LookupRequest(ids=(4,), type="fire"), fetcher_factory=lambda: fetcher
        )
    )

    assert names == ["charmander"]
    assert fetcher.calls == [4]


def test_find_pokemon_by_type_enters_context_managed_fetchers() -> None:
    client = RecordingClient(config=PokeApiConfig(client=ClientConfig()))

    names = asyncio.run(
        app_module.find_pokemon_by_type(
            LookupRequest(ids=(7,), type="fire"), fetcher_factory=lambda: client
        )
    )

    assert names == ["mon7"]
    assert client.entered
    assert client.exited


def test_find_pokemon_by_type_builds_fresh_client_per_call(
    recording_client: type[RecordingClient],
) -> None:
    request = LookupRequest(ids=(1, 2), type="fire")

    first = asyncio.run(app_module.find_pokemon_by_type(request))
    second = asyncio.run(app_module.find_pokemon_by_type(request))

    assert first == second == ["mon1", "mon2"]
    assert len(recording_client.instances) == 2
    assert all(client.entered and client.exited for client in recording_client.instances)


def test_find_pokemon_by_type_reads_config_from_environment(
    recording_client: type[RecordingClient],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("POKETYPE_TIMEOUT_SECONDS", "2.5")

    asyncio.run(app_module.find_pokemon_by_type(LookupRequest(ids=(1,), type="fire")))

    client_config = recording_client.instances[0].config.client
    assert client_config.base_url == DEFAULT_POKEAPI_BASE_URL
    assert client_config.timeout_seconds == 2.5


def test_find_pokemon_by_type_prefers_explicit_config(
    recording_client: type[RecordingClient],
) -> None:
    config = PokeApiConfig(client=ClientConfig(base_url="https://mirror.test"))

    request = LookupRequest(ids=(1,), type="fire")
    asyncio.run(app_module.find_pokemon_by_type(request, config=config))

    assert recording_client.instances[0].config is config
