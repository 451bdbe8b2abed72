"""HTTP client for the PokeAPI."""

from __future__ import annotations

import time
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from poketype.adapters.http_client import HttpClient
from poketype.config.pokeapi import DEFAULT_POKEAPI_BASE_URL
from poketype.domain.errors import PokemonNotFoundError, UpstreamError

from .schema import ErrorPayload, PokemonPayload
from .translator import to_entity

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from poketype.config.http_client import ClientConfig
    from poketype.config.pokeapi import PokeApiConfig
    from poketype.domain.model import PokemonEntity

log = getLogger(__name__)


class PokeApiClient:
    """Fetches single Pokémon by id and maps failures onto the domain errors.

    Entering the client as an async context manager opens one HTTP connection
    pool shared by every lookup until exit. Outside a context each call opens
    and closes its own.
    """

    def __init__(
        self,
        *,
        config: PokeApiConfig,
        client_factory: Callable[[ClientConfig], HttpClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or HttpClient
        self._http: HttpClient | None = None

    async def __aenter__(self) -> PokeApiClient:
        self._http = self._client_factory(self._config.client)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def fetch_by_id(self, pokemon_id: int) -> PokemonEntity:
        if self._http is not None:
            return await self._perform_request(client=self._http, pokemon_id=pokemon_id)
        async with self._client_factory(self._config.client) as client:
            return await self._perform_request(client=client, pokemon_id=pokemon_id)

    def _url_for(self, pokemon_id: int) -> str:
        base_url = self._config.client.base_url or DEFAULT_POKEAPI_BASE_URL
        return f"{base_url.rstrip('/')}/pokemon/{pokemon_id}"

    async def _perform_request(self, *, client: HttpClient, pokemon_id: int) -> PokemonEntity:
        url = self._url_for(pokemon_id)
        started = time.perf_counter()
        log.info("Fetching Pokemon from: %s", url)

        try:
            response = await client.get(url)
        except httpx.TransportError as exc:
            log.error(
                "Pokemon API request failed after %sms with network error. ID: %s, Error: %s",
                _elapsed_ms(started),
                pokemon_id,
                exc,
            )
            raise UpstreamError(503, "Network or connectivity error occurred") from exc

        duration = _elapsed_ms(started)
        if not response.is_success:
            raise _map_error_response(response, pokemon_id=pokemon_id, duration=duration)

        log.info("Pokemon API request completed in %sms for ID: %s", duration, pokemon_id)
        try:
            payload = PokemonPayload.model_validate(response.json())
        except ValueError as exc:
            log.error("Unexpected PokeAPI payload for ID %s: %s", pokemon_id, exc)
            raise UpstreamError(
                503, f"Unexpected PokeAPI response payload for ID {pokemon_id}"
            ) from exc
        return to_entity(payload)


def _map_error_response(
    response: httpx.Response, *, pokemon_id: int, duration: int
) -> PokemonNotFoundError | UpstreamError:
    status = response.status_code or 503
    upstream_message = _upstream_message(response)
    log.error(
        "Pokemon API request failed after %sms. ID: %s, Status: %s, Message: %s",
        duration,
        pokemon_id,
        status,
        upstream_message or "No message",
    )

    if status == httpx.codes.NOT_FOUND:
        return PokemonNotFoundError(pokemon_id)

    message = f"Failed to fetch pokemon with ID {pokemon_id}"
    if upstream_message:
        message = f"{message}: {upstream_message}"
    return UpstreamError(status, message)


def _upstream_message(response: httpx.Response) -> str | None:
    try:
        payload = ErrorPayload.model_validate(response.json())
    except ValueError:
        return None
    return payload.message or None


def _elapsed_ms(started: float) -> int:
    return round((time.perf_counter() - started) * 1000)

