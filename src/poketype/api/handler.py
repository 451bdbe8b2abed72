"""HTTP boundary for the Pokémon type lookup.

Framework-agnostic: callers pass the request's query parameters as a mapping and
get back an :class:`ApiResponse` to translate into their framework's response
type. Errors never escape; every failure becomes a ``{"message": ...}`` body
with a status derived from the error kind.

Routes served by an adapter around this module:
- GET /pokemon?id=1,2,3&type=fire -> 200 {"pokemons": ["charmander", ...]}
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any

from poketype.app import find_pokemon_by_type
from poketype.domain.errors import PokemonLookupError
from poketype.domain.normalization import normalize_request

if TYPE_CHECKING:
    from poketype.app import FetcherFactory
    from poketype.config.pokeapi import PokeApiConfig

log = getLogger(__name__)

QueryParams = Mapping[str, str | Sequence[str] | None]

_JSON_HEADERS: Mapping[str, str] = {"content-type": "application/json"}


@dataclass(frozen=True, slots=True)
class ApiResponse:
    status: int
    body: dict[str, Any]
    headers: Mapping[str, str] = field(default_factory=lambda: dict(_JSON_HEADERS))

    def json(self) -> str:
        return json.dumps(self.body, separators=(",", ":"))


def first_query_value(query: QueryParams, name: str) -> str | None:
    """Return the first value of a query parameter given once or repeated."""

    value = query.get(name)
    if value is None or isinstance(value, str):
        return value
    return value[0] if value else None


def error_response(error: BaseException, context: str = "Error processing request") -> ApiResponse:
    if isinstance(error, PokemonLookupError):
        status, message = error.status_hint, error.message
    else:
        status, message = 500, str(error) or "Internal server error"

    log.error("%s: %s", context, message)
    return ApiResponse(status=status, body={"message": message})


async def handle_lookup_async(
    query: QueryParams,
    *,
    fetcher_factory: FetcherFactory | None = None,
    config: PokeApiConfig | None = None,
) -> ApiResponse:
    log.info("Pokemon lookup invoked")
    try:
        request = normalize_request(
            first_query_value(query, "id"), first_query_value(query, "type")
        )
        names = await find_pokemon_by_type(
            request, fetcher_factory=fetcher_factory, config=config
        )
    except Exception as exc:  # noqa: BLE001
        return error_response(exc)
    return ApiResponse(status=200, body={"pokemons": names})


def handle_lookup(
    query: QueryParams,
    *,
    fetcher_factory: FetcherFactory | None = None,
    config: PokeApiConfig | None = None,
) -> ApiResponse:
    """Synchronous entry point for callers without a running event loop."""

    return asyncio.run(
        handle_lookup_async(query, fetcher_factory=fetcher_factory, config=config)
    )
