"""Application composition root.

Each inbound call gets its own object graph: a fresh PokeAPI client (and with it
a fresh connection pool) wired into a fresh :class:`PokemonTypeFilter`.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from logging import getLogger
from typing import TYPE_CHECKING

from poketype.adapters.pokeapi import PokeApiClient
from poketype.config.pokeapi import PokeApiConfig, get_pokeapi_config
from poketype.domain.aggregation import PokemonTypeFilter
from poketype.domain.ports import PokemonFetcher

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from poketype.domain.normalization import LookupRequest

FetcherFactory = Callable[[], PokemonFetcher]

log = getLogger(__name__)


@asynccontextmanager
async def _open_fetcher(
    fetcher_factory: FetcherFactory | None,
    config: PokeApiConfig | None,
) -> AsyncIterator[PokemonFetcher]:
    if fetcher_factory is not None:
        fetcher = fetcher_factory()
        if isinstance(fetcher, AbstractAsyncContextManager):
            async with fetcher:
                yield fetcher
        else:
            yield fetcher
        return
    async with PokeApiClient(config=config or get_pokeapi_config()) as client:
        yield client


async def find_pokemon_by_type(
    request: LookupRequest,
    *,
    fetcher_factory: FetcherFactory | None = None,
    config: PokeApiConfig | None = None,
) -> list[str]:
    """Resolve a validated request into the names of matching Pokémon."""

    log.info("Starting lookup: ids=%s, type=%s", list(request.ids), request.type)
    async with _open_fetcher(fetcher_factory, config) as fetcher:
        names = await PokemonTypeFilter(fetcher=fetcher).resolve(request)
    log.info("Finished lookup: matched=%s of %s", len(names), len(request.ids))
    return names
