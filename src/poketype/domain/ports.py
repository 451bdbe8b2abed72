"""Ports for retrieving Pokémon from an external provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from poketype.domain.model import PokemonEntity


@runtime_checkable
class PokemonFetcher(Protocol):
    """Async port resolving one Pokémon id.

    Implementations raise :class:`~poketype.domain.errors.PokemonNotFoundError`
    or :class:`~poketype.domain.errors.UpstreamError` on failure.
    """

    async def fetch_by_id(self, pokemon_id: int) -> PokemonEntity: ...


__all__ = ["PokemonFetcher"]
