"""Concurrent fan-out lookup and partial-failure aggregation.

One lookup is issued per requested id, all of them concurrently. The batch waits
for every lookup to settle, then decides the fate of the whole call:

* every id failed with *not found*: :class:`AggregateNotFoundError`
* every id failed, for any other mix of reasons: :class:`AggregateUnavailableError`
* some ids failed: the failures are logged and dropped
* nothing failed: all entities are kept

The surviving entities are filtered by type and projected to names in the order
the ids were requested, independent of completion order.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal, TypeAlias

from poketype.domain.errors import (
    AggregateNotFoundError,
    AggregateUnavailableError,
    ErrorKind,
    PokemonLookupError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from poketype.domain.model import PokemonEntity
    from poketype.domain.normalization import LookupRequest
    from poketype.domain.ports import PokemonFetcher

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LookupSuccess:
    id: int
    entity: PokemonEntity
    ok: Literal[True] = True


@dataclass(frozen=True, slots=True)
class LookupFailure:
    id: int
    kind: ErrorKind
    message: str
    error: BaseException | None = None
    ok: Literal[False] = False


LookupOutcome: TypeAlias = LookupSuccess | LookupFailure


class PokemonTypeFilter:
    """Answers "which of these ids have this type?" against a fetcher."""

    def __init__(self, *, fetcher: PokemonFetcher) -> None:
        self._fetcher = fetcher

    async def resolve(self, request: LookupRequest) -> list[str]:
        outcomes = await self.resolve_outcomes(request)
        if not outcomes:
            return []

        entities = _classify(outcomes)
        return [entity.name for entity in entities if entity.has_type(request.type)]

    async def resolve_outcomes(self, request: LookupRequest) -> list[LookupOutcome]:
        """Look up every id concurrently and return one outcome per id, in id order."""

        if not request.ids:
            return []
        return list(await asyncio.gather(*(self._lookup(pokemon_id) for pokemon_id in request.ids)))

    async def _lookup(self, pokemon_id: int) -> LookupOutcome:
        try:
            entity = await self._fetcher.fetch_by_id(pokemon_id)
        except PokemonLookupError as exc:
            return LookupFailure(id=pokemon_id, kind=exc.kind, message=exc.message, error=exc)
        except Exception as exc:
            log.exception("Unexpected failure looking up Pokemon %s", pokemon_id)
            return LookupFailure(
                id=pokemon_id, kind=ErrorKind.UNEXPECTED, message=str(exc), error=exc
            )
        return LookupSuccess(id=pokemon_id, entity=entity)


def _classify(outcomes: Sequence[LookupOutcome]) -> list[PokemonEntity]:
    succeeded = [outcome.entity for outcome in outcomes if isinstance(outcome, LookupSuccess)]
    failed = [outcome for outcome in outcomes if isinstance(outcome, LookupFailure)]

    if not succeeded:
        if all(failure.kind is ErrorKind.NOT_FOUND for failure in failed):
            log.warning("All requested Pokemon resulted in a not found error.")
            raise AggregateNotFoundError
        log.error("All requested Pokemon failed to be retrieved with various errors.")
        raise AggregateUnavailableError

    if failed:
        log.warning(
            "Failed to retrieve %s out of %s requested Pokemon.", len(failed), len(outcomes)
        )
    return succeeded


__all__ = [
    "LookupFailure",
    "LookupOutcome",
    "LookupSuccess",
    "PokemonTypeFilter",
]
