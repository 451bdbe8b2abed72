"""Public domain surface."""

from __future__ import annotations

from poketype.domain.aggregation import (
    LookupFailure,
    LookupOutcome,
    LookupSuccess,
    PokemonTypeFilter,
)
from poketype.domain.errors import (
    AggregateNotFoundError,
    AggregateUnavailableError,
    ErrorKind,
    InvalidInputError,
    PokemonLookupError,
    PokemonNotFoundError,
    UpstreamError,
    Violation,
)
from poketype.domain.model import PokemonEntity
from poketype.domain.normalization import (
    MAX_IDS,
    MAX_TYPE_LENGTH,
    LookupRequest,
    collect_violations,
    normalize_request,
)
from poketype.domain.ports import PokemonFetcher

__all__ = [
    "MAX_IDS",
    "MAX_TYPE_LENGTH",
    "AggregateNotFoundError",
    "AggregateUnavailableError",
    "ErrorKind",
    "InvalidInputError",
    "LookupFailure",
    "LookupOutcome",
    "LookupRequest",
    "LookupSuccess",
    "PokemonEntity",
    "PokemonFetcher",
    "PokemonLookupError",
    "PokemonNotFoundError",
    "PokemonTypeFilter",
    "UpstreamError",
    "Violation",
    "collect_violations",
    "normalize_request",
]
