"""Error taxonomy for Pokémon lookups.

Every error carries an :class:`ErrorKind`, which is the unit of meaning inside
the domain, and a ``status_hint`` that only the HTTP boundary consults.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence


class ErrorKind(StrEnum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    AGGREGATE_NOT_FOUND = "aggregate_not_found"
    AGGREGATE_UNAVAILABLE = "aggregate_unavailable"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class Violation:
    """A single failed validation rule for one query parameter."""

    field: str
    message: str


class PokemonLookupError(RuntimeError):
    """Base class for every error raised while answering a lookup."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNEXPECTED
    default_status: ClassVar[int] = 500

    def __init__(self, message: str, *, status_hint: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_hint = status_hint if status_hint is not None else self.default_status


class InvalidInputError(PokemonLookupError):
    """Raised when the caller's query parameters fail validation."""

    kind = ErrorKind.INVALID_INPUT
    default_status = 400

    def __init__(self, violations: Sequence[Violation]) -> None:
        self.violations = tuple(violations)
        super().__init__(". ".join(violation.message for violation in self.violations))


class PokemonNotFoundError(PokemonLookupError):
    """Raised when the upstream API has no Pokémon for an id."""

    kind = ErrorKind.NOT_FOUND
    default_status = 404

    def __init__(self, pokemon_id: int) -> None:
        super().__init__(f"Pokemon with ID {pokemon_id} not found.")
        self.pokemon_id = pokemon_id


_UPSTREAM_FALLBACK_MESSAGES: dict[int, str] = {
    400: "Bad request to Pokemon API",
    404: "Pokemon not found",
    429: "Rate limit exceeded. Please try again later.",
}


class UpstreamError(PokemonLookupError):
    """Raised for any upstream failure other than a plain 404.

    ``status`` is the raw upstream status (503 when no response arrived). The
    boundary hint passes 400, 404 and 429 through and collapses everything
    else to 503.
    """

    kind = ErrorKind.UPSTREAM
    default_status = 503

    def __init__(self, status: int, message: str) -> None:
        if status in _UPSTREAM_FALLBACK_MESSAGES:
            text = message or _UPSTREAM_FALLBACK_MESSAGES[status]
            hint = status
        else:
            text = f"Pokemon API error: {message}"
            hint = self.default_status
        super().__init__(text, status_hint=hint)
        self.status = status


class AggregateNotFoundError(PokemonLookupError):
    """Raised when every requested id came back as not found."""

    kind = ErrorKind.AGGREGATE_NOT_FOUND
    default_status = 404

    def __init__(self, message: str = "All requested Pokemon not found") -> None:
        super().__init__(message)


class AggregateUnavailableError(PokemonLookupError):
    """Raised when every requested id failed and at least one not with a 404."""

    kind = ErrorKind.AGGREGATE_UNAVAILABLE
    default_status = 503

    def __init__(self, message: str = "Could not retrieve any of the requested Pokemon.") -> None:
        super().__init__(message)


__all__ = [
    "AggregateNotFoundError",
    "AggregateUnavailableError",
    "ErrorKind",
    "InvalidInputError",
    "PokemonLookupError",
    "PokemonNotFoundError",
    "UpstreamError",
    "Violation",
]
