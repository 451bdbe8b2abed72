"""Normalization of raw lookup query parameters.

The raw ``id`` parameter is a comma-separated list of positive whole numbers and
``type`` a single alphabetic type name. Both are validated independently; every
field reports at most one violation (its first failing rule) so a caller with
two bad parameters learns about both at once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from logging import getLogger
from typing import Final

from poketype.domain.errors import InvalidInputError, Violation

log = getLogger(__name__)

MAX_IDS: Final[int] = 10
MAX_TYPE_LENGTH: Final[int] = 20

_INTEGER_LITERAL = re.compile(r"-?[0-9]+")
_TYPE_NAME = re.compile(r"[A-Za-z]+")


@dataclass(frozen=True, slots=True)
class LookupRequest:
    """Validated lookup: unique ids in first-seen order and a lowercase type."""

    ids: tuple[int, ...]
    type: str


def collect_violations(
    raw_ids: object, raw_type: object
) -> LookupRequest | tuple[Violation, ...]:
    """Return the validated request, or every violation found."""

    ids = _parse_ids(raw_ids)
    type_name = _parse_type(raw_type)

    if isinstance(ids, Violation) or isinstance(type_name, Violation):
        return tuple(value for value in (ids, type_name) if isinstance(value, Violation))
    return LookupRequest(ids=ids, type=type_name)


def normalize_request(raw_ids: object, raw_type: object) -> LookupRequest:
    """Validate raw query parameters, raising :class:`InvalidInputError` on failure."""

    result = collect_violations(raw_ids, raw_type)
    if isinstance(result, LookupRequest):
        log.debug("Normalized lookup request: ids=%s, type=%s", result.ids, result.type)
        return result
    raise InvalidInputError(result)


def _parse_ids(raw_ids: object) -> tuple[int, ...] | Violation:
    text = "" if raw_ids is None else str(raw_ids)
    tokens = [token.strip() for token in text.strip().split(",")]
    tokens = [token for token in tokens if token]

    if not tokens:
        return Violation("id", "No valid Pokemon IDs provided")
    if len(tokens) > MAX_IDS:
        return Violation("id", f"Maximum {MAX_IDS} Pokemon IDs are allowed")

    parsed: list[int] = []
    for position, token in enumerate(tokens, start=1):
        not_whole = Violation(
            "id",
            f'Invalid Pokemon ID at position {position}: "{token}". Must be a whole number.',
        )
        if not _INTEGER_LITERAL.fullmatch(token):
            return not_whole
        try:
            value = int(token)
        except ValueError:
            # beyond the interpreter's integer string conversion limit
            return not_whole
        if value <= 0:
            return Violation(
                "id",
                f"Invalid Pokemon ID at position {position}: {value}. Must be greater than 0.",
            )
        parsed.append(value)

    return tuple(dict.fromkeys(parsed))


def _parse_type(raw_type: object) -> str | Violation:
    if raw_type is None:
        return Violation("type", 'The "type" parameter is required')
    if not isinstance(raw_type, str):
        return Violation("type", 'The "type" parameter must be a string')

    value = raw_type.strip()
    if not value:
        return Violation("type", 'The "type" parameter is required')
    if len(value) > MAX_TYPE_LENGTH:
        return Violation(
            "type", f"Pokemon type cannot be longer than {MAX_TYPE_LENGTH} characters"
        )
    if not _TYPE_NAME.fullmatch(value):
        return Violation("type", "Pokemon type must contain only letters")
    return value.lower()


__all__ = [
    "MAX_IDS",
    "MAX_TYPE_LENGTH",
    "LookupRequest",
    "collect_violations",
    "normalize_request",
]
