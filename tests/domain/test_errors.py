from __future__ import annotations

import pytest

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


def test_not_found_error_carries_id() -> None:
    error = PokemonNotFoundError(151)

    assert str(error) == "Pokemon with ID 151 not found."
    assert error.pokemon_id == 151
    assert error.kind is ErrorKind.NOT_FOUND
    assert error.status_hint == 404


@pytest.mark.parametrize(
    ("status", "message", "expected_message", "expected_hint"),
    [
        (429, "Failed to fetch pokemon with ID 1", "Failed to fetch pokemon with ID 1", 429),
        (429, "", "Rate limit exceeded. Please try again later.", 429),
        (400, "", "Bad request to Pokemon API", 400),
        (
            500,
            "Failed to fetch pokemon with ID 1",
            "Pokemon API error: Failed to fetch pokemon with ID 1",
            503,
        ),
        (
            503,
            "Network or connectivity error occurred",
            "Pokemon API error: Network or connectivity error occurred",
            503,
        ),
    ],
)
def test_upstream_error_maps_status_hint(
    status: int, message: str, expected_message: str, expected_hint: int
) -> None:
    error = UpstreamError(status, message)

    assert error.status == status
    assert error.message == expected_message
    assert error.status_hint == expected_hint
    assert error.kind is ErrorKind.UPSTREAM


def test_aggregate_errors_have_kinds_and_defaults() -> None:
    assert AggregateNotFoundError().kind is ErrorKind.AGGREGATE_NOT_FOUND
    assert AggregateNotFoundError().status_hint == 404
    assert AggregateUnavailableError().kind is ErrorKind.AGGREGATE_UNAVAILABLE
    assert AggregateUnavailableError().status_hint == 503


def test_invalid_input_error_joins_violation_messages() -> None:
    error = InvalidInputError([Violation("id", "first"), Violation("type", "second")])

    assert isinstance(error, PokemonLookupError)
    assert str(error) == "first. second"
    assert error.status_hint == 400
