"""Domain entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PokemonEntity:
    id: int
    name: str
    types: frozenset[str]

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValueError(f"Pokemon id must be positive, got {self.id}")
        if not self.name:
            raise ValueError("Pokemon name must not be empty")

    def has_type(self, type_name: str) -> bool:
        return type_name.lower() in self.types
