"""Pydantic models describing the PokeAPI payloads we consume."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PokeApiBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NamedResource(PokeApiBaseModel):
    name: str
    url: str | None = None


class TypeSlot(PokeApiBaseModel):
    slot: int | None = None
    type: NamedResource


class PokemonPayload(PokeApiBaseModel):
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    types: list[TypeSlot] = Field(default_factory=list)


class ErrorPayload(PokeApiBaseModel):
    message: str | None = None
