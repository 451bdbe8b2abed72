"""PokeAPI configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from poketype import __version__

from .env import optional_env_var, positive_float_env_var
from .http_client import ClientConfig

DEFAULT_POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_POKEAPI_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class PokeApiConfig:
    client: ClientConfig


def get_pokeapi_config() -> PokeApiConfig:
    base_url = optional_env_var("POKETYPE_BASE_URL", DEFAULT_POKEAPI_BASE_URL).rstrip("/")
    timeout = positive_float_env_var("POKETYPE_TIMEOUT_SECONDS", DEFAULT_POKEAPI_TIMEOUT_SECONDS)
    user_agent = optional_env_var("POKETYPE_USER_AGENT", f"poketype/{__version__}")

    client = ClientConfig(
        base_url=base_url,
        timeout_seconds=timeout,
        default_headers={"User-Agent": user_agent, "Accept": "application/json"},
    )
    return PokeApiConfig(client=client)
