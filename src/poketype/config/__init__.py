"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, positive_float_env_var
from .errors import ConfigurationError
from .http_client import ClientConfig
from .logging import configure_logging
from .pokeapi import (
    DEFAULT_POKEAPI_BASE_URL,
    DEFAULT_POKEAPI_TIMEOUT_SECONDS,
    PokeApiConfig,
    get_pokeapi_config,
)

__all__ = [
    "DEFAULT_POKEAPI_BASE_URL",
    "DEFAULT_POKEAPI_TIMEOUT_SECONDS",
    "ClientConfig",
    "ConfigurationError",
    "PokeApiConfig",
    "configure_logging",
    "get_pokeapi_config",
    "optional_env_var",
    "positive_float_env_var",
]
