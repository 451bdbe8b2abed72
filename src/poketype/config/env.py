"""Environment variable loaders for configuration."""

from __future__ import annotations

import math
import os

from .errors import ConfigurationError


def optional_env_var(name: str, default: str) -> str:
    """Return the stripped variable, or ``default`` when it is unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def positive_float_env_var(name: str, default: float) -> float:
    """Return the variable parsed as a positive float, or ``default`` when unset/blank."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive finite number, got {raw!r}")
    return value
