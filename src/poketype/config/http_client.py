"""Configuration types for outbound HTTP clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class ClientConfig:
    base_url: str | None = None
    timeout_seconds: float = 10.0
    default_headers: Mapping[str, str] | None = None
    follow_redirects: bool = True
