"""Checker configuration, overridable through environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_REGISTRY = "https://registry.npmjs.org"
DEFAULT_TIMEOUT = 30.0

_ENV_REGISTRY = "DEPVERSION_REGISTRY"
_ENV_TIMEOUT = "DEPVERSION_TIMEOUT"


@dataclass(frozen=True)
class CheckerConfig:
    """Where to look packages up and how long to wait for each lookup."""

    registry: str = DEFAULT_REGISTRY
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(self, "registry", (self.registry or DEFAULT_REGISTRY).rstrip("/"))

    @classmethod
    def from_env(
        cls,
        *,
        registry: str | None = None,
        timeout: float | None = None,
    ) -> CheckerConfig:
        """Build a config from explicit values, falling back to the environment.

        Reads from environment variables:
            DEPVERSION_REGISTRY — registry base URL (default: public npm registry)
            DEPVERSION_TIMEOUT  — per-request timeout in seconds (default: 30)
        """
        if registry is None:
            registry = os.environ.get(_ENV_REGISTRY) or DEFAULT_REGISTRY
        if timeout is None:
            raw = os.environ.get(_ENV_TIMEOUT)
            if raw:
                try:
                    timeout = float(raw)
                except ValueError:
                    raise ValueError(f"{_ENV_TIMEOUT} must be a number, got {raw!r}") from None
            else:
                timeout = DEFAULT_TIMEOUT
        return cls(registry=registry, timeout=timeout)
