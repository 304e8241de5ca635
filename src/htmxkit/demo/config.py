"""Demo server configuration.

Settings come from constructor arguments, CLI flags, or environment
variables (``DemoConfig.from_env()``):

    HTMXKIT_HOST       interface to bind (default 127.0.0.1)
    HTMXKIT_PORT       port to listen on (default 8080)
    HTMXKIT_LOG_LEVEL  logging level name (default INFO)

"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """Immutable settings for one demo server instance."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    title: str = "HTMX + htmxkit Demo"

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DemoConfig:
        """Read settings from ``HTMXKIT_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        port = env.get("HTMXKIT_PORT")
        try:
            port_number = int(port) if port else DEFAULT_PORT
        except ValueError:
            raise ValueError(f"HTMXKIT_PORT must be an integer, got {port!r}") from None
        return cls(
            host=env.get("HTMXKIT_HOST") or DEFAULT_HOST,
            port=port_number,
            log_level=env.get("HTMXKIT_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        )

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"


__all__ = ["DEFAULT_HOST", "DEFAULT_LOG_LEVEL", "DEFAULT_PORT", "DemoConfig"]
