"""Runtime settings read from BOX_PACKER_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_SELECTIONS = 10


@dataclass(frozen=True)
class Settings:
    catalog_path: str | None = None
    max_selections: int = DEFAULT_MAX_SELECTIONS
    log_level: str = "INFO"
    cors_origin_regex: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Read BOX_PACKER_* variables from the current environment."""
        return cls(
            catalog_path=os.getenv("BOX_PACKER_CATALOG") or None,
            max_selections=_int_env("BOX_PACKER_MAX_SELECTIONS", DEFAULT_MAX_SELECTIONS),
            log_level=os.getenv("BOX_PACKER_LOG_LEVEL", "INFO").upper(),
            cors_origin_regex=os.getenv("BOX_PACKER_CORS_ORIGIN_REGEX") or None,
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value
