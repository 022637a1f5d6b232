"""Environment-driven settings for the editor core and its telemetry."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "AMANITA_"

# A tab keystroke inserts this many literal tabs; saving collapses each run back to one.
TAB_RUN = 4

_TRUTHY = {"1", "true", "yes", "on"}


def _env(
    name: str,
    default: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    source = os.environ if environ is None else environ
    return source.get(f"{ENV_PREFIX}{name}", default)


def _env_flag(
    name: str, default: bool, *, environ: Optional[Mapping[str, str]] = None
) -> bool:
    raw = _env(name, environ=environ)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(
    name: str, default: int, *, environ: Optional[Mapping[str, str]] = None
) -> int:
    raw = _env(name, environ=environ)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Knobs consumed by :mod:`amanita.runtime.telemetry`."""

    logger_name: str = "amanita"
    level: str = "INFO"
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: str = ""
    buffered: bool = False
    buffer_size: int = 2048
    preset: Optional[str] = None

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "TelemetrySettings":
        preset = _env("LOG_PRESET", environ=environ)
        return cls(
            logger_name=_env("LOGGER", "amanita", environ=environ) or "amanita",
            level=(_env("LOG_LEVEL", environ=environ) or "INFO").upper(),
            console=not _env_flag("DISABLE_CONSOLE", False, environ=environ),
            color=not _env_flag("NO_COLOR", False, environ=environ),
            json=_env_flag("LOG_JSON", False, environ=environ),
            log_file=_env("LOG_FILE", "", environ=environ) or "",
            buffered=_env_flag("LOG_BUFFERED", False, environ=environ),
            buffer_size=_env_int("LOG_BUFFER_SIZE", 2048, environ=environ),
            preset=preset.strip().lower() if preset and preset.strip() else None,
        )


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Viewport size and file encoding used when building an editor."""

    viewport_width: int = 80
    viewport_height: int = 24
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError("viewport dimensions must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        return cls(
            viewport_width=_env_int("VIEWPORT_WIDTH", 80, environ=environ),
            viewport_height=_env_int("VIEWPORT_HEIGHT", 24, environ=environ),
            encoding=_env("ENCODING", "utf-8", environ=environ) or "utf-8",
        )


__all__ = [
    "ENV_PREFIX",
    "TAB_RUN",
    "TelemetrySettings",
    "EditorSettings",
]
