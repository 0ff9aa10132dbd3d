"""
Centralized configuration loader for the alert migration.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ConfigError

UNTERMINATED_POLICIES = ("skip", "collapse", "error")
DEFAULT_EXTENSIONS = [".m", ".mm"]
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class EditorConfig:
    on_unterminated: str = "skip"

    def __post_init__(self) -> None:
        if self.on_unterminated not in UNTERMINATED_POLICIES:
            raise ConfigError(
                f"Unknown unterminated-block policy '{self.on_unterminated}'; "
                f"expected one of {', '.join(UNTERMINATED_POLICIES)}"
            )


@dataclass
class AlertFixerConfig:
    editor: EditorConfig = field(default_factory=EditorConfig)
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    backup: bool = True
    log_level: str = "WARNING"


def _env_bool(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _parse_extensions(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(DEFAULT_EXTENSIONS)
    extensions: List[str] = []
    for part in raw.split(","):
        ext = part.strip()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        extensions.append(ext)
    return extensions or list(DEFAULT_EXTENSIONS)


def _parse_log_level(raw: Optional[str]) -> str:
    level = (raw or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log level '{raw}'; expected one of {', '.join(LOG_LEVELS)}")
    return level


def load_config(env: Optional[dict] = None) -> AlertFixerConfig:
    environ = env if env is not None else os.environ
    policy = (environ.get("ALERTFIXER_ON_UNTERMINATED") or "skip").strip().lower()
    return AlertFixerConfig(
        editor=EditorConfig(on_unterminated=policy),
        extensions=_parse_extensions(environ.get("ALERTFIXER_EXTENSIONS")),
        backup=_env_bool(environ.get("ALERTFIXER_BACKUP"), True),
        log_level=_parse_log_level(environ.get("ALERTFIXER_LOG_LEVEL")),
    )
