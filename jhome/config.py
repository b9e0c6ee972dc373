from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jhome.errors import JhomeError

CONFIG_ENV = "JHOME_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def config_path() -> Path:
    env = os.getenv(CONFIG_ENV)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".jhome" / "config.json"


@dataclass
class JhomeConfig:
    properties: dict[str, str] = field(default_factory=dict)
    log_level: str = "WARNING"


def _check(cfg: JhomeConfig) -> JhomeConfig:
    if not isinstance(cfg.properties, dict):
        raise ValueError("'properties' must be an object")
    # null values are left out so the property counts as unset
    cfg.properties = {
        str(k): str(v) for k, v in cfg.properties.items() if v is not None
    }
    if not isinstance(cfg.log_level, str) or cfg.log_level.upper() not in LOG_LEVELS:
        raise ValueError(
            f"'log_level' must be one of {', '.join(LOG_LEVELS)}, got {cfg.log_level!r}"
        )
    cfg.log_level = cfg.log_level.upper()
    return cfg


def load_config(path: Path | None = None) -> JhomeConfig:
    """Read the JSON configuration, falling back to defaults when absent."""
    path = path or config_path()
    if not path.exists():
        return JhomeConfig()
    try:
        with path.open("r", encoding="utf-8") as fh:
            data: dict[str, Any] = json.load(fh)
        return _check(JhomeConfig(**data))
    except (ValueError, TypeError) as exc:
        raise JhomeError(f"Invalid jhome configuration in {path}: {exc}") from exc


__all__ = ["CONFIG_ENV", "LOG_LEVELS", "JhomeConfig", "config_path", "load_config"]
