"""Settings loaded from an optional YAML file plus environment overrides."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

LOGGER = logging.getLogger("sanora.config")

DEFAULT_CONFIG_PATH = "configs/studio.yaml"

# env var -> (settings field, cast)
_ENV_OVERRIDES: dict[str, tuple[str, type]] = {
    "GEMINI_API_KEY": ("api_key", str),
    "GEMINI_MODEL": ("model", str),
    "GEMINI_BASE_URL": ("base_url", str),
    "GENERATION_MAX_ATTEMPTS": ("max_attempts", int),
    "GENERATION_BACKOFF_BASE_S": ("backoff_base_s", float),
    "GENERATION_TIMEOUT_S": ("timeout_s", float),
    "SANORA_APP_ID": ("app_id", str),
    "LOG_LEVEL": ("log_level", str),
}


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the generation client and its surfaces."""
    api_key: str = ""
    model: str = "gemini-2.5-flash-preview-09-2025"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    max_attempts: int = 5
    backoff_base_s: float = 1.0
    timeout_s: float = 60.0
    app_id: str = "sanora-interior-organic"
    log_level: str = "INFO"


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: str | None = None) -> Settings:
    """
    Build Settings from YAML (if present) and then the environment.

    Args:
        path: YAML config path. Defaults to $SANORA_CONFIG (when non-empty) or configs/studio.yaml;
            a missing default file is not an error, a missing explicit one is.
    """
    path = path or os.getenv("SANORA_CONFIG") or None
    explicit = path is not None
    path = path or DEFAULT_CONFIG_PATH

    values: dict[str, Any] = {}
    if explicit or Path(path).exists():
        raw = load_cfg(path)
        known = {f.name for f in fields(Settings)}
        unknown = sorted(set(raw) - known)
        if unknown:
            LOGGER.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))
        values = {k: v for k, v in raw.items() if k in known}

    settings = Settings(**values)
    overrides: dict[str, Any] = {}
    for env_name, (field_name, cast) in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None and value != "":
            overrides[field_name] = cast(value)
    settings = replace(settings, **overrides)

    if not settings.api_key:
        LOGGER.warning("GEMINI_API_KEY is not set; generation requests will be rejected upstream")
    return settings
