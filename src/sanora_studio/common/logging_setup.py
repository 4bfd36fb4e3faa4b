"""Central logging setup for the project."""
from __future__ import annotations
import logging
import sys

def resolve_level(level: int | str) -> int:
    """Map a level name such as "DEBUG" to its number; unknown names give INFO."""
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level

def set_level(level: int | str) -> None:
    """Change the root logger level after setup_logging (e.g. once config is loaded)."""
    logging.getLogger().setLevel(resolve_level(level))

def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logger with sane defaults.

    The httpx logger is capped at WARNING: its request lines carry the
    query string, which holds the API key.

    Args:
        level: Logging level (int or name such as "DEBUG").
    """
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))
    logging.getLogger("httpx").setLevel(logging.WARNING)
