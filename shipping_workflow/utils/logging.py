from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_LEVEL_ENV = "SHIPPING_LOG_LEVEL"
DEBUG_ENV = "SHIPPING_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# urllib3 logs every connection at DEBUG; only shown when the workflow runs at DEBUG.
_TRANSPORT_LOGGERS = ("urllib3",)


def parse_level(value: int | str | None, fallback: int = logging.INFO) -> int:
    """Return a numeric level for a name (``"debug"``) or number (``"10"``)."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper()) if text else None
    return level if isinstance(level, int) else fallback


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, if any.

    ``SHIPPING_LOG_LEVEL`` wins over a truthy ``SHIPPING_DEBUG``.
    """
    env = os.environ if environ is None else environ
    explicit = env.get(LOG_LEVEL_ENV)
    if explicit and explicit.strip():
        return parse_level(explicit)
    if (env.get(DEBUG_ENV) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(
    default_level: int | str = logging.INFO,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Configure root logging for the workflow and return the effective level."""
    forced = env_level(environ)
    effective = forced if forced is not None else parse_level(default_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT)
    root.setLevel(effective)

    transport_level = effective if effective <= logging.DEBUG else max(effective, logging.WARNING)
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return effective


def level_name(level: int) -> str:
    """Return logging level name for diagnostics."""
    return logging.getLevelName(level)
