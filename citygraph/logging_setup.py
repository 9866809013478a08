"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger from the observability settings.

    Unknown level names fall back to WARNING.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(level=level, format=config.format, force=True)
    logging.getLogger(__name__).debug(
        "Logging configured", extra={"level": logging.getLevelName(level)}
    )
