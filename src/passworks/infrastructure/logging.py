"""Logging configuration for passworks entrypoints."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str | None) -> int:
    """Map a level name to a logging constant, falling back to WARNING."""

    normalized = (level or "").strip().upper()
    resolved = logging.getLevelName(normalized) if normalized else logging.WARNING
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(*, level: str | None, stream: TextIO | None = None) -> None:
    """Send process logs to stderr so stdout only carries command output."""

    logging.basicConfig(
        level=resolve_log_level(level),
        format=_LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=True,
    )
