"""Logging setup for errcraft.

errcraft never logs on its own at INFO or above: a discarded failure is the
caller's business. With ERRCRAFT_LOG_TRACE_FAILURES=true, every finalized
failure and every propagation is logged at DEBUG under the "errcraft" logger.

Example:
    >>> from errcraft.foundation.logging import configure_logging
    >>> configure_logging("DEBUG")  # attaches a stderr handler to "errcraft"
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from errcraft.foundation.config.settings import get_settings

logger = logging.getLogger("errcraft")

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_ATTR = "_errcraft_handler"


def configure_logging(level: str | None = None, *, output: TextIO | None = None) -> logging.Handler:
    """Attach (or replace) errcraft's stream handler. Level defaults to the configured one."""
    resolved = (level or get_settings().effective_log_level).upper()
    for existing in [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]:
        logger.removeHandler(existing)
    handler = logging.StreamHandler(output or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, resolved, logging.WARNING))
    return handler


def tracing_failures() -> bool:
    """Whether failure creation and propagation should be logged."""
    return get_settings().logging.trace_failures
