"""Route the package's stdlib log records through structlog on stderr.

The printer logs with plain ``logging`` loggers and tags each record with a
``component`` extra (``"Printer"``). This module renders those records as
structlog event dicts, so the tag shows up as a field. Output goes to stderr
so log lines never mix into an artifact printed on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from result_printer.core.config import ObservabilityConfig

PACKAGE_LOGGER = "result_printer"


class _PrinterHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces only our own handler."""


def _renderer(log_format: str, stream) -> structlog.types.Processor:
    if log_format == "auto":
        log_format = "console" if stream.isatty() else "json"
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=stream.isatty())
    return structlog.processors.JSONRenderer(sort_keys=True)


def setup_logging(config: ObservabilityConfig) -> logging.Handler:
    """Attach a structlog-formatted stderr handler to the root logger.

    Only the ``result_printer`` logger level is changed. Handlers installed
    by other code stay in place. Calling this again swaps out the handler
    installed by the previous call. Returns the new handler.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    stream = sys.stderr

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(allow=["component"]),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(config.log_format, stream),
        ],
    )

    handler = _PrinterHandler(stream)
    handler.setFormatter(formatter)
    handler.setLevel(level)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _PrinterHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return handler
