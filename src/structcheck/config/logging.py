"""structlog setup for the structcheck CLI.

Records from structlog loggers and from plain ``logging`` loggers share one
pipeline and one stderr handler, rendered either for people (console) or
for machines (``--log-json``, one JSON object per line).

Validation itself never logs; records come from the CLI, services and
plugin loading.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

# Libraries whose DEBUG chatter is never useful next to ours.
_QUIET_LOGGERS = ("ruamel", "pluggy")


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool, stream: IO[str]) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route all log output through structlog into *stream*.

    Safe to call more than once: the root handler is replaced, not added.

    Args:
        verbose: Let ``structcheck.*`` DEBUG records through. Other loggers
            stay at WARNING either way.
        log_json: Render JSON lines instead of console text.
        stream: Destination; stderr when omitted.
    """
    out = sys.stderr if stream is None else stream
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("structcheck").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to *name* (normally ``__name__``)."""
    return structlog.get_logger(name)
