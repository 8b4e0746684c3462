"""structlog configuration for confctl.

All log output goes to stderr. Stdout is reserved for command output,
and ``insfile`` writes wire bodies there that must stay byte-exact.

Records are rendered as console lines, or as JSON lines with
``--log-json``. Three loggers are tuned:

- ``confctl`` follows ``--verbose`` (DEBUG) and is WARNING otherwise.
- ``sqlalchemy.engine`` logs each statement at INFO when
  ``[database] echo`` is set. The engine itself is never created with
  ``echo=True``, which would print SQL to stdout.
- the root logger stays at WARNING.
"""

from __future__ import annotations

import logging
import sys

import structlog

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _stderr_handler(log_json: bool) -> logging.Handler:
    """A stderr handler that renders stdlib and structlog records alike."""
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    sql_echo: bool = False,
) -> None:
    """Route structlog and stdlib logging to a single stderr handler.

    Safe to call repeatedly; the root handler is replaced, not added.

    Args:
        verbose: Log confctl DEBUG records (``--verbose``).
        log_json: Render JSON lines instead of console lines (``--log-json``).
        sql_echo: Log every SQL statement (``[database] echo``).
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json)]
    root.setLevel(logging.WARNING)

    logging.getLogger("confctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)
