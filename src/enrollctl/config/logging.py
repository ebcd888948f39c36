"""structlog configuration for enrollctl.

All modules log through stdlib ``logging.getLogger(__name__)``; structlog's
``ProcessorFormatter`` renders those records on a single stderr handler.

Two output modes:
- Human (default): console renderer, colored when stderr is a TTY
- JSON (--log-json): one JSON object per line
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "enrollctl"
QUIET_LOGGERS: tuple[str, ...] = ("pluggy",)

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _app_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and route every record to stderr.

    Safe to call repeatedly: the root handler list is replaced, not extended.

    Args:
        verbose: Enable DEBUG-level output for enrollctl loggers.
        quiet: Only ERROR+ for enrollctl loggers (ignored when *verbose*).
        log_json: Use the JSON renderer instead of the console renderer.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(_app_level(verbose=verbose, quiet=quiet))
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
