"""Logging configuration."""

import logging
import sys

import structlog

LOGGER_NAME = "composite"
HANDLER_NAME = "composite"


def setup_logging(level: str = "WARNING", log_format: str = "console") -> structlog.stdlib.BoundLogger:
    """Set up stdlib and structlog logging.

    Records go to stderr; stdout is reserved for program output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.set_name(HANDLER_NAME)

    # Only the package logger is touched; the host keeps its root settings
    package_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in package_logger.handlers if h.get_name() == HANDLER_NAME]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = get_logger("logging")
    logger.debug("Logging configured", level=level.upper(), format=log_format)
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance for the given name."""
    return structlog.get_logger(f"{LOGGER_NAME}.{name}")
