"""Core configuration, logging and exceptions."""

from .config import Config, get_config, reset_config
from .exceptions import (
    CompositeError,
    ConfigurationError,
    InvalidOperandError,
    OperandRangeError,
    OperandTypeError
)
from .logging import setup_logging, get_logger

__all__ = [
    "Config",
    "get_config",
    "reset_config",
    "CompositeError",
    "ConfigurationError",
    "InvalidOperandError",
    "OperandRangeError",
    "OperandTypeError",
    "setup_logging",
    "get_logger"
]
