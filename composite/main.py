"""Entry routine: add two integers and print the sum."""

from typing import Optional, Sequence

from .core.config import Config, get_config
from .core.exceptions import ConfigurationError
from .core.logging import setup_logging, get_logger
from .domain import add_int32

logger = get_logger("main")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print "Value is 20" and return exit status 0. Arguments are ignored."""
    config_error = None
    try:
        config = get_config()
    except ConfigurationError as e:
        # Logging settings never change the output or exit status
        config_error = e
        config = Config.model_construct()
    setup_logging(config.log_level, config.log_format)
    if config_error is not None:
        logger.warning(
            "Invalid configuration, using defaults",
            error=config_error.message,
            details=config_error.details
        )

    x = 9
    y = 11
    z = add_int32(x, y)
    logger.debug("Computed sum", x=x, y=y, z=z)

    print(f"Value is {z}")
    return 0
