"""Logging configuration built on loguru.

Components never configure logging themselves; they call get_logger(), which
lazily applies defaults the first time it is used. Applications call
setup_logging() once at startup to apply their Settings.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel

if t.TYPE_CHECKING:
    import loguru

    from ..config.settings import Settings

_DEV_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru handlers with one configured for the environment.

    Development gets coloured human readable output, production gets
    serialised JSON lines. Testing behaves like development.
    """
    global _configured

    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()

    logger.remove()
    logger.configure(extra={"name": "reissue"})
    if environment is Environment.PRODUCTION:
        logger.add(sys.stderr, level=level_name, serialize=True)
    else:
        logger.add(sys.stderr, level=level_name, format=_DEV_FORMAT, colorize=True)
    _configured = True


def setup_logging(settings: "Settings") -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def reset_logging() -> None:
    """Drop all handlers so the next get_logger() call reconfigures."""
    global _configured
    logger.remove()
    _configured = False
