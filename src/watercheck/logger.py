# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler

from watercheck.configuration import APP_NAME

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_log_level(level: object) -> str:
    """Normalize a level name to upper case, ValueError for unknown names."""
    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Valid options: {', '.join(VALID_LOG_LEVELS)}"
        )
    return level.upper()


def configure_logging(level: str = "WARNING") -> None:
    """Attach a rich handler to the application logger.

    Calling this more than once only updates the level.
    """
    app_logger = logging.getLogger(APP_NAME)
    app_logger.setLevel(validate_log_level(level))

    if not any(isinstance(handler, RichHandler) for handler in app_logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        app_logger.addHandler(handler)
