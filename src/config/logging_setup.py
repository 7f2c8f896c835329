"""
Logging setup - one explicit configuration step at startup.

Attaches a single stream handler to the root logger and returns the
application logger for injection into the app factory.
"""

import logging

APP_LOGGER_NAME = "my_todo"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure root logging and return the application logger.

    Safe to call more than once: the handler installed by a previous call
    is reused and only the level changes.

    Args:
        level: Logging level name (e.g. "INFO", "debug")

    Returns:
        The application logger.
    """
    global _handler

    root = logging.getLogger()
    if _handler is None or _handler not in root.handlers:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    return logging.getLogger(APP_LOGGER_NAME)
