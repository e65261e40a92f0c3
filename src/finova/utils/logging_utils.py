"""Logging helpers."""

import logging

APP_LOGGER_NAME = "finova"
HANDLER_NAME = "finova-stderr"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_app_logger(name: str = APP_LOGGER_NAME) -> logging.Logger:
    """Return the application logger, or a child of it."""
    if name != APP_LOGGER_NAME and not name.startswith(f"{APP_LOGGER_NAME}."):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the application logger.

    Calling this again swaps in a fresh handler bound to the current
    ``sys.stderr``; the logger never holds more than one.

    Args:
        level: Logging level or level name

    Returns:
        The configured application logger

    Raises:
        ValueError: If the level name is unknown
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = resolved

    logger = get_app_logger()
    logger.setLevel(level)
    for handler in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
