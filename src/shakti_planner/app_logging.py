"""Logging setup for the planner package."""

import logging

PACKAGE_LOGGER = "shakti_planner"
_HANDLER_NAME = "shakti_planner.stream"
_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(path)s]: %(message)s"


class _RequestPathFilter(logging.Filter):
    """Default the `path` field for records logged outside a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "path"):
            record.path = "-"
        return True


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Calling it again only updates the level. Handlers added by others are
    left alone.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(handler.name == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.addFilter(_RequestPathFilter())
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
