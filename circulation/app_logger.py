import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
BASE_LOGGER = "circulation"
_DEFAULT_LEVEL = os.getenv("CIRCULATION_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the package logger once. Output goes to stderr so stdout stays
    reserved for the console report.
    """
    level_name = (level or _DEFAULT_LEVEL).upper()
    logger = logging.getLogger(BASE_LOGGER)
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    # Avoid duplicate console handlers
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER)
    return base.getChild(name) if name else base
