"""Configuration for the circulation app.

Loaded by ``create_app`` via ``app.config.from_object``. Values that make
sense to change per run are read from the environment.
"""
import os

from circulation.utils.constants import DEFAULT_DISCOUNT_FACTOR, DEFAULT_MAX_BORROWS


class Config:
    """Base configuration.

    Attributes:
        LOG_LEVEL (str): Level for the ``circulation`` logger.
        DEMO_DAYS_LATE (int): Lateness used by the ``demo`` command when
            ``--days-late`` is not given.
        DEFAULT_MAX_BORROWS (int): Borrow limit for students created without one.
        DEFAULT_DISCOUNT_FACTOR (float): Late-fee multiplier for students
            created without one.
    """

    LOG_LEVEL: str = os.environ.get("CIRCULATION_LOG_LEVEL", "WARNING").upper()
    DEMO_DAYS_LATE: int = int(os.environ.get("CIRCULATION_DEMO_DAYS_LATE", "5"))

    # Role defaults
    DEFAULT_MAX_BORROWS: int = DEFAULT_MAX_BORROWS
    DEFAULT_DISCOUNT_FACTOR: float = DEFAULT_DISCOUNT_FACTOR


class TestingConfig(Config):
    TESTING: bool = True
    LOG_LEVEL: str = "DEBUG"
