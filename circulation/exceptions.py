"""
Custom exception classes for the library circulation package.

The model layer raises these for inputs it refuses to miscompute; callers
(the service layer and the CLI) can catch the shared base class.
"""


class CirculationError(Exception):
    """Base class for every error raised by the circulation package."""

    default_message = "Error: circulation failure"

    def __init__(self, message: str = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidAmountError(CirculationError):
    """Raised when a monetary amount is negative where it must not be."""

    default_message = "Error: amount must not be negative"


class InvalidDaysLateError(CirculationError):
    """Raised when a lateness duration is negative or not an integer."""

    default_message = "Error: days late must be a non-negative integer"


class InvalidRoleError(CirculationError):
    """Raised for an unknown role kind or out-of-range role attributes."""

    default_message = "Error: invalid role"


class UnknownItemTypeError(CirculationError):
    """Raised when an item type label does not match a catalog variant."""

    default_message = "Error: unknown item type"


class DuplicateIdError(CirculationError):
    """Raised when registering a user or item whose ID is already taken."""

    default_message = "Error: identifier already registered"


class UserNotFoundError(CirculationError):
    """Raised when a user ID cannot be found in the store."""

    default_message = "Error: user not found"


class ItemNotFoundError(CirculationError):
    """Raised when an item ID cannot be found in the store."""

    default_message = "Error: item not found"
