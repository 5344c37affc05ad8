"""Custom exceptions for pyinterplib core functionality."""
import logging

logger = logging.getLogger(__name__)


class InterpolationError(Exception):
    """Base exception for all interpolation-related errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InterpolationError raised: %s", message)


class InvalidInputError(InterpolationError, ValueError):
    """Exception raised when a data bundle, array or query fails validation."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("InvalidInputError raised: %s", message)


class ExtrapolationNotSupportedError(InterpolationError):
    """Exception raised when a kernel is asked for a quantity it cannot extrapolate."""

    def __init__(self, message, value: float = None, last_key: float = None):
        self.value = value
        self.last_key = last_key
        super().__init__(message)
        logger.error("ExtrapolationNotSupportedError raised: %s", message)
