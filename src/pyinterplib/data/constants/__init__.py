"""Processing constants and message templates for pyinterplib."""

from .processing_constants import ProcessingConstants, ErrorMessages

__all__ = [
    "ProcessingConstants",
    "ErrorMessages"
]
