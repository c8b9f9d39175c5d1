"""
Errors raised by the merchant profile import.
"""
from typing import Optional


class MerchantProfileImportError(Exception):
    """Base class for import errors."""


class InvalidDataError(MerchantProfileImportError, ValueError):
    """A data set is missing a required field or holds an unusable value."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


__all__ = ["MerchantProfileImportError", "InvalidDataError"]
