"""
Custom Exception Classes for edge-i18n

The locale decision engine never raises; these exceptions cover loading the
configuration and the inspection API around it.
"""

from typing import Any

from fastapi import status


class EdgeI18nException(Exception):
    """Base exception class for all edge-i18n exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class I18nConfigError(EdgeI18nException):
    """Raised when the i18n configuration cannot be read or is invalid"""

    def __init__(self, message: str, source: str | None = None, errors: list[dict[str, Any]] | None = None):
        details: dict[str, Any] = {}
        if source:
            details["source"] = source
        if errors:
            details["errors"] = errors
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)


class I18nNotConfiguredError(EdgeI18nException):
    """Raised when an i18n endpoint is used while i18n is disabled"""

    def __init__(self, message: str = "i18n is not configured"):
        super().__init__(message=message, status_code=status.HTTP_404_NOT_FOUND)
