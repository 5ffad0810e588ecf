"""Custom exception classes for the quote scanner."""

from typing import Any, Optional


class QuoteScannerException(Exception):
    """Base exception for all quote scanner errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class SignalValidationError(QuoteScannerException):
    """Raised when an extraction signal set violates the input contract.

    ``fields`` names every offending field by its wire (camelCase) name so
    callers can report them without parsing the message.
    """

    def __init__(
        self,
        message: str,
        fields: Optional[list[str]] = None,
        errors: Optional[list[dict[str, Any]]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, original_error)
        self.fields = list(fields or [])
        self.errors = list(errors or [])


class ExtractionParseError(QuoteScannerException):
    """Raised when extraction output cannot be decoded into a JSON object."""

    pass


class InvalidOpeningCountHintError(QuoteScannerException):
    """Raised when a caller-supplied opening count hint is out of range."""

    pass


class ConfigurationError(QuoteScannerException):
    """Raised when configuration is invalid or missing."""

    pass
