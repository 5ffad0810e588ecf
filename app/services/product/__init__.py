"""Product services package."""

from .quote_scanner.quote_scanner_service import QuoteScannerService

__all__ = [
    "QuoteScannerService",
]
