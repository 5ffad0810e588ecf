"""Quote Scanner services package."""

from app.services.product.quote_scanner.quote_scanner_service import (
    QuoteScannerService,
    parse_extraction_content,
    validate_opening_count_hint,
    validate_signals,
)

__all__ = [
    "QuoteScannerService",
    "parse_extraction_content",
    "validate_opening_count_hint",
    "validate_signals",
]
