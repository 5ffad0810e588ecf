"""Quote Scanner Service.

Entry point for grading an extracted quote:

1. Validate the signal set against the extraction contract
2. Validity gate (non-quotes get a fixed all-zero result)
3. Price per opening and the five category scores
4. Hard caps
5. Aggregation (weights, curve, cap, summary)
6. Forensic summary and contractor identity

Every call builds its own working state, so one service instance can be
shared across concurrent requests.
"""

import json
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from app.config import Settings, settings as default_settings
from app.schemas.product.quote_scanner import ExtractionSignals, QuoteAnalysis, ScoredResult
from app.services.product.quote_scanner.aggregation_service import (
    aggregate,
    invalid_document_result,
)
from app.services.product.quote_scanner.category_scoring_service import (
    score_fine_print,
    score_safety,
    score_scope,
    score_warranty,
)
from app.services.product.quote_scanner.forensic_service import (
    extract_identity,
    generate_forensic_summary,
)
from app.services.product.quote_scanner.hard_cap_service import evaluate_hard_caps
from app.services.product.quote_scanner.price_service import (
    compute_price_per_opening,
    score_price,
)
from app.utils.exceptions import (
    ConfigurationError,
    ExtractionParseError,
    InvalidOpeningCountHintError,
    SignalValidationError,
)
from app.utils.logging import get_logger

LOGGER = get_logger(__name__, level=default_settings.log_level)

SignalInput = Union[ExtractionSignals, Mapping[str, Any]]


def _error_field(error: dict[str, Any]) -> str:
    loc = error.get("loc") or ()
    return ".".join(str(part) for part in loc) or "<root>"


def validate_signals(raw: SignalInput) -> ExtractionSignals:
    """Validate a raw signal mapping against the extraction contract.

    Raises:
        SignalValidationError: naming every offending field
    """
    if isinstance(raw, ExtractionSignals):
        return raw
    if not isinstance(raw, Mapping):
        raise SignalValidationError(
            f"Extraction signals must be a mapping, got {type(raw).__name__}",
            fields=["<root>"],
        )

    try:
        return ExtractionSignals.model_validate(dict(raw))
    except ValidationError as e:
        errors = e.errors(include_url=False)
        fields = sorted({_error_field(err) for err in errors})
        LOGGER.warning(f"Extraction signals failed validation: {fields}")
        raise SignalValidationError(
            f"Invalid extraction signals: {', '.join(fields)}",
            fields=fields,
            errors=errors,
            original_error=e,
        ) from e


def parse_extraction_content(content: str) -> ExtractionSignals:
    """Decode raw extractor output (a JSON object) into validated signals.

    Raises:
        ExtractionParseError: if the content is not a JSON object
        SignalValidationError: if the object violates the contract
    """
    try:
        data = json.loads(content)
    except (TypeError, json.JSONDecodeError) as e:
        LOGGER.error(f"Failed to parse extraction JSON: {str(content)[:500]}")
        raise ExtractionParseError(
            "Extraction returned an invalid response format", original_error=e
        ) from e

    if not isinstance(data, dict):
        LOGGER.error(f"Extraction JSON is not an object: {type(data).__name__}")
        raise ExtractionParseError("Extraction response must be a JSON object")

    return validate_signals(data)


def validate_opening_count_hint(
    hint: Optional[int],
    config: Optional[Settings] = None,
) -> Optional[int]:
    """Check a caller-supplied opening count against the configured range."""
    if hint is None:
        return None

    config = config or default_settings
    low = config.scanner_min_opening_count_hint
    high = config.scanner_max_opening_count_hint
    if low > high:
        raise ConfigurationError(
            f"Opening count hint range is empty: min {low} > max {high}"
        )

    if isinstance(hint, bool) or not isinstance(hint, int):
        raise InvalidOpeningCountHintError(
            f"Opening count hint must be an integer, got {type(hint).__name__}"
        )
    if not low <= hint <= high:
        raise InvalidOpeningCountHintError(
            f"Opening count hint {hint} outside allowed range {low}-{high}"
        )
    return hint


class QuoteScannerService:
    """Deterministic grader for extracted window/door quote signals."""

    def __init__(self, config: Optional[Settings] = None):
        self.settings = config or default_settings

    def score(
        self,
        signals: SignalInput,
        opening_count_hint: Optional[int] = None,
    ) -> ScoredResult:
        """Grade a signal set.

        Args:
            signals: Validated signals or a raw mapping to validate
            opening_count_hint: Opening count used when extraction found none

        Returns:
            ScoredResult with category scores, overall score and hard cap
        """
        signals = validate_signals(signals)
        hint = validate_opening_count_hint(opening_count_hint, self.settings)

        if self.settings.scanner_log_signals:
            LOGGER.debug(f"Scoring signals: {signals.model_dump(by_alias=True)}")

        if not signals.is_valid_quote:
            LOGGER.info(f"Document is not a quote, skipping grading: {signals.validity_reason!r}")
            return invalid_document_result()

        price_per_opening = compute_price_per_opening(signals, hint)
        hard_cap = evaluate_hard_caps(signals)

        if hard_cap.result.applied:
            LOGGER.info(
                f"Hard cap applied: ceiling={hard_cap.result.ceiling}, "
                f"statute={hard_cap.result.statute}"
            )

        return aggregate(
            safety=score_safety(signals),
            scope=score_scope(signals),
            price=score_price(signals, price_per_opening),
            fine_print=score_fine_print(signals),
            warranty=score_warranty(signals),
            price_per_opening=price_per_opening,
            hard_cap=hard_cap,
        )

    def analyze(
        self,
        signals: SignalInput,
        opening_count_hint: Optional[int] = None,
    ) -> QuoteAnalysis:
        """Grade a signal set and explain the result."""
        signals = validate_signals(signals)
        scored = self.score(signals, opening_count_hint)

        analysis = QuoteAnalysis(
            scored=scored,
            forensic=generate_forensic_summary(signals, scored),
            extracted_identity=extract_identity(signals),
        )

        capped = f" (capped at {scored.hard_cap.ceiling})" if scored.hard_cap.applied else ""
        LOGGER.info(f"Analysis complete. Overall score: {scored.overall_score}{capped}")
        return analysis

    def analyze_content(
        self,
        content: str,
        opening_count_hint: Optional[int] = None,
    ) -> QuoteAnalysis:
        """Parse raw extractor output, then grade and explain it."""
        return self.analyze(parse_extraction_content(content), opening_count_hint)
