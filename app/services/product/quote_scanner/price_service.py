"""Price-per-opening calculation and price banding.

The band table in ``constants.PRICE_BANDS`` is a sweet-spot curve: quotes
that are either very cheap or very expensive per opening score lower than
quotes in the typical market range.
"""

import math
from typing import Optional

from app.schemas.product.quote_scanner import ExtractionSignals
from app.services.product.quote_scanner.constants import (
    PRICE_ABOVE_BANDS_SCORE,
    PRICE_BANDS,
    PRICE_DEFAULT_SCORE,
    PRICE_PREMIUM_BONUS,
    PRICE_PREMIUM_CEILING,
    PRICE_ROUNDING_STEP,
)
from app.services.product.quote_scanner.contracts import CategoryScore, PricePerOpening


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(0, min(100, int(value)))


def compute_price_per_opening(
    signals: ExtractionSignals,
    opening_count_hint: Optional[int] = None,
) -> PricePerOpening:
    """Divide total price by opening count, rounded to the nearest 50.

    The extracted opening count wins over the caller's hint. A missing
    total, a zero total or no usable opening count yields no value.
    """
    effective_count = (
        signals.opening_count_estimate
        if signals.opening_count_estimate is not None
        else opening_count_hint
    )

    if not (signals.total_price_found and signals.total_price_value):
        return PricePerOpening()
    if not effective_count or effective_count <= 0:
        return PricePerOpening()

    raw = signals.total_price_value / effective_count
    rounded = round_half_up(raw / PRICE_ROUNDING_STEP) * PRICE_ROUNDING_STEP
    return PricePerOpening(value=rounded)


def price_band_score(value: float, has_premium_indicators: bool = False) -> int:
    """Look up the price score for a rounded price per opening."""
    for upper, inclusive, score in PRICE_BANDS:
        if value < upper or (inclusive and value == upper):
            return score

    score = PRICE_ABOVE_BANDS_SCORE
    if has_premium_indicators:
        score = min(score + PRICE_PREMIUM_BONUS, PRICE_PREMIUM_CEILING)
    return score


def score_price(signals: ExtractionSignals, price_per_opening: PricePerOpening) -> CategoryScore:
    """Price category (weight 20%)."""
    if price_per_opening.value is None:
        return CategoryScore(
            score=PRICE_DEFAULT_SCORE,
            missing_items=(
                "Could not compute price per opening (missing total price or opening count).",
            ),
        )

    score = price_band_score(price_per_opening.value, signals.has_premium_indicators)
    return CategoryScore(score=clamp_score(score))
