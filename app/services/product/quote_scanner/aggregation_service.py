"""Overall score aggregation.

Score = curve(round(sum(weight * category))) then limited by the hard cap
ceiling. The curve runs before the cap so a capped score always sits at or
below the ceiling.
"""

from app.schemas.product.quote_scanner import HardCapResult, ScoredResult
from app.services.product.quote_scanner.constants import (
    CATEGORY_SUMMARY_THRESHOLDS,
    CATEGORY_WEIGHTS,
    CURVE_EXPONENT,
    CURVE_KNEE,
    CURVE_SPAN,
    INVALID_DOCUMENT_SUMMARY,
    INVALID_DOCUMENT_WARNING,
    MAX_MISSING_ITEMS,
    MAX_WARNINGS,
    SUMMARY_ACCEPTABLE,
    SUMMARY_ACCEPTABLE_THRESHOLD,
    SUMMARY_COMPREHENSIVE,
    SUMMARY_COMPREHENSIVE_THRESHOLD,
    SUMMARY_CONCERNS,
)
from app.services.product.quote_scanner.contracts import (
    CategoryScore,
    HardCapEvaluation,
    PricePerOpening,
)
from app.services.product.quote_scanner.price_service import round_half_up


def curve_value(score: float) -> float:
    """Unrounded curve: 70 + 30 * ((score - 70) / 30) ** 1.8 above the knee."""
    if score <= CURVE_KNEE:
        return score
    excess = score - CURVE_KNEE
    return CURVE_KNEE + CURVE_SPAN * (excess / CURVE_SPAN) ** CURVE_EXPONENT


def apply_curve(score: int) -> int:
    """Compress scores above the knee so that 90+ stays rare.

    Scores at or below 70 pass through; 100 maps to 100. Rounding makes
    the curve flat in places (71 and 72 both land on 70) but never
    decreasing.
    """
    if score <= CURVE_KNEE:
        return score
    return round_half_up(curve_value(score))


def weighted_overall(scores: dict[str, int]) -> int:
    """Raw weighted overall score before curving or capping."""
    total = sum(scores[category] * weight for category, weight in CATEGORY_WEIGHTS.items())
    return round_half_up(total)


def build_summary(scores: dict[str, int], overall: int, hard_cap: HardCapResult) -> str:
    """Pick the one-paragraph summary.

    Precedence: hard cap reason, then the weakest category if it is under
    its threshold, then a band comment on the final overall score.
    """
    if hard_cap.applied:
        statute = f" ({hard_cap.statute})" if hard_cap.statute else ""
        return f"Score capped at {hard_cap.ceiling} due to: {hard_cap.reason}{statute}."

    lowest = min(scores.values())
    for category, threshold, summary in CATEGORY_SUMMARY_THRESHOLDS:
        if scores[category] == lowest and scores[category] < threshold:
            return summary

    if overall >= SUMMARY_COMPREHENSIVE_THRESHOLD:
        return SUMMARY_COMPREHENSIVE
    if overall >= SUMMARY_ACCEPTABLE_THRESHOLD:
        return SUMMARY_ACCEPTABLE
    return SUMMARY_CONCERNS


def aggregate(
    safety: CategoryScore,
    scope: CategoryScore,
    price: CategoryScore,
    fine_print: CategoryScore,
    warranty: CategoryScore,
    price_per_opening: PricePerOpening,
    hard_cap: HardCapEvaluation,
) -> ScoredResult:
    """Combine category scores and findings into the final scored result.

    Warnings are merged in the order safety, scope, fine print, hard caps;
    missing items in the order safety, scope, fine print, warranty, price.
    Both lists are cut to six entries.
    """
    scores = {
        "safety": safety.score,
        "scope": scope.score,
        "price": price.score,
        "fine_print": fine_print.score,
        "warranty": warranty.score,
    }

    overall = apply_curve(weighted_overall(scores))
    if hard_cap.result.applied:
        overall = min(overall, hard_cap.result.ceiling)

    warnings = (
        safety.warnings
        + scope.warnings
        + fine_print.warnings
        + hard_cap.warnings
    )
    missing_items = (
        safety.missing_items
        + scope.missing_items
        + fine_print.missing_items
        + warranty.missing_items
        + price.missing_items
    )

    return ScoredResult(
        overall_score=overall,
        safety_score=safety.score,
        scope_score=scope.score,
        price_score=price.score,
        fine_print_score=fine_print.score,
        warranty_score=warranty.score,
        price_per_opening=price_per_opening.display,
        warnings=warnings[:MAX_WARNINGS],
        missing_items=missing_items[:MAX_MISSING_ITEMS],
        summary=build_summary(scores, overall, hard_cap.result),
        hard_cap=hard_cap.result,
    )


def invalid_document_result() -> ScoredResult:
    """Terminal all-zero result for documents that are not quotes."""
    return ScoredResult(
        overall_score=0,
        safety_score=0,
        scope_score=0,
        price_score=0,
        fine_print_score=0,
        warranty_score=0,
        price_per_opening=PricePerOpening().display,
        warnings=(INVALID_DOCUMENT_WARNING,),
        missing_items=(),
        summary=INVALID_DOCUMENT_SUMMARY,
        hard_cap=HardCapResult(),
    )
