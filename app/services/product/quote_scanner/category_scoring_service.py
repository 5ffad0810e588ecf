"""Category scorers for safety, scope, fine print and warranty.

Each scorer reads its own subset of signals and returns a fresh
``CategoryScore`` with the warnings and missing items it produced. None of
them share state, so they can be tested and reordered independently.
Price lives in ``price_service`` because it depends on the computed
price per opening.
"""

from app.schemas.product.quote_scanner import ExtractionSignals
from app.services.product.quote_scanner.constants import (
    FINE_PRINT_BASE,
    FINE_PRINT_DEPOSIT_HIGH_RISK,
    FINE_PRINT_DEPOSIT_MODERATE,
    FINE_PRINT_FINAL_PAYMENT_TRAP_CAP,
    FINE_PRINT_LOW_BONUS,
    FINE_PRINT_MAX_TRAP_PENALTY,
    FINE_PRINT_MODERATE_BONUS,
    FINE_PRINT_MODERATE_CEILING,
    FINE_PRINT_PER_TRAP_PENALTY,
    FINE_PRINT_SAFE_TERMS_BONUS,
    FINE_PRINT_URGENCY_PENALTY,
    MAX_CONTRACT_TRAPS_NAMED,
    SAFETY_NO_PROOF_CAP,
    SAFETY_NON_IMPACT_CAP,
    SAFETY_POINTS,
    SAFETY_TEMPERED_ONLY_CAP,
    SCOPE_POINTS,
    SCOPE_STANDARD_INSTALLATION_PENALTY,
    SCOPE_SUBJECT_TO_CHANGE_PENALTY,
    WARRANTY_MULTI_YEAR_POINTS,
    WARRANTY_MULTI_YEAR_THRESHOLD,
    WARRANTY_POINTS,
)
from app.services.product.quote_scanner.contracts import CategoryScore
from app.services.product.quote_scanner.price_service import clamp_score


def _points(signals: ExtractionSignals, table: dict[str, int]) -> int:
    return sum(points for flag, points in table.items() if getattr(signals, flag))


def score_safety(signals: ExtractionSignals) -> CategoryScore:
    """Safety / impact compliance (weight 30%)."""
    warnings: list[str] = []
    missing_items: list[str] = []

    score = _points(signals, SAFETY_POINTS)

    if signals.has_tempered_only_risk:
        score = min(score, SAFETY_TEMPERED_ONLY_CAP)
        warnings.append("Tempered alone isn't impact glass—verify laminated impact rating.")

    if signals.has_non_impact_language:
        score = min(score, SAFETY_NON_IMPACT_CAP)
        warnings.append("Non-impact or glass-only language found—high hurricane compliance risk.")

    has_proof = (
        signals.has_compliance_keyword
        or signals.has_compliance_identifier
        or signals.has_laminated_mention
    )
    if not has_proof:
        score = min(score, SAFETY_NO_PROOF_CAP)
        missing_items.append(
            "No proof of impact compliance (NOA/FL#, DP, HVHZ, or laminated impact glass)."
        )

    return CategoryScore(clamp_score(score), tuple(warnings), tuple(missing_items))


def score_scope(signals: ExtractionSignals) -> CategoryScore:
    """Scope of work clarity (weight 25%)."""
    warnings: list[str] = []
    missing_items: list[str] = []

    score = _points(signals, SCOPE_POINTS)

    if signals.has_subject_to_change:
        score = max(score - SCOPE_SUBJECT_TO_CHANGE_PENALTY, 0)
        warnings.append("RED FLAG: 'Subject to remeasure/change' allows price hikes after signing.")

    if signals.has_repairs_excluded or not signals.has_wall_repair_mention:
        missing_items.append("Wall repair scope unclear (stucco/drywall/paint after install).")

    if signals.has_standard_installation:
        score = max(score - SCOPE_STANDARD_INSTALLATION_PENALTY, 0)
        warnings.append(
            "Vague: 'Standard installation' can mean anything. Get specifics in writing."
        )

    return CategoryScore(clamp_score(score), tuple(warnings), tuple(missing_items))


def score_fine_print(signals: ExtractionSignals) -> CategoryScore:
    """Payment terms and contract traps (weight 15%)."""
    warnings: list[str] = []
    missing_items: list[str] = []

    score = FINE_PRINT_BASE
    deposit = signals.deposit_percentage

    if deposit is None:
        missing_items.append("Payment schedule/deposit terms not clearly stated.")
    elif deposit > FINE_PRINT_DEPOSIT_HIGH_RISK:
        score = 0
        warnings.append("High risk: deposit exceeds 40%.")
    elif deposit >= FINE_PRINT_DEPOSIT_MODERATE:
        score = min(score + FINE_PRINT_MODERATE_BONUS, FINE_PRINT_MODERATE_CEILING)
    else:
        score = min(score + FINE_PRINT_LOW_BONUS, 100)

    if signals.has_final_payment_trap:
        score = min(score, FINE_PRINT_FINAL_PAYMENT_TRAP_CAP)
        warnings.append("Risky: final payment due before inspection/permit close.")
    elif signals.has_safe_payment_terms:
        score = min(score + FINE_PRINT_SAFE_TERMS_BONUS, 100)

    traps = signals.contract_traps_list
    if signals.has_contract_traps and traps:
        deduction = min(len(traps) * FINE_PRINT_PER_TRAP_PENALTY, FINE_PRINT_MAX_TRAP_PENALTY)
        score = max(score - deduction, 0)
        warnings.append(f"Contract contains: {', '.join(traps[:MAX_CONTRACT_TRAPS_NAMED])}.")

    if signals.has_manager_discount:
        score = max(score - FINE_PRINT_URGENCY_PENALTY, 0)
        warnings.append(
            "Caution: Time-pressure language like 'manager discount' or 'today only' is often "
            "a sales tactic. Good deals don't expire overnight."
        )

    return CategoryScore(clamp_score(score), tuple(warnings), tuple(missing_items))


def score_warranty(signals: ExtractionSignals) -> CategoryScore:
    """Warranty coverage (weight 10%)."""
    missing_items: list[str] = []

    score = _points(signals, WARRANTY_POINTS)
    years = signals.warranty_duration_years
    if years is not None and years > WARRANTY_MULTI_YEAR_THRESHOLD:
        score += WARRANTY_MULTI_YEAR_POINTS

    if not signals.has_warranty_mention:
        missing_items.append(
            "No warranty terms stated (labor/workmanship + manufacturer coverage)."
        )

    return CategoryScore(clamp_score(score), missing_items=tuple(missing_items))
