"""Forensic summary generator and contractor identity extraction.

Explains a completed score: headline, risk tier, statute citations,
questions for the contractor and positive findings. It reads the scored
result (including its hard cap) as given and never re-scores.
"""

from app.schemas.product.quote_scanner import (
    ExtractedIdentity,
    ExtractionSignals,
    ForensicSummary,
    RiskLevel,
    ScoredResult,
)
from app.services.product.quote_scanner.constants import (
    FINE_PRINT_DEPOSIT_HIGH_RISK,
    MAX_POSITIVE_FINDINGS,
    MAX_QUESTIONS,
    MAX_STATUTE_CITATIONS,
    POSITIVE_FINDINGS_FULL_THRESHOLD,
    POSITIVE_FINDINGS_REDUCED_THRESHOLD,
    RISK_CRITICAL_MAX,
    RISK_HIGH_MAX,
    RISK_MODERATE_MAX,
    STATUTE_ADVANCE_PAYMENT,
    STATUTE_FINAL_PAYMENT,
    STATUTE_LICENSE,
    STATUTE_OWNER_BUILDER,
    STATUTE_PRODUCT_APPROVAL,
)

RISK_HEADLINES: dict[RiskLevel, str] = {
    RiskLevel.CRITICAL: "This quote has serious red flags. Do NOT sign without major revisions.",
    RiskLevel.HIGH: "This quote needs significant clarification before signing.",
    RiskLevel.MODERATE: "This quote is acceptable but has gaps to address.",
    RiskLevel.ACCEPTABLE: (
        "This quote appears comprehensive. Verify license and NOA numbers before signing."
    ),
}


def classify_risk(overall_score: int) -> RiskLevel:
    if overall_score <= RISK_CRITICAL_MAX:
        return RiskLevel.CRITICAL
    if overall_score <= RISK_HIGH_MAX:
        return RiskLevel.HIGH
    if overall_score <= RISK_MODERATE_MAX:
        return RiskLevel.MODERATE
    return RiskLevel.ACCEPTABLE


def _signal_citations(signals: ExtractionSignals) -> list[tuple[str, str]]:
    """(citation, question) pairs for statute-relevant signal gaps, in order."""
    pairs: list[tuple[str, str]] = []

    if not signals.license_number_present:
        pairs.append((
            f"{STATUTE_LICENSE} - All contractors must display license number",
            "What is your contractor license number?",
        ))
    if signals.has_owner_builder_language:
        pairs.append((
            f"{STATUTE_OWNER_BUILDER} - Owner-builder exemption transfers liability",
            "Why does this quote use owner-builder language?",
        ))
    if signals.deposit_percentage and signals.deposit_percentage > FINE_PRINT_DEPOSIT_HIGH_RISK:
        pairs.append((
            f"{STATUTE_ADVANCE_PAYMENT} - Advance payment regulations",
            "Can we restructure the payment schedule to reduce the deposit?",
        ))
    if signals.has_payment_before_completion:
        pairs.append((
            f"{STATUTE_FINAL_PAYMENT} - Final payment tied to completion",
            "Can final payment be tied to inspection approval?",
        ))
    if not signals.has_compliance_identifier and not signals.has_noa_number:
        pairs.append((
            f"{STATUTE_PRODUCT_APPROVAL} - NOA documentation required",
            "What are the NOA or Florida Product Approval numbers for the windows?",
        ))

    return pairs


def _gap_questions(signals: ExtractionSignals) -> list[str]:
    questions: list[str] = []

    if signals.has_tempered_only_risk and not signals.has_laminated_mention:
        questions.append("Are these impact-rated laminated windows or just tempered glass?")
    if not signals.has_permit_mention:
        questions.append("Who is responsible for pulling permits and scheduling inspections?")
    if not signals.has_wall_repair_mention:
        questions.append("What wall repair is included (stucco, drywall, paint)?")
    if not signals.has_labor_warranty:
        questions.append("What is the labor/workmanship warranty period?")
    if signals.has_subject_to_change:
        questions.append("What specifically could cause the price to change after signing?")

    return questions


def _positive_findings(signals: ExtractionSignals, overall_score: int) -> list[str]:
    if overall_score >= POSITIVE_FINDINGS_FULL_THRESHOLD:
        checks = [
            (signals.license_number_present, "License number visible and verifiable"),
            (
                signals.has_noa_number or signals.has_compliance_identifier,
                "Product approval numbers included",
            ),
            (signals.has_detailed_scope, "Installation scope is well-documented"),
            (signals.has_labor_warranty, "Labor warranty specified"),
            (
                signals.has_laminated_mention and signals.has_glass_build_detail,
                "Impact glass specifications clearly stated",
            ),
            (signals.has_permit_mention, "Permit responsibilities addressed"),
            (signals.has_safe_payment_terms, "Payment tied to completion/inspection"),
            (signals.has_brand_clarity, "Window brand and type clearly identified"),
        ]
    elif overall_score >= POSITIVE_FINDINGS_REDUCED_THRESHOLD:
        checks = [
            (signals.license_number_present, "License number visible"),
            (signals.has_brand_clarity, "Window brand identified"),
            (signals.has_permit_mention, "Permit responsibilities mentioned"),
        ]
    else:
        checks = []

    return [finding for present, finding in checks if present]


def generate_forensic_summary(signals: ExtractionSignals, scored: ScoredResult) -> ForensicSummary:
    """Build the forensic explanation for a scored quote.

    Args:
        signals: The signals the score was computed from
        scored: Completed scored result, hard cap included

    Returns:
        ForensicSummary with length-capped citation, question and finding lists
    """
    hard_cap = scored.hard_cap
    citations: list[str] = []
    questions: list[str] = []

    if hard_cap.applied and hard_cap.statute and hard_cap.reason:
        citations.append(f"{hard_cap.statute} - {hard_cap.reason}")

    for citation, question in _signal_citations(signals):
        citations.append(citation)
        questions.append(question)

    questions.extend(_gap_questions(signals))

    risk_level = classify_risk(scored.overall_score)
    if hard_cap.applied:
        headline = f"Score capped at {hard_cap.ceiling} due to: {hard_cap.reason}"
    else:
        headline = RISK_HEADLINES[risk_level]

    return ForensicSummary(
        headline=headline,
        risk_level=risk_level,
        statute_citations=tuple(citations[:MAX_STATUTE_CITATIONS]),
        questions_to_ask=tuple(questions[:MAX_QUESTIONS]),
        positive_findings=tuple(
            _positive_findings(signals, scored.overall_score)[:MAX_POSITIVE_FINDINGS]
        ),
        hard_cap_applied=hard_cap.applied,
        hard_cap_reason=hard_cap.reason,
        hard_cap_statute=hard_cap.statute,
    )


def extract_identity(signals: ExtractionSignals) -> ExtractedIdentity:
    """Project contractor identity fields; blank strings count as absent."""
    noa_numbers = (signals.noa_number_value,) if signals.noa_number_value else ()
    return ExtractedIdentity(
        contractor_name=signals.contractor_name_extracted or None,
        license_number=signals.license_number_value or None,
        noa_numbers=noa_numbers,
    )
