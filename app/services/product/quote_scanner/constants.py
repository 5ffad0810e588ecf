"""
Quote Scanner Constants

Fixed scoring parameters for the window/door quote grader:
- Category weights for the overall score
- Point values per category signal
- Price-per-opening band table
- Hard cap ceilings and Florida statute references
- Output list caps and fixed-wording text

These are deliberately not configurable. Identical signals must grade
identically on every deployment.
"""

# Category weights (sum to 1.0)
CATEGORY_WEIGHTS: dict[str, float] = {
    "safety": 0.30,
    "scope": 0.25,
    "price": 0.20,
    "fine_print": 0.15,
    "warranty": 0.10,
}

# Curve: scores above the knee are compressed toward the top
CURVE_KNEE = 70
CURVE_SPAN = 30
CURVE_EXPONENT = 1.8

# Output list caps
MAX_WARNINGS = 6
MAX_MISSING_ITEMS = 6
MAX_STATUTE_CITATIONS = 4
MAX_QUESTIONS = 5
MAX_POSITIVE_FINDINGS = 5
MAX_CONTRACT_TRAPS_NAMED = 3

NOT_AVAILABLE = "N/A"

# ── Safety ────────────────────────────────────────────────────────
SAFETY_POINTS = {
    "has_compliance_keyword": 25,
    "has_compliance_identifier": 25,
    "has_laminated_mention": 25,
    "has_glass_build_detail": 10,
}
SAFETY_TEMPERED_ONLY_CAP = 30
SAFETY_NON_IMPACT_CAP = 25
SAFETY_NO_PROOF_CAP = 40

# ── Scope ─────────────────────────────────────────────────────────
SCOPE_POINTS = {
    "has_permit_mention": 20,
    "has_demo_install_detail": 15,
    "has_specific_materials": 10,
    "has_wall_repair_mention": 15,
    "has_finish_detail": 10,
    "has_cleanup_mention": 15,
    "has_brand_clarity": 15,
}
SCOPE_SUBJECT_TO_CHANGE_PENALTY = 30
SCOPE_STANDARD_INSTALLATION_PENALTY = 10

# ── Fine print ────────────────────────────────────────────────────
FINE_PRINT_BASE = 60
FINE_PRINT_DEPOSIT_HIGH_RISK = 40  # deposit above this zeroes the category
FINE_PRINT_DEPOSIT_MODERATE = 10  # deposit at or above this is "moderate"
FINE_PRINT_MODERATE_BONUS = 20
FINE_PRINT_MODERATE_CEILING = 80
FINE_PRINT_LOW_BONUS = 40
FINE_PRINT_FINAL_PAYMENT_TRAP_CAP = 25
FINE_PRINT_SAFE_TERMS_BONUS = 10
FINE_PRINT_PER_TRAP_PENALTY = 10
FINE_PRINT_MAX_TRAP_PENALTY = 30
FINE_PRINT_URGENCY_PENALTY = 15

# ── Warranty ──────────────────────────────────────────────────────
WARRANTY_POINTS = {
    "has_warranty_mention": 30,
    "has_labor_warranty": 40,
    "has_lifetime_warranty": 15,
    "has_transferable_warranty": 10,
}
WARRANTY_MULTI_YEAR_POINTS = 15
WARRANTY_MULTI_YEAR_THRESHOLD = 1

# ── Price ─────────────────────────────────────────────────────────
PRICE_ROUNDING_STEP = 50
PRICE_DEFAULT_SCORE = 40

# (upper bound, inclusive?, score) in ascending order; the sweet spot sits
# in the middle, so the table is not monotonic.
PRICE_BANDS: list[tuple[float, bool, int]] = [
    (1000, False, 40),
    (1200, False, 65),
    (1800, True, 95),
    (2500, True, 75),
]
PRICE_ABOVE_BANDS_SCORE = 55
PRICE_PREMIUM_BONUS = 10
PRICE_PREMIUM_CEILING = 75

# ── Hard caps ─────────────────────────────────────────────────────
HARD_CAP_NO_LICENSE = 25
HARD_CAP_OWNER_BUILDER = 25
HARD_CAP_DEPOSIT_THRESHOLD = 50
HARD_CAP_DEPOSIT = 55
HARD_CAP_TEMPERED_ONLY = 30
HARD_CAP_PAYMENT_BEFORE_COMPLETION = 40

STATUTE_LICENSE = "F.S. 489.119"
STATUTE_OWNER_BUILDER = "F.S. 489.103"
STATUTE_ADVANCE_PAYMENT = "F.S. 501.137"
STATUTE_FINAL_PAYMENT = "F.S. 489.126"
STATUTE_PRODUCT_APPROVAL = "FL Building Code Section 1626"

# ── Summary thresholds ────────────────────────────────────────────
# Checked in this order; the first category that is both the lowest score
# and under its threshold sets the summary.
CATEGORY_SUMMARY_THRESHOLDS: list[tuple[str, int, str]] = [
    (
        "safety",
        50,
        "Quote lacks impact compliance proof—verify NOA/FL approval and laminated glass before signing.",
    ),
    (
        "fine_print",
        50,
        "Risky payment terms or contract traps detected—review deposit and final payment conditions.",
    ),
    (
        "scope",
        50,
        "Scope is vague—get written clarification on permits, installation details, and wall repairs.",
    ),
    (
        "warranty",
        50,
        "Warranty terms unclear or missing—request written labor and manufacturer warranty details.",
    ),
    (
        "price",
        60,
        "Price may be outside typical market range—compare with other quotes and verify scope.",
    ),
]

SUMMARY_COMPREHENSIVE_THRESHOLD = 80
SUMMARY_ACCEPTABLE_THRESHOLD = 60
SUMMARY_COMPREHENSIVE = "Quote appears comprehensive with good compliance documentation and fair terms."
SUMMARY_ACCEPTABLE = "Quote is acceptable but has some gaps—review warnings and missing items before signing."
SUMMARY_CONCERNS = "Quote has significant concerns—address warnings and missing items before proceeding."

# ── Invalid document ──────────────────────────────────────────────
INVALID_DOCUMENT_WARNING = (
    "Not a window/door quote. Upload a contractor proposal/estimate for windows/doors."
)
INVALID_DOCUMENT_SUMMARY = "No grading performed because this is not a window/door quote."

# ── Risk tiers (inclusive upper bounds) ───────────────────────────
RISK_CRITICAL_MAX = 30
RISK_HIGH_MAX = 50
RISK_MODERATE_MAX = 70

POSITIVE_FINDINGS_FULL_THRESHOLD = 75
POSITIVE_FINDINGS_REDUCED_THRESHOLD = 60
