"""Hard caps aligned with Florida consumer-protection statutes.

The rules form an ordered table that is folded left to right starting from
a ceiling of 100. A rule only takes effect when it strictly lowers the
current ceiling, and only then does it replace the reported reason and
statute and contribute its warning. When two rules share a ceiling the
earlier one keeps the reason.
"""

from app.schemas.product.quote_scanner import ExtractionSignals, HardCapResult
from app.services.product.quote_scanner.constants import (
    HARD_CAP_DEPOSIT,
    HARD_CAP_DEPOSIT_THRESHOLD,
    HARD_CAP_NO_LICENSE,
    HARD_CAP_OWNER_BUILDER,
    HARD_CAP_PAYMENT_BEFORE_COMPLETION,
    HARD_CAP_TEMPERED_ONLY,
    STATUTE_ADVANCE_PAYMENT,
    STATUTE_FINAL_PAYMENT,
    STATUTE_LICENSE,
    STATUTE_OWNER_BUILDER,
)
from app.services.product.quote_scanner.contracts import HardCapEvaluation, HardCapRule
from app.utils.logging import get_logger

LOGGER = get_logger(__name__)


def _format_percentage(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _deposit_exceeds_threshold(signals: ExtractionSignals) -> bool:
    return (
        signals.deposit_percentage is not None
        and signals.deposit_percentage > HARD_CAP_DEPOSIT_THRESHOLD
    )


HARD_CAP_RULES: tuple[HardCapRule, ...] = (
    HardCapRule(
        name="missing_license",
        applies=lambda s: not s.license_number_present,
        ceiling=HARD_CAP_NO_LICENSE,
        reason=lambda s: "No contractor license number visible",
        statute=STATUTE_LICENSE,
        warning=lambda s: (
            "CRITICAL: No license # found. Per F.S. 489.119, all Florida contractors "
            "must display their license number."
        ),
    ),
    HardCapRule(
        name="owner_builder",
        applies=lambda s: s.has_owner_builder_language,
        ceiling=HARD_CAP_OWNER_BUILDER,
        reason=lambda s: "Owner-Builder language transfers all liability to homeowner",
        statute=STATUTE_OWNER_BUILDER,
        warning=lambda s: "CRITICAL: 'Owner-Builder' language transfers ALL liability to you.",
    ),
    HardCapRule(
        name="excessive_deposit",
        applies=_deposit_exceeds_threshold,
        ceiling=HARD_CAP_DEPOSIT,
        reason=lambda s: (
            f"Deposit of {_format_percentage(s.deposit_percentage)}% exceeds 50%"
        ),
        statute=STATUTE_ADVANCE_PAYMENT,
        warning=lambda s: (
            f"HIGH RISK: {_format_percentage(s.deposit_percentage)}% deposit exceeds safe threshold."
        ),
    ),
    HardCapRule(
        name="tempered_only_glass",
        applies=lambda s: s.has_tempered_only_risk and not s.has_laminated_mention,
        ceiling=HARD_CAP_TEMPERED_ONLY,
        reason=lambda s: "Tempered glass without impact/laminated specification",
        statute=None,
        warning=lambda s: (
            "CRITICAL: Quote mentions 'tempered' glass but NO impact/laminated language."
        ),
    ),
    HardCapRule(
        name="payment_before_completion",
        applies=lambda s: s.has_payment_before_completion,
        ceiling=HARD_CAP_PAYMENT_BEFORE_COMPLETION,
        reason=lambda s: "Full payment required before work completion",
        statute=STATUTE_FINAL_PAYMENT,
        warning=lambda s: (
            "HIGH RISK: Contract requires full payment before work is complete. Per F.S. "
            "489.126, final payment should be tied to satisfactory completion."
        ),
    ),
)


def evaluate_hard_caps(
    signals: ExtractionSignals,
    rules: tuple[HardCapRule, ...] = HARD_CAP_RULES,
) -> HardCapEvaluation:
    """Fold the ordered rule table into a single ceiling.

    Args:
        signals: Validated extraction signals
        rules: Ordered rule table (defaults to the statute rules)

    Returns:
        HardCapEvaluation with the resulting ceiling and the warnings of
        every rule that tightened it, in rule order
    """
    ceiling = 100
    reason = None
    statute = None
    warnings: list[str] = []

    for rule in rules:
        if not rule.applies(signals) or rule.ceiling >= ceiling:
            continue
        ceiling = rule.ceiling
        reason = rule.reason(signals)
        statute = rule.statute
        warnings.append(rule.warning(signals))
        LOGGER.debug(f"Hard cap rule '{rule.name}' tightened ceiling to {ceiling}")

    result = HardCapResult(
        applied=ceiling < 100,
        ceiling=ceiling,
        reason=reason,
        statute=statute,
    )
    return HardCapEvaluation(result=result, warnings=tuple(warnings))
