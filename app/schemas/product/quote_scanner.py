"""Data contracts for the quote scanner.

Input is the signal set produced by the document extraction step; output is
the (scored result, forensic summary, extracted identity) triple. Every
model is frozen and serializes with camelCase aliases, which is the shape
the extractor fills in and the consumers read.
"""

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel


Score = Annotated[int, Field(ge=0, le=100)]
ContextText = Annotated[str, StringConstraints(max_length=500)]


class QuoteScannerModel(BaseModel):
    """Base for quote scanner contracts: frozen, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RiskLevel(str, Enum):
    """Risk tier derived from the final overall score."""

    CRITICAL = "critical"
    HIGH = "high"
    MODERATE = "moderate"
    ACCEPTABLE = "acceptable"


class ExtractionSignals(QuoteScannerModel):
    """Independent observations about one uploaded quote document.

    Only ``isValidQuote`` is required. Flags default to False and values
    default to None, so an absent number or string stays distinguishable
    from a false flag. Types are checked strictly: ``"60"`` is not a
    deposit percentage and ``1`` is not a boolean.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        strict=True,
        extra="forbid",
        allow_inf_nan=False,
    )

    # Document validity
    is_valid_quote: bool = Field(..., description="Document is a window/door quote")
    validity_reason: str = Field("", description="Why the document is or is not a quote")

    # Pricing
    total_price_found: bool = False
    total_price_value: Optional[float] = Field(None, ge=0)
    opening_count_estimate: Optional[int] = Field(None, ge=0)

    # Safety / compliance
    has_compliance_keyword: bool = False
    has_compliance_identifier: bool = False
    has_noa_number: bool = Field(False, alias="hasNOANumber")
    noa_number_value: Optional[str] = None
    has_laminated_mention: bool = False
    has_glass_build_detail: bool = False
    has_tempered_only_risk: bool = False
    has_non_impact_language: bool = False

    # Contractor identity
    license_number_present: bool = False
    license_number_value: Optional[str] = None
    has_owner_builder_language: bool = False
    contractor_name_extracted: Optional[str] = None

    # Scope
    has_permit_mention: bool = False
    has_demo_install_detail: bool = False
    has_specific_materials: bool = False
    has_wall_repair_mention: bool = False
    has_finish_detail: bool = False
    has_cleanup_mention: bool = False
    has_brand_clarity: bool = False
    has_detailed_scope: bool = False
    has_subject_to_change: bool = False
    has_repairs_excluded: bool = False
    has_standard_installation: bool = False

    # Fine print
    deposit_percentage: Optional[float] = Field(None, ge=0, le=100)
    has_final_payment_trap: bool = False
    has_safe_payment_terms: bool = False
    has_payment_before_completion: bool = False
    has_contract_traps: bool = False
    contract_traps_list: list[str] = Field(default_factory=list)
    has_manager_discount: bool = False

    # Warranty
    has_warranty_mention: bool = False
    has_labor_warranty: bool = False
    warranty_duration_years: Optional[float] = Field(None, ge=0)
    has_lifetime_warranty: bool = False
    has_transferable_warranty: bool = False
    has_premium_indicators: bool = False

    @classmethod
    def json_schema(cls) -> dict[str, Any]:
        """JSON schema handed to the extractor for structured output."""
        return cls.model_json_schema(by_alias=True)


class HardCapResult(QuoteScannerModel):
    """Ceiling imposed on the overall score by a consumer-protection rule."""

    applied: bool = False
    ceiling: Score = 100
    reason: Optional[str] = None
    statute: Optional[str] = None


class AnalysisContext(QuoteScannerModel):
    """Score context handed to follow-up consumers (email, phone script, Q&A).

    Unknown keys are kept as-is.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    overall_score: Optional[Score] = None
    safety_score: Optional[Score] = None
    scope_score: Optional[Score] = None
    price_score: Optional[Score] = None
    fine_print_score: Optional[Score] = None
    warranty_score: Optional[Score] = None
    price_per_opening: Optional[str] = Field(None, max_length=50)
    warnings: Optional[list[ContextText]] = Field(None, max_length=10)
    missing_items: Optional[list[ContextText]] = Field(None, max_length=10)
    summary: Optional[str] = Field(None, max_length=1000)


class ScoredResult(QuoteScannerModel):
    """Graded assessment of one quote."""

    overall_score: Score
    safety_score: Score
    scope_score: Score
    price_score: Score
    fine_print_score: Score
    warranty_score: Score
    price_per_opening: str = "N/A"
    warnings: tuple[str, ...] = Field(default=(), max_length=6)
    missing_items: tuple[str, ...] = Field(default=(), max_length=6)
    summary: str
    hard_cap: HardCapResult = Field(default_factory=HardCapResult)

    def to_context(self) -> AnalysisContext:
        """Project the scores into the follow-up analysis context."""
        return AnalysisContext(
            overall_score=self.overall_score,
            safety_score=self.safety_score,
            scope_score=self.scope_score,
            price_score=self.price_score,
            fine_print_score=self.fine_print_score,
            warranty_score=self.warranty_score,
            price_per_opening=self.price_per_opening,
            warnings=list(self.warnings),
            missing_items=list(self.missing_items),
            summary=self.summary,
        )


class ForensicSummary(QuoteScannerModel):
    """Human-readable explanation of a completed score."""

    headline: str
    risk_level: RiskLevel
    statute_citations: tuple[str, ...] = Field(default=(), max_length=4)
    questions_to_ask: tuple[str, ...] = Field(default=(), max_length=5)
    positive_findings: tuple[str, ...] = Field(default=(), max_length=5)
    hard_cap_applied: bool = False
    hard_cap_reason: Optional[str] = None
    hard_cap_statute: Optional[str] = None


class ExtractedIdentity(QuoteScannerModel):
    """Contractor identity fields read off the quote, for display only."""

    contractor_name: Optional[str] = None
    license_number: Optional[str] = None
    noa_numbers: tuple[str, ...] = ()


class QuoteAnalysis(QuoteScannerModel):
    """Complete output of one scoring request."""

    scored: ScoredResult
    forensic: ForensicSummary
    extracted_identity: ExtractedIdentity

    def to_payload(self) -> dict[str, Any]:
        """Flat response payload: scores at the top level, explanations nested."""
        scored = self.scored.model_dump(mode="json", by_alias=True, exclude={"hard_cap"})
        return {
            "overallScore": scored["overallScore"],
            "safetyScore": scored["safetyScore"],
            "scopeScore": scored["scopeScore"],
            "priceScore": scored["priceScore"],
            "finePrintScore": scored["finePrintScore"],
            "warrantyScore": scored["warrantyScore"],
            "pricePerOpening": scored["pricePerOpening"],
            "warnings": scored["warnings"],
            "missingItems": scored["missingItems"],
            "summary": scored["summary"],
            "forensic": self.forensic.model_dump(mode="json", by_alias=True),
            "extractedIdentity": self.extracted_identity.model_dump(mode="json", by_alias=True),
        }
