from .product.quote_scanner import (
    AnalysisContext,
    ExtractedIdentity,
    ExtractionSignals,
    ForensicSummary,
    HardCapResult,
    QuoteAnalysis,
    RiskLevel,
    ScoredResult,
)

__all__ = [
    "AnalysisContext",
    "ExtractedIdentity",
    "ExtractionSignals",
    "ForensicSummary",
    "HardCapResult",
    "QuoteAnalysis",
    "RiskLevel",
    "ScoredResult",
]
