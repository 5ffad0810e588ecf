"""Contracts (intermediate results) passed between quote scanner stages."""

from dataclasses import dataclass, field
from typing import Callable, Optional

from app.schemas.product.quote_scanner import ExtractionSignals, HardCapResult
from app.services.product.quote_scanner.constants import NOT_AVAILABLE


@dataclass(frozen=True)
class CategoryScore:
    """Score for one category plus the findings it produced."""
    score: int
    warnings: tuple[str, ...] = ()
    missing_items: tuple[str, ...] = ()


@dataclass(frozen=True)
class PricePerOpening:
    """Rounded unit price, or no value when it could not be computed."""
    value: Optional[int] = None

    @property
    def display(self) -> str:
        if self.value is None:
            return NOT_AVAILABLE
        return f"${self.value:,}"


@dataclass(frozen=True)
class HardCapRule:
    """One consumer-protection rule in the ordered hard cap table."""
    name: str
    applies: Callable[[ExtractionSignals], bool]
    ceiling: int
    reason: Callable[[ExtractionSignals], str]
    statute: Optional[str]
    warning: Callable[[ExtractionSignals], str]


@dataclass(frozen=True)
class HardCapEvaluation:
    """Hard cap outcome plus the warnings of every rule that fired."""
    result: HardCapResult
    warnings: tuple[str, ...] = field(default_factory=tuple)
