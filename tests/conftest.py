"""Pytest configuration and shared fixtures."""

from typing import Any, Callable

import pytest

from app.config import Settings
from app.schemas.product.quote_scanner import ExtractionSignals
from app.services.product.quote_scanner import QuoteScannerService


FAVORABLE_SIGNALS: dict[str, Any] = {
    "isValidQuote": True,
    "validityReason": "Impact window proposal with line items and total",
    "totalPriceFound": True,
    "totalPriceValue": 15000,
    "openingCountEstimate": 10,
    "hasComplianceKeyword": True,
    "hasComplianceIdentifier": True,
    "hasNOANumber": True,
    "noaNumberValue": "NOA 20-1234.05",
    "hasLaminatedMention": True,
    "hasGlassBuildDetail": True,
    "hasTemperedOnlyRisk": False,
    "hasNonImpactLanguage": False,
    "licenseNumberPresent": True,
    "licenseNumberValue": "CGC1523456",
    "hasOwnerBuilderLanguage": False,
    "contractorNameExtracted": "Coastal Impact Windows LLC",
    "hasPermitMention": True,
    "hasDemoInstallDetail": True,
    "hasSpecificMaterials": True,
    "hasWallRepairMention": True,
    "hasFinishDetail": True,
    "hasCleanupMention": True,
    "hasBrandClarity": True,
    "hasDetailedScope": True,
    "hasSubjectToChange": False,
    "hasRepairsExcluded": False,
    "hasStandardInstallation": False,
    "depositPercentage": 5,
    "hasFinalPaymentTrap": False,
    "hasSafePaymentTerms": True,
    "hasPaymentBeforeCompletion": False,
    "hasContractTraps": False,
    "contractTrapsList": [],
    "hasManagerDiscount": False,
    "hasWarrantyMention": True,
    "hasLaborWarranty": True,
    "warrantyDurationYears": 10,
    "hasLifetimeWarranty": True,
    "hasTransferableWarranty": True,
    "hasPremiumIndicators": False,
}


@pytest.fixture
def favorable_signals() -> dict[str, Any]:
    """Signal mapping that scores as well as the rubric allows.

    Returns:
        dict: camelCase signal mapping (a fresh copy per test)
    """
    return dict(FAVORABLE_SIGNALS)


@pytest.fixture
def make_signals() -> Callable[..., ExtractionSignals]:
    """Factory for validated signals built from the favorable baseline.

    Overrides use camelCase wire names, e.g.
    ``make_signals(licenseNumberPresent=False)``.
    """
    def _make(**overrides: Any) -> ExtractionSignals:
        data = dict(FAVORABLE_SIGNALS)
        data.update(overrides)
        return ExtractionSignals.model_validate(data)

    return _make


@pytest.fixture
def scanner_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def scanner_service(scanner_settings: Settings) -> QuoteScannerService:
    """Quote scanner service with default settings."""
    return QuoteScannerService(scanner_settings)
