import pytest

from app.services.product.quote_scanner.category_scoring_service import (
    score_fine_print,
    score_safety,
    score_scope,
    score_warranty,
)


class TestSafetyScore:

    def test_all_safety_signals(self, make_signals):
        result = score_safety(make_signals())
        assert result.score == 85
        assert result.warnings == ()
        assert result.missing_items == ()

    def test_tempered_only_risk_caps_at_30(self, make_signals):
        result = score_safety(make_signals(hasTemperedOnlyRisk=True))
        assert result.score == 30
        assert "Tempered alone isn't impact glass" in result.warnings[0]

    def test_non_impact_language_caps_at_25(self, make_signals):
        result = score_safety(make_signals(hasTemperedOnlyRisk=True, hasNonImpactLanguage=True))
        assert result.score == 25
        assert len(result.warnings) == 2

    def test_no_compliance_proof_caps_at_40_and_reports_missing(self, make_signals):
        result = score_safety(make_signals(
            hasComplianceKeyword=False,
            hasComplianceIdentifier=False,
            hasLaminatedMention=False,
        ))
        assert result.score == 10
        assert result.missing_items == (
            "No proof of impact compliance (NOA/FL#, DP, HVHZ, or laminated impact glass).",
        )

    def test_nothing_found(self, make_signals):
        result = score_safety(make_signals(
            hasComplianceKeyword=False,
            hasComplianceIdentifier=False,
            hasLaminatedMention=False,
            hasGlassBuildDetail=False,
        ))
        assert result.score == 0


class TestScopeScore:

    def test_full_scope(self, make_signals):
        result = score_scope(make_signals())
        assert result.score == 100
        assert result.missing_items == ()

    def test_subject_to_change_penalty(self, make_signals):
        result = score_scope(make_signals(hasSubjectToChange=True))
        assert result.score == 70
        assert result.warnings[0].startswith("RED FLAG")

    def test_subject_to_change_floors_at_zero(self, make_signals):
        result = score_scope(make_signals(
            hasPermitMention=False,
            hasDemoInstallDetail=False,
            hasWallRepairMention=False,
            hasFinishDetail=False,
            hasCleanupMention=False,
            hasBrandClarity=False,
            hasSubjectToChange=True,
        ))
        assert result.score == 0

    def test_standard_installation_penalty(self, make_signals):
        result = score_scope(make_signals(hasStandardInstallation=True))
        assert result.score == 90
        assert result.warnings[0].startswith("Vague")

    @pytest.mark.parametrize("overrides", [
        {"hasWallRepairMention": False},
        {"hasRepairsExcluded": True},
    ])
    def test_wall_repair_gap_reported(self, make_signals, overrides):
        result = score_scope(make_signals(**overrides))
        assert result.missing_items == (
            "Wall repair scope unclear (stucco/drywall/paint after install).",
        )


class TestFinePrintScore:

    @pytest.mark.parametrize("deposit, has_safe_terms, expected", [
        (5, False, 100),
        (0, False, 100),
        (10, False, 80),
        (40, False, 80),
        (40, True, 90),
        (41, True, 10),
    ])
    def test_deposit_tiers(self, make_signals, deposit, has_safe_terms, expected):
        result = score_fine_print(make_signals(
            depositPercentage=deposit, hasSafePaymentTerms=has_safe_terms
        ))
        assert result.score == expected

    def test_deposit_over_40_zeroes_score(self, make_signals):
        result = score_fine_print(make_signals(depositPercentage=45, hasSafePaymentTerms=False))
        assert result.score == 0
        assert "High risk: deposit exceeds 40%." in result.warnings

    def test_missing_deposit_is_missing_item_not_penalty(self, make_signals):
        result = score_fine_print(make_signals(depositPercentage=None, hasSafePaymentTerms=False))
        assert result.score == 60
        assert result.missing_items == ("Payment schedule/deposit terms not clearly stated.",)

    def test_final_payment_trap_overrides_safe_terms(self, make_signals):
        result = score_fine_print(make_signals(hasFinalPaymentTrap=True))
        assert result.score == 25
        assert result.warnings == ("Risky: final payment due before inspection/permit close.",)

    def test_contract_traps_deduction_capped(self, make_signals):
        traps = ["arbitration clause", "cancellation fee", "auto-renewal", "lien waiver"]
        result = score_fine_print(make_signals(hasContractTraps=True, contractTrapsList=traps))
        assert result.score == 70
        assert result.warnings == (
            "Contract contains: arbitration clause, cancellation fee, auto-renewal.",
        )

    def test_contract_traps_flag_without_list_is_ignored(self, make_signals):
        result = score_fine_print(make_signals(hasContractTraps=True, contractTrapsList=[]))
        assert result.score == 100
        assert result.warnings == ()

    def test_manager_discount_penalty(self, make_signals):
        result = score_fine_print(make_signals(hasManagerDiscount=True))
        assert result.score == 85
        assert result.warnings[0].startswith("Caution: Time-pressure language")


class TestWarrantyScore:

    def test_full_warranty_clamped_to_100(self, make_signals):
        assert score_warranty(make_signals()).score == 100

    @pytest.mark.parametrize("years, expected", [(None, 30), (1, 30), (1.5, 45), (5, 45)])
    def test_duration_bonus(self, make_signals, years, expected):
        result = score_warranty(make_signals(
            hasLaborWarranty=False,
            hasLifetimeWarranty=False,
            hasTransferableWarranty=False,
            warrantyDurationYears=years,
        ))
        assert result.score == expected

    def test_no_warranty_reported_missing(self, make_signals):
        result = score_warranty(make_signals(
            hasWarrantyMention=False,
            hasLaborWarranty=False,
            hasLifetimeWarranty=False,
            hasTransferableWarranty=False,
            warrantyDurationYears=None,
        ))
        assert result.score == 0
        assert result.missing_items == (
            "No warranty terms stated (labor/workmanship + manufacturer coverage).",
        )
