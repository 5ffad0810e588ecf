import pytest

from app.services.product.quote_scanner.contracts import PricePerOpening
from app.services.product.quote_scanner.price_service import (
    compute_price_per_opening,
    price_band_score,
    round_half_up,
    score_price,
)


class TestPricePerOpening:

    def test_exact_quotient(self, make_signals):
        ppo = compute_price_per_opening(make_signals(totalPriceValue=12000, openingCountEstimate=10))
        assert ppo.value == 1200
        assert ppo.display == "$1,200"

    @pytest.mark.parametrize("total, expected", [
        (12240, 1200),   # 1224 -> 1200
        (12250, 1250),   # 1225 rounds half up
        (12260, 1250),   # 1226 -> 1250
    ])
    def test_rounds_to_nearest_50(self, make_signals, total, expected):
        ppo = compute_price_per_opening(make_signals(totalPriceValue=total, openingCountEstimate=10))
        assert ppo.value == expected

    def test_extracted_count_beats_hint(self, make_signals):
        ppo = compute_price_per_opening(
            make_signals(totalPriceValue=12000, openingCountEstimate=10), opening_count_hint=4
        )
        assert ppo.value == 1200

    def test_hint_used_when_count_absent(self, make_signals):
        ppo = compute_price_per_opening(
            make_signals(totalPriceValue=12000, openingCountEstimate=None), opening_count_hint=4
        )
        assert ppo.value == 3000
        assert ppo.display == "$3,000"

    @pytest.mark.parametrize("overrides, hint", [
        ({"totalPriceFound": False}, None),
        ({"totalPriceValue": None}, None),
        ({"totalPriceValue": 0}, None),
        ({"openingCountEstimate": None}, None),
        ({"openingCountEstimate": 0}, None),
    ])
    def test_not_computable(self, make_signals, overrides, hint):
        ppo = compute_price_per_opening(make_signals(**overrides), opening_count_hint=hint)
        assert ppo.value is None
        assert ppo.display == "N/A"


class TestPriceBands:

    @pytest.mark.parametrize("value, expected", [
        (950, 40),
        (1000, 65),
        (1150, 65),
        (1200, 95),
        (1800, 95),
        (1850, 75),
        (2500, 75),
        (2550, 55),
        (6000, 55),
    ])
    def test_sweet_spot_bands(self, value, expected):
        assert price_band_score(value) == expected

    def test_premium_indicators_only_lift_top_band(self):
        assert price_band_score(3000, has_premium_indicators=True) == 65
        assert price_band_score(1500, has_premium_indicators=True) == 95
        assert price_band_score(900, has_premium_indicators=True) == 40

    def test_score_price_defaults_when_not_computable(self, make_signals):
        result = score_price(make_signals(), PricePerOpening())
        assert result.score == 40
        assert result.missing_items == (
            "Could not compute price per opening (missing total price or opening count).",
        )

    def test_score_price_for_1200(self, make_signals):
        result = score_price(make_signals(), PricePerOpening(value=1200))
        assert result.score == 95
        assert result.missing_items == ()


@pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (94.5, 95)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
