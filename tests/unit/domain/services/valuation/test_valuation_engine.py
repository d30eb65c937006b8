"""
Unit tests for the valuation engine entry point.

Covers the end-to-end properties of a calculation: determinism, weighted
mean bounds, confidence bounds, industry fallback and sign preservation.
"""

import dataclasses
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest

from appraiser import calculate_valuation
from appraiser.domain.models.valuation import GrowthStage, MarketPosition, RiskLevel, ValuationMethodName
from appraiser.domain.services.valuation.engine import ValuationEngine
from appraiser.domain.services.valuation.industry_data import INDUSTRY_MULTIPLIERS


def without_timestamp(result):
    return dataclasses.replace(result, evaluation_date="")


class TestRetailScenario:
    """Flat-growth $1M retailer with neutral qualitative factors."""

    def test_revenue_multiple_adjusted_value(self, retail_input):
        result = calculate_valuation(retail_input)
        revenue_method = result.method(ValuationMethodName.REVENUE_MULTIPLE)

        # 1.2x multiple, 0.9 growth (0% bucket), 1.0 risk, 1.0 market, 0.9 size ($1M is not > $1M)
        assert revenue_method.value == pytest.approx(972_000)

    def test_factors(self, retail_input):
        factors = calculate_valuation(retail_input).adjustment_factors

        assert factors.growth_adjustment == pytest.approx(0.9)
        assert factors.risk_adjustment == pytest.approx(1.0)
        assert factors.market_position_adjustment == pytest.approx(1.0)
        assert factors.size_adjustment == 0.9

    def test_implied_revenue_multiple_ignores_adjustments(self, retail_input):
        result = calculate_valuation(retail_input)

        # Retail average multiple, not the 0.972 adjusted figure
        assert result.key_metrics.revenue_multiple == pytest.approx(1.2)


class TestKnownGoodInput:
    def test_every_method_carries_all_factors(self, valuation_input):
        engine = ValuationEngine(valuation_input)
        raw = engine.calculate_all_methods()
        result = engine.calculate_valuation()
        combined = result.adjustment_factors.combined

        for raw_method, adjusted in zip(raw, result.methods):
            assert adjusted.name == raw_method.name
            assert adjusted.value == pytest.approx(raw_method.value * combined)
            assert adjusted.confidence == raw_method.confidence

    def test_implied_revenue_multiple_is_industry_average(self, valuation_input):
        result = calculate_valuation(valuation_input)
        assert result.key_metrics.revenue_multiple == pytest.approx(8.0)

    def test_overall_confidence(self, valuation_input):
        result = calculate_valuation(valuation_input)
        assert result.confidence_score == pytest.approx((95 * 3 + 75 + 80) / 5)

    def test_overall_valuation_is_confidence_weighted(self, valuation_input):
        result = calculate_valuation(valuation_input)
        expected = sum(m.value * m.confidence for m in result.methods) / sum(m.confidence for m in result.methods)
        assert result.overall_valuation == pytest.approx(expected)

    def test_identity_and_passthrough(self, valuation_input):
        result = calculate_valuation(valuation_input)

        assert result.company_name == "Acme Analytics"
        assert result.industry == "Technology - Software"
        assert result.risk_factors == ("Key person dependency", "Competitive pressure")
        assert result.recommendations == ()
        assert len(result.methods) == 5

    def test_evaluation_date_is_iso8601(self, valuation_input):
        result = calculate_valuation(valuation_input)
        parsed = datetime.fromisoformat(result.evaluation_date)
        assert parsed.tzinfo is not None

    def test_input_not_mutated(self, valuation_input):
        snapshot = dataclasses.replace(valuation_input)
        calculate_valuation(valuation_input)
        assert valuation_input == snapshot


class TestProperties:
    """Properties that must hold for any input."""

    @pytest.fixture
    def inputs(self, make_input, make_retail_input):
        return [
            make_input(),
            make_retail_input(),
            make_input(industry="NonexistentIndustry", previous_year_revenue=0),
            make_input(annual_revenue=250_000_000, previous_year_revenue=150_000_000, growth_stage=GrowthStage.STARTUP),
            make_input(net_income=-900_000, cash_flow=-300_000, growth_stage=GrowthStage.DECLINE),
            make_input(annual_revenue=0, gross_profit=0, net_income=0, total_assets=0, previous_year_revenue=0),
            make_retail_input(
                risk_factors=tuple(f"risk {i}" for i in range(20)),
                customer_concentration=RiskLevel.HIGH,
                regulatory_risk=RiskLevel.HIGH,
            ),
        ]

    def test_determinism(self, inputs):
        for valuation_input in inputs:
            first = calculate_valuation(valuation_input)
            second = calculate_valuation(valuation_input)
            assert without_timestamp(first) == without_timestamp(second)

    def test_weighted_mean_bound(self, inputs):
        for valuation_input in inputs:
            result = calculate_valuation(valuation_input)
            values = [m.value for m in result.methods]
            tolerance = 1e-9 * max(1.0, max(abs(v) for v in values))
            assert min(values) - tolerance <= result.overall_valuation <= max(values) + tolerance

    def test_confidence_bounds(self, inputs):
        for valuation_input in inputs:
            result = calculate_valuation(valuation_input)
            for method in result.methods:
                assert 0 <= method.confidence <= 100
            assert 0 <= result.confidence_score <= 100

    def test_no_nan_or_infinity(self, inputs):
        for valuation_input in inputs:
            result = calculate_valuation(valuation_input)
            numbers = [result.overall_valuation, result.confidence_score]
            numbers += [m.value for m in result.methods]
            numbers += list(result.key_metrics.to_dict().values())
            assert all(math.isfinite(n) for n in numbers)

    def test_risk_floor(self, inputs):
        for valuation_input in inputs:
            assert calculate_valuation(valuation_input).adjustment_factors.risk_adjustment >= 0.7

    def test_concurrent_calls_match_serial(self, inputs):
        serial = [without_timestamp(calculate_valuation(i)) for i in inputs]
        with ThreadPoolExecutor(max_workers=4) as executor:
            parallel = [without_timestamp(r) for r in executor.map(calculate_valuation, inputs * 3)]
        assert parallel == serial * 3


class TestIndustryFallback:
    def test_unknown_industry_uses_other_averages(self, make_input):
        unknown = ValuationEngine(make_input(industry="NonexistentIndustry")).calculate_all_methods()
        other = ValuationEngine(make_input(industry="Other")).calculate_all_methods()
        other_entry = INDUSTRY_MULTIPLIERS["Other"]

        by_name = {m.name: m for m in unknown}
        assert by_name[ValuationMethodName.REVENUE_MULTIPLE].value == pytest.approx(
            5_000_000 * other_entry.revenue_multiple.average
        )
        assert by_name[ValuationMethodName.EBITDA_MULTIPLE].value == pytest.approx(
            3_500_000 * 0.8 * other_entry.ebitda_multiple.average
        )
        assert by_name[ValuationMethodName.PE_RATIO].value == pytest.approx(750_000 * other_entry.pe_ratio.average)
        assert [m.value for m in unknown] == [m.value for m in other]

    def test_unmatched_industry_loses_confidence_bonus(self, make_input):
        unknown = ValuationEngine(make_input(industry="NonexistentIndustry", annual_revenue=900_000, previous_year_revenue=0))
        known = ValuationEngine(make_input(industry="Other", annual_revenue=900_000, previous_year_revenue=0))

        for u, k in zip(unknown.calculate_all_methods()[:3], known.calculate_all_methods()[:3]):
            assert u.confidence == k.confidence - 10

    def test_result_echoes_requested_industry(self, make_input):
        result = calculate_valuation(make_input(industry="NonexistentIndustry"))
        assert result.industry == "NonexistentIndustry"
        assert "for Other industry" in result.method(ValuationMethodName.PE_RATIO).description

    def test_custom_table(self, make_input):
        table = dict(INDUSTRY_MULTIPLIERS)
        table["Robotics"] = INDUSTRY_MULTIPLIERS["Technology - Hardware"]
        engine = ValuationEngine(make_input(industry="Robotics"), industry_table=table)

        assert engine.industry.matched is True
        assert engine.calculate_all_methods()[0].value == pytest.approx(5_000_000 * 4)


class TestNegativeValues:
    def test_negative_income_participates_in_weighted_mean(self, make_retail_input):
        result = calculate_valuation(make_retail_input(net_income=-50_000))
        pe = result.method(ValuationMethodName.PE_RATIO)

        assert pe.value == pytest.approx(-50_000 * 12 * 0.81)
        expected = sum(m.value * m.confidence for m in result.methods) / sum(m.confidence for m in result.methods)
        assert result.overall_valuation == pytest.approx(expected)

    def test_overall_valuation_can_go_negative(self, make_retail_input):
        result = calculate_valuation(
            make_retail_input(
                annual_revenue=100_000,
                previous_year_revenue=100_000,
                gross_profit=10_000,
                net_income=-500_000,
                total_assets=50_000,
                total_liabilities=400_000,
                cash_flow=-100_000,
                market_position=MarketPosition.NICHE,
            )
        )
        assert result.overall_valuation < 0


class TestSerialization:
    def test_to_dict(self, valuation_input):
        payload = calculate_valuation(valuation_input).to_dict()

        assert payload["companyName"] == "Acme Analytics"
        assert [m["name"] for m in payload["methods"]] == [
            "Revenue Multiple",
            "EBITDA Multiple",
            "P/E Ratio",
            "Asset-Based",
            "Discounted Cash Flow",
        ]
        assert set(payload["keyMetrics"]) == {
            "revenueMultiple",
            "profitMargin",
            "returnOnAssets",
            "debtToEquity",
            "growthRate",
        }
        assert payload["riskFactors"] == ["Key person dependency", "Competitive pressure"]

    def test_unknown_method_lookup(self, valuation_input):
        result = dataclasses.replace(calculate_valuation(valuation_input), methods=())
        with pytest.raises(KeyError):
            result.method(ValuationMethodName.ASSET_BASED)


class TestLogging:
    def test_blended_valuation_logged(self, valuation_input, caplog):
        with caplog.at_level(logging.INFO, logger="appraiser.domain.services.valuation.engine"):
            calculate_valuation(valuation_input)
        assert "Blended valuation" in caplog.text

    def test_fallback_logged(self, make_input, caplog):
        with caplog.at_level(logging.INFO, logger="appraiser.domain.services.valuation.engine"):
            calculate_valuation(make_input(industry="NonexistentIndustry"))
        assert "not found" in caplog.text

    def test_table_logged_at_debug(self, valuation_input, caplog):
        with caplog.at_level(logging.DEBUG, logger="appraiser.domain.services.valuation.engine"):
            calculate_valuation(valuation_input)
        assert "BUSINESS VALUATION - Acme Analytics" in caplog.text
