"""
Adjustment Factor Calculator

Four independent multiplicative corrections applied uniformly to every
method's raw value: growth, risk, market position and company size.
Only the risk factor has a hard floor (0.7).
"""

from __future__ import annotations

import logging

from appraiser.domain.models.valuation import (
    AdjustmentFactors,
    GrowthStage,
    MarketPosition,
    MarketSize,
    RiskLevel,
    ValuationInput,
)
from appraiser.domain.services.valuation.helpers import growth_rate

logger = logging.getLogger(__name__)

STAGE_MULTIPLIERS = {
    GrowthStage.STARTUP: 1.2,
    GrowthStage.GROWTH: 1.1,
    GrowthStage.MATURE: 1.0,
    GrowthStage.DECLINE: 0.8,
}

POSITION_MULTIPLIERS = {
    MarketPosition.LEADER: 1.2,
    MarketPosition.CHALLENGER: 1.1,
    MarketPosition.FOLLOWER: 1.0,
    MarketPosition.NICHE: 0.95,
}

MARKET_SIZE_MULTIPLIERS = {
    MarketSize.MASSIVE: 1.1,
    MarketSize.LARGE: 1.05,
    MarketSize.MEDIUM: 1.0,
    MarketSize.SMALL: 0.95,
}

# (exclusive lower bound, multiplier), evaluated top-down
GROWTH_BUCKETS = (
    (0.30, 1.3),
    (0.15, 1.15),
    (0.05, 1.05),
)
DECLINING_GROWTH_MULTIPLIER = 0.9

REVENUE_SIZE_BUCKETS = (
    (100_000_000, 1.1),
    (50_000_000, 1.05),
    (10_000_000, 1.0),
    (1_000_000, 0.95),
)
SMALL_COMPANY_MULTIPLIER = 0.9

RISK_PER_FACTOR = 0.02
CONCENTRATION_RISK = {RiskLevel.HIGH: 0.10, RiskLevel.MEDIUM: 0.05}
REGULATORY_RISK = {RiskLevel.HIGH: 0.08, RiskLevel.MEDIUM: 0.04}
RISK_ADJUSTMENT_FLOOR = 0.7


def _bucket(value: float, buckets, default: float) -> float:
    for threshold, multiplier in buckets:
        if value > threshold:
            return multiplier
    return default


def growth_adjustment(valuation_input: ValuationInput) -> float:
    base = _bucket(growth_rate(valuation_input), GROWTH_BUCKETS, DECLINING_GROWTH_MULTIPLIER)
    return base * STAGE_MULTIPLIERS[valuation_input.qualitative.growth_stage]


def risk_adjustment(valuation_input: ValuationInput) -> float:
    qualitative = valuation_input.qualitative

    risk_score = qualitative.risk_factor_count * RISK_PER_FACTOR
    risk_score += CONCENTRATION_RISK.get(qualitative.customer_concentration, 0.0)
    risk_score += REGULATORY_RISK.get(qualitative.regulatory_risk, 0.0)

    return max(RISK_ADJUSTMENT_FLOOR, 1 - risk_score)


def market_position_adjustment(valuation_input: ValuationInput) -> float:
    qualitative = valuation_input.qualitative
    return POSITION_MULTIPLIERS[qualitative.market_position] * MARKET_SIZE_MULTIPLIERS[qualitative.market_size]


def size_adjustment(valuation_input: ValuationInput) -> float:
    return _bucket(valuation_input.financials.annual_revenue, REVENUE_SIZE_BUCKETS, SMALL_COMPANY_MULTIPLIER)


def calculate_adjustment_factors(valuation_input: ValuationInput) -> AdjustmentFactors:
    factors = AdjustmentFactors(
        growth_adjustment=growth_adjustment(valuation_input),
        risk_adjustment=risk_adjustment(valuation_input),
        market_position_adjustment=market_position_adjustment(valuation_input),
        size_adjustment=size_adjustment(valuation_input),
    )
    logger.debug(
        f"Adjustment factors: growth={factors.growth_adjustment:.3f}, risk={factors.risk_adjustment:.3f}, "
        f"market={factors.market_position_adjustment:.3f}, size={factors.size_adjustment:.3f} "
        f"(combined={factors.combined:.4f})"
    )
    return factors
