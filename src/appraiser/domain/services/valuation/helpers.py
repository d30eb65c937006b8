"""
Valuation Helper Functions

Rate helpers shared by the DCF method, the adjustment factors and the
derived metrics, plus a zero-guarded division.
"""

from __future__ import annotations

from appraiser.domain.models.valuation import ValuationInput

DEFAULT_GROWTH_RATE = 0.05

RISK_FREE_RATE = 0.04
BASE_RISK_PREMIUM = 0.06
RISK_FACTOR_PREMIUM = 0.005


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Return numerator / denominator, or ``default`` when the denominator is zero."""
    if denominator == 0:
        return default
    return numerator / denominator


def growth_rate(valuation_input: ValuationInput) -> float:
    """
    Year-over-year revenue growth as a fraction.

    Falls back to 5% when there is no positive prior-year revenue to
    compare against.
    """
    current = valuation_input.financials.annual_revenue
    previous = valuation_input.financials.previous_year_revenue
    if previous > 0:
        return (current - previous) / previous
    return DEFAULT_GROWTH_RATE


def size_premium(revenue: float) -> float:
    if revenue < 1_000_000:
        return 0.04
    if revenue < 10_000_000:
        return 0.02
    return 0.0


def discount_rate(valuation_input: ValuationInput) -> float:
    """
    Build-up discount rate: risk-free + base premium + size premium + risk-factor premium.

    The result is never below 10%, so a 3% perpetual growth terminal value
    always has a positive denominator.
    """
    premium = BASE_RISK_PREMIUM + size_premium(valuation_input.financials.annual_revenue)
    premium += valuation_input.qualitative.risk_factor_count * RISK_FACTOR_PREMIUM
    return RISK_FREE_RATE + premium
