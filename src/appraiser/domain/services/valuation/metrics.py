"""
Derived Metrics & Recommendations

Ratio metrics and plain-language guidance computed from the raw input,
independent of the blended valuation. Every ratio guards a zero
denominator and reports 0.0 instead of NaN or infinity.
"""

from __future__ import annotations

from typing import List

from appraiser.domain.models.valuation import DerivedMetrics, ValuationInput
from appraiser.domain.services.valuation.helpers import growth_rate, safe_divide

LOW_GROWTH_THRESHOLD = 0.05
LOW_MARGIN_THRESHOLD = 10.0  # Percent
HIGH_LEVERAGE_THRESHOLD = 2.0
RISK_FACTOR_THRESHOLD = 3

GROWTH_RECOMMENDATION = "Focus on growth initiatives to improve revenue trajectory"
EFFICIENCY_RECOMMENDATION = "Improve operational efficiency to increase profit margins"
DEBT_RECOMMENDATION = "Consider debt reduction to improve financial stability"
RISK_RECOMMENDATION = "Develop risk mitigation strategies to reduce business uncertainty"


def profit_margin(valuation_input: ValuationInput) -> float:
    financials = valuation_input.financials
    return safe_divide(financials.net_income, financials.annual_revenue) * 100


def calculate_key_metrics(valuation_input: ValuationInput, revenue_method_value: float) -> DerivedMetrics:
    """
    Args:
        valuation_input: Raw company input
        revenue_method_value: Unadjusted Revenue Multiple method value, used to
            report the implied revenue multiple
    """
    financials = valuation_input.financials
    return DerivedMetrics(
        revenue_multiple=safe_divide(revenue_method_value, financials.annual_revenue),
        profit_margin=profit_margin(valuation_input),
        return_on_assets=safe_divide(financials.net_income, financials.total_assets) * 100,
        debt_to_equity=financials.debt_to_equity,
        growth_rate=growth_rate(valuation_input) * 100,
    )


def generate_recommendations(valuation_input: ValuationInput) -> List[str]:
    recommendations: List[str] = []

    if growth_rate(valuation_input) < LOW_GROWTH_THRESHOLD:
        recommendations.append(GROWTH_RECOMMENDATION)

    if profit_margin(valuation_input) < LOW_MARGIN_THRESHOLD:
        recommendations.append(EFFICIENCY_RECOMMENDATION)

    if valuation_input.financials.debt_to_equity > HIGH_LEVERAGE_THRESHOLD:
        recommendations.append(DEBT_RECOMMENDATION)

    if valuation_input.qualitative.risk_factor_count > RISK_FACTOR_THRESHOLD:
        recommendations.append(RISK_RECOMMENDATION)

    return recommendations
