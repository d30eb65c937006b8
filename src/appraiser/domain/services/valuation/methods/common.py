"""
Shared helpers for multiple-based valuation methods.
"""

from __future__ import annotations

from appraiser.domain.models.valuation import ValuationMethodName, ValuationInput
from appraiser.domain.services.valuation.industry_data import IndustryLookup
from appraiser.domain.services.valuation.methods.base import BaseValuationMethod

BASE_CONFIDENCE = 70.0
MAX_CONFIDENCE = 95.0
DATA_QUALITY_BONUS = 10.0
LARGE_REVENUE_BONUS = 5.0
LARGE_REVENUE_THRESHOLD = 1_000_000


def multiple_confidence(
    method_name: ValuationMethodName,
    keyed_value: float,
    valuation_input: ValuationInput,
    industry: IndustryLookup,
) -> float:
    """
    Additive confidence heuristic shared by the three multiple methods.

    Base 70, +10 for a positive keyed value, +10 for prior-year revenue,
    +10 for a matched industry, +5 for revenue above $1M (revenue method
    only), capped at 95.
    """
    confidence = BASE_CONFIDENCE

    if keyed_value > 0:
        confidence += DATA_QUALITY_BONUS
    if valuation_input.financials.previous_year_revenue > 0:
        confidence += DATA_QUALITY_BONUS
    if industry.matched:
        confidence += DATA_QUALITY_BONUS

    if (
        method_name == ValuationMethodName.REVENUE_MULTIPLE
        and valuation_input.financials.annual_revenue > LARGE_REVENUE_THRESHOLD
    ):
        confidence += LARGE_REVENUE_BONUS

    return min(MAX_CONFIDENCE, confidence)


class MultipleValuationMethod(BaseValuationMethod):
    """Method whose value is a base metric times an industry average multiple."""

    def estimate_confidence(self, value: float) -> float:
        return multiple_confidence(self.method_name, value, self.valuation_input, self.industry)


def format_multiple(multiple: float) -> str:
    """Render 8.0 as "8" and 3.5 as "3.5"."""
    return f"{multiple:g}"
