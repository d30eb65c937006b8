"""
Revenue multiple valuation method.

Values the company at annual revenue times the industry's average
revenue multiple.
"""

from __future__ import annotations

import logging

from appraiser.domain.models.valuation import ValuationMethodName, ValuationMethodResult
from appraiser.domain.services.valuation.methods.common import MultipleValuationMethod, format_multiple

logger = logging.getLogger(__name__)


class RevenueMultipleMethod(MultipleValuationMethod):
    method_name = ValuationMethodName.REVENUE_MULTIPLE

    def calculate(self) -> ValuationMethodResult:
        revenue = self.financials.annual_revenue
        multiple = self.industry.multipliers.revenue_multiple.average

        value = revenue * multiple
        confidence = self.estimate_confidence(revenue)

        logger.debug(f"[REVENUE_MULTIPLE] revenue={revenue:,.0f} × {multiple} = {value:,.0f} (confidence={confidence})")

        return ValuationMethodResult(
            name=self.method_name,
            value=value,
            confidence=confidence,
            description=(
                f"Based on {format_multiple(multiple)}x revenue multiple "
                f"for {self.industry.name} industry"
            ),
        )
