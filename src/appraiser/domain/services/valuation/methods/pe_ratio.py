"""
Price-to-Earnings ratio valuation method.

Net income times the industry's average P/E. Losses are not clamped: a
negative net income produces a negative value that still takes part in
the weighted blend.
"""

from __future__ import annotations

import logging

from appraiser.domain.models.valuation import ValuationMethodName, ValuationMethodResult
from appraiser.domain.services.valuation.methods.common import MultipleValuationMethod, format_multiple

logger = logging.getLogger(__name__)


class PERatioMethod(MultipleValuationMethod):
    method_name = ValuationMethodName.PE_RATIO

    def calculate(self) -> ValuationMethodResult:
        net_income = self.financials.net_income
        pe_ratio = self.industry.multipliers.pe_ratio.average

        value = net_income * pe_ratio
        confidence = self.estimate_confidence(net_income)

        if value < 0:
            logger.debug(f"[PE_RATIO] Negative net income {net_income:,.0f} yields negative value {value:,.0f}")

        return ValuationMethodResult(
            name=self.method_name,
            value=value,
            confidence=confidence,
            description=(
                f"Based on {format_multiple(pe_ratio)}x P/E ratio "
                f"for {self.industry.name} industry"
            ),
        )
