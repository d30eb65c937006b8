"""
EBITDA multiple valuation method.

No separate EBITDA figure is collected, so EBITDA is approximated as 80%
of gross profit before applying the industry's average EBITDA multiple.
"""

from __future__ import annotations

import logging

from appraiser.domain.models.valuation import ValuationMethodName, ValuationMethodResult
from appraiser.domain.services.valuation.methods.common import MultipleValuationMethod, format_multiple

logger = logging.getLogger(__name__)

EBITDA_TO_GROSS_PROFIT = 0.8


def estimate_ebitda(gross_profit: float) -> float:
    return gross_profit * EBITDA_TO_GROSS_PROFIT


class EBITDAMultipleMethod(MultipleValuationMethod):
    method_name = ValuationMethodName.EBITDA_MULTIPLE

    def calculate(self) -> ValuationMethodResult:
        ebitda = estimate_ebitda(self.financials.gross_profit)
        multiple = self.industry.multipliers.ebitda_multiple.average

        value = ebitda * multiple
        confidence = self.estimate_confidence(ebitda)

        logger.debug(f"[EBITDA_MULTIPLE] ebitda={ebitda:,.0f} × {multiple} = {value:,.0f} (confidence={confidence})")

        return ValuationMethodResult(
            name=self.method_name,
            value=value,
            confidence=confidence,
            description=(
                f"Based on {format_multiple(multiple)}x EBITDA multiple "
                f"for {self.industry.name} industry"
            ),
        )
