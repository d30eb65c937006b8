"""
Discounted cash flow valuation method.

Projects operating cash flow five years forward at the revenue growth
rate, discounts each year at the build-up discount rate and adds a
Gordon-growth terminal value (3% perpetual growth) discounted from year 5.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from appraiser.domain.models.valuation import ValuationMethodName, ValuationMethodResult
from appraiser.domain.services.valuation.helpers import discount_rate, growth_rate
from appraiser.domain.services.valuation.methods.base import BaseValuationMethod

logger = logging.getLogger(__name__)

PROJECTION_YEARS = 5
TERMINAL_GROWTH_RATE = 0.03
DCF_CONFIDENCE = 80.0


@dataclass(frozen=True)
class DCFProjection:
    year: int
    cash_flow: float
    discount_factor: float
    present_value: float


class DiscountedCashFlowMethod(BaseValuationMethod):
    method_name = ValuationMethodName.DISCOUNTED_CASH_FLOW

    def calculate(self) -> ValuationMethodResult:
        g = growth_rate(self.valuation_input)
        r = discount_rate(self.valuation_input)

        projections = self.project_cash_flows(g, r)
        final_cash_flow = projections[-1].cash_flow

        terminal_value = (final_cash_flow * (1 + TERMINAL_GROWTH_RATE)) / (r - TERMINAL_GROWTH_RATE)
        pv_terminal = terminal_value / (1 + r) ** PROJECTION_YEARS

        value = sum(p.present_value for p in projections) + pv_terminal

        logger.debug(
            f"[DCF] growth={g:.2%}, discount={r:.2%}, terminal_value={terminal_value:,.0f}, "
            f"pv_terminal={pv_terminal:,.0f}, total={value:,.0f}"
        )

        return ValuationMethodResult(
            name=self.method_name,
            value=value,
            confidence=self.estimate_confidence(value),
            description=f"Based on projected cash flows with {g * 100:.1f}% growth rate",
        )

    def estimate_confidence(self, value: float) -> float:
        return DCF_CONFIDENCE

    def project_cash_flows(self, g: float, r: float) -> List[DCFProjection]:
        projections: List[DCFProjection] = []
        cash_flow = self.financials.cash_flow
        for year in range(1, PROJECTION_YEARS + 1):
            cash_flow *= 1 + g
            discount_factor = 1 / (1 + r) ** year
            projections.append(
                DCFProjection(
                    year=year,
                    cash_flow=cash_flow,
                    discount_factor=discount_factor,
                    present_value=cash_flow * discount_factor,
                )
            )
        return projections
