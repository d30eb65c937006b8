"""
Asset-based valuation method.

Book value (assets minus liabilities) scaled by an asset multiplier:
1.5x for asset-light industries, 1.2x otherwise.
"""

from __future__ import annotations

from appraiser.domain.models.valuation import ValuationMethodName, ValuationMethodResult
from appraiser.domain.services.valuation.industry_data import is_asset_light
from appraiser.domain.services.valuation.methods.base import BaseValuationMethod

ASSET_LIGHT_MULTIPLIER = 1.5
DEFAULT_ASSET_MULTIPLIER = 1.2
ASSET_BASED_CONFIDENCE = 75.0


class AssetBasedMethod(BaseValuationMethod):
    method_name = ValuationMethodName.ASSET_BASED

    def calculate(self) -> ValuationMethodResult:
        book_value = self.financials.total_assets - self.financials.total_liabilities
        value = book_value * self.asset_multiplier()

        return ValuationMethodResult(
            name=self.method_name,
            value=value,
            confidence=self.estimate_confidence(value),
            description="Based on adjusted book value of assets minus liabilities",
        )

    def estimate_confidence(self, value: float) -> float:
        return ASSET_BASED_CONFIDENCE

    def asset_multiplier(self) -> float:
        if is_asset_light(self.valuation_input.identity.industry):
            return ASSET_LIGHT_MULTIPLIER
        return DEFAULT_ASSET_MULTIPLIER
