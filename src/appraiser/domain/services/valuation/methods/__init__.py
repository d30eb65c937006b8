"""
Valuation Methods

The five independent valuation methods blended by the engine.
"""

from appraiser.domain.services.valuation.methods.asset_based import AssetBasedMethod
from appraiser.domain.services.valuation.methods.base import BaseValuationMethod
from appraiser.domain.services.valuation.methods.common import MultipleValuationMethod, multiple_confidence
from appraiser.domain.services.valuation.methods.dcf import DCFProjection, DiscountedCashFlowMethod
from appraiser.domain.services.valuation.methods.ebitda_multiple import EBITDAMultipleMethod, estimate_ebitda
from appraiser.domain.services.valuation.methods.pe_ratio import PERatioMethod
from appraiser.domain.services.valuation.methods.revenue_multiple import RevenueMultipleMethod

# Evaluation order; results are reported in this order
METHOD_CLASSES = (
    RevenueMultipleMethod,
    EBITDAMultipleMethod,
    PERatioMethod,
    AssetBasedMethod,
    DiscountedCashFlowMethod,
)

__all__ = [
    "BaseValuationMethod",
    "MultipleValuationMethod",
    "multiple_confidence",
    "RevenueMultipleMethod",
    "EBITDAMultipleMethod",
    "estimate_ebitda",
    "PERatioMethod",
    "AssetBasedMethod",
    "DiscountedCashFlowMethod",
    "DCFProjection",
    "METHOD_CLASSES",
]
