"""
Appraiser - deterministic business valuation synthesis.

Example:
    from appraiser import ValuationInput, calculate_valuation

    result = calculate_valuation(ValuationInput.from_dict(payload))
"""

from appraiser.domain.models.valuation import (
    AdjustmentFactors,
    CompanyIdentity,
    DegenerateAggregationError,
    DerivedMetrics,
    FinancialData,
    InvalidValuationInputError,
    QualitativeProfile,
    ValuationError,
    ValuationInput,
    ValuationMethodName,
    ValuationMethodResult,
    ValuationResult,
)
from appraiser.domain.services.valuation.engine import ValuationEngine, calculate_valuation

__version__ = "0.1.0"

__all__ = [
    "calculate_valuation",
    "ValuationEngine",
    "ValuationInput",
    "CompanyIdentity",
    "FinancialData",
    "QualitativeProfile",
    "ValuationResult",
    "ValuationMethodResult",
    "ValuationMethodName",
    "AdjustmentFactors",
    "DerivedMetrics",
    "ValuationError",
    "InvalidValuationInputError",
    "DegenerateAggregationError",
]
