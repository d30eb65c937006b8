"""
Domain Models

Immutable input and result records for the valuation engine.
"""

from appraiser.domain.models.valuation import (
    AdjustmentFactors,
    BusinessType,
    CompanyIdentity,
    DegenerateAggregationError,
    DerivedMetrics,
    FinancialData,
    GeographicDiversification,
    GrowthStage,
    InvalidValuationInputError,
    MarketPosition,
    MarketSize,
    QualitativeProfile,
    RiskLevel,
    ValuationError,
    ValuationInput,
    ValuationMethodName,
    ValuationMethodResult,
    ValuationResult,
)

__all__ = [
    # Errors
    "ValuationError",
    "InvalidValuationInputError",
    "DegenerateAggregationError",
    # Categorical inputs
    "BusinessType",
    "MarketPosition",
    "GrowthStage",
    "RiskLevel",
    "MarketSize",
    "GeographicDiversification",
    "ValuationMethodName",
    # Input records
    "CompanyIdentity",
    "FinancialData",
    "QualitativeProfile",
    "ValuationInput",
    # Output records
    "ValuationMethodResult",
    "AdjustmentFactors",
    "DerivedMetrics",
    "ValuationResult",
]
