"""
Valuation Services

Deterministic multi-method business valuation: industry reference data,
the five valuation methods, adjustment factors, aggregation, derived
metrics and the engine entry point.
"""

from appraiser.domain.services.valuation.adjustments import (
    calculate_adjustment_factors,
    growth_adjustment,
    market_position_adjustment,
    risk_adjustment,
    size_adjustment,
)
from appraiser.domain.services.valuation.aggregator import (
    adjust_methods,
    apply_adjustments,
    overall_confidence,
    weighted_valuation,
)
from appraiser.domain.services.valuation.engine import ValuationEngine, calculate_valuation
from appraiser.domain.services.valuation.helpers import discount_rate, growth_rate, safe_divide
from appraiser.domain.services.valuation.industry_data import (
    COMPETITIVE_ADVANTAGES,
    DEFAULT_INDUSTRY,
    INDUSTRY_MULTIPLIERS,
    INDUSTRY_OPTIONS,
    RISK_FACTORS,
    IndustryLookup,
    IndustryMultipliers,
    MultiplierBand,
    load_industry_multipliers,
    lookup_industry,
)
from appraiser.domain.services.valuation.metrics import calculate_key_metrics, generate_recommendations

__all__ = [
    # Engine
    "ValuationEngine",
    "calculate_valuation",
    # Reference data
    "INDUSTRY_MULTIPLIERS",
    "INDUSTRY_OPTIONS",
    "DEFAULT_INDUSTRY",
    "COMPETITIVE_ADVANTAGES",
    "RISK_FACTORS",
    "IndustryLookup",
    "IndustryMultipliers",
    "MultiplierBand",
    "load_industry_multipliers",
    "lookup_industry",
    # Helpers
    "growth_rate",
    "discount_rate",
    "safe_divide",
    # Adjustments
    "calculate_adjustment_factors",
    "growth_adjustment",
    "risk_adjustment",
    "market_position_adjustment",
    "size_adjustment",
    # Aggregation
    "apply_adjustments",
    "adjust_methods",
    "weighted_valuation",
    "overall_confidence",
    # Metrics
    "calculate_key_metrics",
    "generate_recommendations",
]
