"""
Valuation Aggregator

Applies adjustment factors to raw method values and blends the adjusted
values into a confidence-weighted overall valuation.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from appraiser.domain.models.valuation import (
    AdjustmentFactors,
    DegenerateAggregationError,
    ValuationMethodResult,
)


def apply_adjustments(value: float, factors: AdjustmentFactors) -> float:
    return (
        value
        * factors.growth_adjustment
        * factors.risk_adjustment
        * factors.market_position_adjustment
        * factors.size_adjustment
    )


def adjust_methods(
    methods: Sequence[ValuationMethodResult],
    factors: AdjustmentFactors,
) -> List[ValuationMethodResult]:
    """Return new results whose values carry every adjustment factor."""
    return [replace(method, value=apply_adjustments(method.value, factors)) for method in methods]


def weighted_valuation(methods: Sequence[ValuationMethodResult]) -> float:
    """
    Confidence-weighted mean of method values.

    Raises:
        DegenerateAggregationError: If there are no methods or the
            confidences sum to zero. Method confidences always carry a
            positive floor, so this signals a broken confidence formula.
    """
    if not methods:
        raise DegenerateAggregationError("Cannot aggregate an empty list of valuation methods")

    total_weight = sum(method.confidence for method in methods)
    if total_weight <= 0:
        raise DegenerateAggregationError(
            f"Method confidences sum to {total_weight}; weighted valuation is undefined"
        )

    weighted_sum = sum(method.value * method.confidence for method in methods)
    return weighted_sum / total_weight


def overall_confidence(methods: Sequence[ValuationMethodResult]) -> float:
    if not methods:
        raise DegenerateAggregationError("Cannot score confidence of an empty list of valuation methods")
    return sum(method.confidence for method in methods) / len(methods)
