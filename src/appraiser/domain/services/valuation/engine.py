"""
Business Valuation Engine

Runs the five valuation methods, applies the four adjustment factors to
every raw value and blends the adjusted values into a confidence-weighted
overall valuation. Derived metrics and recommendations come from the raw
input.

A ``ValuationEngine`` is bound to one immutable input and used for one
calculation; ``calculate_valuation`` builds a fresh engine per call so
concurrent callers never share state.

Example:
    result = calculate_valuation(valuation_input)
    print(result.overall_valuation, result.confidence_score)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Mapping, Optional

from appraiser.domain.models.valuation import (
    ValuationInput,
    ValuationMethodName,
    ValuationMethodResult,
    ValuationResult,
)
from appraiser.domain.services.valuation.adjustments import calculate_adjustment_factors
from appraiser.domain.services.valuation.aggregator import (
    adjust_methods,
    overall_confidence,
    weighted_valuation,
)
from appraiser.domain.services.valuation.industry_data import (
    IndustryLookup,
    IndustryMultipliers,
    lookup_industry,
)
from appraiser.domain.services.valuation.methods import METHOD_CLASSES
from appraiser.domain.services.valuation.metrics import calculate_key_metrics, generate_recommendations
from appraiser.infrastructure.formatters.valuation_table_formatter import ValuationTableFormatter

logger = logging.getLogger(__name__)


class ValuationEngine:
    """
    Single-use valuation calculation over one input.

    Args:
        valuation_input: Frozen company input
        industry_table: Optional reference table (default: built-in table),
            typically the one loaded at startup from configuration
    """

    def __init__(
        self,
        valuation_input: ValuationInput,
        industry_table: Optional[Mapping[str, IndustryMultipliers]] = None,
    ) -> None:
        self.valuation_input = valuation_input
        self.industry: IndustryLookup = lookup_industry(valuation_input.identity.industry, industry_table)

    def calculate_all_methods(self) -> List[ValuationMethodResult]:
        """Raw (unadjusted) results of every method, in reporting order."""
        return [method_cls(self.valuation_input, self.industry).calculate() for method_cls in METHOD_CLASSES]

    def calculate_valuation(self) -> ValuationResult:
        identity = self.valuation_input.identity

        raw_methods = self.calculate_all_methods()
        factors = calculate_adjustment_factors(self.valuation_input)
        methods = adjust_methods(raw_methods, factors)

        overall_valuation = weighted_valuation(methods)
        confidence_score = overall_confidence(methods)

        raw_revenue = next(m for m in raw_methods if m.name == ValuationMethodName.REVENUE_MULTIPLE)
        key_metrics = calculate_key_metrics(self.valuation_input, raw_revenue.value)

        result = ValuationResult(
            company_name=identity.company_name,
            industry=identity.industry,
            evaluation_date=datetime.now(timezone.utc).isoformat(),
            overall_valuation=overall_valuation,
            confidence_score=confidence_score,
            methods=tuple(methods),
            adjustment_factors=factors,
            key_metrics=key_metrics,
            recommendations=tuple(generate_recommendations(self.valuation_input)),
            risk_factors=self.valuation_input.qualitative.risk_factors,
        )

        self._log_breakdown(result)
        return result

    def _log_breakdown(self, result: ValuationResult) -> None:
        if not self.industry.matched:
            logger.info(
                f"{result.company_name} - Industry {result.industry!r} not found, "
                f"valued with {self.industry.name!r} multiples"
            )

        logger.info(
            f"💰 {result.company_name} - Blended valuation ${result.overall_valuation:,.0f} "
            f"(confidence {result.confidence_score:.1f})"
        )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(ValuationTableFormatter.format_valuation_table(result))


def calculate_valuation(
    valuation_input: ValuationInput,
    industry_table: Optional[Mapping[str, IndustryMultipliers]] = None,
) -> ValuationResult:
    """
    Value a company.

    Args:
        valuation_input: Frozen company input
        industry_table: Optional reference table override

    Returns:
        ValuationResult with five adjusted method results

    Raises:
        DegenerateAggregationError: If method confidences sum to zero
    """
    return ValuationEngine(valuation_input, industry_table).calculate_valuation()
