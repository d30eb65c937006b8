"""
Common contract for valuation methods.

Each concrete method inherits from ``BaseValuationMethod`` and returns a
``ValuationMethodResult`` so the engine can adjust and blend outputs
consistently. Instances are bound to a single immutable input and are
discarded after one calculation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from appraiser.domain.models.valuation import (
    ValuationInput,
    ValuationMethodName,
    ValuationMethodResult,
)
from appraiser.domain.services.valuation.industry_data import IndustryLookup


class BaseValuationMethod(ABC):
    """
    Base class for all valuation methods.

    Child classes must implement ``calculate`` and ``estimate_confidence``.
    ``explain`` provides a standardized structure for audit logging.
    """

    method_name: ValuationMethodName

    def __init__(self, valuation_input: ValuationInput, industry: IndustryLookup):
        self.valuation_input = valuation_input
        self.industry = industry

    @property
    def financials(self):
        return self.valuation_input.financials

    @abstractmethod
    def calculate(self) -> ValuationMethodResult:
        """Execute the method and return a raw (unadjusted) result."""

    @abstractmethod
    def estimate_confidence(self, value: float) -> float:
        """Heuristic 0-100 confidence for the raw method value."""

    def explain(self, result: ValuationMethodResult) -> Dict[str, Any]:
        return {
            "method": result.name.value,
            "industry": self.industry.name,
            "industry_matched": self.industry.matched,
            "value": result.value,
            "confidence": result.confidence,
            "description": result.description,
        }
