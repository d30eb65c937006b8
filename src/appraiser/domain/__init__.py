"""
Appraiser Domain Layer

Contains the valuation data contracts and the valuation engine.
"""

from appraiser.domain.models.valuation import ValuationInput, ValuationResult
from appraiser.domain.services.valuation.engine import ValuationEngine, calculate_valuation

__all__ = [
    "ValuationInput",
    "ValuationResult",
    "ValuationEngine",
    "calculate_valuation",
]
