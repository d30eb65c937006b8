"""Formatters for valuation output."""

from appraiser.infrastructure.formatters.valuation_table_formatter import ValuationTableFormatter, format_currency

__all__ = ["ValuationTableFormatter", "format_currency"]
