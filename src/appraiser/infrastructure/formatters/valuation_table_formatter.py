"""
Valuation Table Formatter

Provides formatted ASCII table output for valuation results.
Consolidates the method breakdown, adjustment factors, key metrics and
recommendations into a single readable record for logs and terminals.
"""

from typing import List

from appraiser.domain.models.valuation import ValuationResult


def format_currency(value: float) -> str:
    """Render 1234567.8 as "$1,234,568" and -50000 as "-$50,000"."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


class ValuationTableFormatter:
    """Formats valuation results as ASCII tables."""

    WIDTH = 100

    @staticmethod
    def format_valuation_table(result: ValuationResult) -> str:
        """
        Format a full valuation result.

        Args:
            result: ValuationResult from the engine

        Returns:
            Formatted ASCII table string
        """
        width = ValuationTableFormatter.WIDTH
        lines: List[str] = []
        lines.append(f"\n{'='*width}")
        lines.append(f"  BUSINESS VALUATION - {result.company_name} ({result.industry})")
        lines.append(f"{'='*width}")

        # Section 1: Methods
        lines.append(f"\n{'─'*width}")
        lines.append("  📊 VALUATION METHODS (adjusted)")
        lines.append(f"{'─'*width}")
        lines.append(f"  {'Method':<24} {'Value':>18} {'Confidence':>12}   Basis")
        lines.append(f"  {'-'*24} {'-'*18} {'-'*12}   {'-'*38}")
        for method in result.methods:
            lines.append(
                f"  {method.name.value:<24} {format_currency(method.value):>18} "
                f"{method.confidence:>11.0f}%   {method.description}"
            )

        # Section 2: Adjustment factors
        factors = result.adjustment_factors
        lines.append(f"\n{'─'*width}")
        lines.append("  ⚖️  ADJUSTMENT FACTORS")
        lines.append(f"{'─'*width}")
        lines.append(f"  Growth                     : {factors.growth_adjustment:>8.3f}")
        lines.append(f"  Risk                       : {factors.risk_adjustment:>8.3f}")
        lines.append(f"  Market Position            : {factors.market_position_adjustment:>8.3f}")
        lines.append(f"  Size                       : {factors.size_adjustment:>8.3f}")
        lines.append(f"  Combined                   : {factors.combined:>8.4f}")

        # Section 3: Key metrics
        metrics = result.key_metrics
        lines.append(f"\n{'─'*width}")
        lines.append("  📈 KEY METRICS")
        lines.append(f"{'─'*width}")
        lines.append(f"  Implied Revenue Multiple   : {metrics.revenue_multiple:>8.2f}x")
        lines.append(f"  Profit Margin              : {metrics.profit_margin:>8.1f}%")
        lines.append(f"  Return on Assets           : {metrics.return_on_assets:>8.1f}%")
        lines.append(f"  Debt to Equity             : {metrics.debt_to_equity:>8.2f}")
        lines.append(f"  Revenue Growth (YoY)       : {metrics.growth_rate:>8.1f}%")

        # Section 4: Summary
        lines.append(f"\n{'─'*width}")
        lines.append("  💎 VALUATION SUMMARY")
        lines.append(f"{'─'*width}")
        lines.append(f"  Overall Valuation          : {format_currency(result.overall_valuation):>18}")
        lines.append(f"  Confidence Score           : {result.confidence_score:>17.1f}%")
        lines.append(f"  Evaluation Date            : {result.evaluation_date}")

        if result.recommendations:
            lines.append(f"\n{'─'*width}")
            lines.append("  💡 RECOMMENDATIONS")
            lines.append(f"{'─'*width}")
            for recommendation in result.recommendations:
                lines.append(f"  - {recommendation}")

        if result.risk_factors:
            lines.append(f"\n{'─'*width}")
            lines.append("  ⚠️  RISK FACTORS")
            lines.append(f"{'─'*width}")
            for risk in result.risk_factors:
                lines.append(f"  - {risk}")

        lines.append(f"{'='*width}\n")
        return "\n".join(lines)
