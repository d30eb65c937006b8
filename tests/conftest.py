"""Test configuration helpers and fixtures."""

import sys
from pathlib import Path
from typing import Any, Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for candidate in (SRC, ROOT):
    candidate_str = str(candidate)
    if candidate.exists() and candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

from appraiser.domain.models.valuation import (  # noqa: E402
    BusinessType,
    CompanyIdentity,
    FinancialData,
    GrowthStage,
    MarketPosition,
    MarketSize,
    QualitativeProfile,
    RiskLevel,
    ValuationInput,
)


def build_input(
    *,
    industry: str = "Technology - Software",
    annual_revenue: float = 5_000_000,
    gross_profit: float = 3_500_000,
    net_income: float = 750_000,
    total_assets: float = 4_000_000,
    total_liabilities: float = 1_500_000,
    cash_flow: float = 900_000,
    previous_year_revenue: float = 4_000_000,
    debt_to_equity: float = 0.6,
    market_position: MarketPosition = MarketPosition.LEADER,
    growth_stage: GrowthStage = GrowthStage.GROWTH,
    risk_factors=("Key person dependency", "Competitive pressure"),
    customer_concentration: RiskLevel = RiskLevel.MEDIUM,
    regulatory_risk: RiskLevel = RiskLevel.LOW,
    market_size: MarketSize = MarketSize.LARGE,
) -> ValuationInput:
    """Known-good input; keyword overrides produce variants."""
    return ValuationInput(
        identity=CompanyIdentity(
            company_name="Acme Analytics",
            industry=industry,
            business_type=BusinessType.B2B,
            founded_year=2015,
            employee_count=42,
            location="Austin, TX",
            description="Analytics software for mid-market retailers",
        ),
        financials=FinancialData(
            annual_revenue=annual_revenue,
            gross_profit=gross_profit,
            net_income=net_income,
            total_assets=total_assets,
            total_liabilities=total_liabilities,
            monthly_recurring_revenue=350_000,
            cash_flow=cash_flow,
            previous_year_revenue=previous_year_revenue,
            debt_to_equity=debt_to_equity,
            current_ratio=1.8,
        ),
        qualitative=QualitativeProfile(
            market_position=market_position,
            growth_stage=growth_stage,
            competitive_advantages=("Proprietary technology", "High switching costs"),
            risk_factors=tuple(risk_factors),
            customer_concentration=customer_concentration,
            technology_dependence=RiskLevel.HIGH,
            regulatory_risk=regulatory_risk,
            market_size=market_size,
        ),
    )


def build_retail_input(**overrides) -> ValuationInput:
    """Flat-growth $1M retailer with neutral qualitative factors."""
    params = dict(
        industry="Retail",
        annual_revenue=1_000_000,
        gross_profit=400_000,
        net_income=80_000,
        total_assets=600_000,
        total_liabilities=250_000,
        cash_flow=90_000,
        previous_year_revenue=1_000_000,
        debt_to_equity=0.4,
        market_position=MarketPosition.FOLLOWER,
        growth_stage=GrowthStage.MATURE,
        risk_factors=(),
        customer_concentration=RiskLevel.LOW,
        regulatory_risk=RiskLevel.LOW,
        market_size=MarketSize.MEDIUM,
    )
    params.update(overrides)
    return build_input(**params)


@pytest.fixture
def valuation_input() -> ValuationInput:
    return build_input()


@pytest.fixture
def retail_input() -> ValuationInput:
    return build_retail_input()


@pytest.fixture
def form_payload() -> Dict[str, Any]:
    """Payload in the evaluation form's camelCase shape."""
    return {
        "basicInfo": {
            "companyName": "Corner Bakery Co",
            "industry": "Food & Beverage",
            "businessType": "B2C",
            "foundedYear": 2009,
            "employeeCount": 18,
            "location": "Portland, OR",
            "description": "Neighbourhood bakery with wholesale accounts",
        },
        "financialData": {
            "annualRevenue": 2_400_000,
            "grossProfit": 1_100_000,
            "netIncome": 180_000,
            "totalAssets": 900_000,
            "totalLiabilities": 400_000,
            "cashFlow": 210_000,
            "previousYearRevenue": 2_100_000,
            "debtToEquity": 0.8,
            "currentRatio": 1.4,
        },
        "businessDetails": {
            "marketPosition": "niche",
            "growthStage": "mature",
            "competitiveAdvantage": ["Strong brand recognition"],
            "riskFactors": ["Supply chain risks", "Key person dependency"],
            "customerConcentration": "low",
            "technologyDependence": "low",
            "regulatoryRisk": "medium",
            "marketSize": "small",
            "geographicDiversification": "local",
        },
    }


@pytest.fixture
def make_input():
    """Builder for input variants: ``make_input(annual_revenue=0, ...)``."""
    return build_input


@pytest.fixture
def make_retail_input():
    return build_retail_input
