"""
Valuation data contracts.

Immutable records exchanged with the valuation engine: the caller-supplied
``ValuationInput`` (company identity, financial statements and qualitative
market context) and the ``ValuationResult`` the engine hands back.

``ValuationInput.from_dict`` is the boundary for payloads assembled by the
evaluation form or parsed spreadsheet rows. It accepts both the camelCase
form shape (``basicInfo`` / ``financialData`` / ``businessDetails``) and the
snake_case shape mirrored by the dataclasses.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Type, TypeVar


# =============================================================================
# Errors
# =============================================================================


class ValuationError(ValueError):
    """Base exception for valuation engine errors"""


class InvalidValuationInputError(ValuationError):
    """Raised when a raw payload cannot be turned into a ValuationInput"""

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.field_name = field_name
        super().__init__(f"{message} (field={field_name})" if field_name else message)


class DegenerateAggregationError(ValuationError):
    """Raised when method confidences cannot produce a weighted valuation"""


# =============================================================================
# Categorical inputs
# =============================================================================


class BusinessType(str, Enum):
    B2B = "B2B"
    B2C = "B2C"
    B2B2C = "B2B2C"


class MarketPosition(str, Enum):
    LEADER = "leader"
    CHALLENGER = "challenger"
    FOLLOWER = "follower"
    NICHE = "niche"


class GrowthStage(str, Enum):
    STARTUP = "startup"
    GROWTH = "growth"
    MATURE = "mature"
    DECLINE = "decline"


class RiskLevel(str, Enum):
    """Low/medium/high scale shared by concentration, technology and regulatory risk."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MarketSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    MASSIVE = "massive"


class GeographicDiversification(str, Enum):
    LOCAL = "local"
    REGIONAL = "regional"
    NATIONAL = "national"
    INTERNATIONAL = "international"


class ValuationMethodName(str, Enum):
    """Fixed identifiers of the five valuation methods."""

    REVENUE_MULTIPLE = "Revenue Multiple"
    EBITDA_MULTIPLE = "EBITDA Multiple"
    PE_RATIO = "P/E Ratio"
    ASSET_BASED = "Asset-Based"
    DISCOUNTED_CASH_FLOW = "Discounted Cash Flow"


# =============================================================================
# Input records
# =============================================================================


@dataclass(frozen=True)
class CompanyIdentity:
    company_name: str
    industry: str
    business_type: BusinessType = BusinessType.B2B
    founded_year: Optional[int] = None
    employee_count: int = 0
    location: str = ""
    description: str = ""


@dataclass(frozen=True)
class FinancialData:
    """Annual financial statement figures in plain currency units."""

    annual_revenue: float
    gross_profit: float
    net_income: float
    total_assets: float
    total_liabilities: float = 0.0
    monthly_recurring_revenue: Optional[float] = None
    cash_flow: float = 0.0  # Operating cash flow
    previous_year_revenue: float = 0.0
    debt_to_equity: float = 0.0
    current_ratio: float = 0.0


@dataclass(frozen=True)
class QualitativeProfile:
    market_position: MarketPosition
    growth_stage: GrowthStage
    competitive_advantages: Tuple[str, ...] = ()
    risk_factors: Tuple[str, ...] = ()
    customer_concentration: RiskLevel = RiskLevel.MEDIUM
    technology_dependence: RiskLevel = RiskLevel.MEDIUM
    regulatory_risk: RiskLevel = RiskLevel.LOW
    market_size: MarketSize = MarketSize.MEDIUM
    geographic_diversification: GeographicDiversification = GeographicDiversification.NATIONAL

    def __post_init__(self) -> None:
        # Lists handed in by callers are frozen so the input stays immutable
        object.__setattr__(self, "competitive_advantages", tuple(self.competitive_advantages))
        object.__setattr__(self, "risk_factors", tuple(self.risk_factors))

    @property
    def risk_factor_count(self) -> int:
        return len(self.risk_factors)


@dataclass(frozen=True)
class ValuationInput:
    """Everything the engine knows about one company for one calculation."""

    identity: CompanyIdentity
    financials: FinancialData
    qualitative: QualitativeProfile

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ValuationInput":
        """
        Build a validated input from a form or spreadsheet payload.

        Args:
            payload: Either ``{"basicInfo", "financialData", "businessDetails"}``
                (camelCase keys) or ``{"identity", "financials", "qualitative"}``
                (snake_case keys).

        Returns:
            ValuationInput instance

        Raises:
            InvalidValuationInputError: On missing required fields, unknown
                categorical values or non-finite numbers.
        """
        if not isinstance(payload, Mapping):
            raise InvalidValuationInputError("Payload must be a mapping")

        basic = _section(payload, "basicInfo", "identity")
        financial = _section(payload, "financialData", "financials")
        details = _section(payload, "businessDetails", "qualitative")

        identity = CompanyIdentity(
            company_name=_required_text(basic, "companyName", "company_name"),
            industry=_required_text(basic, "industry", "industry"),
            business_type=_enum_value(basic, BusinessType, "businessType", "business_type", BusinessType.B2B),
            founded_year=_optional_int(basic, "foundedYear", "founded_year"),
            employee_count=_optional_int(basic, "employeeCount", "employee_count") or 0,
            location=str(_lookup(basic, "location", "location") or ""),
            description=str(_lookup(basic, "description", "description") or ""),
        )

        financials = FinancialData(
            annual_revenue=_required_number(financial, "annualRevenue", "annual_revenue"),
            gross_profit=_required_number(financial, "grossProfit", "gross_profit"),
            net_income=_required_number(financial, "netIncome", "net_income"),
            total_assets=_required_number(financial, "totalAssets", "total_assets"),
            total_liabilities=_optional_number(financial, "totalLiabilities", "total_liabilities", 0.0),
            monthly_recurring_revenue=_optional_number(
                financial, "monthlyRecurringRevenue", "monthly_recurring_revenue", None
            ),
            cash_flow=_optional_number(financial, "cashFlow", "cash_flow", 0.0),
            previous_year_revenue=_optional_number(financial, "previousYearRevenue", "previous_year_revenue", 0.0),
            debt_to_equity=_optional_number(financial, "debtToEquity", "debt_to_equity", 0.0),
            current_ratio=_optional_number(financial, "currentRatio", "current_ratio", 0.0),
        )

        qualitative = QualitativeProfile(
            market_position=_enum_value(details, MarketPosition, "marketPosition", "market_position"),
            growth_stage=_enum_value(details, GrowthStage, "growthStage", "growth_stage"),
            competitive_advantages=_string_tuple(details, "competitiveAdvantage", "competitive_advantages"),
            risk_factors=_string_tuple(details, "riskFactors", "risk_factors"),
            customer_concentration=_enum_value(
                details, RiskLevel, "customerConcentration", "customer_concentration", RiskLevel.MEDIUM
            ),
            technology_dependence=_enum_value(
                details, RiskLevel, "technologyDependence", "technology_dependence", RiskLevel.MEDIUM
            ),
            regulatory_risk=_enum_value(details, RiskLevel, "regulatoryRisk", "regulatory_risk", RiskLevel.LOW),
            market_size=_enum_value(details, MarketSize, "marketSize", "market_size", MarketSize.MEDIUM),
            geographic_diversification=_enum_value(
                details,
                GeographicDiversification,
                "geographicDiversification",
                "geographic_diversification",
                GeographicDiversification.NATIONAL,
            ),
        )

        return cls(identity=identity, financials=financials, qualitative=qualitative)


# =============================================================================
# Output records
# =============================================================================


@dataclass(frozen=True)
class ValuationMethodResult:
    name: ValuationMethodName
    value: float
    confidence: float
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name.value,
            "value": self.value,
            "confidence": self.confidence,
            "description": self.description,
        }


@dataclass(frozen=True)
class AdjustmentFactors:
    """Multiplicative corrections applied uniformly to every method value."""

    growth_adjustment: float
    risk_adjustment: float
    market_position_adjustment: float
    size_adjustment: float

    @property
    def combined(self) -> float:
        return (
            self.growth_adjustment
            * self.risk_adjustment
            * self.market_position_adjustment
            * self.size_adjustment
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            "growthAdjustment": self.growth_adjustment,
            "riskAdjustment": self.risk_adjustment,
            "marketPositionAdjustment": self.market_position_adjustment,
            "sizeAdjustment": self.size_adjustment,
        }


@dataclass(frozen=True)
class DerivedMetrics:
    revenue_multiple: float
    profit_margin: float  # Percent
    return_on_assets: float  # Percent
    debt_to_equity: float
    growth_rate: float  # Percent

    def to_dict(self) -> Dict[str, float]:
        return {
            "revenueMultiple": self.revenue_multiple,
            "profitMargin": self.profit_margin,
            "returnOnAssets": self.return_on_assets,
            "debtToEquity": self.debt_to_equity,
            "growthRate": self.growth_rate,
        }


@dataclass(frozen=True)
class ValuationResult:
    company_name: str
    industry: str
    evaluation_date: str
    overall_valuation: float
    confidence_score: float
    methods: Tuple[ValuationMethodResult, ...]
    adjustment_factors: AdjustmentFactors
    key_metrics: DerivedMetrics
    recommendations: Tuple[str, ...] = ()
    risk_factors: Tuple[str, ...] = field(default_factory=tuple)

    def method(self, name: ValuationMethodName) -> ValuationMethodResult:
        """Return the result for one method by identifier."""
        for result in self.methods:
            if result.name == name:
                return result
        raise KeyError(name.value)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly payload for persistence or rendering."""
        return {
            "companyName": self.company_name,
            "industry": self.industry,
            "evaluationDate": self.evaluation_date,
            "overallValuation": self.overall_valuation,
            "confidenceScore": self.confidence_score,
            "methods": [method.to_dict() for method in self.methods],
            "adjustmentFactors": self.adjustment_factors.to_dict(),
            "keyMetrics": self.key_metrics.to_dict(),
            "recommendations": list(self.recommendations),
            "riskFactors": list(self.risk_factors),
        }


# =============================================================================
# Payload parsing helpers
# =============================================================================

E = TypeVar("E", bound=Enum)

_MISSING = object()


def _section(payload: Mapping[str, Any], camel: str, snake: str) -> Mapping[str, Any]:
    section = payload.get(camel, payload.get(snake))
    if section is None:
        raise InvalidValuationInputError("Missing payload section", field_name=camel)
    if not isinstance(section, Mapping):
        raise InvalidValuationInputError("Payload section must be a mapping", field_name=camel)
    return section


def _lookup(section: Mapping[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    if camel in section:
        return section[camel]
    return section.get(snake, default)


def _required_text(section: Mapping[str, Any], camel: str, snake: str) -> str:
    value = _lookup(section, camel, snake)
    if value is None or not str(value).strip():
        raise InvalidValuationInputError("Required field is missing", field_name=camel)
    return str(value).strip()


def _to_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise InvalidValuationInputError("Expected a number, got a boolean", field_name=field_name)
    try:
        number = float(value)
    except OverflowError:
        raise InvalidValuationInputError("Number is too large", field_name=field_name) from None
    except (TypeError, ValueError):
        raise InvalidValuationInputError(f"Expected a number, got {value!r}", field_name=field_name) from None
    if not math.isfinite(number):
        raise InvalidValuationInputError("Number must be finite", field_name=field_name)
    return number


def _required_number(section: Mapping[str, Any], camel: str, snake: str) -> float:
    value = _lookup(section, camel, snake)
    if value is None or value == "":
        raise InvalidValuationInputError("Required field is missing", field_name=camel)
    return _to_number(value, camel)


def _optional_number(section: Mapping[str, Any], camel: str, snake: str, default: Optional[float]) -> Optional[float]:
    value = _lookup(section, camel, snake)
    if value is None or value == "":
        return default
    return _to_number(value, camel)


def _optional_int(section: Mapping[str, Any], camel: str, snake: str) -> Optional[int]:
    value = _optional_number(section, camel, snake, None)
    return int(value) if value is not None else None


def _enum_value(
    section: Mapping[str, Any],
    enum_cls: Type[E],
    camel: str,
    snake: str,
    default: Any = _MISSING,
) -> E:
    value = _lookup(section, camel, snake)
    if value is None or value == "":
        if default is _MISSING:
            raise InvalidValuationInputError("Required field is missing", field_name=camel)
        return default
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidValuationInputError(
            f"Unknown value {value!r} (expected one of: {allowed})", field_name=camel
        ) from None


def _string_tuple(section: Mapping[str, Any], camel: str, snake: str) -> Tuple[str, ...]:
    value = _lookup(section, camel, snake)
    if value is None:
        return ()
    if isinstance(value, str):
        raise InvalidValuationInputError("Expected a list of strings", field_name=camel)
    if not isinstance(value, Iterable):
        raise InvalidValuationInputError("Expected a list of strings", field_name=camel)
    return tuple(str(item) for item in value)
