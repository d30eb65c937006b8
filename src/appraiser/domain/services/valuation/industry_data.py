"""
Industry Reference Data - static multiple bands per industry.

Provides the revenue, EBITDA and P/E multiple bands used by the
multiple-based valuation methods. Only ``average`` feeds the engine;
``min``/``max`` exist for display and validation.

The built-in table is read-only and built once at import time. A YAML file
can supply overrides at startup via ``load_industry_multipliers``, which
returns a new read-only table instead of touching the built-in one.

Example:
    lookup = lookup_industry("Retail")
    lookup.multipliers.revenue_multiple.average  # 1.2
    lookup.matched  # True

    lookup = lookup_industry("Space Mining")
    lookup.name  # "Other"
    lookup.matched  # False
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_INDUSTRY = "Other"


@dataclass(frozen=True)
class MultiplierBand:
    min: float
    max: float
    average: float

    def validate(self, label: str) -> None:
        if not self.min <= self.average <= self.max:
            raise ValueError(
                f"{label}: expected min <= average <= max, got "
                f"min={self.min}, average={self.average}, max={self.max}"
            )


@dataclass(frozen=True)
class IndustryMultipliers:
    revenue_multiple: MultiplierBand
    ebitda_multiple: MultiplierBand
    pe_ratio: MultiplierBand

    def validate(self, industry: str) -> None:
        self.revenue_multiple.validate(f"{industry}.revenue_multiple")
        self.ebitda_multiple.validate(f"{industry}.ebitda_multiple")
        self.pe_ratio.validate(f"{industry}.pe_ratio")


@dataclass(frozen=True)
class IndustryLookup:
    """Result of resolving an industry name against a reference table."""

    name: str
    multipliers: IndustryMultipliers
    matched: bool


def _entry(revenue: Tuple[float, float, float], ebitda: Tuple[float, float, float], pe: Tuple[float, float, float]):
    return IndustryMultipliers(
        revenue_multiple=MultiplierBand(*revenue),
        ebitda_multiple=MultiplierBand(*ebitda),
        pe_ratio=MultiplierBand(*pe),
    )


# (min, max, average) per band
_BUILTIN_MULTIPLIERS: Dict[str, IndustryMultipliers] = {
    "Technology - Software": _entry((4, 15, 8), (15, 40, 25), (20, 50, 30)),
    "Technology - Hardware": _entry((2, 6, 4), (10, 25, 15), (15, 30, 20)),
    "Healthcare - Services": _entry((3, 8, 5), (12, 25, 18), (18, 35, 25)),
    "Healthcare - Pharmaceuticals": _entry((4, 12, 7), (15, 30, 22), (20, 40, 28)),
    "Financial Services": _entry((2, 6, 3.5), (8, 15, 12), (10, 20, 15)),
    "E-commerce": _entry((2, 8, 4.5), (10, 30, 18), (15, 35, 22)),
    "Manufacturing": _entry((1, 3, 2), (6, 12, 9), (10, 18, 14)),
    "Retail": _entry((0.5, 2, 1.2), (5, 12, 8), (8, 16, 12)),
    "Food & Beverage": _entry((1, 4, 2.5), (6, 15, 10), (12, 20, 16)),
    "Real Estate": _entry((2, 6, 4), (8, 18, 12), (12, 25, 18)),
    "Energy": _entry((1, 4, 2.5), (5, 12, 8), (8, 15, 11)),
    "Transportation": _entry((1, 3, 2), (6, 14, 9), (10, 18, 13)),
    "Media & Entertainment": _entry((2, 8, 4.5), (8, 20, 13), (12, 25, 17)),
    "Education": _entry((2, 6, 3.5), (8, 18, 12), (15, 25, 19)),
    "Construction": _entry((0.5, 2, 1.2), (4, 10, 7), (8, 15, 11)),
    "Telecommunications": _entry((1.5, 4, 2.5), (6, 12, 9), (10, 18, 14)),
    "Professional Services": _entry((2, 6, 3.5), (8, 18, 12), (12, 22, 16)),
    "Restaurant & Hospitality": _entry((0.5, 2.5, 1.5), (4, 10, 6), (8, 16, 12)),
    "Automotive": _entry((0.3, 1.5, 0.8), (4, 8, 6), (6, 12, 9)),
    "Agriculture": _entry((0.5, 2, 1.2), (5, 12, 8), (8, 15, 11)),
    DEFAULT_INDUSTRY: _entry((1, 4, 2.5), (6, 15, 10), (10, 20, 15)),
}

INDUSTRY_MULTIPLIERS: Mapping[str, IndustryMultipliers] = MappingProxyType(_BUILTIN_MULTIPLIERS)

INDUSTRY_OPTIONS: Tuple[str, ...] = tuple(INDUSTRY_MULTIPLIERS)

# Asset-light businesses trade at a premium to book value
ASSET_LIGHT_INDUSTRIES = frozenset(
    {
        "Technology - Software",
        "Professional Services",
        "Media & Entertainment",
    }
)

COMPETITIVE_ADVANTAGES: Tuple[str, ...] = (
    "Strong brand recognition",
    "Patent protection",
    "Proprietary technology",
    "Network effects",
    "Economies of scale",
    "First-mover advantage",
    "Exclusive partnerships",
    "High switching costs",
    "Regulatory barriers",
    "Superior customer service",
    "Cost leadership",
    "Product differentiation",
    "Distribution channels",
    "Data/AI advantage",
    "Skilled workforce",
)

RISK_FACTORS: Tuple[str, ...] = (
    "High customer concentration",
    "Regulatory changes",
    "Technology disruption",
    "Competitive pressure",
    "Economic downturns",
    "Supply chain risks",
    "Key person dependency",
    "Cybersecurity threats",
    "Market saturation",
    "Currency fluctuations",
    "Interest rate sensitivity",
    "Environmental risks",
    "Legal/litigation risks",
    "Operational complexity",
    "Capital intensity",
)


def lookup_industry(
    industry: str,
    table: Optional[Mapping[str, IndustryMultipliers]] = None,
) -> IndustryLookup:
    """
    Resolve an industry name by exact match, falling back to "Other".

    Args:
        industry: Industry name as supplied by the caller
        table: Reference table (default: built-in INDUSTRY_MULTIPLIERS)

    Returns:
        IndustryLookup with ``matched=False`` when the fallback entry was used
    """
    table = INDUSTRY_MULTIPLIERS if table is None else table

    multipliers = table.get(industry)
    if multipliers is not None:
        return IndustryLookup(name=industry, multipliers=multipliers, matched=True)

    logger.debug(f"Industry {industry!r} not in reference table, using {DEFAULT_INDUSTRY!r} multiples")
    return IndustryLookup(name=DEFAULT_INDUSTRY, multipliers=table[DEFAULT_INDUSTRY], matched=False)


def is_asset_light(industry: str) -> bool:
    return industry in ASSET_LIGHT_INDUSTRIES


def _band_from_config(raw: Any, label: str) -> MultiplierBand:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{label}: expected a mapping with min/max/average")
    try:
        band = MultiplierBand(min=float(raw["min"]), max=float(raw["max"]), average=float(raw["average"]))
    except KeyError as e:
        raise ValueError(f"{label}: missing key {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise ValueError(f"{label}: {e}") from e
    band.validate(label)
    return band


def parse_industry_multipliers(raw: Mapping[str, Any]) -> Dict[str, IndustryMultipliers]:
    """Convert a ``{industry: {revenue_multiple: {...}, ...}}`` mapping into entries."""
    parsed: Dict[str, IndustryMultipliers] = {}
    for industry, bands in raw.items():
        if not isinstance(bands, Mapping):
            raise ValueError(f"{industry}: expected a mapping of multiple bands")
        parsed[str(industry)] = IndustryMultipliers(
            revenue_multiple=_band_from_config(bands.get("revenue_multiple"), f"{industry}.revenue_multiple"),
            ebitda_multiple=_band_from_config(bands.get("ebitda_multiple"), f"{industry}.ebitda_multiple"),
            pe_ratio=_band_from_config(bands.get("pe_ratio"), f"{industry}.pe_ratio"),
        )
    return parsed


def load_industry_multipliers(path: Optional[str | Path] = None) -> Mapping[str, IndustryMultipliers]:
    """
    Build the reference table, merging YAML overrides over the built-in entries.

    The file holds an ``industries`` mapping with the same shape as the
    built-in table. Overrides replace whole entries; new industries are
    appended.

    Args:
        path: Optional YAML file. ``None`` returns the built-in table.

    Returns:
        Read-only mapping of industry name to IndustryMultipliers

    Raises:
        FileNotFoundError: If the override file doesn't exist
        ValueError: If an entry is malformed or a band is out of order
    """
    if path is None:
        return INDUSTRY_MULTIPLIERS

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Industry multiples file not found: {path}")

    with open(path, "r") as f:
        content = yaml.safe_load(f) or {}

    if not isinstance(content, Mapping):
        raise ValueError(f"{path}: expected a mapping with an 'industries' key")
    industries = content.get("industries", {})
    if not isinstance(industries, Mapping):
        raise ValueError(f"{path}: 'industries' must be a mapping of industry entries")

    overrides = parse_industry_multipliers(industries)
    merged = dict(_BUILTIN_MULTIPLIERS)
    merged.update(overrides)

    logger.info(f"Loaded {len(overrides)} industry multiple override(s) from {path}")
    return MappingProxyType(merged)
