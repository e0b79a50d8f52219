"""Suggested depreciation inputs per asset category."""

from __future__ import annotations

import math
from typing import Dict, List, Optional

from ..schemas.category import CategoryDefaults, SuggestedDefaults

FALLBACK_CATEGORY = "other"

CATEGORY_DEFAULTS: Dict[str, CategoryDefaults] = {
    defaults.category: defaults
    for defaults in (
        CategoryDefaults(
            category="computers",
            label="Computers & IT Equipment",
            residual_range="0-10%",
            residual_percentage=0.05,
            rate=35.0,
            useful_life=3,
        ),
        CategoryDefaults(
            category="vehicles",
            label="Motor Vehicles",
            residual_range="10-20%",
            residual_percentage=0.15,
            rate=22.5,
            useful_life=5,
        ),
        CategoryDefaults(
            category="machinery",
            label="Plant & Machinery",
            residual_range="5-15%",
            residual_percentage=0.10,
            rate=20.0,
            useful_life=10,
        ),
        CategoryDefaults(
            category="furniture",
            label="Office Furniture & Fittings",
            residual_range="5-10%",
            residual_percentage=0.075,
            rate=12.5,
            useful_life=7,
        ),
        CategoryDefaults(
            category="buildings",
            label="Buildings (Commercial)",
            residual_range="20-30%",
            residual_percentage=0.25,
            rate=3.5,
            useful_life=30,
        ),
        CategoryDefaults(
            category="tools",
            label="Tools & Equipment",
            residual_range="5-10%",
            rate=26.67,
            useful_life=5,
        ),
        CategoryDefaults(
            category="leasehold",
            label="Leasehold Improvements",
            residual_range="0-5%",
            # lease term would be the better guide; 10% until the term is captured
            rate=10.0,
            useful_life=10,
        ),
        CategoryDefaults(
            category=FALLBACK_CATEGORY,
            label="Other",
            rate=20.0,
            useful_life=5,
        ),
    )
}


def list_categories() -> List[CategoryDefaults]:
    return list(CATEGORY_DEFAULTS.values())


def get_category(category: str) -> CategoryDefaults:
    defaults = CATEGORY_DEFAULTS.get(category)
    if defaults is None:
        raise KeyError(f"Unknown asset category '{category}'.")
    return defaults


def suggest_defaults(category: str, cost: Optional[float] = None) -> SuggestedDefaults:
    """
    Suggest useful life, declining rate and residual value for a category.

    Unknown categories get the fallback life and rate. A residual value is
    only proposed when the category carries a residual percentage and the
    cost is positive; it is rounded half-up to a whole currency unit.
    """
    defaults = CATEGORY_DEFAULTS.get(category) or CATEGORY_DEFAULTS[FALLBACK_CATEGORY]

    residual_value: Optional[float] = None
    if defaults.residual_percentage is not None and cost is not None and cost > 0:
        residual_value = float(math.floor(cost * defaults.residual_percentage + 0.5))

    return SuggestedDefaults(
        category=category,
        useful_life=defaults.useful_life,
        rate=defaults.rate,
        residual_value=residual_value,
    )
