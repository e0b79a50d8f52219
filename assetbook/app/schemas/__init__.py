"""Export Pydantic schema models."""

from .asset import (
    Asset,
    AssetCreate,
    AssetPosition,
    AssetSummary,
    RegisterRow,
)
from .category import CategoryDefaults, SuggestedDefaults
from .depreciation import (
    ChartSeries,
    DecliningBalanceRequest,
    ScheduleEntry,
    ScheduleRequest,
    ScheduleResponse,
    StraightLineRequest,
)

__all__ = [
    "Asset",
    "AssetCreate",
    "AssetPosition",
    "AssetSummary",
    "RegisterRow",
    "CategoryDefaults",
    "SuggestedDefaults",
    "ChartSeries",
    "DecliningBalanceRequest",
    "ScheduleEntry",
    "ScheduleRequest",
    "ScheduleResponse",
    "StraightLineRequest",
]
