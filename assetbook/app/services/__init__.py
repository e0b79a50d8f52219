"""Service layer exposing depreciation, register and export operations."""

from .categories import get_category, list_categories, suggest_defaults
from .depreciation import (
    build_schedule,
    calculate_declining_balance,
    calculate_straight_line,
    chart_series,
    total_depreciation,
)
from .export import (
    export_filename,
    register_to_csv,
    register_to_pdf,
    schedule_to_csv,
    schedule_to_pdf,
)
from .register import (
    AssetNotFoundError,
    AssetRegister,
    AssetStore,
    InMemoryAssetStore,
    JsonFileAssetStore,
    RegisterStorageError,
)

__all__ = [
    "build_schedule",
    "calculate_declining_balance",
    "calculate_straight_line",
    "chart_series",
    "total_depreciation",
    "get_category",
    "list_categories",
    "suggest_defaults",
    "export_filename",
    "register_to_csv",
    "register_to_pdf",
    "schedule_to_csv",
    "schedule_to_pdf",
    "AssetNotFoundError",
    "AssetRegister",
    "AssetStore",
    "InMemoryAssetStore",
    "JsonFileAssetStore",
    "RegisterStorageError",
]
