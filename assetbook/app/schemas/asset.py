from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .depreciation import DepreciationMethod, ScheduleEntry

SortKey = Literal["name", "category", "cost", "purchase_date"]
SortOrder = Literal["asc", "desc"]


class AssetCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Display name of the asset.")
    category: str = Field(..., min_length=1, description="Asset category, e.g. 'computers'.")
    cost: float = Field(..., gt=0, description="Purchase cost.")
    residual_value: float = Field(default=0.0, ge=0)
    purchase_date: date
    useful_life: int = Field(..., ge=1, description="Useful life in years.")
    method: DepreciationMethod = "straight_line"
    rate: Optional[float] = Field(
        default=None,
        gt=0,
        le=100,
        description="Declining rate in percent. Only meaningful for declining balance.",
    )

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Asset name is required.")
        return stripped

    @model_validator(mode="after")
    def _validate_residual(self) -> "AssetCreate":
        if self.residual_value > self.cost:
            raise ValueError("residual_value must not exceed cost.")
        return self


class Asset(AssetCreate):
    id: str
    schedule: List[ScheduleEntry]


class AssetPosition(BaseModel):
    """Where an asset sits in its schedule on a given date."""

    asset_id: str
    year: int
    depreciation: float
    book_value: float


class AssetSummary(BaseModel):
    asset_id: str
    name: str
    category: str
    cost: float
    residual_value: float
    method: DepreciationMethod
    rate: Optional[float]
    useful_life: int
    year: int
    years_remaining: int
    book_value: float


class RegisterRow(BaseModel):
    """Flattened register line used by the register exports."""

    name: str
    category: str
    cost: float
    purchase_date: date
    useful_life: int
    method: DepreciationMethod
    current_book_value: float
