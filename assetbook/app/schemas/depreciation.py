from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

DepreciationMethod = Literal["straight_line", "declining_balance"]

DEFAULT_DECLINING_RATE = 20.0


class ScheduleEntry(BaseModel):
    """One year of a depreciation schedule. Year 0 is the acquisition year."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=0)
    depreciation: float = Field(..., description="Amount depreciated in the year.")
    accumulated: float = Field(..., description="Cumulative depreciation through the year.")
    book_value: float = Field(..., description="Carrying amount after the year's depreciation.")


Schedule = Tuple[ScheduleEntry, ...]


class DepreciationInput(BaseModel):
    cost: float = Field(..., gt=0, description="Purchase cost / depreciable basis.")
    residual_value: float = Field(
        default=0.0,
        ge=0,
        description="Expected salvage value at the end of useful life.",
    )
    useful_life: int = Field(..., ge=1, description="Number of depreciation periods (years).")

    @model_validator(mode="after")
    def _validate_residual(self) -> "DepreciationInput":
        if self.residual_value > self.cost:
            raise ValueError("residual_value must not exceed cost.")
        return self


class StraightLineRequest(DepreciationInput):
    pass


class DecliningBalanceRequest(DepreciationInput):
    rate: float = Field(
        default=DEFAULT_DECLINING_RATE,
        gt=0,
        le=100,
        description="Annual declining rate expressed as a percentage (20 means 20%).",
    )


class ScheduleRequest(DepreciationInput):
    """Method-agnostic request used by the chart and export endpoints."""

    method: DepreciationMethod = "straight_line"
    rate: Optional[float] = Field(
        default=None,
        gt=0,
        le=100,
        description="Declining rate in percent; ignored for straight-line.",
    )
    asset_name: str = Field(default="Asset", min_length=1)


class ScheduleResponse(BaseModel):
    method: DepreciationMethod
    schedule: List[ScheduleEntry]
    total_depreciation: float


class ChartSeries(BaseModel):
    """Parallel series for plotting; the acquisition year is left out."""

    years: List[int]
    depreciation: List[float]
    book_value: List[float]
