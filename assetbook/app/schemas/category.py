from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    label: str
    residual_range: Optional[str] = Field(
        default=None,
        description="Typical residual value range, shown as guidance.",
    )
    residual_percentage: Optional[float] = Field(
        default=None,
        description="Fraction of cost suggested as residual value (0.05 means 5%).",
    )
    rate: float = Field(..., description="Suggested declining rate in percent.")
    useful_life: int = Field(..., ge=1, description="Suggested useful life in years.")


class SuggestedDefaults(BaseModel):
    category: str
    useful_life: int
    rate: float
    residual_value: Optional[float] = Field(
        default=None,
        description="Only suggested when the category has a residual percentage and a cost is known.",
    )
