from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.category import CategoryDefaults, SuggestedDefaults
from ...services.categories import get_category, list_categories, suggest_defaults

router = APIRouter()


@router.get("", response_model=List[CategoryDefaults], summary="Asset categories")
def read_categories() -> List[CategoryDefaults]:
    return list_categories()


@router.get("/{category}", response_model=CategoryDefaults, summary="Defaults for one category")
def read_category(category: str) -> CategoryDefaults:
    try:
        return get_category(category)
    except KeyError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown asset category '{category}'.") from exc


@router.get("/{category}/suggest", response_model=SuggestedDefaults, summary="Suggested inputs for a category")
def read_suggestion(
    category: str,
    cost: Optional[float] = Query(default=None, gt=0, description="Purchase cost used to suggest a residual value."),
) -> SuggestedDefaults:
    """
    Suggest useful life, declining rate and, when a cost is given, a residual value.
    """
    return suggest_defaults(category, cost)
