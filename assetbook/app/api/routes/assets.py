from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ...schemas.asset import Asset, AssetCreate, AssetPosition, AssetSummary, SortKey, SortOrder
from ...services.register import AssetNotFoundError, AssetRegister
from ..dependencies import get_register

router = APIRouter()


def _load(register: AssetRegister, asset_id: str) -> Asset:
    try:
        return register.get(asset_id)
    except AssetNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Asset '{asset_id}' not found.") from exc


@router.post("", response_model=Asset, status_code=status.HTTP_201_CREATED, summary="Register an asset")
def create_asset(payload: AssetCreate, register: AssetRegister = Depends(get_register)) -> Asset:
    """
    Calculate the asset's schedule and store both under a generated identifier.
    """
    return register.add(payload)


@router.get("", response_model=List[Asset], summary="List registered assets")
def list_assets(
    category: Optional[str] = Query(default=None, description="Only return assets of this category."),
    sort_by: SortKey = "name",
    order: SortOrder = "asc",
    register: AssetRegister = Depends(get_register),
) -> List[Asset]:
    return register.list(category=category, sort_by=sort_by, order=order)


@router.get("/categories", response_model=List[str], summary="Categories present in the register")
def list_register_categories(register: AssetRegister = Depends(get_register)) -> List[str]:
    return register.categories()


@router.get("/{asset_id}", response_model=Asset)
def read_asset(asset_id: str, register: AssetRegister = Depends(get_register)) -> Asset:
    return _load(register, asset_id)


@router.put("/{asset_id}", response_model=Asset, summary="Replace an asset and recalculate its schedule")
def update_asset(
    asset_id: str,
    payload: AssetCreate,
    register: AssetRegister = Depends(get_register),
) -> Asset:
    try:
        return register.update(asset_id, payload)
    except AssetNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Asset '{asset_id}' not found.") from exc


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_asset(asset_id: str, register: AssetRegister = Depends(get_register)) -> Response:
    try:
        register.delete(asset_id)
    except AssetNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Asset '{asset_id}' not found.") from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{asset_id}/summary", response_model=AssetSummary, summary="Asset summary at a selected year")
def read_asset_summary(
    asset_id: str,
    year: int = Query(default=1, ge=0),
    register: AssetRegister = Depends(get_register),
) -> AssetSummary:
    return register.summary(_load(register, asset_id), year)


@router.get("/{asset_id}/position", response_model=AssetPosition, summary="Current-year depreciation and NBV")
def read_asset_position(
    asset_id: str,
    as_of: Optional[date] = Query(default=None, description="Valuation date; defaults to today."),
    register: AssetRegister = Depends(get_register),
) -> AssetPosition:
    return register.current_position(_load(register, asset_id), as_of or date.today())
