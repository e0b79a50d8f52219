from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ...config import Settings, get_settings
from ...schemas.asset import SortKey, SortOrder
from ...schemas.depreciation import ScheduleRequest
from ...services.depreciation import build_schedule
from ...services.export import (
    export_filename,
    register_to_csv,
    register_to_pdf,
    schedule_to_csv,
    schedule_to_pdf,
)
from ...services.register import AssetNotFoundError, AssetRegister
from ..dependencies import get_register

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
PDF_MEDIA_TYPE = "application/pdf"

router = APIRouter()


def _attachment(content: bytes | str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/schedule.csv", summary="Export a calculated schedule as CSV")
def export_schedule_csv(payload: ScheduleRequest, settings: Settings = Depends(get_settings)) -> Response:
    schedule = build_schedule(payload.method, payload.cost, payload.residual_value, payload.useful_life, payload.rate)
    return _attachment(
        schedule_to_csv(schedule, settings.currency),
        CSV_MEDIA_TYPE,
        export_filename(payload.asset_name, "csv"),
    )


@router.post("/schedule.pdf", summary="Export a calculated schedule as PDF")
def export_schedule_pdf(payload: ScheduleRequest, settings: Settings = Depends(get_settings)) -> Response:
    schedule = build_schedule(payload.method, payload.cost, payload.residual_value, payload.useful_life, payload.rate)
    return _attachment(
        schedule_to_pdf(schedule, payload.asset_name, date.today(), settings.currency),
        PDF_MEDIA_TYPE,
        export_filename(payload.asset_name, "pdf"),
    )


@router.get("/assets/{asset_id}.{extension}", summary="Export a registered asset's schedule")
def export_asset_schedule(
    asset_id: str,
    extension: str,
    register: AssetRegister = Depends(get_register),
    settings: Settings = Depends(get_settings),
) -> Response:
    try:
        asset = register.get(asset_id)
    except AssetNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Asset '{asset_id}' not found.") from exc

    if extension == "csv":
        return _attachment(
            schedule_to_csv(asset.schedule, settings.currency),
            CSV_MEDIA_TYPE,
            export_filename(asset.name, "csv"),
        )
    if extension == "pdf":
        return _attachment(
            schedule_to_pdf(asset.schedule, asset.name, date.today(), settings.currency),
            PDF_MEDIA_TYPE,
            export_filename(asset.name, "pdf"),
        )
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unsupported export format '{extension}'.")


@router.get("/register.csv", summary="Export the asset register as CSV")
def export_register_csv(
    category: Optional[str] = Query(default=None),
    sort_by: SortKey = "name",
    order: SortOrder = "asc",
    register: AssetRegister = Depends(get_register),
    settings: Settings = Depends(get_settings),
) -> Response:
    rows = register.register_rows(date.today(), category=category, sort_by=sort_by, order=order)
    return _attachment(register_to_csv(rows, settings.currency), CSV_MEDIA_TYPE, "asset_register.csv")


@router.get("/register.pdf", summary="Export the asset register as PDF")
def export_register_pdf(
    category: Optional[str] = Query(default=None),
    sort_by: SortKey = "name",
    order: SortOrder = "asc",
    register: AssetRegister = Depends(get_register),
    settings: Settings = Depends(get_settings),
) -> Response:
    rows = register.register_rows(date.today(), category=category, sort_by=sort_by, order=order)
    return _attachment(
        register_to_pdf(rows, date.today(), settings.currency),
        PDF_MEDIA_TYPE,
        "asset_register.pdf",
    )
