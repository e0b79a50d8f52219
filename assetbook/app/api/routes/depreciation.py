from fastapi import APIRouter

from ...schemas.depreciation import (
    ChartSeries,
    DecliningBalanceRequest,
    ScheduleRequest,
    ScheduleResponse,
    StraightLineRequest,
)
from ...services.depreciation import (
    build_schedule,
    calculate_declining_balance,
    calculate_straight_line,
    chart_series,
    total_depreciation,
)

router = APIRouter()


@router.post("/straight-line", response_model=ScheduleResponse, summary="Straight-Line Depreciation")
def run_straight_line(payload: StraightLineRequest) -> ScheduleResponse:
    """
    Spread the depreciable amount evenly over the useful life.
    """
    schedule = calculate_straight_line(payload.cost, payload.residual_value, payload.useful_life)
    return ScheduleResponse(
        method="straight_line",
        schedule=list(schedule),
        total_depreciation=total_depreciation(schedule),
    )


@router.post("/declining-balance", response_model=ScheduleResponse, summary="Declining-Balance Depreciation")
def run_declining_balance(payload: DecliningBalanceRequest) -> ScheduleResponse:
    """
    Depreciate a fixed percentage of the prior year's book value, floored at the residual value.
    """
    schedule = calculate_declining_balance(
        payload.cost,
        payload.residual_value,
        payload.useful_life,
        payload.rate,
    )
    return ScheduleResponse(
        method="declining_balance",
        schedule=list(schedule),
        total_depreciation=total_depreciation(schedule),
    )


@router.post("/chart", response_model=ChartSeries, summary="Chart series for a schedule")
def run_chart(payload: ScheduleRequest) -> ChartSeries:
    """
    Return depreciation and book value series by year, without the acquisition year.
    """
    schedule = build_schedule(
        payload.method,
        payload.cost,
        payload.residual_value,
        payload.useful_life,
        payload.rate,
    )
    return chart_series(schedule)
