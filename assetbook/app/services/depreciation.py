from __future__ import annotations

from typing import List, Optional

from ..schemas.depreciation import (
    DEFAULT_DECLINING_RATE,
    ChartSeries,
    DepreciationMethod,
    Schedule,
    ScheduleEntry,
)


def _opening_entry(cost: float) -> ScheduleEntry:
    return ScheduleEntry(year=0, depreciation=0.0, accumulated=0.0, book_value=cost)


def calculate_straight_line(cost: float, residual_value: float, useful_life: int) -> Schedule:
    """
    Constant annual depreciation of (cost - residual_value) / useful_life.

    The book value is floored at the residual value so that accumulated
    floating-point drift never reports a carrying amount below salvage.
    Inputs are not validated; a useful life below one yields only the
    acquisition entry.
    """
    schedule: List[ScheduleEntry] = [_opening_entry(cost)]
    if useful_life < 1:
        return tuple(schedule)

    depreciable_amount = cost - residual_value
    annual_depreciation = depreciable_amount / useful_life

    for year in range(1, useful_life + 1):
        accumulated = year * annual_depreciation
        schedule.append(
            ScheduleEntry(
                year=year,
                depreciation=annual_depreciation,
                accumulated=accumulated,
                book_value=max(cost - accumulated, residual_value),
            )
        )

    return tuple(schedule)


def calculate_declining_balance(
    cost: float,
    residual_value: float,
    useful_life: int,
    rate: float = DEFAULT_DECLINING_RATE,
) -> Schedule:
    """
    Depreciate a fixed percentage of the prior year's book value.

    Steps per year:
      1) Tentative depreciation = current book value * rate / 100.
      2) Clamp so the book value lands exactly on the residual value.
      3) Clamp negative depreciation to zero.
      4) Once the residual is reached, the remaining years carry zero
         depreciation, frozen accumulated depreciation and the residual value.
    """
    declining_rate = rate / 100
    schedule: List[ScheduleEntry] = [_opening_entry(cost)]
    current_book_value = cost
    accumulated_depreciation = 0.0

    for year in range(1, useful_life + 1):
        depreciation = current_book_value * declining_rate
        if current_book_value - depreciation < residual_value:
            depreciation = current_book_value - residual_value
        if depreciation < 0:
            depreciation = 0.0

        accumulated_depreciation += depreciation
        current_book_value -= depreciation

        schedule.append(
            ScheduleEntry(
                year=year,
                depreciation=depreciation,
                accumulated=accumulated_depreciation,
                book_value=max(current_book_value, residual_value),
            )
        )

        if current_book_value <= residual_value:
            schedule.extend(
                ScheduleEntry(
                    year=remaining_year,
                    depreciation=0.0,
                    accumulated=accumulated_depreciation,
                    book_value=residual_value,
                )
                for remaining_year in range(year + 1, useful_life + 1)
            )
            break

    return tuple(schedule)


def build_schedule(
    method: DepreciationMethod,
    cost: float,
    residual_value: float,
    useful_life: int,
    rate: Optional[float] = None,
) -> Schedule:
    """Dispatch to the calculator for ``method``; ``rate=None`` uses the default rate."""
    if method == "straight_line":
        return calculate_straight_line(cost, residual_value, useful_life)
    if method == "declining_balance":
        if rate is None:
            return calculate_declining_balance(cost, residual_value, useful_life)
        return calculate_declining_balance(cost, residual_value, useful_life, rate)
    raise ValueError(f"Unsupported depreciation method '{method}'.")


def total_depreciation(schedule: Schedule) -> float:
    return schedule[-1].accumulated if schedule else 0.0


def chart_series(schedule: Schedule) -> ChartSeries:
    plotted = [entry for entry in schedule if entry.year > 0]
    return ChartSeries(
        years=[entry.year for entry in plotted],
        depreciation=[entry.depreciation for entry in plotted],
        book_value=[entry.book_value for entry in plotted],
    )
