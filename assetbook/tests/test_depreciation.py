import pytest
from pydantic import ValidationError

from assetbook.app.services.depreciation import (
    build_schedule,
    calculate_declining_balance,
    calculate_straight_line,
    chart_series,
    total_depreciation,
)

TOLERANCE = 1e-9

CASES = [
    (120000.0, 20000.0, 5, 20.0),
    (100000.0, 10000.0, 5, 20.0),
    (10000.0, 9000.0, 10, 50.0),
    (5000.0, 0.0, 7, 35.0),
    (75000.0, 18750.0, 30, 3.5),
    (1.0, 0.0, 1, 100.0),
]


def _assert_schedule_invariants(schedule, cost, residual_value, useful_life):
    assert len(schedule) == useful_life + 1
    assert [entry.year for entry in schedule] == list(range(useful_life + 1))

    opening = schedule[0]
    assert opening.depreciation == 0
    assert opening.accumulated == 0
    assert opening.book_value == cost

    for previous, current in zip(schedule, schedule[1:]):
        assert current.accumulated >= previous.accumulated - TOLERANCE
    for entry in schedule:
        assert entry.book_value >= residual_value - TOLERANCE


@pytest.mark.parametrize("cost,residual_value,useful_life,rate", CASES)
def test_straight_line_invariants(cost, residual_value, useful_life, rate):
    schedule = calculate_straight_line(cost, residual_value, useful_life)
    _assert_schedule_invariants(schedule, cost, residual_value, useful_life)
    assert schedule[-1].book_value == pytest.approx(residual_value, abs=1e-6)


@pytest.mark.parametrize("cost,residual_value,useful_life,rate", CASES)
def test_declining_balance_invariants(cost, residual_value, useful_life, rate):
    schedule = calculate_declining_balance(cost, residual_value, useful_life, rate)
    _assert_schedule_invariants(schedule, cost, residual_value, useful_life)
    assert all(entry.depreciation >= 0 for entry in schedule)


def test_straight_line_constant_annual_amount():
    schedule = calculate_straight_line(120000.0, 20000.0, 5)

    assert all(entry.depreciation == 20000.0 for entry in schedule[1:])
    year_three = schedule[3]
    assert year_three.depreciation == pytest.approx(20000.0)
    assert year_three.accumulated == pytest.approx(60000.0)
    assert year_three.book_value == pytest.approx(60000.0)
    assert total_depreciation(schedule) == pytest.approx(100000.0)


def test_straight_line_final_book_value_hits_residual_with_uneven_division():
    schedule = calculate_straight_line(10000.0, 1000.0, 7)

    assert schedule[-1].book_value == pytest.approx(1000.0, abs=1e-9)
    assert schedule[-1].accumulated == pytest.approx(9000.0, abs=1e-9)


def test_declining_balance_first_two_years():
    schedule = calculate_declining_balance(100000.0, 10000.0, 5, 20.0)

    assert schedule[1].depreciation == pytest.approx(20000.0)
    assert schedule[1].accumulated == pytest.approx(20000.0)
    assert schedule[1].book_value == pytest.approx(80000.0)
    assert schedule[2].depreciation == pytest.approx(16000.0)
    assert schedule[2].accumulated == pytest.approx(36000.0)
    assert schedule[2].book_value == pytest.approx(64000.0)


def test_declining_balance_stops_at_residual_floor():
    schedule = calculate_declining_balance(10000.0, 9000.0, 10, 50.0)

    assert len(schedule) == 11
    assert schedule[1].depreciation == pytest.approx(1000.0)
    assert schedule[1].book_value == pytest.approx(9000.0)
    for entry in schedule[2:]:
        assert entry.depreciation == 0
        assert entry.accumulated == pytest.approx(1000.0)
        assert entry.book_value == 9000.0


def test_declining_balance_default_rate_matches_twenty_percent():
    assert calculate_declining_balance(50000.0, 5000.0, 8) == calculate_declining_balance(
        50000.0, 5000.0, 8, 20.0
    )


def test_calculations_are_deterministic():
    assert calculate_straight_line(120000.0, 20000.0, 5) == calculate_straight_line(120000.0, 20000.0, 5)
    assert calculate_declining_balance(100000.0, 10000.0, 5, 25.0) == calculate_declining_balance(
        100000.0, 10000.0, 5, 25.0
    )


def test_schedule_entries_are_immutable():
    schedule = calculate_straight_line(1000.0, 100.0, 3)

    assert isinstance(schedule, tuple)
    with pytest.raises(ValidationError):
        schedule[1].depreciation = 0.0


def test_zero_useful_life_returns_only_acquisition_entry():
    for schedule in (
        calculate_straight_line(1000.0, 100.0, 0),
        calculate_declining_balance(1000.0, 100.0, 0),
    ):
        assert len(schedule) == 1
        assert schedule[0].book_value == 1000.0


def test_degenerate_inputs_do_not_raise():
    straight = calculate_straight_line(1000.0, 1500.0, 5)
    assert len(straight) == 6
    assert all(entry.book_value == 1500.0 for entry in straight[1:])

    declining = calculate_declining_balance(1000.0, 1500.0, 5)
    assert len(declining) == 6
    assert all(entry.depreciation == 0 for entry in declining)

    zero_rate = calculate_declining_balance(1000.0, 100.0, 4, 0.0)
    assert [entry.book_value for entry in zero_rate] == [1000.0] * 5

    zero_cost = calculate_straight_line(0.0, 0.0, 3)
    assert [entry.book_value for entry in zero_cost] == [0.0] * 4


def test_build_schedule_dispatches_by_method():
    assert build_schedule("straight_line", 1000.0, 100.0, 3) == calculate_straight_line(1000.0, 100.0, 3)
    assert build_schedule("declining_balance", 1000.0, 100.0, 3) == calculate_declining_balance(1000.0, 100.0, 3)
    assert build_schedule("declining_balance", 1000.0, 100.0, 3, 40.0) == calculate_declining_balance(
        1000.0, 100.0, 3, 40.0
    )
    with pytest.raises(ValueError):
        build_schedule("sum_of_years", 1000.0, 100.0, 3)


def test_chart_series_skips_acquisition_year():
    series = chart_series(calculate_straight_line(120000.0, 20000.0, 5))

    assert series.years == [1, 2, 3, 4, 5]
    assert series.depreciation == [20000.0] * 5
    assert series.book_value[0] == pytest.approx(100000.0)
    assert series.book_value[-1] == pytest.approx(20000.0)
