"""
Unit tests for retirement.py module.

Tests the compounding order, point counts, rounding, determinism and the
boundary cases of the projection.
"""

import math

import pytest

from lifecalc.income import monthly_income
from lifecalc.profiles import IncomeProfile, ProjectionPoint, RetirementAssumptions
from lifecalc.retirement import monthly_savings, project_retirement, projection_frame


class TestProjectRetirement:
    """Tests for project_retirement()."""

    def test_two_year_scenario(self, income, assumptions):
        """Growth before contribution, rounded half up: 28150 then 36871."""
        assert monthly_income(income) == pytest.approx(3750)
        assert monthly_savings(income, assumptions) == pytest.approx(562.5)

        points = project_retirement(income, assumptions, 20_000)

        assert points == [
            ProjectionPoint(year=64, savings=28150),
            ProjectionPoint(year=65, savings=36871),
        ]

    def test_first_point_already_grown(self, income):
        """The starting balance is never emitted on its own."""
        assumptions = RetirementAssumptions(
            current_age=40, retirement_age=40, savings_rate=0, expected_return=10
        )
        points = project_retirement(income, assumptions, 1_000)
        assert points == [ProjectionPoint(year=40, savings=1_100)]

    @pytest.mark.parametrize("current_age, retirement_age", [(30, 65), (0, 0), (18, 19), (50, 90)])
    def test_point_count(self, income, current_age, retirement_age):
        assumptions = RetirementAssumptions(current_age=current_age, retirement_age=retirement_age)
        points = project_retirement(income, assumptions, 0)
        assert len(points) == retirement_age - current_age + 1
        assert [p.year for p in points] == list(range(current_age, retirement_age + 1))

    def test_retirement_before_current_age_is_empty(self, income):
        assumptions = RetirementAssumptions(current_age=70, retirement_age=65)
        assert project_retirement(income, assumptions, 50_000) == []

    def test_idempotent(self, income):
        assumptions = RetirementAssumptions()
        first = project_retirement(income, assumptions, 12_345)
        second = project_retirement(income, assumptions, 12_345)
        assert first == second
        assert first is not second

    def test_savings_are_integers(self, income):
        points = project_retirement(income, RetirementAssumptions(), 999.99)
        assert all(isinstance(p.savings, int) for p in points)

    def test_zero_return_is_linear(self, income):
        """With no growth each year adds 12 * monthly savings."""
        assumptions = RetirementAssumptions(
            current_age=30, retirement_age=33, savings_rate=10, expected_return=0
        )
        points = project_retirement(income, assumptions, 0)
        assert [p.savings for p in points] == [4500, 9000, 13500, 18000]

    def test_negative_return_shrinks_balance(self):
        no_income = IncomeProfile(gross=0)
        assumptions = RetirementAssumptions(
            current_age=60, retirement_age=62, savings_rate=50, expected_return=-10
        )
        points = project_retirement(no_income, assumptions, 10_000)
        assert [p.savings for p in points] == [9000, 8100, 7290]

    def test_negative_net_income_withdraws(self):
        """Negative take-home pay makes the yearly contribution negative."""
        income = IncomeProfile(gross=12_000, tax_rate=0, deductions=24_000)
        assumptions = RetirementAssumptions(
            current_age=30, retirement_age=30, savings_rate=100, expected_return=0
        )
        assert project_retirement(income, assumptions, 0) == [ProjectionPoint(30, -12_000)]

    def test_overflow_yields_non_finite(self, income):
        """Huge growth overflows to infinity instead of raising."""
        assumptions = RetirementAssumptions(
            current_age=0, retirement_age=200, savings_rate=15, expected_return=1e6
        )
        points = project_retirement(income, assumptions, 1)
        assert len(points) == 201
        assert math.isinf(points[-1].savings)

    def test_large_balance_not_shifted(self):
        """Balances past 2**52 come out exactly when nothing changes them."""
        flat = RetirementAssumptions(0, 0, 0, 0)
        points = project_retirement(IncomeProfile(gross=0), flat, 4503599627370497.0)
        assert points == [ProjectionPoint(0, 4503599627370497)]


class TestProjectionFrame:
    def test_columns(self, income, assumptions):
        frame = projection_frame(project_retirement(income, assumptions, 20_000))
        assert list(frame.columns) == ["year", "savings"]
        assert frame["year"].tolist() == [64, 65]
        assert frame["savings"].tolist() == [28150, 36871]

    def test_empty(self):
        frame = projection_frame([])
        assert frame.empty
        assert list(frame.columns) == ["year", "savings"]
