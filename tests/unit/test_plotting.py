"""
Unit tests for plotting.py module.

Tests the expense pie chart and the retirement line chart, including the
empty-input placeholder and strict mode.
"""

import math

import pytest

# Use non-interactive backend for testing
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from lifecalc.constants import CHART_COLORS
from lifecalc.exceptions import ChartError
from lifecalc.expenses import expense_slices
from lifecalc.plotting import plot_expense_distribution, plot_retirement_projection
from lifecalc.profiles import ExpenseSlice, ProjectionPoint


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def points():
    return [ProjectionPoint(64, 28150), ProjectionPoint(65, 36871)]


# ============================================================================
# EXPENSE DISTRIBUTION
# ============================================================================

class TestPlotExpenseDistribution:
    """Tests for plot_expense_distribution()."""

    def test_returns_fig_ax(self, ledger):
        fig, ax = plot_expense_distribution(expense_slices(ledger), return_fig_ax=True)
        labels = [t.get_text() for t in ax.texts]
        assert "housing: $1000.00" in labels
        assert "entertainment: $100.00" in labels
        assert ax.get_title() == "Expense Distribution"

    def test_labels_keep_full_amount(self):
        slices = [ExpenseSlice("housing", 1_234_567), ExpenseSlice("food", 123_456.78)]
        _, ax = plot_expense_distribution(slices, return_fig_ax=True)
        labels = [t.get_text() for t in ax.texts]
        assert "housing: $1234567.00" in labels
        assert "food: $123456.78" in labels

    def test_label_symbol_and_decimals(self):
        _, ax = plot_expense_distribution(
            [ExpenseSlice("food", 99.5)], symbol="€", decimals=0, return_fig_ax=True
        )
        assert "food: €100" in [t.get_text() for t in ax.texts]

    def test_one_wedge_per_slice(self, ledger):
        _, ax = plot_expense_distribution(expense_slices(ledger), return_fig_ax=True)
        assert len(ax.patches) == 4

    def test_colors_cycle(self):
        slices = [ExpenseSlice(f"c{i}", 1) for i in range(len(CHART_COLORS) + 1)]
        _, ax = plot_expense_distribution(slices, return_fig_ax=True)
        first, last = ax.patches[0], ax.patches[-1]
        assert first.get_facecolor() == last.get_facecolor()

    def test_returns_none_by_default(self, ledger):
        assert plot_expense_distribution(expense_slices(ledger)) is None

    def test_existing_axes(self, ledger):
        fig, ax = plt.subplots()
        result_fig, result_ax = plot_expense_distribution(
            expense_slices(ledger), ax=ax, return_fig_ax=True
        )
        assert result_ax is ax
        assert result_fig is fig

    def test_empty_placeholder(self):
        _, ax = plot_expense_distribution([], return_fig_ax=True)
        assert [t.get_text() for t in ax.texts] == ["No expenses entered"]

    def test_empty_strict(self):
        with pytest.raises(ChartError):
            plot_expense_distribution([], strict=True)

    def test_save_path(self, ledger, tmp_path):
        path = tmp_path / "expenses.png"
        plot_expense_distribution(expense_slices(ledger), save_path=str(path), dpi=50)
        assert path.exists()
        assert path.stat().st_size > 0


# ============================================================================
# RETIREMENT PROJECTION
# ============================================================================

class TestPlotRetirementProjection:
    """Tests for plot_retirement_projection()."""

    def test_line_data(self, points):
        _, ax = plot_retirement_projection(points, return_fig_ax=True)
        line = ax.get_lines()[0]
        assert list(line.get_xdata()) == [64, 65]
        assert list(line.get_ydata()) == [28150, 36871]
        assert ax.get_xlabel() == "Age"
        assert ax.get_ylabel() == "Savings"

    def test_currency_ticks(self, points):
        _, ax = plot_retirement_projection(points, return_fig_ax=True)
        formatter = ax.yaxis.get_major_formatter()
        assert formatter(30000, 0) == "$30,000"

    def test_non_finite_points_skipped(self, points):
        data = points + [ProjectionPoint(66, math.inf)]
        _, ax = plot_retirement_projection(data, return_fig_ax=True)
        assert list(ax.get_lines()[0].get_xdata()) == [64, 65]

    def test_empty_placeholder(self):
        _, ax = plot_retirement_projection([], return_fig_ax=True)
        assert len(ax.get_lines()) == 0
        assert len(ax.texts) == 1
        assert "retirement age below current age" in ax.texts[0].get_text()

    def test_overflow_placeholder(self):
        _, ax = plot_retirement_projection(
            [ProjectionPoint(30, math.inf), ProjectionPoint(31, math.nan)], return_fig_ax=True
        )
        assert len(ax.get_lines()) == 0
        assert [t.get_text() for t in ax.texts] == ["Projection overflowed (no finite balances)"]

    def test_axis_symbol(self, points):
        _, ax = plot_retirement_projection(points, symbol="£", return_fig_ax=True)
        assert ax.yaxis.get_major_formatter()(30000, 0) == "£30,000"

    def test_all_non_finite_strict(self):
        with pytest.raises(ChartError):
            plot_retirement_projection([ProjectionPoint(30, math.inf)], strict=True)

    def test_save_path(self, points, tmp_path):
        path = tmp_path / "retirement.png"
        plot_retirement_projection(points, save_path=str(path), dpi=50)
        assert path.exists()
