"""
Global constants for LifeCalc.

Purpose
-------
Centralizes category labels, form defaults and display values used
throughout the LifeCalc codebase, so the engine, configuration layer and
charts agree on a single source of truth.

Usage
-----
>>> from lifecalc.constants import EXPENSE_CATEGORIES, DEFAULT_TAX_RATE
>>> EXPENSE_CATEGORIES[0]
'housing'

Categories
----------
- Categories: closed label sets for expenses, assets and liabilities
- Defaults: starting values of the input forms
- Time/percent: unit conversions
- Display: currency formatting and chart palette
- Files: schema version of saved documents
"""

from typing import Tuple

__all__ = [
    # Categories
    "EXPENSE_CATEGORIES",
    "ASSET_CATEGORIES",
    "LIABILITY_CATEGORIES",
    # Defaults
    "DEFAULT_TAX_RATE",
    "DEFAULT_CURRENT_AGE",
    "DEFAULT_RETIREMENT_AGE",
    "DEFAULT_SAVINGS_RATE",
    "DEFAULT_EXPECTED_RETURN",
    # Units
    "MONTHS_PER_YEAR",
    "PERCENT",
    # Display
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_DECIMALS",
    "CHART_COLORS",
    "DEFAULT_FIGSIZE",
    "DEFAULT_DPI",
    # Files
    "SCHEMA_VERSION",
]


# =============================================================================
# Categories
# =============================================================================

EXPENSE_CATEGORIES: Tuple[str, ...] = (
    "housing",
    "transportation",
    "food",
    "utilities",
    "insurance",
    "entertainment",
)
"""Expense category labels in display order."""

ASSET_CATEGORIES: Tuple[str, ...] = ("cash", "investments", "realEstate")
"""Asset category labels in display order."""

LIABILITY_CATEGORIES: Tuple[str, ...] = (
    "mortgage",
    "carLoan",
    "studentLoans",
    "creditCard",
)
"""Liability category labels in display order."""


# =============================================================================
# Form Defaults
# =============================================================================

DEFAULT_TAX_RATE: float = 25.0
"""Default flat tax rate, in percent of gross income."""

DEFAULT_CURRENT_AGE: int = 30

DEFAULT_RETIREMENT_AGE: int = 65

DEFAULT_SAVINGS_RATE: float = 15.0
"""Default share of monthly net income saved, in percent."""

DEFAULT_EXPECTED_RETURN: float = 7.0
"""Default annual growth of invested savings, in percent."""


# =============================================================================
# Units
# =============================================================================

MONTHS_PER_YEAR: int = 12

PERCENT: float = 100.0
"""Divisor turning a percent figure into a fraction."""


# =============================================================================
# Display
# =============================================================================

DEFAULT_CURRENCY_SYMBOL: str = "$"

DEFAULT_DECIMALS: int = 2

CHART_COLORS: Tuple[str, ...] = (
    "#0088FE",
    "#00C49F",
    "#FFBB28",
    "#FF8042",
    "#8884d8",
    "#82ca9d",
)
"""Slice palette for the expense distribution chart, cycled by index."""

DEFAULT_FIGSIZE: Tuple[int, int] = (10, 6)

DEFAULT_DPI: int = 150


# =============================================================================
# Files
# =============================================================================

SCHEMA_VERSION: str = "0.1.0"
"""Version tag written into profile and report files."""
