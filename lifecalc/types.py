"""
Type definitions for LifeCalc.

Purpose
-------
Provides TypedDict definitions for the plain-dictionary forms of engine
outputs. These are what chart libraries, JSON exports and other
presentation layers consume.

Type Definitions
----------------
ProjectionPointDict
    One retirement projection row: {"year", "savings"}

ExpenseSliceDict
    One chart slice: {"name", "value"}

ReportDict
    Full calculation report as exported to JSON
"""

from typing import List, Union
from typing_extensions import TypedDict

__all__ = [
    "ProjectionPointDict",
    "ExpenseSliceDict",
    "ReportDict",
]


class ProjectionPointDict(TypedDict):
    """
    Retirement projection row.

    Attributes
    ----------
    year : int
        Age for this row.
    savings : int or float
        Rounded projected balance. A float only when the balance overflowed
        to a non-finite value.

    Examples
    --------
    >>> point: ProjectionPointDict = {"year": 64, "savings": 28150}
    """

    year: int
    savings: Union[int, float]


class ExpenseSliceDict(TypedDict):
    """
    Expense distribution slice.

    Examples
    --------
    >>> slice_: ExpenseSliceDict = {"name": "housing", "value": 1000.0}
    """

    name: str
    value: float


class ReportDict(TypedDict):
    """Calculation report as produced by ``report_to_dict``."""

    schema_version: str
    net_income: float
    monthly_income: float
    tax_amount: float
    monthly_savings: float
    total_expenses: float
    total_assets: float
    total_liabilities: float
    net_worth: float
    expense_slices: List[ExpenseSliceDict]
    projection: List[ProjectionPointDict]
