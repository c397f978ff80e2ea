"""
Expense aggregation for LifeCalc.

Purpose
-------
Turns an expense ledger into the two things the presentation layer shows:

- total_expenses: the monthly total across all categories
- expense_slices: the positive categories, in ledger order, for a pie chart

Ledgers may be an ExpenseLedger or any mapping of category to amount.
Missing or non-numeric amounts count as zero in the total. Zero and
negative amounts are left out of the slices; that is a display filter,
not a validation error.

Example
-------
>>> from lifecalc.profiles import ExpenseLedger
>>> ledger = ExpenseLedger(housing=1000, transportation=300, utilities=150)
>>> total_expenses(ledger)
1450.0
>>> [s.name for s in expense_slices(ledger)]
['housing', 'transportation', 'utilities']
"""

from __future__ import annotations

from typing import List, Mapping

import numpy as np
import pandas as pd

from .profiles import Category, ExpenseSlice
from .utils import coerce_number, sum_amounts

__all__ = [
    "total_expenses",
    "expense_slices",
    "expense_shares",
]


def _label(key) -> str:
    return key.value if isinstance(key, Category) else str(key)


def total_expenses(ledger: Mapping) -> float:
    """Sum of every category amount. Order does not matter."""
    return sum_amounts(ledger)


def expense_slices(ledger: Mapping) -> List[ExpenseSlice]:
    """
    Chart-ready slices for every category with a positive amount.

    Parameters
    ----------
    ledger : Mapping
        ExpenseLedger (iterates in category declaration order) or a plain
        mapping (iterates in insertion order).

    Returns
    -------
    List[ExpenseSlice]
        One slice per category whose amount is strictly greater than zero,
        carrying the category label and the amount unchanged.
    """
    slices = []
    for key, amount in ledger.items():
        value = coerce_number(amount)
        if value > 0:
            slices.append(ExpenseSlice(name=_label(key), value=value))
    return slices


def expense_shares(ledger: Mapping) -> pd.DataFrame:
    """
    Positive slices with their share of the positive total.

    Returns
    -------
    pd.DataFrame
        Columns ``name``, ``value``, ``share`` (fractions summing to 1).
        Empty frame with the same columns when no amount is positive.
    """
    slices = expense_slices(ledger)
    if not slices:
        return pd.DataFrame(columns=["name", "value", "share"])
    values = np.array([s.value for s in slices], dtype=float)
    return pd.DataFrame(
        {
            "name": [s.name for s in slices],
            "value": values,
            "share": values / values.sum(),
        }
    )
