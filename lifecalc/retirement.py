"""
Retirement savings projection for LifeCalc.

Purpose
-------
Simulates yearly compounding of invested savings from the current age up to
and including the retirement age.

Model
-----
    years           = retirement_age - current_age
    monthly_savings = monthly_income(income) * savings_rate / 100
    B_0             = starting_investments

    for i in 0..years:
        B_{i+1} = B_i * (1 + expected_return / 100) + 12 * monthly_savings
        emit (current_age + i, round(B_{i+1}))

Growth is applied to the prior balance before the year's contribution is
added, on every iteration including the first. The starting balance is
never emitted on its own; the first point already carries one year of
growth and one year of contributions.

Outputs are plain records recomputed on every call: no caching, no state
kept between calls, identical inputs give identical sequences. A negative
year count gives an empty sequence. Overflowing balances come out as
non-finite floats instead of raising.

Example
-------
>>> from lifecalc.profiles import IncomeProfile, RetirementAssumptions
>>> income = IncomeProfile(gross=60_000, tax_rate=25)
>>> assumptions = RetirementAssumptions(
...     current_age=64, retirement_age=65, savings_rate=15, expected_return=7
... )
>>> [(p.year, p.savings) for p in project_retirement(income, assumptions, 20_000)]
[(64, 28150), (65, 36871)]
"""

from __future__ import annotations

import math
from typing import List, Sequence

import pandas as pd

from .constants import MONTHS_PER_YEAR, PERCENT
from .income import monthly_income
from .profiles import IncomeProfile, ProjectionPoint, RetirementAssumptions
from .utils import percent_of, round_half_up

__all__ = [
    "monthly_savings",
    "project_retirement",
    "projection_frame",
]


def monthly_savings(income: IncomeProfile, assumptions: RetirementAssumptions) -> float:
    """Share of monthly take-home pay set aside, per ``savings_rate``."""
    return percent_of(monthly_income(income), assumptions.savings_rate)


def project_retirement(
    income: IncomeProfile,
    assumptions: RetirementAssumptions,
    starting_investments: float,
) -> List[ProjectionPoint]:
    """
    Project the invested balance year by year until retirement.

    Parameters
    ----------
    income : IncomeProfile
        Source of monthly take-home pay.
    assumptions : RetirementAssumptions
        Ages, savings rate (percent of monthly net income) and expected
        annual return (percent, may be negative).
    starting_investments : float
        Balance before the first year of growth.

    Returns
    -------
    List[ProjectionPoint]
        ``retirement_age - current_age + 1`` points, one per age from
        ``current_age`` to ``retirement_age``; empty when retirement age is
        below current age. ``savings`` is rounded to the nearest integer,
        halves rounding up.
    """
    years = assumptions.years
    if years < 0:
        return []

    growth = 1 + assumptions.expected_return / PERCENT
    annual_contribution = monthly_savings(income, assumptions) * MONTHS_PER_YEAR

    points = []
    balance = float(starting_investments)
    for i in range(math.floor(years) + 1):
        balance = balance * growth + annual_contribution
        points.append(
            ProjectionPoint(year=assumptions.current_age + i, savings=round_half_up(balance))
        )
    return points


def projection_frame(points: Sequence[ProjectionPoint]) -> pd.DataFrame:
    """
    Projection as a DataFrame with ``year`` and ``savings`` columns.

    Suitable for line charts and CSV export. An empty projection gives an
    empty frame with the same columns.
    """
    if not points:
        return pd.DataFrame(columns=["year", "savings"])
    return pd.DataFrame([p.to_dict() for p in points], columns=["year", "savings"])
