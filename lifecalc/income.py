"""
Income resolution for LifeCalc.

Purpose
-------
Derives take-home pay from an IncomeProfile using a single flat tax rate.
Tax is applied to gross income and deductions are subtracted afterwards:

    tax     = gross * tax_rate / 100
    net     = gross - tax - deductions
    monthly = net / 12

There is no bracket schedule and no pre-tax deduction; this ordering is
fixed. Any finite input gives a finite result, negative net income
included.

Example
-------
>>> from lifecalc.profiles import IncomeProfile
>>> profile = IncomeProfile(gross=60_000, tax_rate=25, deductions=0)
>>> net_income(profile)
45000.0
>>> monthly_income(profile)
3750.0
"""

from __future__ import annotations

from .constants import MONTHS_PER_YEAR
from .profiles import IncomeProfile
from .utils import percent_of

__all__ = [
    "tax_amount",
    "net_income",
    "monthly_income",
]


def tax_amount(profile: IncomeProfile) -> float:
    """Flat-rate tax on gross income."""
    return percent_of(profile.gross, profile.tax_rate)


def net_income(profile: IncomeProfile) -> float:
    """
    Annual income after flat-rate tax and deductions.

    Parameters
    ----------
    profile : IncomeProfile

    Returns
    -------
    float
        ``gross - gross * tax_rate / 100 - deductions``. Negative when
        deductions exceed the post-tax amount.
    """
    return float(profile.gross - tax_amount(profile) - profile.deductions)


def monthly_income(profile: IncomeProfile) -> float:
    """Monthly take-home pay, ``net_income(profile) / 12``."""
    return net_income(profile) / MONTHS_PER_YEAR
