"""
Stateless calculation service for LifeCalc.

Purpose
-------
Bundles the independent engine functions behind one entry point. A caller
(CLI, web handler, notebook) owns a FinancialProfile and asks for a
CalculationReport; nothing is cached or retained between calls.

    profile ──► LifeCalculator.calculate() ──► CalculationReport
                 ├─ income     : net_income, monthly_income, tax_amount
                 ├─ expenses   : total_expenses, expense_slices
                 ├─ networth   : total_assets, total_liabilities, net_worth
                 └─ retirement : project_retirement (seeded by investments)

Example
-------
>>> from lifecalc.profiles import FinancialProfile, IncomeProfile
>>> report = LifeCalculator().calculate(
...     FinancialProfile(income=IncomeProfile(gross=60_000, tax_rate=25))
... )
>>> report.monthly_income
3750.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional

import pandas as pd

from .expenses import expense_shares, expense_slices, total_expenses
from .income import monthly_income, net_income, tax_amount
from .networth import net_worth, total_assets, total_liabilities
from .profiles import ExpenseSlice, FinancialProfile, ProjectionPoint, RetirementAssumptions
from .retirement import monthly_savings, project_retirement, projection_frame
from .utils import format_currency

__all__ = ["CalculationReport", "LifeCalculator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationReport:
    """
    Every derived figure for one FinancialProfile snapshot.

    Attributes
    ----------
    net_income, monthly_income, tax_amount : float
        Income Resolver outputs (annual net, monthly take-home, annual tax).
    monthly_savings : float
        Amount saved per month under the retirement savings rate.
    total_expenses : float
        Monthly spending across all categories.
    total_assets, total_liabilities, net_worth : float
    expense_slices : List[ExpenseSlice]
        Positive categories for the distribution chart.
    projection : List[ProjectionPoint]
        Retirement projection, one point per age.
    """
    net_income: float
    monthly_income: float
    tax_amount: float
    monthly_savings: float
    total_expenses: float
    total_assets: float
    total_liabilities: float
    net_worth: float
    expense_slices: List[ExpenseSlice]
    projection: List[ProjectionPoint]

    @property
    def final_savings(self) -> Optional[float]:
        """Projected balance at retirement age, or None for an empty projection."""
        return self.projection[-1].savings if self.projection else None

    def headline(self) -> dict:
        """The three scalars shown next to the forms, formatted for display."""
        return {
            "Monthly Take-Home Pay": format_currency(self.monthly_income),
            "Total Expenses": format_currency(self.total_expenses),
            "Total Net Worth": format_currency(self.net_worth),
        }

    def projection_frame(self) -> pd.DataFrame:
        return projection_frame(self.projection)


class LifeCalculator:
    """
    Stateless facade over the calculation engine.

    Holds no per-call state, so one instance may be shared across threads
    or requests.
    """

    def calculate(self, profile: FinancialProfile) -> CalculationReport:
        """Derive the full report for *profile*."""
        logger.debug("Calculating report for %s", profile)
        return CalculationReport(
            net_income=net_income(profile.income),
            monthly_income=monthly_income(profile.income),
            tax_amount=tax_amount(profile.income),
            monthly_savings=monthly_savings(profile.income, profile.retirement),
            total_expenses=total_expenses(profile.expenses),
            total_assets=total_assets(profile.assets),
            total_liabilities=total_liabilities(profile.liabilities),
            net_worth=net_worth(profile.assets, profile.liabilities),
            expense_slices=expense_slices(profile.expenses),
            projection=self.project(profile),
        )

    def project(
        self,
        profile: FinancialProfile,
        assumptions: Optional[RetirementAssumptions] = None,
        starting_investments: Optional[float] = None,
    ) -> List[ProjectionPoint]:
        """
        Retirement projection for *profile*.

        Parameters
        ----------
        assumptions : RetirementAssumptions, optional
            Overrides ``profile.retirement``.
        starting_investments : float, optional
            Overrides the ``investments`` asset as the opening balance.
        """
        assumptions = assumptions or profile.retirement
        if starting_investments is None:
            starting_investments = profile.assets.investments
        points = project_retirement(profile.income, assumptions, starting_investments)
        if not points:
            logger.info(
                "Retirement age %s is below current age %s; projection is empty",
                assumptions.retirement_age,
                assumptions.current_age,
            )
        return points

    def expense_table(self, profile: FinancialProfile) -> pd.DataFrame:
        """Expense slices with their share of total spending."""
        return expense_shares(profile.expenses)

    @staticmethod
    def with_assumptions(profile: FinancialProfile, **changes) -> FinancialProfile:
        """Copy of *profile* with some retirement assumptions replaced."""
        return replace(profile, retirement=replace(profile.retirement, **changes))
