"""
LifeCalc: Personal Finance Estimator

Pure, deterministic formulas for take-home pay, expense totals, net worth
and a yearly retirement savings projection.

Modules
-------
- profiles    : Input records and closed category enums
- income      : Net and monthly income under a flat tax rate
- expenses    : Expense totals and chart slices
- networth    : Assets minus liabilities
- retirement  : Yearly compounding projection
- calculator  : Stateless service bundling all of the above
- config      : Pydantic profile documents and app settings
"""

from .profiles import (
    AssetCategory,
    AssetProfile,
    ExpenseCategory,
    ExpenseLedger,
    ExpenseSlice,
    FinancialProfile,
    IncomeProfile,
    LiabilityCategory,
    LiabilityProfile,
    ProjectionPoint,
    RetirementAssumptions,
)
from .income import monthly_income, net_income, tax_amount
from .expenses import expense_slices, total_expenses
from .networth import net_worth
from .retirement import project_retirement
from .calculator import CalculationReport, LifeCalculator

__version__ = "0.1.0"
