"""
Pytest configuration and fixtures for the LifeCalc test suite.

Fixtures mirror the worked examples: a 60k earner at 25% tax, a ledger with
two empty categories, and a small balance sheet.
"""

import json

import pytest

from lifecalc.profiles import (
    AssetProfile,
    ExpenseLedger,
    FinancialProfile,
    IncomeProfile,
    LiabilityProfile,
    RetirementAssumptions,
)


# ---------------------------------------------------------------------------
# Record Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def income() -> IncomeProfile:
    """60,000 gross at 25% flat tax, no deductions: 3,750/month take-home."""
    return IncomeProfile(gross=60_000, tax_rate=25, deductions=0)


@pytest.fixture
def ledger() -> ExpenseLedger:
    """Monthly expenses totalling 1,550 with food and insurance at zero."""
    return ExpenseLedger(
        housing=1000,
        transportation=300,
        food=0,
        utilities=150,
        insurance=0,
        entertainment=100,
    )


@pytest.fixture
def assets() -> AssetProfile:
    return AssetProfile(cash=10_000, investments=20_000, real_estate=0)


@pytest.fixture
def liabilities() -> LiabilityProfile:
    return LiabilityProfile(mortgage=15_000, car_loan=5_000, student_loans=0, credit_card=0)


@pytest.fixture
def assumptions() -> RetirementAssumptions:
    """One year from retirement: two projection points."""
    return RetirementAssumptions(
        current_age=64, retirement_age=65, savings_rate=15, expected_return=7
    )


@pytest.fixture
def financial_profile(income, ledger, assets, liabilities, assumptions) -> FinancialProfile:
    return FinancialProfile(
        income=income,
        expenses=ledger,
        assets=assets,
        liabilities=liabilities,
        retirement=assumptions,
    )


# ---------------------------------------------------------------------------
# File Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def profile_data() -> dict:
    """Profile document matching ``financial_profile``, camelCase keys."""
    return {
        "schema_version": "0.1.0",
        "name": "Test",
        "income": {"gross": 60000, "taxRate": 25, "deductions": 0},
        "expenses": {
            "housing": 1000,
            "transportation": 300,
            "food": 0,
            "utilities": 150,
            "insurance": 0,
            "entertainment": 100,
        },
        "assets": {"cash": 10000, "investments": 20000, "realEstate": 0},
        "liabilities": {"mortgage": 15000, "carLoan": 5000, "studentLoans": 0, "creditCard": 0},
        "retirement": {"currentAge": 64, "retirementAge": 65, "savingsRate": 15, "expectedReturn": 7},
    }


@pytest.fixture
def profile_file(tmp_path, profile_data):
    path = tmp_path / "profile.json"
    with open(path, "w") as f:
        json.dump(profile_data, f)
    return path
