"""
Configuration management module for LifeCalc.

Purpose
-------
Pydantic models for the profile document (the five entry forms saved as
JSON) and environment-driven application settings.

Design Principles
-----------------
- Immutable: frozen models, like the engine records they produce
- Closed sets: unknown keys are rejected, so a typo in a category name
  fails loudly instead of being silently dropped
- Coercing: numeric fields turn blanks and non-numeric text into zero;
  there is no range validation
- Wire-compatible: camelCase aliases (``taxRate``, ``realEstate``, ...)
  with population by field name also allowed

Example
-------
>>> from lifecalc.config import ProfileConfig
>>> config = ProfileConfig.model_validate({
...     "income": {"gross": 60000, "taxRate": 25},
...     "expenses": {"housing": "1000", "food": ""},
... })
>>> config.expenses.food
0.0
>>> profile = config.to_records()
>>> profile.income.tax_rate
25.0
>>> config.model_dump(by_alias=True)["income"]["taxRate"]
25.0
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_CURRENT_AGE,
    DEFAULT_DECIMALS,
    DEFAULT_DPI,
    DEFAULT_EXPECTED_RETURN,
    DEFAULT_RETIREMENT_AGE,
    DEFAULT_SAVINGS_RATE,
    DEFAULT_TAX_RATE,
    SCHEMA_VERSION,
)
from .profiles import (
    AssetProfile,
    ExpenseLedger,
    FinancialProfile,
    IncomeProfile,
    LiabilityProfile,
    RetirementAssumptions,
)
from .utils import coerce_number

__all__ = [
    "IncomeConfig",
    "ExpensesConfig",
    "AssetsConfig",
    "LiabilitiesConfig",
    "RetirementConfig",
    "ProfileConfig",
    "AppSettings",
]


# ---------------------------------------------------------------------------
# Section base
# ---------------------------------------------------------------------------

class _Section(BaseModel):
    """Shared behaviour: frozen, closed, every field numeric and coerced."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def coerce_numeric(cls, v):
        """Blank, missing or non-numeric input becomes zero."""
        return coerce_number(v)


# ---------------------------------------------------------------------------
# Income Configuration
# ---------------------------------------------------------------------------

class IncomeConfig(_Section):
    """Income form: gross annual income, flat tax rate (%), deductions."""

    gross: float = Field(default=0.0, description="Gross annual income")
    tax_rate: float = Field(
        default=DEFAULT_TAX_RATE,
        alias="taxRate",
        description="Flat tax rate in percent of gross"
    )
    deductions: float = Field(default=0.0, description="Annual post-tax deductions")

    def to_record(self) -> IncomeProfile:
        return IncomeProfile(gross=self.gross, tax_rate=self.tax_rate, deductions=self.deductions)


# ---------------------------------------------------------------------------
# Category Configurations
# ---------------------------------------------------------------------------

class ExpensesConfig(_Section):
    """Expense form: monthly amount per category."""

    housing: float = 0.0
    transportation: float = 0.0
    food: float = 0.0
    utilities: float = 0.0
    insurance: float = 0.0
    entertainment: float = 0.0

    def to_record(self) -> ExpenseLedger:
        return ExpenseLedger(**self.model_dump())


class AssetsConfig(_Section):
    """Asset form."""

    cash: float = 0.0
    investments: float = Field(default=0.0, description="Opening balance of the retirement projection")
    real_estate: float = Field(default=0.0, alias="realEstate")

    def to_record(self) -> AssetProfile:
        return AssetProfile(**self.model_dump())


class LiabilitiesConfig(_Section):
    """Liability form."""

    mortgage: float = 0.0
    car_loan: float = Field(default=0.0, alias="carLoan")
    student_loans: float = Field(default=0.0, alias="studentLoans")
    credit_card: float = Field(default=0.0, alias="creditCard")

    def to_record(self) -> LiabilityProfile:
        return LiabilityProfile(**self.model_dump())


# ---------------------------------------------------------------------------
# Retirement Configuration
# ---------------------------------------------------------------------------

class RetirementConfig(_Section):
    """
    Retirement form.

    Ages are whole years; fractional input is truncated toward zero.
    A retirement age below the current age is accepted and yields an
    empty projection.
    """

    current_age: int = Field(default=DEFAULT_CURRENT_AGE, alias="currentAge")
    retirement_age: int = Field(default=DEFAULT_RETIREMENT_AGE, alias="retirementAge")
    savings_rate: float = Field(
        default=DEFAULT_SAVINGS_RATE,
        alias="savingsRate",
        description="Percent of monthly net income saved"
    )
    expected_return: float = Field(
        default=DEFAULT_EXPECTED_RETURN,
        alias="expectedReturn",
        description="Annual return in percent (may be negative)"
    )

    @field_validator("current_age", "retirement_age", mode="before")
    @classmethod
    def whole_years(cls, v):
        value = coerce_number(v)
        return int(value) if math.isfinite(value) else value

    def to_record(self) -> RetirementAssumptions:
        return RetirementAssumptions(
            current_age=self.current_age,
            retirement_age=self.retirement_age,
            savings_rate=self.savings_rate,
            expected_return=self.expected_return,
        )


# ---------------------------------------------------------------------------
# Profile Configuration
# ---------------------------------------------------------------------------

class ProfileConfig(BaseModel):
    """
    Complete profile document: all five forms plus metadata.

    Attributes
    ----------
    schema_version : str
        Version of the file layout.
    name : str
        Optional label for the profile.
    income, expenses, assets, liabilities, retirement
        Form sections; each defaults to the blank form.

    Examples
    --------
    >>> config = ProfileConfig(name="Sample", income=IncomeConfig(gross=60_000))
    >>> config.to_records().income.gross
    60000.0
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_version: str = Field(default=SCHEMA_VERSION, description="File layout version")
    name: str = Field(default="", max_length=100, description="Profile label")
    income: IncomeConfig = Field(default_factory=IncomeConfig)
    expenses: ExpensesConfig = Field(default_factory=ExpensesConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)
    liabilities: LiabilitiesConfig = Field(default_factory=LiabilitiesConfig)
    retirement: RetirementConfig = Field(default_factory=RetirementConfig)

    def to_records(self) -> FinancialProfile:
        """Convert into the engine's input snapshot."""
        return FinancialProfile(
            income=self.income.to_record(),
            expenses=self.expenses.to_record(),
            assets=self.assets.to_record(),
            liabilities=self.liabilities.to_record(),
            retirement=self.retirement.to_record(),
        )

    @classmethod
    def from_records(cls, profile: FinancialProfile, name: str = "") -> "ProfileConfig":
        """Inverse of ``to_records``."""
        income = profile.income
        retirement = profile.retirement
        return cls(
            name=name,
            income=IncomeConfig(
                gross=income.gross, tax_rate=income.tax_rate, deductions=income.deductions
            ),
            expenses=ExpensesConfig(**profile.expenses.as_dict()),
            assets=AssetsConfig(**profile.assets.as_dict()),
            liabilities=LiabilitiesConfig(**profile.liabilities.as_dict()),
            retirement=RetirementConfig(
                current_age=retirement.current_age,
                retirement_age=retirement.retirement_age,
                savings_rate=retirement.savings_rate,
                expected_return=retirement.expected_return,
            ),
        )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    are prefixed with LIFECALC_ (e.g., LIFECALC_LOG_LEVEL=DEBUG).

    Attributes
    ----------
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    currency_symbol : str
        Prefix for displayed amounts
    decimals : int
        Decimal places for displayed amounts
    chart_dpi : int
        Resolution of saved charts
    default_profile : Path, optional
        Profile used when a command is run without --profile

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.currency_symbol
    '$'
    """

    model_config = SettingsConfigDict(
        env_prefix="LIFECALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    currency_symbol: str = Field(
        default=DEFAULT_CURRENCY_SYMBOL,
        max_length=5,
        description="Currency prefix for displayed amounts"
    )
    decimals: int = Field(
        default=DEFAULT_DECIMALS,
        ge=0,
        le=6,
        description="Decimal places for displayed amounts"
    )
    chart_dpi: int = Field(
        default=DEFAULT_DPI,
        ge=50,
        le=600,
        description="Resolution of saved charts"
    )
    default_profile: Optional[Path] = Field(
        default=None,
        description="Profile file used when --profile is omitted"
    )
