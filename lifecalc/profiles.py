"""
Input and output records for the LifeCalc engine.

Purpose
-------
Defines the closed category enumerations and the immutable records passed
into (and returned from) the calculation functions:

- IncomeProfile: gross income, flat tax rate, post-tax deductions
- ExpenseLedger: one amount per ExpenseCategory
- AssetProfile: one amount per AssetCategory
- LiabilityProfile: one amount per LiabilityCategory
- RetirementAssumptions: ages, savings rate and expected return
- ProjectionPoint / ExpenseSlice: derived display records
- FinancialProfile: the five input records bundled together

Design principles
-----------------
- Frozen dataclasses: every record is a snapshot owned by the caller
- Closed categories: ledgers have one field per enum member, so a
  category outside the set cannot be represented
- Category records are read-only Mappings keyed by category, iterating
  in declaration order

Example
-------
>>> ledger = ExpenseLedger(housing=1000, food=300)
>>> ledger[ExpenseCategory.HOUSING]
1000
>>> ledger["food"]
300
>>> AssetProfile.from_mapping({"cash": "2500", "realEstate": 0}).cash
2500.0
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Iterator, Type, Union

from .constants import (
    DEFAULT_CURRENT_AGE,
    DEFAULT_EXPECTED_RETURN,
    DEFAULT_RETIREMENT_AGE,
    DEFAULT_SAVINGS_RATE,
    DEFAULT_TAX_RATE,
)
from .exceptions import ConfigurationError
from .types import ExpenseSliceDict, ProjectionPointDict
from .utils import coerce_number

__all__ = [
    "Category",
    "ExpenseCategory",
    "AssetCategory",
    "LiabilityCategory",
    "IncomeProfile",
    "ExpenseLedger",
    "AssetProfile",
    "LiabilityProfile",
    "RetirementAssumptions",
    "ProjectionPoint",
    "ExpenseSlice",
    "FinancialProfile",
]


# ---------------------------------------------------------------------------
# Category enumerations
# ---------------------------------------------------------------------------

class Category(str, Enum):
    """Base for closed category sets. Values are the wire labels."""

    @property
    def field_name(self) -> str:
        """Attribute name on the matching record (``REAL_ESTATE -> real_estate``)."""
        return self.name.lower()

    @property
    def label(self) -> str:
        """Display label with the first letter capitalized."""
        return self.value[:1].upper() + self.value[1:]

    @classmethod
    def parse(cls, key: Union[str, "Category"]) -> "Category":
        """Resolve a member from itself, its wire label or its field name."""
        if isinstance(key, cls):
            return key
        for member in cls:
            if key == member.value or key == member.field_name:
                return member
        valid = ", ".join(m.value for m in cls)
        raise ConfigurationError(
            f"Unknown {cls.__name__} '{key}'. Valid categories: {valid}"
        )


class ExpenseCategory(Category):
    HOUSING = "housing"
    TRANSPORTATION = "transportation"
    FOOD = "food"
    UTILITIES = "utilities"
    INSURANCE = "insurance"
    ENTERTAINMENT = "entertainment"


class AssetCategory(Category):
    CASH = "cash"
    INVESTMENTS = "investments"
    REAL_ESTATE = "realEstate"


class LiabilityCategory(Category):
    MORTGAGE = "mortgage"
    CAR_LOAN = "carLoan"
    STUDENT_LOANS = "studentLoans"
    CREDIT_CARD = "creditCard"


# ---------------------------------------------------------------------------
# Category records
# ---------------------------------------------------------------------------

class _CategoryRecord(Mapping):
    """
    Read-only mapping view over a frozen dataclass with one field per category.

    Subclasses set ``category_type``; their dataclass fields must be the
    ``field_name`` of every member, in declaration order.
    """

    category_type: ClassVar[Type[Category]]

    def __getitem__(self, key: Union[str, Category]) -> Any:
        try:
            category = self.category_type.parse(key)
        except ConfigurationError:
            raise KeyError(key) from None
        return getattr(self, category.field_name)

    def __iter__(self) -> Iterator[Category]:
        return iter(self.category_type)

    def __len__(self) -> int:
        return len(self.category_type)

    def as_dict(self) -> Dict[str, Any]:
        """Amounts keyed by wire label, e.g. ``{"realEstate": 0.0, ...}``."""
        return {category.value: amount for category, amount in self.items()}

    @classmethod
    def from_mapping(cls, data: Mapping) -> "_CategoryRecord":
        """
        Build a record from a mapping of category to amount.

        Keys may be category members, wire labels (``"realEstate"``) or
        field names (``"real_estate"``). Missing categories default to zero
        and non-numeric amounts are coerced to zero.

        Raises
        ------
        ConfigurationError
            If a key is not a member of the closed category set, or two keys
            name the same category (``"realEstate"`` and ``"real_estate"``).
        """
        values = {}
        for key, amount in data.items():
            category = cls.category_type.parse(key)
            if category.field_name in values:
                raise ConfigurationError(
                    f"Duplicate {cls.category_type.__name__} '{category.value}' (key '{key}')"
                )
            values[category.field_name] = coerce_number(amount)
        return cls(**values)


@dataclass(frozen=True, eq=True)
class ExpenseLedger(_CategoryRecord):
    """Monthly spending per expense category."""

    category_type: ClassVar[Type[Category]] = ExpenseCategory

    housing: float = 0.0
    transportation: float = 0.0
    food: float = 0.0
    utilities: float = 0.0
    insurance: float = 0.0
    entertainment: float = 0.0


@dataclass(frozen=True, eq=True)
class AssetProfile(_CategoryRecord):
    """Asset balances. ``investments`` seeds the retirement projection."""

    category_type: ClassVar[Type[Category]] = AssetCategory

    cash: float = 0.0
    investments: float = 0.0
    real_estate: float = 0.0


@dataclass(frozen=True, eq=True)
class LiabilityProfile(_CategoryRecord):
    """Outstanding debt balances."""

    category_type: ClassVar[Type[Category]] = LiabilityCategory

    mortgage: float = 0.0
    car_loan: float = 0.0
    student_loans: float = 0.0
    credit_card: float = 0.0


# ---------------------------------------------------------------------------
# Scalar profiles
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IncomeProfile:
    """
    Annual income with a flat tax rate.

    Parameters
    ----------
    gross : float
        Gross annual income.
    tax_rate : float, default 25.0
        Flat tax rate in percent, applied to gross.
    deductions : float, default 0.0
        Annual deductions, subtracted after tax. May exceed gross, in
        which case net income is negative.
    """
    gross: float = 0.0
    tax_rate: float = DEFAULT_TAX_RATE
    deductions: float = 0.0


@dataclass(frozen=True)
class RetirementAssumptions:
    """
    Retirement projection inputs.

    Parameters
    ----------
    current_age : int
    retirement_age : int
        Last age included in the projection.
    savings_rate : float
        Percent of monthly net income saved.
    expected_return : float
        Annual growth in percent. May be negative.
    """
    current_age: int = DEFAULT_CURRENT_AGE
    retirement_age: int = DEFAULT_RETIREMENT_AGE
    savings_rate: float = DEFAULT_SAVINGS_RATE
    expected_return: float = DEFAULT_EXPECTED_RETURN

    @property
    def years(self):
        """Years until retirement; negative when already past it."""
        return self.retirement_age - self.current_age


# ---------------------------------------------------------------------------
# Derived records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectionPoint:
    """One year of the retirement projection: age and rounded balance."""
    year: int
    savings: Union[int, float]

    def to_dict(self) -> ProjectionPointDict:
        return {"year": self.year, "savings": self.savings}


@dataclass(frozen=True)
class ExpenseSlice:
    """A positive (category, amount) pair for proportional charts."""
    name: str
    value: float

    def to_dict(self) -> ExpenseSliceDict:
        return {"name": self.name, "value": self.value}


# ---------------------------------------------------------------------------
# Complete input snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FinancialProfile:
    """All five input records, as one snapshot of the entry forms."""
    income: IncomeProfile = field(default_factory=IncomeProfile)
    expenses: ExpenseLedger = field(default_factory=ExpenseLedger)
    assets: AssetProfile = field(default_factory=AssetProfile)
    liabilities: LiabilityProfile = field(default_factory=LiabilityProfile)
    retirement: RetirementAssumptions = field(default_factory=RetirementAssumptions)
