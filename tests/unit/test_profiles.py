"""
Unit tests for profiles.py module.

Tests the closed category enums and the record mapping behaviour.
"""

from dataclasses import FrozenInstanceError, fields

import pytest

from lifecalc.constants import ASSET_CATEGORIES, EXPENSE_CATEGORIES, LIABILITY_CATEGORIES
from lifecalc.exceptions import ConfigurationError
from lifecalc.profiles import (
    AssetCategory,
    AssetProfile,
    ExpenseCategory,
    ExpenseLedger,
    FinancialProfile,
    IncomeProfile,
    LiabilityCategory,
    LiabilityProfile,
    RetirementAssumptions,
)


class TestCategories:
    """Tests for the category enums."""

    @pytest.mark.parametrize(
        "enum, labels",
        [
            (ExpenseCategory, EXPENSE_CATEGORIES),
            (AssetCategory, ASSET_CATEGORIES),
            (LiabilityCategory, LIABILITY_CATEGORIES),
        ],
    )
    def test_labels_match_constants(self, enum, labels):
        assert tuple(m.value for m in enum) == labels

    @pytest.mark.parametrize(
        "record", [ExpenseLedger, AssetProfile, LiabilityProfile]
    )
    def test_record_fields_follow_enum(self, record):
        assert [f.name for f in fields(record)] == [c.field_name for c in record.category_type]

    def test_parse_accepts_label_and_field_name(self):
        assert AssetCategory.parse("realEstate") is AssetCategory.REAL_ESTATE
        assert AssetCategory.parse("real_estate") is AssetCategory.REAL_ESTATE
        assert AssetCategory.parse(AssetCategory.CASH) is AssetCategory.CASH

    def test_parse_rejects_unknown(self):
        with pytest.raises(ConfigurationError, match="Valid categories"):
            ExpenseCategory.parse("pets")

    def test_label(self):
        assert LiabilityCategory.CAR_LOAN.label == "CarLoan"
        assert ExpenseCategory.FOOD.label == "Food"


class TestCategoryRecords:
    """Tests for ExpenseLedger, AssetProfile and LiabilityProfile."""

    def test_mapping_access(self, ledger):
        assert ledger[ExpenseCategory.HOUSING] == 1000
        assert ledger["utilities"] == 150
        assert len(ledger) == 6
        assert list(ledger) == list(ExpenseCategory)

    def test_unknown_key_raises_key_error(self, ledger):
        with pytest.raises(KeyError):
            ledger["pets"]
        assert "pets" not in ledger
        assert ledger.get("pets") is None

    def test_as_dict_uses_wire_labels(self, liabilities):
        assert liabilities.as_dict() == {
            "mortgage": 15_000,
            "carLoan": 5_000,
            "studentLoans": 0,
            "creditCard": 0,
        }

    def test_from_mapping_coerces_and_defaults(self):
        assets = AssetProfile.from_mapping({"cash": "2500", "realEstate": "x"})
        assert assets == AssetProfile(cash=2500.0, investments=0.0, real_estate=0.0)

    def test_from_mapping_rejects_unknown_category(self):
        with pytest.raises(ConfigurationError):
            LiabilityProfile.from_mapping({"payday": 100})

    def test_from_mapping_rejects_duplicate_category(self):
        """A wire label and a field name for the same category conflict."""
        with pytest.raises(ConfigurationError, match="Duplicate AssetCategory 'realEstate'"):
            AssetProfile.from_mapping({"realEstate": 100, "real_estate": 200})
        with pytest.raises(ConfigurationError):
            LiabilityProfile.from_mapping({"car_loan": 1, "carLoan": 1})

    def test_frozen(self, ledger):
        with pytest.raises(FrozenInstanceError):
            ledger.housing = 1

    def test_hashable_and_equal(self):
        assert ExpenseLedger(food=1) == ExpenseLedger(food=1)
        assert hash(ExpenseLedger(food=1)) == hash(ExpenseLedger(food=1))


class TestScalarProfiles:
    def test_income_defaults(self):
        assert IncomeProfile() == IncomeProfile(gross=0, tax_rate=25, deductions=0)

    def test_retirement_defaults(self):
        assumptions = RetirementAssumptions()
        assert (assumptions.current_age, assumptions.retirement_age) == (30, 65)
        assert (assumptions.savings_rate, assumptions.expected_return) == (15, 7)
        assert assumptions.years == 35

    def test_years_negative_when_past_retirement(self):
        assert RetirementAssumptions(current_age=70, retirement_age=65).years == -5

    def test_financial_profile_defaults(self):
        profile = FinancialProfile()
        assert profile.expenses == ExpenseLedger()
        assert profile.retirement == RetirementAssumptions()
