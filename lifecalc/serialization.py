"""
Serialization module for LifeCalc profiles and reports.

Purpose
-------
JSON import/export of the five entry forms (a ProfileConfig) and of
calculation reports, plus CSV export of the retirement projection.

Design Principles
-----------------
- Type-safe: profiles go through the Pydantic configs for coercion and
  closed-category checks
- Human-readable: JSON with camelCase keys, as the entry forms name them
- Versioned: files carry a schema version; mismatches warn

Example
-------
>>> from pathlib import Path
>>> from lifecalc.serialization import load_profile, save_report
>>> from lifecalc.calculator import LifeCalculator
>>>
>>> config = load_profile(Path("profile.json"))
>>> report = LifeCalculator().calculate(config.to_records())
>>> save_report(report, Path("report.json"))
"""

from __future__ import annotations

import json
import logging
import warnings
from pathlib import Path
from typing import Any, Dict, Sequence, TYPE_CHECKING

from pydantic import ValidationError

from .config import ProfileConfig
from .constants import SCHEMA_VERSION
from .exceptions import ConfigurationError, SerializationError
from .profiles import ProjectionPoint
from .retirement import projection_frame
from .types import ReportDict

if TYPE_CHECKING:
    from .calculator import CalculationReport

__all__ = [
    "SCHEMA_VERSION",
    "profile_from_dict",
    "profile_to_dict",
    "load_profile",
    "save_profile",
    "report_to_dict",
    "save_report",
    "save_projection_csv",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SerializationError(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise SerializationError(f"{path}: not UTF-8 text ({e.reason})") from e
    if not isinstance(data, dict):
        raise SerializationError(f"{path}: expected a JSON object at top level")
    return data


def _write_json(data: Dict[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.debug("Wrote %s", path)


def _check_version(data: Dict[str, Any]) -> None:
    schema_version = data.get("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"File schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )


# ---------------------------------------------------------------------------
# Profile Serialization
# ---------------------------------------------------------------------------

def profile_from_dict(data: Dict[str, Any]) -> ProfileConfig:
    """
    Validate a profile document.

    Raises
    ------
    ConfigurationError
        Unknown keys or wrongly shaped sections. Non-numeric amounts are
        not an error; they become zero.
    """
    _check_version(data)
    try:
        return ProfileConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid profile: {problems}") from e


def profile_to_dict(config: ProfileConfig) -> Dict[str, Any]:
    """Profile document with camelCase keys."""
    return config.model_dump(mode="json", by_alias=True)


def load_profile(path: Path) -> ProfileConfig:
    """
    Load a profile document from JSON.

    Examples
    --------
    >>> config = load_profile(Path("profile.json"))
    >>> profile = config.to_records()
    """
    logger.debug("Loading profile from %s", path)
    return profile_from_dict(_read_json(Path(path)))


def save_profile(config: ProfileConfig, path: Path) -> None:
    """Save a profile document to JSON, creating parent directories."""
    _write_json(profile_to_dict(config), Path(path))


# ---------------------------------------------------------------------------
# Report Serialization
# ---------------------------------------------------------------------------

def report_to_dict(report: CalculationReport) -> ReportDict:
    """
    Plain-dict form of a calculation report.

    Non-finite projection balances are kept as floats; ``json.dump``
    writes them as ``Infinity``/``NaN``.
    """
    return {
        "schema_version": SCHEMA_VERSION,
        "net_income": report.net_income,
        "monthly_income": report.monthly_income,
        "tax_amount": report.tax_amount,
        "monthly_savings": report.monthly_savings,
        "total_expenses": report.total_expenses,
        "total_assets": report.total_assets,
        "total_liabilities": report.total_liabilities,
        "net_worth": report.net_worth,
        "expense_slices": [s.to_dict() for s in report.expense_slices],
        "projection": [p.to_dict() for p in report.projection],
    }


def save_report(report: CalculationReport, path: Path) -> None:
    """Save a calculation report to JSON."""
    _write_json(report_to_dict(report), Path(path))


def save_projection_csv(points: Sequence[ProjectionPoint], path: Path) -> None:
    """Write the projection as ``year,savings`` CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    projection_frame(points).to_csv(path, index=False)
    logger.debug("Wrote %d projection rows to %s", len(points), path)
