"""
Custom exceptions for LifeCalc.

Purpose
-------
Provides a unified exception hierarchy for the boundary layers of LifeCalc
(configuration loading, serialization, charting). The calculation engine
itself is total over finite numeric input and raises none of these.

Exception Hierarchy
-------------------
LifeCalcError (base)
├── ConfigurationError - Invalid profile document or settings
├── SerializationError - Unreadable or malformed files
└── ChartError - Nothing drawable in strict chart mode

Usage
-----
>>> from lifecalc.exceptions import ConfigurationError, LifeCalcError
>>>
>>> try:
...     profile = load_profile(path)
... except LifeCalcError as e:
...     print(f"LifeCalc error: {e}")
"""


class LifeCalcError(Exception):
    """
    Base exception for all LifeCalc errors.

    Examples
    --------
    >>> try:
    ...     save_report(report, path)
    ... except LifeCalcError as e:
    ...     logger.error("Export failed: %s", e)
    """
    pass


class ConfigurationError(LifeCalcError):
    """
    Invalid profile document or application settings.

    Raised when a profile cannot be turned into engine records, such as:
    - Unknown category keys (categories are a closed set)
    - Wrong structure (a list where a section object is expected)

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "expenses.pets: unknown category. "
    ...     "Valid categories: housing, transportation, food, ..."
    ... )
    """
    pass


class SerializationError(LifeCalcError):
    """
    Unreadable or malformed files.

    Raised when a profile or report file is not valid JSON or its top level
    is not an object.
    """
    pass


class ChartError(LifeCalcError):
    """
    Chart requested with nothing to draw.

    Only raised when a plotting function is called with ``strict=True``;
    otherwise an empty chart shows a "No data" placeholder.
    """
    pass
