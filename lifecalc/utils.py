"""General utilities for LifeCalc

Contents
--------
- Numeric coercion (boundary policy: non-numeric becomes zero)
- Rounding helpers (half-up integer rounding)
- Percent helpers
- Formatters (currency strings, matplotlib tick formatter)
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Union

import numpy as np

from .constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_DECIMALS, PERCENT

__all__ = [
    # Coercion
    "coerce_number",
    "sum_amounts",
    # Rounding
    "round_half_up",
    # Percent
    "percent_of",
    # Formatters
    "format_currency",
    "currency_formatter",
]

Number = Union[int, float]


# ---------------------------------------------------------------------------
# Numeric coercion
# ---------------------------------------------------------------------------

def coerce_number(value: Any) -> float:
    """Coerce *value* to float, mapping anything non-numeric to 0.0.

    Numeric strings are parsed (``"12.5" -> 12.5``), blanks and ``None``
    become zero, and so does NaN. Infinities are kept.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float, np.integer, np.floating)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0
    return 0.0 if math.isnan(number) else number


def sum_amounts(amounts: Union[Mapping[Any, Any], Iterable[Any]]) -> float:
    """Sum mapping values (or an iterable) after coercing each entry."""
    values = amounts.values() if isinstance(amounts, Mapping) else amounts
    return float(sum(coerce_number(v) for v in values))


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def round_half_up(value: float) -> Number:
    """Round to the nearest integer with halves going up (toward +inf).

    ``36870.5 -> 36871`` and ``-2.5 -> -2``. Python's built-in ``round``
    rounds halves to even, which would give 36870. Non-finite values are
    returned unchanged as floats.
    """
    if not math.isfinite(value):
        return float(value)
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


# ---------------------------------------------------------------------------
# Percent helpers
# ---------------------------------------------------------------------------

def percent_of(amount: float, rate: float) -> float:
    """Return *rate* percent of *amount* (``percent_of(200, 15) == 30``)."""
    return amount * rate / PERCENT


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def format_currency(value, decimals=DEFAULT_DECIMALS, symbol=DEFAULT_CURRENCY_SYMBOL):
    """
    Format a scalar for display with a currency prefix.

    Produces the plain fixed-point form shown next to the input forms:
    no thousands grouping, fixed number of decimals.

    Parameters
    ----------
    value : float
        Amount to format. Negative amounts keep their sign after the symbol.
    decimals : int, default 2
        Number of decimal places.
    symbol : str, default '$'
        Currency prefix.

    Returns
    -------
    str

    Examples
    --------
    >>> format_currency(3750)
    '$3750.00'
    >>> format_currency(-1250.5)
    '$-1250.50'
    >>> format_currency(1234.567, decimals=0)
    '$1235'
    """
    return f"{symbol}{value:.{decimals}f}"


def currency_formatter(x, pos, symbol=DEFAULT_CURRENCY_SYMBOL):
    """
    Format axis values with thousands separators for matplotlib FuncFormatter.

    - 250_000 → "$250,000"
    - 0 → "$0"

    Bind another prefix with ``functools.partial(currency_formatter, symbol="€")``.

    Examples
    --------
    >>> from matplotlib.ticker import FuncFormatter
    >>> ax.yaxis.set_major_formatter(FuncFormatter(currency_formatter))
    """
    return f"{symbol}{x:,.0f}"
