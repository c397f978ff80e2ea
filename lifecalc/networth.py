"""
Net worth resolution for LifeCalc.

    net_worth = sum(assets) - sum(liabilities)

Both sides accept the profile records or plain mappings; missing or
non-numeric entries count as zero. The result may be negative.
"""

from __future__ import annotations

from typing import Mapping

from .utils import sum_amounts

__all__ = [
    "total_assets",
    "total_liabilities",
    "net_worth",
]


def total_assets(assets: Mapping) -> float:
    return sum_amounts(assets)


def total_liabilities(liabilities: Mapping) -> float:
    return sum_amounts(liabilities)


def net_worth(assets: Mapping, liabilities: Mapping) -> float:
    """
    Total assets minus total liabilities.

    Examples
    --------
    >>> from lifecalc.profiles import AssetProfile, LiabilityProfile
    >>> net_worth(
    ...     AssetProfile(cash=10_000, investments=20_000),
    ...     LiabilityProfile(mortgage=15_000, car_loan=5_000),
    ... )
    10000.0
    """
    return total_assets(assets) - total_liabilities(liabilities)
