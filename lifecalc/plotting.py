"""
Plotting utilities for LifeCalc.

Purpose
-------
Matplotlib renderings of the two engine outputs that are charted:

- plot_expense_distribution: pie chart of ExpenseSlices
- plot_retirement_projection: line chart of ProjectionPoints (age on the
  x-axis, savings on the y-axis)

Both follow the same calling convention: draw on ``ax`` if given,
otherwise create a figure; optionally save to ``save_path``; return
``(fig, ax)`` when ``return_fig_ax=True``. Empty inputs draw a "No data"
placeholder unless ``strict=True``, which raises ChartError instead.
"""

from __future__ import annotations

import logging
import math
from functools import partial
from typing import Optional, Sequence

from .constants import (
    CHART_COLORS,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_DECIMALS,
    DEFAULT_DPI,
    DEFAULT_FIGSIZE,
)
from .exceptions import ChartError
from .profiles import ExpenseSlice, ProjectionPoint
from .utils import currency_formatter, format_currency

__all__ = [
    "plot_expense_distribution",
    "plot_retirement_projection",
]

logger = logging.getLogger(__name__)


def _no_data(ax, figsize, message):
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize) if ax is None else (ax.figure, ax)
    ax.set_axis_off()
    ax.text(0.5, 0.5, message, ha="center", va="center", transform=ax.transAxes)
    return fig, ax


def _finish(fig, ax, save_path, dpi, return_fig_ax):
    if save_path:
        fig.savefig(save_path, bbox_inches="tight", dpi=dpi)
        logger.info("Saved chart to %s", save_path)
    if return_fig_ax:
        return fig, ax
    return None


def plot_expense_distribution(
    slices: Sequence[ExpenseSlice],
    ax=None,
    figsize: tuple = DEFAULT_FIGSIZE,
    title: Optional[str] = "Expense Distribution",
    colors: Optional[Sequence[str]] = None,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    decimals: int = DEFAULT_DECIMALS,
    save_path: Optional[str] = None,
    dpi: int = DEFAULT_DPI,
    return_fig_ax: bool = False,
    strict: bool = False,
):
    """
    Pie chart of expense slices.

    Parameters
    ----------
    slices : Sequence[ExpenseSlice]
        Positive categories, typically from ``expense_slices``.
    ax : matplotlib.axes.Axes, optional
        Existing Axes to draw on.
    figsize : tuple, default (10, 6)
    title : str, optional
    colors : Sequence[str], optional
        Slice colors, cycled by slice index. Defaults to CHART_COLORS.
    symbol : str, default '$'
        Currency prefix in the wedge labels.
    decimals : int, default 2
        Decimal places in the wedge labels.
    save_path : str, optional
        File path to save the figure.
    dpi : int, default 150
    return_fig_ax : bool, default False
        If True, returns (fig, ax).
    strict : bool, default False
        Raise ChartError instead of drawing a placeholder for no slices.

    Notes
    -----
    Wedges are labeled ``"name: $1234.56"`` via ``format_currency``.
    """
    import matplotlib.pyplot as plt

    if not slices:
        if strict:
            raise ChartError("No positive expense amounts to chart")
        fig, ax = _no_data(ax, figsize, "No expenses entered")
        return _finish(fig, ax, save_path, dpi, return_fig_ax)

    palette = list(colors or CHART_COLORS)
    fig, ax = plt.subplots(figsize=figsize) if ax is None else (ax.figure, ax)
    ax.pie(
        [s.value for s in slices],
        labels=[f"{s.name}: {format_currency(s.value, decimals, symbol)}" for s in slices],
        colors=[palette[i % len(palette)] for i in range(len(slices))],
        startangle=90,
        counterclock=False,
        wedgeprops={"edgecolor": "white"},
    )
    ax.set_aspect("equal")
    if title:
        ax.set_title(title)
    return _finish(fig, ax, save_path, dpi, return_fig_ax)


def plot_retirement_projection(
    points: Sequence[ProjectionPoint],
    ax=None,
    figsize: tuple = DEFAULT_FIGSIZE,
    title: Optional[str] = "Retirement Projection",
    color: str = CHART_COLORS[4],
    grid: bool = True,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
    save_path: Optional[str] = None,
    dpi: int = DEFAULT_DPI,
    return_fig_ax: bool = False,
    strict: bool = False,
):
    """
    Line chart of the retirement projection.

    Parameters
    ----------
    points : Sequence[ProjectionPoint]
        Output of ``project_retirement``.
    ax : matplotlib.axes.Axes, optional
    figsize : tuple, default (10, 6)
    title : str, optional
    color : str, default "#8884d8"
    grid : bool, default True
        Dashed background grid.
    symbol : str, default '$'
        Currency prefix on the savings axis.
    save_path : str, optional
    dpi : int, default 150
    return_fig_ax : bool, default False
    strict : bool, default False
        Raise ChartError instead of drawing a placeholder when nothing is
        drawable (empty projection, or every balance non-finite).

    Notes
    -----
    Points whose balance overflowed to a non-finite value are skipped.
    """
    import matplotlib.pyplot as plt
    from matplotlib.ticker import FuncFormatter

    drawable = [p for p in points if math.isfinite(p.savings)]
    if len(drawable) < len(points):
        logger.warning(
            "Skipping %d non-finite projection points", len(points) - len(drawable)
        )

    if not drawable:
        if strict:
            raise ChartError("No finite projection points to chart")
        if points:
            message = "Projection overflowed (no finite balances)"
        else:
            message = "No projection (retirement age below current age)"
        fig, ax = _no_data(ax, figsize, message)
        return _finish(fig, ax, save_path, dpi, return_fig_ax)

    fig, ax = plt.subplots(figsize=figsize) if ax is None else (ax.figure, ax)
    ax.plot(
        [p.year for p in drawable],
        [p.savings for p in drawable],
        color=color,
        linewidth=2,
        marker="o" if len(drawable) <= 12 else None,
        label="Savings",
    )
    ax.set_xlabel("Age")
    ax.set_ylabel("Savings")
    ax.yaxis.set_major_formatter(FuncFormatter(partial(currency_formatter, symbol=symbol)))
    if title:
        ax.set_title(title)
    if grid:
        ax.grid(True, linestyle="--", alpha=0.4)
    return _finish(fig, ax, save_path, dpi, return_fig_ax)
