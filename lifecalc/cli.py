"""
Command-Line Interface for LifeCalc.

Purpose
-------
Runs the calculation engine on a saved profile document without writing
Python code: headline figures, the expense breakdown, the retirement
projection and the two charts.

Commands
--------
- summary: Monthly take-home pay, total expenses and net worth
- expenses: Expense breakdown with shares
- project: Retirement projection table, optional CSV/JSON export
- plot: Save the expense pie chart or the projection line chart
- profile: Create, validate and display profile documents
- info: Version and dependency information

Example Usage
-------------
    # Start from the sample profile
    $ lifecalc profile create me.json --template sample

    # Headline figures
    $ lifecalc summary -p me.json

    # Projection with a different savings rate, exported to CSV
    $ lifecalc project -p me.json --savings-rate 20 -o projection.csv

    # Charts
    $ lifecalc plot -p me.json --kind retirement -o retirement.png
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .calculator import LifeCalculator
from .config import AppSettings, ProfileConfig
from .constants import ASSET_CATEGORIES, EXPENSE_CATEGORIES, LIABILITY_CATEGORIES
from .exceptions import LifeCalcError
from .utils import format_currency

logger = logging.getLogger(__name__)


SAMPLE_PROFILE = {
    "name": "Sample",
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
    "retirement": {"currentAge": 30, "retirementAge": 65, "savingsRate": 15, "expectedReturn": 7},
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _money(ctx: click.Context, value: float) -> str:
    settings: AppSettings = ctx.obj["settings"]
    return format_currency(value, decimals=settings.decimals, symbol=settings.currency_symbol)


def _resolve_profile(ctx: click.Context, profile: Optional[Path]) -> ProfileConfig:
    from .serialization import load_profile

    settings: AppSettings = ctx.obj["settings"]
    path = profile or settings.default_profile
    if path is None:
        _fail("No profile given. Use --profile or set LIFECALC_DEFAULT_PROFILE.")
    logger.debug("Using profile %s", path)
    try:
        return load_profile(Path(path))
    except (LifeCalcError, OSError) as e:
        _fail(f"loading profile {path}: {e}")


profile_option = click.option(
    "--profile", "-p",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to profile file (JSON)"
)


@click.group()
@click.version_option(version=__version__, prog_name="lifecalc")
@click.option("--quiet", "-q", is_flag=True, help="Plain output without tables")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, quiet: bool, verbose: bool) -> None:
    """
    LifeCalc - Personal finance estimates.

    Derives take-home pay, expense totals, net worth and a retirement
    savings projection from a profile of income, expense, asset,
    liability and retirement figures.

    Use 'lifecalc COMMAND --help' for command-specific help.
    """
    settings = AppSettings()
    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = Console()
    ctx.obj["calculator"] = LifeCalculator()


@main.command()
@profile_option
@click.option("--json", "as_json", is_flag=True, help="Print the full report as JSON")
@click.pass_context
def summary(ctx: click.Context, profile: Optional[Path], as_json: bool) -> None:
    """
    Show headline figures.

    Example:
        lifecalc summary -p profile.json
    """
    from .serialization import report_to_dict

    config = _resolve_profile(ctx, profile)
    report = ctx.obj["calculator"].calculate(config.to_records())

    if as_json:
        click.echo(json.dumps(report_to_dict(report), indent=2))
        return

    rows = [
        ("Monthly Take-Home Pay", _money(ctx, report.monthly_income)),
        ("Annual Net Income", _money(ctx, report.net_income)),
        ("Annual Tax", _money(ctx, report.tax_amount)),
        ("Total Expenses", _money(ctx, report.total_expenses)),
        ("Total Assets", _money(ctx, report.total_assets)),
        ("Total Liabilities", _money(ctx, report.total_liabilities)),
        ("Total Net Worth", _money(ctx, report.net_worth)),
    ]
    if report.final_savings is not None:
        rows.append(("Savings at Retirement", _money(ctx, report.final_savings)))

    console = ctx.obj["console"]
    if ctx.obj["quiet"]:
        for label, value in rows:
            click.echo(f"{label}: {value}")
        return

    table = Table(title=config.name or "Summary", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    for label, value in rows:
        table.add_row(label, value)
    console.print(table)


@main.command()
@profile_option
@click.pass_context
def expenses(ctx: click.Context, profile: Optional[Path]) -> None:
    """
    Show the expense breakdown.

    Only categories with a positive amount are listed.

    Example:
        lifecalc expenses -p profile.json
    """
    config = _resolve_profile(ctx, profile)
    calculator: LifeCalculator = ctx.obj["calculator"]
    frame = calculator.expense_table(config.to_records())

    if frame.empty:
        click.echo("No expenses entered.")
        return

    if ctx.obj["quiet"]:
        for row in frame.itertuples(index=False):
            click.echo(f"{row.name}: {_money(ctx, row.value)} ({row.share * 100:.1f}%)")
        return

    table = Table(title="Expense Distribution", show_header=True)
    table.add_column("Category", style="cyan")
    table.add_column("Amount", style="green", justify="right")
    table.add_column("Share", justify="right")
    for row in frame.itertuples(index=False):
        table.add_row(row.name, _money(ctx, row.value), f"{row.share * 100:.1f}%")
    table.add_row("Total", _money(ctx, frame["value"].sum()), "100.0%", style="bold")
    ctx.obj["console"].print(table)


@main.command()
@profile_option
@click.option("--current-age", type=int, default=None, help="Override current age")
@click.option("--retirement-age", type=int, default=None, help="Override retirement age")
@click.option("--savings-rate", type=float, default=None, help="Override savings rate (%)")
@click.option("--expected-return", type=float, default=None, help="Override expected annual return (%)")
@click.option("--starting", type=float, default=None, help="Override starting investments")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Export projection (.csv or .json)"
)
@click.pass_context
def project(
    ctx: click.Context,
    profile: Optional[Path],
    current_age: Optional[int],
    retirement_age: Optional[int],
    savings_rate: Optional[float],
    expected_return: Optional[float],
    starting: Optional[float],
    output: Optional[Path],
) -> None:
    """
    Project retirement savings year by year.

    Overrides replace the profile's retirement assumptions for this run
    only; the profile file is not modified.

    Example:
        lifecalc project -p profile.json --expected-return 5 -o out.csv
    """
    from .serialization import save_projection_csv

    config = _resolve_profile(ctx, profile)
    calculator: LifeCalculator = ctx.obj["calculator"]

    overrides = {
        key: value
        for key, value in {
            "current_age": current_age,
            "retirement_age": retirement_age,
            "savings_rate": savings_rate,
            "expected_return": expected_return,
        }.items()
        if value is not None
    }
    records = calculator.with_assumptions(config.to_records(), **overrides)
    points = calculator.project(records, starting_investments=starting)

    if not points:
        click.echo("Retirement age is below current age; nothing to project.")
    elif ctx.obj["quiet"]:
        for point in points:
            click.echo(f"{point.year}: {point.savings}")
    else:
        table = Table(title="Retirement Projection", show_header=True)
        table.add_column("Age", style="cyan", justify="right")
        table.add_column("Savings", style="green", justify="right")
        for point in points:
            table.add_row(str(point.year), f"{point.savings:,}")
        ctx.obj["console"].print(table)

    if output:
        if output.suffix.lower() == ".json":
            output.parent.mkdir(parents=True, exist_ok=True)
            with open(output, "w") as f:
                json.dump([p.to_dict() for p in points], f, indent=2)
        else:
            save_projection_csv(points, output)
        if not ctx.obj["quiet"]:
            click.echo(f"Projection saved to {output}")


@main.command()
@profile_option
@click.option(
    "--kind", "-k",
    type=click.Choice(["expenses", "retirement"]),
    default="retirement",
    help="Chart to draw (default: retirement)"
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Image file to write (e.g. chart.png)"
)
@click.pass_context
def plot(ctx: click.Context, profile: Optional[Path], kind: str, output: Path) -> None:
    """
    Save a chart of the expense distribution or the projection.

    Example:
        lifecalc plot -p profile.json --kind expenses -o expenses.png
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from .plotting import plot_expense_distribution, plot_retirement_projection

    config = _resolve_profile(ctx, profile)
    report = ctx.obj["calculator"].calculate(config.to_records())
    settings: AppSettings = ctx.obj["settings"]
    dpi = settings.chart_dpi

    output.parent.mkdir(parents=True, exist_ok=True)
    if kind == "expenses":
        fig, _ = plot_expense_distribution(
            report.expense_slices,
            symbol=settings.currency_symbol,
            decimals=settings.decimals,
            save_path=str(output),
            dpi=dpi,
            return_fig_ax=True,
        )
    else:
        fig, _ = plot_retirement_projection(
            report.projection,
            symbol=settings.currency_symbol,
            save_path=str(output),
            dpi=dpi,
            return_fig_ax=True,
        )
    plt.close(fig)

    if not ctx.obj["quiet"]:
        click.echo(f"Chart saved to {output}")


@main.group()
def profile() -> None:
    """
    Profile management commands.

    Create, validate and display profile documents.
    """
    pass


@profile.command("create")
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--template", "-t", type=click.Choice(["blank", "sample"]), default="blank")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
def profile_create(ctx: click.Context, output_file: Path, template: str, force: bool) -> None:
    """
    Create a new profile file from a template.

    The blank template holds the default form values; the sample template
    is a filled-in example.

    Example:
        lifecalc profile create me.json --template sample
    """
    from .serialization import profile_from_dict, save_profile

    if output_file.exists() and not force:
        _fail(f"{output_file} already exists (use --force to overwrite)")

    if template == "blank":
        data = {
            "expenses": dict.fromkeys(EXPENSE_CATEGORIES, 0),
            "assets": dict.fromkeys(ASSET_CATEGORIES, 0),
            "liabilities": dict.fromkeys(LIABILITY_CATEGORIES, 0),
        }
    else:
        data = SAMPLE_PROFILE

    save_profile(profile_from_dict(data), output_file)
    if not ctx.obj["quiet"]:
        click.echo(f"Created profile file: {output_file}")


@profile.command("validate")
@click.argument("profile_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def profile_validate(ctx: click.Context, profile_file: Path) -> None:
    """
    Validate a profile file.

    Checks that the file is JSON and uses only known sections and
    categories.

    Example:
        lifecalc profile validate me.json
    """
    config = _resolve_profile(ctx, profile_file)
    records = config.to_records()
    click.echo("Profile is valid")
    if records.retirement.years < 0:
        click.echo("Warning: retirement age is below current age; projection will be empty", err=True)


@profile.command("show")
@click.argument("profile_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "-f", type=click.Choice(["json", "table"]), default="table")
@click.pass_context
def profile_show(ctx: click.Context, profile_file: Path, format: str) -> None:
    """
    Display a profile's inputs.

    Example:
        lifecalc profile show me.json --format json
    """
    from .serialization import profile_to_dict

    config = _resolve_profile(ctx, profile_file)
    data = profile_to_dict(config)

    if format == "json" or ctx.obj["quiet"]:
        click.echo(json.dumps(data, indent=2))
        return

    console = ctx.obj["console"]
    for section in ("income", "expenses", "assets", "liabilities", "retirement"):
        table = Table(title=section.capitalize(), show_header=True)
        table.add_column("Field", style="cyan")
        table.add_column("Value", justify="right")
        for key, value in data[section].items():
            table.add_row(key[:1].upper() + key[1:], f"{value:g}")
        console.print(table)


@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display system and package information.

    Shows version numbers and installed dependencies.
    """
    from importlib.metadata import PackageNotFoundError, version

    info_lines = [
        f"LifeCalc Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
    ]
    for name in ("numpy", "pandas", "pydantic", "pydantic-settings", "matplotlib", "rich", "click"):
        try:
            info_lines.append(f"{name}: {version(name)}")
        except PackageNotFoundError:
            info_lines.append(f"{name}: not installed")

    if ctx.obj["quiet"]:
        for line in info_lines:
            click.echo(line)
    else:
        ctx.obj["console"].print(Panel("\n".join(info_lines), title="System Information"))


if __name__ == "__main__":
    main()
