"""CLI helpers for date range and period resolution."""

from datetime import date

import click

from bukukas.config import Settings
from bukukas.domain.entities import PeriodSelector, ViewMode
from bukukas.domain.periods import validate_selector
from bukukas.utils.date_parser import get_date_range, parse_date, parse_month

PERIOD_OPTION_NAMES = "--this-month, --last-month, --this-year, --last-year"


def _settings(ctx: click.Context) -> Settings:
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return obj.get("settings") or Settings()


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            f"Error: Only one period option ({PERIOD_OPTION_NAMES}) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    start = None
    end = None

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                start, end = get_date_range(period)
                break
    else:
        if start_date:
            try:
                start = parse_date(start_date)
            except ValueError as e:
                click.echo(f"Error: Invalid start date: {e}", err=True)
                ctx.exit(1)

        if end_date:
            try:
                end = parse_date(end_date)
            except ValueError as e:
                click.echo(f"Error: Invalid end date: {e}", err=True)
                ctx.exit(1)

        if start is None and end is None and default_range is not None:
            start, end = default_range

    if start is not None and end is not None and end < start:
        click.echo("Error: End date cannot be before start date.", err=True)
        ctx.exit(1)

    return start, end


def resolve_cli_period(
    ctx,
    *,
    mode: str,
    month: str | None,
    year: int | None,
    today: date | None = None,
) -> PeriodSelector:
    """Build a valid period selector from CLI options.

    Missing month/year default to today's. An out-of-range month or year
    is reported as a warning and replaced by the default period for the
    mode, so a bad option never aborts a report.
    """
    settings = _settings(ctx)
    view_mode = ViewMode(mode.lower())
    default = PeriodSelector.default(
        view_mode,
        today=today,
        years_before=settings.years_before,
        years_after=settings.years_after,
    )

    try:
        month_number = parse_month(month) if month is not None else default.month
        selector = PeriodSelector(
            mode=view_mode,
            year=year if year is not None else default.year,
            month=month_number,
            years_before=default.years_before,
            years_after=default.years_after,
        )
        validate_selector(selector)
    except ValueError as e:  # InvalidPeriod or an unparseable month
        click.echo(f"Warning: {e}. Falling back to the current period.", err=True)
        return default

    return selector


def period_selector_options(func):
    """Add --mode/--month/--year options to a command."""
    func = click.option(
        "--year", type=int, help="Year (defaults to the current year; anchors the year window)"
    )(func)
    func = click.option(
        "--month", help="Month for day view, as 1-12 or a name like 'Mar' (defaults to the current month)"
    )(func)
    func = click.option(
        "--mode",
        type=click.Choice([m.value for m in ViewMode], case_sensitive=False),
        default=ViewMode.DAY.value,
        show_default=True,
        help="Bucket per day of a month, per month of a year, or per year",
    )(func)
    return func
