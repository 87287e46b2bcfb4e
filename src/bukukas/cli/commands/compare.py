"""Business comparison command."""

import click
from bukukas.cli.business_resolution import resolve_business_or_exit
from bukukas.cli.date_filters import period_selector_options, resolve_cli_period
from bukukas.cli.error_handling import handle_domain_error
from bukukas.cli.labels import BALANCE_LABEL, KIND_LABELS, METRIC_LABELS, format_amount
from bukukas.domain.business import BusinessService
from bukukas.domain.entities import ComparisonMetric, TransactionKind
from bukukas.domain.periods import describe_period
from bukukas.domain.report import ReportService

COLUMN_WIDTH = 18


def _column_title(name: str) -> str:
    return name[:COLUMN_WIDTH]


@click.command("compare")
@period_selector_options
@click.option(
    "--business",
    "businesses",
    multiple=True,
    help="Business name or ID; repeat to pick several (default: all businesses)",
)
@click.option(
    "--metric",
    type=click.Choice([m.value for m in ComparisonMetric], case_sensitive=False),
    default=ComparisonMetric.INCOME.value,
    show_default=True,
    help="Figure to compare per bucket",
)
@click.option("--totals", is_flag=True, help="Show one total row per business instead of buckets")
@click.pass_context
def compare(
    ctx,
    mode: str,
    month: str | None,
    year: int | None,
    businesses: tuple[str, ...],
    metric: str,
    totals: bool,
):
    """Compare businesses side by side over a period.

    Examples:
        bukukas compare --mode month --year 2024
        bukukas compare --business Cijati --business Kartini --metric net
        bukukas compare --mode year --totals
    """
    db = ctx.obj["db"]
    business_service = BusinessService(db)
    report_service = ReportService(db)

    selector = resolve_cli_period(ctx, mode=mode, month=month, year=year)

    if totals:
        if businesses:
            click.echo("Error: --totals always covers all businesses; drop --business.", err=True)
            ctx.exit(1)
        _echo_totals(ctx, report_service, selector)
        return

    business_ids = None
    if businesses:
        business_ids = [resolve_business_or_exit(ctx, business_service, b) for b in businesses]

    comparison_metric = ComparisonMetric(metric.lower())
    try:
        period, compared, rows = report_service.business_comparison(
            business_ids, selector, comparison_metric
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not compared:
        click.echo("No businesses found.")
        return

    click.echo(
        f"\n{METRIC_LABELS[comparison_metric]} per business for {describe_period(period)}:"
    )
    header = f"{'Period':<8}" + "".join(
        f" {_column_title(biz.name):>{COLUMN_WIDTH}}" for biz in compared
    )
    click.echo("-" * len(header))
    click.echo(header)
    click.echo("-" * len(header))
    for row in rows:
        click.echo(
            f"{row.key:<8}"
            + "".join(
                f" {format_amount(row.values[biz.id]):>{COLUMN_WIDTH}}" for biz in compared
            )
        )


def _echo_totals(ctx, report_service: ReportService, selector) -> None:
    try:
        period, rows = report_service.business_summaries(selector)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not rows:
        click.echo("No businesses found.")
        return

    click.echo(f"\nTotals per business for {describe_period(period)}:")
    click.echo("-" * 82)
    click.echo(
        f"{'Business':<25} {KIND_LABELS[TransactionKind.INCOME]:>18} "
        f"{KIND_LABELS[TransactionKind.EXPENSE]:>18} {BALANCE_LABEL:>18}"
    )
    click.echo("-" * 82)
    for row in rows:
        click.echo(
            f"{row.name[:25]:<25} {format_amount(row.total_income):>18} "
            f"{format_amount(row.total_expense):>18} {format_amount(row.net_balance):>18}"
        )


def register_commands(cli):
    """Register compare command with main CLI."""
    cli.add_command(compare)
