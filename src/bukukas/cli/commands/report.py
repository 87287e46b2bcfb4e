"""Period report command."""

import click
from bukukas.cli.business_resolution import resolve_optional_business_or_exit
from bukukas.cli.date_filters import period_selector_options, resolve_cli_period
from bukukas.cli.error_handling import handle_domain_error
from bukukas.cli.labels import BALANCE_LABEL, KIND_LABELS, format_amount
from bukukas.domain.business import BusinessService
from bukukas.domain.entities import TransactionKind
from bukukas.domain.periods import describe_period
from bukukas.domain.report import ReportService


@click.command("report")
@period_selector_options
@click.option("--business", help="Business name or ID (default: all businesses)")
@click.option(
    "--skip-empty",
    is_flag=True,
    help="Hide buckets without transactions (the running balance still counts them)",
)
@click.pass_context
def report(
    ctx, mode: str, month: str | None, year: int | None, business: str | None, skip_empty: bool
):
    """Show per-bucket income, expense and running balance.

    Day mode shows every day of a month, month mode every month of a year
    and year mode a window of years around --year.

    Examples:
        bukukas report --business Cijati --month 3 --year 2024
        bukukas report --mode month --year 2024
        bukukas report --mode year
    """
    db = ctx.obj["db"]
    business_service = BusinessService(db)
    report_service = ReportService(db)

    business_id = resolve_optional_business_or_exit(ctx, business_service, business)
    selector = resolve_cli_period(ctx, mode=mode, month=month, year=year)

    try:
        result = report_service.period_report(business_id, selector)
    except ValueError as e:
        handle_domain_error(ctx, e)

    income_label = KIND_LABELS[TransactionKind.INCOME]
    expense_label = KIND_LABELS[TransactionKind.EXPENSE]

    click.echo(f"\nReport for {describe_period(result.period)}:")
    click.echo("-" * 84)
    click.echo(
        f"{'Period':<8} {income_label:>18} {expense_label:>18} {'Net':>18} {BALANCE_LABEL:>18}"
    )
    click.echo("-" * 84)

    for bucket in result.buckets:
        if skip_empty and not bucket.total_income and not bucket.total_expense:
            continue
        click.echo(
            f"{bucket.key:<8} {format_amount(bucket.total_income):>18} "
            f"{format_amount(bucket.total_expense):>18} "
            f"{format_amount(bucket.net_balance):>18} "
            f"{format_amount(bucket.cumulative_balance):>18}"
        )

    totals = result.summary
    click.echo("-" * 84)
    click.echo(
        f"{'TOTAL':<8} {format_amount(totals.total_income):>18} "
        f"{format_amount(totals.total_expense):>18} "
        f"{format_amount(totals.net_balance):>18}"
    )


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(report)
