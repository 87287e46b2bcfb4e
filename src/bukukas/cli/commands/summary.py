"""Summary command."""

import click
from bukukas.cli.business_resolution import resolve_optional_business_or_exit
from bukukas.cli.date_filters import period_selector_options, resolve_cli_period
from bukukas.cli.error_handling import handle_domain_error
from bukukas.cli.labels import (
    BALANCE_LABEL,
    COUNT_LABEL,
    KIND_LABELS,
    category_label,
    format_amount,
)
from bukukas.domain.business import BusinessService
from bukukas.domain.entities import TransactionKind
from bukukas.domain.periods import describe_period
from bukukas.domain.report import ReportService


def _echo_category_block(title: str, totals: dict, subtotal: int) -> None:
    click.echo(title)
    click.echo("*" * 70)
    # Categories sorted by value, highest first, ties by label
    for category, total in sorted(
        totals.items(), key=lambda item: (-item[1], category_label(item[0]))
    ):
        if total == 0:
            continue
        click.echo(f"    {category_label(category):<46} {format_amount(total):>20}")
    click.echo("-" * 70)
    click.echo(f"{title + ' Subtotal':<50} {format_amount(subtotal):>20}")
    click.echo("=" * 70)


@click.command("summary")
@period_selector_options
@click.option("--business", help="Business name or ID (default: all businesses)")
@click.option(
    "--recent",
    type=click.IntRange(min=0),
    default=5,
    show_default=True,
    help="Number of recent transactions to show",
)
@click.pass_context
def summary(ctx, mode: str, month: str | None, year: int | None, business: str | None, recent: int):
    """Show income, expense and balance for a period.

    Examples:
        bukukas summary --business Cijati
        bukukas summary --mode month --year 2024
        bukukas summary --mode year --recent 10
    """
    db = ctx.obj["db"]
    business_service = BusinessService(db)
    report_service = ReportService(db)

    business_id = resolve_optional_business_or_exit(ctx, business_service, business)
    selector = resolve_cli_period(ctx, mode=mode, month=month, year=year)

    try:
        result = report_service.cash_summary(business_id, selector, recent_limit=recent)
    except ValueError as e:
        handle_domain_error(ctx, e)

    totals = result.summary
    click.echo(f"\nSummary for {describe_period(result.period)}:")
    click.echo("-" * 70)

    if totals.transaction_count == 0:
        click.echo("No transactions found.")
    else:
        if totals.total_income:
            _echo_category_block(
                KIND_LABELS[TransactionKind.INCOME],
                totals.income_by_category,
                totals.total_income,
            )
            click.echo()
        if totals.total_expense:
            _echo_category_block(
                KIND_LABELS[TransactionKind.EXPENSE],
                totals.expense_by_category,
                totals.total_expense,
            )
            click.echo()

    click.echo(f"{KIND_LABELS[TransactionKind.INCOME]:<50} {format_amount(totals.total_income):>20}")
    click.echo(f"{KIND_LABELS[TransactionKind.EXPENSE]:<50} {format_amount(totals.total_expense):>20}")
    click.echo(f"{BALANCE_LABEL:<50} {format_amount(totals.net_balance):>20}")
    click.echo(f"{COUNT_LABEL:<50} {totals.transaction_count:>20}")

    if result.recent:
        click.echo("\nRecent transactions:")
        click.echo("-" * 70)
        for txn in result.recent:
            click.echo(
                f"{txn.date.isoformat():<11} {category_label(txn.category):<17} "
                f"{txn.description[:22]:<22} {format_amount(txn.signed_amount):>17}"
            )


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
