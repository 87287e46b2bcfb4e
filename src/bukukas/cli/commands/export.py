"""CSV export command."""

import click
from bukukas.cli.business_resolution import resolve_optional_business_or_exit
from bukukas.cli.date_filters import resolve_cli_date_range
from bukukas.cli.error_handling import handle_domain_error
from bukukas.domain.business import BusinessService
from bukukas.domain.csv_export import transactions_to_csv, write_transactions_csv
from bukukas.domain.transaction import TransactionService


@click.command("export")
@click.option("--business", help="Business name or ID (default: all businesses)")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--this-month", is_flag=True, help="Export the current calendar month")
@click.option("--last-month", is_flag=True, help="Export the previous calendar month")
@click.option("--this-year", is_flag=True, help="Export the current calendar year")
@click.option("--last-year", is_flag=True, help="Export the previous calendar year")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="File to write (default: standard output)",
)
@click.pass_context
def export_transactions(
    ctx,
    business: str | None,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_year: bool,
    output: str | None,
):
    """Export transactions as CSV, newest first.

    Columns are Date, TransactionType, Category, Description and Amount;
    expenses are written as negative amounts.

    Examples:
        bukukas export --business Cijati --this-month -o cijati.csv
        bukukas export --start-date 2024-01-01 --end-date 2024-03-31
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    business_service = BusinessService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "last-month": last_month,
            "this-year": this_year,
            "last-year": last_year,
        },
    )
    business_id = resolve_optional_business_or_exit(ctx, business_service, business)

    try:
        transactions = transaction_service.list_transactions(
            business_id=business_id, start_date=start, end_date=end
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if output is None:
        click.echo(transactions_to_csv(transactions), nl=False)
        return

    with open(output, "w", newline="", encoding="utf-8") as f:
        count = write_transactions_csv(transactions, f)
    click.echo(f"Exported {count} transaction(s) to {output}", err=True)


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_transactions)
