"""Transaction management commands."""

import click
from bukukas.cli.business_resolution import (
    resolve_business_or_exit,
    resolve_optional_business_or_exit,
)
from bukukas.cli.date_filters import resolve_cli_date_range
from bukukas.cli.error_handling import handle_domain_error
from bukukas.cli.labels import (
    BALANCE_LABEL,
    COUNT_LABEL,
    KIND_LABELS,
    category_label,
    format_amount,
)
from bukukas.domain.business import BusinessService
from bukukas.domain.entities import TransactionKind, parse_kind
from bukukas.domain.transaction import TransactionService
from bukukas.utils.amount_parser import parse_amount
from bukukas.utils.date_parser import parse_date

KIND_CHOICES = [k.value.lower() for k in TransactionKind]


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("update")
@click.argument("transaction_id")
@click.option("--business", help="Business name or ID")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option(
    "--kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="Income or expense"
)
@click.option("--category", help="Category valid for the (new) kind")
@click.option("--description", help="Transaction description")
@click.option("--amount", help="Amount in rupiah (e.g., 150000 or 150.000)")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: str,
    business: str | None,
    date: str | None,
    kind: str | None,
    category: str | None,
    description: str | None,
    amount: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        bukukas transaction update 3f2a... --amount 75.000
        bukukas transaction update 3f2a... --kind expense --category Marketing
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    business_service = BusinessService(db)

    business_id = None
    if business is not None:
        business_id = resolve_business_or_exit(ctx, business_service, business)

    txn_date = None
    if date is not None:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    txn_amount = None
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        transaction_service.update_transaction(
            transaction_id=transaction_id,
            business_id=business_id,
            date=txn_date,
            kind=parse_kind(kind) if kind is not None else None,
            category=category,
            description=description,
            amount=txn_amount,
        )
        click.echo(f"Updated transaction {transaction_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--this-month", is_flag=True, help="Filter to the current calendar month")
@click.option("--last-month", is_flag=True, help="Filter to the previous calendar month")
@click.option("--this-year", is_flag=True, help="Filter to the current calendar year")
@click.option("--last-year", is_flag=True, help="Filter to the previous calendar year")
@click.option("--business", help="Business name or ID (default: all businesses)")
@click.option(
    "--kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="Only income or expense"
)
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_year: bool,
    business: str | None,
    kind: str | None,
):
    """View transactions with optional filters, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)
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

    transactions = service.list_transactions(
        business_id=business_id,
        start_date=start,
        end_date=end,
        kind=parse_kind(kind) if kind is not None else None,
    )

    if not transactions:
        click.echo("No transactions found.")
        return

    businesses = {biz.id: biz.name for biz in business_service.list_businesses()}

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 140)
    click.echo(
        f"{'ID':<33} {'Date':<11} {'Business':<20} {'Type':<12} {'Category':<17} "
        f"{'Amount':>16}  {'Description':<26}"
    )
    click.echo("-" * 140)

    for txn in transactions:
        business_name = businesses.get(txn.business_id, "Unknown")[:20]
        amount_str = format_amount(txn.signed_amount)
        description = txn.description[:26]
        click.echo(
            f"{txn.id:<33} {txn.date.isoformat():<11} {business_name:<20} "
            f"{KIND_LABELS[txn.kind]:<12} {category_label(txn.category):<17} "
            f"{amount_str:>16}  {description:<26}"
        )

    total_income = sum(t.amount for t in transactions if t.kind is TransactionKind.INCOME)
    total_expense = sum(t.amount for t in transactions if t.kind is TransactionKind.EXPENSE)
    click.echo("-" * 140)
    click.echo(
        f"TOTAL  {KIND_LABELS[TransactionKind.INCOME]}: {format_amount(total_income)} | "
        f"{KIND_LABELS[TransactionKind.EXPENSE]}: {format_amount(total_expense)} | "
        f"{BALANCE_LABEL}: {format_amount(total_income - total_expense)} | "
        f"{COUNT_LABEL}: {len(transactions)}"
    )


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        bukukas transaction delete 3f2a...
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    txn = transaction_service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Are you sure you want to delete transaction {transaction_id}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        transaction_service.delete_transaction(transaction_id)
        click.echo(f"Deleted transaction {transaction_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
