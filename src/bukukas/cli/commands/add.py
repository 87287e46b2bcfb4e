"""Add transaction command."""

import click
from bukukas.cli.business_resolution import resolve_business_or_exit
from bukukas.cli.error_handling import handle_domain_error
from bukukas.cli.labels import KIND_LABELS, category_label, format_amount
from bukukas.domain.business import BusinessService
from bukukas.domain.entities import TransactionKind, parse_category, parse_kind
from bukukas.domain.transaction import TransactionService
from bukukas.utils.amount_parser import parse_amount
from bukukas.utils.date_parser import parse_date


@click.command("add")
@click.option("--business", required=True, help="Business name or ID")
@click.option(
    "--date",
    required=True,
    help="Transaction date (YYYY-MM-DD, DD/MM/YYYY or relative like 'today', 'yesterday')",
)
@click.option(
    "--kind",
    required=True,
    type=click.Choice([k.value.lower() for k in TransactionKind], case_sensitive=False),
    help="Income or expense",
)
@click.option(
    "--category",
    required=True,
    help="Category, e.g. OmsetUsaha or 'Omset Usaha' for income, 'Belanja Bahan' for expense",
)
@click.option("--description", required=True, help="Transaction description")
@click.option("--amount", required=True, help="Amount in rupiah (e.g., 150000 or 150.000)")
@click.pass_context
def add_transaction(
    ctx,
    business: str,
    date: str,
    kind: str,
    category: str,
    description: str,
    amount: str,
):
    """Add an income or expense transaction.

    Examples:
        bukukas add --business Cijati --date 2024-03-05 --kind income --category "Omset Usaha" --description "Penjualan harian" --amount 100000
        bukukas add --business Cijati --date today --kind expense --category BelanjaBahan --description "Gula" --amount 30.000
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    business_service = BusinessService(db)

    business_id = resolve_business_or_exit(ctx, business_service, business)
    business_obj = business_service.get_business(business_id)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_kind = parse_kind(kind)
        txn_category = parse_category(txn_kind, category)
        transaction_id = transaction_service.create_transaction(
            business_id=business_id,
            date=txn_date,
            kind=txn_kind,
            category=txn_category,
            description=description,
            amount=txn_amount,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Business: {business_obj.name}")
    click.echo(f"  Date: {txn_date.isoformat()}")
    click.echo(f"  Type: {KIND_LABELS[txn_kind]}")
    click.echo(f"  Category: {category_label(txn_category)}")
    click.echo(f"  Description: {description.strip()}")
    click.echo(f"  Amount: {format_amount(txn_amount)}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
