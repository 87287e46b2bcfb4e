"""Business management commands."""

import click
from bukukas.cli.business_resolution import resolve_business_or_exit
from bukukas.cli.error_handling import handle_domain_error
from bukukas.domain.business import BusinessService


@click.group()
def business_group():
    """Manage businesses."""
    pass


@business_group.command("add")
@click.argument("name", metavar="BUSINESS_NAME")
@click.option("--image", help="Image URL shown next to the business")
@click.pass_context
def add_business(ctx, name: str, image: str | None):
    """Create a new business.

    Examples:
        bukukas business add "Teh Desa Cijati"
        bukukas business add "Teh Desa Kartini" --image https://example.com/kartini.png
    """
    db = ctx.obj["db"]
    service = BusinessService(db)

    try:
        business_id = service.create_business(name=name, image=image)
        click.echo(f"Created business '{name.strip()}' (ID: {business_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@business_group.command("list")
@click.pass_context
def list_businesses(ctx):
    """List all businesses."""
    db = ctx.obj["db"]
    service = BusinessService(db)

    businesses = service.list_businesses()
    if not businesses:
        click.echo("No businesses found.")
        return

    click.echo("\nBusinesses:")
    click.echo("-" * 70)
    for biz in businesses:
        click.echo(f"ID: {biz.id} | {biz.name}")


@business_group.command("rename")
@click.argument("business", metavar="BUSINESS")
@click.argument("new_name", metavar="NEW_NAME")
@click.option("--image", help="New image URL (optional)")
@click.pass_context
def rename_business(ctx, business: str, new_name: str, image: str | None) -> None:
    """Rename a business.

    BUSINESS can be a business name or ID.

    Examples:
        bukukas business rename Cijati "Teh Desa Cijati Baru"
    """
    db = ctx.obj["db"]
    service = BusinessService(db)
    business_id = resolve_business_or_exit(ctx, service, business)

    try:
        service.rename_business(business_id=business_id, name=new_name, image=image)
        click.echo(f"Renamed business to '{new_name.strip()}'")
        if image is not None:
            click.echo("Image updated")
    except ValueError as e:
        handle_domain_error(ctx, e)


@business_group.command("delete")
@click.argument("business", metavar="BUSINESS")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_business(ctx, business: str, yes: bool) -> None:
    """Delete a business that has no transactions.

    BUSINESS can be a business name or ID.
    """
    db = ctx.obj["db"]
    service = BusinessService(db)
    business_id = resolve_business_or_exit(ctx, service, business)
    business_obj = service.get_business(business_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete business '{business_obj.name}'?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_business(business_id)
        click.echo(f"Deleted business '{business_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register business commands with main CLI."""
    cli.add_command(business_group, name="business")
