"""Employee work-day commands."""

import click
from bukukas.cli.business_resolution import (
    resolve_business_or_exit,
    resolve_optional_business_or_exit,
)
from bukukas.cli.date_filters import (
    period_selector_options,
    resolve_cli_date_range,
    resolve_cli_period,
)
from bukukas.cli.error_handling import handle_domain_error
from bukukas.cli.labels import EMPLOYEE_LABEL, WORK_DAYS_LABEL, format_days
from bukukas.domain.attendance import active_keys
from bukukas.domain.business import BusinessService
from bukukas.domain.employee import EmployeeService
from bukukas.domain.entities import EmployeeWorkDays, ViewMode
from bukukas.domain.periods import describe_period
from bukukas.utils.date_parser import parse_date

NAME_WIDTH = 24
COLUMN_WIDTH = 10


@click.group()
def employee_group():
    """Record and report employee work days."""
    pass


@employee_group.command("add")
@click.argument("name", metavar="EMPLOYEE_NAME")
@click.option("--business", required=True, help="Business name or ID")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Work date (YYYY-MM-DD, DD/MM/YYYY or relative like 'today', 'yesterday')",
)
@click.pass_context
def add_work_day(ctx, name: str, business: str, date: str) -> None:
    """Record a work day for an employee.

    Examples:
        bukukas employee add "Siti Aminah" --business Cijati
        bukukas employee add Budi --business Cijati --date 2024-03-05
    """
    db = ctx.obj["db"]
    service = EmployeeService(db)
    business_id = resolve_business_or_exit(ctx, BusinessService(db), business)

    try:
        work_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        work_day_id = service.record_work_day(business_id, name, work_date)
    except ValueError as e:
        handle_domain_error(ctx, e)

    record = service.get_work_day(work_day_id)
    click.echo(
        f"Recorded work day for '{record.employee_name}' on {record.work_date.isoformat()} "
        f"(ID: {work_day_id})"
    )


@employee_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--this-month", is_flag=True, help="Filter to the current calendar month")
@click.option("--last-month", is_flag=True, help="Filter to the previous calendar month")
@click.option("--this-year", is_flag=True, help="Filter to the current calendar year")
@click.option("--last-year", is_flag=True, help="Filter to the previous calendar year")
@click.option("--business", help="Business name or ID (default: all businesses)")
@click.option("--employee", help="Only this employee")
@click.pass_context
def list_work_days(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_year: bool,
    business: str | None,
    employee: str | None,
) -> None:
    """List recorded work days, newest first."""
    db = ctx.obj["db"]
    service = EmployeeService(db)
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
        records = service.list_work_days(
            business_id=business_id, start_date=start, end_date=end, employee_name=employee
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not records:
        click.echo("No work days found.")
        return

    businesses = {biz.id: biz.name for biz in business_service.list_businesses()}

    click.echo(f"\nFound {len(records)} work day(s):")
    click.echo("-" * 100)
    click.echo(f"{'ID':<33} {'Date':<11} {'Business':<20} {EMPLOYEE_LABEL:<30}")
    click.echo("-" * 100)
    for record in records:
        business_name = businesses.get(record.business_id, "Unknown")[:20]
        click.echo(
            f"{record.id:<33} {record.work_date.isoformat():<11} {business_name:<20} "
            f"{record.employee_name[:30]:<30}"
        )


@employee_group.command("update")
@click.argument("work_day_id")
@click.option("--name", help="Corrected employee name")
@click.option("--date", help="Corrected work date")
@click.pass_context
def update_work_day(ctx, work_day_id: str, name: str | None, date: str | None) -> None:
    """Correct the name or date of a recorded work day.

    Examples:
        bukukas employee update 3f2a... --date 2024-03-06
    """
    db = ctx.obj["db"]
    service = EmployeeService(db)

    work_date = None
    if date is not None:
        try:
            work_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_work_day(work_day_id, employee_name=name, work_date=work_date)
        click.echo(f"Updated work day {work_day_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@employee_group.command("delete")
@click.argument("work_day_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_work_day(ctx, work_day_id: str, yes: bool) -> None:
    """Delete a recorded work day."""
    db = ctx.obj["db"]
    service = EmployeeService(db)

    record = service.get_work_day(work_day_id)
    if record is None:
        click.echo(f"Error: Work day {work_day_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Are you sure you want to delete the work day of '{record.employee_name}' "
        f"on {record.work_date.isoformat()}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_work_day(work_day_id)
        click.echo(f"Deleted work day {work_day_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def _echo_totals(rows: list[EmployeeWorkDays]) -> None:
    click.echo(f"{EMPLOYEE_LABEL:<{NAME_WIDTH}} {WORK_DAYS_LABEL:>20}")
    click.echo("-" * (NAME_WIDTH + 21))
    for row in rows:
        click.echo(f"{row.employee_name[:NAME_WIDTH]:<{NAME_WIDTH}} {format_days(row.total_days):>20}")


def _echo_by_key(rows: list[EmployeeWorkDays]) -> None:
    keys = active_keys(rows)
    header = f"{EMPLOYEE_LABEL:<{NAME_WIDTH}}"
    header += "".join(f" {key:>{COLUMN_WIDTH}}" for key in keys)
    header += f" {'Total':>{COLUMN_WIDTH}}"
    click.echo(header)
    click.echo("-" * len(header))
    for row in rows:
        line = f"{row.employee_name[:NAME_WIDTH]:<{NAME_WIDTH}}"
        line += "".join(f" {format_days(row.days_by_key[key]):>{COLUMN_WIDTH}}" for key in keys)
        line += f" {format_days(row.total_days):>{COLUMN_WIDTH}}"
        click.echo(line)


@employee_group.command("report")
@period_selector_options
@click.option("--start-date", help="Start of a custom range (requires --end-date)")
@click.option("--end-date", help="End of a custom range (requires --start-date)")
@click.option("--business", help="Business name or ID (default: all businesses)")
@click.pass_context
def report_work_days(
    ctx,
    mode: str,
    month: str | None,
    year: int | None,
    start_date: str | None,
    end_date: str | None,
    business: str | None,
) -> None:
    """Count work days per employee.

    Day mode totals one month per employee; month and year mode add a column
    for every month or year that has work days. --start-date/--end-date count
    over a custom range instead.

    Examples:
        bukukas employee report --business Cijati --month 3 --year 2024
        bukukas employee report --mode month --year 2024
        bukukas employee report --start-date 2024-03-01 --end-date 2024-03-15
    """
    db = ctx.obj["db"]
    service = EmployeeService(db)
    business_id = resolve_optional_business_or_exit(ctx, BusinessService(db), business)

    if start_date or end_date:
        if not (start_date and end_date):
            click.echo("Error: --start-date and --end-date must be given together.", err=True)
            ctx.exit(1)
        start, end = resolve_cli_date_range(
            ctx, start_date=start_date, end_date=end_date, period_flags={}
        )
        try:
            rows = service.work_day_totals(business_id, start, end)
        except ValueError as e:
            handle_domain_error(ctx, e)
        click.echo(f"\nWork days from {start.isoformat()} to {end.isoformat()}:")
        if not rows:
            click.echo("No work days found.")
            return
        _echo_totals(rows)
        return

    selector = resolve_cli_period(ctx, mode=mode, month=month, year=year)
    try:
        result = service.work_day_report(business_id, selector)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nWork days for {describe_period(result.period)}:")
    rows = list(result.rows)
    if not rows:
        click.echo("No work days found.")
        return
    if result.period.mode is ViewMode.DAY:
        _echo_totals(rows)
    else:
        _echo_by_key(rows)


def register_commands(cli: click.Group) -> None:
    """Register employee commands with main CLI."""
    cli.add_command(employee_group, name="employee")
