"""Main CLI entry point."""

from dataclasses import replace

import click
from bukukas.config import Settings
from bukukas.database.factories import create_sqlite_database
from bukukas.utils.logger import configure_logging

# Import and register all commands at module level
from bukukas.cli.commands import (
    business,
    add,
    transaction,
    summary,
    report,
    compare,
    export,
    employee,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BUKUKAS_DB_PATH environment variable)",
    envvar="BUKUKAS_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides BUKUKAS_LOG_LEVEL environment variable)",
    envvar="BUKUKAS_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Bukukas - bookkeeping for small businesses.

    Record income and expenses per business and view daily, monthly and
    yearly summaries, running balances and comparisons across businesses.
    Employee work days are counted per business over the same periods.
    """
    ctx.ensure_object(dict)

    settings = Settings.from_env()
    if db_path:
        settings = replace(settings, db_path=db_path)
    if log_level:
        settings = replace(settings, log_level=log_level.upper())
    ctx.obj["settings"] = settings
    configure_logging(settings.log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=settings.db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
business.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
summary.register_commands(cli)
report.register_commands(cli)
compare.register_commands(cli)
export.register_commands(cli)
employee.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
