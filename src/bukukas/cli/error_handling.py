"""CLI error handling helpers."""

import logging
from typing import NoReturn

import click

from bukukas.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> NoReturn:
    """Print ``Error: ...`` to stderr and exit with status 1.

    Domain errors are expected user-facing failures; any other ValueError
    reaching here is logged with its traceback at DEBUG.
    """
    if not isinstance(error, DomainError):
        logger.debug("Unexpected %s in %s", type(error).__name__, ctx.info_name, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
