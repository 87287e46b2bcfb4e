"""CLI helpers for business resolution and error handling."""

from __future__ import annotations

import click
from bukukas.cli.error_handling import handle_domain_error
from bukukas.domain.business import BusinessService
from bukukas.utils.business_resolver import resolve_business


def resolve_business_or_exit(
    ctx: click.Context, business_service: BusinessService, business: str
) -> str:
    """Resolve business name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_business(business_service, business)
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def resolve_optional_business_or_exit(
    ctx: click.Context, business_service: BusinessService, business: str | None
) -> str | None:
    """Like resolve_business_or_exit, but None (all businesses) passes through."""
    if business is None:
        return None
    return resolve_business_or_exit(ctx, business_service, business)
