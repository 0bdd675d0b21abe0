"""CLI helpers for account resolution."""

from __future__ import annotations

import click
from lalurecf.domain.chart_of_accounts import ChartOfAccountService
from lalurecf.domain.entities import CompanyContext
from lalurecf.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context,
    account_service: ChartOfAccountService,
    context: CompanyContext,
    account: str | int,
    fiscal_year: int,
) -> int:
    """Resolve account code or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account(account_service, context, account, fiscal_year)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
