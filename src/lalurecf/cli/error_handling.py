"""CLI error handling helpers."""

import click

from lalurecf.domain.errors import DomainError, MissingContextError, PeriodLockViolation


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    if isinstance(error, PeriodLockViolation):
        click.echo(f"Error: Período Contábil violation: {error}", err=True)
    elif isinstance(error, MissingContextError):
        click.echo(f"Error: {error}. Use --company or set LALURECF_COMPANY_ID.", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
