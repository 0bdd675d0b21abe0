"""Company management commands."""

import click
from lalurecf.cli.error_handling import handle_domain_error
from lalurecf.domain.company import CompanyService
from lalurecf.domain.errors import DomainError
from lalurecf.utils.date_parser import parse_date


@click.group()
def company_group():
    """Manage companies and their Período Contábil."""
    pass


@company_group.command("create")
@click.argument("cnpj")
@click.argument("razao_social", metavar="RAZAO_SOCIAL")
@click.option("--periodo-contabil", help="Initial Período Contábil (YYYY-MM-DD)")
@click.pass_context
def create_company(ctx, cnpj: str, razao_social: str, periodo_contabil: str | None):
    """Create a company.

    Examples:
        lalurecf company create 12.345.678/0001-90 "ACME Ltda"
        lalurecf company create 12345678000190 "ACME Ltda" --periodo-contabil 2024-01-01
    """
    service = CompanyService(ctx.obj["db"])

    periodo = None
    if periodo_contabil is not None:
        try:
            periodo = parse_date(periodo_contabil)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        company_id = service.create_company(cnpj, razao_social, periodo_contabil=periodo)
        click.echo(f"Created company '{razao_social}' (ID: {company_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@company_group.command("list")
@click.pass_context
def list_companies(ctx):
    """List all companies."""
    service = CompanyService(ctx.obj["db"])

    companies = service.list_companies()
    if not companies:
        click.echo("No companies found.")
        return

    click.echo("\nCompanies:")
    click.echo("-" * 80)
    for c in companies:
        periodo = c.periodo_contabil.isoformat() if c.periodo_contabil else "-"
        click.echo(f"ID: {c.id:3d} | {c.cnpj} | {c.razao_social:30s} | Período: {periodo}")


@company_group.command("set-period")
@click.argument("company_id", type=int)
@click.argument("periodo_contabil", metavar="DATE")
@click.pass_context
def set_period(ctx, company_id: int, periodo_contabil: str):
    """Move a company's Período Contábil forward.

    Entries dated before the new Período Contábil can no longer be created,
    edited or toggled. The change is recorded with the --user value.

    Examples:
        lalurecf --user maria company set-period 1 2024-06-01
    """
    service = CompanyService(ctx.obj["db"])

    try:
        novo = parse_date(periodo_contabil)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        company = service.update_periodo_contabil(
            company_id, novo, changed_by=ctx.obj["context"].user
        )
        click.echo(
            f"Período Contábil of '{company.razao_social}' set to "
            f"{company.periodo_contabil.isoformat()}"
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


@company_group.command("audit")
@click.argument("company_id", type=int)
@click.pass_context
def period_audit(ctx, company_id: int):
    """Show the Período Contábil change history of a company."""
    service = CompanyService(ctx.obj["db"])

    try:
        rows = service.list_periodo_contabil_audit(company_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not rows:
        click.echo("No Período Contábil changes recorded.")
        return

    for row in rows:
        anterior = row.periodo_anterior.isoformat() if row.periodo_anterior else "-"
        click.echo(
            f"{row.changed_at:%Y-%m-%d %H:%M:%S} | {anterior} -> {row.periodo_novo.isoformat()} "
            f"| by {row.changed_by or 'unknown'}"
        )


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
