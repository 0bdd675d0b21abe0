"""Reference account (conta referencial) commands."""

import click
from lalurecf.cli.error_handling import handle_domain_error
from lalurecf.domain.errors import DomainError
from lalurecf.domain.reference_accounts import ReferenceAccountService


@click.group()
def reference_group():
    """Manage RFB reference accounts."""
    pass


@reference_group.command("create")
@click.argument("codigo_rfb", metavar="CODIGO_RFB")
@click.argument("descricao", metavar="DESCRICAO")
@click.option("--ano", "ano_validade", type=int, help="Year the code is valid for")
@click.pass_context
def create_reference(ctx, codigo_rfb: str, descricao: str, ano_validade: int | None):
    """Create a reference account.

    Examples:
        lalurecf reference create 1.01.01.01.00 "Caixa" --ano 2024
    """
    service = ReferenceAccountService(ctx.obj["db"])

    try:
        reference_id = service.create_reference_account(codigo_rfb, descricao, ano_validade)
        click.echo(f"Created reference account '{codigo_rfb}' (ID: {reference_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@reference_group.command("list")
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive accounts")
@click.pass_context
def list_references(ctx, include_inactive: bool):
    """List reference accounts."""
    service = ReferenceAccountService(ctx.obj["db"])

    references = service.list_reference_accounts(include_inactive=include_inactive)
    if not references:
        click.echo("No reference accounts found.")
        return

    click.echo("\nReference accounts:")
    click.echo("-" * 70)
    for ref in references:
        ano = ref.ano_validade if ref.ano_validade is not None else "-"
        click.echo(f"ID: {ref.id:3d} | {ref.codigo_rfb:20s} | {ano} | {ref.descricao}")


def register_commands(cli):
    """Register reference account commands with main CLI."""
    cli.add_command(reference_group, name="reference")
