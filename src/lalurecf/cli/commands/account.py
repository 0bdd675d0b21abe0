"""Chart-of-accounts commands."""

import click
from lalurecf.cli.account_resolution import resolve_account_or_exit
from lalurecf.cli.error_handling import handle_domain_error
from lalurecf.domain.chart_of_accounts import ChartOfAccountService
from lalurecf.domain.entities import ChartOfAccount
from lalurecf.domain.enums import AccountType, ClasseContabil, NaturezaConta
from lalurecf.domain.errors import DomainError

ACCOUNT_TYPES = click.Choice([t.value for t in AccountType], case_sensitive=False)
CLASSES = click.Choice([c.value for c in ClasseContabil], case_sensitive=False)
NATUREZAS = click.Choice([n.value for n in NaturezaConta], case_sensitive=False)


def _enum(enum_cls, value):
    return enum_cls(value.upper()) if value is not None else None


def _show(account: ChartOfAccount) -> None:
    click.echo(f"ID:               {account.id}")
    click.echo(f"Code:             {account.code}")
    click.echo(f"Name:             {account.name}")
    click.echo(f"Fiscal year:      {account.fiscal_year}")
    click.echo(f"Type:             {account.account_type.value}")
    click.echo(f"Classe:           {account.classe.value if account.classe else '-'}")
    click.echo(f"Nível:            {account.nivel}")
    click.echo(f"Natureza:         {account.natureza.value}")
    click.echo(f"Reference:        {account.reference_account_id}")
    click.echo(f"Afeta resultado:  {'yes' if account.afeta_resultado else 'no'}")
    click.echo(f"Dedutível:        {'yes' if account.dedutivel else 'no'}")
    click.echo(f"Status:           {account.status.value}")


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("code")
@click.argument("name")
@click.option("--fiscal-year", type=int, required=True, help="Fiscal year")
@click.option("--type", "account_type", type=ACCOUNT_TYPES, required=True, help="Account type")
@click.option("--reference", "reference_id", type=int, required=True, help="Reference account ID")
@click.option("--nivel", type=int, required=True, help="Hierarchy level (1-5)")
@click.option("--natureza", type=NATUREZAS, required=True, help="Account nature")
@click.option("--classe", type=CLASSES, help="ECF accounting class")
@click.option("--afeta-resultado", is_flag=True, help="Account affects the result")
@click.option("--dedutivel", is_flag=True, help="Account is deductible")
@click.pass_context
def create_account(
    ctx,
    code: str,
    name: str,
    fiscal_year: int,
    account_type: str,
    reference_id: int,
    nivel: int,
    natureza: str,
    classe: str | None,
    afeta_resultado: bool,
    dedutivel: bool,
):
    """Create an account in the selected company's chart of accounts.

    Examples:
        lalurecf --company 1 account create 1.1.01 Caixa --fiscal-year 2024 \\
            --type ATIVO --reference 1 --nivel 3 --natureza DEVEDORA
    """
    service = ChartOfAccountService(ctx.obj["db"])

    try:
        account_id = service.create_account(
            ctx.obj["context"],
            code=code,
            name=name,
            fiscal_year=fiscal_year,
            account_type=_enum(AccountType, account_type),
            reference_account_id=reference_id,
            nivel=nivel,
            natureza=_enum(NaturezaConta, natureza),
            classe=_enum(ClasseContabil, classe),
            afeta_resultado=afeta_resultado,
            dedutivel=dedutivel,
        )
        click.echo(f"Created account '{code}' (ID: {account_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.option("--fiscal-year", type=int, help="Fiscal year")
@click.option("--type", "account_type", type=ACCOUNT_TYPES, help="Account type")
@click.option("--classe", type=CLASSES, help="ECF accounting class")
@click.option("--natureza", type=NATUREZAS, help="Account nature")
@click.option("--search", help="Text to match in code or name")
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive accounts")
@click.pass_context
def list_accounts(
    ctx,
    fiscal_year: int | None,
    account_type: str | None,
    classe: str | None,
    natureza: str | None,
    search: str | None,
    include_inactive: bool,
):
    """List the selected company's accounts."""
    service = ChartOfAccountService(ctx.obj["db"])

    try:
        accounts = service.list_accounts(
            ctx.obj["context"],
            fiscal_year=fiscal_year,
            account_type=_enum(AccountType, account_type),
            classe=_enum(ClasseContabil, classe),
            natureza=_enum(NaturezaConta, natureza),
            search=search,
            include_inactive=include_inactive,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in accounts:
        marker = "" if acc.is_active else " (inactive)"
        click.echo(
            f"ID: {acc.id:3d} | {acc.fiscal_year} | {acc.code:12s} | {acc.name:30s} "
            f"| {acc.account_type.value}{marker}"
        )


@account_group.command("show")
@click.argument("account")
@click.option("--fiscal-year", type=int, required=True, help="Fiscal year of the account code")
@click.pass_context
def show_account(ctx, account: str, fiscal_year: int):
    """Show an account.

    ACCOUNT can be an account code or ID.
    """
    service = ChartOfAccountService(ctx.obj["db"])
    context = ctx.obj["context"]

    try:
        account_id = resolve_account_or_exit(ctx, service, context, account, fiscal_year)
        _show(service.require_account(context, account_id))
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("update")
@click.argument("account")
@click.option("--fiscal-year", type=int, required=True, help="Fiscal year of the account code")
@click.option("--name", help="New name")
@click.option("--type", "account_type", type=ACCOUNT_TYPES, help="New account type")
@click.option("--reference", "reference_id", type=int, help="New reference account ID")
@click.option("--nivel", type=int, help="New hierarchy level (1-5)")
@click.option("--natureza", type=NATUREZAS, help="New account nature")
@click.option("--classe", type=CLASSES, help="New ECF accounting class")
@click.option("--afeta-resultado/--nao-afeta-resultado", default=None, help="Affects the result")
@click.option("--dedutivel/--nao-dedutivel", default=None, help="Is deductible")
@click.pass_context
def update_account(
    ctx,
    account: str,
    fiscal_year: int,
    name: str | None,
    account_type: str | None,
    reference_id: int | None,
    nivel: int | None,
    natureza: str | None,
    classe: str | None,
    afeta_resultado: bool | None,
    dedutivel: bool | None,
):
    """Update an account.

    ACCOUNT can be an account code or ID. Code and fiscal year cannot change.

    Examples:
        lalurecf --company 1 account update 1.1.01 --fiscal-year 2024 --name "Caixa geral"
    """
    service = ChartOfAccountService(ctx.obj["db"])
    context = ctx.obj["context"]

    try:
        account_id = resolve_account_or_exit(ctx, service, context, account, fiscal_year)
        updated = service.update_account(
            context,
            account_id,
            name=name,
            account_type=_enum(AccountType, account_type),
            reference_account_id=reference_id,
            nivel=nivel,
            natureza=_enum(NaturezaConta, natureza),
            classe=_enum(ClasseContabil, classe),
            afeta_resultado=afeta_resultado,
            dedutivel=dedutivel,
        )
        click.echo(f"Updated account '{updated.code}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("toggle")
@click.argument("account")
@click.option("--fiscal-year", type=int, required=True, help="Fiscal year of the account code")
@click.pass_context
def toggle_account(ctx, account: str, fiscal_year: int):
    """Activate or deactivate an account.

    ACCOUNT can be an account code or ID.
    """
    service = ChartOfAccountService(ctx.obj["db"])
    context = ctx.obj["context"]

    try:
        account_id = resolve_account_or_exit(ctx, service, context, account, fiscal_year)
        updated = service.toggle_status(context, account_id)
        click.echo(f"Account '{updated.code}' is now {updated.status.value}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
