"""Journal entry (lançamento contábil) commands."""

import click
from lalurecf.cli.account_resolution import resolve_account_or_exit
from lalurecf.cli.date_filters import period_options, resolve_cli_date_range
from lalurecf.cli.error_handling import handle_domain_error
from lalurecf.domain.chart_of_accounts import ChartOfAccountService
from lalurecf.domain.entities import JournalEntry, JournalEntryDraft, JournalEntryFilters, PageRequest
from lalurecf.domain.enums import Status
from lalurecf.domain.errors import DomainError
from lalurecf.domain.journal_entry import JournalEntryService
from lalurecf.utils.amount_parser import format_amount, parse_amount
from lalurecf.utils.date_parser import parse_date


def _parse_date_or_exit(ctx, value: str):
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def _parse_amount_or_exit(ctx, value: str):
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


def _show(entry: JournalEntry) -> None:
    click.echo(f"ID:           {entry.id}")
    click.echo(f"Date:         {entry.data.isoformat()}")
    click.echo(f"Debit:        {entry.debit_account_id}")
    click.echo(f"Credit:       {entry.credit_account_id}")
    click.echo(f"Amount:       {format_amount(entry.amount)}")
    click.echo(f"Description:  {entry.description}")
    click.echo(f"Document:     {entry.document_number or '-'}")
    click.echo(f"Fiscal year:  {entry.fiscal_year}")
    click.echo(f"Status:       {entry.status.value}")


@click.group()
def entry_group():
    """Manage journal entries."""
    pass


@entry_group.command("create")
@click.option("--debit", required=True, help="Debit account code or ID")
@click.option("--credit", required=True, help="Credit account code or ID")
@click.option("--date", "entry_date", required=True, help="Entry date (YYYY-MM-DD or DD/MM/YYYY)")
@click.option("--amount", required=True, help="Amount (e.g., 1234.56 or 1.234,56)")
@click.option("--description", required=True, help="Description (histórico)")
@click.option("--fiscal-year", type=int, required=True, help="Fiscal year")
@click.option("--document", help="Document number")
@click.pass_context
def create_entry(
    ctx,
    debit: str,
    credit: str,
    entry_date: str,
    amount: str,
    description: str,
    fiscal_year: int,
    document: str | None,
):
    """Create a journal entry.

    Examples:
        lalurecf --company 1 entry create --debit 1.1.01 --credit 2.1.01 \\
            --date 2024-03-01 --amount 100,00 --description "Pagamento" --fiscal-year 2024
    """
    db = ctx.obj["db"]
    context = ctx.obj["context"]
    account_service = ChartOfAccountService(db)
    service = JournalEntryService(db)

    draft = JournalEntryDraft(
        data=_parse_date_or_exit(ctx, entry_date),
        debit_account_id=resolve_account_or_exit(ctx, account_service, context, debit, fiscal_year),
        credit_account_id=resolve_account_or_exit(ctx, account_service, context, credit, fiscal_year),
        amount=_parse_amount_or_exit(ctx, amount),
        description=description,
        fiscal_year=fiscal_year,
        document_number=document,
    )

    try:
        entry = service.create_entry(context, draft)
        click.echo(f"Created journal entry {entry.id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@entry_group.command("update")
@click.argument("entry_id", type=int)
@click.option("--debit", help="Debit account code or ID")
@click.option("--credit", help="Credit account code or ID")
@click.option("--date", "entry_date", help="Entry date (YYYY-MM-DD or DD/MM/YYYY)")
@click.option("--amount", help="Amount (e.g., 1234.56 or 1.234,56)")
@click.option("--description", help="Description (histórico)")
@click.option("--fiscal-year", type=int, help="Fiscal year")
@click.option("--document", help="Document number")
@click.pass_context
def update_entry(
    ctx,
    entry_id: int,
    debit: str | None,
    credit: str | None,
    entry_date: str | None,
    amount: str | None,
    description: str | None,
    fiscal_year: int | None,
    document: str | None,
):
    """Update a journal entry.

    Updates only the fields that are provided; the rest keep their values.

    Examples:
        lalurecf --company 1 entry update 7 --amount 150,00
    """
    db = ctx.obj["db"]
    context = ctx.obj["context"]
    account_service = ChartOfAccountService(db)
    service = JournalEntryService(db)

    try:
        existing = service.get_entry(context, entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    year = fiscal_year if fiscal_year is not None else existing.fiscal_year
    draft = JournalEntryDraft(
        data=_parse_date_or_exit(ctx, entry_date) if entry_date else existing.data,
        debit_account_id=(
            resolve_account_or_exit(ctx, account_service, context, debit, year)
            if debit
            else existing.debit_account_id
        ),
        credit_account_id=(
            resolve_account_or_exit(ctx, account_service, context, credit, year)
            if credit
            else existing.credit_account_id
        ),
        amount=_parse_amount_or_exit(ctx, amount) if amount else existing.amount,
        description=description if description is not None else existing.description,
        fiscal_year=year,
        document_number=document if document is not None else existing.document_number,
    )

    try:
        service.update_entry(context, entry_id, draft)
        click.echo(f"Updated journal entry {entry_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@entry_group.command("toggle")
@click.argument("entry_id", type=int)
@click.pass_context
def toggle_entry(ctx, entry_id: int):
    """Activate or deactivate a journal entry."""
    service = JournalEntryService(ctx.obj["db"])

    try:
        entry = service.toggle_entry_status(ctx.obj["context"], entry_id)
        click.echo(f"Journal entry {entry_id} is now {entry.status.value}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@entry_group.command("show")
@click.argument("entry_id", type=int)
@click.pass_context
def show_entry(ctx, entry_id: int):
    """Show a journal entry."""
    service = JournalEntryService(ctx.obj["db"])

    try:
        _show(service.get_entry(ctx.obj["context"], entry_id))
    except DomainError as e:
        handle_domain_error(ctx, e)


@entry_group.command("list")
@click.option("--fiscal-year", type=int, help="Fiscal year")
@click.option("--debit", "debit_id", type=int, help="Debit account ID")
@click.option("--credit", "credit_id", type=int, help="Credit account ID")
@click.option("--date", "entry_date", help="Exact entry date")
@period_options
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive entries")
@click.option("--page", type=int, default=0, show_default=True, help="Page number (from 0)")
@click.option("--size", type=int, default=20, show_default=True, help="Entries per page")
@click.pass_context
def list_entries(
    ctx,
    fiscal_year: int | None,
    debit_id: int | None,
    credit_id: int | None,
    entry_date: str | None,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
    include_inactive: bool,
    page: int,
    size: int,
):
    """List journal entries ordered by date.

    Examples:
        lalurecf --company 1 entry list --fiscal-year 2024
        lalurecf --company 1 entry list --start-date 2024-01-01 --end-date 2024-03-31 --all
    """
    service = JournalEntryService(ctx.obj["db"])

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period=period,
    )

    try:
        page_request = PageRequest(page=page, size=size)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    filters = JournalEntryFilters(
        debit_account_id=debit_id,
        credit_account_id=credit_id,
        data=_parse_date_or_exit(ctx, entry_date) if entry_date else None,
        start_date=start,
        end_date=end,
        fiscal_year=fiscal_year,
        include_inactive=include_inactive,
    )

    try:
        result = service.list_entries(ctx.obj["context"], filters, page_request)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not result.items:
        click.echo("No journal entries found.")
        return

    click.echo(f"\nJournal entries (page {result.page + 1} of {result.total_pages}, {result.total} total):")
    click.echo("-" * 90)
    for e in result.items:
        marker = "" if e.status is Status.ACTIVE else " (inactive)"
        click.echo(
            f"ID: {e.id:4d} | {e.data.isoformat()} | D {e.debit_account_id:4d} | "
            f"C {e.credit_account_id:4d} | {format_amount(e.amount):>14s} | {e.description}{marker}"
        )


def register_commands(cli):
    """Register journal entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
