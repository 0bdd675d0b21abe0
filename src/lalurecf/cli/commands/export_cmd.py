"""CSV export command."""

import click
from lalurecf.cli.error_handling import handle_domain_error
from lalurecf.domain.csv_export import JournalEntryExportService
from lalurecf.domain.errors import DomainError
from lalurecf.utils.date_parser import parse_date


@click.command("export")
@click.option("--fiscal-year", type=int, required=True, help="Fiscal year to export")
@click.option("--start-date", help="First date (YYYY-MM-DD); requires --end-date")
@click.option("--end-date", help="Last date (YYYY-MM-DD)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write to file instead of stdout")
@click.pass_context
def export_csv(ctx, fiscal_year: int, start_date: str | None, end_date: str | None, output: str | None):
    """Export active journal entries as semicolon-separated CSV."""
    service = JournalEntryExportService(ctx.obj["db"])

    try:
        start = parse_date(start_date) if start_date else None
        end = parse_date(end_date) if end_date else None
        content = service.export_csv(ctx.obj["context"], fiscal_year, start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    if output is None:
        click.echo(content, nl=False)
        return

    with open(output, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    click.echo(f"Exported fiscal year {fiscal_year} to {output}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_csv)
