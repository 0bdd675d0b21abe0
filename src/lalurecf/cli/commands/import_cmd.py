"""CSV import command."""

import click
from lalurecf.cli.error_handling import handle_domain_error
from lalurecf.domain.csv_import import JournalEntryImportService
from lalurecf.domain.errors import DomainError


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True))
@click.option("--fiscal-year", type=int, required=True, help="Fiscal year of the entries")
@click.option("--dry-run", is_flag=True, help="Check the file without importing anything")
@click.pass_context
def import_csv(ctx, csv_file: str, fiscal_year: int, dry_run: bool):
    """Import journal entries from a CSV file.

    Columns: debit code; credit code; date; amount; description; document.
    The first line is treated as a header.
    """
    service = JournalEntryImportService(ctx.obj["db"])

    try:
        result = service.import_csv(
            ctx.obj["context"], csv_file, fiscal_year=fiscal_year, dry_run=dry_run
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo("\nDry run complete:" if dry_run else "\nImport complete:")
    click.echo(f"  Lines: {result['total']}")
    click.echo(f"  {'Importable' if dry_run else 'Imported'}: {result['imported']} entries")
    click.echo(f"  Skipped: {result['skipped']}")
    if result["errors"]:
        click.echo(f"  Errors: {len(result['errors'])}")
        for error in result["errors"]:
            click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
