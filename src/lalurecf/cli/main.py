"""Main CLI entry point."""

import click
from lalurecf.database.factories import create_database
from lalurecf.domain.entities import CompanyContext
from lalurecf.logging_config import configure_logging, parse_log_level

# Import and register all commands at module level
from lalurecf.cli.commands import (
    account,
    company,
    entry,
    export_cmd,
    import_cmd,
    reference,
)


def _validate_log_level(ctx, param, value):
    try:
        return parse_log_level(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LALURECF_DB_PATH environment variable)",
    envvar="LALURECF_DB_PATH",
)
@click.option(
    "--company",
    "company_id",
    type=int,
    help="Company ID to work on (overrides LALURECF_COMPANY_ID environment variable)",
    envvar="LALURECF_COMPANY_ID",
)
@click.option(
    "--user",
    help="User recorded in audit trails (overrides LALURECF_USER environment variable)",
    envvar="LALURECF_USER",
)
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    callback=_validate_log_level,
    help="Logging level (overrides LALURECF_LOG_LEVEL environment variable)",
    envvar="LALURECF_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, company_id: int | None, user: str | None, log_level: int):
    """lalurecf - ECF accounting bookkeeping.

    Keep a company's chart of accounts and journal entries, with entries
    before the company's Período Contábil locked against changes.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        configure_logging(level=log_level)
        db = create_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db
        ctx.obj["context"] = CompanyContext(company_id=company_id, user=user)


# Register all commands
company.register_commands(cli)
reference.register_commands(cli)
account.register_commands(cli)
entry.register_commands(cli)
import_cmd.register_commands(cli)
export_cmd.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
