"""CLI helpers for date range resolution."""

from datetime import date

import click

from lalurecf.utils.date_parser import get_date_range, parse_date

PERIODS = ("this-month", "this-year", "last-month", "last-year")


def _parse_or_exit(ctx, value: str, label: str) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label} date: {e}", err=True)
        ctx.exit(1)


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period: str | None = None,
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from a named period or explicit dates.

    Args:
        ctx: Click context, used to exit on bad input
        start_date: Raw --start-date value
        end_date: Raw --end-date value
        period: One of PERIODS, exclusive with explicit dates
        default_range: Range to use when nothing was given

    Returns:
        Inclusive (start, end); either side may be None
    """
    if period and (start_date or end_date):
        click.echo("Error: --period cannot be combined with --start-date or --end-date.", err=True)
        ctx.exit(1)

    if period:
        return get_date_range(period)

    start = _parse_or_exit(ctx, start_date, "start") if start_date else None
    end = _parse_or_exit(ctx, end_date, "end") if end_date else None

    if start is not None and end is not None and end < start:
        click.echo(
            f"Error: End date {end.isoformat()} is before start date {start.isoformat()}.",
            err=True,
        )
        ctx.exit(1)

    if start is None and end is None and default_range is not None:
        return default_range
    return start, end


def period_options(func):
    """Attach --start-date, --end-date and --period to a command."""
    options = [
        click.option("--start-date", help="Start date (YYYY-MM-DD, DD/MM/YYYY or relative like 'this year')"),
        click.option("--end-date", help="End date (YYYY-MM-DD, DD/MM/YYYY or relative like 'today')"),
        click.option("--period", type=click.Choice(PERIODS), help="Named period instead of explicit dates"),
    ]
    for option in reversed(options):
        func = option(func)
    return func
