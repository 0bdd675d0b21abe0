"""Período Contábil enforcement.

A company's Período Contábil is the earliest competência date that may still
be written. ``is_permitted`` is the pure check; ``PeriodEnforcer`` applies it
against the company's current period, and ``enforce_periodo_contabil``
declares which service operations run that admission check before their body
executes.

Decorated operations must take an explicit ``context`` argument and live on
an object exposing ``period_enforcer``. The decorator names the arguments
carrying competência dates; each may be a ``date``, a ``TemporalEntity`` or
None (skipped).
"""

import functools
import inspect
import logging
from datetime import date
from typing import Any, Callable, Optional, TypeVar

from lalurecf.database.base import Database
from lalurecf.domain.entities import CompanyContext, TemporalEntity
from lalurecf.domain.errors import (
    IllegalStateError,
    PeriodLockViolation,
    company_not_found_for_context,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Qualified name of every guarded operation -> the arguments it checks
GUARDED_OPERATIONS: dict[str, tuple[str, ...]] = {}


def is_permitted(competencia: date, periodo_contabil: Optional[date]) -> bool:
    """Return True if data with this competência may be modified.

    The boundary is inclusive. A company without a Período Contábil has no
    lock at all.
    """
    if periodo_contabil is None:
        return True
    return competencia >= periodo_contabil


def competencia_of(value: Any) -> Optional[date]:
    """Extract the competência date from a date or a TemporalEntity."""
    if value is None:
        return None
    if isinstance(value, date):
        return value
    if isinstance(value, TemporalEntity):
        return value.competencia
    raise TypeError(f"{type(value).__name__} does not carry a competência date")


class PeriodEnforcer:
    """Checks competência dates against a company's current Período Contábil."""

    def __init__(self, db: Database):
        """Initialize period enforcer.

        Args:
            db: Database instance
        """
        self.db = db

    def enforce(self, context: CompanyContext, *competencias: Optional[date]) -> None:
        """Reject the operation if any competência falls in the locked period.

        Args:
            context: Company and user performing the operation
            competencias: Dates to check; None values are ignored

        Raises:
            IllegalStateError: If the context names a company that does not exist
            PeriodLockViolation: On the first competência before the period
        """
        if context.company_id is None:
            logger.warning(
                "No company in context; Período Contábil enforcement skipped"
            )
            return

        # Always re-read: another request may have moved the period
        company = self.db.get_company(context.company_id)
        if company is None:
            message = company_not_found_for_context(context.company_id)
            logger.error(message)
            raise IllegalStateError(message)

        periodo_contabil = company.periodo_contabil
        for competencia in competencias:
            if competencia is None:
                continue
            if not is_permitted(competencia, periodo_contabil):
                logger.warning(
                    "Período Contábil violation for company %s: competência %s before %s",
                    company.id,
                    competencia,
                    periodo_contabil,
                )
                raise PeriodLockViolation(competencia, periodo_contabil)
            logger.debug(
                "Competência %s permitted for company %s (período %s)",
                competencia,
                company.id,
                periodo_contabil,
            )


def enforce_periodo_contabil(*params: str) -> Callable[[F], F]:
    """Run the Período Contábil check before the decorated operation.

    Args:
        params: Names of the arguments carrying competência dates

    Example:
        @enforce_periodo_contabil("existing", "draft")
        def _replace_entry(self, context, existing, draft): ...
    """
    if not params:
        raise TypeError("enforce_periodo_contabil needs at least one argument name")

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        missing = [name for name in ("context", *params) if name not in signature.parameters]
        if missing:
            raise TypeError(
                f"{func.__qualname__} has no argument(s) named {', '.join(missing)}"
            )

        GUARDED_OPERATIONS[func.__qualname__] = params

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            competencias = [competencia_of(bound.arguments[name]) for name in params]
            self.period_enforcer.enforce(bound.arguments["context"], *competencias)
            return func(self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
