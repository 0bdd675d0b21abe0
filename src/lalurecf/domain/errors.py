"""Shared domain error messages and error types."""

from datetime import date
from typing import Optional


class DomainError(ValueError):
    """Base class for user-correctable domain errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    kind = "VALIDATION"


class SameAccountError(ValidationError):
    """Debit and credit accounts are the same."""

    kind = "SAME_ACCOUNT"

    def __init__(self, account_id: int):
        super().__init__(
            f"Debit and credit accounts must be different (both are {account_id})"
        )
        self.account_id = account_id


class InvalidAmountError(ValidationError):
    """Entry amount is not positive or does not fit two decimal places."""

    kind = "INVALID_AMOUNT"

    def __init__(self, amount):
        super().__init__(
            f"Amount must be greater than zero with at most 2 decimal places, got {amount}"
        )
        self.amount = amount


class AccountNotFoundError(ValidationError):
    """A referenced chart-of-accounts row does not exist."""

    kind = "ACCOUNT_NOT_FOUND"

    def __init__(self, account_id: int):
        super().__init__(account_not_found(account_id))
        self.account_id = account_id


class InactiveAccountError(ValidationError):
    """A referenced chart-of-accounts row is INACTIVE."""

    kind = "INACTIVE_ACCOUNT"

    def __init__(self, account_id: int):
        super().__init__(f"Account {account_id} is inactive")
        self.account_id = account_id


class FiscalYearMismatchError(ValidationError):
    """A referenced account belongs to another fiscal year."""

    kind = "FISCAL_YEAR_MISMATCH"

    def __init__(self, account_id: int, account_fiscal_year: int, entry_fiscal_year: int):
        super().__init__(
            f"Account {account_id} belongs to fiscal year {account_fiscal_year}, "
            f"entry fiscal year is {entry_fiscal_year}"
        )
        self.account_id = account_id
        self.account_fiscal_year = account_fiscal_year
        self.entry_fiscal_year = entry_fiscal_year


class RequiredFieldError(ValidationError):
    """A mandatory field is missing or blank."""

    kind = "REQUIRED_FIELD"


class MissingContextError(ValidationError):
    """A tenant-scoped operation was called without a company."""

    kind = "MISSING_CONTEXT"

    def __init__(self):
        super().__init__("Company context is required")


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""

    def __init__(self, entity_kind: str, entity_id):
        super().__init__(f"{entity_kind} {entity_id} not found")
        self.entity_kind = entity_kind
        self.entity_id = entity_id


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class PeriodLockViolation(DomainError):
    """Mutation targets a competência before the company's Período Contábil."""

    def __init__(self, competencia: date, periodo_contabil: date):
        super().__init__(period_locked(competencia, periodo_contabil))
        self.competencia = competencia
        self.periodo_contabil = periodo_contabil


class IllegalStateError(RuntimeError):
    """Stored data is inconsistent; not something the user can fix."""


def account_not_found(account_id: int) -> str:
    """Return message for missing chart-of-accounts row."""
    return f"Account {account_id} not found"


def period_locked(competencia: date, periodo_contabil: date) -> str:
    """Return message for a competência inside the locked period."""
    return (
        f"Cannot modify data with competência {competencia.isoformat()} "
        f"before Período Contábil {periodo_contabil.isoformat()}"
    )


def company_not_found_for_context(company_id: int) -> str:
    """Return message when the context names a company that is not stored."""
    return f"Company {company_id} referenced by the current context does not exist"


def duplicate_account_code(code: str, company_id: int, fiscal_year: int) -> str:
    """Return message for duplicate chart-of-accounts code."""
    return (
        f"Account with code '{code}' already exists for company {company_id} "
        f"and fiscal year {fiscal_year}"
    )


def duplicate_reference_account(codigo_rfb: str, ano_validade: Optional[int]) -> str:
    """Return message for duplicate reference account."""
    if ano_validade is None:
        return f"Reference account '{codigo_rfb}' already exists"
    return f"Reference account '{codigo_rfb}' already exists for year {ano_validade}"
