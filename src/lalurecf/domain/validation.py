"""Double-entry validation for journal entries."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol

from lalurecf.domain.entities import ChartOfAccount, JournalEntryDraft
from lalurecf.domain.enums import Status
from lalurecf.domain.errors import (
    AccountNotFoundError,
    FiscalYearMismatchError,
    InactiveAccountError,
    InvalidAmountError,
    RequiredFieldError,
    SameAccountError,
    ValidationError,
)

MIN_FISCAL_YEAR = 2000
MIN_AMOUNT = Decimal("0.01")


def is_storable_amount(amount: Decimal) -> bool:
    """Return True for finite amounts of at least 0.01 with no more than two decimals."""
    amount = Decimal(amount)
    if not amount.is_finite() or amount < MIN_AMOUNT:
        return False
    return amount.normalize().as_tuple().exponent >= -2


class Posting(Protocol):
    """Fields of an entry the validator looks at."""

    debit_account_id: int
    credit_account_id: int
    amount: Decimal
    fiscal_year: int


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one entry; carries the first failure, if any."""

    error: Optional[ValidationError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


class JournalEntryValidator:
    """Checks an entry against the two accounts it posts to.

    Checks run in a fixed order and stop at the first failure. Nothing here
    reads or writes storage; callers resolve the accounts first and pass
    None for any that do not exist.
    """

    def validate(
        self,
        entry: Posting,
        debit_account: Optional[ChartOfAccount],
        credit_account: Optional[ChartOfAccount],
    ) -> ValidationResult:
        """Validate an entry.

        Args:
            entry: Entry or draft being written
            debit_account: Resolved debit account, or None if not found
            credit_account: Resolved credit account, or None if not found

        Returns:
            ValidationResult with the first error found, or a valid result
        """
        if entry.debit_account_id == entry.credit_account_id:
            return ValidationResult(SameAccountError(entry.debit_account_id))

        if not is_storable_amount(entry.amount):
            return ValidationResult(InvalidAmountError(entry.amount))

        if debit_account is None:
            return ValidationResult(AccountNotFoundError(entry.debit_account_id))
        if credit_account is None:
            return ValidationResult(AccountNotFoundError(entry.credit_account_id))

        for account in (debit_account, credit_account):
            if account.status is not Status.ACTIVE:
                return ValidationResult(InactiveAccountError(account.id))

        for account in (debit_account, credit_account):
            if account.fiscal_year != entry.fiscal_year:
                return ValidationResult(
                    FiscalYearMismatchError(account.id, account.fiscal_year, entry.fiscal_year)
                )

        return ValidationResult()


def check_required_fields(draft: JournalEntryDraft) -> None:
    """Raise RequiredFieldError if a mandatory draft field is missing.

    Raises:
        RequiredFieldError: On the first missing or out-of-range field
    """
    if draft.debit_account_id is None:
        raise RequiredFieldError("Debit account is required")
    if draft.credit_account_id is None:
        raise RequiredFieldError("Credit account is required")
    if draft.data is None:
        raise RequiredFieldError("Date is required")
    if draft.amount is None:
        raise RequiredFieldError("Amount is required")
    if draft.description is None or not draft.description.strip():
        raise RequiredFieldError("Description is required")
    if draft.fiscal_year is None:
        raise RequiredFieldError("Fiscal year is required")
    if draft.fiscal_year < MIN_FISCAL_YEAR:
        raise RequiredFieldError(f"Fiscal year must be >= {MIN_FISCAL_YEAR}")
