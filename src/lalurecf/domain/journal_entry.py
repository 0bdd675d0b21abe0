"""Journal entry (lançamento contábil) domain service."""

import logging
from typing import Optional

from lalurecf.database.base import Database
from lalurecf.domain.entities import (
    ChartOfAccount,
    CompanyContext,
    JournalEntry,
    JournalEntryDraft,
    JournalEntryFilters,
    Page,
    PageRequest,
)
from lalurecf.domain.errors import NotFoundError
from lalurecf.domain.period import PeriodEnforcer, enforce_periodo_contabil
from lalurecf.domain.validation import JournalEntryValidator, check_required_fields

logger = logging.getLogger(__name__)


class JournalEntryService:
    """Service for managing journal entries.

    Every mutation runs in a single unit of work: the Período Contábil check,
    validation and the write either all happen or none do.
    """

    def __init__(self, db: Database, validator: Optional[JournalEntryValidator] = None):
        """Initialize journal entry service.

        Args:
            db: Database instance
            validator: Validator to use; defaults to JournalEntryValidator
        """
        self.db = db
        self.validator = validator or JournalEntryValidator()
        self.period_enforcer = PeriodEnforcer(db)

    def create_entry(self, context: CompanyContext, draft: JournalEntryDraft) -> JournalEntry:
        """Create an ACTIVE journal entry.

        Args:
            context: Company and user performing the operation
            draft: Entry fields

        Returns:
            The stored entry

        Raises:
            RequiredFieldError: If a mandatory field is missing
            PeriodLockViolation: If the entry date is before the Período Contábil
            ValidationError: If the entry fails validation
        """
        check_required_fields(draft)
        with self.db.unit_of_work():
            entry_id = self._insert_entry(context, draft)
        entry = self.db.get_journal_entry(entry_id)

        logger.info(
            "Created journal entry %s for company %s (%s, %s)",
            entry.id,
            entry.company_id,
            entry.data,
            entry.amount,
        )
        return entry

    def update_entry(
        self, context: CompanyContext, entry_id: int, draft: JournalEntryDraft
    ) -> JournalEntry:
        """Replace the editable fields of an entry.

        Both the stored date and the new date must be open for writing, so an
        entry can neither be edited inside the locked period nor moved into it.

        Args:
            context: Company and user performing the operation
            entry_id: Entry to update
            draft: New field values

        Returns:
            The updated entry

        Raises:
            NotFoundError: If the entry does not exist for this company
            PeriodLockViolation: If either date is before the Período Contábil
            ValidationError: If the new values fail validation
        """
        check_required_fields(draft)
        with self.db.unit_of_work():
            existing = self._load(context, entry_id)
            self._replace_entry(context, existing, draft)
        entry = self.db.get_journal_entry(entry_id)

        logger.info("Updated journal entry %s for company %s", entry.id, entry.company_id)
        return entry

    def toggle_entry_status(self, context: CompanyContext, entry_id: int) -> JournalEntry:
        """Flip an entry between ACTIVE and INACTIVE.

        Args:
            context: Company and user performing the operation
            entry_id: Entry to toggle

        Returns:
            The entry with its new status

        Raises:
            NotFoundError: If the entry does not exist for this company
            PeriodLockViolation: If the entry date is before the Período Contábil
        """
        with self.db.unit_of_work():
            existing = self._load(context, entry_id)
            self._flip_status(context, existing)
        entry = self.db.get_journal_entry(entry_id)

        logger.info(
            "Journal entry %s status changed %s -> %s",
            entry.id,
            existing.status.value,
            entry.status.value,
        )
        return entry

    def verify_entry(self, context: CompanyContext, draft: JournalEntryDraft) -> None:
        """Run every check create_entry would run, without writing anything.

        Raises:
            Same errors as create_entry
        """
        check_required_fields(draft)
        self._check_draft(context, draft)

    def get_entry(self, context: CompanyContext, entry_id: int) -> JournalEntry:
        """Get an entry by ID.

        Raises:
            MissingContextError: If the context has no company
            NotFoundError: If the entry does not exist for this company
        """
        context.require_company_id()
        return self._load(context, entry_id)

    def list_entries(
        self,
        context: CompanyContext,
        filters: Optional[JournalEntryFilters] = None,
        page_request: Optional[PageRequest] = None,
    ) -> Page[JournalEntry]:
        """List the company's entries ordered by date, then ID.

        Args:
            context: Company whose entries are listed
            filters: Optional filters; INACTIVE entries are excluded by default
            page_request: Optional page; all matching entries when omitted

        Returns:
            Page of entries
        """
        company_id = context.require_company_id()
        return self.db.list_journal_entries(
            company_id, filters or JournalEntryFilters(), page_request
        )

    @enforce_periodo_contabil("draft")
    def _insert_entry(self, context: CompanyContext, draft: JournalEntryDraft) -> int:
        company_id = context.require_company_id()
        self._validate(company_id, draft)
        return self.db.create_journal_entry(
            company_id=company_id,
            data=draft.data,
            debit_account_id=draft.debit_account_id,
            credit_account_id=draft.credit_account_id,
            amount=draft.amount,
            description=draft.description.strip(),
            fiscal_year=draft.fiscal_year,
            document_number=draft.document_number,
        )

    @enforce_periodo_contabil("existing", "draft")
    def _replace_entry(
        self, context: CompanyContext, existing: JournalEntry, draft: JournalEntryDraft
    ) -> None:
        company_id = context.require_company_id()
        self._validate(company_id, draft)
        self.db.update_journal_entry(
            entry_id=existing.id,
            data=draft.data,
            debit_account_id=draft.debit_account_id,
            credit_account_id=draft.credit_account_id,
            amount=draft.amount,
            description=draft.description.strip(),
            fiscal_year=draft.fiscal_year,
            document_number=draft.document_number,
        )

    @enforce_periodo_contabil("existing")
    def _flip_status(self, context: CompanyContext, existing: JournalEntry) -> None:
        context.require_company_id()
        self.db.update_journal_entry_status(existing.id, existing.status.toggled())

    @enforce_periodo_contabil("draft")
    def _check_draft(self, context: CompanyContext, draft: JournalEntryDraft) -> None:
        company_id = context.require_company_id()
        self._validate(company_id, draft)

    def _load(self, context: CompanyContext, entry_id: int) -> JournalEntry:
        entry = self.db.get_journal_entry(entry_id)
        # Another company's entry is reported exactly like a missing one
        if entry is None or (
            context.company_id is not None and entry.company_id != context.company_id
        ):
            raise NotFoundError("Journal entry", entry_id)
        return entry

    def _validate(self, company_id: int, draft: JournalEntryDraft) -> None:
        debit_account = self._resolve_account(company_id, draft.debit_account_id)
        credit_account = self._resolve_account(company_id, draft.credit_account_id)
        self.validator.validate(draft, debit_account, credit_account).raise_for_error()

    def _resolve_account(self, company_id: int, account_id: int) -> Optional[ChartOfAccount]:
        account = self.db.get_chart_account(account_id)
        if account is None or account.company_id != company_id:
            return None
        return account
