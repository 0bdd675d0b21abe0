"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from lalurecf.domain.entities import (
    ChartOfAccount,
    Company,
    JournalEntry,
    JournalEntryFilters,
    Page,
    PageRequest,
    PeriodoContabilAudit,
    ReferenceAccount,
)
from lalurecf.domain.enums import (
    AccountType,
    ClasseContabil,
    NaturezaConta,
    Status,
)


class Database(ABC):
    """Abstract database interface for lalurecf."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def unit_of_work(self) -> AbstractContextManager[None]:
        """Group writes into one atomic commit.

        Writes issued inside the block are flushed but only committed when
        the outermost block exits cleanly; any exception rolls everything
        back.
        """
        pass

    # Company operations
    @abstractmethod
    def create_company(
        self, cnpj: str, razao_social: str, periodo_contabil: Optional[date] = None
    ) -> int:
        """Create a company. Returns company ID."""
        pass

    @abstractmethod
    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID, always re-reading the stored row."""
        pass

    @abstractmethod
    def get_company_by_cnpj(self, cnpj: str) -> Optional[Company]:
        """Get company by CNPJ."""
        pass

    @abstractmethod
    def list_companies(self) -> list[Company]:
        """List all companies."""
        pass

    @abstractmethod
    def update_company_periodo_contabil(self, company_id: int, periodo_contabil: date) -> None:
        """Set the company's Período Contábil."""
        pass

    @abstractmethod
    def create_periodo_contabil_audit(
        self,
        company_id: int,
        periodo_anterior: Optional[date],
        periodo_novo: date,
        changed_by: Optional[str],
    ) -> int:
        """Append an audit row for a Período Contábil change. Returns audit ID."""
        pass

    @abstractmethod
    def list_periodo_contabil_audit(self, company_id: int) -> list[PeriodoContabilAudit]:
        """List audit rows for a company, newest first."""
        pass

    # Reference account operations
    @abstractmethod
    def create_reference_account(
        self, codigo_rfb: str, descricao: str, ano_validade: Optional[int] = None
    ) -> int:
        """Create a reference account. Returns reference account ID."""
        pass

    @abstractmethod
    def get_reference_account(self, reference_account_id: int) -> Optional[ReferenceAccount]:
        """Get reference account by ID."""
        pass

    @abstractmethod
    def find_reference_account(
        self, codigo_rfb: str, ano_validade: Optional[int] = None
    ) -> Optional[ReferenceAccount]:
        """Find reference account by RFB code and validity year."""
        pass

    @abstractmethod
    def list_reference_accounts(self, include_inactive: bool = False) -> list[ReferenceAccount]:
        """List reference accounts ordered by RFB code."""
        pass

    # Chart of accounts operations
    @abstractmethod
    def create_chart_account(
        self,
        company_id: int,
        code: str,
        name: str,
        fiscal_year: int,
        account_type: AccountType,
        reference_account_id: int,
        nivel: int,
        natureza: NaturezaConta,
        classe: Optional[ClasseContabil] = None,
        afeta_resultado: bool = False,
        dedutivel: bool = False,
    ) -> int:
        """Create a chart-of-accounts row. Returns account ID."""
        pass

    @abstractmethod
    def get_chart_account(self, account_id: int) -> Optional[ChartOfAccount]:
        """Get chart-of-accounts row by ID."""
        pass

    @abstractmethod
    def find_chart_account_by_code(
        self, company_id: int, code: str, fiscal_year: int
    ) -> Optional[ChartOfAccount]:
        """Find a company's account by code within a fiscal year."""
        pass

    @abstractmethod
    def list_chart_accounts(
        self,
        company_id: int,
        fiscal_year: Optional[int] = None,
        account_type: Optional[AccountType] = None,
        classe: Optional[ClasseContabil] = None,
        natureza: Optional[NaturezaConta] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> list[ChartOfAccount]:
        """List a company's accounts with optional filters.

        Args:
            search: Case-insensitive substring matched against code or name
        """
        pass

    @abstractmethod
    def update_chart_account(
        self,
        account_id: int,
        name: str,
        account_type: AccountType,
        reference_account_id: int,
        nivel: int,
        natureza: NaturezaConta,
        classe: Optional[ClasseContabil],
        afeta_resultado: bool,
        dedutivel: bool,
    ) -> None:
        """Replace the mutable fields of an account (code and fiscal year never change)."""
        pass

    @abstractmethod
    def update_chart_account_status(self, account_id: int, status: Status) -> None:
        """Set account status."""
        pass

    # Journal entry operations
    @abstractmethod
    def create_journal_entry(
        self,
        company_id: int,
        data: date,
        debit_account_id: int,
        credit_account_id: int,
        amount: Decimal,
        description: str,
        fiscal_year: int,
        document_number: Optional[str] = None,
    ) -> int:
        """Create an ACTIVE journal entry. Returns entry ID."""
        pass

    @abstractmethod
    def get_journal_entry(self, entry_id: int) -> Optional[JournalEntry]:
        """Get journal entry by ID."""
        pass

    @abstractmethod
    def update_journal_entry(
        self,
        entry_id: int,
        data: date,
        debit_account_id: int,
        credit_account_id: int,
        amount: Decimal,
        description: str,
        fiscal_year: int,
        document_number: Optional[str] = None,
    ) -> None:
        """Replace the editable fields of a journal entry."""
        pass

    @abstractmethod
    def update_journal_entry_status(self, entry_id: int, status: Status) -> None:
        """Set journal entry status."""
        pass

    @abstractmethod
    def list_journal_entries(
        self,
        company_id: int,
        filters: JournalEntryFilters,
        page_request: Optional[PageRequest] = None,
    ) -> Page[JournalEntry]:
        """List a company's journal entries ordered by date, then ID.

        When page_request is None every matching entry is returned in a
        single page.
        """
        pass
