"""Domain model entities for lalurecf.

These are pure data classes representing business concepts, independent of
database schema. Persistence adapters map ORM rows into these objects, so the
services never touch SQLAlchemy models directly.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

from lalurecf.domain.enums import (
    AccountType,
    ClasseContabil,
    NaturezaConta,
    Status,
)
from lalurecf.domain.errors import MissingContextError

T = TypeVar("T")


@runtime_checkable
class TemporalEntity(Protocol):
    """Anything anchored to a competência date subject to the period lock."""

    @property
    def competencia(self) -> date: ...


@dataclass(frozen=True)
class CompanyContext:
    """Tenant scope and acting user for a single request.

    Passed explicitly to every service call that reads or writes
    company-owned data.
    """

    company_id: Optional[int]
    user: Optional[str] = None

    def require_company_id(self) -> int:
        """Return the company ID, or raise MissingContextError if unset."""
        if self.company_id is None:
            raise MissingContextError()
        return self.company_id


@dataclass(frozen=True)
class Company:
    """Company (empresa) domain entity."""

    id: int
    cnpj: str
    razao_social: str
    periodo_contabil: Optional[date]
    status: Status
    created_at: datetime
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class PeriodoContabilAudit:
    """One change of a company's Período Contábil."""

    id: int
    company_id: int
    periodo_anterior: Optional[date]
    periodo_novo: date
    changed_by: Optional[str]
    changed_at: datetime


@dataclass(frozen=True)
class ReferenceAccount:
    """RFB regulatory reference account (Conta Referencial)."""

    id: int
    codigo_rfb: str
    descricao: str
    ano_validade: Optional[int]
    status: Status
    created_at: datetime


@dataclass(frozen=True)
class ChartOfAccount:
    """Chart-of-accounts row for one company and fiscal year."""

    id: int
    company_id: int
    code: str
    name: str
    fiscal_year: int
    account_type: AccountType
    reference_account_id: int
    classe: Optional[ClasseContabil]
    nivel: int
    natureza: NaturezaConta
    afeta_resultado: bool
    dedutivel: bool
    status: Status
    created_at: datetime
    updated_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status is Status.ACTIVE


@dataclass(frozen=True)
class JournalEntry:
    """Double-entry journal entry (lançamento contábil)."""

    id: int
    company_id: int
    data: date
    debit_account_id: int
    credit_account_id: int
    amount: Decimal
    description: str
    fiscal_year: int
    status: Status
    document_number: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def competencia(self) -> date:
        """The entry date doubles as its competência."""
        return self.data


@dataclass(frozen=True)
class JournalEntryDraft:
    """Caller-supplied fields for creating or replacing a journal entry."""

    data: date
    debit_account_id: int
    credit_account_id: int
    amount: Decimal
    description: str
    fiscal_year: int
    document_number: Optional[str] = None

    @property
    def competencia(self) -> date:
        return self.data


@dataclass(frozen=True)
class JournalEntryFilters:
    """Read-side filters for listing journal entries."""

    debit_account_id: Optional[int] = None
    credit_account_id: Optional[int] = None
    data: Optional[date] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    fiscal_year: Optional[int] = None
    include_inactive: bool = False


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number and page size."""

    page: int = 0
    size: int = 20

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("page must be >= 0")
        if self.size < 1:
            raise ValueError("size must be >= 1")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total number of matching rows."""

    items: list[T]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return (self.total + self.size - 1) // self.size
