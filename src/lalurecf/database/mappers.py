"""Mapper functions to convert between domain models and SQLAlchemy models.

Enum-valued columns are stored as plain strings; this layer turns them back
into the domain enums.
"""

from lalurecf.domain import entities as domain
from lalurecf.domain.enums import AccountType, ClasseContabil, NaturezaConta, Status
from lalurecf.database.models import (
    ChartOfAccount as ORMChartOfAccount,
    Company as ORMCompany,
    JournalEntry as ORMJournalEntry,
    PeriodoContabilAudit as ORMPeriodoContabilAudit,
    ReferenceAccount as ORMReferenceAccount,
)


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        cnpj=orm_company.cnpj,
        razao_social=orm_company.razao_social,
        periodo_contabil=orm_company.periodo_contabil,
        status=Status(orm_company.status),
        created_at=orm_company.created_at,
        updated_at=orm_company.updated_at,
    )


def periodo_audit_to_domain(orm_audit: ORMPeriodoContabilAudit) -> domain.PeriodoContabilAudit:
    """Convert SQLAlchemy audit row to domain PeriodoContabilAudit entity."""
    return domain.PeriodoContabilAudit(
        id=orm_audit.id,
        company_id=orm_audit.company_id,
        periodo_anterior=orm_audit.periodo_anterior,
        periodo_novo=orm_audit.periodo_novo,
        changed_by=orm_audit.changed_by,
        changed_at=orm_audit.changed_at,
    )


def reference_account_to_domain(orm_reference: ORMReferenceAccount) -> domain.ReferenceAccount:
    """Convert SQLAlchemy ReferenceAccount model to domain entity."""
    return domain.ReferenceAccount(
        id=orm_reference.id,
        codigo_rfb=orm_reference.codigo_rfb,
        descricao=orm_reference.descricao,
        ano_validade=orm_reference.ano_validade,
        status=Status(orm_reference.status),
        created_at=orm_reference.created_at,
    )


def chart_account_to_domain(orm_account: ORMChartOfAccount) -> domain.ChartOfAccount:
    """Convert SQLAlchemy ChartOfAccount model to domain entity."""
    return domain.ChartOfAccount(
        id=orm_account.id,
        company_id=orm_account.company_id,
        code=orm_account.code,
        name=orm_account.name,
        fiscal_year=orm_account.fiscal_year,
        account_type=AccountType(orm_account.account_type),
        reference_account_id=orm_account.reference_account_id,
        classe=ClasseContabil(orm_account.classe) if orm_account.classe else None,
        nivel=orm_account.nivel,
        natureza=NaturezaConta(orm_account.natureza),
        afeta_resultado=orm_account.afeta_resultado,
        dedutivel=orm_account.dedutivel,
        status=Status(orm_account.status),
        created_at=orm_account.created_at,
        updated_at=orm_account.updated_at,
    )


def journal_entry_to_domain(orm_entry: ORMJournalEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy JournalEntry model to domain JournalEntry entity."""
    return domain.JournalEntry(
        id=orm_entry.id,
        company_id=orm_entry.company_id,
        data=orm_entry.data,
        debit_account_id=orm_entry.debit_account_id,
        credit_account_id=orm_entry.credit_account_id,
        amount=orm_entry.amount,
        description=orm_entry.description,
        fiscal_year=orm_entry.fiscal_year,
        status=Status(orm_entry.status),
        document_number=orm_entry.document_number,
        created_at=orm_entry.created_at,
        updated_at=orm_entry.updated_at,
    )
