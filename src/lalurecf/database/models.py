"""SQLAlchemy models for lalurecf database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Company(Base):
    """Company model."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True)
    cnpj = Column(String(14), unique=True, nullable=False)
    razao_social = Column(String, nullable=False)
    periodo_contabil = Column(Date, nullable=True)
    status = Column(String(16), default="ACTIVE", nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True, onupdate=_utcnow)

    # Relationships
    chart_accounts = relationship("ChartOfAccount", back_populates="company")
    journal_entries = relationship("JournalEntry", back_populates="company")
    periodo_audit = relationship("PeriodoContabilAudit", back_populates="company")


class PeriodoContabilAudit(Base):
    """Append-only log of Período Contábil changes."""

    __tablename__ = "periodo_contabil_audit"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    periodo_anterior = Column(Date, nullable=True)
    periodo_novo = Column(Date, nullable=False)
    changed_by = Column(String, nullable=True)
    changed_at = Column(DateTime, default=_utcnow, nullable=False)

    company = relationship("Company", back_populates="periodo_audit")


class ReferenceAccount(Base):
    """RFB reference account (Conta Referencial) model."""

    __tablename__ = "reference_accounts"

    id = Column(Integer, primary_key=True)
    codigo_rfb = Column(String, nullable=False)
    descricao = Column(String, nullable=False)
    ano_validade = Column(Integer, nullable=True)
    status = Column(String(16), default="ACTIVE", nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("codigo_rfb", "ano_validade", name="uq_reference_code_year"),
    )


class ChartOfAccount(Base):
    """Chart-of-accounts model."""

    __tablename__ = "chart_of_accounts"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    code = Column(String, nullable=False)
    name = Column(String, nullable=False)
    fiscal_year = Column(Integer, nullable=False)
    account_type = Column(String(32), nullable=False)
    reference_account_id = Column(Integer, ForeignKey("reference_accounts.id"), nullable=False)
    classe = Column(String(32), nullable=True)
    nivel = Column(Integer, nullable=False)
    natureza = Column(String(16), nullable=False)
    afeta_resultado = Column(Boolean, default=False, nullable=False)
    dedutivel = Column(Boolean, default=False, nullable=False)
    status = Column(String(16), default="ACTIVE", nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True, onupdate=_utcnow)

    # One code per company and fiscal year
    __table_args__ = (
        UniqueConstraint("company_id", "code", "fiscal_year", name="uq_company_code_year"),
    )

    # Relationships
    company = relationship("Company", back_populates="chart_accounts")
    reference_account = relationship("ReferenceAccount")


class JournalEntry(Base):
    """Journal entry (lançamento contábil) model."""

    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    data = Column(Date, nullable=False, index=True)
    debit_account_id = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False)
    credit_account_id = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    description = Column(String, nullable=False)
    document_number = Column(String, nullable=True)
    fiscal_year = Column(Integer, nullable=False, index=True)
    status = Column(String(16), default="ACTIVE", nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True, onupdate=_utcnow)

    # Relationships
    company = relationship("Company", back_populates="journal_entries")
    debit_account = relationship("ChartOfAccount", foreign_keys=[debit_account_id])
    credit_account = relationship("ChartOfAccount", foreign_keys=[credit_account_id])


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
