"""Shared pytest fixtures for lalurecf tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
from pathlib import Path
import pytest

from lalurecf.database.factories import create_sqlite_database
from lalurecf.domain.chart_of_accounts import ChartOfAccountService
from lalurecf.domain.company import CompanyService
from lalurecf.domain.entities import CompanyContext, JournalEntryDraft
from lalurecf.domain.enums import AccountType, NaturezaConta
from lalurecf.domain.journal_entry import JournalEntryService
from lalurecf.domain.reference_accounts import ReferenceAccountService
from lalurecf.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop any handler a CLI invocation installed on the lalurecf logger."""
    yield
    reset_logging()


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def company_service(temp_db):
    """Create a CompanyService with a temporary database."""
    return CompanyService(temp_db)


@pytest.fixture
def reference_service(temp_db):
    """Create a ReferenceAccountService with a temporary database."""
    return ReferenceAccountService(temp_db)


@pytest.fixture
def account_service(temp_db):
    """Create a ChartOfAccountService whose current year is 2024."""
    return ChartOfAccountService(temp_db, today=lambda: date(2024, 7, 1))


@pytest.fixture
def entry_service(temp_db):
    """Create a JournalEntryService with a temporary database."""
    return JournalEntryService(temp_db)


@pytest.fixture
def sample_company(company_service):
    """Create a company with Período Contábil 2024-01-01."""
    company_id = company_service.create_company(
        "12.345.678/0001-90", "ACME Comércio Ltda", periodo_contabil=date(2024, 1, 1)
    )
    return company_service.get_company(company_id)


@pytest.fixture
def context(sample_company):
    """Context scoped to the sample company."""
    return CompanyContext(company_id=sample_company.id, user="maria")


@pytest.fixture
def sample_reference(reference_service):
    """Create an active reference account."""
    reference_id = reference_service.create_reference_account("1.01.01.01.00", "Caixa", 2024)
    return reference_service.get_reference_account(reference_id)


@pytest.fixture
def sample_accounts(account_service, context, sample_reference):
    """Create debit and credit accounts for fiscal year 2024."""
    caixa_id = account_service.create_account(
        context,
        code="1.1.01",
        name="Caixa",
        fiscal_year=2024,
        account_type=AccountType.ATIVO,
        reference_account_id=sample_reference.id,
        nivel=3,
        natureza=NaturezaConta.DEVEDORA,
    )
    fornecedores_id = account_service.create_account(
        context,
        code="2.1.01",
        name="Fornecedores",
        fiscal_year=2024,
        account_type=AccountType.PASSIVO,
        reference_account_id=sample_reference.id,
        nivel=3,
        natureza=NaturezaConta.CREDORA,
    )
    return {
        "debit": account_service.get_account(context, caixa_id),
        "credit": account_service.get_account(context, fornecedores_id),
    }


@pytest.fixture
def make_draft(sample_accounts):
    """Build drafts posting to the sample accounts unless overridden."""

    def _make(**overrides):
        fields = {
            "data": date(2024, 3, 1),
            "debit_account_id": sample_accounts["debit"].id,
            "credit_account_id": sample_accounts["credit"].id,
            "amount": Decimal("100.00"),
            "description": "Pagamento fornecedor",
            "fiscal_year": 2024,
            "document_number": None,
        }
        fields.update(overrides)
        return JournalEntryDraft(**fields)

    return _make


@pytest.fixture
def sample_entry(entry_service, context, make_draft):
    """Create one ACTIVE entry dated 2024-03-01."""
    return entry_service.create_entry(context, make_draft())


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def tmp_csv(tmp_path):
    """Write CSV text to a temporary file and return its path."""

    def _write(content: str, name: str = "entries.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
