"""Tests for the SQLAlchemy Database implementation."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from lalurecf.database.factories import create_sqlite_database
from lalurecf.domain import entities
from lalurecf.domain.entities import JournalEntryFilters, PageRequest
from lalurecf.domain.enums import AccountType, NaturezaConta, Status
from lalurecf.domain.errors import NotFoundError


@pytest.fixture
def seeded(temp_db):
    company_id = temp_db.create_company("12345678000190", "ACME Ltda", date(2024, 1, 1))
    reference_id = temp_db.create_reference_account("1.01", "Caixa", 2024)
    debit_id = temp_db.create_chart_account(
        company_id, "1.1.01", "Caixa", 2024, AccountType.ATIVO, reference_id, 3, NaturezaConta.DEVEDORA
    )
    credit_id = temp_db.create_chart_account(
        company_id, "2.1.01", "Fornecedores", 2024, AccountType.PASSIVO, reference_id, 3, NaturezaConta.CREDORA
    )
    return {"company": company_id, "debit": debit_id, "credit": credit_id}


def _entry(temp_db, seeded, data=date(2024, 3, 1), amount=Decimal("10.00")):
    return temp_db.create_journal_entry(
        seeded["company"], data, seeded["debit"], seeded["credit"], amount, "Compra", 2024
    )


class TestDomainModels:
    """Database methods return domain entities, not ORM rows."""

    def test_get_company_returns_domain_model(self, temp_db, seeded):
        company = temp_db.get_company(seeded["company"])

        assert isinstance(company, entities.Company)
        assert company.periodo_contabil == date(2024, 1, 1)
        assert isinstance(company.created_at, datetime)

    def test_get_chart_account_returns_domain_model(self, temp_db, seeded):
        account = temp_db.get_chart_account(seeded["debit"])

        assert isinstance(account, entities.ChartOfAccount)
        assert account.status is Status.ACTIVE

    def test_get_journal_entry_returns_domain_model(self, temp_db, seeded):
        entry = temp_db.get_journal_entry(_entry(temp_db, seeded))

        assert isinstance(entry, entities.JournalEntry)
        assert entry.amount == Decimal("10.00")
        assert entry.status is Status.ACTIVE

    def test_missing_rows_return_none(self, temp_db):
        assert temp_db.get_company(1) is None
        assert temp_db.get_chart_account(1) is None
        assert temp_db.get_journal_entry(1) is None
        assert temp_db.get_reference_account(1) is None


class TestUnitOfWork:
    """Tests for Database.unit_of_work."""

    def test_commits_on_success(self, temp_db, seeded):
        with temp_db.unit_of_work():
            entry_id = _entry(temp_db, seeded)

        temp_db.disconnect()
        assert temp_db.get_journal_entry(entry_id) is not None

    def test_rolls_back_on_error(self, temp_db, seeded):
        with pytest.raises(RuntimeError):
            with temp_db.unit_of_work():
                _entry(temp_db, seeded)
                temp_db.update_company_periodo_contabil(seeded["company"], date(2024, 6, 1))
                raise RuntimeError("boom")

        temp_db.disconnect()
        assert temp_db.list_journal_entries(seeded["company"], JournalEntryFilters()).total == 0
        assert temp_db.get_company(seeded["company"]).periodo_contabil == date(2024, 1, 1)

    def test_nested_units_commit_once(self, temp_db, seeded):
        with pytest.raises(RuntimeError):
            with temp_db.unit_of_work():
                with temp_db.unit_of_work():
                    _entry(temp_db, seeded)
                raise RuntimeError("outer fails")

        temp_db.disconnect()
        assert temp_db.list_journal_entries(seeded["company"], JournalEntryFilters()).total == 0


    def test_instances_do_not_share_units_of_work(self, temp_db, seeded):
        other = create_sqlite_database(temp_db.database_path)

        with pytest.raises(RuntimeError):
            with temp_db.unit_of_work():
                other_id = other.create_company("11222333000181", "Outra Ltda")
                raise RuntimeError("first instance fails")

        other.disconnect()
        temp_db.disconnect()
        assert temp_db.get_company(other_id).razao_social == "Outra Ltda"

class TestJournalEntries:
    """Tests for journal entry persistence."""

    def test_update_journal_entry(self, temp_db, seeded):
        entry_id = _entry(temp_db, seeded)

        temp_db.update_journal_entry(
            entry_id, date(2024, 4, 1), seeded["credit"], seeded["debit"], Decimal("20.00"), "Estorno", 2024, "NF-2"
        )

        entry = temp_db.get_journal_entry(entry_id)
        assert entry.data == date(2024, 4, 1)
        assert entry.debit_account_id == seeded["credit"]
        assert entry.document_number == "NF-2"
        assert entry.updated_at is not None

    def test_update_missing_entry(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_journal_entry_status(42, Status.INACTIVE)

    def test_list_without_page_returns_everything(self, temp_db, seeded):
        for day in range(1, 26):
            _entry(temp_db, seeded, data=date(2024, 3, day))

        page = temp_db.list_journal_entries(seeded["company"], JournalEntryFilters())

        assert page.total == 25
        assert len(page.items) == 25
        assert page.total_pages == 1

    def test_list_empty_page(self, temp_db, seeded):
        page = temp_db.list_journal_entries(seeded["company"], JournalEntryFilters(), PageRequest(page=3))

        assert page.items == []
        assert page.total == 0
        assert page.total_pages == 0

    def test_ties_ordered_by_id(self, temp_db, seeded):
        first = _entry(temp_db, seeded)
        second = _entry(temp_db, seeded)

        page = temp_db.list_journal_entries(seeded["company"], JournalEntryFilters())

        assert [e.id for e in page.items] == [first, second]


def test_find_reference_account_by_year(temp_db):
    temp_db.create_reference_account("1.01", "Caixa", 2024)
    temp_db.create_reference_account("1.01", "Caixa sem ano")

    assert temp_db.find_reference_account("1.01", 2024).descricao == "Caixa"
    assert temp_db.find_reference_account("1.01").descricao == "Caixa sem ano"
    assert temp_db.find_reference_account("1.01", 2023) is None


def test_update_company_periodo_missing(temp_db):
    with pytest.raises(NotFoundError):
        temp_db.update_company_periodo_contabil(7, date(2024, 1, 1))
