"""Tests for journal entry commands."""

from datetime import date
from decimal import Decimal

from lalurecf.cli.main import cli
from lalurecf.domain.entities import JournalEntryFilters
from lalurecf.domain.enums import Status


def _invoke(cli_runner, temp_db, company_id, *args):
    return cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "--company", str(company_id), "entry", *args]
    )


def _create_args(data="2024-03-01", amount="1.234,56"):
    return [
        "create",
        "--debit",
        "1.1.01",
        "--credit",
        "2.1.01",
        "--date",
        data,
        "--amount",
        amount,
        "--description",
        "Compra a prazo",
        "--fiscal-year",
        "2024",
        "--document",
        "NF-7",
    ]


def test_create_entry(cli_runner, temp_db, sample_company, sample_accounts):
    result = _invoke(cli_runner, temp_db, sample_company.id, *_create_args())

    assert result.exit_code == 0, result.output
    assert "Created journal entry" in result.output
    page = temp_db.list_journal_entries(sample_company.id, JournalEntryFilters())
    assert page.total == 1
    assert page.items[0].amount == Decimal("1234.56")
    assert page.items[0].document_number == "NF-7"


def test_create_entry_day_first_date(cli_runner, temp_db, sample_company, sample_accounts):
    result = _invoke(cli_runner, temp_db, sample_company.id, *_create_args(data="15/03/2024"))

    assert result.exit_code == 0
    page = temp_db.list_journal_entries(sample_company.id, JournalEntryFilters())
    assert page.items[0].data == date(2024, 3, 15)


def test_create_entry_in_locked_period(cli_runner, temp_db, sample_company, sample_accounts):
    result = _invoke(cli_runner, temp_db, sample_company.id, *_create_args(data="2023-12-31"))

    assert result.exit_code == 1
    assert "Período Contábil violation" in result.output
    assert temp_db.list_journal_entries(sample_company.id, JournalEntryFilters()).total == 0


def test_create_entry_invalid_amount(cli_runner, temp_db, sample_company, sample_accounts):
    result = _invoke(cli_runner, temp_db, sample_company.id, *_create_args(amount="abc"))

    assert result.exit_code == 1
    assert "Invalid amount format" in result.output


def test_create_entry_unknown_account(cli_runner, temp_db, sample_company, sample_accounts):
    args = _create_args()
    args[args.index("2.1.01")] = "9.9.99"

    result = _invoke(cli_runner, temp_db, sample_company.id, *args)

    assert result.exit_code == 1
    assert "9.9.99" in result.output


def test_update_entry_keeps_unspecified_fields(cli_runner, temp_db, sample_company, sample_entry):
    result = _invoke(cli_runner, temp_db, sample_company.id, "update", str(sample_entry.id), "--amount", "75,10")

    assert result.exit_code == 0, result.output
    temp_db.disconnect()
    entry = temp_db.get_journal_entry(sample_entry.id)
    assert entry.amount == Decimal("75.10")
    assert entry.description == sample_entry.description
    assert entry.data == sample_entry.data


def test_update_entry_into_locked_period(cli_runner, temp_db, sample_company, sample_entry):
    result = _invoke(
        cli_runner, temp_db, sample_company.id, "update", str(sample_entry.id), "--date", "2023-06-30"
    )

    assert result.exit_code == 1
    assert "Período Contábil violation" in result.output


def test_update_missing_entry(cli_runner, temp_db, sample_company, sample_accounts):
    result = _invoke(cli_runner, temp_db, sample_company.id, "update", "999", "--amount", "1")

    assert result.exit_code == 1
    assert "not found" in result.output


def test_toggle_entry(cli_runner, temp_db, sample_company, sample_entry):
    result = _invoke(cli_runner, temp_db, sample_company.id, "toggle", str(sample_entry.id))

    assert result.exit_code == 0
    assert "INACTIVE" in result.output
    temp_db.disconnect()
    assert temp_db.get_journal_entry(sample_entry.id).status is Status.INACTIVE


def test_show_entry(cli_runner, temp_db, sample_company, sample_entry):
    result = _invoke(cli_runner, temp_db, sample_company.id, "show", str(sample_entry.id))

    assert result.exit_code == 0
    assert "100.00" in result.output
    assert "Pagamento fornecedor" in result.output


def test_list_entries(cli_runner, temp_db, sample_company, sample_entry):
    result = _invoke(cli_runner, temp_db, sample_company.id, "list", "--fiscal-year", "2024")

    assert result.exit_code == 0
    assert "page 1 of 1, 1 total" in result.output
    assert "Pagamento fornecedor" in result.output


def test_list_entries_hides_inactive(cli_runner, temp_db, sample_company, sample_entry, entry_service, context):
    entry_service.toggle_entry_status(context, sample_entry.id)

    hidden = _invoke(cli_runner, temp_db, sample_company.id, "list")
    shown = _invoke(cli_runner, temp_db, sample_company.id, "list", "--all")

    assert "No journal entries found." in hidden.output
    assert "(inactive)" in shown.output


def test_list_invalid_page_size(cli_runner, temp_db, sample_company):
    result = _invoke(cli_runner, temp_db, sample_company.id, "list", "--size", "0")

    assert result.exit_code == 1
    assert "size" in result.output


def test_entry_commands_require_company(cli_runner, temp_db, sample_entry):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "entry", "list"])

    assert result.exit_code == 1
    assert "Company context is required" in result.output


def test_company_from_environment(cli_runner, temp_db, sample_company, sample_entry):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "entry", "show", str(sample_entry.id)],
        env={"LALURECF_COMPANY_ID": str(sample_company.id)},
    )

    assert result.exit_code == 0
    assert "Pagamento fornecedor" in result.output


def test_list_entries_date_range(cli_runner, temp_db, sample_company, sample_entry):
    inside = _invoke(
        cli_runner, temp_db, sample_company.id, "list", "--start-date", "01/03/2024", "--end-date", "2024-03-31"
    )
    outside = _invoke(cli_runner, temp_db, sample_company.id, "list", "--start-date", "2024-04-01")

    assert "1 total" in inside.output
    assert "No journal entries found." in outside.output


def test_list_entries_period_with_dates_rejected(cli_runner, temp_db, sample_company):
    result = _invoke(
        cli_runner, temp_db, sample_company.id, "list", "--period", "this-year", "--end-date", "2024-03-31"
    )

    assert result.exit_code == 1
    assert "cannot be combined" in result.output
