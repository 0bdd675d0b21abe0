"""CSV import of journal entries."""

import csv
import logging
from pathlib import Path
from typing import Any

from lalurecf.database.base import Database
from lalurecf.domain.entities import CompanyContext, JournalEntryDraft
from lalurecf.domain.errors import NotFoundError
from lalurecf.domain.journal_entry import JournalEntryService
from lalurecf.utils.amount_parser import parse_amount
from lalurecf.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = 5


def detect_delimiter(header_line: str) -> str:
    """Pick the CSV delimiter from the first line; semicolon wins ties."""
    if ";" in header_line:
        return ";"
    if "," in header_line:
        return ","
    if "\t" in header_line:
        return "\t"
    return ";"


class JournalEntryImportService:
    """Service for importing journal entries from CSV files.

    Columns, in order: debit account code, credit account code, date,
    amount, description and an optional document number. The first line is
    a header and is skipped.
    """

    def __init__(self, db: Database, entry_service: JournalEntryService | None = None):
        """Initialize import service.

        Args:
            db: Database instance
            entry_service: Lifecycle service each row is written through
        """
        self.db = db
        self.entry_service = entry_service or JournalEntryService(db)

    def import_csv(
        self,
        context: CompanyContext,
        csv_file_path: str,
        fiscal_year: int,
        dry_run: bool = False,
    ) -> dict[str, Any]:
        """Import journal entries from a CSV file.

        Each row is created through JournalEntryService, so Período Contábil
        enforcement and validation apply per row. Bad rows are reported and
        skipped; good rows are kept.

        Args:
            context: Company the entries belong to
            csv_file_path: Path to CSV file
            fiscal_year: Fiscal year of the entries and their accounts
            dry_run: Check every row without writing anything

        Returns:
            Dict with import statistics:
            - total: number of data rows read
            - imported: number of rows imported (or importable, on dry run)
            - skipped: number of rows rejected
            - errors: list of "Line N: message" strings
            - preview: rows that would be imported (dry run only)

        Raises:
            MissingContextError: If the context has no company
            NotFoundError: If the context's company does not exist
            FileNotFoundError: If CSV file doesn't exist
            ValueError: If the file is empty or not valid UTF-8
        """
        company_id = context.require_company_id()
        if self.db.get_company(company_id) is None:
            raise NotFoundError("Company", company_id)

        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

        logger.info(
            "Importing %s for company %s, fiscal year %s (dry run: %s)",
            csv_path,
            company_id,
            fiscal_year,
            dry_run,
        )

        total = 0
        imported = 0
        errors: list[str] = []
        preview: list[dict[str, Any]] = []

        try:
            lines = csv_path.read_text(encoding="utf-8-sig").splitlines()
        except UnicodeDecodeError as e:
            raise ValueError(f"CSV file is not valid UTF-8: {e}") from e
        if not lines or not lines[0].strip():
            raise ValueError("CSV file is empty")

        reader = csv.reader(lines[1:], delimiter=detect_delimiter(lines[0]))

        for line_num, row in enumerate(reader, start=2):
            if not any(cell.strip() for cell in row):
                continue
            total += 1
            try:
                draft = self._parse_row(context, row, fiscal_year)
                if dry_run:
                    self.entry_service.verify_entry(context, draft)
                    preview.append(
                        {
                            "line": line_num,
                            "debit_code": row[0].strip(),
                            "credit_code": row[1].strip(),
                            "data": draft.data,
                            "amount": draft.amount,
                            "description": draft.description,
                            "document_number": draft.document_number,
                        }
                    )
                else:
                    self.entry_service.create_entry(context, draft)
                imported += 1
            except ValueError as e:
                errors.append(f"Line {line_num}: {e}")

        logger.info(
            "Import of %s finished: %d rows, %d imported, %d skipped",
            csv_path,
            total,
            imported,
            len(errors),
        )
        result: dict[str, Any] = {
            "total": total,
            "imported": imported,
            "skipped": len(errors),
            "errors": errors,
        }
        if dry_run:
            result["preview"] = preview
        return result

    def _parse_row(
        self, context: CompanyContext, row: list[str], fiscal_year: int
    ) -> JournalEntryDraft:
        if len(row) < REQUIRED_COLUMNS:
            raise ValueError(
                f"Missing required fields. Expected at least {REQUIRED_COLUMNS} columns"
            )

        debit_code, credit_code, date_str, amount_str, description = (
            cell.strip() for cell in row[:REQUIRED_COLUMNS]
        )
        document_number = row[5].strip() if len(row) > 5 and row[5].strip() else None

        if not (debit_code and credit_code and date_str and amount_str and description):
            raise ValueError("One or more required fields are empty")

        debit_account = self.db.find_chart_account_by_code(
            context.company_id, debit_code, fiscal_year
        )
        if debit_account is None:
            raise ValueError(f"Account code '{debit_code}' not found for fiscal year {fiscal_year}")
        credit_account = self.db.find_chart_account_by_code(
            context.company_id, credit_code, fiscal_year
        )
        if credit_account is None:
            raise ValueError(
                f"Account code '{credit_code}' not found for fiscal year {fiscal_year}"
            )

        return JournalEntryDraft(
            data=parse_date(date_str),
            debit_account_id=debit_account.id,
            credit_account_id=credit_account.id,
            amount=parse_amount(amount_str),
            description=description,
            fiscal_year=fiscal_year,
            document_number=document_number,
        )
