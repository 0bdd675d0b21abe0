"""CSV export of journal entries."""

import csv
import io
import logging
from datetime import date
from typing import Optional

from lalurecf.database.base import Database
from lalurecf.domain.entities import ChartOfAccount, CompanyContext, JournalEntryFilters
from lalurecf.domain.errors import NotFoundError, ValidationError
from lalurecf.utils.amount_parser import format_amount

logger = logging.getLogger(__name__)

EXPORT_HEADER = [
    "contaDebitoCode",
    "contaDebitoName",
    "contaCreditoCode",
    "contaCreditoName",
    "data",
    "valor",
    "historico",
    "numeroDocumento",
]


class JournalEntryExportService:
    """Service for exporting a company's journal entries as CSV."""

    def __init__(self, db: Database):
        """Initialize export service.

        Args:
            db: Database instance
        """
        self.db = db

    def export_csv(
        self,
        context: CompanyContext,
        fiscal_year: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> str:
        """Export ACTIVE entries of one fiscal year as semicolon-separated text.

        Args:
            context: Company whose entries are exported
            fiscal_year: Fiscal year to export
            start_date: Optional first date (requires end_date)
            end_date: Optional last date

        Returns:
            CSV text with a header line, entries ordered by date

        Raises:
            ValidationError: If the date range is incomplete or reversed
            NotFoundError: If there is nothing to export
        """
        company_id = context.require_company_id()
        if start_date is not None and end_date is None:
            raise ValidationError("end_date is required when start_date is given")
        if start_date is not None and end_date < start_date:
            raise ValidationError("end_date must not be before start_date")

        page = self.db.list_journal_entries(
            company_id,
            JournalEntryFilters(fiscal_year=fiscal_year, start_date=start_date, end_date=end_date),
        )
        if not page.items:
            raise NotFoundError("Journal entries for fiscal year", fiscal_year)

        accounts: dict[int, Optional[ChartOfAccount]] = {}

        def account(account_id: int) -> Optional[ChartOfAccount]:
            if account_id not in accounts:
                accounts[account_id] = self.db.get_chart_account(account_id)
            return accounts[account_id]

        output = io.StringIO()
        writer = csv.writer(output, delimiter=";", lineterminator="\n")
        writer.writerow(EXPORT_HEADER)
        for entry in page.items:
            debit = account(entry.debit_account_id)
            credit = account(entry.credit_account_id)
            writer.writerow(
                [
                    debit.code if debit else "",
                    debit.name if debit else "",
                    credit.code if credit else "",
                    credit.name if credit else "",
                    entry.data.isoformat(),
                    format_amount(entry.amount),
                    entry.description,
                    entry.document_number or "",
                ]
            )

        logger.info(
            "Exported %d journal entries for company %s, fiscal year %s",
            len(page.items),
            company_id,
            fiscal_year,
        )
        return output.getvalue()
