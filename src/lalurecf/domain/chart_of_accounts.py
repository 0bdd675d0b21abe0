"""Chart-of-accounts (plano de contas) domain service."""

import logging
from datetime import date
from typing import Callable, Optional

from lalurecf.database.base import Database
from lalurecf.domain.entities import ChartOfAccount, CompanyContext
from lalurecf.domain.enums import AccountType, ClasseContabil, NaturezaConta, Status
from lalurecf.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_account_code,
)

logger = logging.getLogger(__name__)

MIN_FISCAL_YEAR = 2000
MIN_NIVEL = 1
MAX_NIVEL = 5


class ChartOfAccountService:
    """Service for managing a company's chart of accounts."""

    def __init__(self, db: Database, today: Callable[[], date] = date.today):
        """Initialize chart-of-accounts service.

        Args:
            db: Database instance
            today: Returns the current date; used to bound fiscal years
        """
        self.db = db
        self._today = today

    def create_account(
        self,
        context: CompanyContext,
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
        """Create an account for the context's company.

        Args:
            context: Company that owns the account
            code: Account code, unique per company and fiscal year
            name: Account name
            fiscal_year: Fiscal year the account belongs to
            account_type: Account type
            reference_account_id: Linked RFB reference account
            nivel: Hierarchy level, 1 to 5
            natureza: Debit or credit nature
            classe: Optional ECF accounting class
            afeta_resultado: Whether the account affects the result
            dedutivel: Whether the account is deductible

        Returns:
            Account ID

        Raises:
            ValidationError: If a field is invalid or the reference account is unusable
            ConflictError: If the code already exists for the company and year
        """
        company_id = context.require_company_id()
        code = (code or "").strip()
        if not code:
            raise ValidationError("Account code is required")
        name = self._require_name(name)
        self._validate_fiscal_year(fiscal_year)
        self._validate_nivel(nivel)
        self._require_reference_account(reference_account_id)

        if self.db.find_chart_account_by_code(company_id, code, fiscal_year) is not None:
            raise ConflictError(duplicate_account_code(code, company_id, fiscal_year))

        account_id = self.db.create_chart_account(
            company_id=company_id,
            code=code,
            name=name,
            fiscal_year=fiscal_year,
            account_type=account_type,
            reference_account_id=reference_account_id,
            nivel=nivel,
            natureza=natureza,
            classe=classe,
            afeta_resultado=afeta_resultado,
            dedutivel=dedutivel,
        )
        logger.info(
            "Created account %s (%s/%s) for company %s", account_id, code, fiscal_year, company_id
        )
        return account_id

    def get_account(self, context: CompanyContext, account_id: int) -> Optional[ChartOfAccount]:
        """Get one of the company's accounts by ID.

        Returns:
            Account entity or None if not found
        """
        company_id = context.require_company_id()
        account = self.db.get_chart_account(account_id)
        if account is None or account.company_id != company_id:
            return None
        return account

    def require_account(self, context: CompanyContext, account_id: int) -> ChartOfAccount:
        """Get an account by ID or raise NotFoundError."""
        account = self.get_account(context, account_id)
        if account is None:
            raise NotFoundError("Account", account_id)
        return account

    def find_by_code(
        self, context: CompanyContext, code: str, fiscal_year: int
    ) -> Optional[ChartOfAccount]:
        """Find one of the company's accounts by code within a fiscal year."""
        company_id = context.require_company_id()
        return self.db.find_chart_account_by_code(company_id, code.strip(), fiscal_year)

    def list_accounts(
        self,
        context: CompanyContext,
        fiscal_year: Optional[int] = None,
        account_type: Optional[AccountType] = None,
        classe: Optional[ClasseContabil] = None,
        natureza: Optional[NaturezaConta] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> list[ChartOfAccount]:
        """List the company's accounts.

        Args:
            context: Company whose accounts are listed
            fiscal_year: Optional fiscal year filter
            account_type: Optional account type filter
            classe: Optional ECF class filter
            natureza: Optional nature filter
            search: Optional text matched against code and name
            include_inactive: Include INACTIVE accounts

        Returns:
            Accounts ordered by fiscal year, then code
        """
        company_id = context.require_company_id()
        return self.db.list_chart_accounts(
            company_id,
            fiscal_year=fiscal_year,
            account_type=account_type,
            classe=classe,
            natureza=natureza,
            search=search,
            include_inactive=include_inactive,
        )

    def update_account(
        self,
        context: CompanyContext,
        account_id: int,
        name: Optional[str] = None,
        account_type: Optional[AccountType] = None,
        reference_account_id: Optional[int] = None,
        nivel: Optional[int] = None,
        natureza: Optional[NaturezaConta] = None,
        classe: Optional[ClasseContabil] = None,
        afeta_resultado: Optional[bool] = None,
        dedutivel: Optional[bool] = None,
    ) -> ChartOfAccount:
        """Update the mutable fields of an account.

        Code and fiscal year never change. Fields left as None keep their
        current value.

        Raises:
            NotFoundError: If the account does not exist for this company
            ValidationError: If a new value is invalid
        """
        account = self.require_account(context, account_id)

        if nivel is not None:
            self._validate_nivel(nivel)
        if reference_account_id is not None:
            self._require_reference_account(reference_account_id)

        self.db.update_chart_account(
            account_id=account_id,
            name=self._require_name(name) if name is not None else account.name,
            account_type=account_type or account.account_type,
            reference_account_id=reference_account_id or account.reference_account_id,
            nivel=nivel if nivel is not None else account.nivel,
            natureza=natureza or account.natureza,
            classe=classe if classe is not None else account.classe,
            afeta_resultado=(
                afeta_resultado if afeta_resultado is not None else account.afeta_resultado
            ),
            dedutivel=dedutivel if dedutivel is not None else account.dedutivel,
        )
        logger.info("Updated account %s", account_id)
        return self.db.get_chart_account(account_id)

    def toggle_status(self, context: CompanyContext, account_id: int) -> ChartOfAccount:
        """Flip an account between ACTIVE and INACTIVE.

        Raises:
            NotFoundError: If the account does not exist for this company
        """
        account = self.require_account(context, account_id)
        new_status = account.status.toggled()
        self.db.update_chart_account_status(account_id, new_status)
        logger.info("Account %s status changed to %s", account_id, new_status.value)
        return self.db.get_chart_account(account_id)

    def _validate_fiscal_year(self, fiscal_year: int) -> None:
        max_year = self._today().year + 1
        if fiscal_year is None or not MIN_FISCAL_YEAR <= fiscal_year <= max_year:
            raise ValidationError(
                f"Fiscal year must be between {MIN_FISCAL_YEAR} and {max_year}, got {fiscal_year}"
            )

    def _validate_nivel(self, nivel: int) -> None:
        if not MIN_NIVEL <= nivel <= MAX_NIVEL:
            raise ValidationError(f"nivel must be between {MIN_NIVEL} and {MAX_NIVEL}, got {nivel}")

    def _require_name(self, name: Optional[str]) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Account name is required")
        return name

    def _require_reference_account(self, reference_account_id: int) -> None:
        reference = self.db.get_reference_account(reference_account_id)
        if reference is None:
            raise ValidationError(f"Reference account {reference_account_id} not found")
        if reference.status is not Status.ACTIVE:
            raise ValidationError(f"Reference account {reference_account_id} is inactive")
