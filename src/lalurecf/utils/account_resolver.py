"""Utility for resolving account codes to IDs."""

from lalurecf.domain.chart_of_accounts import ChartOfAccountService
from lalurecf.domain.entities import CompanyContext


def resolve_account(
    account_service: ChartOfAccountService,
    context: CompanyContext,
    account: str | int,
    fiscal_year: int,
) -> int:
    """Resolve an account code or ID to an account ID.

    The value is first looked up as a code within the fiscal year; only if no
    account has that code is it treated as a numeric ID.

    Args:
        account_service: ChartOfAccountService instance
        context: Company owning the account
        account: Account code, or ID (int or string representation of int)
        fiscal_year: Fiscal year to search codes in

    Returns:
        Account ID

    Raises:
        ValueError: If account is not found
    """
    if not isinstance(account, int):
        found = account_service.find_by_code(context, str(account), fiscal_year)
        if found is not None:
            return found.id

    try:
        account_id = int(account)
    except (ValueError, TypeError):
        raise ValueError(f"Account '{account}' not found for fiscal year {fiscal_year}")

    if account_service.get_account(context, account_id) is None:
        raise ValueError(f"Account ID {account_id} not found")
    return account_id
