"""Tests for ChartOfAccountService."""

import pytest

from lalurecf.database.models import ReferenceAccount
from lalurecf.domain.entities import CompanyContext
from lalurecf.domain.enums import AccountType, ClasseContabil, NaturezaConta, Status
from lalurecf.domain.errors import ConflictError, MissingContextError, NotFoundError, ValidationError


def _create(service, context, reference_id, **overrides):
    fields = {
        "code": "3.1.01",
        "name": "Receita de vendas",
        "fiscal_year": 2024,
        "account_type": AccountType.RECEITA,
        "reference_account_id": reference_id,
        "nivel": 3,
        "natureza": NaturezaConta.CREDORA,
    }
    fields.update(overrides)
    return service.create_account(context, **fields)


def test_create_account(account_service, context, sample_reference, sample_company):
    account_id = _create(
        account_service,
        context,
        sample_reference.id,
        classe=ClasseContabil.RECEITA_BRUTA,
        afeta_resultado=True,
    )

    account = account_service.get_account(context, account_id)
    assert account.code == "3.1.01"
    assert account.company_id == sample_company.id
    assert account.account_type == AccountType.RECEITA
    assert account.classe == ClasseContabil.RECEITA_BRUTA
    assert account.natureza == NaturezaConta.CREDORA
    assert account.afeta_resultado is True
    assert account.dedutivel is False
    assert account.status == Status.ACTIVE


def test_create_strips_code_and_name(account_service, context, sample_reference):
    account_id = _create(account_service, context, sample_reference.id, code=" 3.1.02 ", name=" Vendas ")

    account = account_service.get_account(context, account_id)
    assert account.code == "3.1.02"
    assert account.name == "Vendas"


def test_duplicate_code_same_year(account_service, context, sample_reference):
    _create(account_service, context, sample_reference.id)

    with pytest.raises(ConflictError, match="3.1.01"):
        _create(account_service, context, sample_reference.id)


def test_same_code_other_year_allowed(account_service, context, sample_reference):
    _create(account_service, context, sample_reference.id)
    account_id = _create(account_service, context, sample_reference.id, fiscal_year=2023)

    assert account_service.get_account(context, account_id).fiscal_year == 2023


def test_same_code_other_company_allowed(account_service, company_service, context, sample_reference):
    other = CompanyContext(company_service.create_company("11222333000181", "Outra Ltda"))
    _create(account_service, context, sample_reference.id)

    assert _create(account_service, other, sample_reference.id) is not None


@pytest.mark.parametrize("fiscal_year", [1999, 2026])
def test_fiscal_year_out_of_range(account_service, context, sample_reference, fiscal_year):
    with pytest.raises(ValidationError, match="Fiscal year"):
        _create(account_service, context, sample_reference.id, fiscal_year=fiscal_year)


def test_next_fiscal_year_allowed(account_service, context, sample_reference):
    assert _create(account_service, context, sample_reference.id, fiscal_year=2025) is not None


@pytest.mark.parametrize("nivel", [0, 6])
def test_nivel_out_of_range(account_service, context, sample_reference, nivel):
    with pytest.raises(ValidationError, match="nivel"):
        _create(account_service, context, sample_reference.id, nivel=nivel)


def test_blank_code(account_service, context, sample_reference):
    with pytest.raises(ValidationError, match="code"):
        _create(account_service, context, sample_reference.id, code="  ")


def test_unknown_reference_account(account_service, context):
    with pytest.raises(ValidationError, match="Reference account 999"):
        _create(account_service, context, 999)


def test_inactive_reference_account(account_service, temp_db, context, sample_reference):
    session = temp_db._get_session()
    session.query(ReferenceAccount).filter(ReferenceAccount.id == sample_reference.id).update(
        {"status": Status.INACTIVE.value}
    )
    session.commit()

    with pytest.raises(ValidationError, match="inactive"):
        _create(account_service, context, sample_reference.id)


def test_create_requires_company(account_service, sample_reference):
    with pytest.raises(MissingContextError):
        _create(account_service, CompanyContext(company_id=None), sample_reference.id)


def test_get_other_company_account(account_service, company_service, sample_accounts):
    other = CompanyContext(company_service.create_company("11222333000181", "Outra Ltda"))

    assert account_service.get_account(other, sample_accounts["debit"].id) is None
    with pytest.raises(NotFoundError):
        account_service.require_account(other, sample_accounts["debit"].id)


def test_find_by_code(account_service, context, sample_accounts):
    found = account_service.find_by_code(context, "1.1.01", 2024)

    assert found == sample_accounts["debit"]
    assert account_service.find_by_code(context, "1.1.01", 2023) is None


class TestListAccounts:
    """Tests for listing accounts."""

    def test_lists_active_by_code(self, account_service, context, sample_accounts):
        accounts = account_service.list_accounts(context, fiscal_year=2024)

        assert [a.code for a in accounts] == ["1.1.01", "2.1.01"]

    def test_filters(self, account_service, context, sample_accounts):
        assert [a.code for a in account_service.list_accounts(context, account_type=AccountType.PASSIVO)] == [
            "2.1.01"
        ]
        assert [
            a.code for a in account_service.list_accounts(context, natureza=NaturezaConta.DEVEDORA)
        ] == ["1.1.01"]
        assert account_service.list_accounts(context, classe=ClasseContabil.ATIVO_CIRCULANTE) == []

    def test_search_matches_code_and_name(self, account_service, context, sample_accounts):
        assert [a.code for a in account_service.list_accounts(context, search="fornec")] == ["2.1.01"]
        assert [a.code for a in account_service.list_accounts(context, search="1.1")] == ["1.1.01"]

    def test_inactive_hidden_by_default(self, account_service, context, sample_accounts):
        account_service.toggle_status(context, sample_accounts["debit"].id)

        assert len(account_service.list_accounts(context)) == 1
        assert len(account_service.list_accounts(context, include_inactive=True)) == 2


def test_update_account(account_service, context, sample_accounts):
    account = sample_accounts["debit"]

    updated = account_service.update_account(
        context, account.id, name="Caixa geral", nivel=4, classe=ClasseContabil.ATIVO_CIRCULANTE
    )

    assert updated.name == "Caixa geral"
    assert updated.nivel == 4
    assert updated.classe == ClasseContabil.ATIVO_CIRCULANTE
    assert updated.code == account.code
    assert updated.fiscal_year == account.fiscal_year
    assert updated.account_type == account.account_type
    assert updated.natureza == account.natureza


def test_update_rechecks_reference_account(account_service, context, sample_accounts):
    with pytest.raises(ValidationError):
        account_service.update_account(context, sample_accounts["debit"].id, reference_account_id=999)


def test_update_missing_account(account_service, context):
    with pytest.raises(NotFoundError):
        account_service.update_account(context, 999, name="Nada")


def test_toggle_status_twice(account_service, context, sample_accounts):
    account_id = sample_accounts["credit"].id

    assert account_service.toggle_status(context, account_id).status == Status.INACTIVE
    assert account_service.toggle_status(context, account_id).status == Status.ACTIVE
