"""Enumerations shared by the domain and persistence layers."""

from enum import Enum


class Status(str, Enum):
    """Soft-delete status for registry rows and journal entries."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    def toggled(self) -> "Status":
        return Status.INACTIVE if self is Status.ACTIVE else Status.ACTIVE


class AccountType(str, Enum):
    """Account type of a chart-of-accounts row."""

    ATIVO = "ATIVO"
    PASSIVO = "PASSIVO"
    PATRIMONIO_LIQUIDO = "PATRIMONIO_LIQUIDO"
    RECEITA = "RECEITA"
    DESPESA = "DESPESA"
    CUSTO = "CUSTO"
    RESULTADO = "RESULTADO"
    COMPENSACAO = "COMPENSACAO"
    ATIVO_RETIFICADORA = "ATIVO_RETIFICADORA"
    PASSIVO_RETIFICADORA = "PASSIVO_RETIFICADORA"


class ClasseContabil(str, Enum):
    """ECF accounting class."""

    ATIVO_CIRCULANTE = "ATIVO_CIRCULANTE"
    ATIVO_NAO_CIRCULANTE = "ATIVO_NAO_CIRCULANTE"
    PASSIVO_CIRCULANTE = "PASSIVO_CIRCULANTE"
    PASSIVO_NAO_CIRCULANTE = "PASSIVO_NAO_CIRCULANTE"
    PATRIMONIO_LIQUIDO = "PATRIMONIO_LIQUIDO"
    RECEITA_BRUTA = "RECEITA_BRUTA"
    DEDUCOES_RECEITA = "DEDUCOES_RECEITA"
    CUSTOS = "CUSTOS"
    DESPESAS_OPERACIONAIS = "DESPESAS_OPERACIONAIS"
    OUTRAS_RECEITAS = "OUTRAS_RECEITAS"
    OUTRAS_DESPESAS = "OUTRAS_DESPESAS"
    RESULTADO_FINANCEIRO = "RESULTADO_FINANCEIRO"


class NaturezaConta(str, Enum):
    """Normal balance side of an account."""

    DEVEDORA = "DEVEDORA"
    CREDORA = "CREDORA"
