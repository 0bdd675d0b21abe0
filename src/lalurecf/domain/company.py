"""Company (empresa) domain service."""

import logging
import re
from datetime import date
from typing import Optional

from lalurecf.database.base import Database
from lalurecf.domain.entities import Company, PeriodoContabilAudit
from lalurecf.domain.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

CNPJ_LENGTH = 14


def normalize_cnpj(cnpj: str) -> str:
    """Strip punctuation from a CNPJ, e.g. "12.345.678/0001-90" -> "12345678000190".

    Raises:
        ValidationError: If the result is not 14 digits
    """
    digits = re.sub(r"\D", "", cnpj or "")
    if len(digits) != CNPJ_LENGTH:
        raise ValidationError(f"CNPJ must have {CNPJ_LENGTH} digits, got '{cnpj}'")
    return digits


class CompanyService:
    """Service for managing companies and their Período Contábil."""

    def __init__(self, db: Database):
        """Initialize company service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_company(
        self, cnpj: str, razao_social: str, periodo_contabil: Optional[date] = None
    ) -> int:
        """Create a company.

        Args:
            cnpj: CNPJ, with or without punctuation
            razao_social: Legal name
            periodo_contabil: Optional initial Período Contábil

        Returns:
            Company ID

        Raises:
            ValidationError: If the CNPJ or name is invalid
            ConflictError: If a company with this CNPJ already exists
        """
        cnpj = normalize_cnpj(cnpj)
        razao_social = (razao_social or "").strip()
        if not razao_social:
            raise ValidationError("Razão social is required")

        if self.db.get_company_by_cnpj(cnpj) is not None:
            raise ConflictError(f"Company with CNPJ {cnpj} already exists")

        company_id = self.db.create_company(
            cnpj=cnpj, razao_social=razao_social, periodo_contabil=periodo_contabil
        )
        logger.info("Created company %s (CNPJ %s)", company_id, cnpj)
        return company_id

    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID.

        Returns:
            Company entity or None if not found
        """
        return self.db.get_company(company_id)

    def list_companies(self) -> list[Company]:
        """List all companies ordered by name."""
        return self.db.list_companies()

    def update_periodo_contabil(
        self,
        company_id: int,
        novo_periodo: date,
        changed_by: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Company:
        """Move a company's Período Contábil forward.

        The audit row and the new value are written in one unit of work.

        Args:
            company_id: Company to update
            novo_periodo: New Período Contábil
            changed_by: User making the change, recorded in the audit trail
            today: Current date; defaults to date.today()

        Returns:
            The updated company

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If the new date is in the future, earlier than
                the current one, or unchanged
        """
        today = today or date.today()
        if novo_periodo > today:
            raise ValidationError(
                f"Período Contábil cannot be in the future ({novo_periodo.isoformat()})"
            )

        with self.db.unit_of_work():
            company = self.db.get_company(company_id)
            if company is None:
                raise NotFoundError("Company", company_id)

            atual = company.periodo_contabil
            if atual is not None:
                if novo_periodo == atual:
                    raise ValidationError(
                        f"Período Contábil is already {atual.isoformat()}"
                    )
                if novo_periodo < atual:
                    raise ValidationError(
                        f"Período Contábil cannot move backwards "
                        f"({atual.isoformat()} -> {novo_periodo.isoformat()})"
                    )

            self.db.create_periodo_contabil_audit(
                company_id=company_id,
                periodo_anterior=atual,
                periodo_novo=novo_periodo,
                changed_by=changed_by,
            )
            self.db.update_company_periodo_contabil(company_id, novo_periodo)

        logger.info(
            "Período Contábil of company %s moved %s -> %s by %s",
            company_id,
            atual,
            novo_periodo,
            changed_by or "unknown",
        )
        return self.db.get_company(company_id)

    def list_periodo_contabil_audit(self, company_id: int) -> list[PeriodoContabilAudit]:
        """List Período Contábil changes for a company, newest first.

        Raises:
            NotFoundError: If the company does not exist
        """
        if self.db.get_company(company_id) is None:
            raise NotFoundError("Company", company_id)
        return self.db.list_periodo_contabil_audit(company_id)
