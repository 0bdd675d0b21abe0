"""Reference account (conta referencial) domain service."""

import logging
from typing import Optional

from lalurecf.database.base import Database
from lalurecf.domain.entities import ReferenceAccount
from lalurecf.domain.errors import ConflictError, ValidationError, duplicate_reference_account

logger = logging.getLogger(__name__)


class ReferenceAccountService:
    """Service for the RFB reference account catalog."""

    def __init__(self, db: Database):
        """Initialize reference account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_reference_account(
        self, codigo_rfb: str, descricao: str, ano_validade: Optional[int] = None
    ) -> int:
        """Create a reference account.

        Args:
            codigo_rfb: Code assigned by the RFB
            descricao: Description
            ano_validade: Optional year the code is valid for

        Returns:
            Reference account ID

        Raises:
            ValidationError: If code or description is blank
            ConflictError: If the code already exists for the same year
        """
        codigo_rfb = (codigo_rfb or "").strip()
        descricao = (descricao or "").strip()
        if not codigo_rfb:
            raise ValidationError("Código RFB is required")
        if not descricao:
            raise ValidationError("Descrição is required")

        if self.db.find_reference_account(codigo_rfb, ano_validade) is not None:
            raise ConflictError(duplicate_reference_account(codigo_rfb, ano_validade))

        reference_id = self.db.create_reference_account(
            codigo_rfb=codigo_rfb, descricao=descricao, ano_validade=ano_validade
        )
        logger.info("Created reference account %s (%s)", reference_id, codigo_rfb)
        return reference_id

    def get_reference_account(self, reference_account_id: int) -> Optional[ReferenceAccount]:
        """Get reference account by ID.

        Returns:
            Reference account entity or None if not found
        """
        return self.db.get_reference_account(reference_account_id)

    def list_reference_accounts(self, include_inactive: bool = False) -> list[ReferenceAccount]:
        """List reference accounts ordered by RFB code."""
        return self.db.list_reference_accounts(include_inactive=include_inactive)
