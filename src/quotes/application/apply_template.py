"""Application service: Apply Template use case."""

from __future__ import annotations

import structlog

from quotes.application.dto import QuotationDTO, quotation_to_dto
from quotes.domain.exceptions import EntityNotFoundError
from quotes.domain.model.quotation import Quotation
from quotes.domain.repository.template_repository import TemplateRepository

logger = structlog.get_logger(__name__)


class ApplyTemplateHandler:

    def __init__(self, template_repo: TemplateRepository) -> None:
        self._template_repo = template_repo

    def handle(self, quotation: Quotation, template_id: str) -> QuotationDTO:
        template = self._template_repo.get_by_id(template_id)
        if template is None:
            raise EntityNotFoundError(f"Template not found: '{template_id}'")

        quotation.apply_template(template)
        logger.info(
            "template_applied",
            template_id=template.id,
            template_name=template.name,
            lines=len(quotation.items),
        )
        return quotation_to_dto(quotation)
