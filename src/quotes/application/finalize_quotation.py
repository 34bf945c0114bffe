"""Application service: Finalize Quotation use case.

Brings a quotation into the form the caller persists: validated,
blank rows dropped, amounts rounded, identity and quote number assigned.
Storage itself belongs to the caller.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Callable

import structlog

from quotes.application.dto import QuotationDTO, quotation_to_dto
from quotes.domain.exceptions import ValidationError
from quotes.domain.model.quotation import Quotation
from quotes.domain.service.numbering import quotation_number, utc_now

logger = structlog.get_logger(__name__)


class FinalizeQuotationHandler:

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock

    def handle(self, quotation: Quotation) -> QuotationDTO:
        """Finalize a quotation for saving.

        Steps:
        1. Let the Quotation aggregate validate and normalise its lines.
        2. Assign an id and a quote number on first save.
        3. Return a DTO with totals recomputed from the stored form.
        """
        try:
            quotation.finalize()
        except ValidationError as exc:
            logger.info("quotation_rejected", quote_number=quotation.quote_number, reason=str(exc))
            raise

        if quotation.id is None:
            quotation.id = uuid.uuid4().hex
        if quotation.quote_number is None:
            quotation.quote_number = quotation_number(self._clock())

        dto = quotation_to_dto(quotation)
        logger.info(
            "quotation_finalized",
            quote_number=quotation.quote_number,
            lines=len(quotation.items),
            total_amount=dto.totals.total_amount,
        )
        return dto
