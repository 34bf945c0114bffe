"""Application service: Price Quotation use case (query).

Prices ad-hoc rows without saving anything: the interactive
"what does this come to" path.
"""

from __future__ import annotations

import structlog

from quotes.application.dto import LineItemSpec, QuotationDTO, quotation_to_dto
from quotes.domain.model.line_item import LineItem
from quotes.domain.model.quotation import Quotation
from quotes.domain.model.value_objects import DEFAULT_TAX_RATE, ZERO, NumericInput

logger = structlog.get_logger(__name__)


class PriceQuotationHandler:

    def __init__(self, default_tax_rate: NumericInput = DEFAULT_TAX_RATE) -> None:
        self._default_tax_rate = default_tax_rate

    def handle(
        self,
        item_specs: list[LineItemSpec],
        tax_rate: NumericInput = None,
        discount: NumericInput = ZERO,
        title: str = "",
        client_name: str = "",
    ) -> QuotationDTO:
        quotation = Quotation.new(
            title=title,
            client_name=client_name,
            tax_rate=self._default_tax_rate if tax_rate is None else tax_rate,
        )
        quotation.items = [
            LineItem(
                name=spec.name,
                description=spec.description,
                quantity=spec.quantity,
                unit_price=spec.unit_price,
                discount_percent=spec.discount_percent,
                sort_order=index,
            )
            for index, spec in enumerate(item_specs)
        ] or quotation.items
        quotation.discount = discount

        dto = quotation_to_dto(quotation)
        logger.debug(
            "quotation_priced",
            lines=len(quotation.items),
            counted=len(quotation.committed_items),
            total_amount=dto.totals.total_amount,
        )
        return dto
