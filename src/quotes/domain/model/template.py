"""Quotation templates: reusable sets of lines, tax rate and terms."""

from __future__ import annotations

from dataclasses import dataclass, field

from quotes.domain.model.line_item import LineItem
from quotes.domain.model.value_objects import DEFAULT_TAX_RATE, NumericInput


@dataclass
class QuotationTemplate:
    """A named starting point for new quotations.

    Template lines are prototypes; applying a template copies them into
    the quotation under fresh ids, so edits never leak back.
    """

    id: str
    name: str
    line_items: list[LineItem] = field(default_factory=list)
    tax_rate: NumericInput = DEFAULT_TAX_RATE
    terms_conditions: str = ""
    description: str = ""

    def instantiate_lines(self) -> list[LineItem]:
        return [
            LineItem(
                name=proto.name or "",
                description=proto.description or "",
                quantity=proto.quantity or 1,
                unit_price=proto.unit_price or 0,
                discount_percent=proto.discount_percent or 0,
                sort_order=index,
            )
            for index, proto in enumerate(self.line_items)
        ]
