"""Line items shared by quotations and templates."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal

from quotes.domain.model.value_objects import NumericInput, is_blank, round2, to_decimal
from quotes.domain.service.pricing_engine import compute_line_total


def new_line_id() -> str:
    return uuid.uuid4().hex


@dataclass
class LineItem:
    """One priced row of a quotation.

    Numeric fields hold whatever the user entered, ``""`` included, until
    ``normalized()`` is called on save.  ``line_total`` is derived on every
    read and never stored.
    """

    name: str = ""
    quantity: NumericInput = 1
    unit_price: NumericInput = 0
    discount_percent: NumericInput = 0
    description: str | None = ""
    sort_order: int = 0
    id: str = field(default_factory=new_line_id)

    @property
    def line_total(self) -> Decimal:
        return compute_line_total(self)

    @property
    def is_named(self) -> bool:
        return not is_blank(self.name)

    @staticmethod
    def blank(sort_order: int = 0) -> LineItem:
        """A fresh row as offered to the user: one unit at no cost."""
        return LineItem(sort_order=sort_order)

    def copy(self, sort_order: int) -> LineItem:
        """Duplicate under a new id at the given position."""
        return replace(
            self,
            id=new_line_id(),
            discount_percent=self.discount_percent or 0,
            sort_order=sort_order,
        )

    def normalized(self, sort_order: int) -> LineItem:
        """The form stored on save: trimmed text, amounts rounded to cents."""
        description = (self.description or "").strip() or None
        return replace(
            self,
            name=self.name.strip(),
            description=description,
            quantity=round2(to_decimal(self.quantity)),
            unit_price=round2(to_decimal(self.unit_price)),
            discount_percent=round2(to_decimal(self.discount_percent)),
            sort_order=sort_order,
        )
