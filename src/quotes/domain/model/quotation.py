"""Quotation aggregate: the document being priced.

The Quotation owns its line items.  Editing operations never reject
numeric input (the pricing engine coerces it); business rules are only
enforced when the quotation is saved or moves between statuses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum

from quotes.domain.exceptions import EntityNotFoundError, ValidationError
from quotes.domain.model.line_item import LineItem
from quotes.domain.model.template import QuotationTemplate
from quotes.domain.model.value_objects import (
    DEFAULT_TAX_RATE,
    ZERO,
    NumericInput,
    is_blank,
)
from quotes.domain.service.pricing_engine import DocumentTotals, compute_document_totals


class QuotationStatus(Enum):
    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"


EDITABLE_FIELDS = ("name", "description", "quantity", "unit_price", "discount_percent")
NUMERIC_FIELDS = ("quantity", "unit_price", "discount_percent")


@dataclass
class Quotation:
    """Aggregate root for quotations.

    Use ``Quotation.new()`` for a fresh document; ``__init__`` stays plain
    so documents loaded from a file are reconstituted without validation.
    """

    id: str | None
    quote_number: str | None
    title: str
    client_name: str
    items: list[LineItem]
    tax_rate: NumericInput = DEFAULT_TAX_RATE
    discount: NumericInput = ZERO
    status: QuotationStatus = QuotationStatus.DRAFT
    description: str = ""
    issue_date: date | None = None
    valid_until: date | None = None
    terms_conditions: str = ""
    notes: str = ""
    template_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def new(
        title: str = "",
        client_name: str = "",
        tax_rate: NumericInput = DEFAULT_TAX_RATE,
        issue_date: date | None = None,
    ) -> Quotation:
        """Start a draft with a single blank line ready for input."""
        return Quotation(
            id=None,
            quote_number=None,
            title=title,
            client_name=client_name,
            items=[LineItem.blank()],
            tax_rate=tax_rate,
            issue_date=issue_date,
        )

    # --- Line editing ---------------------------------------------------------

    def add_line_item(self) -> LineItem:
        item = LineItem.blank(sort_order=len(self.items))
        self.items.append(item)
        return item

    def remove_line_item(self, item_id: str) -> None:
        """Remove a line; the document always keeps at least one row."""
        self._find_item(item_id)
        remaining = [item for item in self.items if item.id != item_id]
        if not remaining:
            self.items = [LineItem.blank()]
            return
        for index, item in enumerate(remaining):
            item.sort_order = index
        self.items = remaining

    def duplicate_line_item(self, item_id: str) -> LineItem:
        original = self._find_item(item_id)
        duplicate = original.copy(sort_order=len(self.items))
        self.items.append(duplicate)
        return duplicate

    def update_line_item(self, item_id: str, field_name: str, value: NumericInput) -> LineItem:
        """Set one field of a line exactly as entered."""
        if field_name not in EDITABLE_FIELDS:
            raise ValidationError(f"Line item field '{field_name}' cannot be edited")
        item = self._find_item(item_id)
        if field_name not in NUMERIC_FIELDS and value is not None:
            value = str(value)
        setattr(item, field_name, value)
        return item

    # --- Templates ------------------------------------------------------------

    def apply_template(self, template: QuotationTemplate) -> None:
        """Pull lines, terms and tax rate from a template.

        Only what the template actually provides is copied; an empty
        template keeps the current lines.
        """
        lines = template.instantiate_lines()
        if lines:
            self.items = lines
        if template.terms_conditions:
            self.terms_conditions = template.terms_conditions
        if template.tax_rate:
            self.tax_rate = template.tax_rate
        self.template_id = template.id

    # --- Saving ---------------------------------------------------------------

    def validate_for_save(self) -> None:
        if is_blank(self.title):
            raise ValidationError("Quotation title is required")
        if is_blank(self.client_name):
            raise ValidationError("Please select a client")
        if not self.committed_items:
            raise ValidationError("Please add at least one line item")

    def finalize(self) -> None:
        """Validate and bring the lines into their stored form.

        Blank rows are dropped, text is trimmed and amounts are rounded to
        cents, so the saved document prices exactly as it displays.
        """
        self.validate_for_save()
        self.title = self.title.strip()
        self.client_name = self.client_name.strip()
        self.items = [
            item.normalized(sort_order=index)
            for index, item in enumerate(self.committed_items)
        ]

    # --- State transitions ----------------------------------------------------

    def send(self) -> None:
        if self.status != QuotationStatus.DRAFT:
            raise ValidationError(
                f"Cannot send quotation — current status is {self.status.value}, "
                f"expected draft"
            )
        self.validate_for_save()
        self.status = QuotationStatus.SENT

    def accept(self) -> None:
        self._require_sent("accept")
        self.status = QuotationStatus.ACCEPTED

    def reject(self) -> None:
        self._require_sent("reject")
        self.status = QuotationStatus.REJECTED

    def expire(self, today: date) -> None:
        """Mark an open quotation expired once its validity date has passed."""
        if self.status not in (QuotationStatus.DRAFT, QuotationStatus.SENT):
            raise ValidationError(
                f"Cannot expire quotation in {self.status.value} status"
            )
        if not self.is_past_validity(today):
            raise ValidationError("Quotation is still within its validity period")
        self.status = QuotationStatus.EXPIRED

    def is_past_validity(self, today: date) -> bool:
        return self.valid_until is not None and self.valid_until < today

    # --- Computed properties --------------------------------------------------

    @property
    def committed_items(self) -> list[LineItem]:
        """Lines that count: those with a non-blank name."""
        return [item for item in self.items if item.is_named]

    @property
    def totals(self) -> DocumentTotals:
        return compute_document_totals(self.items, self.tax_rate, self.discount)

    # --- Internal helpers -----------------------------------------------------

    def _require_sent(self, action: str) -> None:
        if self.status != QuotationStatus.SENT:
            raise ValidationError(
                f"Cannot {action} quotation — current status is {self.status.value}, "
                f"expected sent"
            )

    def _find_item(self, item_id: str) -> LineItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise EntityNotFoundError(f"Line item '{item_id}' not found in this quotation")
