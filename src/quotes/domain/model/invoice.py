"""Invoice aggregate.

Invoices carry a directly entered subtotal; only the header half of the
pricing engine (discount, tax, rounding) applies to them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from quotes.domain.exceptions import ValidationError
from quotes.domain.model.value_objects import DEFAULT_TAX_RATE, ZERO, NumericInput
from quotes.domain.service.pricing_engine import DocumentTotals, compute_header_totals


class InvoiceStatus(Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


CLOSED_STATUSES = (InvoiceStatus.PAID, InvoiceStatus.CANCELLED)


@dataclass
class Invoice:
    """Aggregate root for invoices, priced from a subtotal entered by hand."""

    id: str | None
    invoice_number: str | None
    client_name: str
    subtotal: NumericInput = ZERO
    tax_rate: NumericInput = DEFAULT_TAX_RATE
    discount: NumericInput = ZERO
    status: InvoiceStatus = InvoiceStatus.DRAFT
    issue_date: date | None = None
    due_date: date | None = None

    @property
    def totals(self) -> DocumentTotals:
        return compute_header_totals(self.subtotal, self.tax_rate, self.discount)

    def is_overdue(self, today: date) -> bool:
        """Open invoices past their due date."""
        if self.status in CLOSED_STATUSES:
            return False
        return self.due_date is not None and self.due_date < today

    # --- State transitions ----------------------------------------------------

    def send(self) -> None:
        if self.status != InvoiceStatus.DRAFT:
            raise ValidationError(
                f"Cannot send invoice — current status is {self.status.value}, "
                f"expected draft"
            )
        self.status = InvoiceStatus.SENT

    def mark_paid(self) -> None:
        if self.status in CLOSED_STATUSES:
            raise ValidationError(f"Invoice is already {self.status.value}")
        self.status = InvoiceStatus.PAID

    def cancel(self) -> None:
        if self.status == InvoiceStatus.CANCELLED:
            raise ValidationError("Invoice is already cancelled")
        if self.status == InvoiceStatus.PAID:
            raise ValidationError("Cannot cancel invoice in paid status")
        self.status = InvoiceStatus.CANCELLED
