"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals.  Amounts are rendered as plain two-decimal
strings ("21535.00"); currency symbols are the presenter's business.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from quotes.domain.model.invoice import Invoice
from quotes.domain.model.line_item import LineItem
from quotes.domain.model.quotation import Quotation
from quotes.domain.model.value_objects import NumericInput, round2, to_decimal
from quotes.domain.service.pricing_engine import DocumentTotals


@dataclass(frozen=True)
class LineItemSpec:
    """Input: one row as entered (numbers may still be raw text)."""

    name: str
    quantity: NumericInput = 1
    unit_price: NumericInput = 0
    discount_percent: NumericInput = 0
    description: str = ""


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single line item as displayed to the user."""

    id: str
    name: str
    description: str | None
    quantity: str
    unit_price: str
    discount_percent: str
    line_total: str
    sort_order: int


@dataclass(frozen=True)
class TotalsDTO:
    subtotal: str
    discount: str
    subtotal_after_discount: str
    tax_rate: str
    tax_amount: str
    total_amount: str


@dataclass(frozen=True)
class QuotationDTO:
    """Output: a complete quotation as displayed to the user."""

    id: str | None
    quote_number: str | None
    title: str
    client_name: str
    status: str
    items: list[LineItemDTO]
    totals: TotalsDTO
    issue_date: str | None
    valid_until: str | None
    terms_conditions: str
    notes: str
    template_id: str | None


@dataclass(frozen=True)
class InvoiceDTO:
    id: str | None
    invoice_number: str | None
    client_name: str
    status: str
    totals: TotalsDTO
    issue_date: str | None
    due_date: str | None


# --- Mapping ------------------------------------------------------------------


def _amount(value: Decimal) -> str:
    return f"{round2(value):.2f}"


def _number(value: NumericInput) -> str:
    """Echo a numeric input in its coerced form, without padding."""
    return str(to_decimal(value))


def line_item_to_dto(item: LineItem) -> LineItemDTO:
    return LineItemDTO(
        id=item.id,
        name=item.name or "",
        description=item.description,
        quantity=_number(item.quantity),
        unit_price=_number(item.unit_price),
        discount_percent=_number(item.discount_percent),
        line_total=_amount(item.line_total),
        sort_order=item.sort_order,
    )


def totals_to_dto(totals: DocumentTotals) -> TotalsDTO:
    return TotalsDTO(
        subtotal=_amount(totals.subtotal),
        discount=_amount(totals.discount),
        subtotal_after_discount=_amount(totals.subtotal_after_discount),
        tax_rate=_number(totals.tax_rate),
        tax_amount=_amount(totals.tax_amount),
        total_amount=_amount(totals.total_amount),
    )


def quotation_to_dto(quotation: Quotation) -> QuotationDTO:
    return QuotationDTO(
        id=quotation.id,
        quote_number=quotation.quote_number,
        title=quotation.title,
        client_name=quotation.client_name,
        status=quotation.status.value,
        items=[line_item_to_dto(item) for item in quotation.items],
        totals=totals_to_dto(quotation.totals),
        issue_date=quotation.issue_date.isoformat() if quotation.issue_date else None,
        valid_until=quotation.valid_until.isoformat() if quotation.valid_until else None,
        terms_conditions=quotation.terms_conditions,
        notes=quotation.notes,
        template_id=quotation.template_id,
    )


def invoice_to_dto(invoice: Invoice) -> InvoiceDTO:
    return InvoiceDTO(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        client_name=invoice.client_name,
        status=invoice.status.value,
        totals=totals_to_dto(invoice.totals),
        issue_date=invoice.issue_date.isoformat() if invoice.issue_date else None,
        due_date=invoice.due_date.isoformat() if invoice.due_date else None,
    )
