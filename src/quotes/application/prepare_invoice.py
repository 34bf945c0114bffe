"""Application service: Prepare Invoice use case."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Callable

import structlog

from quotes.application.dto import InvoiceDTO, invoice_to_dto
from quotes.domain.model.invoice import Invoice
from quotes.domain.model.value_objects import DEFAULT_TAX_RATE, ZERO, NumericInput
from quotes.domain.service.numbering import invoice_number, utc_now

logger = structlog.get_logger(__name__)


class PrepareInvoiceHandler:

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        default_tax_rate: NumericInput = DEFAULT_TAX_RATE,
    ) -> None:
        self._clock = clock
        self._default_tax_rate = default_tax_rate

    def handle(
        self,
        subtotal: NumericInput,
        client_name: str = "",
        tax_rate: NumericInput = None,
        discount: NumericInput = ZERO,
        due_date: date | None = None,
    ) -> InvoiceDTO:
        """Number a new invoice and compute its totals.

        The client is optional, matching invoices raised without one.
        """
        now = self._clock()
        invoice = Invoice(
            id=uuid.uuid4().hex,
            invoice_number=invoice_number(now),
            client_name=(client_name or "").strip(),
            subtotal=subtotal,
            tax_rate=self._default_tax_rate if tax_rate is None else tax_rate,
            discount=discount,
            issue_date=now.date(),
            due_date=due_date,
        )

        dto = invoice_to_dto(invoice)
        logger.info(
            "invoice_prepared",
            invoice_number=invoice.invoice_number,
            total_amount=dto.totals.total_amount,
        )
        return dto
