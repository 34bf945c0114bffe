"""Tests for the PrepareInvoice use case."""

from datetime import date

from quotes.application.prepare_invoice import PrepareInvoiceHandler
from quotes.domain.service.numbering import invoice_number
from tests.fakes import FakeClock


class TestPrepareInvoice:

    def test_numbers_and_totals(self):
        clock = FakeClock()
        handler = PrepareInvoiceHandler(clock=clock)
        dto = handler.handle(subtotal="1000", client_name=" Acme ", tax_rate=18, discount=100)
        assert dto.invoice_number == invoice_number(clock.now)
        assert dto.client_name == "Acme"
        assert dto.status == "draft"
        assert dto.issue_date == "2024-03-15"
        assert dto.totals.total_amount == "1062.00"

    def test_default_tax_rate(self):
        handler = PrepareInvoiceHandler(clock=FakeClock(), default_tax_rate="5")
        dto = handler.handle(subtotal=200)
        assert dto.totals.tax_amount == "10.00"
        assert dto.client_name == ""

    def test_due_date_passed_through(self):
        handler = PrepareInvoiceHandler(clock=FakeClock())
        dto = handler.handle(subtotal=0, due_date=date(2024, 4, 14))
        assert dto.due_date == "2024-04-14"

    def test_sub_cent_subtotal_rounds_half_up_everywhere(self):
        handler = PrepareInvoiceHandler(clock=FakeClock())
        dto = handler.handle(subtotal="0.125", tax_rate=0, discount=0)
        assert dto.totals.subtotal == "0.13"
        assert dto.totals.subtotal_after_discount == "0.13"
        assert dto.totals.tax_amount == "0.00"
        assert dto.totals.total_amount == "0.13"

    def test_sub_cent_discount_rounds_half_up(self):
        handler = PrepareInvoiceHandler(clock=FakeClock())
        dto = handler.handle(subtotal=10, tax_rate=0, discount="2.345")
        assert dto.totals.discount == "2.35"
