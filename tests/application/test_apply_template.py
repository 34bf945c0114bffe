"""Tests for the ApplyTemplate use case."""

from decimal import Decimal

import pytest

from quotes.application.apply_template import ApplyTemplateHandler
from quotes.domain.exceptions import EntityNotFoundError
from quotes.domain.model.line_item import LineItem
from quotes.domain.model.quotation import Quotation
from quotes.domain.model.template import QuotationTemplate
from tests.fakes import FakeTemplateRepository


def _setup() -> tuple[ApplyTemplateHandler, Quotation]:
    template = QuotationTemplate(
        id="web",
        name="Website",
        line_items=[
            LineItem(name="Design", quantity=1, unit_price=500),
            LineItem(name="Hosting", quantity=12, unit_price=20, discount_percent=10),
        ],
        tax_rate=Decimal("5"),
        terms_conditions="Net 30",
    )
    handler = ApplyTemplateHandler(FakeTemplateRepository([template]))
    return handler, Quotation.new(title="Site", client_name="Acme")


class TestApplyTemplate:

    def test_applies_and_reprices(self):
        handler, quotation = _setup()
        dto = handler.handle(quotation, "web")
        assert [i.name for i in dto.items] == ["Design", "Hosting"]
        assert dto.items[1].line_total == "216.00"
        assert dto.totals.subtotal == "716.00"
        assert dto.totals.tax_amount == "35.80"
        assert dto.terms_conditions == "Net 30"
        assert dto.template_id == "web"

    def test_unknown_template_rejected(self):
        handler, quotation = _setup()
        with pytest.raises(EntityNotFoundError, match="Template not found"):
            handler.handle(quotation, "missing")
