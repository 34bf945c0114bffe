"""Composition root — wires settings, logging and handlers together.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from quotes.application.apply_template import ApplyTemplateHandler
from quotes.application.finalize_quotation import FinalizeQuotationHandler
from quotes.application.prepare_invoice import PrepareInvoiceHandler
from quotes.application.price_quotation import PriceQuotationHandler
from quotes.application.totals_tracker import TotalsTracker
from quotes.config.logging import configure_logging
from quotes.config.settings import Settings, get_settings
from quotes.infrastructure.documents.json_quotation_document import (
    JsonQuotationDocument,
)
from quotes.infrastructure.documents.json_template_repository import (
    JsonTemplateRepository,
)


def init_app() -> Settings:
    settings = get_settings()
    configure_logging()
    return settings


def quotation_document(path: Path) -> JsonQuotationDocument:
    return JsonQuotationDocument(path)


def template_repository(path: Path) -> JsonTemplateRepository:
    return JsonTemplateRepository(path)


def price_quotation_handler() -> PriceQuotationHandler:
    return PriceQuotationHandler(default_tax_rate=get_settings().default_tax_rate)


def finalize_quotation_handler() -> FinalizeQuotationHandler:
    return FinalizeQuotationHandler()


def apply_template_handler(templates_path: Path) -> ApplyTemplateHandler:
    return ApplyTemplateHandler(template_repo=template_repository(templates_path))


def prepare_invoice_handler() -> PrepareInvoiceHandler:
    return PrepareInvoiceHandler(default_tax_rate=get_settings().default_tax_rate)


def totals_tracker() -> TotalsTracker:
    return TotalsTracker(tolerance=get_settings().totals_tolerance)
