"""JSON quotation documents read from and written to files.

A document is the editable state of one quotation.  ``line_total`` and
``totals`` are written out for the consumer's benefit but ignored on
load: they are always recomputed from the inputs.
"""

from __future__ import annotations

import json
from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path

from quotes.domain.exceptions import DocumentFormatError
from quotes.domain.model.line_item import LineItem, new_line_id
from quotes.domain.model.quotation import Quotation, QuotationStatus
from quotes.domain.model.value_objects import DEFAULT_TAX_RATE, NumericInput
from quotes.domain.service.pricing_engine import DocumentTotals


class JsonQuotationDocument:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> Quotation:
        raw = self._load_raw()
        if not isinstance(raw, dict):
            raise DocumentFormatError(
                f"{self._file_path}: expected a JSON object, got {type(raw).__name__}"
            )
        try:
            return self._to_domain(raw)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise DocumentFormatError(f"{self._file_path}: {exc}") from exc

    def save(self, quotation: Quotation) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(self.dumps(quotation), encoding="utf-8")

    @classmethod
    def dumps(cls, quotation: Quotation) -> str:
        return json.dumps(cls._to_raw(quotation), indent=2, ensure_ascii=False) + "\n"

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(quotation: Quotation) -> dict:
        return {
            "id": quotation.id,
            "quote_number": quotation.quote_number,
            "title": quotation.title,
            "client_name": quotation.client_name,
            "status": quotation.status.value,
            "description": quotation.description,
            "issue_date": _date_to_raw(quotation.issue_date),
            "valid_until": _date_to_raw(quotation.valid_until),
            "tax_rate": _number_to_raw(quotation.tax_rate),
            "discount": _number_to_raw(quotation.discount),
            "terms_conditions": quotation.terms_conditions,
            "notes": quotation.notes,
            "template_id": quotation.template_id,
            "created_at": quotation.created_at.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "name": item.name,
                    "description": item.description,
                    "quantity": _number_to_raw(item.quantity),
                    "unit_price": _number_to_raw(item.unit_price),
                    "discount_percent": _number_to_raw(item.discount_percent),
                    "sort_order": item.sort_order,
                    "line_total": str(item.line_total),
                }
                for item in quotation.items
            ],
            "totals": _totals_to_raw(quotation.totals),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Quotation:
        items = [
            LineItem(
                id=i.get("id") or new_line_id(),
                name=_text_from_raw(i.get("name")),
                description=_text_from_raw(i.get("description")),
                quantity=i.get("quantity", 1),
                unit_price=i.get("unit_price", 0),
                discount_percent=i.get("discount_percent", 0),
                sort_order=i.get("sort_order", index),
            )
            for index, i in enumerate(raw.get("items", []))
        ]
        if not items:
            items = [LineItem.blank()]

        created_at = raw.get("created_at")
        return Quotation(
            id=raw.get("id"),
            quote_number=raw.get("quote_number"),
            title=_text_from_raw(raw.get("title")),
            client_name=_text_from_raw(raw.get("client_name")),
            items=items,
            tax_rate=raw.get("tax_rate", DEFAULT_TAX_RATE),
            discount=raw.get("discount", 0),
            status=QuotationStatus(raw.get("status", QuotationStatus.DRAFT.value)),
            description=raw.get("description", ""),
            issue_date=_date_from_raw(raw.get("issue_date")),
            valid_until=_date_from_raw(raw.get("valid_until")),
            terms_conditions=raw.get("terms_conditions", ""),
            notes=raw.get("notes", ""),
            template_id=raw.get("template_id"),
            created_at=(
                datetime.fromisoformat(created_at)
                if created_at
                else datetime.now(timezone.utc)
            ),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> object:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DocumentFormatError(f"{self._file_path}: invalid JSON ({exc})") from exc


def _text_from_raw(value: object) -> str:
    return "" if value is None else str(value)


def _date_from_raw(value: str | None) -> date | None:
    if not value:
        return None
    return date.fromisoformat(value[:10])


def _date_to_raw(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _number_to_raw(value: NumericInput) -> NumericInput:
    """Decimals become strings; anything else is written back as entered."""
    if isinstance(value, Decimal):
        return str(value)
    return value


def _totals_to_raw(totals: DocumentTotals) -> dict:
    return {
        "subtotal": str(totals.subtotal),
        "discount": str(totals.discount),
        "subtotal_after_discount": str(totals.subtotal_after_discount),
        "tax_rate": str(totals.tax_rate),
        "tax_amount": str(totals.tax_amount),
        "total_amount": str(totals.total_amount),
    }
