"""JSON-file-backed implementation of TemplateRepository.

The catalog is a list of templates, each with its reusable content under
``template_data`` (an object, or that object encoded as a JSON string):

    [{"id": "web", "name": "Website", "template_data": {
        "lineItems": [{"item_name": "Design", "quantity": 1, "unit_price": 500}],
        "tax_rate": 18, "terms_conditions": "50% upfront"}}]
"""

from __future__ import annotations

import json
from pathlib import Path

from quotes.domain.exceptions import DocumentFormatError
from quotes.domain.model.line_item import LineItem
from quotes.domain.model.template import QuotationTemplate
from quotes.domain.model.value_objects import DEFAULT_TAX_RATE
from quotes.domain.repository.template_repository import TemplateRepository


class JsonTemplateRepository(TemplateRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- TemplateRepository interface -----------------------------------------

    def get_by_id(self, template_id: str) -> QuotationTemplate | None:
        for template in self.list_all():
            if template.id == template_id:
                return template
        return None

    def list_all(self) -> list[QuotationTemplate]:
        try:
            templates = [self._to_domain(raw) for raw in self._load_raw()]
        except (KeyError, AttributeError, TypeError) as exc:
            raise DocumentFormatError(f"{self._file_path}: malformed template ({exc})") from exc
        return sorted(templates, key=lambda t: t.name.lower())

    # --- Serialization --------------------------------------------------------

    def _to_domain(self, raw: dict) -> QuotationTemplate:
        content = raw.get("template_data") or {}
        if isinstance(content, str):
            try:
                content = json.loads(content)
            except json.JSONDecodeError as exc:
                raise DocumentFormatError(
                    f"{self._file_path}: template '{raw.get('id')}' has invalid template_data"
                ) from exc

        lines = content.get("lineItems")
        if not isinstance(lines, list):
            lines = []

        return QuotationTemplate(
            id=str(raw["id"]),
            name=raw.get("name", ""),
            description=raw.get("description") or "",
            line_items=[
                LineItem(
                    name=str(line.get("item_name") or ""),
                    description=line.get("description") or "",
                    quantity=line.get("quantity") or 1,
                    unit_price=line.get("unit_price") or 0,
                    discount_percent=line.get("discount_percentage") or 0,
                    sort_order=index,
                )
                for index, line in enumerate(lines)
            ],
            tax_rate=content.get("tax_rate", DEFAULT_TAX_RATE),
            terms_conditions=content.get("terms_conditions") or "",
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        if not self._file_path.exists():
            return []
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DocumentFormatError(f"{self._file_path}: invalid JSON ({exc})") from exc
        if not isinstance(raw, list):
            raise DocumentFormatError(f"{self._file_path}: expected a list of templates")
        return raw
