"""Abstract repository for quotation templates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from quotes.domain.model.template import QuotationTemplate


class TemplateRepository(ABC):

    @abstractmethod
    def get_by_id(self, template_id: str) -> QuotationTemplate | None:
        """Return a template by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[QuotationTemplate]:
        """Return every available template, ordered by name."""
