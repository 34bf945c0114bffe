"""Unit tests for document numbering."""

from datetime import datetime, timezone

from quotes.domain.service.numbering import invoice_number, quotation_number


class TestNumbering:

    def test_quotation_number_format(self):
        now = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)
        millis = str(int(now.timestamp() * 1000))
        assert quotation_number(now) == f"Q-2024-{millis[-6:]}"

    def test_invoice_number_format(self):
        now = datetime(2025, 1, 2, tzinfo=timezone.utc)
        number = invoice_number(now)
        assert number.startswith("INV-2025-")
        assert len(number.rsplit("-", 1)[1]) == 6
