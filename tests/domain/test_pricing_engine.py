"""Unit tests for the pricing engine."""

from decimal import Decimal

import pytest

from quotes.domain.model.line_item import LineItem
from quotes.domain.service.pricing_engine import (
    DocumentTotals,
    compute_document_totals,
    compute_header_totals,
    compute_line_total,
)


def _line(name="Design", qty=1, price=0, disc=0) -> LineItem:
    return LineItem(name=name, quantity=qty, unit_price=price, discount_percent=disc)


# ── Line totals ──────────────────────────────────────────────────────────────


class TestLineTotal:

    @pytest.mark.parametrize(
        "qty, price, disc",
        [("", 10, 0), (5, "", 0), ("", "", "")],
    )
    def test_empty_field_counts_as_zero(self, qty, price, disc):
        assert compute_line_total(_line(qty=qty, price=price, disc=disc)) == Decimal("0")

    def test_empty_discount_means_no_discount(self):
        assert compute_line_total(_line(qty=2, price=100, disc="")) == Decimal("200.00")

    def test_rounds_half_away_from_zero(self):
        assert compute_line_total(_line(qty=3, price=10.005)) == Decimal("30.02")

    def test_discount_applied(self):
        assert compute_line_total(_line(qty=2, price=100, disc=10)) == Decimal("180.00")

    def test_string_inputs(self):
        assert compute_line_total(_line(qty="2", price="100.5", disc="")) == Decimal("201.00")

    def test_garbage_input_never_raises(self):
        assert compute_line_total(_line(qty="lots", price=None, disc="n/a")) == Decimal("0")

    def test_negative_quantity_allowed(self):
        assert compute_line_total(_line(qty=-1, price=100)) == Decimal("-100.00")

    def test_discount_over_hundred_not_clamped(self):
        assert compute_line_total(_line(qty=1, price=100, disc=150)) == Decimal("-50.00")

    def test_result_is_cents(self):
        assert str(compute_line_total(_line(qty=2, price=100, disc=10))) == "180.00"


# ── Document totals ──────────────────────────────────────────────────────────


class TestDocumentTotals:

    def test_end_to_end_scenario(self):
        items = [
            _line("Design", qty=10, price=500),
            _line("Dev", qty=20, price=750, disc=5),
        ]
        assert [compute_line_total(i) for i in items] == [
            Decimal("5000.00"),
            Decimal("14250.00"),
        ]

        totals = compute_document_totals(items, tax_rate=18, discount=1000)

        assert totals.subtotal == Decimal("19250.00")
        assert totals.subtotal_after_discount == Decimal("18250.00")
        assert totals.tax_amount == Decimal("3285.00")
        assert totals.total_amount == Decimal("21535.00")

    def test_header_discount_never_goes_negative(self):
        totals = compute_document_totals([_line(qty=1, price=50)], tax_rate=18, discount=100)
        assert totals.subtotal == Decimal("50.00")
        assert totals.subtotal_after_discount == Decimal("0")
        assert totals.tax_amount == Decimal("0")
        assert totals.total_amount == Decimal("0")

    def test_blank_named_lines_excluded(self):
        blank = _line(name="", qty=5, price=100)
        whitespace = _line(name="   ", qty=1, price=100)
        assert compute_line_total(blank) == Decimal("500.00")

        totals = compute_document_totals(
            [_line(qty=1, price=10), blank, whitespace], tax_rate=0, discount=0
        )
        assert totals.subtotal == Decimal("10.00")

    def test_line_totals_rounded_before_summing(self):
        items = [_line("A", qty=1, price="0.005"), _line("B", qty=1, price="0.005")]
        totals = compute_document_totals(items, tax_rate=0, discount=0)
        assert totals.subtotal == Decimal("0.02")

    def test_identical_inputs_identical_results(self):
        items = [_line("A", qty=3, price=10.005, disc=7), _line("B", qty="2", price="19.99")]
        first = compute_document_totals(items, tax_rate="18", discount="5")
        second = compute_document_totals(items, tax_rate="18", discount="5")
        assert first == second

    def test_empty_header_values_are_zero(self):
        totals = compute_document_totals([_line(qty=1, price=100)], tax_rate="", discount="")
        assert totals.discount == Decimal("0")
        assert totals.tax_amount == Decimal("0")
        assert totals.total_amount == Decimal("100.00")

    def test_no_items(self):
        totals = compute_document_totals([], tax_rate=18, discount=0)
        assert totals.total_amount == Decimal("0")

    def test_tax_rounded_to_cents(self):
        # 33.33 * 18% = 5.9994
        totals = compute_document_totals([_line(qty=1, price="33.33")], tax_rate=18, discount=0)
        assert totals.tax_amount == Decimal("6.00")
        assert totals.total_amount == Decimal("39.33")


class TestHeaderTotals:

    def test_invoice_style_totals(self):
        totals = compute_header_totals("1000", 18, 100)
        assert totals.subtotal_after_discount == Decimal("900")
        assert totals.tax_amount == Decimal("162.00")
        assert totals.total_amount == Decimal("1062.00")


# ── Change detection ─────────────────────────────────────────────────────────


def _totals(subtotal="100.00", tax="18.00", total="118.00") -> DocumentTotals:
    return DocumentTotals(
        subtotal=Decimal(subtotal),
        discount=Decimal("0"),
        subtotal_after_discount=Decimal(subtotal),
        tax_rate=Decimal("18"),
        tax_amount=Decimal(tax),
        total_amount=Decimal(total),
    )


class TestDiffersFrom:

    def test_first_totals_always_differ(self):
        assert _totals().differs_from(None)

    def test_same_totals_do_not_differ(self):
        assert not _totals().differs_from(_totals())

    def test_change_of_one_cent_is_ignored(self):
        assert not _totals(total="118.01").differs_from(_totals())

    def test_larger_change_is_reported(self):
        assert _totals(tax="18.02").differs_from(_totals())

    def test_custom_tolerance(self):
        assert not _totals(subtotal="100.50").differs_from(_totals(), tolerance=Decimal("1"))
