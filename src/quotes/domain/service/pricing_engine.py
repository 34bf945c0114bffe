"""Pricing engine: line totals and document totals for quotations and invoices.

Pure functions only.  Nothing here touches shared state or performs I/O,
so callers may use it from any thread without coordination.

The engine has a single error policy: coerce, never throw.  Missing or
non-numeric input counts as zero so that an unfinished document can
always be priced and saved.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Iterable, Protocol

from quotes.domain.model.value_objects import (
    ARITHMETIC,
    CENT,
    HUNDRED,
    ZERO,
    NumericInput,
    is_blank,
    round2,
    to_decimal,
)

__all__ = [
    "DocumentTotals",
    "PricedLine",
    "compute_document_totals",
    "compute_header_totals",
    "compute_line_total",
    "round2",
    "to_decimal",
]


class PricedLine(Protocol):
    """Anything carrying the three numeric inputs of a line plus its name."""

    name: str
    quantity: NumericInput
    unit_price: NumericInput
    discount_percent: NumericInput


@dataclass(frozen=True)
class DocumentTotals:
    """Totals derived from a document's lines and header parameters.

    Never stored independently of the inputs: recompute instead of
    updating in place.
    """

    subtotal: Decimal
    discount: Decimal
    subtotal_after_discount: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total_amount: Decimal

    def differs_from(
        self,
        previous: DocumentTotals | None,
        tolerance: Decimal = CENT,
    ) -> bool:
        """True when any emitted amount moved by more than *tolerance*.

        Reactive callers use this to decide whether to re-emit totals
        (and trigger autosave); it does not affect the computation.
        """
        if previous is None:
            return True
        return any(
            abs(current - before) > tolerance
            for current, before in (
                (self.subtotal, previous.subtotal),
                (self.tax_amount, previous.tax_amount),
                (self.total_amount, previous.total_amount),
            )
        )


def compute_line_total(item: PricedLine) -> Decimal:
    """``round2(quantity * unit_price * (1 - discount_percent / 100))``."""
    quantity = to_decimal(item.quantity)
    unit_price = to_decimal(item.unit_price)
    discount_pct = to_decimal(item.discount_percent)

    with localcontext(ARITHMETIC):
        subtotal = quantity * unit_price
        discount = subtotal * (discount_pct / HUNDRED)
        total = subtotal - discount

    return round2(total)


def compute_header_totals(
    subtotal: NumericInput,
    tax_rate: NumericInput,
    discount: NumericInput,
) -> DocumentTotals:
    """Apply the flat header discount and tax to an already known subtotal."""
    subtotal_amount = to_decimal(subtotal)
    discount_amount = to_decimal(discount)
    rate = to_decimal(tax_rate)

    with localcontext(ARITHMETIC):
        after_discount = max(ZERO, subtotal_amount - discount_amount)
        tax_amount = round2(after_discount * rate / HUNDRED)
        total_amount = round2(after_discount + tax_amount)

    return DocumentTotals(
        subtotal=subtotal_amount,
        discount=discount_amount,
        subtotal_after_discount=after_discount,
        tax_rate=rate,
        tax_amount=tax_amount,
        total_amount=total_amount,
    )


def compute_document_totals(
    items: Iterable[PricedLine],
    tax_rate: NumericInput,
    discount: NumericInput,
) -> DocumentTotals:
    """Price a whole document.

    Lines whose name is blank are skipped even if they carry amounts.
    Line totals are summed in the order given.
    """
    running = ZERO
    with localcontext(ARITHMETIC):
        for item in items:
            if is_blank(item.name):
                continue
            running += compute_line_total(item)

    return compute_header_totals(round2(running), tax_rate, discount)
