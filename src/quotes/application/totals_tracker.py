"""Change detection for totals shown in an interactive editor.

Every edit reprices the whole document, but only a change of more than
the tolerance in subtotal, tax or total is worth re-emitting.  Emitted
totals are what downstream autosave keys on.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from quotes.domain.model.value_objects import CENT
from quotes.domain.service.pricing_engine import DocumentTotals

logger = structlog.get_logger(__name__)


class TotalsTracker:

    def __init__(self, tolerance: Decimal = CENT) -> None:
        self._tolerance = tolerance
        self._last: DocumentTotals | None = None

    @property
    def last(self) -> DocumentTotals | None:
        return self._last

    def update(self, totals: DocumentTotals) -> DocumentTotals | None:
        """Return *totals* if they should be emitted, otherwise None."""
        if not totals.differs_from(self._last, self._tolerance):
            return None
        logger.debug(
            "totals_changed",
            subtotal=str(totals.subtotal),
            tax_amount=str(totals.tax_amount),
            total_amount=str(totals.total_amount),
        )
        self._last = totals
        return totals

    def reset(self) -> None:
        self._last = None
