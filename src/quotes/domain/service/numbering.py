"""Human-readable document numbers.

Numbers look like ``Q-2024-481516``: a prefix, the year and the last six
digits of the creation time in epoch milliseconds.
"""

from __future__ import annotations

from datetime import datetime, timezone

QUOTATION_PREFIX = "Q"
INVOICE_PREFIX = "INV"


def document_number(prefix: str, now: datetime) -> str:
    millis = int(now.timestamp() * 1000)
    return f"{prefix}-{now.year}-{str(millis)[-6:]}"


def quotation_number(now: datetime) -> str:
    return document_number(QUOTATION_PREFIX, now)


def invoice_number(now: datetime) -> str:
    return document_number(INVOICE_PREFIX, now)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
