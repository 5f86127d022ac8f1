"""PaymentSummary data model derived from a document's grand total and payments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

PAYMENT_STATUSES = ("paid", "partial", "draft")


@dataclass(frozen=True)
class PaymentSummary:
    """Payment state of an invoice.

    Attributes:
        total: Grand total the payments are measured against
        paid: Amount paid, capped at total
        remaining: Outstanding amount rounded to 2 decimals (0 when <= 0.01)
        status: "paid", "partial" or "draft"
    """

    total: float
    paid: float
    remaining: float
    status: str

    def __post_init__(self):
        if self.status not in PAYMENT_STATUSES:
            raise ValueError(
                f"status must be one of {PAYMENT_STATUSES}, got '{self.status}'"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "paid": self.paid,
            "remaining": self.remaining,
            "status": self.status,
        }
