"""DocumentSummary data model: what list, print and export views show per document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .display_number import DisplayNumber
from .document import DocumentTotals
from .payment import PaymentSummary


@dataclass(frozen=True)
class DocumentSummary:
    """Totals, display number and payment state of one persisted document.

    Attributes:
        document_id: Document identifier
        display_number: Computed display number
        totals: Aggregated totals
        payment: Payment state, None for documents that are not invoices
    """

    document_id: str
    display_number: DisplayNumber
    totals: DocumentTotals
    payment: Optional[PaymentSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "document_id": self.document_id,
            "display_number": self.display_number.number,
            "sequence": self.display_number.sequence,
            "number_degraded": self.display_number.degraded,
        }
        data.update(self.totals.to_dict())
        if self.payment is not None:
            data.update({
                "paid": self.payment.paid,
                "remaining": self.payment.remaining,
                "payment_status": self.payment.status,
            })
        return data
