"""Data models for line items, documents and their derived figures."""

from .discount import Discount, DiscountMode, DiscountType
from .display_number import DisplayNumber
from .document import Document, DocumentTotals, PricedDocument
from .line_item import ItemTotals, LineItem, PricedLine
from .payment import PaymentSummary
from .summary import DocumentSummary
from .validation_result import ValidationResult

__all__ = [
    "Discount",
    "DiscountMode",
    "DiscountType",
    "DisplayNumber",
    "Document",
    "DocumentSummary",
    "DocumentTotals",
    "ItemTotals",
    "LineItem",
    "PaymentSummary",
    "PricedDocument",
    "PricedLine",
    "ValidationResult",
]
