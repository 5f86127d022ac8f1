"""Document data model representing a quotation or invoice being priced."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from .discount import Discount, DiscountMode
from .line_item import LineItem, PricedLine

CreatedAt = Union[datetime, date, str, None]


@dataclass
class Document:
    """Represents a quotation or invoice snapshot.

    Attributes:
        id: Identifier assigned by the persistence layer
        created_at: Creation timestamp, the sole input to display numbering
        items: Raw line items
        discount_mode: PER_ITEM or GLOBAL
        global_discount: Document-level discount, only kept in GLOBAL mode
        vat_enabled: Whether VAT applies to this document
        vat_rate: Stored VAT rate, None to use the configured default
    """

    id: str
    created_at: CreatedAt = None
    items: List[LineItem] = field(default_factory=list)
    discount_mode: DiscountMode = DiscountMode.PER_ITEM
    global_discount: Optional[Discount] = None
    vat_enabled: bool = True
    vat_rate: Optional[float] = None

    def __post_init__(self):
        """Normalize mode and drop global configuration outside GLOBAL mode."""
        self.id = str(self.id)
        self.discount_mode = DiscountMode.parse(self.discount_mode)
        if self.discount_mode is DiscountMode.PER_ITEM:
            self.global_discount = None
        elif self.global_discount is None:
            self.global_discount = Discount.none()


@dataclass(frozen=True)
class DocumentTotals:
    """Document-level totals folded from item totals.

    Attributes:
        total_before_discount: Sum of item subtotals
        total_discount: Sum of item discount amounts
        total_after_discount: total_before_discount - total_discount
        total_vat: Sum of item taxes
        grand_total: Sum of item line totals
    """

    total_before_discount: float = 0.0
    total_discount: float = 0.0
    total_after_discount: float = 0.0
    total_vat: float = 0.0
    grand_total: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_before_discount": self.total_before_discount,
            "total_discount": self.total_discount,
            "total_after_discount": self.total_after_discount,
            "total_vat": self.total_vat,
            "grand_total": self.grand_total,
        }


@dataclass(frozen=True)
class PricedDocument:
    """Result of recomputing a document from its raw inputs."""

    document: Document
    lines: List[PricedLine]
    totals: DocumentTotals
    vat_rate: float
