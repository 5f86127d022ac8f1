"""LineItem data model and its derived monetary totals."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from ..number_normalizer import to_amount
from .discount import Discount

_INVARIANT_TOLERANCE = 1e-9


@dataclass
class LineItem:
    """Represents one row of a quotation or invoice.

    Only raw inputs are stored; every monetary figure is derived by the
    item calculator.

    Attributes:
        quantity: Quantity (expected > 0, non-positive contributes 0)
        unit_price: Unit price (expected >= 0, negative contributes 0)
        discount: Per-item discount specification
        item_id: Optional identifier supplied by the persistence layer
        description: Free-text description
    """

    quantity: float
    unit_price: float
    discount: Discount = field(default_factory=Discount.none)
    item_id: Optional[str] = None
    description: str = ""

    def __post_init__(self):
        """Coerce malformed numerics to 0 so the item can always be priced."""
        self.quantity = to_amount(self.quantity)
        self.unit_price = to_amount(self.unit_price)
        if not isinstance(self.discount, Discount):
            self.discount = Discount.none()

    @property
    def subtotal(self) -> float:
        """quantity * unit_price, or 0 when either input is out of range."""
        if self.quantity <= 0 or self.unit_price < 0:
            return 0.0
        subtotal = self.quantity * self.unit_price
        return subtotal if math.isfinite(subtotal) else 0.0

    def with_discount(self, discount: Discount) -> LineItem:
        """Return a copy carrying a different discount."""
        return replace(self, discount=discount)


@dataclass(frozen=True)
class ItemTotals:
    """Derived monetary figures for one line item.

    Attributes:
        subtotal: quantity * unit_price
        discount_amount: Currency discount, within [0, subtotal]
        post_discount_amount: subtotal - discount_amount
        tax: VAT on post_discount_amount (0 when VAT is disabled)
        line_total: post_discount_amount + tax
    """

    subtotal: float
    discount_amount: float
    post_discount_amount: float
    tax: float
    line_total: float

    def __post_init__(self):
        """Validate the line invariants."""
        slack = _INVARIANT_TOLERANCE * max(1.0, abs(self.subtotal))
        if self.discount_amount < -slack or self.discount_amount - self.subtotal > slack:
            raise ValueError(
                f"discount_amount must be within [0, subtotal], "
                f"got {self.discount_amount} for subtotal {self.subtotal}"
            )

        if not math.isclose(
            self.post_discount_amount,
            self.subtotal - self.discount_amount,
            rel_tol=_INVARIANT_TOLERANCE,
            abs_tol=_INVARIANT_TOLERANCE,
        ):
            raise ValueError(
                f"post_discount_amount must equal subtotal - discount_amount, "
                f"got {self.post_discount_amount}"
            )

        if not math.isclose(
            self.line_total,
            self.post_discount_amount + self.tax,
            rel_tol=_INVARIANT_TOLERANCE,
            abs_tol=_INVARIANT_TOLERANCE,
        ):
            raise ValueError(
                f"line_total must equal post_discount_amount + tax, got {self.line_total}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subtotal": self.subtotal,
            "discount_amount": self.discount_amount,
            "post_discount_amount": self.post_discount_amount,
            "tax": self.tax,
            "line_total": self.line_total,
        }


@dataclass(frozen=True)
class PricedLine:
    """A line item together with the totals computed for it."""

    item: LineItem
    totals: ItemTotals
