"""Discount value type shared by line items and document-level configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from ..number_normalizer import clamp, to_amount


class DiscountType(str, Enum):
    """How a discount value is interpreted."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"

    @classmethod
    def parse(cls, value: Union[str, "DiscountType", None]) -> "DiscountType":
        """Parse a discount type, defaulting to PERCENTAGE for unknown values."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in ("fixed", "amount"):
                return cls.FIXED
        return cls.PERCENTAGE


class DiscountMode(str, Enum):
    """Whether discounts are entered per item or allocated from one global value."""

    PER_ITEM = "per_item"
    GLOBAL = "global"

    @classmethod
    def parse(cls, value: Union[str, "DiscountMode", None]) -> "DiscountMode":
        """Parse a discount mode; "individual" is accepted as PER_ITEM."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == "global":
            return cls.GLOBAL
        return cls.PER_ITEM


@dataclass(frozen=True)
class Discount:
    """A discount specification.

    Normalized at construction so downstream code never re-clamps:
    non-finite or negative values become 0 and percentages are capped at 100.
    A fixed amount can only be bounded once the subtotal is known, see
    ``amount_for``.

    Attributes:
        type: PERCENTAGE or FIXED
        value: Percentage in [0, 100] or a currency amount >= 0
    """

    type: DiscountType = DiscountType.PERCENTAGE
    value: float = 0.0

    def __post_init__(self):
        discount_type = DiscountType.parse(self.type)
        value = max(0.0, to_amount(self.value))
        if discount_type is DiscountType.PERCENTAGE:
            value = min(value, 100.0)
        object.__setattr__(self, "type", discount_type)
        object.__setattr__(self, "value", value)

    @classmethod
    def none(cls) -> Discount:
        """No discount (percentage 0)."""
        return cls(DiscountType.PERCENTAGE, 0.0)

    @classmethod
    def percentage(cls, value: Any) -> Discount:
        return cls(DiscountType.PERCENTAGE, value)

    @classmethod
    def fixed(cls, value: Any) -> Discount:
        return cls(DiscountType.FIXED, value)

    @property
    def is_zero(self) -> bool:
        return self.value == 0.0

    def amount_for(self, subtotal: float) -> float:
        """Currency amount of this discount against subtotal, within [0, subtotal]."""
        base = max(0.0, to_amount(subtotal))
        if self.type is DiscountType.PERCENTAGE:
            return min(base, base * (self.value / 100))
        return clamp(self.value, 0.0, base)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "value": self.value}
