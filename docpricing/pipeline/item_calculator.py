"""Per-line monetary derivation: discount, post-discount amount, tax and total."""

from typing import Any, Optional, Union

from ..models.discount import Discount, DiscountType
from ..models.line_item import ItemTotals, LineItem
from ..number_normalizer import to_amount


def compute_item(
    quantity: Any,
    unit_price: Any,
    discount_type: Union[DiscountType, str, None],
    discount_value: Any,
    vat_enabled: bool,
    vat_rate: Any
) -> ItemTotals:
    """Compute the derived totals of one line item.

    Args:
        quantity: Item quantity (<= 0 contributes 0)
        unit_price: Unit price (< 0 contributes 0)
        discount_type: PERCENTAGE or FIXED
        discount_value: Percentage (clamped to [0, 100]) or currency amount
            (clamped to [0, subtotal])
        vat_enabled: Whether VAT applies
        vat_rate: VAT rate as a fraction, e.g. 0.15 (negative counts as 0)

    Returns:
        ItemTotals with subtotal, discount_amount, post_discount_amount,
        tax and line_total

    Never raises on numeric input: every value is clamped to its valid range.
    """
    item = LineItem(
        quantity=quantity,
        unit_price=unit_price,
        discount=Discount(DiscountType.parse(discount_type), discount_value)
    )
    return compute_line(item, vat_enabled, vat_rate)


def compute_line(item: LineItem, vat_enabled: bool, vat_rate: Any) -> ItemTotals:
    """Compute the derived totals of an existing LineItem."""
    subtotal = item.subtotal
    discount_amount = item.discount.amount_for(subtotal)
    post_discount_amount = subtotal - discount_amount

    rate = max(0.0, to_amount(vat_rate))
    tax = post_discount_amount * rate if vat_enabled else 0.0

    return ItemTotals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        post_discount_amount=post_discount_amount,
        tax=tax,
        line_total=post_discount_amount + tax
    )


def effective_vat_rate(
    vat_enabled: bool,
    stored_rate: Optional[Any] = None,
    default_rate: Optional[float] = None
) -> float:
    """Resolve the VAT rate a document is priced with.

    - VAT disabled -> 0
    - a numeric stored rate (from the persisted document) wins
    - otherwise default_rate, or the configured rate when that is None
    """
    if not vat_enabled:
        return 0.0

    if stored_rate is not None and not isinstance(stored_rate, bool):
        if isinstance(stored_rate, (int, float)) or (isinstance(stored_rate, str) and stored_rate.strip()):
            return max(0.0, to_amount(stored_rate))

    if default_rate is None:
        from ..config import get_vat_rate
        default_rate = get_vat_rate()
    return max(0.0, to_amount(default_rate))
