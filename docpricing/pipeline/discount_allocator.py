"""Allocation of a document-wide discount across line items."""

import logging
from dataclasses import replace
from typing import Any, List, Sequence, Union

from ..models.discount import Discount, DiscountMode, DiscountType
from ..models.document import Document
from ..models.line_item import LineItem
from ..number_normalizer import clamp, to_amount

logger = logging.getLogger(__name__)


def allocate_global_discount(
    items: Sequence[LineItem],
    global_type: Union[DiscountType, str, None],
    global_value: Any
) -> List[LineItem]:
    """Rewrite every item's discount from one document-level discount.

    Args:
        items: Line items with their current quantity and unit price
        global_type: PERCENTAGE or FIXED
        global_value: Percentage or total currency amount to distribute

    Returns:
        New list of items; the input items are not modified

    Allocation rules:
    - global_value <= 0: every item gets no discount (percentage 0)
    - PERCENTAGE: every item gets the same clamped percentage of its own subtotal
    - FIXED: the amount is split by each item's share of the combined subtotal
      and every share is clamped to [0, item subtotal]; when the combined
      subtotal is 0 nothing is distributed

    Only raw subtotals are used, never a previous allocation, so calling this
    twice with the same inputs gives the same result.
    """
    value = to_amount(global_value)
    discount_type = DiscountType.parse(global_type)

    if value <= 0:
        return reset_item_discounts(items)

    if discount_type is DiscountType.PERCENTAGE:
        uniform = Discount.percentage(value)
        return [item.with_discount(uniform) for item in items]

    subtotals = [item.subtotal for item in items]
    combined = sum(subtotals)
    if combined <= 0:
        logger.debug(f"Fixed discount {value} not distributed: combined subtotal is 0")
        return reset_item_discounts(items)

    allocated = []
    for item, subtotal in zip(items, subtotals):
        share = subtotal / combined
        amount = clamp(value * share, 0.0, subtotal)
        allocated.append(item.with_discount(Discount.fixed(amount)))

    logger.debug(
        f"Distributed fixed discount {value} over {len(items)} items "
        f"(combined subtotal {combined})"
    )
    return allocated


def reset_item_discounts(items: Sequence[LineItem]) -> List[LineItem]:
    """Return copies of items with their discounts cleared (percentage 0)."""
    cleared = Discount.none()
    return [item.with_discount(cleared) for item in items]


def switch_discount_mode(document: Document, mode: Union[DiscountMode, str]) -> Document:
    """Return a copy of document in another discount mode.

    Every item's discount is reset to zero on any actual mode change. Leaving
    GLOBAL mode does not keep the last allocation as manual per-item values,
    and entering GLOBAL mode starts from an empty global discount.
    """
    new_mode = DiscountMode.parse(mode)
    if new_mode is document.discount_mode:
        return document

    return replace(
        document,
        items=reset_item_discounts(document.items),
        discount_mode=new_mode,
        global_discount=Discount.none() if new_mode is DiscountMode.GLOBAL else None
    )
