"""Editor-boundary validation of discount configuration.

The pricing core clamps out-of-range values instead of rejecting them. The
editor still has to refuse them before saving, so these checks run on the
raw record as entered, before it is turned into clamped domain models.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from ..models.discount import DiscountMode, DiscountType
from ..models.validation_result import ValidationResult

if TYPE_CHECKING:
    from ..api.records import DocumentRecord, LineItemRecord


def _combined_subtotal(items: Sequence[LineItemRecord]) -> float:
    return sum(item.to_line_item().subtotal for item in items)


def validate_global_discount(
    discount_type: DiscountType,
    value: float,
    items: Sequence[LineItemRecord]
) -> List[str]:
    """Check a document-level discount.

    Returns:
        List of error messages (empty when valid)
    """
    discount_type = DiscountType.parse(discount_type)
    errors = []
    if value < 0:
        errors.append("Discount amount cannot be negative")
    elif discount_type is DiscountType.PERCENTAGE and value > 100:
        errors.append("Discount percentage must be between 0 and 100")
    elif discount_type is DiscountType.FIXED:
        combined = _combined_subtotal(items)
        if value > combined:
            errors.append(
                f"Fixed discount cannot exceed total subtotal ({value:.2f} > {combined:.2f})"
            )
    return errors


def validate_item_discounts(items: Sequence[LineItemRecord]) -> List[str]:
    """Check each item's own discount.

    Returns:
        List of error messages (empty when valid)
    """
    errors = []
    for index, item in enumerate(items, start=1):
        label = item.description or f"Item {index}"
        value = item.raw_discount_value
        if item.effective_discount_type is DiscountType.PERCENTAGE:
            if not 0 <= value <= 100:
                errors.append(f'Item "{label}" has invalid discount percentage')
        else:
            subtotal = item.to_line_item().subtotal
            if value < 0 or value > subtotal:
                errors.append(f'Item "{label}" discount cannot exceed subtotal')
    return errors


def validate_discount_configuration(record: DocumentRecord) -> ValidationResult:
    """Validate a draft's discount configuration and assign status (OK/REVIEW).

    GLOBAL mode checks only the global discount (item discounts are derived
    from it); PER_ITEM mode checks every item's own discount.
    """
    if record.effective_discount_mode is DiscountMode.GLOBAL:
        errors = validate_global_discount(
            DiscountType.parse(record.discount_type),
            record.discount_value,
            record.items
        )
    else:
        errors = validate_item_discounts(record.items)

    return ValidationResult(status="OK" if not errors else "REVIEW", errors=errors)
