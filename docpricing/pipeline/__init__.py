"""Pipeline stages for pricing and numbering documents."""

from .aggregator import aggregate
from .discount_allocator import allocate_global_discount, reset_item_discounts, switch_discount_mode
from .item_calculator import compute_item, compute_line, effective_vat_rate
from .numbering import assign_numbers, number_with_fallback
from .payment_status import derive_payment_status
from .recompute import recompute
from .validation import validate_discount_configuration

__all__ = [
    "aggregate",
    "allocate_global_discount",
    "assign_numbers",
    "compute_item",
    "compute_line",
    "derive_payment_status",
    "effective_vat_rate",
    "number_with_fallback",
    "recompute",
    "reset_item_discounts",
    "switch_discount_mode",
    "validate_discount_configuration",
]
