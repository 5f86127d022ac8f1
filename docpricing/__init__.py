"""Pricing, discount, tax and display-numbering core for quotations and invoices."""

from .pipeline import (
    aggregate,
    allocate_global_discount,
    assign_numbers,
    compute_item,
    recompute,
)

__version__ = "0.1.0"

__all__ = [
    "aggregate",
    "allocate_global_discount",
    "assign_numbers",
    "compute_item",
    "recompute",
]
