"""Document-level totals folded from per-item totals."""

import math
from typing import Iterable, Optional

from ..exceptions import TotalsConsistencyError
from ..models.document import DocumentTotals
from ..models.line_item import ItemTotals


def aggregate(
    item_totals: Iterable[ItemTotals],
    tolerance: Optional[float] = None
) -> DocumentTotals:
    """Sum item totals into document totals.

    Every surface that shows totals (editor, list, print, export) goes
    through this function so they never disagree.

    Args:
        item_totals: ItemTotals produced by the item calculator
        tolerance: Absolute tolerance of the consistency check
            (default: configured consistency tolerance, 1e-6)

    Returns:
        DocumentTotals

    Raises:
        TotalsConsistencyError: If grand_total differs from
            total_after_discount + total_vat, or total_after_discount differs
            from the sum of post-discount amounts, by more than tolerance
    """
    if tolerance is None:
        from ..config import get_consistency_tolerance
        tolerance = get_consistency_tolerance()

    total_before_discount = 0.0
    total_discount = 0.0
    post_discount_sum = 0.0
    total_vat = 0.0
    grand_total = 0.0

    for totals in item_totals:
        total_before_discount += totals.subtotal
        total_discount += totals.discount_amount
        post_discount_sum += totals.post_discount_amount
        total_vat += totals.tax
        grand_total += totals.line_total

    total_after_discount = total_before_discount - total_discount

    if not math.isclose(total_after_discount, post_discount_sum, rel_tol=1e-9, abs_tol=tolerance):
        raise TotalsConsistencyError(
            f"total_after_discount {total_after_discount} does not match "
            f"sum of post-discount amounts {post_discount_sum}"
        )

    if not math.isclose(grand_total, total_after_discount + total_vat, rel_tol=1e-9, abs_tol=tolerance):
        raise TotalsConsistencyError(
            f"grand_total {grand_total} does not match "
            f"total_after_discount + total_vat = {total_after_discount + total_vat}"
        )

    return DocumentTotals(
        total_before_discount=total_before_discount,
        total_discount=total_discount,
        total_after_discount=total_after_discount,
        total_vat=total_vat,
        grand_total=grand_total
    )
