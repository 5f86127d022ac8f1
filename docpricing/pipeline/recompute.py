"""Single reducer from a document's raw inputs to all derived figures."""

import logging
from typing import Optional

from ..models.discount import DiscountMode
from ..models.document import Document, PricedDocument
from ..models.line_item import PricedLine
from .aggregator import aggregate
from .discount_allocator import allocate_global_discount
from .item_calculator import compute_line, effective_vat_rate

logger = logging.getLogger(__name__)


def recompute(document: Document, vat_rate: Optional[float] = None) -> PricedDocument:
    """Recompute every derived figure of document from its raw inputs.

    Called once per edit; nothing from a previous run is reused.

    Steps:
    1. GLOBAL mode: allocate the global discount over the raw items
    2. Price every line with the item calculator
    3. Fold the line totals into document totals

    Args:
        document: Document snapshot
        vat_rate: Explicit VAT rate; None resolves the document's stored rate
            and then the configured default (0 when VAT is disabled)

    Returns:
        PricedDocument with priced lines and totals
    """
    if vat_rate is None or not document.vat_enabled:
        rate = effective_vat_rate(document.vat_enabled, document.vat_rate)
    else:
        rate = effective_vat_rate(True, vat_rate)

    items = document.items
    if document.discount_mode is DiscountMode.GLOBAL and document.global_discount is not None:
        items = allocate_global_discount(
            items,
            document.global_discount.type,
            document.global_discount.value
        )

    lines = [PricedLine(item=item, totals=compute_line(item, document.vat_enabled, rate)) for item in items]
    totals = aggregate(line.totals for line in lines)

    logger.debug(
        f"Document {document.id}: {len(lines)} lines, grand total {totals.grand_total:.2f}"
    )
    return PricedDocument(document=document, lines=lines, totals=totals, vat_rate=rate)
