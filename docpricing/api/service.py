"""Entry points for the editor, list/detail, print and export collaborators.

Every surface goes through these functions so the totals and numbers it
shows are identical to what every other surface shows.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..config import get_numbering_prefix
from ..models.display_number import DisplayNumber
from ..models.document import PricedDocument
from ..models.summary import DocumentSummary
from ..models.validation_result import ValidationResult
from ..pipeline.numbering import assign_degraded_numbers, assign_numbers, number_with_fallback
from ..pipeline.payment_status import derive_payment_status
from ..pipeline.recompute import recompute
from ..pipeline.validation import validate_discount_configuration
from .records import DocumentRecord

logger = logging.getLogger(__name__)

RawRecord = Union[DocumentRecord, Mapping[str, Any]]


def load_record(raw: RawRecord) -> DocumentRecord:
    """Validate a raw persistence row into a DocumentRecord."""
    if isinstance(raw, DocumentRecord):
        return raw
    return DocumentRecord.model_validate(raw)


def price_record(raw: RawRecord, vat_rate: Optional[float] = None) -> PricedDocument:
    """Recompute all derived figures of one persisted document."""
    return recompute(load_record(raw).to_document(), vat_rate=vat_rate)


def price_draft(raw: RawRecord, vat_rate: Optional[float] = None) -> Tuple[PricedDocument, ValidationResult]:
    """Price an editor draft and report discount values the editor must reject.

    The draft is always priced (with clamped values) so on-screen totals stay
    defined while the user is still typing.
    """
    record = load_record(raw)
    return recompute(record.to_document(), vat_rate=vat_rate), validate_discount_configuration(record)


def _resolve_prefix(kind: str, prefix: Optional[str]) -> str:
    return prefix if prefix is not None else get_numbering_prefix(kind)


def number_records(
    raws: Iterable[RawRecord],
    kind: str = "invoice",
    prefix: Optional[str] = None
) -> Dict[str, DisplayNumber]:
    """Display numbers of an entire collection of persisted documents."""
    records = [load_record(raw) for raw in raws]
    return assign_numbers(records, _resolve_prefix(kind, prefix))


def summarize_collection(
    raws: Sequence[RawRecord],
    kind: str = "invoice",
    prefix: Optional[str] = None,
    payments: Optional[Mapping[str, Iterable[Any]]] = None,
    load_collection: Optional[Callable[[], Sequence[RawRecord]]] = None
) -> List[DocumentSummary]:
    """Build the per-document rows shown by list, print and export views.

    Args:
        raws: Documents to summarize
        kind: "quotation" or "invoice", selects the numbering prefix
        prefix: Explicit prefix overriding the configured one
        payments: Payment amounts per document id; when given, a payment
            summary is attached to every row
        load_collection: Loader for the entire sibling collection when raws
            is only a page of it; numbers degrade to raw index when it fails

    Returns:
        One DocumentSummary per document, in the order of raws
    """
    records = [load_record(raw) for raw in raws]
    resolved_prefix = _resolve_prefix(kind, prefix)

    if load_collection is None:
        numbers = assign_numbers(records, resolved_prefix)
    else:
        def _load() -> List[DocumentRecord]:
            return [load_record(raw) for raw in load_collection()]
        numbers = number_with_fallback(_load, resolved_prefix, partial=records)

    degraded = None
    summaries = []
    for record in records:
        priced = recompute(record.to_document())
        payment = None
        if payments is not None:
            payment = derive_payment_status(
                priced.totals.grand_total,
                payments.get(record.id, ()),
                stored_paid=record.paid_amount
            )

        display_number = numbers.get(record.id)
        if display_number is None:
            # Page contains a document the loaded collection does not know;
            # number it by its position in the page
            logger.warning(f"Document {record.id} missing from sibling collection")
            if degraded is None:
                degraded = assign_degraded_numbers(records, resolved_prefix)
            display_number = degraded[record.id]

        summaries.append(DocumentSummary(
            document_id=record.id,
            display_number=display_number,
            totals=priced.totals,
            payment=payment
        ))

    return summaries
