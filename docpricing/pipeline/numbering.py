"""Deterministic, year-stamped display numbering derived from creation order.

Display numbers are never stored. They are recomputed from the whole sibling
collection on every load, so correcting a creation timestamp or deleting an
earlier sibling renumbers the documents after it.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from ..models.display_number import DisplayNumber

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_created_at(value: Any) -> Optional[datetime]:
    """Parse a creation timestamp.

    Accepts datetime, date and ISO 8601 strings (a trailing "Z" is read as
    UTC). Returns None for missing or unparseable values.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    # Timestamps with unusual fractional seconds: fall back to the date part
    try:
        parsed = date.fromisoformat(text[:10])
    except ValueError:
        return None
    return datetime(parsed.year, parsed.month, parsed.day)


def _sort_key(document: Any) -> Tuple[float, str]:
    """(timestamp, id): unparseable timestamps sort as the epoch."""
    created = parse_created_at(getattr(document, "created_at", None))
    if created is None:
        created = _EPOCH
    elif created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created.timestamp(), str(document.id)


def _year_of(document: Any, fallback_year: int) -> int:
    created = parse_created_at(getattr(document, "created_at", None))
    return created.year if created is not None else fallback_year


def format_display_number(prefix: str, year: int, sequence: int, pad_width: int = 3) -> str:
    """Format "{prefix}-{year}-{sequence}" with sequence zero-padded to pad_width."""
    return f"{prefix}-{year}-{sequence:0{pad_width}d}"


def assign_numbers(
    collection: Sequence[Any],
    prefix: str,
    pad_width: Optional[int] = None,
    fallback_year: Optional[int] = None
) -> Dict[str, DisplayNumber]:
    """Assign every document in collection its display number.

    Args:
        collection: The entire sibling collection (objects with id and created_at)
        prefix: Number prefix, e.g. "QT" or "INV"
        pad_width: Zero-padding of the sequence (default: configured, 3)
        fallback_year: Year label for documents without a usable timestamp
            (default: current year)

    Returns:
        Dict mapping document id to DisplayNumber

    Documents are ranked by created_at ascending, ties broken by id. The rank
    runs across years; the year label is each document's own creation year.
    """
    if pad_width is None:
        from ..config import get_pad_width
        pad_width = get_pad_width()
    if fallback_year is None:
        fallback_year = datetime.now().year

    ordered = sorted(collection, key=_sort_key)

    numbers: Dict[str, DisplayNumber] = {}
    for index, document in enumerate(ordered):
        sequence = index + 1
        year = _year_of(document, fallback_year)
        document_id = str(document.id)
        numbers[document_id] = DisplayNumber(
            document_id=document_id,
            number=format_display_number(prefix, year, sequence, pad_width),
            sequence=sequence,
            year=year
        )

    logger.debug(f"Assigned {len(numbers)} display numbers with prefix {prefix}")
    return numbers


def assign_degraded_numbers(
    partial: Sequence[Any],
    prefix: str,
    pad_width: Optional[int] = None,
    fallback_year: Optional[int] = None
) -> Dict[str, DisplayNumber]:
    """Number documents by their raw position in partial data.

    Used when the full collection is unavailable. The numbers are
    placeholders: informational, not stable keys.
    """
    if pad_width is None:
        from ..config import get_pad_width
        pad_width = get_pad_width()
    if fallback_year is None:
        fallback_year = datetime.now().year

    numbers: Dict[str, DisplayNumber] = {}
    for index, document in enumerate(partial):
        sequence = index + 1
        year = _year_of(document, fallback_year)
        document_id = str(document.id)
        numbers[document_id] = DisplayNumber(
            document_id=document_id,
            number=format_display_number(prefix, year, sequence, pad_width),
            sequence=sequence,
            year=year,
            degraded=True
        )
    return numbers


def number_with_fallback(
    load_collection: Callable[[], Sequence[Any]],
    prefix: str,
    partial: Sequence[Any] = (),
    pad_width: Optional[int] = None,
    fallback_year: Optional[int] = None
) -> Dict[str, DisplayNumber]:
    """Load the sibling collection and number it, degrading on failure.

    Args:
        load_collection: Callable returning the entire sibling collection
        prefix: Number prefix
        partial: Whatever documents the caller already has, numbered by raw
            index if the collection cannot be loaded

    Returns:
        Dict mapping document id to DisplayNumber (degraded=True on fallback)

    Any error raised by load_collection degrades numbering; none propagates.
    """
    try:
        collection = load_collection()
    except Exception as e:
        logger.warning(
            f"Sibling collection unavailable ({e}); using index-based numbers "
            f"for {len(partial)} documents"
        )
        return assign_degraded_numbers(partial, prefix, pad_width, fallback_year)

    return assign_numbers(list(collection), prefix, pad_width, fallback_year)


def display_number_map(collection: Sequence[Any], prefix: str, **kwargs) -> Dict[str, str]:
    """Like assign_numbers, but map ids to the formatted number only."""
    return {
        document_id: display.number
        for document_id, display in assign_numbers(collection, prefix, **kwargs).items()
    }
