"""DisplayNumber data model for computed, never-persisted document numbers."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class DisplayNumber:
    """Human-readable sequence number of a document within its collection.

    Attributes:
        document_id: Identifier of the numbered document
        number: Formatted number, e.g. "QT-2024-001"
        sequence: 1-based rank within the collection
        year: Year label taken from the document's own creation timestamp
        degraded: True when computed from partial data (index-based fallback)
    """

    document_id: str
    number: str
    sequence: int
    year: int
    degraded: bool = False

    def __post_init__(self):
        """Validate sequence."""
        if self.sequence < 1:
            raise ValueError(f"sequence must be >= 1, got {self.sequence}")

    def __str__(self) -> str:
        return self.number

    def to_dict(self) -> Dict[str, Any]:
        return {
            "document_id": self.document_id,
            "number": self.number,
            "sequence": self.sequence,
            "year": self.year,
            "degraded": self.degraded,
        }
