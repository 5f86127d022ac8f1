"""ValidationResult data model for editor-boundary discount checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class ValidationResult:
    """Validation result for a document's discount configuration.

    Attributes:
        status: "OK" when the configuration can be saved as entered,
            "REVIEW" when the editor should reject it
        errors: Messages describing each rejected value
    """

    status: str
    errors: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate ValidationResult fields."""
        if self.status not in ["OK", "REVIEW"]:
            raise ValueError(
                f"status must be 'OK' or 'REVIEW', got '{self.status}'"
            )

    @property
    def ok(self) -> bool:
        return self.status == "OK"
