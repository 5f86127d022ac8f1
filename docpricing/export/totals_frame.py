"""Tabular view of document summaries for list and export collaborators."""

from typing import List

import pandas as pd

from ..models.summary import DocumentSummary

TOTALS_COLUMNS = [
    "document_id",
    "display_number",
    "sequence",
    "number_degraded",
    "total_before_discount",
    "total_discount",
    "total_after_discount",
    "total_vat",
    "grand_total",
]

PAYMENT_COLUMNS = ["paid", "remaining", "payment_status"]


def build_totals_frame(summaries: List[DocumentSummary]) -> pd.DataFrame:
    """Create a DataFrame with one row per document.

    Args:
        summaries: Output of summarize_collection()

    Returns:
        DataFrame sorted by display sequence (then id). Amounts are left
        unrounded so exported values match the on-screen totals; rounding
        and currency formatting belong to the exporter.

    Payment columns are present only when at least one summary carries a
    payment summary.
    """
    rows = [summary.to_dict() for summary in summaries]
    has_payments = any(summary.payment is not None for summary in summaries)
    columns = TOTALS_COLUMNS + (PAYMENT_COLUMNS if has_payments else [])

    df = pd.DataFrame(rows, columns=columns)
    if df.empty:
        return df

    df = df.sort_values(["sequence", "document_id"], kind="mergesort")
    return df.reset_index(drop=True)
