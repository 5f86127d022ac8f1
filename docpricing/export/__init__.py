"""Tabular projections for export collaborators."""

from .totals_frame import build_totals_frame

__all__ = ["build_totals_frame"]
