"""Unit tests for the document aggregator."""

import pytest

from docpricing.exceptions import TotalsConsistencyError
from docpricing.models import DocumentTotals, ItemTotals
from docpricing.pipeline.aggregator import aggregate
from docpricing.pipeline.item_calculator import compute_item


class TestAggregate:
    """Tests for aggregate()."""

    def test_empty_document(self):
        assert aggregate([]) == DocumentTotals()

    def test_sums(self):
        lines = [
            compute_item(2, 100, "percentage", 10, True, 0.15),
            compute_item(1, 50, "fixed", 5, True, 0.15),
        ]

        totals = aggregate(lines)

        assert totals.total_before_discount == pytest.approx(250.0)
        assert totals.total_discount == pytest.approx(25.0)
        assert totals.total_after_discount == pytest.approx(225.0)
        assert totals.total_vat == pytest.approx(33.75)
        assert totals.grand_total == pytest.approx(258.75)

    def test_accepts_generator(self):
        totals = aggregate(compute_item(1, 10, "percentage", 0, False, 0.15) for _ in range(3))
        assert totals.grand_total == pytest.approx(30.0)

    @pytest.mark.parametrize("vat_enabled", [True, False])
    def test_cross_consistency(self, vat_enabled):
        lines = [
            compute_item(q, p, t, v, vat_enabled, 0.15)
            for q, p, t, v in [(3, 19.99, "percentage", 7.5), (11, 0.7, "fixed", 1.13), (1, 1234.56, "fixed", 0)]
        ]

        totals = aggregate(lines)

        assert totals.total_after_discount == pytest.approx(sum(l.post_discount_amount for l in lines), abs=1e-6)
        assert totals.grand_total == pytest.approx(sum(l.line_total for l in lines), abs=1e-6)
        assert totals.grand_total == pytest.approx(totals.total_after_discount + totals.total_vat, abs=1e-6)

    def test_inconsistent_grand_total_raises(self):
        # Bypass __post_init__ to build totals the calculator never produces
        broken = ItemTotals.__new__(ItemTotals)
        for name, value in {
            "subtotal": 100.0,
            "discount_amount": 0.0,
            "post_discount_amount": 100.0,
            "tax": 15.0,
            "line_total": 120.0,
        }.items():
            object.__setattr__(broken, name, value)

        with pytest.raises(TotalsConsistencyError, match="grand_total"):
            aggregate([broken])

    def test_custom_tolerance(self):
        lines = [compute_item(1, 100, "percentage", 0, True, 0.15)]
        assert aggregate(lines, tolerance=0.0).grand_total == pytest.approx(115.0)
