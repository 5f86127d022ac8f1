"""End-to-end tests for the recompute reducer."""

import pytest

from docpricing.models import Discount, DiscountMode, Document, LineItem
from docpricing.pipeline.recompute import recompute


@pytest.fixture
def items():
    return [
        LineItem(quantity=2, unit_price=100, item_id="1", description="Chairs"),
        LineItem(quantity=1, unit_price=50, item_id="2", description="Table"),
        LineItem(quantity=3, unit_price=20, item_id="3", description="Lamps"),
    ]


@pytest.fixture
def global_fixed_document(items):
    return Document(
        id="q-1",
        created_at="2024-03-01T10:00:00Z",
        items=items,
        discount_mode=DiscountMode.GLOBAL,
        global_discount=Discount.fixed(30),
        vat_enabled=True
    )


class TestGlobalFixedDiscount:
    """Global fixed discount of 30 over subtotals 200, 50 and 60 at 15% VAT."""

    def test_line_figures(self, global_fixed_document):
        priced = recompute(global_fixed_document, vat_rate=0.15)
        lines = [line.totals for line in priced.lines]

        assert [round(l.discount_amount, 2) for l in lines] == [19.35, 4.84, 5.81]
        assert [round(l.post_discount_amount, 2) for l in lines] == [180.65, 45.16, 54.19]
        assert [round(l.tax, 2) for l in lines] == [27.10, 6.77, 8.13]
        assert [round(l.line_total, 2) for l in lines] == [207.74, 51.94, 62.32]

    def test_document_totals(self, global_fixed_document):
        totals = recompute(global_fixed_document, vat_rate=0.15).totals

        assert totals.total_before_discount == pytest.approx(310.0)
        assert totals.total_discount == pytest.approx(30.0)
        assert totals.total_after_discount == pytest.approx(280.0)
        assert totals.total_vat == pytest.approx(42.0)
        assert totals.grand_total == pytest.approx(322.0)

    def test_configured_rate_used_by_default(self, global_fixed_document):
        priced = recompute(global_fixed_document)

        assert priced.vat_rate == pytest.approx(0.15)
        assert priced.totals.grand_total == pytest.approx(322.0)

    def test_stale_item_discounts_ignored(self, global_fixed_document):
        stale = Document(
            id="q-1",
            items=[item.with_discount(Discount.fixed(99)) for item in global_fixed_document.items],
            discount_mode=DiscountMode.GLOBAL,
            global_discount=Discount.fixed(30)
        )

        assert recompute(stale, vat_rate=0.15).totals == recompute(global_fixed_document, vat_rate=0.15).totals

    def test_same_inputs_same_outputs(self, global_fixed_document):
        first = recompute(global_fixed_document, vat_rate=0.15)
        second = recompute(global_fixed_document, vat_rate=0.15)

        assert first.totals == second.totals
        assert [l.totals for l in first.lines] == [l.totals for l in second.lines]

    def test_document_not_mutated(self, global_fixed_document):
        recompute(global_fixed_document, vat_rate=0.15)
        assert all(item.discount == Discount.none() for item in global_fixed_document.items)


class TestOtherModes:
    """Per-item discounts, percentage global discounts and VAT settings."""

    def test_per_item_discounts(self, items):
        items[0] = items[0].with_discount(Discount.percentage(10))
        items[2] = items[2].with_discount(Discount.fixed(5))
        doc = Document(id="q-2", items=items)

        totals = recompute(doc, vat_rate=0.15).totals

        assert totals.total_discount == pytest.approx(25.0)
        assert totals.total_after_discount == pytest.approx(285.0)
        assert totals.grand_total == pytest.approx(327.75)

    def test_global_percentage(self, items):
        doc = Document(
            id="q-3",
            items=items,
            discount_mode=DiscountMode.GLOBAL,
            global_discount=Discount.percentage(10)
        )

        priced = recompute(doc, vat_rate=0.15)

        assert [l.totals.discount_amount for l in priced.lines] == pytest.approx([20.0, 5.0, 6.0])
        assert priced.totals.grand_total == pytest.approx(279.0 * 1.15)

    def test_vat_disabled(self, global_fixed_document):
        doc = Document(
            id="q-4",
            items=global_fixed_document.items,
            discount_mode=DiscountMode.GLOBAL,
            global_discount=Discount.fixed(30),
            vat_enabled=False
        )

        priced = recompute(doc, vat_rate=0.15)

        assert priced.vat_rate == 0.0
        assert priced.totals.total_vat == 0.0
        assert priced.totals.grand_total == pytest.approx(280.0)

    def test_stored_rate_used_without_explicit_rate(self, items):
        doc = Document(id="q-5", items=items, vat_rate=0.05)

        priced = recompute(doc)

        assert priced.vat_rate == pytest.approx(0.05)
        assert priced.totals.total_vat == pytest.approx(15.5)

    def test_empty_document(self):
        priced = recompute(Document(id="empty"))

        assert priced.lines == []
        assert priced.totals.grand_total == 0.0
