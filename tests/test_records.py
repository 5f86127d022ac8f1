"""Unit tests for persistence-boundary records."""

import pytest

from docpricing.api.records import DocumentRecord, LineItemRecord
from docpricing.models import Discount, DiscountMode, DiscountType


class TestLineItemRecord:
    """Test LineItemRecord normalization."""

    def test_camel_case_fields(self):
        record = LineItemRecord.model_validate({
            "itemId": 7,
            "description": "Chairs",
            "quantity": "2",
            "unitPrice": "100.00",
            "discountPercent": 10
        })

        assert record.item_id == "7"
        assert record.quantity == 2.0
        assert record.unit_price == 100.0
        assert record.discount_percent == 10.0

    def test_snake_case_fields(self):
        record = LineItemRecord.model_validate(
            {"id": "a", "quantity": 1, "unit_price": 50, "discount_amount": 5}
        )

        assert record.item_id == "a"
        assert record.discount_amount == 5.0

    def test_missing_and_null_values_become_zero(self):
        record = LineItemRecord.model_validate(
            {"quantity": None, "unitPrice": "", "discountPercent": "abc", "description": None}
        )

        assert record.quantity == 0.0
        assert record.unit_price == 0.0
        assert record.discount_percent == 0.0
        assert record.description == ""
        assert record.to_line_item().subtotal == 0.0

    def test_unknown_fields_ignored(self):
        record = LineItemRecord.model_validate({"quantity": 1, "unitPrice": 1, "colour": "red"})
        assert not hasattr(record, "colour")

    @pytest.mark.parametrize(
        "fields,expected",
        [
            ({"discountAmount": 5}, DiscountType.FIXED),
            ({"discountPercent": 5}, DiscountType.PERCENTAGE),
            ({}, DiscountType.PERCENTAGE),
            ({"discountType": "fixed", "discountAmount": 0}, DiscountType.FIXED),
            ({"discountType": "percentage", "discountAmount": 5}, DiscountType.PERCENTAGE),
        ],
    )
    def test_effective_discount_type(self, fields, expected):
        record = LineItemRecord.model_validate({"quantity": 1, "unitPrice": 10, **fields})
        assert record.effective_discount_type is expected

    def test_to_line_item_clamps_discount(self):
        record = LineItemRecord.model_validate(
            {"quantity": 1, "unitPrice": 10, "discountPercent": 150, "description": "Lamp"}
        )

        item = record.to_line_item()

        assert item.discount == Discount.percentage(100)
        assert item.description == "Lamp"
        assert record.raw_discount_value == 150.0


class TestDocumentRecord:
    """Test DocumentRecord normalization."""

    def test_invoice_row(self):
        record = DocumentRecord.model_validate({
            "invoice_id": 12,
            "createdAt": "2024-03-01T10:00:00Z",
            "invoice_items": [{"quantity": 2, "unitPrice": 100}],
            "globalDiscountType": "fixed",
            "globalDiscountAmount": "30",
            "vatEnabled": "true",
            "tax_rate": 0.15,
            "paidAmount": 100
        })

        assert record.id == "12"
        assert record.created_at == "2024-03-01T10:00:00Z"
        assert len(record.items) == 1
        assert record.discount_value == 30.0
        assert record.effective_discount_mode is DiscountMode.GLOBAL
        assert record.vat_rate == 0.15
        assert record.paid_amount == 100.0

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        (True, True),
        ("yes", True),
        (False, False),
        (0, False),
        ("false", False),
        ("OFF", False),
    ])
    def test_vat_enabled(self, value, expected):
        record = DocumentRecord.model_validate({"id": "d", "vat_enabled": value})
        assert record.vat_enabled is expected

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank_vat_rate(self, value):
        assert DocumentRecord.model_validate({"id": "d", "vat_rate": value}).vat_rate is None

    def test_items_not_a_list(self):
        assert DocumentRecord.model_validate({"id": "d", "items": None}).items == []

    def test_missing_id_rejected(self):
        with pytest.raises(ValueError):
            DocumentRecord.model_validate({"items": []})

    @pytest.mark.parametrize(
        "fields,expected",
        [
            ({"discount_mode": "global"}, DiscountMode.GLOBAL),
            ({"discount_mode": "individual", "discount_type": "fixed", "discount_value": 5}, DiscountMode.PER_ITEM),
            ({"discount_type": "fixed", "discount_value": 5}, DiscountMode.GLOBAL),
            ({"discount_type": "fixed", "discount_value": 0}, DiscountMode.PER_ITEM),
            ({}, DiscountMode.PER_ITEM),
        ],
    )
    def test_effective_discount_mode(self, fields, expected):
        record = DocumentRecord.model_validate({"id": "d", **fields})
        assert record.effective_discount_mode is expected

    def test_to_document_global(self):
        record = DocumentRecord.model_validate({
            "id": "d",
            "discount_mode": "global",
            "discount_type": "percentage",
            "discount_value": 10,
            "items": [{"quantity": 1, "unitPrice": 10, "discountPercent": 50}],
            "vat_enabled": False
        })

        document = record.to_document()

        assert document.discount_mode is DiscountMode.GLOBAL
        assert document.global_discount == Discount.percentage(10)
        assert document.vat_enabled is False
        assert document.items[0].discount == Discount.percentage(50)

    def test_to_document_per_item_drops_global(self):
        document = DocumentRecord.model_validate(
            {"id": "d", "discount_mode": "per_item", "discount_type": "fixed", "discount_value": 9}
        ).to_document()

        assert document.discount_mode is DiscountMode.PER_ITEM
        assert document.global_discount is None
