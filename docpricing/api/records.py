"""Raw records supplied by the persistence layer.

Rows arrive with camelCase or snake_case keys and with missing, null or
non-numeric values. These models normalize them once, at the boundary, and
convert them into the domain models the pricing pipeline works on.
"""

from datetime import date, datetime
from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..models.discount import Discount, DiscountMode, DiscountType
from ..models.document import Document
from ..models.line_item import LineItem
from ..number_normalizer import to_amount


class LineItemRecord(BaseModel):
    """A stored or draft line item, before any derivation."""

    model_config = ConfigDict(extra="ignore")

    item_id: Optional[str] = Field(None, validation_alias=AliasChoices("item_id", "id", "itemId"))
    description: str = ""
    quantity: float = 0.0
    unit_price: float = Field(0.0, validation_alias=AliasChoices("unit_price", "unitPrice"))
    discount_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("discount_type", "discountType")
    )
    discount_percent: float = Field(
        0.0, validation_alias=AliasChoices("discount_percent", "discountPercent")
    )
    discount_amount: float = Field(
        0.0, validation_alias=AliasChoices("discount_amount", "discountAmount")
    )

    @field_validator("quantity", "unit_price", "discount_percent", "discount_amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return to_amount(value)

    @field_validator("item_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @property
    def effective_discount_type(self) -> DiscountType:
        """Explicit type when stored, else FIXED when a discount amount is present."""
        if self.discount_type:
            return DiscountType.parse(self.discount_type)
        return DiscountType.FIXED if self.discount_amount > 0 else DiscountType.PERCENTAGE

    @property
    def raw_discount_value(self) -> float:
        """The discount value as entered, before clamping."""
        if self.effective_discount_type is DiscountType.FIXED:
            return self.discount_amount
        return self.discount_percent

    def to_line_item(self) -> LineItem:
        return LineItem(
            quantity=self.quantity,
            unit_price=self.unit_price,
            discount=Discount(self.effective_discount_type, self.raw_discount_value),
            item_id=self.item_id,
            description=self.description
        )


class DocumentRecord(BaseModel):
    """A stored or draft quotation/invoice with its raw line items."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(
        validation_alias=AliasChoices("id", "document_id", "invoice_id", "quotation_id")
    )
    created_at: Union[datetime, date, str, None] = Field(
        None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    items: List[LineItemRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("items", "invoice_items", "quotation_items")
    )
    discount_mode: Optional[str] = Field(
        None, validation_alias=AliasChoices("discount_mode", "discountMode")
    )
    discount_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("discount_type", "discountType", "globalDiscountType")
    )
    discount_value: float = Field(
        0.0,
        validation_alias=AliasChoices(
            "discount_value", "discount_amount", "discountValue", "globalDiscountAmount"
        )
    )
    vat_enabled: bool = Field(True, validation_alias=AliasChoices("vat_enabled", "vatEnabled"))
    vat_rate: Optional[float] = Field(
        None, validation_alias=AliasChoices("vat_rate", "tax_rate", "vatRate")
    )
    paid_amount: float = Field(0.0, validation_alias=AliasChoices("paid_amount", "paidAmount"))

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return str(value)

    @field_validator("items", mode="before")
    @classmethod
    def _coerce_items(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []

    @field_validator("discount_value", "paid_amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return to_amount(value)

    @field_validator("vat_rate", mode="before")
    @classmethod
    def _coerce_rate(cls, value: Any) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, str) and not value.strip():
            return None
        return to_amount(value)

    @field_validator("vat_enabled", mode="before")
    @classmethod
    def _coerce_vat_enabled(cls, value: Any) -> bool:
        # Only an explicit false disables VAT
        if isinstance(value, str):
            return value.strip().lower() not in ("false", "0", "no", "off")
        return value is not False and value != 0

    @property
    def effective_discount_mode(self) -> DiscountMode:
        """Stored mode when present, else GLOBAL when a document-level discount is stored."""
        if self.discount_mode:
            return DiscountMode.parse(self.discount_mode)
        if self.discount_type and self.discount_value > 0:
            return DiscountMode.GLOBAL
        return DiscountMode.PER_ITEM

    def to_document(self) -> Document:
        mode = self.effective_discount_mode
        global_discount = None
        if mode is DiscountMode.GLOBAL:
            global_discount = Discount(DiscountType.parse(self.discount_type), self.discount_value)
        return Document(
            id=self.id,
            created_at=self.created_at,
            items=[item.to_line_item() for item in self.items],
            discount_mode=mode,
            global_discount=global_discount,
            vat_enabled=self.vat_enabled,
            vat_rate=self.vat_rate
        )
