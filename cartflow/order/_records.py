"""
Order line codec: CheckoutLine → backend order line.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from cartflow.backend import BackendModel
from cartflow.cart import CheckoutLine


class OrderLineRecord(BackendModel):
    """Order line in the shape create_order expects."""

    product_id: str = Field(alias="ProductId")
    name: str = Field(alias="ProductName__c")
    price: Decimal = Field(alias="ProductPrice__c")
    quantity: int = Field(alias="Quantity__c")
    picture_url: str = Field(default="", alias="PictureURL")

    @classmethod
    def from_domain(cls, dom: CheckoutLine) -> OrderLineRecord:
        return cls(
            product_id=dom.id,
            name=dom.name,
            price=dom.unit_price,
            quantity=dom.quantity,
            picture_url=dom.picture_url,
        )


__all__ = ("OrderLineRecord",)
