"""
Product record codec: backend product ⇄ LineItem.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from cartflow.backend import BackendModel
from cartflow.cart._types import LineItem


class ProductRecord(BackendModel):
    """Product row as served by fetch_products / sent to update_product_quantity."""

    id: str = Field(alias="Id")
    name: str = Field(default="", alias="Name")
    msrp: Decimal = Field(alias="MSRP__c")
    quantity: int = Field(alias="Quantity__c")
    picture_url: str = Field(default="", alias="PictureURL__c")

    def to_domain(self) -> LineItem:
        """Fresh, unselected line."""
        return LineItem(
            id=self.id,
            name=self.name,
            unit_price=self.msrp,
            quantity=self.quantity,
            picture_url=self.picture_url,
        )

    @classmethod
    def from_domain(cls, dom: LineItem) -> ProductRecord:
        return cls(
            id=dom.id,
            name=dom.name,
            msrp=dom.unit_price,
            quantity=dom.quantity,
            picture_url=dom.picture_url,
        )


__all__ = ("ProductRecord",)
