"""
Record codec base: pydantic models keyed by backend field names.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict

from cartflow.backend._types import Record


class BackendModel(BaseModel):
    """
    Base for records crossing the backend boundary.

    Fields carry the backend names as aliases; python names are used
    inside cartflow. Unknown backend fields are ignored.

    Example:
        class ProductRecord(BackendModel):
            id: str = Field(alias="Id")

            def to_domain(self) -> LineItem: ...

            @classmethod
            def from_domain(cls, dom: LineItem) -> ProductRecord: ...
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def parse(cls, record: Record) -> Self:
        return cls.model_validate(dict(record))

    def to_backend(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


__all__ = ("BackendModel",)
