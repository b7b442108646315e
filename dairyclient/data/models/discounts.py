from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from dairyclient.data.models.base import OMITEMPTY, DBRow, ListResponse, to_json_dict
from dairyclient.utils.time import parse_rfc3339


@dataclass
class Discount:
    """Pricing change that applies temporarily to products."""

    row: DBRow = field(default_factory=DBRow)
    name: str = ""
    type: str = ""
    amount: float = 0.0
    starts_on: datetime | None = None
    expires_on: datetime | None = None
    requires_code: bool = False
    code: str = field(default="", metadata=OMITEMPTY)
    limited_use: bool = False
    number_of_uses: int = field(default=0, metadata=OMITEMPTY)
    login_required: bool = False

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Discount":
        return Discount(
            row=DBRow.from_dict(d),
            name=d.get("name", ""),
            type=d.get("type", ""),
            amount=d.get("amount", 0.0),
            starts_on=parse_rfc3339(d.get("starts_on")),
            expires_on=parse_rfc3339(d.get("expires_on")),
            requires_code=d.get("requires_code", False),
            code=d.get("code", ""),
            limited_use=d.get("limited_use", False),
            number_of_uses=d.get("number_of_uses", 0),
            login_required=d.get("login_required", False),
        )

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class DiscountCreationInput:
    name: str = ""
    type: str = ""
    amount: float = 0.0
    starts_on: datetime | None = None
    expires_on: datetime | None = None
    requires_code: bool = False
    code: str = ""
    limited_use: bool = False
    number_of_uses: int = 0
    login_required: bool = False

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class DiscountUpdateInput(DiscountCreationInput):
    """Same body as creation; PATCH replaces every field."""


class DiscountList(ListResponse):
    item_type = Discount
