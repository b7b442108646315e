from dataclasses import dataclass, field
from typing import Any

from dairyclient.data.models.base import DBRow, ListResponse, to_json_dict


@dataclass
class ProductOptionValue:
    """One value of an option. A t-shirt in three colors and three sizes has six of these."""

    row: DBRow = field(default_factory=DBRow)
    product_option_id: int = 0
    value: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ProductOptionValue":
        return ProductOptionValue(
            row=DBRow.from_dict(d),
            product_option_id=d.get("product_option_id", 0),
            value=d.get("value", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class ProductOption:
    """A variant axis of a product root, such as color or size."""

    row: DBRow = field(default_factory=DBRow)
    product_root_id: int = 0
    name: str = ""
    values: list[ProductOptionValue] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ProductOption":
        return ProductOption(
            row=DBRow.from_dict(d),
            product_root_id=d.get("product_root_id", 0),
            name=d.get("name", ""),
            values=[ProductOptionValue.from_dict(v) for v in d.get("values") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class ProductOptionCreationInput:
    name: str = ""
    values: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ProductOptionCreationInput":
        return ProductOptionCreationInput(name=d.get("name", ""), values=list(d.get("values") or []))

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class ProductOptionUpdateInput:
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class ProductOptionValueCreationInput:
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class ProductOptionValueUpdateInput:
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


class ProductOptionList(ListResponse):
    item_type = ProductOption
