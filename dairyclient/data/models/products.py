from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from dairyclient.data.models.base import OMITEMPTY, DBRow, ListResponse, to_json_dict
from dairyclient.data.models.options import (
    ProductOption,
    ProductOptionCreationInput,
    ProductOptionValue,
)
from dairyclient.utils.time import parse_rfc3339


@dataclass
class Product:
    """Something a user can buy."""

    row: DBRow = field(default_factory=DBRow)
    product_root_id: int = 0
    name: str = ""
    subtitle: str = ""
    description: str = ""
    option_summary: str = ""
    sku: str = ""
    upc: str = ""
    manufacturer: str = ""
    brand: str = ""
    quantity: int = 0
    quantity_per_package: int = 0

    # pricing
    taxable: bool = False
    price: float = 0.0
    on_sale: bool = False
    sale_price: float = 0.0
    cost: float = 0.0

    # product dimensions
    product_weight: float = 0.0
    product_height: float = 0.0
    product_width: float = 0.0
    product_length: float = 0.0

    # package dimensions
    package_weight: float = 0.0
    package_height: float = 0.0
    package_width: float = 0.0
    package_length: float = 0.0

    applicable_options: list[ProductOptionValue] = field(default_factory=list, metadata=OMITEMPTY)
    available_on: datetime | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Product":
        return Product(
            row=DBRow.from_dict(d),
            product_root_id=d.get("product_root_id", 0),
            name=d.get("name", ""),
            subtitle=d.get("subtitle", ""),
            description=d.get("description", ""),
            option_summary=d.get("option_summary", ""),
            sku=d.get("sku", ""),
            upc=d.get("upc", ""),
            manufacturer=d.get("manufacturer", ""),
            brand=d.get("brand", ""),
            quantity=d.get("quantity", 0),
            quantity_per_package=d.get("quantity_per_package", 0),
            taxable=d.get("taxable", False),
            price=d.get("price", 0.0),
            on_sale=d.get("on_sale", False),
            sale_price=d.get("sale_price", 0.0),
            cost=d.get("cost", 0.0),
            product_weight=d.get("product_weight", 0.0),
            product_height=d.get("product_height", 0.0),
            product_width=d.get("product_width", 0.0),
            product_length=d.get("product_length", 0.0),
            package_weight=d.get("package_weight", 0.0),
            package_height=d.get("package_height", 0.0),
            package_width=d.get("package_width", 0.0),
            package_length=d.get("package_length", 0.0),
            applicable_options=[ProductOptionValue.from_dict(v) for v in d.get("applicable_options") or []],
            available_on=parse_rfc3339(d.get("available_on")),
        )

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class ProductRoot:
    """Shared description that the concrete products of one item inherit from."""

    row: DBRow = field(default_factory=DBRow)
    name: str = ""
    subtitle: str = ""
    description: str = ""
    sku_prefix: str = ""
    manufacturer: str = ""
    brand: str = ""
    available_on: datetime | None = None
    quantity_per_package: int = 0

    taxable: bool = False
    cost: float = 0.0

    product_weight: float = 0.0
    product_height: float = 0.0
    product_width: float = 0.0
    product_length: float = 0.0

    package_weight: float = 0.0
    package_height: float = 0.0
    package_width: float = 0.0
    package_length: float = 0.0

    options: list[ProductOption] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ProductRoot":
        return ProductRoot(
            row=DBRow.from_dict(d),
            name=d.get("name", ""),
            subtitle=d.get("subtitle", ""),
            description=d.get("description", ""),
            sku_prefix=d.get("sku_prefix", ""),
            manufacturer=d.get("manufacturer", ""),
            brand=d.get("brand", ""),
            available_on=parse_rfc3339(d.get("available_on")),
            quantity_per_package=d.get("quantity_per_package", 0),
            taxable=d.get("taxable", False),
            cost=d.get("cost", 0.0),
            product_weight=d.get("product_weight", 0.0),
            product_height=d.get("product_height", 0.0),
            product_width=d.get("product_width", 0.0),
            product_length=d.get("product_length", 0.0),
            package_weight=d.get("package_weight", 0.0),
            package_height=d.get("package_height", 0.0),
            package_width=d.get("package_width", 0.0),
            package_length=d.get("package_length", 0.0),
            options=[ProductOption.from_dict(o) for o in d.get("options") or []],
            products=[Product.from_dict(p) for p in d.get("products") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class ProductUpdateInput:
    name: str = ""
    subtitle: str = ""
    description: str = ""
    sku: str = ""
    upc: str = ""
    manufacturer: str = ""
    brand: str = ""
    quantity: int = 0

    taxable: bool = False
    price: float = 0.0
    on_sale: bool = False
    sale_price: float = 0.0
    cost: float = 0.0

    product_weight: float = 0.0
    product_height: float = 0.0
    product_width: float = 0.0
    product_length: float = 0.0

    package_weight: float = 0.0
    package_height: float = 0.0
    package_width: float = 0.0
    package_length: float = 0.0
    quantity_per_package: int = 0

    available_on: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class ProductCreationInput(ProductUpdateInput):
    """Creation body: the update fields plus the options to generate variants from."""

    options: list[ProductOptionCreationInput] = field(default_factory=list)


class ProductList(ListResponse):
    item_type = Product


class ProductRootList(ListResponse):
    item_type = ProductRoot
