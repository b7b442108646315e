"""
Endpoint table for the v1 store API.
Each entry names the verb, the path template (segments after /v1) and the input/output
models; ApiClient.call turns an entry into one request.
"""
from dataclasses import dataclass
from typing import Any

from dairyclient.data.models.discounts import Discount, DiscountCreationInput, DiscountList, DiscountUpdateInput
from dairyclient.data.models.options import (
    ProductOption,
    ProductOptionCreationInput,
    ProductOptionList,
    ProductOptionUpdateInput,
    ProductOptionValue,
    ProductOptionValueCreationInput,
    ProductOptionValueUpdateInput,
)
from dairyclient.data.models.products import (
    Product,
    ProductCreationInput,
    ProductList,
    ProductRoot,
    ProductRootList,
    ProductUpdateInput,
)
from dairyclient.data.models.users import User, UserCreationInput, UserUpdateInput


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: tuple[str, ...]
    output: type | None = None
    input: type | None = None

    def render(self, path_args: dict[str, Any]) -> list[str]:
        try:
            return [segment.format(**path_args) for segment in self.path]
        except KeyError as err:
            raise TypeError(f"missing path argument {err.args[0]!r} for {'/'.join(self.path)}") from None


ENDPOINTS: dict[str, Endpoint] = {
    # products
    "product_exists": Endpoint("HEAD", ("product", "{sku}")),
    "get_product": Endpoint("GET", ("product", "{sku}"), output=Product),
    "get_products": Endpoint("GET", ("products",), output=ProductList),
    "create_product": Endpoint("POST", ("product",), output=Product, input=ProductCreationInput),
    "update_product": Endpoint("PATCH", ("product", "{sku}"), output=Product, input=ProductUpdateInput),
    "delete_product": Endpoint("DELETE", ("product", "{sku}")),
    # product roots
    "get_product_root": Endpoint("GET", ("product_root", "{root_id}"), output=ProductRoot),
    "get_product_roots": Endpoint("GET", ("product_roots",), output=ProductRootList),
    "delete_product_root": Endpoint("DELETE", ("product_root", "{root_id}")),
    # product options
    "get_product_options": Endpoint("GET", ("product", "{product_id}", "options"), output=ProductOptionList),
    "create_product_option": Endpoint(
        "POST", ("product", "{product_id}", "options"), output=ProductOption, input=ProductOptionCreationInput
    ),
    "update_product_option": Endpoint(
        "PATCH", ("product_options", "{option_id}"), output=ProductOption, input=ProductOptionUpdateInput
    ),
    "delete_product_option": Endpoint("DELETE", ("product_options", "{option_id}")),
    # product option values
    "create_product_option_value": Endpoint(
        "POST",
        ("product_options", "{option_id}", "value"),
        output=ProductOptionValue,
        input=ProductOptionValueCreationInput,
    ),
    "update_product_option_value": Endpoint(
        "PATCH",
        ("product_option_values", "{value_id}"),
        output=ProductOptionValue,
        input=ProductOptionValueUpdateInput,
    ),
    "delete_product_option_value": Endpoint("DELETE", ("product_option_values", "{value_id}")),
    # discounts
    "get_discount": Endpoint("GET", ("discount", "{discount_id}"), output=Discount),
    "get_discounts": Endpoint("GET", ("discounts",), output=DiscountList),
    "create_discount": Endpoint("POST", ("discount",), output=Discount, input=DiscountCreationInput),
    "update_discount": Endpoint("PATCH", ("discount", "{discount_id}"), output=Discount, input=DiscountUpdateInput),
    "delete_discount": Endpoint("DELETE", ("discount", "{discount_id}")),
    # users
    "create_user": Endpoint("POST", ("user",), output=User, input=UserCreationInput),
    "update_user": Endpoint("PATCH", ("user", "{user_id}"), output=User, input=UserUpdateInput),
    "delete_user": Endpoint("DELETE", ("user", "{user_id}")),
}
