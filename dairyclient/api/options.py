"""
Product options API module: option axes of a product and their values.
"""
from typing import TYPE_CHECKING

from dairyclient.data.models.options import (
    ProductOption,
    ProductOptionCreationInput,
    ProductOptionList,
    ProductOptionUpdateInput,
    ProductOptionValue,
    ProductOptionValueCreationInput,
    ProductOptionValueUpdateInput,
)

if TYPE_CHECKING:
    from dairyclient.api.client import ApiClient


class ProductOptionsAPI:
    """Product option and option value endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def list(
        self, product_id: int, query: dict[str, str] | None = None, *, timeout: float | None = None
    ) -> ProductOptionList:
        """Fetch options for a product (GET /v1/product/{id}/options)."""
        return self.client.call("get_product_options", product_id=product_id, query=query, timeout=timeout)

    def create(
        self, product_id: int, new_option: ProductOptionCreationInput, *, timeout: float | None = None
    ) -> ProductOption:
        """Create an option for a product (POST /v1/product/{id}/options)."""
        return self.client.call("create_product_option", product_id=product_id, body=new_option, timeout=timeout)

    def update(
        self, option_id: int, changes: ProductOptionUpdateInput, *, timeout: float | None = None
    ) -> ProductOption:
        """Rename an option (PATCH /v1/product_options/{id})."""
        return self.client.call("update_product_option", option_id=option_id, body=changes, timeout=timeout)

    def delete(self, option_id: int, *, timeout: float | None = None) -> None:
        """Delete an option (DELETE /v1/product_options/{id})."""
        self.client.call("delete_product_option", option_id=option_id, timeout=timeout)

    def create_value(
        self, option_id: int, new_value: ProductOptionValueCreationInput, *, timeout: float | None = None
    ) -> ProductOptionValue:
        """Add a value to an option (POST /v1/product_options/{id}/value)."""
        return self.client.call("create_product_option_value", option_id=option_id, body=new_value, timeout=timeout)

    def update_value(
        self, value_id: int, changes: ProductOptionValueUpdateInput, *, timeout: float | None = None
    ) -> ProductOptionValue:
        """Update an option value (PATCH /v1/product_option_values/{id})."""
        return self.client.call("update_product_option_value", value_id=value_id, body=changes, timeout=timeout)

    def delete_value(self, value_id: int, *, timeout: float | None = None) -> None:
        """Delete an option value (DELETE /v1/product_option_values/{id})."""
        self.client.call("delete_product_option_value", value_id=value_id, timeout=timeout)
