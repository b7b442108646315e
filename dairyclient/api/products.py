"""
Products API module for products and the product roots they are generated from.
"""
from typing import TYPE_CHECKING

from dairyclient.data.models.products import (
    Product,
    ProductCreationInput,
    ProductList,
    ProductRoot,
    ProductRootList,
    ProductUpdateInput,
)

if TYPE_CHECKING:
    from dairyclient.api.client import ApiClient


class ProductsAPI:
    """Product endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def exists(self, sku: str, *, timeout: float | None = None) -> bool:
        """Check whether a product exists (HEAD /v1/product/{sku})."""
        return self.client.call("product_exists", sku=sku, timeout=timeout)

    def get(self, sku: str, *, timeout: float | None = None) -> Product:
        """Fetch a single product (GET /v1/product/{sku})."""
        return self.client.call("get_product", sku=sku, timeout=timeout)

    def list(self, query: dict[str, str] | None = None, *, timeout: float | None = None) -> ProductList:
        """Fetch one page of products (GET /v1/products) with optional filters."""
        return self.client.call("get_products", query=query, timeout=timeout)

    def create(self, new_product: ProductCreationInput, *, timeout: float | None = None) -> Product:
        """Create a product (POST /v1/product)."""
        return self.client.call("create_product", body=new_product, timeout=timeout)

    def update(self, sku: str, changes: ProductUpdateInput, *, timeout: float | None = None) -> Product:
        """Update a product (PATCH /v1/product/{sku})."""
        return self.client.call("update_product", sku=sku, body=changes, timeout=timeout)

    def delete(self, sku: str, *, timeout: float | None = None) -> None:
        """Delete a product (DELETE /v1/product/{sku})."""
        self.client.call("delete_product", sku=sku, timeout=timeout)


class ProductRootsAPI:
    """Product root endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def get(self, root_id: int, *, timeout: float | None = None) -> ProductRoot:
        """Fetch a product root (GET /v1/product_root/{id})."""
        return self.client.call("get_product_root", root_id=root_id, timeout=timeout)

    def list(self, query: dict[str, str] | None = None, *, timeout: float | None = None) -> ProductRootList:
        """Fetch one page of product roots (GET /v1/product_roots)."""
        return self.client.call("get_product_roots", query=query, timeout=timeout)

    def delete(self, root_id: int, *, timeout: float | None = None) -> None:
        """Delete a product root and its products (DELETE /v1/product_root/{id})."""
        self.client.call("delete_product_root", root_id=root_id, timeout=timeout)
