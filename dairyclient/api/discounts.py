"""
Discounts API module.
"""
from typing import TYPE_CHECKING

from dairyclient.data.models.discounts import Discount, DiscountCreationInput, DiscountList, DiscountUpdateInput

if TYPE_CHECKING:
    from dairyclient.api.client import ApiClient


class DiscountsAPI:
    """Discount endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def get(self, discount_id: int, *, timeout: float | None = None) -> Discount:
        """Fetch a discount (GET /v1/discount/{id})."""
        return self.client.call("get_discount", discount_id=discount_id, timeout=timeout)

    def list(self, query: dict[str, str] | None = None, *, timeout: float | None = None) -> DiscountList:
        """Fetch one page of discounts (GET /v1/discounts)."""
        return self.client.call("get_discounts", query=query, timeout=timeout)

    def create(self, new_discount: DiscountCreationInput, *, timeout: float | None = None) -> Discount:
        return self.client.call("create_discount", body=new_discount, timeout=timeout)

    def update(self, discount_id: int, changes: DiscountUpdateInput, *, timeout: float | None = None) -> Discount:
        return self.client.call("update_discount", discount_id=discount_id, body=changes, timeout=timeout)

    def delete(self, discount_id: int, *, timeout: float | None = None) -> None:
        self.client.call("delete_discount", discount_id=discount_id, timeout=timeout)
