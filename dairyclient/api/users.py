"""
Users API module for managing store accounts.
"""
from typing import TYPE_CHECKING

from dairyclient.data.models.users import User, UserCreationInput, UserUpdateInput

if TYPE_CHECKING:
    from dairyclient.api.client import ApiClient


class UsersAPI:
    """User endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def create(self, new_user: UserCreationInput, *, timeout: float | None = None) -> User:
        """Create a user (POST /v1/user)."""
        return self.client.call("create_user", body=new_user, timeout=timeout)

    def update(self, user_id: int, changes: UserUpdateInput, *, timeout: float | None = None) -> User:
        """Update a user (PATCH /v1/user/{id})."""
        return self.client.call("update_user", user_id=user_id, body=changes, timeout=timeout)

    def delete(self, user_id: int, *, timeout: float | None = None) -> None:
        """Delete a user (DELETE /v1/user/{id})."""
        self.client.call("delete_user", user_id=user_id, timeout=timeout)
