from dataclasses import dataclass, field
from typing import Any

from dairyclient.data.models.base import DBRow, to_json_dict


@dataclass
class User:
    row: DBRow = field(default_factory=DBRow)
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    is_admin: bool = False

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "User":
        return User(
            row=DBRow.from_dict(d),
            first_name=d.get("first_name", ""),
            last_name=d.get("last_name", ""),
            email=d.get("email", ""),
            is_admin=d.get("is_admin", False),
        )

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class UserCreationInput:
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    email: str = ""
    password: str = ""
    is_admin: bool = False

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "UserCreationInput":
        return UserCreationInput(
            first_name=d.get("first_name", ""),
            last_name=d.get("last_name", ""),
            username=d.get("username", ""),
            email=d.get("email", ""),
            password=d.get("password", ""),
            is_admin=d.get("is_admin", False),
        )

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class UserUpdateInput:
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    email: str = ""
    current_password: str = ""
    new_password: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "UserUpdateInput":
        return UserUpdateInput(
            first_name=d.get("first_name", ""),
            last_name=d.get("last_name", ""),
            username=d.get("username", ""),
            email=d.get("email", ""),
            current_password=d.get("current_password", ""),
            new_password=d.get("new_password", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class UserLoginInput:
    """Body of POST /login."""

    username: str
    password: str

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)
