from dataclasses import Field, dataclass, field, fields, is_dataclass
from datetime import datetime
from typing import Any, ClassVar, get_args

from dairyclient.utils.time import format_rfc3339, parse_rfc3339

OMITEMPTY = {"omitempty": True}


@dataclass
class DBRow:
    """Base columns every stored record carries. Included by value as `row`."""

    id: int = 0
    created_on: datetime | None = None
    updated_on: datetime | None = field(default=None, metadata=OMITEMPTY)
    archived_on: datetime | None = field(default=None, metadata=OMITEMPTY)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "DBRow":
        return DBRow(
            id=d.get("id", 0),
            created_on=parse_rfc3339(d.get("created_on")),
            updated_on=parse_rfc3339(d.get("updated_on")),
            archived_on=parse_rfc3339(d.get("archived_on")),
        )


def _encode_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_rfc3339(value)
    if is_dataclass(value) and not isinstance(value, type):
        return to_json_dict(value)
    if isinstance(value, list):
        return [_encode_value(v) for v in value]
    return value


def _is_timestamp(f: Field) -> bool:
    return f.type is datetime or datetime in get_args(f.type)


def to_json_dict(obj: Any) -> dict[str, Any]:
    """Flatten a model dataclass into its wire representation.

    The `row` field is merged into the top level. Fields flagged omitempty are dropped
    when they hold an empty value; other unset timestamps go out as the zero value.
    """
    out: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if f.name == "row" and isinstance(value, DBRow):
            out.update(to_json_dict(value))
            continue
        if f.metadata.get("omitempty") and not value:
            continue
        if value is None and _is_timestamp(f):
            out[f.name] = format_rfc3339(None)
            continue
        out[f.name] = _encode_value(value)
    return out


@dataclass
class ListResponse:
    """Pagination envelope. Subclasses pin `item_type` so `data` decodes to models."""

    count: int = 0
    limit: int = 0
    page: int = 0
    data: list = field(default_factory=list)

    item_type: ClassVar[type | None] = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "ListResponse":
        items = d.get("data") or []
        if cls.item_type is not None:
            items = [cls.item_type.from_dict(item) for item in items]
        return cls(
            count=d.get("count", 0),
            limit=d.get("limit", 0),
            page=d.get("page", 0),
            data=list(items),
        )

    def to_dict(self) -> dict[str, Any]:
        return to_json_dict(self)


@dataclass
class ErrorResponse:
    status: int = 0
    message: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ErrorResponse":
        status = d.get("status", 0)
        if not isinstance(status, int) or isinstance(status, bool):
            status = 0
        message = d.get("message", "")
        return ErrorResponse(status=status, message=message if isinstance(message, str) else str(message))
