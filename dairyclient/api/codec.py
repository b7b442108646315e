"""
JSON payload codec shared by every data-bearing request.
Encodes request models to bytes and decodes response bodies into destination model types,
classifying API error envelopes along the way.
"""
import json
import logging
import re
import uuid
from dataclasses import fields, is_dataclass
from typing import Any

import requests

from dairyclient.api.errors import (
    APIError,
    DecodeError,
    EncodeError,
    NilDestinationError,
    NotAReferenceError,
)
from dairyclient.data.models.base import ErrorResponse, to_json_dict

_JSON_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")


class JSONNumber:
    """A number carried as text, written to the wire as a bare JSON number."""

    def __init__(self, text: str):
        self.text = text

    def __repr__(self) -> str:
        return f"JSONNumber({self.text!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JSONNumber) and other.text == self.text

    def __hash__(self) -> int:
        return hash(self.text)

    def validate(self) -> str:
        if not isinstance(self.text, str) or not _JSON_NUMBER.fullmatch(self.text):
            raise ValueError(f"invalid number literal {self.text!r}")
        return self.text


class _PayloadEncoder(json.JSONEncoder):
    """Encoder that writes JSONNumber text verbatim.

    json cannot emit raw text, so each number becomes a quoted placeholder that
    encode() swaps back for the literal once the document is serialized.
    """

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)
        self._marker = uuid.uuid4().hex
        self._numbers: list[str] = []

    def default(self, o: Any) -> Any:
        if isinstance(o, JSONNumber):
            self._numbers.append(o.validate())
            return f"{self._marker}:{len(self._numbers) - 1}"
        if hasattr(o, "to_dict"):
            return o.to_dict()
        if is_dataclass(o) and not isinstance(o, type):
            return to_json_dict(o)
        return super().default(o)

    def encode(self, o: Any) -> str:
        text = super().encode(o)
        if not self._numbers:
            return text
        return re.sub(f'"{self._marker}:(\\d+)"', lambda m: self._numbers[int(m.group(1))], text)


def encode_body(value: Any) -> bytes:
    """Serialize a request model (or plain JSON value) to compact JSON bytes."""
    encoder = _PayloadEncoder(separators=(",", ":"), allow_nan=False)
    try:
        text = encoder.encode(value)
    except (TypeError, ValueError) as err:
        raise EncodeError(f"could not encode request body: {err}") from err
    return text.encode("utf-8")


def check_destination(destination: Any) -> None:
    """Reject destinations the decoder cannot build: None first, then non-types."""
    if destination is None:
        raise NilDestinationError("decode destination cannot be None")
    if not isinstance(destination, type):
        raise NotAReferenceError(
            f"decode destination must be a model class, got {type(destination).__name__} instance"
        )


def _build(destination: type, payload: Any) -> Any:
    if hasattr(destination, "from_dict"):
        return destination.from_dict(payload)
    if is_dataclass(destination):
        # unknown keys are ignored, missing keys fall back to field defaults
        known = {f.name for f in fields(destination)}
        return destination(**{k: v for k, v in payload.items() if k in known})
    return destination(payload)


def decode_body(response: requests.Response, destination: type) -> Any:
    """
    Decode a response body into a new instance of `destination`.
      - invalid JSON raises DecodeError
      - an error envelope with a nonzero status raises APIError, even when the body
        would also have mapped onto the destination
      - a body that does not fit the destination's shape raises DecodeError
    """
    check_destination(destination)

    body = response.content
    try:
        payload = json.loads(body)
    except ValueError as err:
        raise DecodeError(f"response body is not valid JSON: {err}") from err

    if isinstance(payload, dict):
        envelope = ErrorResponse.from_dict(payload)
        if envelope.status != 0:
            logging.debug(f"API error envelope from {response.url}: {envelope.status} {envelope.message!r}")
            raise APIError(envelope.status, envelope.message)

    try:
        return _build(destination, payload)
    except (AttributeError, KeyError, TypeError, ValueError) as err:
        raise DecodeError(
            f"response body does not fit {destination.__name__}: {err}"
        ) from err
