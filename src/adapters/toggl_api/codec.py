"""JSON encoding/decoding for Toggl payloads."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.errors import SerializationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def encode(payload: dict[str, Any], *, what: str) -> bytes:
    try:
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Failed to serialize the {what}") from exc


def decode_list(content: bytes, model: type[ModelT], *, what: str) -> list[ModelT]:
    """Decode a bare JSON array; `null` is an empty list."""

    try:
        items = TypeAdapter(list[model] | None).validate_json(content)  # type: ignore[valid-type]
    except PydanticValidationError as exc:
        raise SerializationError(f"Failed to deserialize the {what}") from exc
    return items or []


def decode_data(content: bytes, model: type[ModelT], *, what: str) -> ModelT:
    """Decode a `{"data": {...}}` envelope (create responses)."""

    try:
        raw = json.loads(content)
    except ValueError as exc:
        raise SerializationError(f"Failed to deserialize the {what}") from exc

    if not isinstance(raw, dict) or not isinstance(raw.get("data"), dict):
        raise SerializationError(f"Failed to deserialize the {what}: missing 'data' object")

    try:
        return model.model_validate(raw["data"])
    except PydanticValidationError as exc:
        raise SerializationError(f"Failed to deserialize the {what}") from exc
