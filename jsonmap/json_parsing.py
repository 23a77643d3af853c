"""Parse JSON text and flatten its object members into a map."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, MutableMapping

from .map_setting import set_json_value
from .vector_storage import VectorStore


class JsonParsingError(Exception):
    """Raised when JSON text cannot be parsed or saved into a map."""


def _reject_constant(name: str) -> Any:
    raise JsonParsingError(f"invalid JSON constant {name}")


def parse_json(text: str) -> Any:
    """Parse JSON text, keeping non-integer numbers as exact decimals."""
    if not text:
        raise JsonParsingError("JSON text is empty")
    try:
        return json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise JsonParsingError(f"JSON parsing failed: {exc}") from exc


def save_map(context: MutableMapping[str, Any], root: Any, vectors: VectorStore) -> None:
    """Store every member of the root object in context, flattening nested objects.

    Errors from storing a member propagate and stop the traversal.
    """
    if context is None:
        raise JsonParsingError("map context is missing")
    if root is None:
        raise JsonParsingError("JSON root is missing")
    if not isinstance(root, dict):
        raise JsonParsingError("JSON root is not an object")

    def traverse(ctx: MutableMapping[str, Any], obj: dict) -> None:
        for key, value in obj.items():
            set_json_value(ctx, key, value, traverse, vectors)

    traverse(context, root)