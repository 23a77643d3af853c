"""Store one JSON member into a flat key/value map."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Callable, MutableMapping, Optional

from .vector_storage import VectorStorageError, VectorStore, VectorType

TraverseCallback = Callable[[MutableMapping[str, Any], dict], None]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class MapSettingError(Exception):
    """Raised when a JSON member cannot be stored in the map."""


def _to_int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - 0x100000000 if number & 0x80000000 else number


def _atoi(text: str) -> int:
    """Read the leading decimal integer of text, 0 when there is none."""
    match = _LEADING_INT.match(text)
    return _to_int32(int(match.group(1))) if match else 0


def _number_value(value: Any) -> int:
    if isinstance(value, int):
        return _to_int32(value)
    return _atoi(str(value))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _set_array(
    context: MutableMapping[str, Any], key: str, array: list, vectors: VectorStore
) -> None:
    if not array:
        return

    try:
        if isinstance(array[0], str):
            list_str: Optional[list] = vectors.allocate(VectorType.STR)
            list_int: Optional[list] = None
        else:
            list_str = None
            list_int = vectors.allocate(VectorType.INT)
    except VectorStorageError as exc:
        raise MapSettingError(f"cannot allocate vector for key {key!r}: {exc}") from exc

    failure: Optional[MapSettingError] = None
    for element in array:
        if isinstance(element, bool):
            vectors.push(VectorType.INT, 1 if element else 0)
        elif isinstance(element, str):
            vectors.push(VectorType.STR, element)
        elif _is_number(element):
            vectors.push(VectorType.INT, _number_value(element))
        else:
            failure = MapSettingError(
                f"unsupported vector element {element!r} for key {key!r}"
            )
            break

    if list_str:
        context[key] = list_str
    if list_int:
        context[key] = list_int

    if failure is not None:
        raise failure


def set_json_value(
    context: MutableMapping[str, Any],
    key: str,
    value: Any,
    callback: Optional[TraverseCallback],
    vectors: VectorStore,
) -> None:
    """Store a decoded JSON value under key.

    Strings are kept, numbers are truncated to their leading integer, true and
    false become 1 and 0, null becomes the string "null", arrays become
    vectors taken from ``vectors`` and objects are handed to ``callback``.
    """
    if context is None:
        raise MapSettingError("map context is missing")
    if key is None:
        raise MapSettingError("JSON key is missing")

    if isinstance(value, bool):
        context[key] = 1 if value else 0
    elif value is None:
        context[key] = "null"
    elif isinstance(value, str):
        context[key] = value
    elif _is_number(value):
        context[key] = _number_value(value)
    elif isinstance(value, dict):
        if callback is not None:
            callback(context, value)
    elif isinstance(value, list):
        _set_array(context, key, value, vectors)
    else:
        raise MapSettingError(f"no JSON type for value {value!r}")