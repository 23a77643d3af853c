"""Load a JSON document into a flat key/value map with typed accessors."""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path
from typing import Any, Optional, Union

from .json_parsing import JsonParsingError, parse_json, save_map
from .map_setting import MapSettingError
from .vector_storage import VectorStore


class CreateMode(IntEnum):
    """How the source handed to JsonToMap is interpreted."""

    FILE_PATH = 0
    STRING_BUFF = 1


class Json2MapError(Exception):
    """Raised when a map cannot be built or a stored value cannot be read."""


class JsonToMap:
    """A flat map of the members of one JSON object, nested objects flattened.

    Numbers are stored as integers, true/false as 1/0, null as "null",
    strings as strings and arrays as lists of strings or integers.
    """

    def __init__(
        self,
        source: Union[str, os.PathLike],
        mode: CreateMode = CreateMode.FILE_PATH,
    ) -> None:
        try:
            mode = CreateMode(mode)
        except ValueError:
            raise Json2MapError(f"wrong create mode: {mode!r}") from None

        self._vectors = VectorStore()
        self._data: Optional[dict[str, Any]] = {}

        if mode is CreateMode.FILE_PATH:
            text = self._read_file(source)
        else:
            if not isinstance(source, str):
                raise Json2MapError("string buffer mode needs a str source")
            text = source

        try:
            root = parse_json(text)
            save_map(self._data, root, self._vectors)
        except (JsonParsingError, MapSettingError) as exc:
            self.close()
            raise Json2MapError(str(exc)) from exc

    @staticmethod
    def _read_file(source: Union[str, os.PathLike]) -> str:
        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise Json2MapError(f"cannot open file {str(path)!r}: {exc}") from exc
        if path.suffix != ".json":
            raise Json2MapError(f"{str(path)!r} is not a .json file")
        return text

    @property
    def _map(self) -> dict[str, Any]:
        if self._data is None:
            raise Json2MapError("map is closed")
        return self._data

    def _lookup(self, key: str) -> Any:
        data = self._map
        if key not in data:
            raise KeyError(key)
        return data[key]

    def keys(self) -> list[str]:
        """Return every stored key in insertion order."""
        return list(self._map)

    def get_int(self, key: str) -> int:
        """Return the integer stored under key."""
        value = self._lookup(key)
        if not isinstance(value, int):
            raise Json2MapError(f"value of {key!r} is not an integer")
        return value

    def get_char(self, key: str) -> str:
        """Return the first character of the string stored under key."""
        value = self._lookup(key)
        if not isinstance(value, str) or not value:
            raise Json2MapError(f"value of {key!r} is not a non-empty string")
        return value[0]

    def get_string(self, key: str) -> str:
        """Return the string stored under key."""
        value = self._lookup(key)
        if not isinstance(value, str):
            raise Json2MapError(f"value of {key!r} is not a string")
        return value

    def get_float(self, key: str) -> float:
        """Return the number stored under key as a float."""
        return self.get_double(key)

    def get_double(self, key: str) -> float:
        """Return the number stored under key as a float."""
        value = self._lookup(key)
        if not isinstance(value, (int, float)):
            raise Json2MapError(f"value of {key!r} is not a number")
        return float(value)

    def _get_vector(self, key: str) -> Optional[list]:
        value = self._map.get(key)
        return value if isinstance(value, list) else None

    def get_vector_int(self, key: str) -> Optional[list[int]]:
        """Return the integer vector stored under key, or None."""
        return self._get_vector(key)

    def get_vector_str(self, key: str) -> Optional[list[str]]:
        """Return the string vector stored under key, or None."""
        return self._get_vector(key)

    def close(self) -> None:
        """Release the map and its vectors; further reads raise."""
        if self._data is not None:
            self._data.clear()
            self._data = None
        self._vectors.reset()

    def __enter__(self) -> "JsonToMap":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()