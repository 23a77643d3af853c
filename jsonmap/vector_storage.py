"""A fixed pool of string and integer vectors handed out one at a time."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

MAX_SIZE_VEC = 256


class VectorType(IntEnum):
    """Kind of element a vector holds."""

    STR = 1
    INT = 2


class VectorStorageError(Exception):
    """Raised when a vector cannot be allocated, cleared or freed."""


def _check_type(vec_type: Any) -> VectorType:
    try:
        return VectorType(vec_type)
    except ValueError:
        raise VectorStorageError(f"unsupported vector type: {vec_type!r}") from None


class VectorStore:
    """Per-type pools of MAX_SIZE_VEC vectors with a current slot each."""

    def __init__(self) -> None:
        self._pools: dict[VectorType, list[list]] = {}
        self._occupied: dict[VectorType, int] = {}
        self._opened: dict[VectorType, bool] = {}
        self.reset()

    def reset(self) -> None:
        """Empty every vector and return all slots to the start."""
        for vt in VectorType:
            self._pools[vt] = [[] for _ in range(MAX_SIZE_VEC)]
            self._occupied[vt] = 0
            self._opened[vt] = False

    def allocate(self, vec_type: VectorType) -> list:
        """Open the next slot of this type and return its vector."""
        vt = _check_type(vec_type)
        index = self._occupied[vt] + 1
        if index >= MAX_SIZE_VEC:
            raise VectorStorageError(f"{vt.name} vector storage is out of memory")
        self._occupied[vt] = index
        self._opened[vt] = True
        return self._pools[vt][index]

    def free(self, vec_type: VectorType) -> None:
        """Clear the current vector, step back one slot and close it."""
        vt = _check_type(vec_type)
        self.clear(vt)
        self._occupied[vt] = max(self._occupied[vt] - 1, 0)
        self._opened[vt] = False

    def clear(self, vec_type: VectorType) -> None:
        """Empty the vector in the current slot."""
        vt = _check_type(vec_type)
        index = self._occupied[vt]
        if index >= MAX_SIZE_VEC:
            raise VectorStorageError("vector index would overflow")
        self._pools[vt][index].clear()

    def push(self, vec_type: VectorType, value: Any) -> None:
        """Append to the open vector of this type; ignored when none is open."""
        vt = _check_type(vec_type)
        index = self._occupied[vt]
        if index >= MAX_SIZE_VEC:
            raise VectorStorageError("vector index would overflow")
        if not self._opened[vt]:
            return
        self._pools[vt][index].append(str(value) if vt is VectorType.STR else int(value))