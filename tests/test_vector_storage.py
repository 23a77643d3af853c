import pytest

from jsonmap.vector_storage import (
    MAX_SIZE_VEC,
    VectorStorageError,
    VectorStore,
    VectorType,
)


def test_push_goes_to_allocated_vector():
    store = VectorStore()
    vec = store.allocate(VectorType.STR)
    store.push(VectorType.STR, "a")
    store.push(VectorType.STR, "b")
    assert vec == ["a", "b"]


def test_types_are_independent():
    store = VectorStore()
    strs = store.allocate(VectorType.STR)
    ints = store.allocate(VectorType.INT)
    store.push(VectorType.INT, 5)
    store.push(VectorType.STR, "x")
    assert strs == ["x"]
    assert ints == [5]


def test_push_without_open_vector_is_ignored():
    store = VectorStore()
    vec = store.allocate(VectorType.INT)
    store.free(VectorType.INT)
    store.push(VectorType.INT, 1)
    assert vec == []


def test_successive_allocations_are_distinct_and_kept():
    store = VectorStore()
    first = store.allocate(VectorType.INT)
    store.push(VectorType.INT, 1)
    second = store.allocate(VectorType.INT)
    store.push(VectorType.INT, 2)
    assert first is not second
    assert first == [1]
    assert second == [2]


def test_free_clears_and_returns_slot():
    store = VectorStore()
    vec = store.allocate(VectorType.STR)
    store.push(VectorType.STR, "q")
    store.free(VectorType.STR)
    assert vec == []
    again = store.allocate(VectorType.STR)
    assert again is vec


def test_free_below_zero_stays_at_zero():
    store = VectorStore()
    store.free(VectorType.INT)
    store.free(VectorType.INT)
    first = store.allocate(VectorType.INT)
    fresh = VectorStore().allocate(VectorType.INT)
    assert first == fresh == []


def test_out_of_memory():
    store = VectorStore()
    for _ in range(MAX_SIZE_VEC - 1):
        store.allocate(VectorType.STR)
    with pytest.raises(VectorStorageError):
        store.allocate(VectorType.STR)


def test_invalid_type():
    store = VectorStore()
    with pytest.raises(VectorStorageError):
        store.allocate(7)
    with pytest.raises(VectorStorageError):
        store.push(0, 1)
    with pytest.raises(VectorStorageError):
        store.clear(3)


def test_reset_empties_everything():
    store = VectorStore()
    vec = store.allocate(VectorType.INT)
    store.push(VectorType.INT, 9)
    store.reset()
    store.push(VectorType.INT, 4)
    assert vec == [9]
    assert store.allocate(VectorType.INT) == []