import pytest

from jsonmap.json_parsing import JsonParsingError, parse_json, save_map
from jsonmap.map_setting import MapSettingError
from jsonmap.vector_storage import VectorStore


@pytest.fixture
def store():
    return VectorStore()


def test_parse_json_round_trip_of_plain_values():
    root = parse_json('{"a": "x", "b": 7, "c": [1, 2], "d": null, "e": true}')
    assert root == {"a": "x", "b": 7, "c": [1, 2], "d": None, "e": True}


@pytest.mark.parametrize("text", ["", "{", "not json", '{"a": NaN}'])
def test_parse_json_rejects_bad_text(text):
    with pytest.raises(JsonParsingError):
        parse_json(text)


def test_save_map_flattens_nested_objects(store):
    root = parse_json('{"problem_id": 2, "input": {"l1": [2, 4, 3], "label": "sum"}}')
    ctx = {}
    save_map(ctx, root, store)
    assert ctx == {"problem_id": 2, "l1": [2, 4, 3], "label": "sum"}


def test_save_map_converts_scalars(store):
    root = parse_json('{"pi": 3.14, "flag": false, "gone": null, "words": ["x", "y"]}')
    ctx = {}
    save_map(ctx, root, store)
    assert ctx["pi"] == 3
    assert ctx["flag"] == 0
    assert ctx["gone"] == "null"
    assert ctx["words"] == ["x", "y"]


def test_later_keys_overwrite_earlier(store):
    root = parse_json('{"k": "outer", "inner": {"k": "inner"}}')
    ctx = {}
    save_map(ctx, root, store)
    assert ctx["k"] == "inner"


def test_save_map_stops_on_member_error(store):
    root = parse_json('{"first": 1, "bad": [null], "last": 3}')
    ctx = {}
    with pytest.raises(MapSettingError):
        save_map(ctx, root, store)
    assert ctx == {"first": 1}


def test_root_must_be_object(store):
    with pytest.raises(JsonParsingError):
        save_map({}, parse_json("[1, 2, 3]"), store)


def test_root_missing_raises(store):
    with pytest.raises(JsonParsingError):
        save_map({}, None, store)


def test_context_missing_raises(store):
    with pytest.raises(JsonParsingError):
        save_map(None, {"a": 1}, store)