import pytest

from instasheets.exceptions import FlattenDepthError
from instasheets.utils.flatten import Row, flatten, flatten_json, format_number, stringify
from instasheets.utils.json_tree import Primitive, Record, Sequence, decode


def test_flat_record_one_row_per_key_in_order():
    rows = flatten_json({"id": "17", "username": "snoopy", "full_name": "Snoopy Dog"})
    assert rows == [
        Row("id", "17"),
        Row("username", "snoopy"),
        Row("full_name", "Snoopy Dog"),
    ]


def test_nested_record_emits_header_then_children():
    rows = flatten_json({"a": 1, "b": {"c": 2, "d": 3}})
    assert rows == [("a", "1"), ("b:", ""), ("c", "2"), ("d", "3")]


def test_sequence_page_concatenates_records_without_separators():
    assert flatten_json([{"x": 1}, {"y": 2}]) == [("x", "1"), ("y", "2")]


def test_empty_record_produces_no_rows():
    assert flatten_json({}) == []
    assert flatten_json([]) == []


def test_nested_sequence_elements_are_labelled_by_index():
    rows = flatten_json({"tags": ["sun", "sea"], "users_in_photo": [{"user": {"id": "9"}}]})
    assert rows == [
        ("tags:", ""),
        ("0", "sun"),
        ("1", "sea"),
        ("users_in_photo:", ""),
        ("0:", ""),
        ("user:", ""),
        ("id", "9"),
    ]


def test_media_record_keeps_api_key_order():
    media = {
        "type": "image",
        "likes": {"count": 12},
        "caption": None,
        "user_has_liked": False,
        "location": {"latitude": 48.85, "name": "Paris"},
        "id": "22699663",
    }
    rows = flatten_json(media)
    assert [r.label for r in rows] == [
        "type",
        "likes:",
        "count",
        "caption",
        "user_has_liked",
        "location:",
        "latitude",
        "name",
        "id",
    ]
    assert rows[3] == ("caption", "")
    assert rows[4] == ("user_has_liked", "false")
    assert rows[6] == ("latitude", "48.85")


def test_stringify_scalars():
    assert stringify("x") == "x"
    assert stringify(None) == ""
    assert stringify(True) == "true"
    assert stringify(5) == "5"
    assert stringify(2.5) == "2.5"


@pytest.mark.parametrize("value,text", [
    (1.0, "1"),
    (-3.0, "-3"),
    (0.0, "0"),
    (0.5, "0.5"),
    (123.456, "123.456"),
    (48.858844, "48.858844"),
    (1e20, "100000000000000000000"),
    (1e21, "1e+21"),
    (1.5e22, "1.5e+22"),
    (0.000001, "0.000001"),
    (1e-7, "1e-7"),
    (-2.5e-10, "-2.5e-10"),
])
def test_floats_render_like_javascript(value, text):
    assert format_number(value) == text
    assert stringify(value) == text


def test_float_cells_in_a_record():
    assert flatten_json({"lat": 37.0, "lng": -122.4194}) == [("lat", "37"), ("lng", "-122.4194")]


def test_primitive_pages():
    assert flatten(Primitive("hello")) == [("data", "hello")]
    assert flatten(Primitive(None)) == []


def test_primitive_items_in_sequence_page_use_index_labels():
    assert flatten_json(["a", {"b": 1}, "c"]) == [("0", "a"), ("b", "1"), ("2", "c")]


def test_handles_nesting_deeper_than_the_recursion_limit():
    depth = 5000
    data = {}
    cursor = data
    for _ in range(depth - 1):
        cursor["n"] = {}
        cursor = cursor["n"]
    cursor["leaf"] = 1
    rows = flatten_json(data, max_depth=depth)
    assert len(rows) == depth
    assert rows[-1] == ("leaf", "1")


def test_depth_guard_raises():
    with pytest.raises(FlattenDepthError):
        flatten_json({"a": {"b": {"c": 1}}}, max_depth=2)


def test_depth_guard_applies_to_hand_built_trees():
    tree = Record([("a", Record([("b", Sequence([Primitive(1)]))]))])
    with pytest.raises(FlattenDepthError):
        flatten(tree, max_depth=2)
    assert flatten(tree, max_depth=3) == [("a:", ""), ("b:", ""), ("0", "1")]


def test_decode_once_then_flatten_matches_flatten_json():
    data = {"meta": {"k": [1, {"z": None}]}}
    assert flatten(decode(data)) == flatten_json(data)
