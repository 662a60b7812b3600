import enum
import io
import struct

import pytest

from enginekit.binary import (
    Color,
    Transform,
    Vector2,
    Vector3,
    read_array,
    read_color,
    read_enum,
    read_list,
    read_map,
    read_scalar,
    read_size,
    read_string,
    read_transform,
    read_vector2,
    read_vector3,
    read_wstring,
    write_array,
    write_color,
    write_enum,
    write_list,
    write_map,
    write_scalar,
    write_size,
    write_string,
    write_transform,
    write_vector2,
    write_vector3,
    write_wstring,
)


class Trigger(enum.Enum):
    NONE = 0
    DIALOG = 1
    DOOR = 7


def _roundtrip(write, read, value):
    buf = io.BytesIO()
    write(buf, value)
    buf.seek(0)
    result = read(buf)
    assert buf.read() == b""
    return result


def test_size_wire_format_is_u64_little_endian():
    buf = io.BytesIO()
    write_size(buf, 3)
    assert buf.getvalue() == struct.pack("<Q", 3)
    assert len(buf.getvalue()) == 8


def test_size_roundtrip_large():
    buf = io.BytesIO()
    write_size(buf, 2**40 + 5)
    buf.seek(0)
    assert read_size(buf) == 2**40 + 5
    assert buf.read() == b""


@pytest.mark.parametrize(
    "fmt,value", [("i", -12345), ("I", 4000000000), ("?", True), ("d", 3.25), ("f", 1.5), ("b", -3)]
)
def test_scalar_roundtrip(fmt, value):
    buf = io.BytesIO()
    write_scalar(buf, fmt, value)
    assert len(buf.getvalue()) == struct.calcsize("<" + fmt)
    buf.seek(0)
    assert read_scalar(buf, fmt) == value


def test_scalar_default_is_little_endian():
    buf = io.BytesIO()
    write_scalar(buf, "i", 1)
    assert buf.getvalue() == struct.pack("<i", 1)


def test_scalar_out_of_range_raises():
    with pytest.raises(struct.error):
        write_scalar(io.BytesIO(), "B", 300)


def test_enum_roundtrip_and_wire():
    buf = io.BytesIO()
    write_enum(buf, "i", Trigger.DOOR)
    assert buf.getvalue() == struct.pack("<i", Trigger.DOOR.value)
    buf.seek(0)
    assert read_enum(buf, "i", Trigger) is Trigger.DOOR


def test_enum_unknown_value_raises():
    buf = io.BytesIO(struct.pack("<i", 99))
    with pytest.raises(ValueError):
        read_enum(buf, "i", Trigger)


def test_string_wire_format():
    buf = io.BytesIO()
    write_string(buf, "abc")
    assert buf.getvalue() == struct.pack("<Q", 3) + b"abc"


@pytest.mark.parametrize("text", ["", "level_01", "héllo wörld"])
def test_string_roundtrip(text):
    buf = io.BytesIO()
    write_string(buf, text)
    buf.seek(0)
    assert read_string(buf) == text
    assert buf.read() == b""


def test_wstring_wire_format():
    buf = io.BytesIO()
    write_wstring(buf, "hi")
    assert buf.getvalue() == struct.pack("<Q", 2) + "hi".encode("utf-16-le")


@pytest.mark.parametrize("text", ["", "Assets/Models/Tree.fbx", "ÅÄÖ", "emoji \U0001f600"])
def test_wstring_roundtrip(text):
    buf = io.BytesIO()
    write_wstring(buf, text)
    buf.seek(0)
    assert read_wstring(buf) == text
    assert buf.read() == b""


def test_wstring_length_counts_code_units():
    buf = io.BytesIO()
    write_wstring(buf, "\U0001f600")
    buf.seek(0)
    assert read_size(buf) == len("\U0001f600".encode("utf-16-le")) // 2


def test_list_roundtrip():
    items = ["a", "bb", "ccc"]
    buf = io.BytesIO()
    write_list(buf, items, write_string)
    buf.seek(0)
    assert read_list(buf, read_string) == items


def test_list_of_vectors_roundtrip():
    items = [Vector3(1.0, 2.0, 3.0), Vector3(-0.5, 0.25, 8.0)]
    buf = io.BytesIO()
    write_list(buf, items, write_vector3)
    buf.seek(0)
    assert read_list(buf, read_vector3) == items


def test_empty_list_is_only_size():
    buf = io.BytesIO()
    write_list(buf, [], write_string)
    assert buf.getvalue() == struct.pack("<Q", 0)


def test_map_roundtrip():
    mapping = {1: "door", 2: "chest", 42: "exit"}
    buf = io.BytesIO()
    write_map(buf, mapping, lambda s, k: write_scalar(s, "i", k), write_string)
    buf.seek(0)
    result = read_map(buf, lambda s: read_scalar(s, "i"), read_string)
    assert result == mapping


def test_map_of_colors_roundtrip():
    mapping = {"red": Color(1.0, 0.0, 0.0, 1.0), "clear": Color(0.0, 0.0, 0.0, 0.0)}
    buf = io.BytesIO()
    write_map(buf, mapping, write_string, write_color)
    buf.seek(0)
    assert read_map(buf, read_string, read_color) == mapping


def test_array_has_no_prefix_and_roundtrips():
    values = [1, 2, 3, 4]
    buf = io.BytesIO()
    write_array(buf, "i", values)
    assert len(buf.getvalue()) == 4 * struct.calcsize("<i")
    buf.seek(0)
    assert read_array(buf, "i", 4) == values


def test_vector2_roundtrip():
    assert _roundtrip(write_vector2, read_vector2, Vector2(1.5, -2.25)) == Vector2(1.5, -2.25)


def test_vector3_wire_format():
    buf = io.BytesIO()
    write_vector3(buf, Vector3(1.0, 2.0, 3.0))
    assert buf.getvalue() == struct.pack("<3f", 1.0, 2.0, 3.0)


def test_transform_roundtrip():
    transform = Transform(Vector3(1.0, 2.0, 3.0), Vector3(0.0, 90.0, 0.0), Vector3(2.0, 2.0, 2.0))
    assert _roundtrip(write_transform, read_transform, transform) == transform


def test_transform_is_nine_floats():
    buf = io.BytesIO()
    write_transform(buf, Transform())
    assert len(buf.getvalue()) == 9 * struct.calcsize("<f")


def test_color_roundtrip():
    color = Color(0.5, 0.25, 0.125, 1.0)
    assert _roundtrip(write_color, read_color, color) == color


def test_float_precision_is_single():
    result = _roundtrip(write_vector2, read_vector2, Vector2(0.1, 0.2))
    assert result.x == struct.unpack("<f", struct.pack("<f", 0.1))[0]


@pytest.mark.parametrize(
    "reader",
    [read_size, read_string, read_wstring, read_vector3, read_color, read_transform],
)
def test_truncated_input_raises_eof(reader):
    with pytest.raises(EOFError):
        reader(io.BytesIO(b"\x05\x00"))


def test_string_with_short_body_raises_eof():
    buf = io.BytesIO(struct.pack("<Q", 10) + b"abc")
    with pytest.raises(EOFError):
        read_string(buf)