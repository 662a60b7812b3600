"""Little-endian binary serialization of scalars, strings, containers and engine value types.

Sizes and lengths are written as unsigned 64-bit integers. Wide strings are
UTF-16LE, and their length prefix counts 16-bit code units. Fixed-size arrays
carry no length prefix.
"""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Hashable, Iterable, Mapping, TypeVar

__all__ = [
    "Vector2",
    "Vector3",
    "Transform",
    "Color",
    "write_scalar",
    "read_scalar",
    "write_size",
    "read_size",
    "write_enum",
    "read_enum",
    "write_string",
    "read_string",
    "write_wstring",
    "read_wstring",
    "write_list",
    "read_list",
    "write_map",
    "read_map",
    "write_array",
    "read_array",
    "write_vector2",
    "read_vector2",
    "write_vector3",
    "read_vector3",
    "write_transform",
    "read_transform",
    "write_color",
    "read_color",
]

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
E = TypeVar("E", bound=enum.Enum)

_SIZE = struct.Struct("<Q")
_FLOAT = struct.Struct("<f")
_BYTE_ORDER_CHARS = "@=<>!"


@dataclass
class Vector2:
    """Two-component float vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Vector3:
    """Three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Transform:
    """Position, rotation (Euler angles) and scale."""

    position: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))


@dataclass
class Color:
    """RGBA colour with float channels."""

    r: float
    g: float
    b: float
    a: float


def _struct_for(fmt: str) -> struct.Struct:
    if not fmt or fmt[0] not in _BYTE_ORDER_CHARS:
        fmt = "<" + fmt
    return struct.Struct(fmt)


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise EOFError(f"expected {count} bytes, got {len(data)}")
    return data


def write_scalar(stream: BinaryIO, fmt: str, value) -> None:
    """Write one value packed with a struct format (little-endian unless stated)."""
    stream.write(_struct_for(fmt).pack(value))


def read_scalar(stream: BinaryIO, fmt: str):
    """Read one value packed with a struct format (little-endian unless stated)."""
    packer = _struct_for(fmt)
    (value,) = packer.unpack(_read_exact(stream, packer.size))
    return value


def write_size(stream: BinaryIO, size: int) -> None:
    """Write a size or length as an unsigned 64-bit integer."""
    stream.write(_SIZE.pack(size))


def read_size(stream: BinaryIO) -> int:
    """Read a size or length written by write_size."""
    (size,) = _SIZE.unpack(_read_exact(stream, _SIZE.size))
    return size


def write_enum(stream: BinaryIO, fmt: str, member: enum.Enum) -> None:
    """Write an enum member as its underlying value."""
    write_scalar(stream, fmt, member.value)


def read_enum(stream: BinaryIO, fmt: str, enum_type: type[E]) -> E:
    """Read an underlying value and convert it to a member of enum_type."""
    return enum_type(read_scalar(stream, fmt))


def write_string(stream: BinaryIO, text: str | bytes) -> None:
    """Write a byte string prefixed by its length; str is encoded as UTF-8."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    write_size(stream, len(data))
    stream.write(data)


def read_string(stream: BinaryIO) -> str:
    """Read a length-prefixed string written by write_string."""
    length = read_size(stream)
    return _read_exact(stream, length).decode("utf-8")


def write_wstring(stream: BinaryIO, text: str) -> None:
    """Write a UTF-16LE string prefixed by its length in code units."""
    data = text.encode("utf-16-le")
    write_size(stream, len(data) // 2)
    stream.write(data)


def read_wstring(stream: BinaryIO) -> str:
    """Read a wide string written by write_wstring."""
    length = read_size(stream)
    return _read_exact(stream, length * 2).decode("utf-16-le")


def write_list(
    stream: BinaryIO, items: Iterable[T], write_item: Callable[[BinaryIO, T], None]
) -> None:
    """Write a count followed by each item."""
    items = list(items)
    write_size(stream, len(items))
    for item in items:
        write_item(stream, item)


def read_list(stream: BinaryIO, read_item: Callable[[BinaryIO], T]) -> list[T]:
    """Read a count followed by that many items."""
    return [read_item(stream) for _ in range(read_size(stream))]


def write_map(
    stream: BinaryIO,
    mapping: Mapping[K, V],
    write_key: Callable[[BinaryIO, K], None],
    write_value: Callable[[BinaryIO, V], None],
) -> None:
    """Write an entry count followed by key/value pairs."""
    write_size(stream, len(mapping))
    for key, value in mapping.items():
        write_key(stream, key)
        write_value(stream, value)


def read_map(
    stream: BinaryIO,
    read_key: Callable[[BinaryIO], K],
    read_value: Callable[[BinaryIO], V],
) -> dict[K, V]:
    """Read a map written by write_map; later duplicate keys win."""
    result: dict[K, V] = {}
    for _ in range(read_size(stream)):
        key = read_key(stream)
        result[key] = read_value(stream)
    return result


def write_array(stream: BinaryIO, fmt: str, values: Iterable) -> None:
    """Write a fixed-size array of scalars with no length prefix."""
    for value in values:
        write_scalar(stream, fmt, value)


def read_array(stream: BinaryIO, fmt: str, count: int) -> list:
    """Read a fixed-size array of count scalars."""
    packer = _struct_for(fmt)
    data = _read_exact(stream, packer.size * count)
    return [value for (value,) in packer.iter_unpack(data)]


def write_vector2(stream: BinaryIO, vector: Vector2) -> None:
    """Write x and y as 32-bit floats."""
    stream.write(_FLOAT.pack(vector.x) + _FLOAT.pack(vector.y))


def read_vector2(stream: BinaryIO) -> Vector2:
    """Read a Vector2 written by write_vector2."""
    return Vector2(*read_array(stream, "f", 2))


def write_vector3(stream: BinaryIO, vector: Vector3) -> None:
    """Write x, y and z as 32-bit floats."""
    write_array(stream, "f", (vector.x, vector.y, vector.z))


def read_vector3(stream: BinaryIO) -> Vector3:
    """Read a Vector3 written by write_vector3."""
    return Vector3(*read_array(stream, "f", 3))


def write_transform(stream: BinaryIO, transform: Transform) -> None:
    """Write position, rotation and scale as three Vector3 values."""
    write_vector3(stream, transform.position)
    write_vector3(stream, transform.rotation)
    write_vector3(stream, transform.scale)


def read_transform(stream: BinaryIO) -> Transform:
    """Read a Transform written by write_transform."""
    position = read_vector3(stream)
    rotation = read_vector3(stream)
    scale = read_vector3(stream)
    return Transform(position, rotation, scale)


def write_color(stream: BinaryIO, color: Color) -> None:
    """Write r, g, b and a as 32-bit floats."""
    write_array(stream, "f", (color.r, color.g, color.b, color.a))


def read_color(stream: BinaryIO) -> Color:
    """Read a Color written by write_color."""
    return Color(*read_array(stream, "f", 4))