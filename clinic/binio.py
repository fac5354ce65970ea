"""Little-endian binary primitives used by the save file format."""

from __future__ import annotations

import struct
from typing import BinaryIO

_U32 = struct.Struct("<I")
_U8 = struct.Struct("<B")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _pack(packer: struct.Struct, value: int) -> bytes:
    try:
        return packer.pack(value)
    except struct.error as exc:
        raise ValueError(f"value {value!r} out of range") from exc


def write_u32(stream: BinaryIO, value: int) -> None:
    """Write an unsigned 32-bit integer."""
    stream.write(_pack(_U32, value))


def read_u32(stream: BinaryIO) -> int:
    """Read an unsigned 32-bit integer."""
    return _U32.unpack(_read_exact(stream, _U32.size))[0]


def write_u8(stream: BinaryIO, value: int) -> None:
    """Write a single unsigned byte."""
    stream.write(_pack(_U8, value))


def read_u8(stream: BinaryIO) -> int:
    """Read a single unsigned byte."""
    return _read_exact(stream, 1)[0]


def write_str(stream: BinaryIO, text: str) -> None:
    """Write a byte string: a u32 length followed by one byte per character."""
    data = text.encode("latin-1")
    write_u32(stream, len(data))
    stream.write(data)


def read_str(stream: BinaryIO) -> str:
    """Read a string written by write_str."""
    size = read_u32(stream)
    return _read_exact(stream, size).decode("latin-1")


def write_wstr(stream: BinaryIO, text: str) -> None:
    """Write a wide string: a u32 length followed by a u32 code point per character."""
    write_u32(stream, len(text))
    stream.write(struct.pack(f"<{len(text)}I", *(ord(ch) for ch in text)))


def read_wstr(stream: BinaryIO) -> str:
    """Read a string written by write_wstr."""
    size = read_u32(stream)
    data = _read_exact(stream, size * 4)
    return "".join(chr(code) for code in struct.unpack(f"<{size}I", data))