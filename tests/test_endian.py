from __future__ import annotations

import pytest

from n64rom.endian import Endian, classify, convert, normalize
from n64rom.errors import RomError, UnknownMagicError


@pytest.mark.parametrize(
    ("first_byte", "expected"),
    [
        (0x80, Endian.NATIVE),
        (0x37, Endian.BYTE_SWAPPED),
        (0x40, Endian.LITTLE_ENDIAN),
    ],
)
def test_classify_known_magics(first_byte: int, expected: Endian) -> None:
    assert classify(first_byte) is expected


@pytest.mark.parametrize("first_byte", [0x00, 0x12, 0x36, 0x41, 0x7F, 0x81, 0xFF])
def test_classify_rejects_unknown_byte(first_byte: int) -> None:
    with pytest.raises(UnknownMagicError) as excinfo:
        classify(first_byte)

    assert excinfo.value.value == first_byte
    assert str(excinfo.value) == f"unknown header: {first_byte:#x}"
    assert isinstance(excinfo.value, RomError)
    assert isinstance(excinfo.value, ValueError)


def test_magic_first_bytes_are_distinct() -> None:
    firsts = {endian.magic[0] for endian in Endian}
    assert len(firsts) == 3
    assert all(classify(endian.magic[0]) is endian for endian in Endian)


def test_extensions() -> None:
    assert Endian.NATIVE.extension == ".z64"
    assert Endian.BYTE_SWAPPED.extension == ".v64"
    assert Endian.LITTLE_ENDIAN.extension == ".n64"


def test_normalize_native_is_noop() -> None:
    buffer = bytearray(b"\x80\x37\x12\x40abcdef")
    normalize(buffer, Endian.NATIVE)
    assert buffer == bytearray(b"\x80\x37\x12\x40abcdef")


def test_normalize_byte_swapped_swaps_pairs() -> None:
    buffer = bytearray(b"\x37\x80\x40\x12BADC")
    normalize(buffer, Endian.BYTE_SWAPPED)
    assert buffer == bytearray(b"\x80\x37\x12\x40ABCD")


def test_normalize_byte_swapped_leaves_odd_tail() -> None:
    buffer = bytearray(b"\x37\x80\x40\x12Z")
    normalize(buffer, Endian.BYTE_SWAPPED)
    assert buffer == bytearray(b"\x80\x37\x12\x40Z")


def test_normalize_little_endian_reverses_whole_buffer() -> None:
    buffer = bytearray(b"\x40\x12\x37\x80" + b"body" + b"\x80")
    normalize(buffer, Endian.LITTLE_ENDIAN)
    assert buffer == bytearray(b"\x80ydob\x80\x37\x12\x40")


def test_normalize_mutates_in_place() -> None:
    buffer = bytearray(b"\x37\x80\x40\x12")
    alias = buffer
    normalize(buffer, Endian.BYTE_SWAPPED)
    assert alias is buffer
    assert alias[:4] == bytearray(b"\x80\x37\x12\x40")


@pytest.mark.parametrize("endian", list(Endian))
def test_normalize_is_self_inverse(endian: Endian, native_image: bytes) -> None:
    buffer = bytearray(native_image)
    normalize(buffer, endian)
    normalize(buffer, endian)
    assert bytes(buffer) == native_image


def test_normalize_empty_buffer() -> None:
    for endian in Endian:
        buffer = bytearray()
        normalize(buffer, endian)
        assert buffer == bytearray()


def test_convert_returns_copy(native_image: bytes) -> None:
    swapped = convert(native_image, Endian.BYTE_SWAPPED)

    assert isinstance(swapped, bytes)
    assert swapped[:4] == Endian.BYTE_SWAPPED.magic
    assert len(swapped) == len(native_image)
    assert convert(swapped, Endian.BYTE_SWAPPED) == native_image


def test_convert_little_endian_is_full_reversal(native_image: bytes) -> None:
    assert convert(native_image, Endian.LITTLE_ENDIAN) == native_image[::-1]
