from __future__ import annotations

import struct

import pytest

from n64rom.config import HEADER_LITTLE_ENDIAN, HEADER_NATIVE, HEADER_SIZE

CLOCK_RATE = 0x0000000F
ENTRY_POINT = 0x80001000
CRC1 = 0x635A2BFF
CRC2 = 0x8B022326
TITLE = b"SUPER MARIO 64"
MANUFACTURER = 0x0000004E
CARTRIDGE_ID = 0x534D
COUNTRY_CODE = 0x4500


def build_header() -> bytes:
    header = bytearray(HEADER_SIZE)
    header[0:4] = HEADER_NATIVE
    struct.pack_into(">III", header, 0x04, CLOCK_RATE, ENTRY_POINT, 0x00001444)
    struct.pack_into(">II", header, 0x10, CRC1, CRC2)
    struct.pack_into(">II", header, 0x18, 0x11111111, 0x22222222)
    header[0x20:0x34] = TITLE.ljust(20, b" ")
    struct.pack_into(">I", header, 0x34, 0x33333333)
    struct.pack_into(">I", header, 0x38, MANUFACTURER)
    struct.pack_into(">HH", header, 0x3C, CARTRIDGE_ID, COUNTRY_CODE)
    header[0x40:HEADER_SIZE] = bytes(i & 0xFF for i in range(HEADER_SIZE - 0x40))
    return bytes(header)


def build_image(body_size: int = 256) -> bytes:
    """
    A canonical (native) image with a recognisable body pattern.

    The last byte is the first little-endian magic byte so that the fully
    reversed image classifies as little endian.
    """
    body = bytearray((i * 7 + 3) & 0xFF for i in range(body_size))
    if body:
        body[-1] = HEADER_LITTLE_ENDIAN[0]
    return build_header() + bytes(body)


@pytest.fixture
def native_header() -> bytes:
    return build_header()


@pytest.fixture
def native_image() -> bytes:
    return build_image()


@pytest.fixture
def image_factory():
    return build_image
