"""Byte order detection and normalization for raw ROM dumps."""

from enum import Enum

from .config import (
    HEADER_BYTE_SWAPPED,
    HEADER_LITTLE_ENDIAN,
    HEADER_NATIVE,
    ROM_EXTENSIONS,
)
from .errors import UnknownMagicError


class Endian(Enum):
    NATIVE = "native"
    BYTE_SWAPPED = "byte_swapped"
    LITTLE_ENDIAN = "little_endian"

    @property
    def magic(self) -> bytes:
        """The 4-byte header magic as it appears in a dump of this ordering."""
        return _MAGICS[self]

    @property
    def extension(self) -> str:
        return ROM_EXTENSIONS[self.value]


_MAGICS: dict[Endian, bytes] = {
    Endian.NATIVE: HEADER_NATIVE,
    Endian.BYTE_SWAPPED: HEADER_BYTE_SWAPPED,
    Endian.LITTLE_ENDIAN: HEADER_LITTLE_ENDIAN,
}

# The three magics differ in their first byte, so one byte is enough
_FIRST_BYTE_TO_ENDIAN: dict[int, Endian] = {
    magic[0]: endian for endian, magic in _MAGICS.items()
}


def classify(first_byte: int) -> Endian:
    """Classify a dump's byte order from the first byte of the image."""
    endian = _FIRST_BYTE_TO_ENDIAN.get(first_byte)
    if endian is None:
        raise UnknownMagicError(first_byte)
    return endian


def normalize(buffer: bytearray, endian: Endian) -> None:
    """
    Rewrite ``buffer`` in place into canonical (big endian) order.

    Both transformations are their own inverse, so the same call also turns
    a canonical buffer into ``endian`` order. An odd trailing byte of a
    byte-swapped buffer has no partner and is left where it is.
    """
    if endian is Endian.NATIVE:
        return
    if endian is Endian.BYTE_SWAPPED:
        end = len(buffer) & ~1
        buffer[0:end:2], buffer[1:end:2] = buffer[1:end:2], buffer[0:end:2]
    elif endian is Endian.LITTLE_ENDIAN:
        buffer.reverse()


def convert(data: bytes, endian: Endian) -> bytes:
    """Return a copy of a canonical image re-ordered into ``endian``."""
    buffer = bytearray(data)
    normalize(buffer, endian)
    return bytes(buffer)
