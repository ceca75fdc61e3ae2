"""Typed view over the 4096-byte canonical ROM header."""

import hashlib
import struct
from typing import Any

from .config import HEADER_SIZE
from .errors import InvalidHeaderSizeError

IMAGE_NAME_START = 0x20
IMAGE_NAME_END = 0x33
BOOT_CODE_START = 0x40


class InternalHeader:
    """In-memory version of a parsed ROM header.

    Every accessor reads big-endian values at fixed offsets, so the bytes
    must already be in canonical order.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes):
        if len(data) != HEADER_SIZE:
            raise InvalidHeaderSizeError(len(data))
        self._data = bytes(data)

    def __repr__(self) -> str:
        return f"InternalHeader(title={self.title!r}, pc={self.pc:#010x})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InternalHeader):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def _u16(self, offset: int) -> int:
        return struct.unpack_from(">H", self._data, offset)[0]

    def _u32(self, offset: int) -> int:
        return struct.unpack_from(">I", self._data, offset)[0]

    @property
    def pi_bsb_dom1_lat_reg(self) -> int:
        return self._data[0]

    @property
    def pi_bsd_dom1_pgs_reg(self) -> int:
        return self._data[1]

    @property
    def pi_bsd_dom1_pwd_reg(self) -> int:
        return self._data[2]

    @property
    def pi_bsb_dom1_pgs_reg(self) -> int:
        return self._data[3]

    @property
    def clock_rate(self) -> int:
        """0004h - 0007h (1 dword): clock rate."""
        return self._u32(0x04)

    @property
    def pc(self) -> int:
        """0008h - 000Bh (1 dword): program counter (entry point)."""
        return self._u32(0x08)

    @property
    def release(self) -> int:
        """Release word.

        Reads 0008h - 000Bh, the same word as ``pc``. 000Ch - 000Fh is
        not exposed.
        """
        return self._u32(0x08)

    @property
    def crc1(self) -> int:
        """0010h - 0013h (1 dword): CRC1."""
        return self._u32(0x10)

    @property
    def crc2(self) -> int:
        """0014h - 0017h (1 dword): CRC2."""
        return self._u32(0x14)

    @property
    def unknown_1(self) -> tuple[int, int]:
        """0018h - 001Fh (2 dwords): unknown, usually zero."""
        return self._u32(0x18), self._u32(0x1C)

    @property
    def image_name(self) -> bytes:
        """0020h - 0032h: image name, padded with 0x00 or spaces."""
        return self._data[IMAGE_NAME_START:IMAGE_NAME_END]

    @property
    def title(self) -> str:
        """Image name as text, padding stripped."""
        return self.image_name.decode("ascii", errors="replace").rstrip("\x00 ")

    @property
    def unknown_2(self) -> int:
        """0034h - 0037h (1 dword): unknown, usually zero."""
        return self._u32(0x34)

    @property
    def manufacturer_id(self) -> int:
        """0038h - 003Bh (1 dword): manufacturer ID, 0x0000004E for Nintendo."""
        return self._u32(0x38)

    @property
    def cartridge_id(self) -> int:
        """003Ch - 003Dh (1 word): cartridge ID."""
        return self._u16(0x3C)

    @property
    def country_code(self) -> int:
        """003Eh - 003Fh (1 word): country code, e.g. 0x4500 for USA ('E')."""
        return self._u16(0x3E)

    @property
    def boot_code(self) -> bytes:
        """0040h - 0FFFh (1008 dwords): boot code."""
        return self._data[BOOT_CODE_START:HEADER_SIZE]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON/YAML serialization."""
        boot_code = self.boot_code
        return {
            "pi_bsb_dom1_lat_reg": self.pi_bsb_dom1_lat_reg,
            "pi_bsd_dom1_pgs_reg": self.pi_bsd_dom1_pgs_reg,
            "pi_bsd_dom1_pwd_reg": self.pi_bsd_dom1_pwd_reg,
            "pi_bsb_dom1_pgs_reg": self.pi_bsb_dom1_pgs_reg,
            "clock_rate": self.clock_rate,
            "pc": f"{self.pc:#010x}",
            "release": f"{self.release:#010x}",
            "crc": {
                "crc1": f"{self.crc1:08x}",
                "crc2": f"{self.crc2:08x}",
            },
            "unknown_1": list(self.unknown_1),
            "image_name": {
                "title": self.title,
                "raw": self.image_name.hex(),
            },
            "unknown_2": self.unknown_2,
            "manufacturer_id": self.manufacturer_id,
            "cartridge_id": self.cartridge_id,
            "country_code": self.country_code,
            "boot_code": {
                "size_bytes": len(boot_code),
                "sha256": hashlib.sha256(boot_code).hexdigest(),
            },
        }
