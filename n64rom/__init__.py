"""N64 ROM image parsing: byte order normalization and typed header access."""

from .config import (
    HEADER_BYTE_SWAPPED,
    HEADER_LITTLE_ENDIAN,
    HEADER_NATIVE,
    HEADER_SIZE,
    InspectConfig,
    load_config,
)
from .endian import Endian, classify, convert, normalize
from .errors import InvalidHeaderSizeError, RomError, UnknownMagicError
from .header import InternalHeader
from .rom import Rom, discover_roms, load_rom, parse

__all__ = [
    # Config
    "HEADER_BYTE_SWAPPED",
    "HEADER_LITTLE_ENDIAN",
    "HEADER_NATIVE",
    "HEADER_SIZE",
    "InspectConfig",
    "load_config",
    # Endian
    "Endian",
    "classify",
    "convert",
    "normalize",
    # Errors
    "InvalidHeaderSizeError",
    "RomError",
    "UnknownMagicError",
    # Header
    "InternalHeader",
    # ROM
    "Rom",
    "discover_roms",
    "load_rom",
    "parse",
]
