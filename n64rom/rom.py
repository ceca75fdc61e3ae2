"""ROM parsing: classify, normalize, split header from body."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .config import DEFAULT_PATTERNS, HEADER_SIZE
from .endian import Endian, classify, convert, normalize
from .errors import InvalidHeaderSizeError
from .header import InternalHeader

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rom:
    """In-memory version of a parsed ROM, in canonical byte order."""

    header: InternalHeader
    body: bytes
    endian: Endian = Endian.NATIVE  # ordering of the image before parsing

    @property
    def size_bytes(self) -> int:
        return HEADER_SIZE + len(self.body)

    def to_bytes(self, endian: Endian = Endian.NATIVE) -> bytes:
        """Reassemble the full image, re-ordered into ``endian``."""
        return convert(bytes(self.header) + self.body, endian)


def parse(data: bytes | bytearray) -> Rom:
    """
    Parse a full ROM image.

    A ``bytearray`` is normalized in place and must not be reused by the
    caller afterwards; other bytes-like inputs are copied first.
    """
    if not isinstance(data, bytearray):
        data = bytearray(data)
    if not data:
        raise InvalidHeaderSizeError(0)

    endian = classify(data[0])
    normalize(data, endian)

    header = InternalHeader(bytes(data[:HEADER_SIZE]))
    body = bytes(data[HEADER_SIZE:])
    return Rom(header=header, body=body, endian=endian)


def load_rom(path: Path) -> Rom:
    """Read a ROM file from disk and parse it."""
    path = Path(path)
    data = bytearray(path.read_bytes())
    log.debug("Read %s (%d bytes)", path, len(data))
    rom = parse(data)
    log.debug("Parsed %s: %s order, title %r", path, rom.endian.value, rom.header.title)
    return rom


def discover_roms(
    paths: Iterable[Path],
    patterns: Iterable[str] = DEFAULT_PATTERNS,
) -> list[Path]:
    """
    Expand files and directories into a sorted list of ROM files.

    Directories are searched recursively for names matching ``patterns``;
    files are taken as given.
    """
    patterns = list(patterns)
    found: set[Path] = set()
    for path in map(Path, paths):
        if path.is_dir():
            for pattern in patterns:
                found.update(p for p in path.rglob(pattern) if p.is_file())
        elif path.exists():
            found.add(path)
        else:
            raise FileNotFoundError(f"No such ROM file or directory: {path}")
    roms = sorted(found)
    log.debug("Discovered %d ROM files", len(roms))
    return roms
