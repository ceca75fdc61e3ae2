"""Exceptions raised while parsing ROM images."""

from .config import HEADER_SIZE


class RomError(ValueError):
    """Base class for ROM parse failures."""


class UnknownMagicError(RomError):
    """First byte of the image matches no known header magic."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"unknown header: {value:#x}")


class InvalidHeaderSizeError(RomError):
    """Header segment is not exactly HEADER_SIZE bytes."""

    def __init__(self, actual: int, expected: int = HEADER_SIZE):
        self.actual = actual
        self.expected = expected
        super().__init__(f"invalid header size: {actual:#x} != {expected:#x}")
