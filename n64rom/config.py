"""Header wire constants and inspector configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

HEADER_SIZE = 0x1000

# Big endian (SUPER MARIO 64)
HEADER_NATIVE = bytes([0x80, 0x37, 0x12, 0x40])
# Big endian, byte swapped (USEP RAMIR O46)
HEADER_BYTE_SWAPPED = bytes([0x37, 0x80, 0x40, 0x12])
# Little endian (EPUSAM R OIR 46)
HEADER_LITTLE_ENDIAN = bytes([0x40, 0x12, 0x37, 0x80])

# Conventional dump extensions, keyed by Endian value
ROM_EXTENSIONS: dict[str, str] = {
    "native": ".z64",
    "byte_swapped": ".v64",
    "little_endian": ".n64",
}

DEFAULT_PATTERNS: list[str] = [f"*{ext}" for ext in ROM_EXTENSIONS.values()]

OUTPUT_FORMATS = ("json", "yaml")


@dataclass
class InspectConfig:
    """Options for the ROM inspector."""

    format: str = "json"
    patterns: list[str] = field(default_factory=lambda: list(DEFAULT_PATTERNS))
    continue_on_error: bool = True
    convert: str | None = None  # Endian value, or None to skip conversion
    output_dir: Path | None = None
    verbose: bool = False

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> "InspectConfig":
        """Build a config from a parsed YAML mapping."""
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        config = cls(**data)
        if config.output_dir is not None:
            config.output_dir = Path(config.output_dir)
        config.validate()
        return config

    def validate(self) -> None:
        if not isinstance(self.format, str) or self.format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {self.format}")
        if self.convert is not None and (
            not isinstance(self.convert, str) or self.convert not in ROM_EXTENSIONS
        ):
            raise ValueError(f"Unknown byte order: {self.convert}")
        if not isinstance(self.patterns, list) or not all(
            isinstance(p, str) for p in self.patterns
        ):
            raise ValueError(f"patterns must be a list of strings, got {self.patterns!r}")
        if not self.patterns:
            raise ValueError("At least one ROM pattern is required")
        for name in ("continue_on_error", "verbose"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")


def load_config(config_path: Path) -> InspectConfig:
    """Load inspector configuration from a YAML file."""
    with open(config_path) as f:
        return InspectConfig.from_mapping(yaml.safe_load(f))
