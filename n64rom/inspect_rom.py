#!/usr/bin/env python3
"""
N64 ROM Inspector

Parses .z64/.v64/.n64 dumps, reports the detected byte order and the
decoded header of each image, and optionally rewrites them into another
byte order.
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any

import yaml

from n64rom.config import OUTPUT_FORMATS, ROM_EXTENSIONS, InspectConfig, load_config
from n64rom.endian import Endian
from n64rom.errors import RomError
from n64rom.rom import Rom, discover_roms, load_rom

log = logging.getLogger(__name__)


def rom_record(path: Path, rom: Rom) -> dict[str, Any]:
    """Summarize a parsed ROM for serialization."""
    return {
        "path": str(path),
        "endian": rom.endian.value,
        "size_bytes": rom.size_bytes,
        "body_bytes": len(rom.body),
        "header": rom.header.to_dict(),
    }


def write_converted(rom: Rom, source: Path, output_dir: Path, endian: Endian) -> Path:
    """Write ``rom`` into ``output_dir`` re-ordered into ``endian``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"{source.stem}{endian.extension}"
    data = rom.to_bytes(endian)
    out_path.write_bytes(data)
    log.info("Wrote %s (%s order)", out_path, endian.value)
    # A full reversal starts with the image's last byte, not the magic
    if data[0] != endian.magic[0]:
        log.warning(
            "%s starts with %#x instead of %#x and will not parse back as %s order",
            out_path, data[0], endian.magic[0], endian.value,
        )
    return out_path


def inspect_roms(paths: list[Path], config: InspectConfig) -> tuple[list[dict[str, Any]], int]:
    """
    Parse every ROM in ``paths``.

    Returns (records, failure_count). Unparsable files are recorded with
    their error; processing stops at the first one unless
    ``config.continue_on_error`` is set.
    """
    target = Endian(config.convert) if config.convert else None
    records: list[dict[str, Any]] = []
    failures = 0

    for path in paths:
        try:
            rom = load_rom(path)
        except (RomError, OSError) as e:
            failures += 1
            log.warning("Failed to parse %s: %s", path, e)
            records.append({"path": str(path), "error": str(e)})
            if not config.continue_on_error:
                break
            continue

        record = rom_record(path, rom)
        if target is not None and config.output_dir is not None:
            record["converted"] = str(
                write_converted(rom, path, config.output_dir, target)
            )
        records.append(record)

    return records, failures


def dump_records(records: list[dict[str, Any]], fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(records, sort_keys=False)
    return json.dumps(records, indent=2)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="N64 ROM Inspector: detect byte order and decode cartridge headers"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="ROM files or directories to scan",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with inspector defaults",
    )
    parser.add_argument(
        "--format", "-f",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--convert",
        choices=sorted(ROM_EXTENSIONS),
        default=None,
        help="Rewrite each ROM into this byte order",
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=None,
        help="Directory for converted ROMs",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first ROM that fails to parse",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else InspectConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        parser.error(f"invalid config {args.config}: {e}")

    if args.verbose:
        config.verbose = True

    # Setup logging
    level = logging.DEBUG if config.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-5s %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.format:
        config.format = args.format
    if args.convert:
        config.convert = args.convert
    if args.output_dir:
        config.output_dir = args.output_dir
    if args.fail_fast:
        config.continue_on_error = False

    if config.convert and config.output_dir is None:
        parser.error("--convert requires --output-dir")

    try:
        rom_paths = discover_roms(args.paths, config.patterns)
    except FileNotFoundError as e:
        log.error("%s", e)
        return 1

    if not rom_paths:
        log.error("No ROM files found matching %s", ", ".join(config.patterns))
        return 1

    log.info("Inspecting %d ROM files", len(rom_paths))
    start_time = time.time()
    records, failures = inspect_roms(rom_paths, config)
    elapsed = time.time() - start_time

    print(dump_records(records, config.format))

    log.info(
        "Done in %.2fs: %d parsed, %d failed",
        elapsed, len(records) - failures, failures,
    )
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
