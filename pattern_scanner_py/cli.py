#!/usr/bin/env python3
"""
Pattern Scanner

Command-line interface for locating wildcard byte signatures in a file.

Usage:
    pattern-scanner <file> <pattern>... [options]
    pattern-scanner -h | --help
    pattern-scanner --version

Arguments:
    file       File to scan (executable, memory dump, raw blob)
    pattern    Byte signature, e.g. "48 8B ? ? 89" (quoted or as separate words)

Options:
    --first            Report only the lowest match
    --unique           Fail if the pattern matches more than once
    --threads N        Worker threads (default: one per CPU)
    --base ADDR        Add ADDR (hex) to every reported offset
    --dec              Print offsets in decimal
    --show-bytes       Print the matched bytes next to each offset
    --config PATH      Path to config.json
    -v --verbose       Debug logging
"""

import argparse
import logging
import mmap
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from . import __version__
from .config import ScannerConfig
from .executor.scan_executor import NonUniquePatternError
from .pattern.parser import Pattern, PatternError, parse
from .scanner import PatternScanner
from .utils.formatting import format_offset, hex_dump
from .utils.logger import setup_logger

logger = logging.getLogger(__name__)


@contextmanager
def open_haystack(path: Path) -> Iterator[bytes]:
    """
    Open a file for scanning.

    Non-empty files are memory-mapped read-only; empty files yield b''
    because a zero-length mapping is not allowed.
    """
    with open(path, 'rb') as f:
        if path.stat().st_size == 0:
            yield b''
            return
        with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mapped:
            yield mapped


def build_config(args: argparse.Namespace) -> ScannerConfig:
    """Load the config file and apply command-line overrides."""
    config_path = Path(args.config) if args.config else None
    config = ScannerConfig.load(config_path)

    if args.threads is not None:
        config.threads = args.threads
    if args.first:
        config.find_all = False
    if args.unique:
        config.require_unique = True
    if args.base is not None:
        config.base_address = int(args.base, 16)
    if args.dec:
        config.offset_format = 'dec'

    return config


def run_scan(scanner: PatternScanner, pattern: Pattern, config: ScannerConfig) -> List[int]:
    """
    Run the scan the config asks for.

    Returns:
        Match offsets (at most one unless find_all is set)

    Raises:
        NonUniquePatternError: If require_unique is set and several offsets match
    """
    if config.require_unique:
        offset = scanner.scan_unique(pattern)
        return [] if offset is None else [offset]
    if config.find_all:
        return scanner.scan_all(pattern)
    offset = scanner.scan(pattern)
    return [] if offset is None else [offset]


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pattern-scanner',
        description="Pattern Scanner - Find wildcard byte signatures in a file",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('file', help='File to scan')
    parser.add_argument('pattern', nargs='+', help='Byte pattern, e.g. "33 35 ?"')
    parser.add_argument('--version', action='version', version=f'pattern-scanner {__version__}')
    parser.add_argument('--first', action='store_true', help='Report only the lowest match')
    parser.add_argument('--unique', action='store_true', help='Fail if the pattern is not unique')
    parser.add_argument('--threads', type=int, help='Number of worker threads')
    parser.add_argument('--base', type=str, help='Base address (hex) added to offsets')
    parser.add_argument('--dec', action='store_true', help='Print offsets in decimal')
    parser.add_argument('--show-bytes', action='store_true', help='Print matched bytes')
    parser.add_argument('--config', type=str, help='Path to config.json')
    parser.add_argument('--log-file', type=str, help='Also write logs to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logger(verbose=args.verbose, log_file=args.log_file)

    try:
        config = build_config(args)
        pattern = parse(' '.join(args.pattern))
    except PatternError as e:
        logger.error(f"ERROR: {e}")
        return 1
    except ValueError as e:
        logger.error(f"ERROR: invalid option: {e}")
        return 1

    path = Path(args.file)
    if not path.is_file():
        logger.error(f"ERROR: File not found: {path}")
        return 1

    try:
        with open_haystack(path) as data:
            scanner = PatternScanner.from_config(data, config)
            logger.debug(f"Scanning {path} with {scanner.threads} threads")
            offsets = run_scan(scanner, pattern, config)

            for offset in offsets:
                line = format_offset(offset, config.offset_format, config.base_address)
                if args.show_bytes:
                    line = f"{line}  {hex_dump(data, offset, len(pattern))}"
                print(line)
    except NonUniquePatternError as e:
        logger.error(f"ERROR: {e}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"ERROR: {e}")
        return 1

    if not offsets:
        logger.info(f"No match for '{pattern}'")
    else:
        logger.debug(f"{len(offsets)} match(es) for '{pattern}'")

    return 0


if __name__ == "__main__":
    sys.exit(main())
