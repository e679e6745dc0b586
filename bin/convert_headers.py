#!/usr/bin/env python3
"""
UnrealScript Header Converter

Parses the C++ headers dumped by an Unreal Engine 3 SDK generator and
writes one UnrealScript class file per class found:

  <output-dir>/<Package>/Classes/<Class>.uc

Usage:
    python convert_headers.py Core_structs.h Core_classes.h --output-dir converted/
    python convert_headers.py Engine_classes.h -o converted/ -v
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent directory to path so headertouc package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from headertouc import HeaderParser, ParsedHeader, UnrealScriptGenerator

logger = logging.getLogger("convert_headers")


def configure_logging(verbose: int, quiet: bool):
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main():
    start_time = time.perf_counter()

    parser = argparse.ArgumentParser(description="Convert SDK headers to UnrealScript")
    parser.add_argument("headers", nargs="+", help="Header files to convert")
    parser.add_argument("--output-dir", "-o", default="converted", help="Output directory")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the header files")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="count", default=0,
                           help="Report skipped declarations (-vv for every declaration)")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only report errors")
    args = parser.parse_args()

    configure_logging(args.verbose, args.quiet)

    header_paths = [Path(h) for h in args.headers]
    missing = [str(p) for p in header_paths if not p.is_file()]
    if missing:
        parser.error(f"Header not found: {', '.join(missing)}")

    parsed = ParsedHeader()
    for header_path in header_paths:
        logger.info("Parsing %s", header_path)
        content = header_path.read_text(encoding=args.encoding, errors="replace")
        parsed.extend(HeaderParser(content).parse())

    if parsed.skipped:
        logger.warning("Skipped %d declaration(s)", len(parsed.skipped))

    output_dir = Path(args.output_dir)
    files = UnrealScriptGenerator(parsed).generate_all()

    for relative_path, content in files.items():
        path = output_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        print(f"Generated: {path}")

    elapsed = time.perf_counter() - start_time
    print(f"Conversion completed in {elapsed*1000:.2f} ms")


if __name__ == "__main__":
    main()
