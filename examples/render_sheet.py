#!/usr/bin/env python3
"""CLI tool to lay out a chord sheet and save it as a PDF.

Usage:
    python examples/render_sheet.py <input_file> [-o output.pdf] [options]

Examples:
    python examples/render_sheet.py examples/amazing_grace.txt
    python examples/render_sheet.py examples/amazing_grace.txt --transpose 2 --flats
    python examples/render_sheet.py song.txt --options song.json -o song.pdf
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from chord_layout import DEFAULT_DECORATIONS, Layout, LayoutError
from chord_layout.pdf import render_pdf


def load_options(args: argparse.Namespace) -> dict[str, Any]:
    """Merge a JSON options file with command-line overrides."""
    options: dict[str, Any] = {}
    if args.options:
        options.update(json.loads(args.options.read_text(encoding="utf-8")))
    if args.transpose is not None:
        options["transpose"] = args.transpose
    if args.capo is not None:
        options["capo"] = args.capo
    if args.flats:
        options["flats"] = True
    if args.auto_flats:
        options["autoFlats"] = {"enabled": True}
    options.setdefault("decorations", list(DEFAULT_DECORATIONS))
    return options


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Lay out a chord sheet and save it as a PDF",
    )
    parser.add_argument("input", type=Path, help="Input chord sheet")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output PDF file (default: input name with .pdf)",
    )
    parser.add_argument("--options", type=Path, default=None, help="JSON file of layout options")
    parser.add_argument("--transpose", type=int, default=None, help="Semitones to transpose")
    parser.add_argument("--capo", type=int, default=None, help="Capo fret")
    parser.add_argument("--flats", action="store_true", help="Spell accidentals with flats")
    parser.add_argument("--auto-flats", action="store_true", help="Follow [@key] directives")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log page details")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    output = args.output or args.input.with_suffix(".pdf")
    try:
        session = Layout(args.input.read_text(encoding="utf-8"), load_options(args))
        session.layout()
        render_pdf(session, output)
    except (LayoutError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote output to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
