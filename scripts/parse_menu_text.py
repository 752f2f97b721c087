#!/usr/bin/env python3
"""
Run the menu text structuring on an OCR text dump and print the result.

Usage:
  python scripts/parse_menu_text.py menu.txt
  python scripts/parse_menu_text.py - --ai < menu.txt
  python scripts/parse_menu_text.py menu.txt --raw     # parser output only, no split
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from menuscan.menu_import import structure_menu_text
from menuscan.parsers.menu_text import parse_ocr_menu_text


def _read_input(src: str) -> str:
    if src == "-":
        return sys.stdin.read()
    return Path(src).read_text(encoding="utf-8")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Structure OCR menu text into items.")
    ap.add_argument("source", help="text file with OCR output, or - for stdin")
    ap.add_argument("--ai", action="store_true", help="try Claude first (needs ANTHROPIC_API_KEY)")
    ap.add_argument("--raw", action="store_true", help="heuristic parser output only")
    args = ap.parse_args(argv)

    text = _read_input(args.source)

    if args.raw:
        payload = {"items": [it.to_dict() for it in parse_ocr_menu_text(text)]}
    else:
        payload = structure_menu_text(text, use_ai=args.ai).to_dict()

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
