# menuscan/parsers/menu_text.py
"""
OCR Menu Text Parser — layout-free OCR text → ordered MenuItem list.

OCR engines regularly lose the vertical whitespace of a photographed menu and
hand back one long ribbon of text. Prices and section headings are the only
reliable row anchors left without coordinates, so the parser resynchronizes
on them:

  1. normalize_text     collapse whitespace / control characters
  2. pre_segment        line break around section keywords and after prices
  3. is_section_header  typographic heading test (caps ratio, digits, words)
  4. extract_items      (label, price) pairs per pseudo-line + current section
  5. parse_ocr_menu_text  entry point with the terminal fallback

Design principles:
  - Pure functions, no I/O, no module state mutated at call time
  - Never raises for any string input
  - Never rewrites the merchant's wording (only trims separators/bullets)
  - Precision over recall: a line without a price is not an item

Name / description splitting lives in name_split.py and is applied by the
caller, so labels coming from the Claude path get the same treatment.
"""

from __future__ import annotations

from typing import List, Optional
import re

from menuscan.menu_types import MenuItem
from menuscan.parsers.price_parser import (
    PRICE_TOKEN_RE,
    pad_currency_symbols,
    parse_price,
)
from menuscan.parsers.section_vocab import SECTION_KEYWORD_RE


# ── Tuning constants ────────────────────────────────

# Share of upper-case letters above which a priceless line reads as a heading
HEADER_CAPS_RATIO = 0.7

# One/two-word lines need every word longer than this to count as a heading
# ("Tea", "Cola Zero" stay items)
HEADER_SHORT_WORD_LEN = 4

# Length of the one-line preview used as label by the terminal fallback
FALLBACK_LABEL_MAX = 120


# ── Regexes ──────────────────────────────────────────

_CONTROL_RE = re.compile(r"[\x00-\x09\x0b-\x1f\x7f]")
_INLINE_WS_RE = re.compile(r"[^\S\n]+")
_DIGIT_RE = re.compile(r"\d")
_SECTION_TRAIL_RE = re.compile(r"[:.]+$")

_LABEL_EDGE_CHARS = r"\s.\-–—:•·*,;|"
_LABEL_LEAD_RE = re.compile(r"^[" + _LABEL_EDGE_CHARS + r"]+")
_LABEL_TRAIL_RE = re.compile(r"[" + _LABEL_EDGE_CHARS + r"]+$")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")


# ── Step 1: normalization ────────────────────────────

def normalize_text(raw: Optional[str]) -> str:
    """Collapse CR / tabs / control chars and space runs; keep real newlines."""
    if not raw:
        return ""
    txt = _CONTROL_RE.sub(" ", raw)
    txt = _INLINE_WS_RE.sub(" ", txt)
    return txt.strip()


# ── Step 2: segmentation ─────────────────────────────

def pre_segment(normalized: str) -> str:
    """
    Insert pseudo line breaks into normalized OCR text.

    - currency symbols padded with spaces
    - every section keyword on its own line
    - a line break right after every price token

    'MAINS Grilled salmon 18.50 Chicken curry 14'
      → 'MAINS\\nGrilled salmon 18.50\\nChicken curry 14'
    """
    txt = pad_currency_symbols(normalized)
    txt = SECTION_KEYWORD_RE.sub(r"\n\1\n", txt)
    txt = PRICE_TOKEN_RE.sub(r"\1\n", txt)
    lines = (ln.strip() for ln in txt.split("\n"))
    return "\n".join(ln for ln in lines if ln)


def segment_lines(raw: Optional[str]) -> List[str]:
    """Raw OCR text → ordered, trimmed, non-empty pseudo-lines."""
    segmented = pre_segment(normalize_text(raw))
    return [ln for ln in segmented.split("\n") if ln]


# ── Step 3: heading detection ────────────────────────

def is_section_header(line: str) -> bool:
    """
    Decide whether a pseudo-line is a menu section heading.

    - contains a known section keyword → heading
    - contains any digit → item line
    - one or two words with a short word among them → item ("Tea")
    - otherwise heading when mostly upper-case ("GRILL SPECIALITIES")
    """
    if not line or not line.strip():
        return False

    if SECTION_KEYWORD_RE.search(line):
        return True

    if _DIGIT_RE.search(line):
        return False

    words = line.split()
    if len(words) <= 2 and any(len(w) <= HEADER_SHORT_WORD_LEN for w in words):
        return False

    letters = [c for c in line if c.isalpha()]
    if not letters:
        return False

    upper = sum(1 for c in letters if c.isupper())
    return upper / len(letters) > HEADER_CAPS_RATIO


def _section_name(line: str) -> str:
    name = _SECTION_TRAIL_RE.sub("", line.strip())
    return " ".join(name.split())


# ── Step 4: label / price extraction ─────────────────

def cleanup_label(label: str) -> str:
    """Strip separators, bullets and dot leaders from both ends of a label."""
    out = _LABEL_LEAD_RE.sub("", label)
    out = _LABEL_TRAIL_RE.sub("", out)
    out = _MULTI_SPACE_RE.sub(" ", out)
    return out.strip()


def extract_items(lines: List[str]) -> List[MenuItem]:
    """
    Walk pseudo-lines top to bottom and emit one MenuItem per price token.

    A heading line switches the current section for the lines below it.
    A line can hold several dishes ('Tea 2 Coffee 3'); the label of each is
    the text between the previous price (or line start) and its own price.
    Lines without a price token are wrapped descriptions or noise and are
    skipped; labels that clean down to nothing are dropped.
    """
    items: List[MenuItem] = []
    current_section: Optional[str] = None

    for raw_line in lines:
        line = (raw_line or "").strip()
        if not line:
            continue

        if not _DIGIT_RE.search(line) and is_section_header(line):
            current_section = _section_name(line) or current_section
            continue

        last_end = 0
        for m in PRICE_TOKEN_RE.finditer(line):
            label = cleanup_label(line[last_end:m.start()])
            last_end = m.end()
            if not label:
                continue
            items.append(MenuItem(
                label=label,
                price=parse_price(m.group(2)),
                section=current_section,
            ))

    return items


# ── Step 5: entry point ──────────────────────────────

def _fallback_item(normalized: str) -> MenuItem:
    preview = " ".join(normalized.split())[:FALLBACK_LABEL_MAX].strip()
    return MenuItem(label=preview, price=None, note=normalized)


def parse_ocr_menu_text(raw: Optional[str]) -> List[MenuItem]:
    """
    Structure raw OCR menu text into an ordered list of MenuItem.

    Empty or whitespace-only input gives []. Any other input gives at least
    one item: when no (label, price) pair is found, the whole text comes
    back as a single priceless item with the text kept in ``note``.
    """
    normalized = normalize_text(raw)
    if not normalized:
        return []

    items = extract_items(segment_lines(normalized))
    if items:
        return items

    return [_fallback_item(normalized)]
