# menuscan/menu_import.py
"""
Menu import orchestration — OCR text → ParsedMenu.

Flow:
  1. Claude structuring (menuscan.ai_menu_extract), when enabled + configured
  2. heuristic parser fallback (menuscan.parsers.menu_text) on any None
  3. name / description split on every item label, whichever path ran
  4. distinct sections collected in reading order

scan_menu_file() adds the OCR step in front and turns the two dead ends
(unreadable photo, nothing recognizable) into exceptions the HTTP layer maps
to status codes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from menuscan import ai_menu_extract, config, ocr_facade
from menuscan.menu_types import MenuItem, ParsedMenu, collect_sections
from menuscan.parsers.menu_text import normalize_text, parse_ocr_menu_text
from menuscan.parsers.name_split import split_name_and_description

log = logging.getLogger(__name__)


class MenuScanError(Exception):
    """Base error for a scan that produced nothing usable."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class UnreadableImageError(MenuScanError):
    """OCR returned no text."""


class NoMenuItemsError(MenuScanError):
    """Text was read but no menu items could be structured from it."""


def apply_name_split(items: List[MenuItem]) -> List[MenuItem]:
    """Move the description part of long labels into ``note``.

    Items that already carry a note (Claude description, fallback echo) are
    left as they are.
    """
    out: List[MenuItem] = []
    for it in items:
        if it.note:
            out.append(it)
            continue
        split = split_name_and_description(it.label)
        out.append(MenuItem(
            label=split.name,
            price=it.price,
            section=it.section,
            note=split.description,
        ))
    return out


def structure_menu_text(raw_text: str, *, use_ai: Optional[bool] = None) -> ParsedMenu:
    """Structure OCR text with Claude when possible, heuristics otherwise."""
    if use_ai is None:
        use_ai = config.ai_enabled()

    normalized = normalize_text(raw_text)
    if not normalized:
        return ParsedMenu(items=[], sections=[], raw_text="", source="heuristic")

    items: Optional[List[MenuItem]] = None
    source = "heuristic"
    if use_ai:
        items = ai_menu_extract.extract_menu_items_via_claude(normalized)
        if items is not None:
            source = "ai"

    if items is None:
        items = parse_ocr_menu_text(normalized)
        log.info("Heuristic parser produced %d menu items", len(items))

    items = apply_name_split(items)
    return ParsedMenu(
        items=items,
        sections=collect_sections(items),
        raw_text=normalized,
        source=source,
    )


def scan_menu_file(path: Union[str, Path], *, use_ai: Optional[bool] = None) -> ParsedMenu:
    """OCR an uploaded photo / PDF and structure the text."""
    text = ocr_facade.extract_text_from_upload(path)
    if not text or not text.strip():
        raise UnreadableImageError(
            "Couldn't read your photo. Please upload a clearer, higher-quality picture.",
            raw_text=text or "",
        )

    parsed = structure_menu_text(text, use_ai=use_ai)
    if not parsed.items:
        raise NoMenuItemsError(
            "We scanned your photo but could not detect valid menu items. "
            "Please try another photo or a higher-quality image.",
            raw_text=parsed.raw_text or text,
        )
    return parsed
