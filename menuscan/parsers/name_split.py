# menuscan/parsers/name_split.py
"""
Name / description split for long menu labels.

'Fileti morske ribe sa blitvom i krompirom'
    → name='Fileti morske ribe', description='sa blitvom i krompirom'

Applied to labels from both the heuristic parser and the Claude path so the
two produce the same shape. Only the boundary is chosen; no word of the
label is changed or dropped (apart from a stray trailing price).
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple
import re

from menuscan.menu_types import NameSplit
from menuscan.parsers.price_parser import PRICE_TOKEN_RE
from menuscan.parsers.section_vocab import CONNECTOR_RE, NAME_SEPARATOR_RE

# Labels up to this length are taken to be a bare dish name
SHORT_LABEL_MAX = 40

# Minimum lengths for both sides of an accepted split
SPLIT_MIN_NAME = 3
SPLIT_MIN_DESCRIPTION = 8

_TRAILING_PRICE_RE = re.compile(r"\s+" + PRICE_TOKEN_RE.pattern + r"\s*$", re.VERBOSE)


def _first_split(
    text: str,
    matches: Iterable[re.Match],
    keep_marker: bool,
) -> Optional[Tuple[str, str]]:
    for m in matches:
        name = text[:m.start()].strip()
        rest = text[m.start():] if keep_marker else text[m.end():]
        description = rest.strip()
        if len(name) >= SPLIT_MIN_NAME and len(description) >= SPLIT_MIN_DESCRIPTION:
            return name, description
    return None


def split_name_and_description(label: str) -> NameSplit:
    """
    Split a long label into a short dish name and a description.

    Order of attempts:
      1. separators ' - ', ' – ', ' — ', ': ' (separator dropped)
      2. connector words 'with', 'served with', 'sa', 'uz', ... (kept in
         the description)
    The leftmost occurrence passing the length guards wins. Labels of
    SHORT_LABEL_MAX characters or less are returned untouched.
    """
    if not label or len(label) <= SHORT_LABEL_MAX:
        return NameSplit(name=label or "")

    text = _TRAILING_PRICE_RE.sub("", label.strip()) or label.strip()

    found = _first_split(text, NAME_SEPARATOR_RE.finditer(text), keep_marker=False)
    if found is None:
        found = _first_split(text, CONNECTOR_RE.finditer(text), keep_marker=True)

    if found is None:
        return NameSplit(name=label)

    name, description = found
    return NameSplit(name=name, description=description)
