# menuscan/parsers/section_vocab.py
"""
Shared menu vocabulary — section headings and description connectors.

Single source of truth for the word lists used by menu_text.py (segmentation
and heading detection) and name_split.py (name / description split).
The lists cover English plus the Serbian/Croatian/Bosnian menus seen in
sample uploads; extend them here rather than in the parsers.
"""

from __future__ import annotations

from typing import List
import re


# Headings that always get their own pseudo-line, matched as whole words,
# case-insensitive.
SECTION_KEYWORDS: List[str] = [
    # English
    "MAIN COURSE",
    "MAINS",
    "STARTERS",
    "APPETIZER",
    "APPETIZERS",
    "SOUPS",
    "SALADS",
    "DESSERT",
    "DESSERTS",
    "BEVERAGE",
    "BEVERAGES",
    "DRINK",
    "DRINKS",
    "HOT DRINKS",
    "COLD DRINKS",
    "SIDES",
    # Serbian / Croatian / Bosnian
    "PREDJELA",
    "GLAVNA JELA",
    "SUPE",
    "ČORBE",
    "SALATE",
    "DESERTI",
    "PIĆA",
    "NAPICI",
    "PRILOZI",
]

# Words that open a description inside a long item label. Kept in the
# description when splitting ("sa blitvom i krompirom").
CONNECTOR_WORDS: List[str] = [
    "served with",
    "servi avec",
    "with",
    "w/",
    "avec",
    "mit",
    "sa",
    "uz",
]

# Punctuation separators between a dish name and its description.
NAME_SEPARATORS: List[str] = [" - ", " – ", " — ", ": "]


def _alternation(words: List[str]) -> str:
    # Longest first so "HOT DRINKS" wins over "DRINKS"
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


SECTION_KEYWORD_RE = re.compile(
    r"\b(" + _alternation(SECTION_KEYWORDS) + r")\b",
    re.IGNORECASE,
)

CONNECTOR_RE = re.compile(
    r"(?<!\S)(" + _alternation(CONNECTOR_WORDS) + r")(?=\s)",
    re.IGNORECASE,
)

NAME_SEPARATOR_RE = re.compile(_alternation(NAME_SEPARATORS))
