"""
menuscan types — records passed between the OCR text parser, the Claude
structuring step and the HTTP layer.

MenuItem is the terminal unit of every structuring path. ParsedMenu wraps a
full scan result (items + distinct sections + the text they came from) and
renders the JSON payload returned by /api/ocr-menu.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Section:
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclass
class MenuItem:
    """One dish / service line recovered from a menu."""
    label: str
    price: Optional[float] = None
    section: Optional[str] = None
    note: Optional[str] = None  # split-off description or verbatim fallback text

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"label": self.label, "price": self.price}
        if self.section is not None:
            out["section"] = self.section
        if self.note is not None:
            out["note"] = self.note
        return out


@dataclass
class NameSplit:
    name: str
    description: Optional[str] = None


@dataclass
class ParsedMenu:
    """Result of structuring one OCR text, whichever path produced it."""
    items: List[MenuItem] = field(default_factory=list)
    sections: List[Section] = field(default_factory=list)
    raw_text: str = ""
    source: str = "heuristic"  # "ai" | "heuristic"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [it.to_dict() for it in self.items],
            "sections": [s.to_dict() for s in self.sections],
            "rawText": self.raw_text,
            "source": self.source,
        }


def collect_sections(items: List[MenuItem]) -> List[Section]:
    """Distinct section names in first-seen order."""
    seen: List[str] = []
    for it in items:
        if it.section and it.section not in seen:
            seen.append(it.section)
    return [Section(name=n) for n in seen]
