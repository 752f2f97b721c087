# menuscan/ai_menu_extract.py
"""
Claude API Menu Structuring — sends raw OCR text to Claude for sections + items.

Same output contract as the heuristic parser (menuscan.parsers.menu_text):
an ordered list of MenuItem. The heuristic parser is the drop-in fallback, so
every failure here (no key, API error, malformed JSON, nothing usable) is
logged and reported as None rather than raised.

Usage:
    from menuscan.ai_menu_extract import extract_menu_items_via_claude

    items = extract_menu_items_via_claude(raw_ocr_text)
    if items is None:
        items = parse_ocr_menu_text(raw_ocr_text)

Requires ANTHROPIC_API_KEY in environment (loaded via .env).
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional

from menuscan import config
from menuscan.menu_types import MenuItem

log = logging.getLogger(__name__)

# ~4 chars per token, leave room for system prompt + response
MAX_AI_CHARS = 30_000

# ---------------------------------------------------------------------------
# Claude API client (lazy init)
# ---------------------------------------------------------------------------
_client = None


def _get_client():
    """Lazy-init Anthropic client. Returns None if API key not set."""
    global _client
    if _client is not None:
        return _client
    api_key = config.anthropic_api_key()
    if not api_key:
        return None
    try:
        import anthropic
        _client = anthropic.Anthropic(api_key=api_key)
        return _client
    except Exception as e:
        log.warning("Failed to init Anthropic client: %s", e)
        return None


def is_configured() -> bool:
    return bool(config.anthropic_api_key())


# ---------------------------------------------------------------------------
# Prompt
# ---------------------------------------------------------------------------
_SYSTEM_PROMPT = """\
You take raw OCR text of a restaurant or services menu and return a clean JSON \
menu. The text may contain OCR artifacts, merged rows and formatting noise.

Rules:
1. Infer sections (like "Main course", "Appetizers", "Beverages") and the items \
under them, in the order they appear in the text.
2. Keep the merchant's wording: do not translate, rewrite or reorder names.
3. If you are unsure about a line or cannot find a price, skip that line.
4. Prices must be numeric only (no currency symbols).
5. "description" holds extra notes from the line, otherwise null.
6. Output ONLY valid JSON. No markdown, no explanation.\
"""

_USER_PROMPT_TEMPLATE = """\
Convert the following OCR menu text into JSON.

---
{ocr_text}
---

Return JSON: {{"sections": [{{"name": "...", "items": [{{"name": "...", "price": 0.00, "description": null}}]}}]}}"""


# ---------------------------------------------------------------------------
# Main extraction function
# ---------------------------------------------------------------------------
def extract_menu_items_via_claude(
    ocr_text: str,
    *,
    model: Optional[str] = None,
    max_tokens: int = 8000,
    client=None,
) -> Optional[List[MenuItem]]:
    """Send raw OCR text to Claude and get structured menu items back.

    Returns a list of MenuItem on success, or None if the API is unavailable
    or the call fails (so the caller can fall back to the heuristic parser).
    """
    client = client or _get_client()
    if client is None:
        log.info("No Anthropic API key configured; skipping Claude structuring")
        return None

    if not ocr_text or not ocr_text.strip():
        return None

    text = ocr_text.strip()
    if len(text) > MAX_AI_CHARS:
        text = text[:MAX_AI_CHARS] + "\n[... truncated ...]"

    try:
        message = client.messages.create(
            model=model or config.ai_model(),
            max_tokens=max_tokens,
            system=_SYSTEM_PROMPT,
            messages=[
                {"role": "user", "content": _USER_PROMPT_TEMPLATE.format(ocr_text=text)},
            ],
        )

        resp_text = ""
        for block in message.content:
            if hasattr(block, "text"):
                resp_text += block.text

        if not resp_text.strip():
            log.warning("Claude returned empty response")
            return None

        data = json.loads(_strip_code_fences(resp_text))
        items = sections_to_items(data)
        if not items:
            log.warning("Claude response held no usable menu items")
            return None

        log.info("Claude extracted %d menu items", len(items))
        return items

    except json.JSONDecodeError as e:
        log.warning("Failed to parse Claude JSON response: %s", e)
        return None
    except Exception as e:
        log.warning("Claude API call failed: %s", e)
        return None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _strip_code_fences(resp_text: str) -> str:
    json_str = resp_text.strip()
    if json_str.startswith("```"):
        json_str = re.sub(r"^```(?:json)?\s*\n?", "", json_str)
        json_str = re.sub(r"\n?```\s*$", "", json_str)
    return json_str


def _to_price(val: Any) -> Optional[float]:
    """Numeric price from a JSON number or a string like '12,50 €'; else None."""
    if isinstance(val, bool) or val is None:
        return None
    if isinstance(val, (int, float)):
        return float(val)
    if isinstance(val, str):
        cleaned = re.sub(r"[^0-9.,-]", "", val).replace(",", ".", 1)
        try:
            return float(cleaned)
        except ValueError:
            return None
    return None


def _clean_str(val: Any) -> str:
    return val.strip() if isinstance(val, str) else ""


def sections_to_items(data: Any) -> List[MenuItem]:
    """Flatten Claude's {"sections": [...]} JSON into ordered MenuItem rows.

    Sections without a name and items without a name or a price are skipped.
    """
    if not isinstance(data, dict):
        return []
    sections = data.get("sections")
    if not isinstance(sections, list):
        return []

    result: List[MenuItem] = []
    for section in sections:
        if not isinstance(section, dict):
            continue
        sec_name = _clean_str(section.get("name")) or _clean_str(section.get("title"))
        if not sec_name:
            continue
        sec_items = section.get("items")
        if not isinstance(sec_items, list):
            continue
        for it in sec_items:
            if not isinstance(it, dict):
                continue
            label = _clean_str(it.get("name")) or _clean_str(it.get("title"))
            if not label:
                continue
            price = _to_price(it.get("price"))
            if price is None:
                continue
            result.append(MenuItem(
                label=label,
                price=price,
                section=sec_name,
                note=_clean_str(it.get("description")) or None,
            ))
    return result
