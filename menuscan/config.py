# menuscan/config.py
"""
Environment configuration for menuscan + portal.

Values come from the process environment, with a repo-root .env loaded first
(python-dotenv) so TESSERACT_CMD / POPPLER_PATH / ANTHROPIC_API_KEY work
without touching the shell. Read through the helpers at call time so tests
can monkeypatch the environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import os

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]

load_dotenv(ROOT / ".env")

DEFAULT_AI_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_TESSERACT_LANG = "eng"
DEFAULT_TESSERACT_CONFIG = "--oem 1 --psm 6"
DEFAULT_MAX_UPLOAD_MB = 20

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip()


def env_flag(name: str, default: bool) -> bool:
    val = (os.getenv(name) or "").strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return default


def env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, ""))
    except ValueError:
        return default


def anthropic_api_key() -> Optional[str]:
    return env_str("ANTHROPIC_API_KEY")


def ai_model() -> str:
    return env_str("MENU_AI_MODEL", DEFAULT_AI_MODEL)


def ai_enabled() -> bool:
    return env_flag("MENU_AI_ENABLED", True)


def tesseract_cmd() -> Optional[str]:
    return env_str("TESSERACT_CMD")


def tesseract_lang() -> str:
    return env_str("TESSERACT_LANG", DEFAULT_TESSERACT_LANG)


def tesseract_config() -> str:
    return env_str("TESSERACT_CONFIG", DEFAULT_TESSERACT_CONFIG)


def poppler_path() -> Optional[str]:
    return env_str("POPPLER_PATH")


def max_upload_bytes() -> int:
    return env_int("MAX_UPLOAD_MB", DEFAULT_MAX_UPLOAD_MB) * 1024 * 1024


def secret_key() -> str:
    return env_str("SECRET_KEY", "dev-secret-change-me")
