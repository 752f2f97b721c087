"""
OCR façade — uploaded menu photo / PDF → raw text.

The only place that talks to Tesseract. Everything downstream works on the
returned string (see menuscan.menu_import).

Public API:
- configure_tesseract(cmd=None) -> resolved binary path or None
- ocr_image_to_text(path) -> str
- pdf_to_text(path) -> str
- extract_text_from_upload(path) -> str
- health() -> engine + version info

Engine failures are logged and come back as "" — an empty string is the
caller's signal that the photo could not be read.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pytesseract
from PIL import Image, ImageFilter, ImageOps

from menuscan import config

log = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".webp"}
PDF_SUFFIXES = {".pdf"}
ALLOWED_SUFFIXES = IMAGE_SUFFIXES | PDF_SUFFIXES

_COMMON_TESSERACT_PATHS = [
    r"C:\Program Files\Tesseract-OCR\tesseract.exe",
    r"C:\Program Files (x86)\Tesseract-OCR\tesseract.exe",
    "/usr/bin/tesseract",
    "/usr/local/bin/tesseract",
    "/opt/homebrew/bin/tesseract",
]

PathLike = Union[str, Path]


def configure_tesseract(cmd: Optional[str] = None) -> Optional[str]:
    """
    Point pytesseract at a Tesseract binary.

    1) explicit cmd / TESSERACT_CMD if it exists
    2) PATH
    3) common install locations
    """
    explicit = cmd or config.tesseract_cmd()
    if explicit and Path(explicit).exists():
        pytesseract.pytesseract.tesseract_cmd = explicit
        return explicit

    which = shutil.which("tesseract") or shutil.which("tesseract.exe")
    if which:
        pytesseract.pytesseract.tesseract_cmd = which
        return which

    for p in _COMMON_TESSERACT_PATHS:
        if Path(p).exists():
            pytesseract.pytesseract.tesseract_cmd = p
            return p

    log.warning("Tesseract binary not found (set TESSERACT_CMD)")
    return None


def _prep_image(img: Image.Image) -> Image.Image:
    img = ImageOps.exif_transpose(img)
    img = img.convert("L")
    img = ImageOps.autocontrast(img)
    return img.filter(ImageFilter.SHARPEN)


def _image_to_string(img: Image.Image) -> str:
    return pytesseract.image_to_string(
        _prep_image(img),
        lang=config.tesseract_lang(),
        config=config.tesseract_config(),
    ) or ""


def ocr_image_to_text(path: PathLike) -> str:
    try:
        with Image.open(str(path)) as img:
            return _image_to_string(img).strip()
    except Exception as e:
        log.warning("OCR failed for image %s: %s", path, e)
        return ""


def pdf_to_text(path: PathLike) -> str:
    """Rasterize each PDF page with pdf2image (+poppler) and OCR it."""
    try:
        from pdf2image import convert_from_path
    except ImportError as e:
        log.warning("pdf2image unavailable, cannot OCR %s: %s", path, e)
        return ""

    try:
        pages = convert_from_path(str(path), dpi=300, poppler_path=config.poppler_path())
    except Exception as e:
        log.warning("PDF rasterization failed for %s: %s", path, e)
        return ""

    buf = []
    for idx, pg in enumerate(pages, start=1):
        try:
            txt = _image_to_string(pg)
        except Exception as e:
            log.warning("OCR failed for %s page %d: %s", path, idx, e)
            continue
        if txt.strip():
            buf.append(txt)
    return "\n".join(buf).strip()


def extract_text_from_upload(path: PathLike) -> str:
    suffix = Path(str(path)).suffix.lower()
    if suffix in PDF_SUFFIXES:
        return pdf_to_text(path)
    return ocr_image_to_text(path)


def allowed_file(filename: str) -> bool:
    return Path(filename or "").suffix.lower() in ALLOWED_SUFFIXES


def health() -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "engine": "tesseract",
        "cmd": pytesseract.pytesseract.tesseract_cmd,
        "lang": config.tesseract_lang(),
        "config": config.tesseract_config(),
    }
    try:
        info["version"] = str(pytesseract.get_tesseract_version())
        info["available"] = True
    except Exception as e:
        info["version"] = None
        info["available"] = False
        info["error"] = repr(e)
    return info
