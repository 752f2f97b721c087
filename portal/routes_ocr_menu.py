# portal/routes_ocr_menu.py
"""
Menu photo import endpoints.

POST /api/ocr-menu   multipart 'file' → {"items", "sections", "rawText", "source"}
GET  /ocr/health     tesseract + Claude availability
"""

from __future__ import annotations

import logging
import tempfile
import uuid
from pathlib import Path

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename

from menuscan import ai_menu_extract, menu_import, ocr_facade

log = logging.getLogger(__name__)

ocr_menu = Blueprint("ocr_menu", __name__)

_TOO_LARGE_MSG = "File too large. Try a smaller image or raise MAX_UPLOAD_MB."


@ocr_menu.post("/api/ocr-menu")
def ocr_menu_upload():
    try:
        if "file" not in request.files:
            return jsonify({"error": "No file provided."}), 400
        file = request.files["file"]
        if not file.filename:
            return jsonify({"error": "Empty filename."}), 400
        if not ocr_facade.allowed_file(file.filename):
            return jsonify({"error": "Unsupported file type. Allowed: jpg, jpeg, png, webp, pdf"}), 400

        base_name = secure_filename(file.filename) or "upload"
        with tempfile.TemporaryDirectory(prefix="menuscan_") as tmp_dir:
            save_path = Path(tmp_dir) / f"{uuid.uuid4().hex[:8]}_{base_name}"
            file.save(str(save_path))
            parsed = menu_import.scan_menu_file(save_path)

        log.info("ocr-menu: %d items via %s", len(parsed.items), parsed.source)
        return jsonify(parsed.to_dict()), 200

    except menu_import.UnreadableImageError as e:
        return jsonify({"error": str(e), "rawText": e.raw_text}), 502
    except menu_import.NoMenuItemsError as e:
        return jsonify({"error": str(e), "rawText": e.raw_text}), 422
    except RequestEntityTooLarge:
        return jsonify({"error": _TOO_LARGE_MSG}), 413
    except Exception:
        log.exception("ocr-menu route error")
        return jsonify({
            "error": "Unexpected server error while scanning your menu. Please try again in a moment.",
        }), 500


@ocr_menu.get("/ocr/health")
def ocr_health():
    return jsonify({
        "tesseract": ocr_facade.health(),
        "ai": {"configured": ai_menu_extract.is_configured()},
    })


def register_error_handlers(app) -> None:
    @app.errorhandler(RequestEntityTooLarge)
    def _too_large(_e):
        return jsonify({"error": _TOO_LARGE_MSG}), 413
