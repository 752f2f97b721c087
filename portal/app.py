# portal/app.py
from flask import Flask, jsonify

# --- Standard libs ---
import logging
import sys
from pathlib import Path

# --- Paths ---
ROOT = Path(__file__).resolve().parents[1]

# Make project root importable so we can import menuscan.*
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

# config loads .env on import (TESSERACT_CMD / POPPLER_PATH / ANTHROPIC_API_KEY)
from menuscan import config
from menuscan.ocr_facade import configure_tesseract
from portal.routes_ocr_menu import ocr_menu, register_error_handlers

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)


def create_app() -> Flask:
    app = Flask(__name__)

    app.config["SECRET_KEY"] = config.secret_key()
    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes()

    configure_tesseract()

    app.register_blueprint(ocr_menu)
    register_error_handlers(app)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    return app


app = create_app()

# ------------------------
# Run
# ------------------------
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
