"""
PaperPal – research paper reading assistant, API back-end

Endpoints
─────────
GET  /health                      → {"status": "ok"}
POST /api/extract-text            → {"text": str, "pages": [str]}
POST /api/generate-content        → summary + deep dive
POST /api/generate-quiz           → {"questions": [...]}
POST /api/generate-applications   → {"applications": {...}}
POST /api/fetch-images            → {"images": [str]}
(no HTML rendered; UI lives in the browser front-end)
"""

# SPDX-License-Identifier: AGPL-3.0-only

# ── imports ──────────────────────────────────────────────────────
from typing import Optional

from flask import Flask, request, jsonify
from flask_cors import CORS                 # allow front-end origin
from dotenv import load_dotenv
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from common.config import Settings, get_settings
from common.errors import PdfExtractionError
from common.log import get_logger, setup_logging
from common.pdf_utils import extract_text_by_page, join_pages
from generation.endpoints import register_generation_endpoints
from generation.service import GenerationService
from images.endpoints import register_image_endpoints
from images.search import ImageSearchClient

# Load environment variables from .env file
load_dotenv()

logger = get_logger(__name__)


def allowed_pdf(fileobj):
    """Lenient PDF check: just check extension and MIME type."""
    if not fileobj.filename:
        return False

    ext = fileobj.filename.lower().endswith(".pdf")
    mime = fileobj.mimetype == "application/pdf"

    # Accept if either extension OR MIME type indicates PDF
    return ext or mime


def register_core_routes(app: Flask):
    """Health checks and PDF text extraction."""

    @app.get("/")
    def root():
        """Simple root for anyone hitting the API directly."""
        return {"service": "PaperPal API", "docs": "/health"}, 200

    @app.get("/health")
    def health():
        """Used by the front-end (and uptime checks) to verify API is alive."""
        return jsonify(status="ok"), 200

    @app.post("/api/extract-text")
    def extract_text():
        """
        Accept exactly one PDF file and return its text, page by page and
        joined with blank lines between pages.
        """
        files = request.files.getlist("file")
        if len(files) != 1:
            return jsonify(error="Upload exactly one PDF file"), 400

        f = files[0]
        if not allowed_pdf(f):
            return jsonify(error="Only PDF files allowed"), 400

        try:
            pages = extract_text_by_page(f.stream)
        except PdfExtractionError as e:
            logger.warning("Text extraction failed for %s: %s", f.filename, e)
            return jsonify(error=f"Text extraction failed: {e}"), 422

        return jsonify(text=join_pages(pages), pages=pages), 200


def register_error_handlers(app: Flask):
    """JSON error bodies for anything the routes do not handle themselves."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify(error="Invalid request", details=e.messages), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify(error=e.description), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error")
        return jsonify(error="Internal server error"), 500


def create_app(
    settings: Optional[Settings] = None,
    generation_service: Optional[GenerationService] = None,
    image_client: Optional[ImageSearchClient] = None,
) -> Flask:
    """Build the Flask app. Collaborators can be injected for tests."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.max_content_length
    app.config["PAPERPAL_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}}
    )

    register_core_routes(app)
    register_generation_endpoints(app, generation_service or GenerationService(settings))
    register_image_endpoints(app, image_client or ImageSearchClient(settings))
    register_error_handlers(app)

    logger.info("PaperPal API ready (model=%s, endpoint=%s)", settings.llm_model, settings.llm_base_url)
    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8000, debug=True)
