# SPDX-License-Identifier: AGPL-3.0-only

"""
Flask endpoint for the illustrative image search.
"""
from flask import current_app, jsonify, request
from marshmallow import EXCLUDE, Schema, ValidationError, fields

from common.log import get_logger
from .search import ImageSearchClient

logger = get_logger(__name__)

CLIENT_KEY = "image_search_client"


class ImageSearchRequestSchema(Schema):
    """Validation schema for image search requests."""

    class Meta:
        unknown = EXCLUDE

    query = fields.Str(
        required=False,
        load_default="",
        allow_none=True,
        error_messages={'invalid': 'Query must be a string'}
    )


def register_image_endpoints(app, client: ImageSearchClient):
    """Register image search endpoint with Flask app."""
    app.extensions[CLIENT_KEY] = client
    schema = ImageSearchRequestSchema()

    @app.post("/api/fetch-images")
    def fetch_images():
        """Always answers 200 with a (possibly empty) list once a query is given."""
        body = request.get_json(silent=True)
        try:
            data = schema.load(body if isinstance(body, dict) else {})
        except ValidationError as e:
            return jsonify({"error": "Invalid request", "details": e.messages}), 400

        query = (data.get("query") or "").strip()
        if not query:
            return jsonify({"error": "Missing query"}), 400

        try:
            images = current_app.extensions[CLIENT_KEY].search(query)
        except Exception:
            logger.exception("Image search failed")
            images = []

        return jsonify({"images": images})
