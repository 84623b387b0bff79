# SPDX-License-Identifier: AGPL-3.0-only

"""
Flask endpoints for the generation tasks.
"""
from typing import Callable

from flask import current_app, jsonify, request
from marshmallow import Schema, ValidationError

from common.errors import MissingField
from common.log import get_logger
from .models import GenerationRequest, SkillLevel, TaskKind
from .service import GenerationService
from .tasks import get_task
from .validators import ContentRequestSchema, PaperContentRequestSchema

logger = get_logger(__name__)

SERVICE_KEY = "generation_service"


def get_generation_service() -> GenerationService:
    """The service registered on the current app."""
    return current_app.extensions[SERVICE_KEY]


def _make_handler(task_kind: TaskKind, schema: Schema, text_field: str) -> Callable:
    """Build a view that feeds one task kind through the generation service."""
    task = get_task(task_kind)

    def handler():
        try:
            body = request.get_json(silent=True)
            if not isinstance(body, dict):
                body = {}

            try:
                data = schema.load(body)
            except ValidationError as e:
                return jsonify({"error": "Invalid request", "details": e.messages}), 400

            gen_request = GenerationRequest(
                task_kind=task_kind,
                source_text=data.get(text_field) or "",
                credential=data.get("credential") or "",
                skill_level=SkillLevel(data["skill_level"]),
            )

            try:
                result = get_generation_service().generate(gen_request)
            except MissingField:
                return jsonify({"error": f"Missing required fields: {text_field} and credential"}), 400

            return jsonify(result)

        except Exception:
            logger.exception("Error in %s endpoint", task_kind.value)
            return jsonify({"error": task.error_message}), 500

    handler.__name__ = f"generate_{task_kind.value}"
    return handler


def register_generation_endpoints(app, service: GenerationService):
    """Register generation endpoints with Flask app."""
    app.extensions[SERVICE_KEY] = service

    app.add_url_rule(
        "/api/generate-content",
        view_func=_make_handler(TaskKind.SUMMARY, ContentRequestSchema(), "text"),
        methods=["POST"],
    )
    app.add_url_rule(
        "/api/generate-quiz",
        view_func=_make_handler(TaskKind.QUIZ, PaperContentRequestSchema(), "content"),
        methods=["POST"],
    )
    app.add_url_rule(
        "/api/generate-applications",
        view_func=_make_handler(TaskKind.APPLICATIONS, PaperContentRequestSchema(), "content"),
        methods=["POST"],
    )
