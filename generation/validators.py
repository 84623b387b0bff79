# SPDX-License-Identifier: AGPL-3.0-only

"""
Input validation schemas using Marshmallow for the generation endpoints.

Emptiness of the source text and credential is checked by the pipeline
itself (MissingField), so those fields are optional here; the schemas only
enforce types and the skill-level vocabulary.
"""
from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

from .models import SkillLevel

SKILL_LEVELS = [level.value for level in SkillLevel]


class _GenerationSchema(Schema):
    """Shared credential/skill-level fields."""

    class Meta:
        unknown = EXCLUDE

    credential = fields.Str(
        required=False,
        load_default="",
        allow_none=True,
        error_messages={'invalid': 'Credential must be a string'}
    )
    skill_level = fields.Str(
        data_key="skillLevel",
        required=False,
        load_default=SkillLevel.UNDERGRADUATE.value,
        validate=validate.OneOf(SKILL_LEVELS),
        error_messages={'invalid': 'Skill level must be a string'}
    )

    @pre_load
    def accept_api_key(self, data, **kwargs):
        """Older clients send the credential as apiKey."""
        if isinstance(data, dict) and not data.get("credential") and data.get("apiKey"):
            data = dict(data)
            data["credential"] = data["apiKey"]
        if isinstance(data, dict) and data.get("skillLevel") is None:
            data = {k: v for k, v in data.items() if k != "skillLevel"}
        return data


class ContentRequestSchema(_GenerationSchema):
    """Validation schema for summary requests."""
    text = fields.Str(
        required=False,
        load_default="",
        allow_none=True,
        error_messages={'invalid': 'Text must be a string'}
    )


class PaperContentRequestSchema(_GenerationSchema):
    """Validation schema for quiz and applications requests."""
    content = fields.Str(
        required=False,
        load_default="",
        allow_none=True,
        error_messages={'invalid': 'Content must be a string'}
    )
