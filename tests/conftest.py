# SPDX-License-Identifier: AGPL-3.0-only

"""
Pytest configuration and fixtures.

This module provides shared fixtures and configuration for all tests.
"""

import json
import pytest
from unittest.mock import Mock

import requests

from app import create_app
from common.config import Settings
from common.llm_client import LLMClient
from generation.models import GenerationRequest, SkillLevel, TaskKind
from generation.service import GenerationService


@pytest.fixture
def settings():
    """Settings with fixed values, independent of the environment."""
    return Settings(
        llm_base_url="https://llm.example.test/v1/chat/completions",
        llm_model="test/model",
        llm_temperature=0.3,
        llm_max_tokens=3000,
        llm_timeout=5.0,
        json_quote_aware=True,
        image_search_limit=6,
        cors_origins=["http://localhost:3000"],
    )


@pytest.fixture
def sample_text():
    """Sample paper text for testing."""
    return """
    Abstract
    We study sparse attention for long documents and show a 2x speedup.

    1. Introduction
    Transformers scale quadratically with sequence length.

    2. Methodology
    We propose block-sparse attention with learned routing.

    3. Results
    On three benchmarks the method matches dense attention quality.
    """


@pytest.fixture
def summary_payload():
    """A well-formed summary object as the model would emit it."""
    return {
        "title": "Sparse Attention for Long Documents",
        "authors": "A. Author, B. Author",
        "abstract": "We study sparse attention.",
        "simplifiedSummary": "The paper makes transformers faster on long text.",
        "keyPoints": ["Point 1", "Point 2", "Point 3", "Point 4"],
        "figures": [
            {"id": 1, "title": "Routing", "description": "Block routing", "url": "https://example.test/1.png"}
        ],
        "deepDive": {
            "methodology": "Block-sparse attention.",
            "results": "2x speedup.",
            "implications": "Longer contexts.",
            "technicalDetails": "Learned routing.",
            "context": "Efficient transformers."
        }
    }


@pytest.fixture
def quiz_payload():
    """A well-formed quiz object."""
    return {
        "questions": [
            {
                "id": 1,
                "type": "multiple-choice",
                "question": "What does the method speed up?",
                "options": ["Attention", "Tokenization", "Decoding", "Training data"],
                "correctAnswer": 0,
                "explanation": "The method targets attention."
            },
            {
                "id": 2,
                "type": "text",
                "question": "Explain learned routing.",
                "correctKeywords": ["routing", "blocks"],
                "explanation": "Blocks are routed to each other."
            }
        ]
    }


@pytest.fixture
def applications_payload():
    """A well-formed applications object."""
    return {
        "applications": {
            "projectIdeas": ["Build a long-document QA demo"],
            "industryApplications": ["Legal document review"],
            "researchDirections": ["Sparse attention for audio"],
            "blogTopics": ["Why attention is quadratic"]
        }
    }


def make_response(status_code=200, json_body=None, text=None):
    """Build a requests.Response-like mock."""
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    if json_body is not None:
        resp.text = json.dumps(json_body)
        resp.json.return_value = json_body
    else:
        resp.text = text or ""
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    return resp


def completion_response(content, status_code=200):
    """Chat-completion response whose message content is `content`."""
    return make_response(status_code, {"choices": [{"message": {"content": content}}]})


@pytest.fixture
def fake_response():
    """Factory for requests.Response-like mocks."""
    return make_response


@pytest.fixture
def completion():
    """Factory for chat-completion responses carrying a given message."""
    return completion_response


@pytest.fixture
def make_request():
    """Factory for GenerationRequest objects."""
    def _make(task_kind=TaskKind.SUMMARY, source_text="Some paper text", credential="k",
              skill_level=SkillLevel.UNDERGRADUATE):
        return GenerationRequest(
            task_kind=task_kind,
            source_text=source_text,
            credential=credential,
            skill_level=skill_level,
        )
    return _make


@pytest.fixture
def mock_llm_client(settings):
    """LLM client mock; set .complete.return_value or .side_effect per test."""
    client = Mock(spec=LLMClient)
    client.settings = settings
    return client


@pytest.fixture
def generation_service(settings, mock_llm_client):
    """Generation service wired to the mock LLM client."""
    return GenerationService(settings=settings, llm_client=mock_llm_client)


@pytest.fixture
def mock_image_client():
    """Image search client mock returning no images."""
    client = Mock()
    client.search.return_value = []
    return client


@pytest.fixture
def app(settings, mock_image_client):
    """Flask app using the real generation service and a mock image client."""
    flask_app = create_app(settings=settings, image_client=mock_image_client)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Mark tests from test_endpoints.py as integration, the rest as unit."""
    for item in items:
        if "test_endpoints" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
