# SPDX-License-Identifier: AGPL-3.0-only

import json

import pytest
from unittest.mock import patch

from common.errors import MissingField, TransportError, UpstreamError
from generation.fallbacks import APPLICATIONS_FALLBACK, QUIZ_FALLBACK, SUMMARY_FALLBACK
from generation.models import SkillLevel, TaskKind
from generation.service import GenerationService, validate_request
from generation.tasks import TASKS, TaskDescriptor


class TestValidation:
    """Requests without text or credential never reach the network."""

    @pytest.mark.parametrize("source_text,credential,missing", [
        ("", "k", ["text"]),
        ("   ", "k", ["text"]),
        ("text", "", ["credential"]),
        ("", "", ["text", "credential"]),
    ])
    def test_missing_fields(self, make_request, source_text, credential, missing):
        """Test empty text or credential raises MissingField."""
        with pytest.raises(MissingField) as excinfo:
            validate_request(make_request(source_text=source_text, credential=credential))
        assert excinfo.value.fields == missing

    @pytest.mark.parametrize("task_kind", list(TaskKind))
    def test_no_external_call_on_missing_field(self, task_kind, generation_service, mock_llm_client, make_request):
        """Test validation failures never call the completion endpoint."""
        with pytest.raises(MissingField):
            generation_service.process(make_request(task_kind=task_kind, source_text=""))
        mock_llm_client.complete.assert_not_called()

    def test_credential_not_in_repr(self, make_request):
        """Test the credential is hidden from repr."""
        assert "super-secret" not in repr(make_request(credential="super-secret"))


class TestGenerationService:
    """Test suite for GenerationService."""

    def test_summary_success(self, generation_service, mock_llm_client, make_request, summary_payload):
        """Test a successful summary run."""
        mock_llm_client.complete.return_value = "Here you go: " + json.dumps(summary_payload)

        output = generation_service.process(make_request())

        assert output["fallback_used"] is False
        assert output["result"] == summary_payload
        assert output["metrics"]["llm_calls"] == 1
        assert "parsed" in output["metrics"]["stages"]

    def test_prompt_and_credential_forwarded(self, generation_service, mock_llm_client, make_request, quiz_payload):
        """Test the prompt and credential reach the client."""
        mock_llm_client.complete.return_value = json.dumps(quiz_payload)

        generation_service.generate(make_request(
            task_kind=TaskKind.QUIZ, source_text="paper", credential="key-1",
            skill_level=SkillLevel.GRADUATE,
        ))

        system_prompt, user_content, credential = mock_llm_client.complete.call_args[0]
        assert "at a graduate level" in system_prompt
        assert user_content == "paper"
        assert credential == "key-1"

    @pytest.mark.parametrize("task_kind,fallback", [
        (TaskKind.SUMMARY, SUMMARY_FALLBACK),
        (TaskKind.QUIZ, QUIZ_FALLBACK),
        (TaskKind.APPLICATIONS, APPLICATIONS_FALLBACK),
    ])
    @pytest.mark.parametrize("error", [
        UpstreamError(500, "Internal error"),
        UpstreamError(429, "Rate limited"),
        TransportError("connection reset"),
    ])
    def test_upstream_failure_falls_back(self, task_kind, fallback, error, generation_service, mock_llm_client, make_request):
        """Test upstream and transport failures return the fallback."""
        mock_llm_client.complete.side_effect = error

        output = generation_service.process(make_request(task_kind=task_kind))

        assert output["fallback_used"] is True
        assert output["result"] == fallback
        assert output["metrics"]["failure"] == type(error).__name__

    @pytest.mark.parametrize("raw_output", [
        "not json at all",
        '{"applications": {"projectIdeas": ["only one category"]}}',
        '{"applications": ',
        '{"applications": {"projectIdeas": [1,]}}',
    ])
    def test_bad_output_falls_back(self, raw_output, generation_service, mock_llm_client, make_request):
        """Test unusable model output returns the fallback."""
        mock_llm_client.complete.return_value = raw_output

        result = generation_service.generate(make_request(task_kind=TaskKind.APPLICATIONS))

        assert result == APPLICATIONS_FALLBACK

    def test_fallback_is_a_fresh_copy(self, generation_service, mock_llm_client, make_request):
        """Test callers cannot mutate the fallback table."""
        mock_llm_client.complete.return_value = "nope"

        first = generation_service.generate(make_request(task_kind=TaskKind.QUIZ))
        first["questions"].clear()
        second = generation_service.generate(make_request(task_kind=TaskKind.QUIZ))

        assert len(second["questions"]) == 2
        assert QUIZ_FALLBACK["questions"]

    def test_idempotent_with_deterministic_upstream(self, generation_service, mock_llm_client, make_request, quiz_payload):
        """Test identical output gives identical results."""
        mock_llm_client.complete.return_value = "```json\n" + json.dumps(quiz_payload) + "\n```"
        request = make_request(task_kind=TaskKind.QUIZ)

        assert generation_service.generate(request) == generation_service.generate(request)

    def test_descriptor_can_disable_upstream_fallback(self, settings, mock_llm_client, make_request):
        """Test a descriptor can surface upstream errors."""
        strict = TaskDescriptor(
            kind=TaskKind.QUIZ,
            result_model=TASKS[TaskKind.QUIZ].result_model,
            fallback_factory=TASKS[TaskKind.QUIZ].fallback_factory,
            fallback_on_upstream_error=False,
        )
        mock_llm_client.complete.side_effect = UpstreamError(502, "bad gateway")
        service = GenerationService(settings=settings, llm_client=mock_llm_client)

        with patch("generation.service.get_task", return_value=strict):
            with pytest.raises(UpstreamError):
                service.process(make_request(task_kind=TaskKind.QUIZ))

    def test_naive_extraction_setting(self, settings, mock_llm_client, make_request, applications_payload):
        """Test the quote-aware setting reaches the extractor."""
        naive = settings.model_copy(update={"json_quote_aware": False})
        applications_payload["applications"]["blogTopics"] = ["Using {braces} in titles }"]
        mock_llm_client.complete.return_value = json.dumps(applications_payload)

        quote_aware = GenerationService(settings=settings, llm_client=mock_llm_client)
        naive_service = GenerationService(settings=naive, llm_client=mock_llm_client)

        assert quote_aware.generate(make_request(task_kind=TaskKind.APPLICATIONS)) == applications_payload
        assert naive_service.generate(make_request(task_kind=TaskKind.APPLICATIONS)) == APPLICATIONS_FALLBACK

    def test_deeply_nested_output_falls_back(self, generation_service, mock_llm_client, make_request):
        """Test that output nested past the decoder's recursion limit uses the fallback."""
        mock_llm_client.complete.return_value = '{"applications": ' + "[" * 100000 + "]" * 100000 + "}"

        output = generation_service.process(make_request(task_kind=TaskKind.APPLICATIONS))

        assert output["fallback_used"] is True
        assert output["result"] == APPLICATIONS_FALLBACK
        assert output["metrics"]["failure"] == "MalformedJson"
