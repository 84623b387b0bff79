# SPDX-License-Identifier: AGPL-3.0-only

"""
Generation service: validate, prompt, complete once, normalize or fall back.
"""
from typing import Any, Dict, Optional

from common.config import Settings, get_settings
from common.errors import MalformedJson, MissingField, NoJsonFound, TransportError, UpstreamError
from common.llm_client import LLMClient
from common.log import get_logger
from common.metrics import PipelineMetrics
from .models import GenerationRequest
from .normalizer import extract_first_json_object, parse_payload
from .prompt_pack import build_prompt
from .tasks import TaskDescriptor, get_task

logger = get_logger(__name__)


def validate_request(request: GenerationRequest) -> None:
    """Reject requests without source text or credential before any network call."""
    missing = []
    if not (request.source_text or "").strip():
        missing.append("text")
    if not (request.credential or "").strip():
        missing.append("credential")
    if missing:
        raise MissingField(missing)


class GenerationService:
    """Runs one generation task end to end and always returns a renderable result."""

    def __init__(self, settings: Optional[Settings] = None, llm_client: Optional[LLMClient] = None):
        self.settings = settings or get_settings()
        self.llm_client = llm_client or LLMClient(self.settings)

    def process(self, request: GenerationRequest) -> Dict[str, Any]:
        """
        Main processing pipeline.

        Args:
            request: task kind, source text, credential and skill level

        Returns:
            {result: {}, fallback_used: bool, metrics: {}}

        Raises:
            MissingField: source text or credential is empty.
            TransportError, UpstreamError: only for tasks whose descriptor
                disables the upstream fallback.
        """
        task = get_task(request.task_kind)
        metrics = PipelineMetrics(task.kind.value)

        # Stage 1: Validate
        validate_request(request)
        metrics.mark_stage("validated")

        # Stage 2: Build prompt
        prompt = build_prompt(task.kind, request.skill_level, request.source_text)
        metrics.mark_stage("prompt_built")

        # Stage 3: Completion
        try:
            metrics.add_llm_call()
            raw_output = self.llm_client.complete(
                prompt.system_instructions, prompt.user_content, request.credential
            )
        except (TransportError, UpstreamError) as e:
            if not task.fallback_on_upstream_error:
                metrics.finish()
                raise
            return self._substitute_fallback(task, metrics, e)
        metrics.mark_stage("completion_done")

        # Stage 4: Extract and parse
        try:
            payload = extract_first_json_object(raw_output, quote_aware=self.settings.json_quote_aware)
            metrics.mark_stage("json_extracted")
            result = parse_payload(payload, task.result_model)
            metrics.mark_stage("parsed")
        except (NoJsonFound, MalformedJson) as e:
            logger.debug("Unusable %s output: %r", task.kind.value, raw_output[:500])
            return self._substitute_fallback(task, metrics, e)

        metrics.finish()
        logger.info("Generated %s in %.2fs", task.kind.value, metrics.duration())

        return {
            "result": result.to_dict(),
            "fallback_used": False,
            "metrics": metrics.to_dict()
        }

    def generate(self, request: GenerationRequest) -> Dict[str, Any]:
        """Run the pipeline and return only the result body."""
        return self.process(request)["result"]

    @staticmethod
    def _substitute_fallback(task: TaskDescriptor, metrics: PipelineMetrics, error: Exception) -> Dict[str, Any]:
        metrics.record_fallback(error)
        metrics.mark_stage("fallback_substituted")
        metrics.finish()
        logger.warning("Using fallback %s result (%s: %s)", task.kind.value, type(error).__name__, error)
        return {
            "result": task.fallback(),
            "fallback_used": True,
            "metrics": metrics.to_dict()
        }
