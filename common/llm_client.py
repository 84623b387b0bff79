# SPDX-License-Identifier: AGPL-3.0-only

"""
Chat-completion client: one request, no retries, typed failures.
"""
import time
from typing import Any, Dict, List

import requests

from common.config import Settings
from common.errors import TransportError, UpstreamError
from common.log import get_logger

logger = get_logger(__name__)


class LLMClient:
    """Client for an OpenAI-style chat-completions endpoint (OpenRouter by default)."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.url = settings.llm_base_url
        self.timeout = settings.llm_timeout

    def build_payload(self, system_prompt: str, user_content: str) -> Dict[str, Any]:
        """Request body: fixed sampling params plus a system and a user message."""
        messages: List[Dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_content})

        payload = self.settings.get_sampling_params()
        payload["messages"] = messages
        return payload

    def complete(self, system_prompt: str, user_content: str, credential: str) -> str:
        """
        Call the completion endpoint once.

        Returns the text at choices[0].message.content.

        Raises:
            TransportError: network failure or timeout.
            UpstreamError: non-2xx status, or a 2xx body without message content.
        """
        headers = self.settings.get_llm_headers(credential)
        payload = self.build_payload(system_prompt, user_content)

        started = time.time()
        try:
            resp = requests.post(
                self.url,
                headers=headers,
                json=payload,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.warning("Completion request to %s failed: %s", self.url, e)
            raise TransportError(f"Completion request failed: {e}") from e

        elapsed = time.time() - started
        logger.debug("Completion endpoint answered %s in %.2fs", resp.status_code, elapsed)

        if not 200 <= resp.status_code < 300:
            logger.warning("Completion endpoint error: %s %s", resp.status_code, resp.text[:500])
            raise UpstreamError(resp.status_code, resp.text)

        return self._extract_content(resp)

    @staticmethod
    def _extract_content(resp: requests.Response) -> str:
        """Pull the assistant message text out of a 2xx response."""
        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError(resp.status_code, resp.text, reason="Completion body is not JSON") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamError(resp.status_code, resp.text, reason="Completion body has no message content") from e

        if not isinstance(content, str):
            raise UpstreamError(resp.status_code, resp.text, reason="Completion message content is not text")

        return content
