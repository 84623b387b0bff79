# SPDX-License-Identifier: AGPL-3.0-only

"""
Configuration for the PaperPal backend.

All settings can be overridden with PAPERPAL_-prefixed environment variables
(or a .env file loaded by the app). The settings object is frozen; build a new
one to change values, e.g. in tests.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


OPENROUTER_CHAT_URL = "https://openrouter.ai/api/v1/chat/completions"

# Short names accepted for llm_model; any other OpenRouter model id passes through.
KNOWN_MODELS = {
    "deepseekR1": "deepseek/deepseek-r1-0528:free",
    "deepseekCoder": "deepseek-ai/deepseek-coder-33b-instruct",
    "claude": "anthropic/claude-3.5-sonnet",
    "gpt4": "openai/gpt-4",
    "gemini": "google/gemini-pro",
    "llama": "meta-llama/llama-3.1-8b-instruct",
    "mistral": "mistralai/mistral-7b-instruct",
    "codellama": "meta-llama/codellama-34b-instruct",
}


class Settings(BaseSettings):
    """Configuration settings for the PaperPal backend."""

    # Chat-completion service
    llm_base_url: str = Field(default=OPENROUTER_CHAT_URL, description="Chat-completions endpoint URL")
    llm_model: str = Field(default=KNOWN_MODELS["deepseekR1"], description="Model identifier sent upstream")
    llm_temperature: float = Field(default=0.3, ge=0.0, le=2.0, description="Sampling temperature")
    llm_max_tokens: int = Field(default=3000, gt=0, description="Maximum output tokens")
    llm_timeout: Optional[float] = Field(default=120.0, description="Upstream request timeout in seconds (None = wait forever)")
    http_referer: str = Field(default="http://localhost:3000", description="HTTP-Referer header sent to OpenRouter")
    app_title: str = Field(default="PaperPal", description="X-Title header sent to OpenRouter")

    # Normalization
    json_quote_aware: bool = Field(default=True, description="Ignore braces inside JSON strings when extracting")

    # Image search
    image_search_limit: int = Field(default=6, ge=0, description="Maximum number of image URLs returned")
    image_search_timeout: float = Field(default=10.0, description="Image search request timeout in seconds")

    # Uploads
    max_content_length: int = Field(default=50 * 1024 * 1024, description="Max request size in bytes (50MB)")

    # HTTP / ops
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Origins allowed to call /api/*",
    )
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("llm_model")
    @classmethod
    def resolve_model_alias(cls, value: str) -> str:
        return KNOWN_MODELS.get(value, value)

    class Config:
        env_prefix = "PAPERPAL_"
        case_sensitive = False
        frozen = True

    def get_llm_headers(self, credential: str) -> dict:
        """Headers for one chat-completion call."""
        return {
            "Content-Type": "application/json",
            "HTTP-Referer": self.http_referer,
            "X-Title": self.app_title,
            "Authorization": f"Bearer {credential}",
        }

    def get_sampling_params(self) -> dict:
        """Fixed sampling parameters merged into every completion body."""
        return {
            "model": self.llm_model,
            "temperature": self.llm_temperature,
            "max_tokens": self.llm_max_tokens,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    return Settings()
