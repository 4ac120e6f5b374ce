"""
OpenAI-compatible provider implementation (OpenRouter by default).
"""
import logging
from typing import Optional, Dict
from openai import OpenAI, APIError

from resume_guru.core.config import Settings
from resume_guru.llm.provider import LLMProvider, LLMResponse, LLMNotConfiguredError

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """Chat completions through the official OpenAI SDK."""

    def __init__(self, settings: Settings):
        self.api_key = settings.llm_api_key
        self.client = None
        if not self.api_key:
            # Checked again per call so a missing key degrades instead of crashing.
            logger.warning("OPENROUTER_API_KEY not configured - AI reviews will fall back")
            return

        self.client = OpenAI(
            api_key=self.api_key,
            base_url=settings.llm_base_url,
            timeout=settings.llm_timeout_seconds,
            max_retries=0,
            default_headers={
                "HTTP-Referer": settings.app_public_url,
                "X-Title": settings.app_title,
            },
        )
        logger.info(f"OpenAI-compatible provider initialized for {settings.llm_base_url}")

    def chat(
        self,
        messages: list[Dict[str, str]],
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a chat completion."""
        if self.client is None:
            raise LLMNotConfiguredError("Missing OPENROUTER_API_KEY")

        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens or 2000,
                **kwargs
            )
        except APIError as e:
            logger.error(f"LLM API error: {e}")
            raise

        if not response.choices:
            return LLMResponse(content="", model=model)

        choice = response.choices[0]
        usage = response.usage
        return LLMResponse(
            content=choice.message.content or "",
            tokens_in=usage.prompt_tokens if usage else 0,
            tokens_out=usage.completion_tokens if usage else 0,
            model=model,
            metadata={
                "finish_reason": choice.finish_reason,
            }
        )
