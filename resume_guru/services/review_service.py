"""
AI resume review.

Sends the review prompt to the LLM provider and turns whatever comes back
into something displayable. Failures never propagate: they become a
ReviewFallback carrying a friendly message plus the reason, and only the
HTTP layer decides to show the message.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from resume_guru.core.config import Settings
from resume_guru.llm.provider import LLMProvider
from resume_guru.services.prompt_builder import build_review_prompt

logger = logging.getLogger(__name__)

FALLBACK_REVIEW_MESSAGE = (
    "I'm sorry, but I encountered an error while reviewing the resume. "
    "Please try again in a moment."
)

REVIEW_TEMPERATURE = 0.5
REVIEW_TOP_P = 0.9
REVIEW_MAX_TOKENS = 3000
MIN_REVIEW_LENGTH = 50


@dataclass(frozen=True)
class ReviewOk:
    text: str
    ok = True


@dataclass(frozen=True)
class ReviewFallback:
    text: str
    reason: str
    ok = False


ReviewResult = Union[ReviewOk, ReviewFallback]


def clean_ai_response(text: str) -> str:
    """Remove '---' separators and surrounding whitespace, keep other markdown."""
    return text.replace("---", "").strip()


class ReviewService:
    """Resume review through a single LLM chat completion."""

    def __init__(self, settings: Settings, provider: LLMProvider):
        self.provider = provider
        self.model = settings.llm_model

    def review(self, system_instructions: str, user_content: str) -> ReviewResult:
        """
        Request a review. Never raises.

        Returns:
            ReviewOk with cleaned text, or ReviewFallback with the apology
            message and the failure reason
        """
        try:
            response = self.provider.chat(
                messages=[
                    {"role": "system", "content": system_instructions},
                    {"role": "user", "content": user_content},
                ],
                model=self.model,
                temperature=REVIEW_TEMPERATURE,
                max_tokens=REVIEW_MAX_TOKENS,
                top_p=REVIEW_TOP_P,
            )
        except Exception as e:
            logger.error(f"AI call failed: {type(e).__name__}: {e}", exc_info=True)
            return ReviewFallback(FALLBACK_REVIEW_MESSAGE, reason=f"{type(e).__name__}: {e}")

        content = (response.content or "").strip()
        if len(content) < MIN_REVIEW_LENGTH:
            logger.error(f"AI response was empty or too short ({len(content)} chars)")
            return ReviewFallback(FALLBACK_REVIEW_MESSAGE, reason="AI response was empty or too short.")

        logger.info(
            f"AI review received: model={response.model}, "
            f"tokens_in={response.tokens_in}, tokens_out={response.tokens_out}"
        )
        return ReviewOk(clean_ai_response(content))

    def review_resume(self, resume: str, jd: Optional[str] = "") -> ReviewResult:
        """Build the prompt for a resume (and optional JD) and review it."""
        prompt = build_review_prompt(resume, jd)
        return self.review(prompt.system_instructions, prompt.user_content)
