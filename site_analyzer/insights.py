# site_analyzer/insights.py
"""
Language-model insight capability.

``InsightProvider`` is the seam the orchestrator depends on; the OpenAI
implementation below is the only production one. Tests hand the orchestrator
a deterministic fake instead.
"""
import json
import logging
import math
from abc import ABC, abstractmethod
from functools import lru_cache
from numbers import Number
from typing import Any, Dict

import openai

from .conf import get_setting
from .exceptions import AuthError, LLMCallError, LLMFormatError, QuotaExceeded
from .openai_client import get_openai_client

logger = logging.getLogger(__name__)

SENTIMENT_INSTRUCTIONS = (
    "You are a website content analyzer. Focus only on analyzing the sentiment and tone of the "
    "provided website content. Respond with a JSON object with exactly these keys: "
    '"score" (a number from 1 to 100), "tone" (a short description of the overall tone) and '
    '"suggestions" (an array of specific content improvement suggestions). '
    "Do not provide any other type of analysis."
)

SEO_INSTRUCTIONS = (
    "You are a website SEO analyzer. Focus exclusively on analyzing the website content for SEO "
    "issues and providing actionable suggestions. Only look for SEO-related aspects like meta tags, "
    "content structure, keywords, and HTML semantics. Do not provide any other type of analysis. "
    "Format the response as JSON with exactly two arrays: 'issues' for SEO problems found and "
    "'suggestions' for improvement recommendations."
)


class InsightProvider(ABC):
    @abstractmethod
    def summarize_sentiment(self, text: str) -> Dict[str, Any]:
        """Return ``{score, tone, suggestions}`` for the page's visible text."""

    @abstractmethod
    def suggest_seo(self, html: str) -> Dict[str, Any]:
        """Return ``{issues, suggestions}`` for the page's HTML."""


def parse_sentiment(payload: Dict[str, Any]) -> Dict[str, Any]:
    score = payload.get("score")
    tone = payload.get("tone")
    suggestions = payload.get("suggestions")
    if not score or not tone or not isinstance(suggestions, list):
        raise LLMFormatError("Invalid response format from OpenAI")
    if isinstance(score, bool) or not isinstance(score, Number):
        raise LLMFormatError("Invalid response format from OpenAI: score is not a number")
    if not math.isfinite(score):
        raise LLMFormatError("Invalid response format from OpenAI: score is not finite")
    return {"score": score, "tone": tone, "suggestions": suggestions}


def parse_seo(payload: Dict[str, Any]) -> Dict[str, Any]:
    issues = payload.get("issues")
    suggestions = payload.get("suggestions")
    if not isinstance(issues, list) or not isinstance(suggestions, list):
        raise LLMFormatError("Invalid response format from OpenAI")
    return {"issues": issues, "suggestions": suggestions}


def _is_quota_error(exc: Exception) -> bool:
    if isinstance(exc, openai.RateLimitError):
        return True
    if getattr(exc, "status_code", None) == 429:
        return True
    return "quota" in str(exc).lower()


class OpenAIInsightClient(InsightProvider):
    def __init__(self, client=None, model=None, max_chars=None):
        self._client = client
        self.model = model or get_setting("SITE_ANALYZER_OPENAI_MODEL")
        self.max_chars = max_chars or int(get_setting("SITE_ANALYZER_MAX_CONTENT_CHARS"))

    @property
    def client(self):
        if self._client is None:
            self._client = get_openai_client()
        return self._client

    def _complete_json(self, label: str, instructions: str, content: str) -> Dict[str, Any]:
        logger.info("Starting %s analysis (%d chars)", label, len(content))
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": instructions},
                    {"role": "user", "content": content[: self.max_chars]},
                ],
                response_format={"type": "json_object"},
            )
        except openai.AuthenticationError as e:
            logger.error("OpenAI rejected the API key during %s analysis: %s", label, e)
            raise AuthError(f"Invalid OpenAI API key: {e}") from e
        except openai.APITimeoutError as e:
            logger.error("OpenAI timed out during %s analysis", label)
            raise LLMCallError(f"Failed to get {label} analysis: request timed out") from e
        except openai.OpenAIError as e:
            if _is_quota_error(e):
                logger.error("OpenAI quota exceeded during %s analysis: %s", label, e)
                raise QuotaExceeded(
                    "OpenAI API quota exceeded. Please try again later or check your API key limits."
                ) from e
            logger.error("OpenAI API error during %s analysis: %s", label, e)
            raise LLMCallError(f"Failed to get {label} analysis: {e}") from e

        raw = (response.choices[0].message.content or "").strip() if response.choices else ""
        if not raw:
            raise LLMFormatError("No response content received from OpenAI")
        logger.debug("OpenAI %s response: %s", label, raw)

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise LLMFormatError(f"OpenAI returned invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise LLMFormatError("Invalid response format from OpenAI")
        return payload

    def summarize_sentiment(self, text: str) -> Dict[str, Any]:
        return parse_sentiment(self._complete_json("sentiment", SENTIMENT_INSTRUCTIONS, text))

    def suggest_seo(self, html: str) -> Dict[str, Any]:
        return parse_seo(self._complete_json("SEO", SEO_INSTRUCTIONS, html))


@lru_cache(maxsize=1)
def get_insight_client() -> InsightProvider:
    return OpenAIInsightClient()
