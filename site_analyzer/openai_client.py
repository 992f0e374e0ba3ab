# site_analyzer/openai_client.py
import os
from functools import lru_cache

from django.conf import settings
from openai import OpenAI

from .conf import get_setting
from .exceptions import AuthError


@lru_cache
def get_openai_client():
    api_key = os.getenv("OPENAI_API_KEY") or getattr(settings, "OPENAI_API_KEY", None)
    if not api_key:
        # Raised on first use, not at startup
        raise AuthError("OPENAI_API_KEY is missing")
    return OpenAI(
        api_key=api_key,
        timeout=float(get_setting("SITE_ANALYZER_LLM_TIMEOUT")),
        max_retries=0,
    )
