# site_analyzer/conf.py
"""
App-level defaults. Every value can be overridden in Django settings under the
same name; ``get_setting`` resolves the override first.
"""
from django.conf import settings

DEFAULTS = {
    "SITE_ANALYZER_OPENAI_MODEL": "gpt-4o",
    "SITE_ANALYZER_FETCH_TIMEOUT": 15,
    "SITE_ANALYZER_LLM_TIMEOUT": 30,
    "SITE_ANALYZER_MAX_CONTENT_CHARS": 50000,
    "SITE_ANALYZER_STORAGE": "memory",
    "SITE_ANALYZER_BLOCK_PRIVATE_HOSTS": True,
}


def get_setting(name):
    if name not in DEFAULTS:
        raise KeyError(f"Unknown site_analyzer setting: {name}")
    return getattr(settings, name, DEFAULTS[name])
