# site_analyzer/exceptions.py
"""
Error taxonomy for the analysis pipeline.

Everything raised while analyzing a page derives from ``AnalysisError`` so the
API boundary can turn it into a user-facing message. ``NotFoundError`` is for
store lookups and sits outside the pipeline hierarchy.
"""


class AnalysisError(Exception):
    """Base class for failures that abort an analysis."""


class FetchError(AnalysisError):
    """Transport failure, timeout, refused host or non-2xx response."""


class ValidationError(AnalysisError):
    """The fetched document has no body or no visible text."""


class LLMCallError(AnalysisError):
    """The language model call failed."""


class QuotaExceeded(LLMCallError):
    pass


class AuthError(LLMCallError):
    pass


class LLMFormatError(LLMCallError):
    """The model replied with missing or malformed JSON."""


class NotFoundError(LookupError):
    pass
