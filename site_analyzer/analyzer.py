# site_analyzer/analyzer.py
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .exceptions import AnalysisError, AuthError, QuotaExceeded
from .fetcher import fetch_document
from .insights import InsightProvider, get_insight_client
from .parser import load_document
from .scoring import run_scorers

logger = logging.getLogger(__name__)

QUOTA_MESSAGE = "API quota exceeded. Please try again later."
AUTH_MESSAGE = "OpenAI API key configuration error. Please check your API settings."


@dataclass
class AnalysisResult:
    seo_score: int
    performance_score: int
    security_score: int
    accessibility_score: int
    sentiment_score: int
    details: Dict[str, Any] = field(default_factory=dict)

    def scores(self) -> Dict[str, int]:
        return {
            "seo": self.seo_score,
            "performance": self.performance_score,
            "security": self.security_score,
            "accessibility": self.accessibility_score,
            "sentiment": self.sentiment_score,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seoScore": self.seo_score,
            "performanceScore": self.performance_score,
            "securityScore": self.security_score,
            "accessibilityScore": self.accessibility_score,
            "sentimentScore": self.sentiment_score,
            "details": self.details,
        }


def clamp_score(value) -> int:
    """Integer score in [0, 100]; in-range integers pass through untouched."""
    if isinstance(value, int) and 0 <= value <= 100:
        return value
    return max(0, min(100, int(round(float(value)))))


def _run_insights(insights: InsightProvider, text: str, html: str):
    # The two calls share no data, so they go out together
    with ThreadPoolExecutor(max_workers=2) as pool:
        sentiment_future = pool.submit(insights.summarize_sentiment, text)
        seo_future = pool.submit(insights.suggest_seo, html)
        return sentiment_future.result(), seo_future.result()


def analyze_website(url: str, insights: Optional[InsightProvider] = None, fetcher=None) -> AnalysisResult:
    """
    fetch -> parse/validate -> heuristic scorers -> LLM insights -> result.

    Any failure aborts the run. Pipeline errors are re-raised as the same
    class with a message fit for the user.
    """
    insights = insights or get_insight_client()
    fetcher = fetcher or fetch_document

    try:
        fetched = fetcher(url)
        doc = load_document(fetched.text)
        scores = run_scorers(doc, fetched.headers)
        sentiment, seo_commentary = _run_insights(insights, doc.visible_text, fetched.text)
    except QuotaExceeded as e:
        raise QuotaExceeded(QUOTA_MESSAGE) from e
    except AuthError as e:
        raise AuthError(AUTH_MESSAGE) from e
    except AnalysisError as e:
        raise type(e)(f"Failed to analyze website: {e}") from e

    seo = scores["seo"]
    details = {
        "seo": {
            "issues": seo.issues + list(seo_commentary["issues"]),
            "suggestions": seo.suggestions + list(seo_commentary["suggestions"]),
        },
        "performance": scores["performance"].to_details(),
        "security": scores["security"].to_details(),
        "accessibility": scores["accessibility"].to_details(),
        "sentiment": sentiment,
    }
    result = AnalysisResult(
        seo_score=seo.score,
        performance_score=scores["performance"].score,
        security_score=scores["security"].score,
        accessibility_score=scores["accessibility"].score,
        sentiment_score=clamp_score(sentiment["score"]),
        details=details,
    )
    logger.info("Analysis of %s finished: %s", url, result.scores())
    return result
