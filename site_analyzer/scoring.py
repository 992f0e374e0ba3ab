# site_analyzer/scoring.py
"""
Static HTML heuristics.

Every scorer starts at 100 and subtracts a fixed penalty per failed check;
the total is floored at 0. A failed check contributes exactly one issue and
one paired suggestion, no matter how many elements violate it.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from requests.structures import CaseInsensitiveDict

from .parser import ParsedDocument

MAX_SCRIPTS = 15
MAX_STYLESHEETS = 5
MAX_IMAGES = 20


@dataclass(frozen=True)
class Check:
    penalty: int
    issue: str
    suggestion: str
    failed: Callable[[ParsedDocument, CaseInsensitiveDict], bool]


@dataclass
class ScoreResult:
    score: int = 100
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def to_details(self) -> dict:
        return {"issues": list(self.issues), "suggestions": list(self.suggestions)}


def _missing_header(name):
    return lambda doc, headers: not headers.get(name)


SEO_CHECKS = (
    Check(10, "Missing title tag", "Add a descriptive, keyword-rich title tag",
          lambda doc, headers: not doc.exists("title")),
    Check(10, "Missing meta description", "Add a meta description summarizing the page",
          lambda doc, headers: not doc.exists('meta[name="description"]')),
    Check(5, "Missing H1 heading", "Add a single H1 heading describing the page topic",
          lambda doc, headers: not doc.exists("h1")),
    Check(5, "Images missing alt attributes", "Add alt attributes to all images",
          lambda doc, headers: doc.exists("img:not([alt])")),
)

PERFORMANCE_CHECKS = (
    Check(10, "High number of script tags detected", "Consider bundling JavaScript files",
          lambda doc, headers: doc.count("script") > MAX_SCRIPTS),
    Check(10, "Multiple external stylesheets found", "Combine CSS files to reduce HTTP requests",
          lambda doc, headers: doc.count('link[rel~="stylesheet"]') > MAX_STYLESHEETS),
    Check(10, "Large number of images may impact load time", "Implement lazy loading for images",
          lambda doc, headers: doc.count("img") > MAX_IMAGES),
)

SECURITY_CHECKS = (
    Check(20, "Missing Content Security Policy header", "Implement Content Security Policy",
          _missing_header("Content-Security-Policy")),
    Check(10, "Missing X-Frame-Options header", "Add X-Frame-Options header to prevent clickjacking",
          _missing_header("X-Frame-Options")),
    Check(10, "Missing X-XSS-Protection header", "Enable X-XSS-Protection header",
          _missing_header("X-XSS-Protection")),
)

ACCESSIBILITY_CHECKS = (
    Check(10, "Images missing alt text", "Add descriptive alt text to all images",
          lambda doc, headers: doc.exists("img:not([alt])")),
    Check(10, "Links missing aria labels", "Add aria labels to all navigation links",
          lambda doc, headers: doc.exists("a:not([aria-label])")),
    Check(10, "Language attribute missing on HTML tag", "Specify language in HTML tag",
          lambda doc, headers: not doc.exists("html[lang]")),
)


def _run_checks(checks, doc: ParsedDocument, headers=None) -> ScoreResult:
    headers = CaseInsensitiveDict(headers or {})
    result = ScoreResult()
    for check in checks:
        if check.failed(doc, headers):
            result.score -= check.penalty
            result.issues.append(check.issue)
            result.suggestions.append(check.suggestion)
    result.score = max(0, result.score)
    return result


def score_seo(doc: ParsedDocument, headers: Optional[dict] = None) -> ScoreResult:
    return _run_checks(SEO_CHECKS, doc, headers)


def score_performance(doc: ParsedDocument, headers: Optional[dict] = None) -> ScoreResult:
    return _run_checks(PERFORMANCE_CHECKS, doc, headers)


def score_security(doc: ParsedDocument, headers: Optional[dict] = None) -> ScoreResult:
    """Scores response headers only; the document is accepted for a uniform signature."""
    return _run_checks(SECURITY_CHECKS, doc, headers)


def score_accessibility(doc: ParsedDocument, headers: Optional[dict] = None) -> ScoreResult:
    return _run_checks(ACCESSIBILITY_CHECKS, doc, headers)


SCORERS = {
    "seo": score_seo,
    "performance": score_performance,
    "security": score_security,
    "accessibility": score_accessibility,
}


def run_scorers(doc: ParsedDocument, headers: Optional[dict] = None) -> Dict[str, ScoreResult]:
    return {name: scorer(doc, headers) for name, scorer in SCORERS.items()}
