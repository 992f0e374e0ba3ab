# site_analyzer/records.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from django.utils import timezone

PENDING = "pending"
COMPLETED = "completed"
FAILED = "failed"
WEBSITE_STATUSES = (PENDING, COMPLETED, FAILED)


@dataclass(frozen=True)
class WebsiteRecord:
    id: int
    url: str
    status: str = PENDING
    created_at: datetime = field(default_factory=timezone.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "status": self.status,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class ReportRecord:
    id: int
    website_id: int
    seo_score: int
    performance_score: int
    security_score: int
    accessibility_score: int
    sentiment_score: int
    details: Dict[str, Any]
    created_at: datetime = field(default_factory=timezone.now)

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
            "id": self.id,
            "websiteId": self.website_id,
            "seoScore": self.seo_score,
            "performanceScore": self.performance_score,
            "securityScore": self.security_score,
            "accessibilityScore": self.accessibility_score,
            "sentimentScore": self.sentiment_score,
            "details": self.details,
            "createdAt": self.created_at.isoformat(),
        }
