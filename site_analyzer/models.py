# site_analyzer/models.py
from django.db import models

from .records import COMPLETED, FAILED, PENDING, ReportRecord, WebsiteRecord


class Website(models.Model):
    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (COMPLETED, "Completed"),
        (FAILED, "Failed"),
    ]

    url = models.URLField(max_length=2048)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=PENDING, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "site_analyzer_websites"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.url} ({self.status})"

    def to_record(self) -> WebsiteRecord:
        return WebsiteRecord(id=self.id, url=self.url, status=self.status, created_at=self.created_at)


class Report(models.Model):
    website = models.ForeignKey(Website, on_delete=models.PROTECT, related_name="reports")
    seo_score = models.PositiveSmallIntegerField()
    performance_score = models.PositiveSmallIntegerField()
    security_score = models.PositiveSmallIntegerField()
    accessibility_score = models.PositiveSmallIntegerField()
    sentiment_score = models.PositiveSmallIntegerField()
    details = models.JSONField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "site_analyzer_reports"
        ordering = ["id"]

    def __str__(self):
        return f"Report {self.id} for website {self.website_id}"

    def to_record(self) -> ReportRecord:
        return ReportRecord(
            id=self.id,
            website_id=self.website_id,
            seo_score=self.seo_score,
            performance_score=self.performance_score,
            security_score=self.security_score,
            accessibility_score=self.accessibility_score,
            sentiment_score=self.sentiment_score,
            details=self.details,
            created_at=self.created_at,
        )
