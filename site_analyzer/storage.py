# site_analyzer/storage.py
"""
Persistence capability for Website and Report records.

Callers only see ``Storage``; ``MemStorage`` backs the default deployment and
the tests, ``DatabaseStorage`` keeps the same contract on the Django ORM.
There is no transaction spanning a Website and its Report: the submission
service sequences the writes and rolls the status to ``failed`` itself.
"""
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import replace
from functools import lru_cache
from typing import Any, Dict, Optional

from django.db import transaction

from .conf import get_setting
from .exceptions import NotFoundError
from .records import PENDING, WEBSITE_STATUSES, ReportRecord, WebsiteRecord

logger = logging.getLogger(__name__)


def _check_status(status: str) -> None:
    if status not in WEBSITE_STATUSES:
        raise ValueError(f"Invalid website status: {status!r}")


class Storage(ABC):
    @abstractmethod
    def create_website(self, url: str) -> WebsiteRecord: ...

    @abstractmethod
    def get_website(self, website_id: int) -> Optional[WebsiteRecord]: ...

    @abstractmethod
    def update_website_status(self, website_id: int, status: str) -> WebsiteRecord: ...

    @abstractmethod
    def create_report(
        self,
        website_id: int,
        seo_score: int,
        performance_score: int,
        security_score: int,
        accessibility_score: int,
        sentiment_score: int,
        details: Dict[str, Any],
    ) -> ReportRecord: ...

    @abstractmethod
    def get_report(self, report_id: int) -> Optional[ReportRecord]: ...

    @abstractmethod
    def get_website_report(self, website_id: int) -> Optional[ReportRecord]: ...


class MemStorage(Storage):
    """In-process maps with one monotonic id counter per entity type."""

    def __init__(self):
        self._websites: Dict[int, WebsiteRecord] = {}
        self._reports: Dict[int, ReportRecord] = {}
        self._next_website_id = 1
        self._next_report_id = 1
        self._lock = threading.Lock()

    def create_website(self, url):
        with self._lock:
            website = WebsiteRecord(id=self._next_website_id, url=url, status=PENDING)
            self._next_website_id += 1
            self._websites[website.id] = website
        return website

    def get_website(self, website_id):
        return self._websites.get(website_id)

    def update_website_status(self, website_id, status):
        _check_status(status)
        with self._lock:
            website = self._websites.get(website_id)
            if website is None:
                raise NotFoundError("Website not found")
            website = replace(website, status=status)
            self._websites[website_id] = website
        return website

    def create_report(self, website_id, seo_score, performance_score, security_score,
                      accessibility_score, sentiment_score, details):
        with self._lock:
            if website_id not in self._websites:
                raise NotFoundError("Website not found")
            report = ReportRecord(
                id=self._next_report_id,
                website_id=website_id,
                seo_score=seo_score,
                performance_score=performance_score,
                security_score=security_score,
                accessibility_score=accessibility_score,
                sentiment_score=sentiment_score,
                details=details,
            )
            self._next_report_id += 1
            self._reports[report.id] = report
        return report

    def get_report(self, report_id):
        return self._reports.get(report_id)

    def get_website_report(self, website_id):
        # dicts keep insertion order, so the lowest id wins
        for report in list(self._reports.values()):
            if report.website_id == website_id:
                return report
        return None


class DatabaseStorage(Storage):
    """Same contract on the ``Website``/``Report`` models."""

    def create_website(self, url):
        from .models import Website

        return Website.objects.create(url=url, status=PENDING).to_record()

    def get_website(self, website_id):
        from .models import Website

        website = Website.objects.filter(pk=website_id).first()
        return website.to_record() if website else None

    @transaction.atomic
    def update_website_status(self, website_id, status):
        from .models import Website

        _check_status(status)
        website = Website.objects.select_for_update().filter(pk=website_id).first()
        if website is None:
            raise NotFoundError("Website not found")
        website.status = status
        website.save(update_fields=["status"])
        return website.to_record()

    def create_report(self, website_id, seo_score, performance_score, security_score,
                      accessibility_score, sentiment_score, details):
        from .models import Report, Website

        if not Website.objects.filter(pk=website_id).exists():
            raise NotFoundError("Website not found")
        report = Report.objects.create(
            website_id=website_id,
            seo_score=seo_score,
            performance_score=performance_score,
            security_score=security_score,
            accessibility_score=accessibility_score,
            sentiment_score=sentiment_score,
            details=details,
        )
        return report.to_record()

    def get_report(self, report_id):
        from .models import Report

        report = Report.objects.filter(pk=report_id).first()
        return report.to_record() if report else None

    def get_website_report(self, website_id):
        from .models import Report

        report = Report.objects.filter(website_id=website_id).order_by("id").first()
        return report.to_record() if report else None


BACKENDS = {
    "memory": MemStorage,
    "database": DatabaseStorage,
}


@lru_cache(maxsize=1)
def get_storage() -> Storage:
    backend = get_setting("SITE_ANALYZER_STORAGE")
    try:
        storage_cls = BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown SITE_ANALYZER_STORAGE backend: {backend!r}") from None
    logger.info("Using %s storage backend", backend)
    return storage_cls()
