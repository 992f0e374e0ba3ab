import threading

import pytest
from django.test import TestCase, override_settings

from site_analyzer.exceptions import NotFoundError
from site_analyzer.records import COMPLETED, FAILED, PENDING
from site_analyzer.storage import DatabaseStorage, MemStorage, get_storage

SCORES = dict(
    seo_score=75,
    performance_score=100,
    security_score=60,
    accessibility_score=90,
    sentiment_score=82,
    details={"seo": {"issues": [], "suggestions": []}},
)


class StorageContract:
    """Behaviour every Storage backend must share."""

    def make_storage(self):
        raise NotImplementedError

    def setUp(self):
        self.storage = self.make_storage()

    def test_create_website_is_pending(self):
        website = self.storage.create_website("https://example.com")
        self.assertEqual(website.status, PENDING)
        self.assertEqual(website.url, "https://example.com")
        self.assertEqual(self.storage.get_website(website.id), website)

    def test_ids_increase(self):
        first = self.storage.create_website("https://a.example")
        second = self.storage.create_website("https://b.example")
        self.assertGreater(second.id, first.id)

    def test_update_status(self):
        website = self.storage.create_website("https://example.com")
        updated = self.storage.update_website_status(website.id, COMPLETED)
        self.assertEqual(updated.status, COMPLETED)
        self.assertEqual(self.storage.get_website(website.id).status, COMPLETED)

    def test_update_unknown_website(self):
        with self.assertRaises(NotFoundError):
            self.storage.update_website_status(9999, FAILED)

    def test_update_rejects_unknown_status(self):
        website = self.storage.create_website("https://example.com")
        with self.assertRaises(ValueError):
            self.storage.update_website_status(website.id, "done")

    def test_missing_records_are_none(self):
        self.assertIsNone(self.storage.get_website(9999))
        self.assertIsNone(self.storage.get_report(9999))
        self.assertIsNone(self.storage.get_website_report(9999))

    def test_report_round_trip_and_lookup_by_website(self):
        website = self.storage.create_website("https://example.com")
        report = self.storage.create_report(website_id=website.id, **SCORES)
        self.assertEqual(report.website_id, website.id)
        self.assertEqual(self.storage.get_report(report.id), report)
        self.assertEqual(self.storage.get_website_report(website.id), report)
        self.assertEqual(report.to_dict()["seoScore"], 75)

    def test_report_needs_existing_website(self):
        with self.assertRaises(NotFoundError):
            self.storage.create_report(website_id=9999, **SCORES)

    def test_first_report_wins_for_a_website(self):
        website = self.storage.create_website("https://example.com")
        first = self.storage.create_report(website_id=website.id, **SCORES)
        self.storage.create_report(website_id=website.id, **SCORES)
        self.assertEqual(self.storage.get_website_report(website.id).id, first.id)


class MemStorageTests(StorageContract, TestCase):
    def make_storage(self):
        return MemStorage()

    def test_ids_start_at_one_per_entity(self):
        website = self.storage.create_website("https://example.com")
        report = self.storage.create_report(website_id=website.id, **SCORES)
        self.assertEqual((website.id, report.id), (1, 1))
        self.assertEqual(self.storage.create_website("https://x.example").id, 2)

    def test_concurrent_creates_get_unique_ids(self):
        ids = []
        lock = threading.Lock()

        def worker():
            for _ in range(50):
                website = self.storage.create_website("https://example.com")
                with lock:
                    ids.append(website.id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(sorted(ids), list(range(1, 401)))


class DatabaseStorageTests(StorageContract, TestCase):
    def make_storage(self):
        return DatabaseStorage()

    def test_rows_are_written(self):
        from site_analyzer.models import Report, Website

        website = self.storage.create_website("https://example.com")
        self.storage.create_report(website_id=website.id, **SCORES)
        self.assertEqual(Website.objects.count(), 1)
        self.assertEqual(Report.objects.get().details, SCORES["details"])


@pytest.mark.parametrize("backend,cls", [("memory", MemStorage), ("database", DatabaseStorage)])
def test_get_storage_selects_backend(backend, cls):
    get_storage.cache_clear()
    try:
        with override_settings(SITE_ANALYZER_STORAGE=backend):
            assert isinstance(get_storage(), cls)
    finally:
        get_storage.cache_clear()


def test_get_storage_rejects_unknown_backend():
    get_storage.cache_clear()
    try:
        with override_settings(SITE_ANALYZER_STORAGE="redis"):
            with pytest.raises(ValueError, match="redis"):
                get_storage()
    finally:
        get_storage.cache_clear()
