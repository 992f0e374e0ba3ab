from unittest.mock import patch

from django.test import Client, TestCase

from site_analyzer.exceptions import FetchError
from site_analyzer.storage import get_storage

from .fakes import BARE_HTML, FakeInsights, fetcher_for


class PageTests(TestCase):
    def setUp(self):
        get_storage.cache_clear()
        self.addCleanup(get_storage.cache_clear)
        self.storage = get_storage()
        self.client = Client()
        fetch = patch("site_analyzer.analyzer.fetch_document", side_effect=fetcher_for(BARE_HTML))
        insights = patch("site_analyzer.pages.get_insight_client", return_value=FakeInsights())
        self.fetch = fetch.start()
        insights.start()
        self.addCleanup(fetch.stop)
        self.addCleanup(insights.stop)

    def test_home_renders_form(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, 'name="url"')

    def test_submit_redirects_to_dashboard(self):
        r = self.client.post("/", {"url": "https://example.com"})
        self.assertRedirects(r, "/websites/1/")

        r = self.client.get("/websites/1/")
        self.assertContains(r, "completed")
        self.assertContains(r, "/reports/1/")
        self.assertContains(r, "/api/report/1/export/")
        self.assertNotContains(r, 'http-equiv="refresh"')

    def test_invalid_url_shows_error(self):
        r = self.client.post("/", {"url": "not a url"})
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, "Please enter a valid URL")
        self.assertIsNone(self.storage.get_website(1))

    def test_failed_analysis_shows_message(self):
        self.fetch.side_effect = FetchError("HTTP 404 Not Found")
        r = self.client.post("/", {"url": "https://example.com"})
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, "Failed to analyze website: HTTP 404 Not Found")
        self.assertEqual(self.storage.get_website(1).status, "failed")

    def test_pending_dashboard_refreshes(self):
        website = self.storage.create_website("https://example.com")
        r = self.client.get(f"/websites/{website.id}/")
        self.assertContains(r, 'http-equiv="refresh"')
        self.assertContains(r, "pending")

    def test_report_page_lists_categories(self):
        self.client.post("/", {"url": "https://example.com"})
        r = self.client.get("/reports/1/")
        self.assertEqual(r.status_code, 200)
        for text in ("SEO", "Performance", "Security", "Accessibility", "Sentiment",
                     "Missing title tag", "Missing X-Frame-Options header", "Friendly and confident"):
            self.assertContains(r, text)

    def test_unknown_pages_are_404(self):
        self.assertEqual(self.client.get("/websites/42/").status_code, 404)
        self.assertEqual(self.client.get("/reports/42/").status_code, 404)

    def test_own_responses_carry_security_headers(self):
        r = self.client.get("/")
        self.assertTrue(r["Content-Security-Policy"])
        self.assertEqual(r["X-Frame-Options"], "DENY")
        self.assertEqual(r["X-XSS-Protection"], "1; mode=block")
