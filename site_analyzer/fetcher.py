# site_analyzer/fetcher.py
import logging
from dataclasses import dataclass, field
from urllib.parse import urljoin

import requests
from requests.structures import CaseInsensitiveDict

from .conf import get_setting
from .exceptions import FetchError
from .validators import assert_public_host

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0.0.0 Safari/537.36 SiteInsightBot/1.0"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Cache-Control": "no-cache",
}

REDIRECT_STATUSES = (301, 302, 303, 307, 308)
MAX_REDIRECTS = 10


@dataclass
class FetchedDocument:
    url: str
    final_url: str
    status: int
    text: str
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)


def _redirect_target(resp, current_url):
    if resp.status_code not in REDIRECT_STATUSES:
        return None
    location = CaseInsensitiveDict(resp.headers).get("Location")
    if not location:
        return None
    return urljoin(current_url, location)


def fetch_document(url: str, timeout=None) -> FetchedDocument:
    """
    GET for the page body and response headers.
    - Browser-like headers
    - Redirects followed one hop at a time, each target host checked again
    - Bounded timeout per request (SITE_ANALYZER_FETCH_TIMEOUT)
    - No retries: transport errors and non-2xx responses raise FetchError
    """
    if timeout is None:
        timeout = get_setting("SITE_ANALYZER_FETCH_TIMEOUT")
    block_private = get_setting("SITE_ANALYZER_BLOCK_PRIVATE_HOSTS")

    current = url
    for _hop in range(MAX_REDIRECTS + 1):
        if block_private:
            assert_public_host(current)

        logger.info("Fetching %s", current)
        try:
            resp = requests.get(current, headers=DEFAULT_HEADERS, timeout=timeout, allow_redirects=False)
        except requests.Timeout as e:
            logger.warning("Fetch timed out after %ss: %s", timeout, current)
            raise FetchError(f"Timed out fetching {current} after {timeout}s") from e
        except requests.RequestException as e:
            logger.warning("Fetch failed for %s: %s", current, e)
            raise FetchError(str(e)) from e

        target = _redirect_target(resp, current)
        if target is None:
            break
        logger.debug("Redirect %s -> %s", current, target)
        current = target
    else:
        raise FetchError(f"Too many redirects fetching {url}")

    if not 200 <= resp.status_code < 300:
        logger.warning("Fetch returned HTTP %s for %s", resp.status_code, current)
        raise FetchError(f"HTTP {resp.status_code} {resp.reason or ''}".rstrip())

    return FetchedDocument(
        url=url,
        final_url=resp.url,
        status=resp.status_code,
        text=resp.text,
        headers=CaseInsensitiveDict(resp.headers),
    )
