# site_analyzer/services.py
import logging
from typing import Optional, Tuple

from .analyzer import analyze_website
from .insights import InsightProvider
from .records import COMPLETED, FAILED, ReportRecord, WebsiteRecord
from .storage import Storage

logger = logging.getLogger(__name__)


def submit_analysis(
    url: str,
    storage: Storage,
    insights: Optional[InsightProvider] = None,
) -> Tuple[WebsiteRecord, ReportRecord]:
    """
    Create the Website, analyze it, then persist the Report and mark it
    completed. Any failure marks the Website failed and re-raises; a Report is
    only written once the whole analysis has succeeded.
    """
    website = storage.create_website(url)
    logger.info("Website %s created for %s", website.id, url)
    try:
        result = analyze_website(url, insights=insights)
        report = storage.create_report(
            website_id=website.id,
            seo_score=result.seo_score,
            performance_score=result.performance_score,
            security_score=result.security_score,
            accessibility_score=result.accessibility_score,
            sentiment_score=result.sentiment_score,
            details=result.details,
        )
        website = storage.update_website_status(website.id, COMPLETED)
    except Exception as e:
        storage.update_website_status(website.id, FAILED)
        logger.warning("Analysis of website %s failed: %s", website.id, e)
        raise

    logger.info("Website %s completed with report %s", website.id, report.id)
    return website, report
