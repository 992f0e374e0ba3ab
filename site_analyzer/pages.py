# site_analyzer/pages.py
import logging

from django.http import Http404
from django.shortcuts import redirect, render

from .exceptions import AnalysisError
from .forms import URLScanForm
from .insights import get_insight_client
from .records import PENDING
from .services import submit_analysis
from .storage import get_storage
from .views import analysis_failure_message

logger = logging.getLogger(__name__)

CATEGORY_LABELS = [
    ("seo", "SEO"),
    ("performance", "Performance"),
    ("security", "Security"),
    ("accessibility", "Accessibility"),
]


def home(request):
    error = None
    if request.method == "POST":
        form = URLScanForm(request.POST)
        if form.is_valid():
            url = form.cleaned_data["url"]
            try:
                website, _report = submit_analysis(url, get_storage(), insights=get_insight_client())
            except AnalysisError as e:
                error = analysis_failure_message(e)
            except Exception as e:
                logger.exception("Unexpected error while analyzing %s", url)
                error = analysis_failure_message(e)
            else:
                return redirect("site_analyzer:dashboard", website_id=website.id)
    else:
        form = URLScanForm()

    return render(request, "site_analyzer/home.html", {"form": form, "error": error})


def dashboard(request, website_id):
    storage = get_storage()
    website = storage.get_website(website_id)
    if website is None:
        raise Http404("Website not found")
    report = storage.get_website_report(website_id)
    return render(request, "site_analyzer/dashboard.html", {
        "website": website,
        "report": report,
        "auto_refresh": website.status == PENDING,
    })


def report_page(request, report_id):
    storage = get_storage()
    report = storage.get_report(report_id)
    if report is None:
        raise Http404("Report not found")
    website = storage.get_website(report.website_id)
    scores = report.scores()
    categories = [
        {
            "key": key,
            "label": label,
            "score": scores[key],
            "issues": report.details.get(key, {}).get("issues", []),
            "suggestions": report.details.get(key, {}).get("suggestions", []),
        }
        for key, label in CATEGORY_LABELS
    ]
    return render(request, "site_analyzer/report.html", {
        "website": website,
        "report": report,
        "categories": categories,
        "sentiment": report.details.get("sentiment", {}),
    })
