from django.urls import path

from .views import (
    AnalyzeView,
    ReportDetailView,
    ReportExportView,
    WebsiteDetailView,
    WebsiteReportView,
)

app_name = "site_analyzer_api"


def _with_and_without_slash(route, view, name):
    # Clients call these without the trailing slash; APPEND_SLASH would 301 a POST
    return [
        path(f"{route}/", view, name=name),
        path(route, view),
    ]


urlpatterns = [
    *_with_and_without_slash("analyze", AnalyzeView.as_view(), "analyze"),
    *_with_and_without_slash("website/<int:website_id>", WebsiteDetailView.as_view(), "website_detail"),
    *_with_and_without_slash("website/<int:website_id>/report", WebsiteReportView.as_view(), "website_report"),
    *_with_and_without_slash("report/<int:report_id>", ReportDetailView.as_view(), "report_detail"),
    *_with_and_without_slash("report/<int:report_id>/export", ReportExportView.as_view(), "report_export"),
]
