# site_analyzer/views.py
import logging

from django.http import JsonResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView, exception_handler

from .exceptions import AnalysisError
from .insights import get_insight_client
from .serializers import AnalyzeRequestSerializer, first_error_message
from .services import submit_analysis
from .storage import get_storage

logger = logging.getLogger(__name__)


def _message(text, code):
    return Response({"message": text}, status=code)


def analysis_failure_message(exc: Exception) -> str:
    if isinstance(exc, AnalysisError):
        return str(exc)
    return f"Failed to analyze website: {exc}"


def message_exception_handler(exc, context):
    """DRF errors (bad JSON, unsupported media type, wrong method) in the {message} shape."""
    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"message": first_error_message(getattr(exc, "detail", str(exc)))}
    return response


class AnalyzeView(APIView):
    """
    POST /api/analyze/  {"url": "..."}
    Runs the full analysis synchronously and returns the new ids.
    """
    def post(self, request, *args, **kwargs):
        serializer = AnalyzeRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return _message(first_error_message(serializer.errors), status.HTTP_400_BAD_REQUEST)

        url = serializer.validated_data["url"]
        try:
            website, report = submit_analysis(url, get_storage(), insights=get_insight_client())
        except AnalysisError as e:
            return _message(analysis_failure_message(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        except Exception as e:
            logger.exception("Unexpected error while analyzing %s", url)
            return _message(analysis_failure_message(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"websiteId": website.id, "reportId": report.id})


class WebsiteDetailView(APIView):
    def get(self, request, website_id, *args, **kwargs):
        website = get_storage().get_website(website_id)
        if website is None:
            return _message("Website not found", status.HTTP_404_NOT_FOUND)
        return Response(website.to_dict())


class ReportDetailView(APIView):
    def get(self, request, report_id, *args, **kwargs):
        report = get_storage().get_report(report_id)
        if report is None:
            return _message("Report not found", status.HTTP_404_NOT_FOUND)
        return Response(report.to_dict())


class WebsiteReportView(APIView):
    """GET /api/website/<id>/report/: the report produced for a website, if any."""
    def get(self, request, website_id, *args, **kwargs):
        storage = get_storage()
        if storage.get_website(website_id) is None:
            return _message("Website not found", status.HTTP_404_NOT_FOUND)
        report = storage.get_website_report(website_id)
        if report is None:
            return _message("Report not found", status.HTTP_404_NOT_FOUND)
        return Response(report.to_dict())


class ReportExportView(APIView):
    """GET /api/report/<id>/export/: downloadable JSON snapshot of a report."""
    def get(self, request, report_id, *args, **kwargs):
        storage = get_storage()
        report = storage.get_report(report_id)
        if report is None:
            return _message("Report not found", status.HTTP_404_NOT_FOUND)
        website = storage.get_website(report.website_id)

        response = JsonResponse(
            {
                "url": website.url if website else None,
                "generatedAt": timezone.now().isoformat(),
                "scores": report.scores(),
                "details": report.details,
            },
            json_dumps_params={"indent": 2},
        )
        response["Content-Disposition"] = f'attachment; filename="website-analysis-{report.id}.json"'
        return response
