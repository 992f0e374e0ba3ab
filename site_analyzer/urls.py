from django.urls import path

from . import pages

app_name = "site_analyzer"

urlpatterns = [
    path("", pages.home, name="home"),
    path("websites/<int:website_id>/", pages.dashboard, name="dashboard"),
    path("reports/<int:report_id>/", pages.report_page, name="report_page"),
]
