# siteinsight/urls.py
from django.urls import include, path

urlpatterns = [
    path("api/", include("site_analyzer.api_urls")),
    path("", include("site_analyzer.urls")),
]
