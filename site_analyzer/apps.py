# site_analyzer/apps.py
from django.apps import AppConfig


class SiteAnalyzerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "site_analyzer"
    verbose_name = "Site Analyzer"
