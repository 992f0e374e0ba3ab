import json

from django.core.management.base import BaseCommand, CommandError, CommandParser

from site_analyzer.analyzer import analyze_website
from site_analyzer.exceptions import AnalysisError
from site_analyzer.services import submit_analysis
from site_analyzer.storage import get_storage
from site_analyzer.validators import INVALID_URL_MESSAGE, is_valid_url


class Command(BaseCommand):
    help = "Analyze a website and print the scores and details as JSON."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("url", help="Full URL of the page to analyze, including http(s)://")
        parser.add_argument(
            "--save",
            action="store_true",
            help="Persist the Website and Report in the configured store and print their ids.",
        )

    def handle(self, *args, **options):
        url = options["url"].strip()
        if not is_valid_url(url):
            raise CommandError(INVALID_URL_MESSAGE)

        try:
            if options["save"]:
                website, report = submit_analysis(url, get_storage())
                payload = {"websiteId": website.id, "reportId": report.id}
            else:
                payload = analyze_website(url).to_dict()
        except AnalysisError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(json.dumps(payload, indent=2))
