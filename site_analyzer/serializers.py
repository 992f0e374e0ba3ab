# site_analyzer/serializers.py
from rest_framework import serializers

from .validators import INVALID_URL_MESSAGE


class AnalyzeRequestSerializer(serializers.Serializer):
    url = serializers.URLField(
        max_length=2048,
        error_messages={
            "required": "URL is required",
            "blank": INVALID_URL_MESSAGE,
            "null": INVALID_URL_MESSAGE,
            "invalid": INVALID_URL_MESSAGE,
        },
    )


def first_error_message(errors) -> str:
    """Dig the first human-readable message out of a DRF ``errors`` structure."""
    while isinstance(errors, (dict, list)):
        if not errors:
            return "Invalid request"
        errors = next(iter(errors.values())) if isinstance(errors, dict) else errors[0]
    return str(errors)
