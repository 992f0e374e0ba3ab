from django import forms

from .validators import INVALID_URL_MESSAGE


class URLScanForm(forms.Form):
    url = forms.URLField(
        label='',
        max_length=2048,
        assume_scheme="https",
        error_messages={"invalid": INVALID_URL_MESSAGE, "required": "URL is required"},
        widget=forms.URLInput(attrs={
            "placeholder": "https://example.com",
            "class": "sa-input",
            "autocomplete": "off",
            "inputmode": "url",
            "aria-label": "Website URL",
        })
    )
