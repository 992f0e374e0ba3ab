# site_analyzer/middleware.py
from django.conf import settings
from django.utils.deprecation import MiddlewareMixin

DEFAULT_CONTENT_SECURITY_POLICY = "default-src 'self'; frame-ancestors 'none'"


class SecurityHeadersMiddleware(MiddlewareMixin):
    """
    Serve our own pages with the headers the security scorer grades sites on.
    Headers a view already set are left alone.
    """

    def process_response(self, request, response):
        csp = getattr(settings, "SITE_ANALYZER_CONTENT_SECURITY_POLICY", DEFAULT_CONTENT_SECURITY_POLICY)
        response.setdefault("Content-Security-Policy", csp)
        response.setdefault("X-Frame-Options", "DENY")
        response.setdefault("X-XSS-Protection", "1; mode=block")
        return response
