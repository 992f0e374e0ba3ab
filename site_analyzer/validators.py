# site_analyzer/validators.py
import socket
import ipaddress
from urllib.parse import urlparse

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator

from .exceptions import FetchError

INVALID_URL_MESSAGE = "Please enter a valid URL"

# Soft blocklist for hosts we never fetch
BLOCKED_TLDS = (".local", ".internal", ".invalid")
BLOCKED_HOST_SUBSTRINGS = ("localhost",)

_url_validator = URLValidator(schemes=["http", "https"], message=INVALID_URL_MESSAGE)


def is_valid_url(raw) -> bool:
    """Syntax-only check: http(s) scheme, a host, nothing else."""
    if not raw or not isinstance(raw, str):
        return False
    try:
        _url_validator(raw.strip())
    except DjangoValidationError:
        return False
    return True


def _is_ip_private(ip: str) -> bool:
    try:
        ip_obj = ipaddress.ip_address(ip)
        return ip_obj.is_private or ip_obj.is_loopback or ip_obj.is_link_local or ip_obj.is_reserved or ip_obj.is_multicast
    except ValueError:
        return True  # unparseable counts as unsafe


def host_is_blocked(host: str) -> bool:
    host_l = host.lower()
    if any(b in host_l for b in BLOCKED_HOST_SUBSTRINGS):
        return True
    if any(host_l.endswith(tld) for tld in BLOCKED_TLDS):
        return True
    return False


def assert_public_host(url: str) -> None:
    """
    Resolve A/AAAA for the URL's host and make sure every address is public.
    Raises FetchError for blocked names, DNS failures and private addresses.
    """
    host = urlparse(url).hostname or ""
    if not host:
        raise FetchError("URL must include a host")
    if host_is_blocked(host):
        raise FetchError(f"Host {host} is blocked")

    try:
        infos = socket.getaddrinfo(host, None)
    except socket.gaierror as e:
        raise FetchError(f"DNS resolution failed for {host}: {e}") from e

    ips = []
    for family, _, _, _, sockaddr in infos:
        ip = sockaddr[0]
        ips.append(ip)
        if _is_ip_private(ip):
            raise FetchError(f"Blocked private/loopback IP {ip} for host {host}")
    if not ips:
        raise FetchError(f"No IPs resolved for {host}")
