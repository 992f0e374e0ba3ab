from unittest.mock import Mock, patch

import pytest
import requests
from django.test import override_settings

from site_analyzer.exceptions import FetchError
from site_analyzer.fetcher import DEFAULT_HEADERS, MAX_REDIRECTS, fetch_document


def _response(status=200, text="<html><body>ok</body></html>", headers=None, reason="OK", url="https://example.com/"):
    resp = Mock()
    resp.status_code = status
    resp.reason = reason
    resp.text = text
    resp.url = url
    resp.headers = headers or {"Content-Type": "text/html", "X-Frame-Options": "DENY"}
    return resp


@patch("site_analyzer.fetcher.requests.get")
def test_fetch_returns_body_and_headers(mock_get):
    mock_get.return_value = _response()

    doc = fetch_document("https://example.com", timeout=5)

    mock_get.assert_called_once_with(
        "https://example.com", headers=DEFAULT_HEADERS, timeout=5, allow_redirects=False
    )
    assert doc.status == 200
    assert doc.final_url == "https://example.com/"
    assert doc.text.startswith("<html>")
    assert doc.headers["x-frame-options"] == "DENY"


@override_settings(SITE_ANALYZER_FETCH_TIMEOUT=7)
@patch("site_analyzer.fetcher.requests.get")
def test_fetch_uses_configured_timeout(mock_get):
    mock_get.return_value = _response()
    fetch_document("https://example.com")
    assert mock_get.call_args.kwargs["timeout"] == 7


@pytest.mark.parametrize("status", [301, 404, 500, 503])
@patch("site_analyzer.fetcher.requests.get")
def test_non_success_status_raises(mock_get, status):
    mock_get.return_value = _response(status=status, reason="Nope")
    with pytest.raises(FetchError, match=f"HTTP {status}"):
        fetch_document("https://example.com")
    assert mock_get.call_count == 1


@patch("site_analyzer.fetcher.requests.get", side_effect=requests.Timeout("slow"))
def test_timeout_is_a_fetch_error(mock_get):
    with pytest.raises(FetchError, match="Timed out"):
        fetch_document("https://example.com", timeout=1)
    assert mock_get.call_count == 1


@patch("site_analyzer.fetcher.requests.get", side_effect=requests.ConnectionError("refused"))
def test_transport_error_is_a_fetch_error(mock_get):
    with pytest.raises(FetchError, match="refused"):
        fetch_document("https://example.com")


@override_settings(SITE_ANALYZER_BLOCK_PRIVATE_HOSTS=True)
@patch("site_analyzer.fetcher.requests.get")
def test_private_hosts_are_refused_before_any_request(mock_get):
    with pytest.raises(FetchError, match="blocked"):
        fetch_document("http://localhost:8000/admin")
    mock_get.assert_not_called()


def _redirect(location, status=302):
    return _response(status=status, text="", headers={"Location": location}, reason="Found")


def _resolver(addresses):
    def getaddrinfo(host, port, *args, **kwargs):
        return [(2, 1, 6, "", (addresses[host], 0))]
    return getaddrinfo


@patch("site_analyzer.fetcher.requests.get")
def test_redirects_are_followed_hop_by_hop(mock_get):
    mock_get.side_effect = [
        _redirect("/welcome", status=301),
        _response(url="https://example.com/welcome"),
    ]

    doc = fetch_document("https://example.com")

    called = [c.args[0] for c in mock_get.call_args_list]
    assert called == ["https://example.com", "https://example.com/welcome"]
    assert all(c.kwargs["allow_redirects"] is False for c in mock_get.call_args_list)
    assert doc.url == "https://example.com"
    assert doc.final_url == "https://example.com/welcome"
    assert doc.status == 200


@override_settings(SITE_ANALYZER_BLOCK_PRIVATE_HOSTS=True)
@patch("site_analyzer.validators.socket.getaddrinfo",
       side_effect=_resolver({"example.com": "93.184.216.34", "169.254.169.254": "169.254.169.254"}))
@patch("site_analyzer.fetcher.requests.get")
def test_redirect_to_private_address_is_refused(mock_get, _dns):
    mock_get.return_value = _redirect("http://169.254.169.254/latest/meta-data/")

    with pytest.raises(FetchError, match="169.254.169.254"):
        fetch_document("https://example.com")
    mock_get.assert_called_once()


@override_settings(SITE_ANALYZER_BLOCK_PRIVATE_HOSTS=True)
@patch("site_analyzer.validators.socket.getaddrinfo", side_effect=_resolver({"example.com": "93.184.216.34"}))
@patch("site_analyzer.fetcher.requests.get")
def test_redirect_to_localhost_name_is_refused(mock_get, _dns):
    mock_get.return_value = _redirect("http://localhost:8000/admin")

    with pytest.raises(FetchError, match="blocked"):
        fetch_document("https://example.com")
    mock_get.assert_called_once()


@patch("site_analyzer.fetcher.requests.get")
def test_redirect_loop_gives_up(mock_get):
    mock_get.return_value = _redirect("https://example.com/again")

    with pytest.raises(FetchError, match="Too many redirects"):
        fetch_document("https://example.com")
    assert mock_get.call_count == MAX_REDIRECTS + 1


@patch("site_analyzer.fetcher.requests.get")
def test_error_messages_carry_no_extra_prefix(mock_get):
    mock_get.return_value = _response(status=404, reason="Not Found")
    with pytest.raises(FetchError) as info:
        fetch_document("https://example.com")
    assert str(info.value) == "HTTP 404 Not Found"
