from starlette.requests import Request

from diceware.config import Settings
from diceware.utils.network import get_client_ip


def make_request(client_host, forwarded=None) -> Request:
    headers = []
    if forwarded is not None:
        headers.append((b"x-forwarded-for", forwarded.encode()))
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/api/passphrase",
        "headers": headers,
        "client": (client_host, 51000) if client_host else None,
    }
    return Request(scope)


def test_forwarded_header_honoured_from_trusted_proxy():
    request = make_request("10.1.2.3", forwarded="203.0.113.9, 10.1.2.3")
    assert get_client_ip(request, Settings()) == "203.0.113.9"


def test_forwarded_header_ignored_from_untrusted_peer():
    request = make_request("198.51.100.7", forwarded="203.0.113.9")
    assert get_client_ip(request, Settings()) == "198.51.100.7"


def test_forwarded_header_ignored_when_proxy_headers_disabled():
    request = make_request("10.1.2.3", forwarded="203.0.113.9")
    assert get_client_ip(request, Settings(TRUST_PROXY_HEADERS=False)) == "10.1.2.3"


def test_garbage_forwarded_header_falls_back_to_peer():
    request = make_request("10.1.2.3", forwarded="not-an-ip")
    assert get_client_ip(request, Settings()) == "10.1.2.3"


def test_missing_client_uses_placeholder():
    assert get_client_ip(make_request(None), Settings()) == "0.0.0.0"
