"""
Client IP extraction for rate limiting.
"""

from ipaddress import ip_address, ip_network
from typing import List, Optional

from starlette.requests import Request

from diceware.config import Settings, settings


def _parse_ip(value: str) -> Optional[str]:
    try:
        return str(ip_address(value.strip()))
    except ValueError:
        return None


def _is_trusted_proxy(proxy_ip: str, cidrs: List[str]) -> bool:
    address = ip_address(proxy_ip)
    for cidr in cidrs:
        try:
            if address in ip_network(cidr, strict=False):
                return True
        except ValueError:
            continue
    return False


def get_client_ip(request: Request, active_settings: Optional[Settings] = None) -> str:
    """
    Client IP for a request.

    X-Forwarded-For is honoured only when proxy headers are trusted and the
    direct peer is inside TRUSTED_PROXY_CIDRS_RAW.
    """
    active_settings = active_settings or settings
    peer = _parse_ip(request.client.host) if request.client else None

    if (
        peer
        and active_settings.TRUST_PROXY_HEADERS
        and _is_trusted_proxy(peer, active_settings.trusted_proxy_cidrs)
    ):
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            candidate = _parse_ip(forwarded.split(",")[0])
            if candidate:
                return candidate

    return peer or "0.0.0.0"
