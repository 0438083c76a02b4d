"""Rate limiting for the public write endpoints (contact form)."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from rethinking_econ.core.config import settings

PROXY_HEADERS = ("X-Forwarded-For", "X-Real-IP")


def client_ip(request: Request) -> str:
    """
    Address used as the rate-limit key.

    Proxy headers are only honoured with BEHIND_PROXY=True; otherwise a
    client could pick its own key by sending them.
    """
    if settings.BEHIND_PROXY:
        for header in PROXY_HEADERS:
            value = request.headers.get(header)
            if value:
                # X-Forwarded-For lists the originating client first
                return value.split(",")[0].strip()
    return get_remote_address(request)


limiter = Limiter(key_func=client_ip)
