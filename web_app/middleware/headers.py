"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shrtn.common.headers import extract_forwarded_headers, get_forwarded_path_prefix


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and store X-Forwarded-* headers."""

    async def dispatch(self, request: Request, call_next: Callable):
        """Process request and extract forwarded headers."""
        headers = dict(request.headers)
        forwarded = extract_forwarded_headers(headers)

        request.state.forwarded_proto = forwarded["forwarded_proto"]
        request.state.forwarded_host = forwarded["forwarded_host"]
        request.state.forwarded_for = forwarded["forwarded_for"]
        # Normalized: leading slash, no trailing, '' when not behind a prefixing proxy
        request.state.path_prefix = get_forwarded_path_prefix(headers)

        response = await call_next(request)
        return response
