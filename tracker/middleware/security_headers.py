"""Security headers middleware.

Adds security response headers to every API response; responses under
/api/auth also get Cache-Control: no-store since they carry session tokens.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

DEFAULT_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}
HSTS_HEADER = ("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
NO_STORE_PREFIX = "/api/auth"


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    *,
    hsts: bool = True,
) -> Callable:
    """Set security headers on all responses (never overriding ones already set). Raw ASGI."""
    resolved = dict(headers if headers is not None else DEFAULT_HEADERS)
    if hsts:
        resolved.setdefault(*HSTS_HEADER)
    header_list = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        extra = list(header_list)
        if scope.get("path", "").startswith(NO_STORE_PREFIX):
            extra.append((b"cache-control", b"no-store"))

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                headers.extend(h for h in extra if h[0] not in seen)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
