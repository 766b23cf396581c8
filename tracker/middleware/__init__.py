"""HTTP middleware: timeout, request size limit, request ID / access log, security headers.

Applied in main app; order matters (last added = outermost).
Import and use from tracker.main.
"""

from tracker.middleware.request_id import RequestIDMiddleware
from tracker.middleware.request_size_limit import RequestSizeLimitMiddleware
from tracker.middleware.security_headers import SecurityHeadersMiddleware
from tracker.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
