"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules (auth, account) can
use the same instance without circular imports. Central limit strings and
decorators keep rate limits DRY. The webhook has no limit.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
LOGIN_LIMIT = "10/minute"
REGISTER_LIMIT = "5/minute"
CODE_LIMIT = "10/minute"

limit_auth = limiter.limit(LOGIN_LIMIT)
limit_register = limiter.limit(REGISTER_LIMIT)
limit_codes = limiter.limit(CODE_LIMIT)
