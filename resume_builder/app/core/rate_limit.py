import logging
import math
import time

from fastapi import HTTPException, Request, status
from limits import parse
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter

log = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


class ClientRateLimiter:
    """Per-client request limit applied to every route.

    Used as an application-wide FastAPI dependency, so each path operation
    counts one hit against the caller's window.

    Attributes:
        limit (RateLimitItem): The parsed limit, e.g. "100 per 15 minutes".
        enabled (bool): When False every request is let through.

    """

    def __init__(self, limit: str, enabled: bool = True):
        self.limit = parse(limit)
        self.enabled = enabled
        self._strategy = FixedWindowRateLimiter(MemoryStorage())

    @staticmethod
    def client_key(request: Request) -> str:
        """Identify the caller by its remote address."""
        if request.client is None or not request.client.host:
            return "unknown"
        return request.client.host

    async def __call__(self, request: Request) -> None:
        """Count one request for the caller.

        Raises:
            HTTPException: 429 with a Retry-After header once the caller has
                used up the current window.

        """
        if not self.enabled:
            return
        key = self.client_key(request)
        if self._strategy.hit(self.limit, key):
            return

        reset_at, _ = self._strategy.get_window_stats(self.limit, key)
        retry_after = max(1, math.ceil(reset_at - time.time()))
        _msg = f"Rate limit {self.limit} exceeded for {key}"
        log.warning(_msg)
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=RATE_LIMIT_MESSAGE,
            headers={"Retry-After": str(retry_after)},
        )
