"""Exception classes for sports data fetching"""

import asyncio
from typing import Optional, Dict, Any

import aiohttp


# ============================================================================
# DATA ERRORS
# ============================================================================

class SportsDataError(Exception):
    """Base error for anything that prevents sports data from being served"""

    def __init__(
        self,
        sport: Optional[str] = None,
        operation: str = "fetch",
        message: str = "",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.sport = sport
        self.operation = operation
        self.details = details or {}

        full_message = f"[{sport or 'all'}] {operation}"
        if message:
            full_message += f": {message}"

        super().__init__(full_message)


class DataUnavailableError(SportsDataError):
    """Source could not be reached, timed out, or retries were exhausted"""
    pass


class MalformedResponseError(SportsDataError):
    """Source answered, but the payload carried an error indicator or the wrong shape"""

    def __init__(self, sport: Optional[str], operation: str, message: str = "", payload: Any = None):
        super().__init__(
            sport=sport,
            operation=operation,
            message=message,
            details={'payload': payload} if payload is not None else None,
        )


# ============================================================================
# HTTP ERRORS
# ============================================================================

class APIError(DataUnavailableError):
    """Base exception for HTTP-level failures talking to the scoreboard service"""

    def __init__(
        self,
        platform: str,
        operation: str,
        status_code: Optional[int] = None,
        message: str = "",
        sport: Optional[str] = None,
    ):
        self.platform = platform
        self.status_code = status_code

        detail = f"{platform}"
        if status_code:
            detail += f" (HTTP {status_code})"
        if message:
            detail += f" {message}"

        super().__init__(sport=sport, operation=operation, message=detail)


class RateLimitError(APIError):
    """
    Raised when the service rate-limits us (HTTP 429)

    Retry-After is not read: GameCache waits its fixed retry delay for
    every failure kind.
    """

    def __init__(self, platform: str, sport: Optional[str] = None):
        super().__init__(
            platform=platform,
            operation="Rate limit exceeded",
            status_code=429,
            sport=sport,
        )


class ServerError(APIError):
    """Raised when the service returns a 5xx"""

    def __init__(self, platform: str, status_code: int, response_text: str = "", sport: Optional[str] = None):
        super().__init__(
            platform=platform,
            operation="Server error",
            status_code=status_code,
            message=response_text[:100],
            sport=sport,
        )


class ClientError(APIError):
    """Raised when the request is rejected (HTTP 4xx except 429)"""

    def __init__(self, platform: str, status_code: int, message: str = "", sport: Optional[str] = None):
        super().__init__(
            platform=platform,
            operation="Client error",
            status_code=status_code,
            message=message,
            sport=sport,
        )


# What callers of the cache and gateway catch. Sources may raise anything;
# as_fetch_error folds the rest into DataUnavailableError.
FETCH_ERRORS = (SportsDataError, aiohttp.ClientError, asyncio.TimeoutError)


def as_fetch_error(error: Exception, sport: Optional[str], operation: str) -> Exception:
    """Return error unchanged if it is a FETCH_ERRORS member, else wrap it"""
    if isinstance(error, FETCH_ERRORS):
        return error
    wrapped = DataUnavailableError(sport, operation, f"{type(error).__name__}: {error}")
    wrapped.__cause__ = error
    return wrapped
