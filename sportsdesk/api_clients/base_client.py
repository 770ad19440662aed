"""Base API client with shared HTTP session, header and status handling"""

import logging
from typing import Dict, Optional, Any

import aiohttp

from sportsdesk.utils.errors import (
    RateLimitError,
    ServerError,
    ClientError,
)

logger = logging.getLogger(__name__)


class BaseAPIClient:
    """
    Base client for JSON sports endpoints with shared functionality:
    - One aiohttp session per ``async with`` block
    - Consistent error handling with custom exceptions
    - Request timeout handling

    No retries here; callers own their retry policy.
    """

    def __init__(
        self,
        platform_name: str,
        api_key: Optional[str] = None,
        base_url: str = "",
        timeout: int = 30,
    ):
        """
        Initialize base API client

        Args:
            platform_name: Name of the upstream service (for logs and errors)
            api_key: Optional API key for authentication
            base_url: Base URL for API endpoints
            timeout: Request timeout in seconds
        """
        self.platform_name = platform_name
        self.api_key = api_key
        self.base_url = base_url
        self.timeout_seconds = timeout

        # HTTP session (created in __aenter__)
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry"""
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        self.session = aiohttp.ClientSession(timeout=timeout)
        logger.debug(f"✅ Created session for {self.platform_name}")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        if self.session:
            await self.session.close()
            self.session = None
            logger.debug(f"✅ Closed session for {self.platform_name}")

    # ========================================================================
    # HEADER BUILDING
    # ========================================================================

    def _build_headers(self) -> Dict[str, str]:
        """JSON accept header, plus a Bearer token when an API key is set"""
        headers = {
            "Accept": "application/json",
        }
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    # ========================================================================
    # RESPONSE HANDLING
    # ========================================================================

    async def _handle_response_status(
        self,
        response: aiohttp.ClientResponse,
        sport: Optional[str] = None,
    ) -> None:
        """
        Check HTTP response status and raise appropriate exceptions

        Args:
            response: aiohttp response object
            sport: Sport the request was for, carried on the error

        Raises:
            RateLimitError: If status is 429
            ServerError: If status is 5xx
            ClientError: If status is 4xx (except 429)
        """
        if response.status == 429:
            raise RateLimitError(self.platform_name, sport=sport)

        elif response.status >= 500:
            text = await response.text()
            raise ServerError(self.platform_name, response.status, text, sport=sport)

        elif response.status >= 400:
            text = await response.text()
            raise ClientError(self.platform_name, response.status, text[:200], sport=sport)

    def _require_session(self) -> aiohttp.ClientSession:
        if not self.session:
            raise RuntimeError("Session not initialized. Use 'async with' context manager.")
        return self.session

    async def _get_json(self, url: str, params: Dict[str, Any], sport: Optional[str] = None) -> Any:
        """GET a URL and decode the JSON body after status checks"""
        session = self._require_session()
        async with session.get(url, params=params, headers=self._build_headers()) as response:
            await self._handle_response_status(response, sport=sport)
            return await response.json(content_type=None)
