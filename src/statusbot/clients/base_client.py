"""
Base HTTP Client

Shared base class for the thin HTTP clients that reach external services.
"""

from typing import Any, Dict, Optional

import httpx

from statusbot.errors.exceptions import UpstreamError


class BaseClient:
    """Base HTTP client with common error handling."""

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None
    ):
        """
        Initialize base client.

        Args:
            base_url: API base URL
            headers: Headers sent with every request (credentials go here)
            timeout: Request timeout in seconds
            http_client: Pre-built httpx client (tests pass one with a mock transport)
        """
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self.timeout = timeout
        self._owns_client = http_client is None
        # Create a single httpx client instance for reuse
        self._client = http_client or httpx.Client(timeout=timeout)

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Make HTTP request and return parsed JSON.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path (will be appended to base_url)
            json: JSON payload for POST/PUT requests
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            UpstreamError: On network failures, HTTP errors or non-JSON bodies
        """
        url = f"{self.base_url}{path}"

        try:
            response = self._client.request(
                method=method,
                url=url,
                json=json,
                params=params,
                headers=self.headers,
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            error_text = e.response.text[:500] if e.response.text else ""
            raise UpstreamError(
                f"API returned error {status_code}: {error_text}"
            ) from e
        except httpx.RequestError as e:
            raise UpstreamError(
                f"API request failed: {str(e)}"
            ) from e
        except ValueError as e:
            raise UpstreamError(
                f"API returned a non-JSON response: {str(e)}"
            ) from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
