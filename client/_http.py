"""Internal HTTP handling utilities for the File Manager client.

This module provides the low-level HTTP layer used by all sub-clients:
- Making HTTP requests (sync and async)
- Mapping error responses to client exceptions
- Optional retry with exponential backoff

This is an internal module and should not be imported directly by users.
"""

import asyncio
import time
from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    PayloadTooLargeError,
    ServerError,
    TimeoutError,
    ValidationError,
)


HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

# Status codes that trigger automatic retry (when retry is enabled)
RETRYABLE_STATUS_CODES = {502, 503, 504}

# Methods safe to resend after the server may have seen the request
IDEMPOTENT_METHODS = {"GET", "PUT", "DELETE"}

DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds

# Multipart payload: field name -> (filename, content)
FilesPayload = dict[str, tuple[str, bytes]]


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Extract message, error type and details from an error response.

    Understands the server's {"error", "type"} body and FastAPI's
    {"detail": ...} validation format, and falls back to the raw text.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, error_type, details).
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text or f"HTTP {response.status_code} error", None, None

    if isinstance(body, dict):
        if "error" in body:
            return str(body["error"]), body.get("type"), body.get("details")

        detail = body.get("detail")
        if isinstance(detail, str):
            return detail, body.get("type"), None
        if isinstance(detail, list):
            messages = [
                f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}"
                for err in detail
            ]
            return "; ".join(messages), "validation_error", {"errors": detail}

    return str(body), None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the matching client exception for an error status code.

    Raises:
        NotFoundError: For HTTP 404 responses.
        PayloadTooLargeError: For HTTP 413 responses.
        ValidationError: For HTTP 422 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, error_type, details = _parse_error_response(response)
    status_code = response.status_code

    try:
        response_body = response.json()
    except ValueError:
        response_body = response.text

    if status_code == 404:
        raise NotFoundError(message=message, details=details, response_body=response_body)
    elif status_code == 413:
        raise PayloadTooLargeError(message=message, details=details, response_body=response_body)
    elif status_code == 422:
        raise ValidationError(message=message, details=details, response_body=response_body)
    elif status_code >= 500:
        raise ServerError(
            message=message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    else:
        raise APIError(
            message=message,
            status_code=status_code,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Return the delay before retry number `attempt` (0-indexed)."""
    return min(base * (2 ** attempt), DEFAULT_RETRY_BACKOFF_MAX)


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return params
    return {k: v for k, v in params.items() if v is not None}


def _parse_body(response: httpx.Response) -> Any:
    if response.content:
        return response.json()
    return None


class HTTPClient:
    """Synchronous HTTP client for making API requests.

    Wraps httpx.Client with error mapping and optional retry.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: The base URL for all API requests.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on transient failures.
            max_retries: Maximum number of retry attempts.
            transport: Custom transport (e.g., MockTransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        files: FilesPayload | None = None,
    ) -> Any:
        """Make an HTTP request and return the parsed JSON response.

        With retry enabled, connection failures are retried for every
        method. Timeouts and 502/503/504 responses are only retried for
        GET, PUT and DELETE, since a POST may already have stored a file.

        Args:
            method: The HTTP method.
            path: The URL path (appended to base_url).
            params: Query parameters; None values are dropped.
            json: JSON body to send.
            files: Multipart file fields to send.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1
        can_resend = method in IDEMPOTENT_METHODS

        for attempt in range(attempts):
            last_attempt = attempt >= attempts - 1
            try:
                response = self._client.request(
                    method=method,
                    url=path,
                    params=params,
                    json=json,
                    files=files,
                )
            except httpx.ConnectError as e:
                if last_attempt:
                    raise ConnectionError(
                        message=f"Failed to connect to {url}", url=url, cause=e
                    ) from e
                time.sleep(_calculate_backoff(attempt))
                continue
            except httpx.TimeoutException as e:
                if last_attempt or not can_resend:
                    raise TimeoutError(
                        message=f"Request to {url} timed out", timeout=self.timeout, url=url
                    ) from e
                time.sleep(_calculate_backoff(attempt))
                continue

            if (
                response.status_code in RETRYABLE_STATUS_CODES
                and can_resend
                and not last_attempt
            ):
                time.sleep(_calculate_backoff(attempt))
                continue

            _raise_for_status(response)
            return _parse_body(response)

        raise RuntimeError("Unexpected error in request retry loop")

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        files: FilesPayload | None = None,
    ) -> Any:
        return self.request("POST", path, params=params, json=json, files=files)

    def put(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self.request("PUT", path, params=params, json=json)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("DELETE", path, params=params)


class AsyncHTTPClient:
    """Asynchronous HTTP client for making API requests.

    Same behavior as HTTPClient, wrapping httpx.AsyncClient.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        files: FilesPayload | None = None,
    ) -> Any:
        """Make an async HTTP request. See HTTPClient.request()."""
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1
        can_resend = method in IDEMPOTENT_METHODS

        for attempt in range(attempts):
            last_attempt = attempt >= attempts - 1
            try:
                response = await self._client.request(
                    method=method,
                    url=path,
                    params=params,
                    json=json,
                    files=files,
                )
            except httpx.ConnectError as e:
                if last_attempt:
                    raise ConnectionError(
                        message=f"Failed to connect to {url}", url=url, cause=e
                    ) from e
                await asyncio.sleep(_calculate_backoff(attempt))
                continue
            except httpx.TimeoutException as e:
                if last_attempt or not can_resend:
                    raise TimeoutError(
                        message=f"Request to {url} timed out", timeout=self.timeout, url=url
                    ) from e
                await asyncio.sleep(_calculate_backoff(attempt))
                continue

            if (
                response.status_code in RETRYABLE_STATUS_CODES
                and can_resend
                and not last_attempt
            ):
                await asyncio.sleep(_calculate_backoff(attempt))
                continue

            _raise_for_status(response)
            return _parse_body(response)

        raise RuntimeError("Unexpected error in request retry loop")

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        files: FilesPayload | None = None,
    ) -> Any:
        return await self.request("POST", path, params=params, json=json, files=files)

    async def put(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("PUT", path, params=params, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("DELETE", path, params=params)
