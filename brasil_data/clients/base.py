"""Base API client with common functionality."""

import logging
import time
from typing import Any, Optional, Union
from urllib.parse import urlencode

import requests

from brasil_data.config import DEFAULT_TIMEOUT
from brasil_data.exceptions import (
    DecodeError,
    RequestTimeoutError,
    TransportError,
    UpstreamHTTPError,
)
from brasil_data.params import compact_params

logger = logging.getLogger(__name__)

# Left unescaped in query strings: OData parameters (@moeda, $format, 'USD')
# and IBGE locality selectors (N6[...]) are written literally upstream.
QUERY_SAFE_CHARS = "[]@$'"


def encode_query(params: Union[dict, str, None]) -> str:
    """Build a query string from the non-empty parameters.

    A string is taken as already encoded and returned unchanged.
    """
    if params is None:
        return ""
    if isinstance(params, str):
        return params.lstrip("?")
    cleaned = compact_params(params)
    if not cleaned:
        return ""
    return urlencode(cleaned, safe=QUERY_SAFE_CHARS)


class BaseAPIClient:
    """Base class for the data source clients.

    One instance holds only its configuration (base URL, timeout, headers)
    and an HTTP session, so a single instance can serve concurrent calls.
    Each call issues exactly one GET: no retries, no caching.
    """

    source: str = ""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        headers: Optional[dict] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize base API client.

        Args:
            base_url: Base URL for the API
            timeout: Default request timeout in seconds
            headers: Extra headers sent with every request
            session: HTTP session to use (a new one when omitted)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.headers = dict(headers or {})
        self.session = session or requests.Session()

    def close(self) -> None:
        """Release the HTTP session's pooled connections."""
        self.session.close()

    def get_auth_headers(self) -> dict:
        """Headers that authenticate the request. None by default."""
        return {}

    def build_url(
        self,
        endpoint: str = "",
        params: Union[dict, str, None] = None,
        base_url: Optional[str] = None,
    ) -> str:
        """Join base URL, endpoint and query string.

        Args:
            endpoint: Path below the base URL (may be empty)
            params: Query parameters; empty values are omitted
            base_url: Override for clients talking to more than one host

        Returns:
            The full request URL
        """
        base = (base_url or self.base_url).rstrip("/")
        url = f"{base}/{endpoint.lstrip('/')}" if endpoint else base
        query = encode_query(params)
        return f"{url}?{query}" if query else url

    def _request_headers(self) -> dict:
        request_headers = {"Accept": "application/json"}
        request_headers.update(self.headers)
        request_headers.update(self.get_auth_headers())
        return request_headers

    def _get(
        self,
        endpoint: str = "",
        params: Union[dict, str, None] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Issue one GET and fail on transport errors or non-2xx status.

        Raises:
            RequestTimeoutError: The request timed out
            TransportError: Any other connection-level failure
            UpstreamHTTPError: Non-2xx response (status and raw body kept)
        """
        # Auth headers are resolved first so a missing key fails before I/O
        request_headers = self._request_headers()
        url = self.build_url(endpoint, params, base_url)
        effective_timeout = timeout if timeout is not None else self.timeout

        start_time = time.time()
        try:
            response = self.session.get(
                url,
                headers=request_headers,
                timeout=effective_timeout,
            )
        except requests.exceptions.Timeout as e:
            raise RequestTimeoutError(
                f"request to {url} timed out after {effective_timeout}s"
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"executing request: {e}") from e

        duration_ms = (time.time() - start_time) * 1000
        logger.debug(
            "API request completed",
            extra={
                "source": self.source,
                "url": url,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )

        if not 200 <= response.status_code < 300:
            raise UpstreamHTTPError(response.status_code, response.text, url)
        return response

    def get_json(
        self,
        endpoint: str = "",
        params: Union[dict, str, None] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Make GET request and return the decoded JSON body.

        Raises:
            DecodeError: The body is not valid JSON
        """
        response = self._get(endpoint, params, base_url, timeout)
        return decode_json(response)


def decode_json(response: requests.Response) -> Any:
    """Decode a response body, raising DecodeError on malformed JSON."""
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"parsing response: {e}") from e


def expect_list(payload: Any, what: str) -> list:
    """Check that a decoded payload is a JSON array."""
    if not isinstance(payload, list):
        raise DecodeError(
            f"parsing response: expected a list of {what}, got {type(payload).__name__}"
        )
    return payload


def expect_object(payload: Any, what: str) -> dict:
    """Check that a decoded payload is a JSON object."""
    if not isinstance(payload, dict):
        raise DecodeError(
            f"parsing response: expected {what} object, got {type(payload).__name__}"
        )
    return payload


def records_from(payload: Any, record_cls: Any, what: str) -> list:
    """Map a JSON array of objects onto ``record_cls.from_api``."""
    items = expect_list(payload, what)
    return [record_cls.from_api(expect_object(item, what)) for item in items]
