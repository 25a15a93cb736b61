"""Base client for Sonarr-style API interactions."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Self, TypeVar

import httpx
from pydantic import TypeAdapter

from showarr.config import DEFAULT_TIMEOUT, ClientConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_REDIRECTS = 15


@lru_cache(maxsize=None)
def _type_adapter(result_type: Any) -> TypeAdapter[Any]:
    """Return a cached TypeAdapter for result_type."""
    return TypeAdapter(result_type)


class BaseArrClient:
    """Base client holding an authenticated HTTP connection to an *arr API.

    This base class provides:
    - Configuration validation and base URL composition
    - An httpx client that sends the API key as the ``apikey`` query
      parameter, asks for JSON and optionally uses HTTP basic auth
    - Redirect following, capped at 15 hops
    - Context manager protocol for resource cleanup

    Every call is a single synchronous round trip. There is no caching and
    no retry; transport and decode errors propagate to the caller unchanged.

    Subclasses implement API methods on top of ``_request()``.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            config: Connection settings for the instance
            timeout: Request timeout in seconds (default 120.0)

        Raises:
            InvalidConfiguration: If the hostname is empty
            InvalidAPIKey: If the API key has the wrong format
        """
        config.validate()

        self.api_key = config.api_key
        self.username = config.username
        self.password = config.password
        self.max_results = config.max_results
        self.timeout = timeout
        self.base_url = config.build_api_url()

        logger.info("The URL for Sonarr is %s", self.base_url)

        auth = httpx.BasicAuth(config.username, config.password) if config.has_basic_auth else None
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            params={"apikey": config.api_key},
            auth=auth,
            timeout=timeout,
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
        )

    def __enter__(self) -> Self:
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager."""
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self._client.close()

    @property
    def client(self) -> httpx.Client:
        """The underlying httpx client."""
        return self._client

    def _request(
        self,
        method: str,
        endpoint: str,
        result_type: type[T],
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> T:
        """Make an HTTP request and decode the response.

        Args:
            method: HTTP method (GET, POST, PUT, ...)
            endpoint: Path relative to the API base URL (e.g., "series/lookup")
            result_type: Type the JSON body is validated against
                (e.g., ``list[TVShow]``)
            params: Optional query parameters, sent alongside the API key
            json: Optional JSON body

        Returns:
            The decoded response

        Raises:
            httpx.HTTPError: On connection errors, too many redirects or
                non-2xx responses
            pydantic.ValidationError: If the body does not match result_type
        """
        logger.debug("%s %s", method, endpoint)
        response = self.client.request(method, endpoint, params=params, json=json)
        response.raise_for_status()
        adapter: TypeAdapter[T] = _type_adapter(result_type)
        return adapter.validate_python(response.json())
