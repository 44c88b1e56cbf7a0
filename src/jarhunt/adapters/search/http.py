"""HTTP search adapter implementing SearchPort."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from jarhunt.core.exceptions import LookupTransportError


if TYPE_CHECKING:
    from types import TracebackType


logger = logging.getLogger(__name__)

_USER_AGENT = "jarhunt"


class HttpSearchClient:
    """Plain-HTTP client for the Maven Central search service.

    Requests are unauthenticated GETs over plain HTTP. Status codes are
    not inspected: whatever body comes back is handed to the response
    parser, which records non-JSON bodies as unresolved lookups.

    Example:
        async with HttpSearchClient("search.maven.org", 80) as search:
            body = await search.get(build_request_path(sha1))
    """

    def __init__(
        self,
        host: str,
        port: int = 80,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            host: Search service host name.
            port: Search service port.
            timeout: Per-request timeout in seconds. None waits indefinitely.
            transport: Optional transport override (e.g. httpx.MockTransport).
        """
        self.host = host
        self.port = port
        self._client = httpx.AsyncClient(
            base_url=f"http://{host}:{port}",
            timeout=httpx.Timeout(timeout),
            headers={"User-Agent": _USER_AGENT},
            transport=transport,
        )

    async def __aenter__(self) -> HttpSearchClient:
        """Open the connection pool."""
        await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the connection pool."""
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        """Close the connection pool outside of a context manager."""
        await self._client.aclose()

    async def get(self, request_path: str) -> bytes:
        """GET a request path and return the raw body.

        A body that cannot be decoded (for example a corrupt gzip
        payload) is returned as empty bytes so it parses as Unresolved.

        Args:
            request_path: Path with an already-encoded query string.

        Raises:
            LookupTransportError: On connection, DNS, timeout or protocol
                failure, or any other request error raised by httpx.
        """
        try:
            response = await self._client.get(request_path)
        except httpx.DecodingError as e:
            logger.info("Undecodable response for %s: %s", request_path, e)
            return b""
        except httpx.HTTPError as e:
            raise LookupTransportError(self.host, request_path, cause=e) from e

        logger.debug("GET %s -> %d", request_path, response.status_code)
        return response.content
