"""Unit tests for HttpSearchClient using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from jarhunt.adapters.search import HttpSearchClient
from jarhunt.core.exceptions import LookupTransportError
from jarhunt.core.lookup import build_request_path


SHA1 = "da39a3ee5e6b4b0d3255bfef95601890afd80709"


@pytest.mark.adapters
class TestGet:
    """Tests for HttpSearchClient.get()."""

    @pytest.mark.asyncio
    async def test_sends_plain_get_to_host_and_port(self) -> None:
        """The request targets http://host:port with the encoded query intact."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b'{"response": {"docs": []}}')

        async with HttpSearchClient(
            "search.example", 8080, transport=httpx.MockTransport(handler)
        ) as client:
            body = await client.get(build_request_path(SHA1))

        assert body == b'{"response": {"docs": []}}'
        request = seen[0]
        assert request.method == "GET"
        assert request.url.scheme == "http"
        assert request.url.host == "search.example"
        assert request.url.port == 8080
        assert request.url.path == "/solrsearch/select"
        assert request.url.query.decode() == (
            "q=1%3A%22" + SHA1 + "%22&rows=20&wt=json"
        )

    @pytest.mark.asyncio
    async def test_error_status_still_returns_body(self) -> None:
        """Status codes are not inspected; the parser decides."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, content=b"<html>down</html>")

        async with HttpSearchClient(
            "search.example", transport=httpx.MockTransport(handler)
        ) as client:
            body = await client.get("/solrsearch/select?q=1")

        assert body == b"<html>down</html>"

    @pytest.mark.asyncio
    async def test_connection_failure_raises_transport_error(self) -> None:
        """Connection-level errors become LookupTransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with HttpSearchClient(
            "search.example", transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(LookupTransportError) as exc_info:
                await client.get("/solrsearch/select?q=1")

        err = exc_info.value
        assert err.host == "search.example"
        assert err.request_path == "/solrsearch/select?q=1"
        assert isinstance(err.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self) -> None:
        """Timeouts are transport failures too."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with HttpSearchClient(
            "search.example", timeout=1.0, transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(LookupTransportError):
                await client.get("/solrsearch/select?q=1")

    @pytest.mark.asyncio
    async def test_undecodable_body_returns_empty_bytes(self) -> None:
        """A corrupt gzip body is handed on as empty, not raised."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"not gzip"),
            )

        async with HttpSearchClient(
            "search.example", transport=httpx.MockTransport(handler)
        ) as client:
            body = await client.get(build_request_path(SHA1))

        assert body == b""

    @pytest.mark.asyncio
    async def test_other_request_errors_raise_transport_error(self) -> None:
        """Request errors outside the transport family are mapped too."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.TooManyRedirects("redirect loop", request=request)

        async with HttpSearchClient(
            "search.example", transport=httpx.MockTransport(handler)
        ) as client:
            with pytest.raises(LookupTransportError) as exc_info:
                await client.get("/solrsearch/select?q=1")

        assert isinstance(exc_info.value.cause, httpx.TooManyRedirects)

    @pytest.mark.asyncio
    async def test_aclose_closes_client(self) -> None:
        client = HttpSearchClient(
            "search.example",
            transport=httpx.MockTransport(lambda request: httpx.Response(200)),
        )

        await client.aclose()

        with pytest.raises(RuntimeError):
            await client.get("/x")
