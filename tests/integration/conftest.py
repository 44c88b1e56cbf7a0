"""Shared fixtures for integration tests."""

from __future__ import annotations

import hashlib
import json

import httpx
import pytest


class SearchService:
    """In-process stand-in for the search service, served via MockTransport."""

    def __init__(self) -> None:
        self.hits: dict[str, tuple[str, str, str]] = {}
        self.raw: dict[str, bytes] = {}
        self.corrupt: set[str] = set()
        self.requests: list[httpx.Request] = []
        self.unreachable = False

    def add_hit(self, content: bytes, group: str, artifact: str, version: str) -> None:
        self.hits[hashlib.sha1(content).hexdigest()] = (group, artifact, version)

    def add_raw(self, content: bytes, body: bytes) -> None:
        self.raw[hashlib.sha1(content).hexdigest()] = body

    def add_corrupt_gzip(self, content: bytes) -> None:
        self.corrupt.add(hashlib.sha1(content).hexdigest())

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        sha1 = request.url.params["q"].removeprefix('1:"').removesuffix('"')
        if sha1 in self.corrupt:
            return httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"not gzip"),
            )
        if sha1 in self.raw:
            return httpx.Response(502, content=self.raw[sha1])
        docs = []
        if sha1 in self.hits:
            group, artifact, version = self.hits[sha1]
            docs.append({"g": group, "a": artifact, "v": version})
        return httpx.Response(200, content=json.dumps({"response": {"docs": docs}}))


@pytest.fixture
def search_service(monkeypatch: pytest.MonkeyPatch) -> SearchService:
    """Route every HttpSearchClient created by a run to a SearchService."""
    from jarhunt.adapters.search import HttpSearchClient

    service = SearchService()

    class MockedSearchClient(HttpSearchClient):
        def __init__(self, host, port=80, *, timeout=None, transport=None):
            super().__init__(
                host,
                port,
                timeout=timeout,
                transport=httpx.MockTransport(service.handler),
            )

    monkeypatch.setattr("jarhunt.adapters.search.HttpSearchClient", MockedSearchClient)
    return service
