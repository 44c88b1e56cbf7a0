"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
in-memory fakes for the core ports.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from typing import Any

import pytest

from jarhunt.core.digest import compute_digest
from jarhunt.core.exceptions import LookupTransportError
from jarhunt.core.lookup import build_request_path
from jarhunt.core.models import EntryStat


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "adapters: Filesystem, search and sink adapters")
    config.addinivalue_line("markers", "progress: Rich console reporting")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


Tree = dict[str, Any]


class FakeFilesystem:
    """In-memory FilesystemPort built from a nested dict.

    Keys are entry names; bytes values are files and dict values are
    directories. Every operation yields to the event loop so concurrent
    work can interleave, and reads track how many are open at once.
    """

    def __init__(self, root: str, tree: Tree) -> None:
        self.files: dict[str, bytes] = {}
        self.dirs: dict[str, list[str]] = {}
        self.list_errors: set[str] = set()
        self.stat_errors: set[str] = set()
        self.read_errors: set[str] = set()
        self.listed: list[str] = []
        self.reads: list[str] = []
        self.active_reads = 0
        self.max_active_reads = 0
        self._add(root, tree)

    def _add(self, path: str, tree: Tree) -> None:
        self.dirs[path] = list(tree)
        for name, value in tree.items():
            child = f"{path}/{name}" if path else name
            if isinstance(value, dict):
                self._add(child, value)
            else:
                self.files[child] = value

    async def list_directory(self, path: str) -> list[str]:
        await asyncio.sleep(0)
        self.listed.append(path)
        if path in self.list_errors or path not in self.dirs:
            raise FileNotFoundError(path)
        return list(self.dirs[path])

    async def stat(self, path: str) -> EntryStat:
        await asyncio.sleep(0)
        if path in self.stat_errors:
            raise PermissionError(path)
        if path in self.dirs:
            return EntryStat(is_directory=True)
        if path in self.files:
            return EntryStat(is_directory=False)
        raise FileNotFoundError(path)

    async def read_file(self, path: str) -> bytes:
        self.active_reads += 1
        self.max_active_reads = max(self.max_active_reads, self.active_reads)
        try:
            await asyncio.sleep(0)
            await asyncio.sleep(0)
            self.reads.append(path)
            if path in self.read_errors or path not in self.files:
                raise FileNotFoundError(path)
            return self.files[path]
        finally:
            self.active_reads -= 1


def search_body(*docs: dict[str, str]) -> bytes:
    """Build a search service response body."""
    return json.dumps({"response": {"numFound": len(docs), "docs": list(docs)}}).encode()


class FakeSearch:
    """In-memory SearchPort keyed by the bytes of the file being looked up.

    Unknown digests get an empty result set.
    """

    def __init__(self, host: str = "search.example") -> None:
        self.host = host
        self.bodies: dict[str, bytes] = {}
        self.failing: set[str] = set()
        self.requests: list[str] = []

    def add(self, content: bytes, body: bytes | str) -> None:
        """Serve body for the digest of content."""
        path = build_request_path(compute_digest(content))
        self.bodies[path] = body.encode() if isinstance(body, str) else body

    def add_hit(self, content: bytes, group: str, artifact: str, version: str) -> None:
        """Resolve the digest of content to a single coordinate."""
        self.add(content, search_body({"g": group, "a": artifact, "v": version}))

    def fail(self, content: bytes) -> None:
        """Raise a transport error for the digest of content."""
        self.failing.add(build_request_path(compute_digest(content)))

    async def get(self, request_path: str) -> bytes:
        await asyncio.sleep(0)
        self.requests.append(request_path)
        if request_path in self.failing:
            raise LookupTransportError(
                self.host, request_path, cause=ConnectionRefusedError()
            )
        return self.bodies.get(request_path, search_body())


@pytest.fixture
def make_filesystem() -> Callable[..., FakeFilesystem]:
    """Factory for in-memory filesystems: make_filesystem(tree, root="root")."""

    def factory(tree: Tree, root: str = "root") -> FakeFilesystem:
        return FakeFilesystem(root, tree)

    return factory


@pytest.fixture
def fake_search() -> FakeSearch:
    """Search port that resolves nothing until responses are added."""
    return FakeSearch()
