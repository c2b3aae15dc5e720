"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory fake RavenDB server behind httpx.MockTransport,
initialized adapter fixtures, environment isolation
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

import json
from itertools import count
from typing import Callable
from urllib.parse import unquote

import httpx
import pytest

from ycsb_ravendb.application.adapters import DocumentStoreAdapter
from ycsb_ravendb.configs import get_settings


class FakeRavenServer:
    """
    In-memory stand-in for the RavenDB 3.5 REST API.

    Documents are replaced wholesale on PUT, like the real server.
    Every request is recorded for call-count assertions.
    """

    def __init__(self, databases: list[str] | None = None) -> None:
        self.databases: dict[str, dict[str, dict]] = {name: {} for name in databases or []}
        self.requests: list[httpx.Request] = []
        self.created: list[dict] = []
        self.document_error: int | None = None
        self.listing_error: int | None = None
        self.raise_on_request: Exception | None = None
        self._etags = count(1)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def calls(self, method: str, prefix: str) -> list[httpx.Request]:
        """Recorded requests with the given method whose path starts with ``prefix``."""
        return [
            request
            for request in self.requests
            if request.method == method and self._path(request).startswith(prefix)
        ]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_on_request is not None:
            raise self.raise_on_request

        path = self._path(request)
        segments = [unquote(segment) for segment in path.strip("/").split("/")]

        if segments == ["databases"] and request.method == "GET":
            return self._list_databases(request)
        if segments[:2] == ["admin", "databases"] and request.method == "PUT":
            return self._create_database(segments[2], request)
        if len(segments) == 4 and segments[0] == "databases" and segments[2] == "docs":
            return self._document(segments[1], segments[3], request)
        return httpx.Response(400, text=f"Unsupported request {request.method} {path}")

    def _list_databases(self, request: httpx.Request) -> httpx.Response:
        if self.listing_error is not None:
            return httpx.Response(self.listing_error, text="listing failed")
        start = int(request.url.params.get("start", 0))
        page_size = int(request.url.params.get("pageSize", 25))
        return httpx.Response(200, json=list(self.databases)[start:start + page_size])

    def _create_database(self, name: str, request: httpx.Request) -> httpx.Response:
        self.created.append(json.loads(request.content))
        self.databases.setdefault(name, {})
        return httpx.Response(200)

    def _document(self, database: str, key: str, request: httpx.Request) -> httpx.Response:
        documents = self.databases.get(database)
        if documents is None:
            return httpx.Response(503, text=f"Could not find a database named: {database}")
        if self.document_error is not None:
            return httpx.Response(self.document_error, text="Internal server error")

        if request.method == "GET":
            if key not in documents:
                return httpx.Response(404)
            return httpx.Response(200, json=documents[key], headers={"ETag": f"etag-{key}"})
        if request.method == "PUT":
            documents[key] = json.loads(request.content)
            etag = f"01000000-0000-0001-0000-{next(self._etags):012d}"
            return httpx.Response(201, json={"Key": key, "ETag": etag})
        if request.method == "DELETE":
            documents.pop(key, None)
            return httpx.Response(204)
        return httpx.Response(405)

    @staticmethod
    def _path(request: httpx.Request) -> str:
        return request.url.raw_path.decode("ascii").split("?", 1)[0]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep RAVENDB_* variables from the developer shell out of the tests."""
    for name in ("RAVENDB_URL", "RAVENDB_APPLY_FIELD_FILTER", "RAVENDB_TIMEOUT", "RAVENDB_DATABASE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_server() -> FakeRavenServer:
    """Fake server that already hosts the YCSB database."""
    return FakeRavenServer(databases=["System", "YCSB"])


@pytest.fixture
def empty_server() -> FakeRavenServer:
    """Fake server without the YCSB database."""
    return FakeRavenServer(databases=["System"])


@pytest.fixture
def make_server() -> Callable[[list[str]], FakeRavenServer]:
    """Factory for fake servers hosting the given databases."""
    return lambda databases: FakeRavenServer(databases=databases)


@pytest.fixture
def make_adapter() -> Callable[..., DocumentStoreAdapter]:
    """
    Factory for adapters wired to a fake server.

    Returns:
        Callable: (server, properties=None) -> uninitialized DocumentStoreAdapter
    """

    def _make(server: FakeRavenServer, properties: dict[str, str] | None = None) -> DocumentStoreAdapter:
        return DocumentStoreAdapter(properties, transport=server.transport)

    return _make


@pytest.fixture
def adapter(fake_server, make_adapter):
    """
    Initialized adapter against the fake server.

    Yields:
        DocumentStoreAdapter: Ready adapter, cleaned up after the test
    """
    db = make_adapter(fake_server)
    db.initialize()
    yield db
    db.cleanup()
