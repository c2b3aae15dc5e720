"""
RavenDB 3.5 HTTP client.

Thin synchronous client over the RavenDB REST API: database listing and
creation on the server, and get/put/delete of single documents in one
database. Every failure (transport, HTTP error status, undecodable body) is
raised as DocumentStoreError.

Dependencies: httpx
System role: Document-store handle owned by one binding instance
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator
from urllib.parse import quote

import httpx

from ycsb_ravendb.core.exceptions import DocumentStoreError

logger = logging.getLogger(__name__)

METADATA_KEY = "@metadata"


@dataclass
class DatabaseDocument:
    """Server-side definition of a database, sent on creation."""

    id: str
    settings: dict[str, str] = field(default_factory=dict)
    secured_settings: dict[str, str] = field(default_factory=dict)
    disabled: bool = False

    def to_json(self) -> dict[str, Any]:
        return {
            "Id": self.id,
            "Settings": self.settings,
            "SecuredSettings": self.secured_settings,
            "Disabled": self.disabled,
        }


@dataclass
class JsonDocument:
    """A document read from the server."""

    key: str
    data_as_json: dict[str, Any]
    metadata: dict[str, Any] = field(default_factory=dict)
    etag: str | None = None

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        """Iterate over (field, value) pairs of the document body."""
        return iter(self.data_as_json.items())


@dataclass
class PutResult:
    """Key and etag assigned by the server to a stored document."""

    key: str
    etag: str | None = None


class DocumentStore:
    """Client for one RavenDB server and one of its databases."""

    def __init__(
        self,
        url: str,
        database: str,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Create an uninitialized store.

        Args:
            url: Server URL (http://<host>:<port>)
            database: Default database for document operations
            timeout: HTTP timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self._url = url.rstrip("/")
        self._database = database
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def database(self) -> str:
        return self._database

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    def initialize(self) -> "DocumentStore":
        """
        Open the HTTP session. Calling it twice keeps the first session.

        Returns:
            DocumentStore: self, for chaining

        Raises:
            DocumentStoreError: If the URL cannot be parsed
        """
        if self._client is None:
            try:
                self._client = httpx.Client(
                    base_url=self._url,
                    timeout=self._timeout,
                    transport=self._transport,
                )
            except httpx.InvalidURL as exc:
                raise DocumentStoreError(
                    f"Invalid server URL {self._url!r}: {exc}",
                    operation="initialize",
                ) from exc
            logger.debug(f"{__name__}:initialize - Opened session to {self._url}")
        return self

    def close(self) -> None:
        """Close the HTTP session; no-op when not initialized."""
        if self._client is not None:
            client, self._client = self._client, None
            client.close()
            logger.debug(f"{__name__}:close - Closed session to {self._url}")

    def __enter__(self) -> "DocumentStore":
        return self.initialize()

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # Server administration

    def get_database_names(self, page_size: int, start: int = 0) -> list[str]:
        """
        List database names on the server.

        Args:
            page_size: Maximum number of names to return
            start: Offset of the first name

        Returns:
            list[str]: Database names

        Raises:
            DocumentStoreError: If the request fails or the body is not a list
        """
        response = self._send(
            "GET",
            "/databases",
            "get_database_names",
            params={"pageSize": page_size, "start": start},
        )
        names = self._decode(response, "get_database_names")
        if not isinstance(names, list):
            raise DocumentStoreError(
                "Database listing is not a JSON array",
                operation="get_database_names",
                status_code=response.status_code,
            )
        return [str(name) for name in names]

    def create_database(self, document: DatabaseDocument) -> None:
        """
        Create a database on the server.

        Args:
            document: Database definition

        Raises:
            DocumentStoreError: If the server rejects the request
        """
        self._send(
            "PUT",
            f"/admin/databases/{quote(document.id, safe='')}",
            "create_database",
            json=document.to_json(),
        )

    # Documents

    def get(self, key: str) -> JsonDocument | None:
        """
        Fetch a document by key.

        Args:
            key: Document identifier

        Returns:
            JsonDocument | None: The document, or None if it does not exist

        Raises:
            DocumentStoreError: If the request fails or the body is not an object
        """
        response = self._send("GET", self._document_path(key, "get"), "get", allow_not_found=True)
        if response.status_code == httpx.codes.NOT_FOUND:
            return None

        body = self._decode(response, "get")
        if not isinstance(body, dict):
            raise DocumentStoreError(
                f"Document {key!r} is not a JSON object",
                operation="get",
                status_code=response.status_code,
            )
        metadata = body.pop(METADATA_KEY, None) or {}
        return JsonDocument(
            key=key,
            data_as_json=body,
            metadata=metadata,
            etag=response.headers.get("ETag"),
        )

    def put(
        self,
        key: str,
        etag: str | None,
        document: dict[str, Any],
        metadata: dict[str, Any] | None = None,
    ) -> PutResult:
        """
        Store a document, replacing any existing document with the same key.

        Args:
            key: Document identifier
            etag: Expected current etag, or None for an unconditional write
            document: Document body
            metadata: Document metadata, sent as request headers

        Returns:
            PutResult: Key and new etag reported by the server

        Raises:
            DocumentStoreError: If the request fails (including etag conflicts)
        """
        headers = {name: str(value) for name, value in (metadata or {}).items()}
        if etag is not None:
            headers["If-None-Match"] = etag

        response = self._send(
            "PUT", self._document_path(key, "put"), "put", json=document, headers=headers
        )
        if not response.content:
            return PutResult(key=key, etag=response.headers.get("ETag"))

        body = self._decode(response, "put")
        if not isinstance(body, dict):
            return PutResult(key=key, etag=response.headers.get("ETag"))
        return PutResult(key=body.get("Key", key), etag=body.get("ETag"))

    def delete(self, key: str, etag: str | None = None) -> None:
        """
        Delete a document. Deleting a missing key is not an error.

        Args:
            key: Document identifier
            etag: Expected current etag, or None for an unconditional delete

        Raises:
            DocumentStoreError: If the request fails
        """
        headers = {"If-None-Match": etag} if etag is not None else {}
        self._send(
            "DELETE", self._document_path(key, "delete"), "delete", allow_not_found=True, headers=headers
        )

    # Internals

    def _document_path(self, key: str, operation: str) -> str:
        try:
            return f"/databases/{quote(self._database, safe='')}/docs/{quote(key, safe='')}"
        except UnicodeEncodeError as exc:
            raise DocumentStoreError(
                f"Document key {key!r} is not encodable as UTF-8: {exc}",
                operation=operation,
            ) from exc

    def _send(
        self,
        method: str,
        path: str,
        operation: str,
        *,
        allow_not_found: bool = False,
        **kwargs: Any,
    ) -> httpx.Response:
        if self._client is None:
            raise RuntimeError("DocumentStore.initialize() must be called before use")

        logger.debug(f"{__name__}:_send - {method} {path}")
        try:
            response = self._client.request(method, path, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise DocumentStoreError(
                f"{method} {path} failed: {exc}",
                operation=operation,
            ) from exc

        if allow_not_found and response.status_code == httpx.codes.NOT_FOUND:
            return response
        if response.is_error:
            raise DocumentStoreError(
                f"{method} {path} returned HTTP {response.status_code}: {response.text}",
                operation=operation,
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise DocumentStoreError(
                f"Undecodable response body: {exc}",
                operation=operation,
                status_code=response.status_code,
            ) from exc
