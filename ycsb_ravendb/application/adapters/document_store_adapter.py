"""
RavenDB document store adapter.

Implements the harness DB contract on top of a RavenDB 3.5 database.
Records are stored as one JSON document per key with every field value kept
as a string. The table argument is accepted and ignored: all tables share the
single namespace of the YCSB database.

Dependencies: httpx, ycsb_ravendb.boundary.ravendb, ycsb_ravendb.configs
System role: Harness binding for RavenDB
"""

import logging
import sys
from typing import Mapping

import httpx

from ycsb_ravendb.boundary.ravendb import DatabaseDocument, DocumentStore
from ycsb_ravendb.configs.ravendb import DOCS_URL, RavenDBSettings
from ycsb_ravendb.core.db import DB
from ycsb_ravendb.core.exceptions import CleanupError, DocumentStoreError, ProvisioningError
from ycsb_ravendb.core.field_codec import build_document, fill_record
from ycsb_ravendb.core.status import Status
from ycsb_ravendb.observability.log_utils import log_error_with_context, log_with_context
from ycsb_ravendb.observability.logger import get_logger

logger = get_logger(__name__)


class DocumentStoreAdapter(DB):
    """
    Harness binding for RavenDB 3.5.

    One instance per harness worker thread; each instance owns its own
    DocumentStore handle. update() and scan() are not supported and always
    report NOT_IMPLEMENTED.
    """

    def __init__(
        self,
        properties: Mapping[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize an uninitialized binding.

        Args:
            properties: Harness properties (``ravendb.*`` keys are used)
            transport: Optional httpx transport handed to the DocumentStore
        """
        super().__init__(properties)
        self._transport = transport
        self._settings: RavenDBSettings | None = None
        self._store: DocumentStore | None = None
        self._is_initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    @property
    def settings(self) -> RavenDBSettings | None:
        return self._settings

    def initialize(self) -> None:
        """
        Open the document store and make sure the database exists.

        A URL that is not of the form http://<host>:<port> terminates the
        process with exit status 1 before any handle is created.

        Raises:
            ConfigurationError: If a ravendb.* property fails validation
            ProvisioningError: If the store cannot be opened or the database
                listing or creation fails
        """
        settings = RavenDBSettings.from_properties(self.properties)
        if not settings.has_valid_url:
            print(
                f"ERROR: Invalid URL: '{settings.url}'. Must be of the form "
                f"'http://<host>:<port>'. {DOCS_URL}",
                file=sys.stderr,
            )
            sys.exit(1)

        store = DocumentStore(
            settings.url,
            settings.database,
            timeout=settings.timeout,
            transport=self._transport,
        )

        try:
            store.initialize()
            self._ensure_database(store, settings)
        except DocumentStoreError as e:
            store.close()
            raise ProvisioningError(
                f"Failed to provision database {settings.database}: {e.message}",
                database=settings.database,
                details={"url": settings.url},
            ) from e

        self._settings = settings
        self._store = store
        self._is_initialized = True

    def cleanup(self) -> None:
        """
        Close the document store. No-op when not initialized.

        Raises:
            CleanupError: If closing the HTTP session fails
        """
        if not self._is_initialized:
            return

        store, self._store = self._store, None
        self._is_initialized = False
        try:
            store.close()
        except (httpx.HTTPError, RuntimeError) as e:
            raise CleanupError(
                f"Failed to close document store: {e}",
                details={"url": store.url},
            ) from e

    def read(
        self,
        table: str,
        key: str,
        fields: set[str] | None,
        result: dict[str, bytes],
    ) -> Status:
        """
        Read a document into ``result``.

        ``fields`` is ignored unless ravendb.applyfieldfilter is enabled:
        every field of the document is returned.

        Returns:
            Status: OK, NOT_FOUND if the key does not exist, ERROR on failure
        """
        store = self._require_store()
        try:
            doc = store.get(key)
        except DocumentStoreError as e:
            log_error_with_context(logger, f"{__name__}:read - Read failed", e, operation="read", key=key)
            return Status.ERROR

        if doc is None:
            return Status.NOT_FOUND

        wanted = fields if self._settings.apply_field_filter else None
        fill_record(result, doc, wanted)
        return Status.OK

    def insert(self, table: str, key: str, values: dict[str, bytes]) -> Status:
        """
        Write ``values`` as the document stored under ``key``.

        The write is unconditional: an existing document with the same key
        is replaced.

        Returns:
            Status: OK or ERROR
        """
        store = self._require_store()
        try:
            store.put(key, None, build_document(values), {})
        except DocumentStoreError as e:
            log_error_with_context(logger, f"{__name__}:insert - Insert failed", e, operation="insert", key=key)
            return Status.ERROR
        return Status.OK

    def delete(self, table: str, key: str) -> Status:
        """
        Delete the document stored under ``key``, whether or not it exists.

        Returns:
            Status: OK or ERROR
        """
        store = self._require_store()
        try:
            store.delete(key, None)
        except DocumentStoreError as e:
            log_error_with_context(logger, f"{__name__}:delete - Delete failed", e, operation="delete", key=key)
            return Status.ERROR
        return Status.OK

    def update(self, table: str, key: str, values: dict[str, bytes]) -> Status:
        return Status.NOT_IMPLEMENTED

    def scan(
        self,
        table: str,
        start_key: str,
        record_count: int,
        fields: set[str] | None,
        result: list[dict[str, bytes]],
    ) -> Status:
        return Status.NOT_IMPLEMENTED

    def _require_store(self) -> DocumentStore:
        if self._store is None:
            raise RuntimeError("DocumentStoreAdapter.initialize() must be called before record operations")
        return self._store

    @staticmethod
    def _ensure_database(store: DocumentStore, settings: RavenDBSettings) -> None:
        # Check-then-create is not atomic; concurrent instances may both create.
        names = store.get_database_names(settings.database_page_size)
        wanted = settings.database.casefold()
        if any(name.casefold() == wanted for name in names):
            log_with_context(
                logger,
                logging.DEBUG,
                f"{__name__}:initialize - Database {settings.database} already exists",
                operation="provision",
                database=settings.database,
            )
            return

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:initialize - Creating database {settings.database}",
            operation="provision",
            database=settings.database,
            url=store.url,
        )
        store.create_database(
            DatabaseDocument(id=settings.database, settings=settings.database_settings)
        )
