"""
Harness DB contract.

Every backend binding subclasses DB so workload generators stay
backend-agnostic. The harness creates one DB instance per worker thread,
hands it the run's property set, calls initialize() once, issues record
operations, and finally calls cleanup().

Dependencies: abc (stdlib)
System role: Uniform record-operation contract for all bindings
"""

from abc import ABC, abstractmethod
from typing import Mapping

from ycsb_ravendb.core.status import Status


class DB(ABC):
    """
    Abstract base class for harness bindings.

    Record values are ``dict[str, bytes]`` field maps. ``fields`` arguments
    name the subset of fields to return, or None for all of them.
    """

    def __init__(self, properties: Mapping[str, str] | None = None) -> None:
        """
        Initialize binding with the harness property set.

        Args:
            properties: Harness properties for this run
        """
        self._properties: dict[str, str] = dict(properties or {})

    @property
    def properties(self) -> dict[str, str]:
        return self._properties

    def set_properties(self, properties: Mapping[str, str]) -> None:
        """Replace the property set. Must be called before initialize()."""
        self._properties = dict(properties)

    def initialize(self) -> None:
        """Initialize any state for this DB. Called once per instance."""

    def cleanup(self) -> None:
        """Release any state for this DB. Called once per instance."""

    @abstractmethod
    def read(
        self,
        table: str,
        key: str,
        fields: set[str] | None,
        result: dict[str, bytes],
    ) -> Status:
        """
        Read a record, storing each field/value pair in ``result``.

        Args:
            table: Name of the table
            key: Record key of the record to read
            fields: Fields to read, or None for all of them
            result: Output map of field/value pairs

        Returns:
            Status: OK, NOT_FOUND or ERROR
        """
        ...

    @abstractmethod
    def scan(
        self,
        table: str,
        start_key: str,
        record_count: int,
        fields: set[str] | None,
        result: list[dict[str, bytes]],
    ) -> Status:
        """
        Perform a range scan, appending one field map per record to ``result``.

        Args:
            table: Name of the table
            start_key: Record key of the first record to read
            record_count: Number of records to read
            fields: Fields to read, or None for all of them
            result: Output list of field maps

        Returns:
            Status: Operation status
        """
        ...

    @abstractmethod
    def update(self, table: str, key: str, values: dict[str, bytes]) -> Status:
        """
        Update a record, overwriting existing values with the same field name.

        Args:
            table: Name of the table
            key: Record key of the record to write
            values: Field/value pairs to update

        Returns:
            Status: Operation status
        """
        ...

    @abstractmethod
    def insert(self, table: str, key: str, values: dict[str, bytes]) -> Status:
        """
        Insert a record under ``key``.

        Args:
            table: Name of the table
            key: Record key of the record to insert
            values: Field/value pairs to insert

        Returns:
            Status: Operation status
        """
        ...

    @abstractmethod
    def delete(self, table: str, key: str) -> Status:
        """
        Delete a record.

        Args:
            table: Name of the table
            key: Record key of the record to delete

        Returns:
            Status: Operation status
        """
        ...
