"""
Test suite for the status vocabulary, the DB contract and exceptions.

System role: Verification of the harness contract types
"""

import pytest

from ycsb_ravendb.core.db import DB
from ycsb_ravendb.core.exceptions import DocumentStoreError, ProvisioningError, YCSBBindingException
from ycsb_ravendb.core.status import Status


class InMemoryDB(DB):
    """Minimal binding used to exercise the base class."""

    def read(self, table, key, fields, result):
        return Status.NOT_FOUND

    def scan(self, table, start_key, record_count, fields, result):
        return Status.NOT_IMPLEMENTED

    def update(self, table, key, values):
        return Status.NOT_IMPLEMENTED

    def insert(self, table, key, values):
        return Status.OK

    def delete(self, table, key):
        return Status.OK


class TestStatus:
    """Test suite for Status."""

    def test_only_ok_should_be_ok(self) -> None:
        """Test is_ok() is true for OK alone."""
        assert Status.OK.is_ok()
        assert not any(status.is_ok() for status in Status if status is not Status.OK)

    def test_every_status_should_have_description(self) -> None:
        """Test each status carries a description."""
        assert all(status.description for status in Status)

    def test_status_should_compare_as_string(self) -> None:
        """Test statuses compare equal to their names."""
        assert Status.NOT_IMPLEMENTED == "NOT_IMPLEMENTED"


class TestDB:
    """Test suite for the DB base class."""

    def test_db_should_not_instantiate_without_operations(self) -> None:
        """Test the record operations are abstract."""
        with pytest.raises(TypeError):
            DB()

    def test_properties_should_be_copied(self) -> None:
        """Test the property set is owned by the binding."""
        # Arrange
        properties = {"ravendb.url": "http://a:1"}

        # Act
        db = InMemoryDB(properties)
        properties["ravendb.url"] = "http://b:2"

        # Assert
        assert db.properties == {"ravendb.url": "http://a:1"}

    def test_set_properties_should_replace_property_set(self) -> None:
        """Test set_properties swaps the whole property set."""
        # Arrange
        db = InMemoryDB({"a": "1"})

        # Act
        db.set_properties({"b": "2"})

        # Assert
        assert db.properties == {"b": "2"}

    def test_default_lifecycle_should_be_noop(self) -> None:
        """Test initialize/cleanup default to no-ops."""
        db = InMemoryDB()
        db.initialize()
        db.cleanup()


class TestExceptions:
    """Test suite for the exception hierarchy."""

    def test_str_should_include_details(self) -> None:
        """Test details are appended to the message."""
        # Act
        error = DocumentStoreError("boom", operation="get", status_code=500)

        # Assert
        assert str(error) == "boom | Details: {'operation': 'get', 'status_code': 500}"
        assert error.status_code == 500

    def test_str_without_details_should_be_message(self) -> None:
        """Test a bare exception renders its message only."""
        assert str(YCSBBindingException("boom")) == "boom"

    def test_errors_should_share_base_class(self) -> None:
        """Test binding errors can be caught through the base class."""
        assert issubclass(ProvisioningError, YCSBBindingException)
        assert issubclass(DocumentStoreError, YCSBBindingException)
