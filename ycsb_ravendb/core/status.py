"""
Harness status vocabulary.

Every record operation reports one of these statuses instead of raising.

Dependencies: enum (stdlib)
System role: Result codes shared by the harness and all bindings
"""

from enum import Enum


class Status(str, Enum):
    """Result of a single record operation."""

    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def is_ok(self) -> bool:
        """Whether the operation completed successfully."""
        return self is Status.OK


_DESCRIPTIONS = {
    Status.OK: "The operation completed successfully.",
    Status.NOT_FOUND: "The requested record was not found.",
    Status.ERROR: "The operation failed.",
    Status.NOT_IMPLEMENTED: "The operation is not implemented for the current binding.",
}
