"""
Field value codec.

Translates between harness field values (bytes) and document field values
(strings). The round trip goes through UTF-8 text, so byte sequences that are
not valid UTF-8 come back with U+FFFD replacement characters.

Dependencies: json (stdlib)
System role: Record <-> document value translation
"""

import json
from typing import Any, Iterable, Mapping

ENCODING = "utf-8"


def to_document_value(value: bytes | bytearray | memoryview | str) -> str:
    """
    Convert a harness field value to its document string form.

    Args:
        value: Raw field value

    Returns:
        str: Decoded text; invalid UTF-8 sequences are replaced
    """
    if isinstance(value, str):
        return value
    return bytes(value).decode(ENCODING, errors="replace")


def from_document_value(value: Any) -> bytes:
    """
    Convert a stored document value back to harness bytes.

    Strings are encoded directly; other JSON values (numbers, booleans,
    null, nested structures) are encoded from their JSON text.

    Args:
        value: Value taken from a document body

    Returns:
        bytes: UTF-8 encoded value
    """
    if not isinstance(value, str):
        value = json.dumps(value, separators=(",", ":"))
    return value.encode(ENCODING)


def build_document(values: Mapping[str, Any]) -> dict[str, str]:
    """Build a document body from a record, preserving field order."""
    return {field: to_document_value(value) for field, value in values.items()}


def fill_record(
    result: dict[str, bytes],
    fields: Iterable[tuple[str, Any]],
    wanted: set[str] | None = None,
) -> None:
    """
    Copy document fields into a harness result map.

    Args:
        result: Harness output map, filled in place
        fields: (field, value) pairs taken from a document
        wanted: Field names to keep, or None to keep all
    """
    for field, value in fields:
        if wanted is not None and field not in wanted:
            continue
        result[field] = from_document_value(value)
