"""
RavenDB boundary modules.

Exports: DocumentStore, DatabaseDocument, JsonDocument, PutResult
"""

from .document_store import DatabaseDocument, DocumentStore, JsonDocument, PutResult

__all__ = ["DocumentStore", "DatabaseDocument", "JsonDocument", "PutResult"]
