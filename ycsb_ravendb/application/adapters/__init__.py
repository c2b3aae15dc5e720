"""
Binding adapters.

Exports: DocumentStoreAdapter
"""

from .document_store_adapter import DocumentStoreAdapter

__all__ = ["DocumentStoreAdapter"]
