"""
Core harness contract.

Status vocabulary, the abstract DB binding contract, the field value codec
and the binding exception hierarchy.
"""

from ycsb_ravendb.core.db import DB
from ycsb_ravendb.core.status import Status

__all__ = ["DB", "Status"]
