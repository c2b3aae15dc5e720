"""
Binding registry.

Maps the binding names a harness run is launched with to binding classes.

Dependencies: ycsb_ravendb.application.adapters
System role: Binding selection and instantiation
"""

import logging
from typing import Mapping

from ycsb_ravendb.application.adapters import DocumentStoreAdapter
from ycsb_ravendb.core.db import DB
from ycsb_ravendb.core.exceptions import UnknownBindingError

logger = logging.getLogger(__name__)

BINDINGS: dict[str, type[DB]] = {
    "ravendb": DocumentStoreAdapter,
    "ravendb35": DocumentStoreAdapter,
}


def create_db(name: str, properties: Mapping[str, str] | None = None) -> DB:
    """
    Instantiate a binding by name.

    The returned binding is not initialized; the caller runs initialize().

    Args:
        name: Binding name (case-insensitive)
        properties: Harness properties handed to the binding

    Returns:
        DB: Uninitialized binding instance

    Raises:
        UnknownBindingError: If no binding is registered under ``name``
    """
    binding = BINDINGS.get(name.lower())
    if binding is None:
        raise UnknownBindingError(name, details={"available": sorted(BINDINGS)})

    logger.debug(f"{__name__}:create_db - Creating {binding.__name__} for binding {name}")
    return binding(properties)
