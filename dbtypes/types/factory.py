"""
Registry factory — pick the type registry for a database type.

Registries are immutable, so one instance per backend is shared by every
caller in the process.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Callable, Dict, List

from ..faults.domains import BackendNotFoundFault
from .base import TypeValidationRegistry, normalize_name

logger = logging.getLogger("dbtypes.types.factory")

__all__ = [
    "available_backends",
    "get_registry",
    "get_is_type",
]


_BACKEND_MODULES = ("cassandra", "mongodb", "sql")

# Concrete SQL engines all share the SQL table
_ALIASES: Dict[str, str] = {
    "mysql": "sql",
    "mariadb": "sql",
    "postgresql": "sql",
    "postgres": "sql",
    "oracle": "sql",
    "mssql": "sql",
}


def available_backends() -> List[str]:
    """Canonical backend identifiers, sorted."""
    return list(_BACKEND_MODULES)


def _canonical(backend: Any) -> str:
    name = normalize_name(backend)
    if name is None:
        raise BackendNotFoundFault(backend, available_backends())
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in _BACKEND_MODULES:
        raise BackendNotFoundFault(backend, available_backends())
    return key


@lru_cache(maxsize=None)
def _create_registry(backend: str) -> TypeValidationRegistry:
    """Factory — build the registry for a canonical backend identifier."""
    if backend == "mongodb":
        from . import mongodb as module
    elif backend == "sql":
        from . import sql as module
    elif backend == "cassandra":
        from . import cassandra as module
    else:
        raise BackendNotFoundFault(backend, available_backends())
    logger.debug("Loading '%s' type table", backend)
    return TypeValidationRegistry(module.BACKEND, module.TYPES)


def get_registry(backend: Any) -> TypeValidationRegistry:
    """
    Return the registry for *backend*.

    Matching ignores case and surrounding whitespace; concrete SQL engine
    names (``mysql``, ``postgresql``...) resolve to ``sql``.

    Raises:
        BackendNotFoundFault: if *backend* is blank or unknown.
    """
    return _create_registry(_canonical(backend))


def get_is_type(backend: Any) -> Callable[[Any], bool]:
    """Return the ``contains`` probe of *backend*'s registry."""
    return get_registry(backend).contains
