"""
Shared test fixtures for the dbtypes test suite.
"""

import pytest

from dbtypes.types import available_backends, get_registry
from dbtypes.types.base import TypeValidationRegistry
from dbtypes.types import cassandra, mongodb, sql


# ============================================================================
# Registries
# ============================================================================


@pytest.fixture
def mongodb_types() -> TypeValidationRegistry:
    return get_registry("mongodb")


@pytest.fixture
def sql_types() -> TypeValidationRegistry:
    return get_registry("sql")


@pytest.fixture
def cassandra_types() -> TypeValidationRegistry:
    return get_registry("cassandra")


_TABLES = {
    "mongodb": mongodb.TYPES,
    "sql": sql.TYPES,
    "cassandra": cassandra.TYPES,
}


@pytest.fixture(params=available_backends())
def backend(request):
    """(registry, declared table as {str: set[str]}) for every backend."""
    declared = {
        str(t): {str(v) for v in validations}
        for t, validations in _TABLES[request.param].items()
    }
    return get_registry(request.param), declared


@pytest.fixture
def tiny_registry() -> TypeValidationRegistry:
    return TypeValidationRegistry("tiny", {
        "String": {"required", "pattern"},
        "Flag": set(),
    })


# ============================================================================
# Config isolation
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no DBTYPES_* variables set."""
    import os
    for key in list(os.environ):
        if key.startswith("DBTYPES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
