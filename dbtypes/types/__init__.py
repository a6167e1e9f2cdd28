"""
dbtypes types — per-backend field type and validation registries.

Usage:
    from dbtypes.types import get_registry

    mongo = get_registry("mongodb")
    mongo.get_validations_for_type("String")
    # frozenset({'required', 'minlength', 'maxlength', 'pattern'})
"""

from .base import (
    TypeRegistry,
    TypeValidationRegistry,
    TypeValidationTable,
    build_table,
    normalize_name,
)
from .field_types import FieldType, BLOB_TYPES, is_blob_type
from .validations import Validation
from .factory import available_backends, get_registry, get_is_type

__all__ = [
    "TypeRegistry",
    "TypeValidationRegistry",
    "TypeValidationTable",
    "build_table",
    "normalize_name",
    "FieldType",
    "BLOB_TYPES",
    "is_blob_type",
    "Validation",
    "available_backends",
    "get_registry",
    "get_is_type",
]
