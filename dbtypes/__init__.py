"""
dbtypes - Database field type capability registry

For each storage backend (document, relational, wide-column) declares the
closed set of field types it supports and, per type, the validations a
field of that type may carry. Entity generators use it to:

- offer only legal type choices
- offer only legal validation choices per type
- reject illegal combinations before generating code
"""

__version__ = "0.1.0"

from .faults import (
    Fault,
    FaultDomain,
    Severity,
    Found,
    UnknownType,
    TypeLookup,
    BackendNotFoundFault,
    ConfigInvalidFault,
    TableDefinitionFault,
    UnknownTypeFault,
    UnknownTypeError,
)

from .types import (
    TypeRegistry,
    TypeValidationRegistry,
    FieldType,
    Validation,
    is_blob_type,
    available_backends,
    get_registry,
    get_is_type,
)

from .config import RegistryConfig

__all__ = [
    "__version__",

    # Faults
    "Fault",
    "FaultDomain",
    "Severity",
    "Found",
    "UnknownType",
    "TypeLookup",
    "BackendNotFoundFault",
    "ConfigInvalidFault",
    "TableDefinitionFault",
    "UnknownTypeFault",
    "UnknownTypeError",

    # Registries
    "TypeRegistry",
    "TypeValidationRegistry",
    "FieldType",
    "Validation",
    "is_blob_type",
    "available_backends",
    "get_registry",
    "get_is_type",

    # Config
    "RegistryConfig",
]
