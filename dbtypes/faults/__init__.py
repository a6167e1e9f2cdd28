"""
dbtypes faults - structured error handling.

Errors are typed fault signals with a stable code, a domain and a
severity. Registry queries raise exactly one of them,
``UnknownTypeFault``; everything else is construction, selection or
configuration trouble.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain enumeration
- Severity: Severity levels
- Found / UnknownType / TypeLookup: non-raising lookup results
"""

from .core import (
    Fault,
    FaultDomain,
    Severity,
    Found,
    UnknownType,
    TypeLookup,
)

from .domains import (
    ConfigFault,
    ConfigMissingFault,
    ConfigInvalidFault,
    RegistryFault,
    BackendNotFoundFault,
    TableDefinitionFault,
    TypeFault,
    UnknownTypeFault,
    UnknownTypeError,
)

__all__ = [
    # Core types
    "Fault",
    "FaultDomain",
    "Severity",
    "Found",
    "UnknownType",
    "TypeLookup",

    # Domain faults
    "ConfigFault",
    "ConfigMissingFault",
    "ConfigInvalidFault",
    "RegistryFault",
    "BackendNotFoundFault",
    "TableDefinitionFault",
    "TypeFault",
    "UnknownTypeFault",
    "UnknownTypeError",
]
