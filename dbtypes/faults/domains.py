"""
dbtypes faults - Domain-specific fault types.

Provides concrete fault classes for each domain:
- CONFIG faults
- REGISTRY faults
- TYPES faults
"""

from typing import Any, Optional, Sequence
from .core import Fault, FaultDomain, Severity


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigFault(Fault):
    """Base class for configuration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            severity=severity,
            retryable=False,
            public=False,
            metadata=metadata,
        )


class ConfigMissingFault(ConfigFault):
    """Required configuration is missing."""

    def __init__(self, key: str, **kwargs):
        super().__init__(
            code="CONFIG_MISSING",
            message=f"Required configuration key '{key}' is missing",
            metadata={"key": key, **kwargs.get("metadata", {})},
        )


class ConfigInvalidFault(ConfigFault):
    """Configuration value is invalid."""

    def __init__(self, key: str, reason: str, **kwargs):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Configuration key '{key}' is invalid: {reason}",
            metadata={"key": key, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# REGISTRY Faults
# ============================================================================

class RegistryFault(Fault):
    """Base class for registry construction and selection faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.REGISTRY,
            severity=severity,
            retryable=False,
            public=False,
            metadata=metadata,
        )


class BackendNotFoundFault(RegistryFault):
    """No registry exists for the requested backend identifier."""

    def __init__(self, backend: Any, available: Sequence[str] = (), **kwargs):
        super().__init__(
            code="BACKEND_NOT_FOUND",
            message=(
                f"No type registry for database type {backend!r}"
                + (f" (available: {', '.join(available)})" if available else "")
            ),
            metadata={"backend": backend, "available": list(available), **kwargs.get("metadata", {})},
        )


class TableDefinitionFault(RegistryFault):
    """A backend's type/validation table is malformed."""

    def __init__(self, backend: str, reason: str, **kwargs):
        super().__init__(
            code="TABLE_INVALID",
            message=f"Type table for '{backend}' is invalid: {reason}",
            metadata={"backend": backend, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# TYPES Faults
# ============================================================================

class TypeFault(Fault):
    """Base class for field type faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.ERROR,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.TYPES,
            severity=severity,
            retryable=False,
            public=True,
            metadata=metadata,
        )


class UnknownTypeFault(TypeFault):
    """Type name is null, blank, or not supported by the backend."""

    def __init__(self, type_name: Any, backend: str, **kwargs):
        self.type_name = type_name
        self.backend = backend
        super().__init__(
            code="WRONG_DATABASE_TYPE",
            message=f"Type {type_name!r} is not supported by the '{backend}' database type",
            metadata={"type_name": type_name, "backend": backend, **kwargs.get("metadata", {})},
        )


# Alias used by callers that catch by the conventional error name
UnknownTypeError = UnknownTypeFault
