"""
dbtypes Type Registry — shared engine behind every backend.

A backend contributes only a data table ``{type name: validation names}``.
``TypeValidationRegistry`` freezes that table at construction and answers
every query against it:

- get_types()                         → all declared type names
- contains(candidate)                 → safe membership probe, never raises
- resolve(type_name)                  → Found | UnknownType, never raises
- get_validations_for_type(t)         → strict, raises UnknownTypeFault
- is_validation_supported_for_type()  → strict on the type, soft on the validation
- to_value_name_object_array()        → [{"value": t, "name": t}, ...]

``None``, non-strings, empty and whitespace-only strings are all one
"absent" input (see ``normalize_name``). Name matching is exact and
case-sensitive.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Protocol,
    runtime_checkable,
)

from ..faults.core import Found, TypeLookup, UnknownType
from ..faults.domains import TableDefinitionFault, UnknownTypeFault
from .validations import Validation

logger = logging.getLogger("dbtypes.types.base")

__all__ = [
    "TypeRegistry",
    "TypeValidationRegistry",
    "TypeValidationTable",
    "build_table",
    "normalize_name",
]


TypeValidationTable = Mapping[str, FrozenSet[str]]


def normalize_name(value: Any) -> Optional[str]:
    """
    Collapse every "absent" input to None.

    Returns None for None, non-strings, and empty or whitespace-only
    strings. Any other string is returned unchanged.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def build_table(backend: str, table: Mapping[str, Iterable[str]]) -> TypeValidationTable:
    """
    Freeze a backend's ``{type: validations}`` mapping.

    Keeps declaration order. Raises TableDefinitionFault if a type name is
    blank, a validation set is None, or a validation name is unknown.
    """
    frozen: Dict[str, FrozenSet[str]] = {}
    for type_name, validations in table.items():
        if normalize_name(type_name) is None:
            raise TableDefinitionFault(backend, f"blank type name {type_name!r}")
        if validations is None:
            raise TableDefinitionFault(
                backend, f"type '{type_name}' has no validation set"
            )
        names = frozenset(str(v) for v in validations)
        unknown = sorted(n for n in names if not Validation.exists(n))
        if unknown:
            raise TableDefinitionFault(
                backend,
                f"type '{type_name}' declares unknown validations: {', '.join(unknown)}",
            )
        frozen[str(type_name)] = names
    return MappingProxyType(frozen)


# ============================================================================
# Contract
# ============================================================================

@runtime_checkable
class TypeRegistry(Protocol):
    """Query contract shared by every backend registry."""

    def get_types(self) -> FrozenSet[str]:
        ...

    def contains(self, candidate: Any) -> bool:
        ...

    def get_validations_for_type(self, type_name: Any) -> FrozenSet[str]:
        ...

    def is_validation_supported_for_type(self, type_name: Any, validation_name: Any) -> bool:
        ...

    def to_value_name_object_array(self) -> List[Dict[str, str]]:
        ...


# ============================================================================
# Engine
# ============================================================================

class TypeValidationRegistry:
    """
    Immutable {type → validations} table for one backend.

    Usage:
        registry = TypeValidationRegistry("mongodb", {
            "String": {"required", "minlength", "maxlength", "pattern"},
            "Boolean": {"required"},
        })
        registry.contains("String")                                  # True
        registry.is_validation_supported_for_type("String", "min")   # False
        registry.get_validations_for_type("Money")                   # raises UnknownTypeFault
    """

    __slots__ = ("_backend", "_table", "_types")

    def __init__(self, backend: str, table: Mapping[str, Iterable[str]]):
        self._backend = backend
        self._table = build_table(backend, table)
        self._types = frozenset(self._table)
        logger.debug(
            "Built '%s' type registry with %d types", backend, len(self._types)
        )

    @property
    def backend(self) -> str:
        return self._backend

    # ── Queries ──────────────────────────────────────────────────────

    def get_types(self) -> FrozenSet[str]:
        """All type names this backend supports."""
        return self._types

    def contains(self, candidate: Any) -> bool:
        """Safe probe: True only for a declared type name."""
        name = normalize_name(candidate)
        return name is not None and name in self._table

    def resolve(self, type_name: Any) -> TypeLookup:
        """Look up *type_name* without raising."""
        name = normalize_name(type_name)
        if name is not None and name in self._table:
            return Found(name, self._table[name])
        return UnknownType(UnknownTypeFault(type_name, self._backend))

    def get_validations_for_type(self, type_name: Any) -> FrozenSet[str]:
        """
        Validation names declared for *type_name*.

        Raises:
            UnknownTypeFault: if the type is None, blank, or not declared.
        """
        return self._require(type_name).validations

    def is_validation_supported_for_type(self, type_name: Any, validation_name: Any) -> bool:
        """
        True if *validation_name* may be attached to *type_name*.

        The type is checked strictly first (UnknownTypeFault). A blank or
        unrecognised validation name is simply not supported.
        """
        found = self._require(type_name)
        name = normalize_name(validation_name)
        return name is not None and name in found.validations

    def to_value_name_object_array(self) -> List[Dict[str, str]]:
        """One ``{"value": t, "name": t}`` entry per type, for selection lists."""
        return [{"value": name, "name": name} for name in self._table]

    def _require(self, type_name: Any) -> Found:
        lookup = self.resolve(type_name)
        if isinstance(lookup, UnknownType):
            logger.debug(
                "Rejected type %r for '%s' database type", type_name, self._backend
            )
            raise lookup.fault
        return lookup

    # ── Container protocol ───────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __repr__(self) -> str:
        return f"<TypeValidationRegistry backend={self._backend!r} types={len(self._table)}>"
