"""
Field type catalog — every TypeName any backend declares.

Backends pick a subset of these; the catalog itself grants nothing.
"""

from __future__ import annotations

from typing import Any

from .choices import TextChoices


__all__ = ["FieldType", "BLOB_TYPES", "is_blob_type"]


class FieldType(TextChoices):
    """Closed set of abstract field type names."""

    STRING = "String"
    INTEGER = "Integer"
    LONG = "Long"
    BIG_DECIMAL = "BigDecimal", "Big decimal"
    FLOAT = "Float"
    DOUBLE = "Double"
    LOCAL_DATE = "LocalDate", "Local date"
    ZONED_DATE_TIME = "ZonedDateTime", "Zoned date time"
    INSTANT = "Instant"
    DATE = "Date"
    UUID = "UUID", "UUID"
    BOOLEAN = "Boolean"
    ENUM = "Enum"
    BLOB = "Blob"
    ANY_BLOB = "AnyBlob", "Any blob"
    IMAGE_BLOB = "ImageBlob", "Image blob"
    TEXT_BLOB = "TextBlob", "Text blob"


BLOB_TYPES = frozenset({
    FieldType.BLOB,
    FieldType.ANY_BLOB,
    FieldType.IMAGE_BLOB,
    FieldType.TEXT_BLOB,
})


def is_blob_type(name: Any) -> bool:
    """True for the binary types that take byte-size validations."""
    member = FieldType.lookup(name)
    return member is not None and member in BLOB_TYPES
