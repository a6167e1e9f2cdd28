"""
dbtypes choices — string enum helper for the closed name catalogs.

Provides TextChoices, a ``str`` Enum whose members compare equal to their
value and carry a human label.

Usage:
    from dbtypes.types.choices import TextChoices

    class Engine(TextChoices):
        MONGODB = "mongodb", "MongoDB"
        SQL = "sql"

    Engine.values    # ["mongodb", "sql"]
    Engine.choices   # [("mongodb", "MongoDB"), ("sql", "Sql")]
"""

from __future__ import annotations

from enum import Enum, EnumType
from typing import Any, List, Optional, Tuple


__all__ = [
    "TextChoices",
]


class _ChoicesMeta(EnumType):
    """Metaclass that adds .choices / .values / .labels properties to Enum classes."""

    @property
    def choices(cls) -> List[Tuple[Any, str]]:
        return [(m.value, m.label) for m in cls]

    @property
    def values(cls) -> List[Any]:
        return [m.value for m in cls]

    @property
    def labels(cls) -> List[str]:
        return [m.label for m in cls]


class TextChoices(str, Enum, metaclass=_ChoicesMeta):
    """
    String-valued choices enum.

    Members may be defined as:
        NAME = "value", "Human Label"   → explicit label
        NAME = "value"                  → auto-generated label from name
    """

    def __new__(cls, value: str, label: str | None = None):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj._label = label
        return obj

    def __init__(self, value: str, label: str | None = None):
        if label is not None:
            self._label = label
        else:
            self._label = self.name.replace("_", " ").title()

    @property
    def label(self) -> str:
        return self._label

    @classmethod
    def lookup(cls, name: Any) -> Optional["TextChoices"]:
        """Return the member whose value is exactly *name*, or None."""
        if not isinstance(name, str):
            return None
        try:
            return cls(name)
        except ValueError:
            return None

    def __str__(self) -> str:
        return str(self.value)
