"""
Validation catalog — every constraint kind a field may declare.

A backend table may only reference names listed here.
"""

from __future__ import annotations

from typing import Any

from .choices import TextChoices


__all__ = ["Validation"]


class Validation(TextChoices):
    """Closed set of validation names."""

    REQUIRED = "required", "Required"
    UNIQUE = "unique", "Unique"
    MINLENGTH = "minlength", "Minimum length"
    MAXLENGTH = "maxlength", "Maximum length"
    PATTERN = "pattern", "Regular expression pattern"
    MIN = "min", "Minimum value"
    MAX = "max", "Maximum value"
    MINBYTES = "minbytes", "Minimum size in bytes"
    MAXBYTES = "maxbytes", "Maximum size in bytes"

    @classmethod
    def exists(cls, name: Any) -> bool:
        """True if *name* is a known validation name."""
        return cls.lookup(name) is not None

    @classmethod
    def needs_value(cls, name: Any) -> bool:
        """
        True if the validation takes an argument (``minlength(3)``).

        ``required`` and ``unique`` are bare flags. Unknown names return False.
        """
        member = cls.lookup(name)
        if member is None:
            return False
        return member not in (cls.REQUIRED, cls.UNIQUE)
