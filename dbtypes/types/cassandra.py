"""
Cassandra type table.

Wide-column store: no enums, no blobs, and dates are a single ``Date``
type. UUID is a first-class field type.
"""

from .field_types import FieldType as T
from .validations import Validation as V

__all__ = ["BACKEND", "TYPES"]

BACKEND = "cassandra"

_NUMERIC = (V.REQUIRED, V.MIN, V.MAX)

TYPES = {
    T.STRING: (V.REQUIRED, V.MINLENGTH, V.MAXLENGTH, V.PATTERN),
    T.INTEGER: _NUMERIC,
    T.LONG: _NUMERIC,
    T.BIG_DECIMAL: _NUMERIC,
    T.DATE: (V.REQUIRED,),
    T.UUID: (V.REQUIRED,),
    T.BOOLEAN: (V.REQUIRED,),
    T.FLOAT: _NUMERIC,
    T.DOUBLE: _NUMERIC,
}
