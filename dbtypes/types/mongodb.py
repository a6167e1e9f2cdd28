"""
MongoDB type table.

Document store: dates, enums and every blob flavour are available; there
is no uniqueness constraint at the field level.
"""

from .field_types import FieldType as T
from .validations import Validation as V

__all__ = ["BACKEND", "TYPES"]

BACKEND = "mongodb"

_NUMERIC = (V.REQUIRED, V.MIN, V.MAX)
_BLOB = (V.REQUIRED, V.MINBYTES, V.MAXBYTES)

TYPES = {
    T.STRING: (V.REQUIRED, V.MINLENGTH, V.MAXLENGTH, V.PATTERN),
    T.INTEGER: _NUMERIC,
    T.LONG: _NUMERIC,
    T.BIG_DECIMAL: _NUMERIC,
    T.LOCAL_DATE: (V.REQUIRED,),
    T.ZONED_DATE_TIME: (V.REQUIRED,),
    T.BOOLEAN: (V.REQUIRED,),
    T.ENUM: (V.REQUIRED,),
    T.BLOB: _BLOB,
    T.ANY_BLOB: _BLOB,
    T.IMAGE_BLOB: _BLOB,
    T.TEXT_BLOB: _BLOB,
    T.FLOAT: _NUMERIC,
    T.DOUBLE: _NUMERIC,
}
