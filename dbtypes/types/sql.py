"""
SQL type table (MySQL, PostgreSQL, MariaDB, Oracle, MSSQL).

Document store type set plus ``Instant``; columns may additionally carry a
``unique`` constraint, except booleans.
"""

from .field_types import FieldType as T
from .validations import Validation as V

__all__ = ["BACKEND", "TYPES"]

BACKEND = "sql"

_NUMERIC = (V.REQUIRED, V.UNIQUE, V.MIN, V.MAX)
_BLOB = (V.REQUIRED, V.UNIQUE, V.MINBYTES, V.MAXBYTES)

TYPES = {
    T.STRING: (V.REQUIRED, V.UNIQUE, V.MINLENGTH, V.MAXLENGTH, V.PATTERN),
    T.INTEGER: _NUMERIC,
    T.LONG: _NUMERIC,
    T.BIG_DECIMAL: _NUMERIC,
    T.LOCAL_DATE: (V.REQUIRED, V.UNIQUE),
    T.ZONED_DATE_TIME: (V.REQUIRED, V.UNIQUE),
    T.INSTANT: (V.REQUIRED, V.UNIQUE),
    T.BOOLEAN: (V.REQUIRED,),
    T.ENUM: (V.REQUIRED, V.UNIQUE),
    T.BLOB: _BLOB,
    T.ANY_BLOB: _BLOB,
    T.IMAGE_BLOB: _BLOB,
    T.TEXT_BLOB: _BLOB,
    T.FLOAT: _NUMERIC,
    T.DOUBLE: _NUMERIC,
}
