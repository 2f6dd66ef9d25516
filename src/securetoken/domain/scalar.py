"""Scalar values exchanged with persistence layers.

A scalar is what a database driver binds as a query parameter or hands back
for a single column. The set of kinds is closed.
"""

from datetime import datetime
from typing import Union

ScalarValue = Union[bytes, str, int, float, bool, datetime, None]

BYTE_SEQUENCE_TYPES = (bytes, bytearray, memoryview)

_SCALAR_TYPES = (bytes, str, int, float, bool, datetime)


def is_scalar_value(value: object) -> bool:
    """Check whether a value is one of the scalar kinds.

    Examples:
        >>> is_scalar_value(b"abc")
        True
        >>> is_scalar_value(None)
        True
        >>> is_scalar_value([1, 2])
        False
    """
    return value is None or isinstance(value, _SCALAR_TYPES)


def is_byte_sequence(value: object) -> bool:
    """Check whether a driver value carries raw bytes.

    ``bytearray`` and ``memoryview`` count as byte sequences since some
    drivers (psycopg for ``bytea``) return them instead of ``bytes``.
    """
    return isinstance(value, BYTE_SEQUENCE_TYPES)
