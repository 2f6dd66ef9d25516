"""Token domain: the token type, its errors and encoding contracts."""

from securetoken.domain.contracts import (
    BinaryMarshaler,
    BinaryUnmarshaler,
    ScalarScanner,
    ScalarValuer,
    TextMarshaler,
    TextUnmarshaler,
)
from securetoken.domain.exceptions import (
    DecodeError,
    InvalidScalarTypeError,
    RandomSourceError,
    TokenError,
)
from securetoken.domain.scalar import ScalarValue, is_scalar_value
from securetoken.domain.token import Token, new

__all__ = [
    "Token",
    "new",
    "TokenError",
    "RandomSourceError",
    "DecodeError",
    "InvalidScalarTypeError",
    "ScalarValue",
    "is_scalar_value",
    "BinaryMarshaler",
    "BinaryUnmarshaler",
    "TextMarshaler",
    "TextUnmarshaler",
    "ScalarValuer",
    "ScalarScanner",
]
