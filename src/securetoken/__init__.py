"""securetoken - random tokens for session keys and API tokens.

Tokens are generated from the operating system's secure random source and
encode to raw bytes, URL-safe base64 text and database values.
"""

__version__ = "0.1.0"

from securetoken.domain import (
    DecodeError,
    InvalidScalarTypeError,
    RandomSourceError,
    Token,
    TokenError,
    new,
)

__all__ = [
    "Token",
    "new",
    "TokenError",
    "RandomSourceError",
    "DecodeError",
    "InvalidScalarTypeError",
    "__version__",
]
