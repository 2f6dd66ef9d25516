"""Random tokens with binary, text and database encodings.

A token is an immutable run of bytes drawn from the operating system's
secure random source. It can be encoded as raw bytes, as unpadded
base64url text (safe in URL paths and query strings) and as a database
scalar. Decoding always builds a new token; a failed decode leaves any
existing token untouched.
"""

import base64
import hmac
import re
import secrets
from typing import Any

from securetoken.core.config import get_settings
from securetoken.core.logging import get_logger
from securetoken.domain.exceptions import (
    DecodeError,
    InvalidScalarTypeError,
    RandomSourceError,
)
from securetoken.domain.scalar import ScalarValue, is_byte_sequence

logger = get_logger(__name__)

# Anything outside the RFC 4648 base64url alphabet, padding included
_ILLEGAL_TEXT = re.compile(r"[^A-Za-z0-9_-]")

# Tokens shorter than this are still generated, with a warning
MIN_RECOMMENDED_LENGTH = 16


def encode_text(data: bytes) -> str:
    """Encode bytes as base64url without padding.

    Examples:
        >>> encode_text(bytes([0xFB, 0xEF]))
        '--8'
        >>> encode_text(b"")
        ''
    """
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode_text(text: str | bytes) -> bytes:
    """Strictly decode unpadded base64url.

    Args:
        text: Encoded token as ``str`` or ASCII bytes.

    Returns:
        The decoded bytes.

    Raises:
        DecodeError: If the text has characters outside the alphabet, an
            impossible length, or non-zero trailing bits.
    """
    if is_byte_sequence(text):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as e:
            raise DecodeError("illegal base64url data", position=e.start) from e
    elif not isinstance(text, str):
        raise TypeError(f"expected str or bytes, got {type(text).__name__}")

    match = _ILLEGAL_TEXT.search(text)
    if match:
        raise DecodeError("illegal base64url data", position=match.start())

    # One leftover character holds only 6 bits and can't form a byte
    if len(text) % 4 == 1:
        raise DecodeError(f"invalid length {len(text)} for unpadded base64url")

    data = base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))

    if encode_text(data) != text:
        raise DecodeError("non-zero trailing bits", position=len(text) - 1)

    return data


class Token:
    """Cryptographically random byte sequence.

    Tokens compare in constant time and hash by content. ``str(token)``
    gives the base64url text and ``bytes(token)`` the raw bytes; ``repr``
    never shows the secret.

    Example:
        token = Token.generate(32)
        url = f"/sessions/{token}"
        assert Token.from_text(token.to_text()) == token
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        """Create a token holding a copy of ``data``.

        Raises:
            TypeError: If ``data`` is not bytes-like.
        """
        if not is_byte_sequence(data):
            raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
        self._data = bytes(data)

    @classmethod
    def generate(cls, length: int | None = None) -> "Token":
        """Generate a token of ``length`` bytes from the secure random source.

        Thread-Safety:
            Bytes come from ``secrets.token_bytes`` which is safe to call
            from many threads at once; no locking happens here.

        Args:
            length: Number of bytes. Defaults to ``Settings.default_length``.

        Returns:
            A new token of exactly ``length`` bytes.

        Raises:
            TypeError: If ``length`` is not an integer.
            ValueError: If ``length`` is negative.
            RandomSourceError: If the random source fails or comes up short.
        """
        if length is None:
            length = get_settings().default_length

        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError(f"token length must be an int, got {type(length).__name__}")
        if length < 0:
            raise ValueError(f"token length must be non-negative, got {length}")

        if length < MIN_RECOMMENDED_LENGTH:
            logger.warning(
                "Generating token below recommended length",
                length=length,
                min_recommended_length=MIN_RECOMMENDED_LENGTH,
            )

        try:
            data = secrets.token_bytes(length)
        except (OSError, NotImplementedError) as e:
            logger.error("Secure random source failed", length=length, error=str(e))
            raise RandomSourceError(length, str(e)) from e

        if len(data) != length:
            logger.error("Secure random source returned short read", length=length, received=len(data))
            raise RandomSourceError(length, f"short read of {len(data)} bytes")

        return cls(data)

    # Binary contract

    def to_binary(self) -> bytes:
        """Return the raw bytes."""
        return self._data

    @classmethod
    def from_binary(cls, data: bytes | bytearray | memoryview) -> "Token":
        """Build a token from raw bytes. Any byte sequence is accepted."""
        return cls(data)

    # Text contract

    def to_text(self) -> str:
        """Return the token as unpadded base64url text."""
        return encode_text(self._data)

    @classmethod
    def from_text(cls, text: str | bytes) -> "Token":
        """Build a token from unpadded base64url text.

        Raises:
            DecodeError: If ``text`` is not strict unpadded base64url.
        """
        try:
            data = decode_text(text)
        except DecodeError as e:
            logger.debug("Rejected token text", reason=str(e), length=len(text))
            raise
        return cls(data)

    # Database scalar contract

    def to_scalar(self) -> ScalarValue:
        """Return the value to bind as a query parameter (the raw bytes)."""
        return self.to_binary()

    @classmethod
    def from_scalar(cls, value: Any) -> "Token":
        """Build a token from a value read back from a database column.

        Raises:
            InvalidScalarTypeError: If ``value`` is not a byte sequence.
        """
        if not is_byte_sequence(value):
            logger.debug("Rejected token scalar", value_type=type(value).__name__)
            raise InvalidScalarTypeError(value)
        return cls.from_binary(value)

    # Framework hooks

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from securetoken.infrastructure.serialization import token_core_schema

        return token_core_schema(cls)

    def __reduce__(self) -> tuple[Any, ...]:
        return (self.__class__.from_binary, (self.to_binary(),))

    # Value behaviour

    def __bytes__(self) -> bytes:
        return self.to_binary()

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<{len(self._data)} bytes>)"

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return hmac.compare_digest(self._data, other._data)

    def __hash__(self) -> int:
        return hash((Token, self._data))


def new(length: int | None = None) -> Token:
    """Generate a random token. Shorthand for :meth:`Token.generate`."""
    return Token.generate(length)
