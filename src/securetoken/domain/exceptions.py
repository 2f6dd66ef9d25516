"""Exceptions raised by token generation and decoding."""


class TokenError(Exception):
    """Base class for all token errors."""

    pass


class RandomSourceError(TokenError):
    """Raised when the secure random source cannot supply the requested bytes."""

    def __init__(self, length: int, reason: str | None = None):
        self.length = length
        message = f"token: random source failed to supply {length} bytes"
        super().__init__(f"{message}: {reason}" if reason else message)


class DecodeError(TokenError, ValueError):
    """Raised when text is not valid unpadded base64url."""

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        text = f"token: {message}"
        super().__init__(f"{text} at position {position}" if position is not None else text)


class InvalidScalarTypeError(TokenError, TypeError):
    """Raised when a database value is not a byte sequence."""

    def __init__(self, value: object):
        self.value_type = type(value)
        super().__init__(
            f"token: invalid token data, expected bytes but got {self.value_type.__name__}"
        )
