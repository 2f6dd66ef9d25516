"""SQLAlchemy column type for tokens.

Tokens are stored as raw bytes (``BLOB`` on SQLite, ``BYTEA`` on
PostgreSQL). Binding goes through ``Token.to_scalar`` and reading through
``Token.from_scalar``, so a column holding anything but bytes fails loudly
with ``InvalidScalarTypeError``.

Example:
    class SessionModel(Base):
        __tablename__ = "sessions"

        id: Mapped[int] = mapped_column(primary_key=True)
        token: Mapped[Token] = mapped_column(TokenColumn(32), unique=True)
"""

from typing import Any

from sqlalchemy.engine import Dialect
from sqlalchemy.types import LargeBinary, TypeDecorator

from securetoken.domain.token import Token


class TokenColumn(TypeDecorator[Token]):
    """Store a :class:`Token` in a binary column."""

    impl = LargeBinary
    cache_ok = True

    def __init__(self, length: int | None = None, **kwargs: Any) -> None:
        """Initialize the column type.

        Args:
            length: Optional column length in bytes, for dialects that use it.
        """
        super().__init__(length=length, **kwargs)

    @property
    def python_type(self) -> type[Token]:
        return Token

    def process_bind_param(self, value: Token | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        if not isinstance(value, Token):
            raise TypeError(f"expected Token, got {type(value).__name__}")
        return value.to_scalar()

    def process_result_value(self, value: Any, dialect: Dialect) -> Token | None:
        if value is None:
            return None
        return Token.from_scalar(value)
