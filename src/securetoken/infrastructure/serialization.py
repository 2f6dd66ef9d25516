"""Pydantic integration for tokens.

Tokens travel as base64url text in JSON and stay ``Token`` objects in
Python mode. Python-mode validation also accepts text (the URL form) and
raw bytes (the binary form).
"""

from typing import TYPE_CHECKING, Any

from pydantic_core import core_schema

from securetoken.domain.scalar import is_byte_sequence

if TYPE_CHECKING:
    from securetoken.domain.token import Token


def token_core_schema(cls: type["Token"]) -> core_schema.CoreSchema:
    """Build the pydantic core schema for a token class.

    Decode failures raise ``DecodeError``, a ``ValueError``, which pydantic
    reports as a ``ValidationError``.
    """

    def validate_python(value: Any) -> "Token":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        if is_byte_sequence(value):
            return cls.from_binary(value)
        # Plain validators only convert ValueError into a validation error
        raise ValueError(f"expected token, str or bytes, got {type(value).__name__}")

    from_json = core_schema.chain_schema(
        [
            core_schema.str_schema(),
            core_schema.no_info_plain_validator_function(cls.from_text),
        ]
    )

    return core_schema.json_or_python_schema(
        json_schema=from_json,
        python_schema=core_schema.no_info_plain_validator_function(validate_python),
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda token: token.to_text(),
            when_used="json",
        ),
    )
