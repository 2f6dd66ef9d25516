"""Capability protocols for encoding values.

Serializers check these with ``isinstance`` to find out how a value can be
encoded. Marshalers are checked against instances, unmarshalers against the
class since decoding constructs a new value.
"""

from typing import Any, Protocol, runtime_checkable

from securetoken.domain.scalar import ScalarValue


@runtime_checkable
class BinaryMarshaler(Protocol):
    def to_binary(self) -> bytes: ...


@runtime_checkable
class BinaryUnmarshaler(Protocol):
    def from_binary(self, data: bytes) -> Any: ...


@runtime_checkable
class TextMarshaler(Protocol):
    def to_text(self) -> str: ...


@runtime_checkable
class TextUnmarshaler(Protocol):
    def from_text(self, text: str | bytes) -> Any: ...


@runtime_checkable
class ScalarValuer(Protocol):
    def to_scalar(self) -> ScalarValue: ...


@runtime_checkable
class ScalarScanner(Protocol):
    def from_scalar(self, value: ScalarValue) -> Any: ...
