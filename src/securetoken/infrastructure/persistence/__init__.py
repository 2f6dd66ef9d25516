"""Persistence support for tokens."""

from securetoken.infrastructure.persistence.types import TokenColumn

__all__ = ["TokenColumn"]
