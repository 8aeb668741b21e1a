"""Data models for the MessagePack/JSON converter."""

from .value import Value, ValueKind

__all__ = ["Value", "ValueKind"]
