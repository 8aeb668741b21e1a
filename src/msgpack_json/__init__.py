"""
msgpack-json - Bidirectional JSON/MessagePack conversion.

Converts JSON text to base64-encoded MessagePack and hex or base64
MessagePack text back to pretty-printed JSON.
"""

__version__ = "1.0.0"

from .converter import MessagePackJsonConverter, json_to_messagepack, messagepack_to_json
from .models import Value, ValueKind
from .types import ConversionResult, ErrorType, TransportEncoding

__all__ = [
    "MessagePackJsonConverter",
    "json_to_messagepack",
    "messagepack_to_json",
    "Value",
    "ValueKind",
    "ConversionResult",
    "ErrorType",
    "TransportEncoding",
]
