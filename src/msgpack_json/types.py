"""Core type definitions for the MessagePack/JSON converter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class ErrorType(Enum):
    """Enumeration of conversion stages that can fail."""
    JSON_PARSE = "json_parse"
    MESSAGEPACK_ENCODE = "messagepack_encode"
    MESSAGEPACK_DECODE = "messagepack_decode"
    TRANSPORT_DECODE = "transport_decode"
    JSON_SERIALIZE = "json_serialize"


class TransportEncoding(Enum):
    """Textual alphabets used to carry MessagePack bytes."""
    HEX = "hex"
    BASE64 = "base64"


class InputKind(Enum):
    """Kind of text handed to a conversion."""
    JSON = "json"
    ENCODED = "encoded"


@dataclass
class ConversionResult:
    """Result of a single conversion call."""
    success: bool
    output: str
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None
    hint: Optional[str] = None

    @classmethod
    def ok(cls, output: str) -> 'ConversionResult':
        return cls(success=True, output=output)

    @classmethod
    def failed(cls, error: 'ConversionError', stage_label: str,
               hint: Optional[str] = None) -> 'ConversionResult':
        return cls(
            success=False,
            output="",
            error=f"{stage_label}: {error}",
            error_type=error.error_type,
            hint=hint
        )


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    stage: ErrorType


class ConversionError(Exception):
    """Base exception for a failed conversion stage."""

    error_type: Optional[ErrorType] = None

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message)
        self.context = context


class JsonParseError(ConversionError):
    """Malformed JSON text."""
    error_type = ErrorType.JSON_PARSE


class MessagePackEncodeError(ConversionError):
    """A value could not be packed as MessagePack."""
    error_type = ErrorType.MESSAGEPACK_ENCODE


class MessagePackDecodeError(ConversionError):
    """Truncated, invalid or unsupported MessagePack bytes."""
    error_type = ErrorType.MESSAGEPACK_DECODE


class TransportDecodeError(ConversionError):
    """Invalid hex or base64 text."""
    error_type = ErrorType.TRANSPORT_DECODE

    def __init__(self, message: str, encoding: TransportEncoding,
                 context: Optional[Any] = None):
        super().__init__(message, context)
        self.encoding = encoding


class JsonSerializeError(ConversionError):
    """A value could not be rendered as JSON text."""
    error_type = ErrorType.JSON_SERIALIZE


# Abstract base classes for interfaces

class ConverterInterface(ABC):
    """Abstract interface for the MessagePack/JSON converter."""

    @abstractmethod
    def json_to_messagepack(self, json_text: str) -> ConversionResult:
        """Convert JSON text to base64-encoded MessagePack."""
        pass

    @abstractmethod
    def messagepack_to_json(self, encoded_text: str) -> ConversionResult:
        """Convert hex or base64 MessagePack text to pretty-printed JSON."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, text: str, kind: InputKind) -> ValidationResult:
        """Validate text before conversion."""
        pass

    @abstractmethod
    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """Handle a failed conversion stage."""
        pass
