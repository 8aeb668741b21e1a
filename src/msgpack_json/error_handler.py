"""Error handling implementation for the MessagePack/JSON converter."""

import logging
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ConversionError,
    ErrorType,
    InputKind,
    TransportEncoding,
    TransportDecodeError
)
from .transport import decide_encoding


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for conversion operations.

    Pre-validates input text and turns failed conversion stages into
    log entries and user-facing suggestions. Every conversion failure is
    terminal for its call, so no response ever offers recovery.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, text: str, kind: InputKind) -> ValidationResult:
        """
        Validate text before it is handed to a conversion.

        Args:
            text: Input text
            kind: Whether the text is JSON or encoded MessagePack

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []
        stage = ErrorType.JSON_PARSE if kind is InputKind.JSON else ErrorType.TRANSPORT_DECODE

        if not text.strip():
            errors.append(ValidationError(
                type=stage,
                message="Input is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if kind is InputKind.ENCODED:
            if text != text.strip():
                warnings.append("Input has surrounding whitespace, which is not part of "
                                "the hex or base64 alphabet.")
            encoding = decide_encoding(text.strip())
            if encoding is TransportEncoding.HEX and len(text.strip()) % 4 == 0:
                warnings.append("Input uses only hex digits and will be read as hex, "
                                "even if it was meant as base64.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """
        Log a failed conversion stage and suggest a fix.

        Args:
            error: ConversionError raised by a codec or the transport layer

        Returns:
            ErrorResponse with a stage-specific suggestion
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.JSON_PARSE:
            action = ("Check the JSON syntax near the reported position: quotes around "
                      "strings, commas between items and matching brackets.")
        elif error.error_type == ErrorType.TRANSPORT_DECODE:
            action = self._transport_action(error)
        elif error.error_type == ErrorType.MESSAGEPACK_DECODE:
            action = ("The bytes are not one complete MessagePack value that JSON can "
                      "express. Check the payload was copied in full and holds no "
                      "binary, extension or non-string-keyed data.")
        elif error.error_type == ErrorType.MESSAGEPACK_ENCODE:
            action = "A number in the input does not fit MessagePack's 64-bit types."
        elif error.error_type == ErrorType.JSON_SERIALIZE:
            action = "The decoded value cannot be written as JSON. Please report the input."
        else:
            action = "Unknown error type. Please check logs and retry."

        return ErrorResponse(
            can_recover=False,
            suggested_action=action,
            stage=error.error_type
        )

    def _transport_action(self, error: ConversionError) -> str:
        """Suggestion for an undecodable hex or base64 input."""
        if isinstance(error, TransportDecodeError) and error.encoding is TransportEncoding.HEX:
            return "Hex input must have an even number of digits."
        return ("Base64 input must use the standard alphabet (A-Z, a-z, 0-9, '+', '/') "
                "with '=' padding and no whitespace.")
