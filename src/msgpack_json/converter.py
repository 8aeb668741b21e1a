"""Conversion orchestrator tying the codecs and transport together."""

import logging
from typing import Optional
from .types import (
    ConverterInterface,
    ConversionError,
    ConversionResult,
    JsonParseError,
    JsonSerializeError,
    MessagePackDecodeError,
    MessagePackEncodeError,
    TransportDecodeError,
    TransportEncoding
)
from .codecs import json_codec, msgpack_codec
from .error_handler import ErrorHandler
from . import transport


class MessagePackJsonConverter(ConverterInterface):
    """
    Converts JSON text to MessagePack and back.

    Each call runs its stages in order and stops at the first failure,
    returning a ConversionResult whose error names the failed stage.
    Instances hold configuration only, so one converter can serve any
    number of threads.
    """

    def __init__(self, indent: int = json_codec.DEFAULT_INDENT,
                 sort_keys: bool = True,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            indent: Spaces per nesting level in JSON output
            sort_keys: Store and emit object keys sorted; when False, keys
                keep the order they were read in
            logger: Optional logger instance
        """
        if indent < 0:
            raise ValueError("indent must be non-negative")

        self.indent = indent
        self.sort_keys = sort_keys
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)

    def json_to_messagepack(self, json_text: str) -> ConversionResult:
        """
        Convert JSON text to base64-encoded MessagePack.

        Args:
            json_text: JSON document

        Returns:
            ConversionResult with base64 text on success
        """
        try:
            value = json_codec.parse(json_text, sort_keys=self.sort_keys)
        except JsonParseError as e:
            return self._fail(e, "Failed to parse JSON")

        try:
            packed = msgpack_codec.encode(value)
        except MessagePackEncodeError as e:
            return self._fail(e, "Failed to serialize to MessagePack")

        self.logger.info(f"Converted JSON ({len(json_text)} chars) to "
                         f"MessagePack ({len(packed)} bytes)")
        return ConversionResult.ok(transport.encode_base64(packed))

    def messagepack_to_json(self, encoded_text: str) -> ConversionResult:
        """
        Convert hex or base64 MessagePack text to pretty-printed JSON.

        Args:
            encoded_text: MessagePack bytes as hex or base64 text

        Returns:
            ConversionResult with JSON text on success
        """
        try:
            packed = transport.decode(encoded_text)
        except TransportDecodeError as e:
            if e.encoding is TransportEncoding.HEX:
                return self._fail(e, "Failed to decode Hex")
            return self._fail(e, "Failed to decode Base64")

        try:
            value = msgpack_codec.decode(packed, sort_keys=self.sort_keys)
        except MessagePackDecodeError as e:
            return self._fail(e, "Failed to deserialize MessagePack")

        try:
            json_text = json_codec.serialize_pretty(value, indent=self.indent)
        except JsonSerializeError as e:
            return self._fail(e, "Failed to serialize to JSON")

        self.logger.info(f"Converted MessagePack ({len(packed)} bytes) to "
                         f"JSON ({len(json_text)} chars)")
        return ConversionResult.ok(json_text)

    def _fail(self, error: ConversionError, stage_label: str) -> ConversionResult:
        response = self.error_handler.handle_conversion_error(error)
        return ConversionResult.failed(error, stage_label, hint=response.suggested_action)


# Default converter backing the module-level functions
_default_converter = MessagePackJsonConverter()


def json_to_messagepack(json_text: str) -> ConversionResult:
    """Convert JSON text to base64 MessagePack with default settings."""
    return _default_converter.json_to_messagepack(json_text)


def messagepack_to_json(encoded_text: str) -> ConversionResult:
    """Convert hex or base64 MessagePack text to JSON with default settings."""
    return _default_converter.messagepack_to_json(encoded_text)
