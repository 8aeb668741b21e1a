"""
MessagePack codec for the value model.

Encodes a Value to MessagePack bytes and decodes the first MessagePack
object of a buffer back into a Value. Shapes JSON cannot express (binary
payloads, extension types, non-string map keys) are rejected rather than
coerced.
"""

import logging
import math
from typing import Any

import msgpack

from ..models import Value
from ..types import MessagePackDecodeError, MessagePackEncodeError

logger = logging.getLogger(__name__)


class _MapEntries(tuple):
    """Map entries in wire order, before key validation."""


def encode(value: Value) -> bytes:
    """
    Encode a Value to MessagePack bytes.

    Integers take the smallest encoding that fits, floats are written as
    float64 and map keys follow the mapping's stored order.

    Raises:
        MessagePackEncodeError: If a number does not fit any MessagePack type
    """
    try:
        packed = msgpack.packb(value.to_python(), use_bin_type=True)
    except (OverflowError, TypeError, ValueError) as e:
        raise MessagePackEncodeError(str(e)) from e

    logger.debug(f"Packed {value.describe()} into {len(packed)} bytes")
    return packed


def decode(data: bytes, sort_keys: bool = True) -> Value:
    """
    Decode the first MessagePack object in ``data``.

    Bytes following the first complete object are ignored.

    Args:
        data: MessagePack bytes
        sort_keys: Whether mappings store keys sorted

    Returns:
        Decoded Value

    Raises:
        MessagePackDecodeError: If the bytes are empty, truncated, malformed
            or hold a shape JSON cannot express
    """
    try:
        obj = msgpack.unpackb(
            data,
            raw=False,
            strict_map_key=False,
            object_pairs_hook=_MapEntries
        )
    except msgpack.ExtraData as extra:
        logger.debug(f"Ignoring {len(extra.extra)} trailing bytes")
        obj = extra.unpacked
    except (msgpack.UnpackException, ValueError, TypeError) as e:
        raise MessagePackDecodeError(_describe_unpack_error(e, data)) from e

    try:
        return _to_value(obj, sort_keys)
    except RecursionError as e:
        raise MessagePackDecodeError("recursion limit exceeded") from e


def _describe_unpack_error(error: Exception, data: bytes) -> str:
    if not data:
        return "empty input"
    if isinstance(error, UnicodeDecodeError):
        return f"invalid UTF-8 in string: {error.reason}"
    return str(error) or type(error).__name__


def _to_value(obj: Any, sort_keys: bool) -> Value:
    if obj is None:
        return Value.null()
    if isinstance(obj, bool):
        return Value.boolean(obj)
    if isinstance(obj, int):
        return Value.number(obj)
    if isinstance(obj, float):
        # JSON has no literal for NaN or infinities.
        if math.isnan(obj) or math.isinf(obj):
            return Value.null()
        return Value.number(obj)
    if isinstance(obj, str):
        return Value.string(obj)
    if isinstance(obj, _MapEntries):
        return Value.mapping(
            ((_map_key(key), _to_value(item, sort_keys)) for key, item in obj),
            sort_keys=sort_keys
        )
    if isinstance(obj, list):
        return Value.sequence(_to_value(item, sort_keys) for item in obj)
    if isinstance(obj, bytes):
        raise MessagePackDecodeError(
            f"binary payload of {len(obj)} bytes cannot be represented in JSON"
        )
    if isinstance(obj, msgpack.ExtType):
        raise MessagePackDecodeError(f"unsupported extension type {obj.code}")
    if isinstance(obj, msgpack.Timestamp):
        raise MessagePackDecodeError("unsupported extension type -1 (timestamp)")
    raise MessagePackDecodeError(f"unsupported MessagePack value {type(obj).__name__}")


def _map_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    kind = "binary" if isinstance(key, bytes) else type(key).__name__
    raise MessagePackDecodeError(f"map key must be a string, got {kind}")
