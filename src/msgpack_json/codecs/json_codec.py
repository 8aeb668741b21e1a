"""JSON text codec for the value model."""

import json
import logging
import math
from typing import Any
from ..models import Value
from ..types import JsonParseError, JsonSerializeError

logger = logging.getLogger(__name__)

# Integers outside the 64-bit range are parsed as floats.
INT_MIN = -(2 ** 63)
UINT_MAX = 2 ** 64 - 1

DEFAULT_INDENT = 2


def _parse_int(literal: str) -> Any:
    number = int(literal)
    if INT_MIN <= number <= UINT_MAX:
        return number
    return _parse_float(literal)


def _parse_float(literal: str) -> float:
    number = float(literal)
    if math.isinf(number):
        raise ValueError(f"number out of range: {literal[:32]}")
    return number


def _reject_constant(name: str) -> Any:
    raise ValueError(f"unsupported literal {name}")


def _ensure_utf8(obj: Any) -> None:
    """Reject strings holding lone surrogates, which UTF-8 cannot carry."""
    if isinstance(obj, str):
        obj.encode("utf-8")
    elif isinstance(obj, list):
        for item in obj:
            _ensure_utf8(item)
    elif isinstance(obj, dict):
        for key, item in obj.items():
            _ensure_utf8(key)
            _ensure_utf8(item)


def parse(text: str, sort_keys: bool = True) -> Value:
    """
    Parse a JSON document into a Value.

    Any JSON value is accepted at the root. A key repeated within one object
    keeps its last value.

    Args:
        text: JSON document
        sort_keys: Whether mappings store keys sorted

    Returns:
        Parsed Value

    Raises:
        JsonParseError: If the text is not a single well-formed JSON document
    """
    try:
        data = json.loads(
            text,
            parse_int=_parse_int,
            parse_float=_parse_float,
            parse_constant=_reject_constant
        )
        _ensure_utf8(data)
        value = Value.from_python(data, sort_keys=sort_keys)
    except json.JSONDecodeError as e:
        raise JsonParseError(f"{e.msg} at line {e.lineno} column {e.colno}",
                             context={"position": e.pos}) from e
    except UnicodeEncodeError as e:
        raise JsonParseError(f"invalid unicode code point: {e.reason}") from e
    except RecursionError as e:
        raise JsonParseError("recursion limit exceeded") from e
    except ValueError as e:
        raise JsonParseError(str(e)) from e

    logger.debug(f"Parsed JSON into {value.describe()}")
    return value


def serialize_pretty(value: Value, indent: int = DEFAULT_INDENT) -> str:
    """
    Render a Value as indented JSON text.

    Keys are written in the order the mapping stores them and non-ASCII
    text is written as-is.

    Args:
        value: Value to render
        indent: Spaces per nesting level

    Returns:
        JSON text

    Raises:
        JsonSerializeError: If the value cannot be rendered
    """
    try:
        return json.dumps(
            value.to_python(),
            indent=indent,
            ensure_ascii=False,
            allow_nan=False
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise JsonSerializeError(str(e)) from e
