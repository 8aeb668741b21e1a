"""
Textual transport for MessagePack bytes.

Output is always standard padded base64. Input may be hex or base64; the
alphabet is guessed from the characters alone. Text made only of hex digits
is read as hex, so a base64 payload that happens to use only ``0-9a-fA-F``
is misread. That ambiguity is accepted: there is no tag to disambiguate.
"""

import base64
import binascii
import logging
import string

from .types import TransportDecodeError, TransportEncoding

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard, padded base64 text."""
    return base64.b64encode(data).decode("ascii")


def encode_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex text."""
    return data.hex()


def decide_encoding(text: str) -> TransportEncoding:
    """
    Classify encoded text as hex or base64.

    Text is hex only if every character is a hex digit (either case);
    anything else, including text with whitespace, is base64. The empty
    string counts as hex.
    """
    if all(char in HEX_DIGITS for char in text):
        return TransportEncoding.HEX
    return TransportEncoding.BASE64


def decode(text: str) -> bytes:
    """
    Decode hex or base64 text to bytes.

    Args:
        text: Encoded text, alphabet detected by ``decide_encoding``

    Returns:
        Decoded bytes

    Raises:
        TransportDecodeError: On odd-length hex, characters outside the
            base64 alphabet or bad padding
    """
    encoding = decide_encoding(text)
    logger.debug(f"Decoding {len(text)} chars as {encoding.value}")

    try:
        if encoding is TransportEncoding.HEX:
            return binascii.unhexlify(text)
        return base64.b64decode(text, validate=True)
    except ValueError as e:
        raise TransportDecodeError(str(e), encoding) from e
