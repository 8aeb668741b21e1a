"""JSON and MessagePack codecs for the value model."""

from . import json_codec, msgpack_codec

__all__ = ["json_codec", "msgpack_codec"]
