"""Tests for the MessagePack codec."""

import msgpack
import pytest
from msgpack_json.codecs import msgpack_codec
from msgpack_json.models import Value, ValueKind
from msgpack_json.types import ErrorType, MessagePackDecodeError, MessagePackEncodeError


class TestMessagePackEncode:
    """Tests for msgpack_codec.encode."""

    def test_encode_reference_object(self, alice_hex):
        """Test the reference object packs to the known bytes."""
        value = Value.from_python({"name": "Alice", "age": 30, "city": "Wonderland"})

        assert msgpack_codec.encode(value).hex() == alice_hex

    @pytest.mark.parametrize("number,expected_hex", [
        (0, "00"),
        (127, "7f"),
        (128, "cc80"),
        (255, "ccff"),
        (256, "cd0100"),
        (65536, "ce00010000"),
        (2 ** 32, "cf0000000100000000"),
        (2 ** 64 - 1, "cfffffffffffffffff"),
        (-1, "ff"),
        (-32, "e0"),
        (-33, "d0df"),
        (-129, "d1ff7f"),
        (-(2 ** 63), "d38000000000000000"),
    ])
    def test_encode_smallest_integer(self, number, expected_hex):
        """Test integers take the smallest encoding that fits."""
        assert msgpack_codec.encode(Value.number(number)).hex() == expected_hex

    def test_encode_float_as_float64(self):
        """Test floats are written as float64."""
        assert msgpack_codec.encode(Value.number(1.5)).hex() == "cb3ff8000000000000"

    def test_encode_scalars(self):
        """Test nil, booleans and strings use their markers."""
        assert msgpack_codec.encode(Value.null()) == b"\xc0"
        assert msgpack_codec.encode(Value.boolean(False)) == b"\xc2"
        assert msgpack_codec.encode(Value.boolean(True)) == b"\xc3"
        assert msgpack_codec.encode(Value.string("hi")) == b"\xa2hi"

    def test_encode_string_length_is_in_bytes(self):
        """Test string headers count UTF-8 bytes, not characters."""
        packed = msgpack_codec.encode(Value.string("é" * 16))

        assert packed[:2] == b"\xd9\x20"

    def test_encode_follows_stored_key_order(self):
        """Test map keys are emitted in the mapping's stored order."""
        pairs = [("b", Value.number(1)), ("a", Value.number(2))]

        assert msgpack_codec.encode(Value.mapping(pairs)).hex() == "82a16102a16201"
        assert msgpack_codec.encode(Value.mapping(pairs, sort_keys=False)).hex() == "82a16201a16102"

    def test_encode_integer_overflow(self):
        """Test integers beyond 64 bits cannot be packed."""
        with pytest.raises(MessagePackEncodeError) as exc_info:
            msgpack_codec.encode(Value.number(2 ** 64))

        assert exc_info.value.error_type == ErrorType.MESSAGEPACK_ENCODE


class TestMessagePackDecode:
    """Tests for msgpack_codec.decode."""

    def test_decode_reference_object(self, alice_hex):
        """Test the reference bytes decode to the reference object."""
        value = msgpack_codec.decode(bytes.fromhex(alice_hex))

        assert value == Value.from_python({"name": "Alice", "age": 30, "city": "Wonderland"})

    def test_decode_insertion_order(self):
        """Test wire key order is kept when sorting is disabled."""
        data = bytes.fromhex("82a16201a16102")

        assert msgpack_codec.decode(data).keys() == ("a", "b")
        assert msgpack_codec.decode(data, sort_keys=False).keys() == ("b", "a")

    def test_decode_duplicate_map_keys_last_wins(self):
        """Test a key repeated on the wire keeps its last value."""
        value = msgpack_codec.decode(bytes.fromhex("82a16101a16102"))

        assert value == Value.from_python({"a": 2})

    def test_decode_ignores_trailing_bytes(self):
        """Test only the first complete value is used."""
        assert msgpack_codec.decode(b"\x01\xff\xc0") == Value.number(1)
        assert msgpack_codec.decode(b"\xc0\xc1") == Value.null()

    def test_decode_round_trip(self, mixed_data, unicode_data):
        """Test encode then decode gives back the same value."""
        for data in (mixed_data, unicode_data, {"key": "a" * 1000}):
            value = Value.from_python(data)
            assert msgpack_codec.decode(msgpack_codec.encode(value)) == value

    def test_decode_keeps_float_type(self):
        """Test float64 and float32 payloads stay floats."""
        assert msgpack_codec.decode(bytes.fromhex("cb3ff8000000000000")).data == 1.5
        assert msgpack_codec.decode(bytes.fromhex("ca3fc00000")).data == 1.5

    @pytest.mark.parametrize("hex_payload", [
        "cb7ff8000000000000",  # NaN
        "cb7ff0000000000000",  # +inf
        "cbfff0000000000000",  # -inf
    ])
    def test_decode_non_finite_float_to_null(self, hex_payload):
        """Test floats JSON cannot express become null."""
        assert msgpack_codec.decode(bytes.fromhex(hex_payload)).kind == ValueKind.NULL

    def test_decode_empty_input(self):
        """Test an empty buffer is rejected."""
        with pytest.raises(MessagePackDecodeError, match="empty input") as exc_info:
            msgpack_codec.decode(b"")

        assert exc_info.value.error_type == ErrorType.MESSAGEPACK_DECODE

    @pytest.mark.parametrize("hex_payload", [
        "a36162",      # str of 3 bytes, 2 present
        "92c0",        # array of 2, 1 present
        "cd01",        # uint16 missing a byte
        "81a161",      # map entry without value
    ])
    def test_decode_truncated(self, hex_payload):
        """Test truncated payloads are rejected."""
        with pytest.raises(MessagePackDecodeError):
            msgpack_codec.decode(bytes.fromhex(hex_payload))

    def test_decode_reserved_tag(self):
        """Test the never-used 0xc1 tag is rejected."""
        with pytest.raises(MessagePackDecodeError):
            msgpack_codec.decode(b"\xc1")

    def test_decode_invalid_utf8(self):
        """Test str payloads must be valid UTF-8."""
        with pytest.raises(MessagePackDecodeError, match="invalid UTF-8"):
            msgpack_codec.decode(b"\xa2\xff\xfe")

    def test_decode_rejects_binary(self):
        """Test bin payloads are rejected, not coerced."""
        with pytest.raises(MessagePackDecodeError, match="binary payload of 2 bytes"):
            msgpack_codec.decode(msgpack.packb({"blob": b"\x00\x01"}, use_bin_type=True))

    def test_decode_rejects_extension(self):
        """Test extension types are rejected."""
        with pytest.raises(MessagePackDecodeError, match="unsupported extension type 5"):
            msgpack_codec.decode(msgpack.packb(msgpack.ExtType(5, b"x")))

    def test_decode_rejects_timestamp(self):
        """Test the timestamp extension is rejected."""
        with pytest.raises(MessagePackDecodeError, match="timestamp"):
            msgpack_codec.decode(bytes.fromhex("d6ff00000000"))

    @pytest.mark.parametrize("hex_payload,kind", [
        ("810102", "int"),
        ("81c0a178", "NoneType"),
        ("81c401ffa178", "binary"),
        ("8191a161a178", "list"),
    ])
    def test_decode_rejects_non_string_keys(self, hex_payload, kind):
        """Test map keys must be strings."""
        with pytest.raises(MessagePackDecodeError, match=f"map key must be a string, got {kind}"):
            msgpack_codec.decode(bytes.fromhex(hex_payload))
