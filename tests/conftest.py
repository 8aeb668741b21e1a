"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


ALICE_JSON = '{"name":"Alice","age":30,"city":"Wonderland"}'
ALICE_HEX = "83a36167651ea463697479aa576f6e6465726c616e64a46e616d65a5416c696365"
ALICE_BASE64 = "g6NhZ2UepGNpdHmqV29uZGVybGFuZKRuYW1lpUFsaWNl"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def alice_json():
    """Flat object used by the reference conversions."""
    return ALICE_JSON


@pytest.fixture
def alice_hex():
    """MessagePack encoding of ``alice_json`` as hex."""
    return ALICE_HEX


@pytest.fixture
def alice_base64():
    """MessagePack encoding of ``alice_json`` as base64."""
    return ALICE_BASE64


@pytest.fixture
def nested_json():
    """Nested document with objects, arrays and booleans."""
    return '''{
        "person": {
            "name": "Bob",
            "age": 25,
            "address": {
                "street": "123 Elm Street",
                "city": "Somewhere",
                "zip": "12345"
            }
        },
        "hobbies": ["reading", "gaming", "hiking"],
        "is_student": false
    }'''


@pytest.fixture
def unicode_data():
    """Mapping with non-ASCII keys and values."""
    return {
        "ключ": "значение",
        "日本": "東京",
        "emoji": "🎉 party",
        "café": ["naïve", "résumé"]
    }


@pytest.fixture
def mixed_data():
    """Document touching every value shape."""
    return {
        "null": None,
        "flags": [True, False],
        "numbers": [0, -1, 127, 128, 255, 256, 65536, -32769, 2 ** 63, 1.5, -0.25],
        "text": "plain",
        "nested": {"list": [[], {}, [1, [2, [3]]]], "empty": ""}
    }
