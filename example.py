#!/usr/bin/env python3
"""
Example usage of the MessagePack/JSON converter.

This script converts a JSON document to MessagePack, reads it back from
both base64 and hex, and shows what failed conversions look like.
"""

import base64
import json
from msgpack_json import MessagePackJsonConverter, json_to_messagepack, messagepack_to_json


def main():
    """Main example function."""
    print("MessagePack <-> JSON Converter Example")
    print("=" * 50)

    sample_data = {
        "users": {
            "user_001": {
                "name": "Alice Johnson",
                "email": "alice@example.com",
                "profile": {
                    "age": 30,
                    "city": "New York",
                    "interests": ["reading", "hiking", "photography"]
                }
            },
            "user_002": {
                "name": "Bob Smith",
                "email": "bob@example.com",
                "profile": {
                    "age": 25,
                    "city": "San Francisco",
                    "interests": ["coding", "gaming", "music"]
                }
            }
        },
        "config": {
            "version": "1.0.0",
            "ratio": 0.75,
            "private_messaging": False,
            "motto": "Ünïcödé is fine"
        }
    }

    json_string = json.dumps(sample_data, indent=2, ensure_ascii=False)
    print(f"Original JSON size: {len(json_string.encode('utf-8'))} bytes")

    # JSON -> MessagePack (base64)
    packed = json_to_messagepack(json_string)
    if not packed.success:
        print(f"❌ {packed.error}")
        return

    raw = base64.b64decode(packed.output)
    print(f"✅ MessagePack size: {len(raw)} bytes")
    print(f"   Base64: {packed.output[:60]}...")
    print(f"   Hex:    {raw.hex()[:60]}...")

    # MessagePack (base64 or hex) -> JSON
    for label, encoded in (("base64", packed.output), ("hex", raw.hex())):
        restored = messagepack_to_json(encoded)
        status = "✅" if restored.success and json.loads(restored.output) == sample_data else "❌"
        print(f"{status} Round trip via {label}")

    # Keep keys in their original order instead of sorting them
    ordered = MessagePackJsonConverter(sort_keys=False)
    restored = ordered.messagepack_to_json(ordered.json_to_messagepack(json_string).output)
    print(f"\nInsertion-order output:\n{restored.output[:200]}...")

    # Failures come back as stage-labelled results, never as exceptions
    print("\nFailure examples:")
    for result in (
        json_to_messagepack('{"name":"Alice","city":Wonderland}'),
        messagepack_to_json("invalid_base64_string"),
        messagepack_to_json("83a"),
        messagepack_to_json("81a162c40100"),
    ):
        print(f"   ❌ {result.error}")
        print(f"      • {result.hint}")


if __name__ == "__main__":
    main()
