#!/usr/bin/env python3
"""
Quick start guide for the byte codec.

Run this to see every conversion applied to a sample payload.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bytecodec import ByteCodec, configure_logging


def main():
    """Run each conversion on a short UTF-8 payload."""

    configure_logging()

    print("=" * 70)
    print("BYTE CODEC QUICK START EXAMPLE")
    print("=" * 70)
    print()

    payload = "Man ☃".encode("utf-8")
    print(f"Payload: {payload!r} ({len(payload)} bytes)")
    print("-" * 70)
    print(f"✓ Text:    {ByteCodec.to_str(payload)}")
    print(f"✓ Hex:     {ByteCodec.to_hex(payload)}")
    print(f"✓ Base64:  {ByteCodec.to_base64(payload)}")
    print(f"✓ Stream:  {ByteCodec.to_stream(payload).read()!r}")
    print(f"✓ Empty?   {ByteCodec.is_empty(payload)}")
    print()

    print("Malformed UTF-8 is replaced, not rejected")
    print("-" * 70)
    malformed = b"ok\xff"
    print(f"✓ {malformed!r} -> {ByteCodec.to_str(malformed)!r}")
    print()

    print("None behaves like empty input")
    print("-" * 70)
    print(f"✓ to_hex(None) = {ByteCodec.to_hex(None)!r}")
    print(f"✓ is_empty(None) = {ByteCodec.is_empty(None)}")
    print()

    print("Everything at once")
    print("-" * 70)
    print(ByteCodec.describe(payload).model_dump_json(indent=2))


if __name__ == "__main__":
    main()
