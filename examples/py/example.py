#!/usr/bin/env python3
"""Example: frame messages for a byte stream and pull them back out."""

import sys

from cobs_codec import DELIMITER, decode_into, encode_into, max_encoded_length

MESSAGES = [b"hello", b"\x00\x01\x00", bytes(range(256)), b""]


def frame(payload: bytes) -> bytes:
    # size the buffer up front so the encoder never runs out of room
    buf = bytearray(max_encoded_length(len(payload)) + 1)
    n = encode_into(payload, buf)
    buf[n] = DELIMITER
    return bytes(buf[: n + 1])


stream = b"".join(frame(m) for m in MESSAGES)
print(f"{len(MESSAGES)} messages -> {len(stream)} bytes on the wire")

# split on the delimiter; encoded payloads never contain it
for i, chunk in enumerate(stream.split(bytes([DELIMITER]))[:-1]):
    out = bytearray(len(chunk))
    n = decode_into(chunk, out)
    ok = bytes(out[:n]) == MESSAGES[i]
    print(f"  #{i}: {len(chunk):3d} encoded -> {n:3d} decoded  {'ok' if ok else 'MISMATCH'}")
    if not ok:
        sys.exit(1)
