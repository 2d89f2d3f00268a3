"""Pure-Python COBS (Consistent Overhead Byte Stuffing) encoder/decoder.

Wire format of a framed message: [COBS-encoded payload] [0x00 delimiter].
Nothing here writes or strips the delimiter; callers do that themselves.
"""

import logging
from typing import Optional

from .buffer import OutputBuffer, byte_view

log = logging.getLogger(__name__)

DELIMITER = 0x00
MAX_CODE = 0xFF
MAX_BLOCK = MAX_CODE - 1  # literal bytes in a full block


def max_encoded_length(data_length: int) -> int:
    """Worst-case encoded size of ``data_length`` bytes, excluding the delimiter."""
    if data_length < 0:
        raise ValueError(f"length must be non-negative, got {data_length}")
    return data_length + data_length // MAX_BLOCK + 1


bound = max_encoded_length


def max_decoded_length(encoded_length: int) -> int:
    """Upper bound on the bytes produced by decoding ``encoded_length`` bytes."""
    if encoded_length < 0:
        raise ValueError(f"length must be non-negative, got {encoded_length}")
    return encoded_length


def _prefix(view: memoryview, length: Optional[int]) -> memoryview:
    if length is None:
        return view
    if not 0 <= length <= len(view):
        raise ValueError(f"length {length} out of range for {len(view)}-byte input")
    return view[:length]


def encode_into(data, out, length: Optional[int] = None) -> int:
    """COBS-encode ``data`` into ``out``. Does NOT append the 0x00 delimiter.

    Returns the number of bytes written, or 0 if ``data`` or ``out`` is None.
    Size ``out`` with :func:`max_encoded_length`; a smaller buffer raises
    :class:`~cobs_codec.errors.CapacityError` once a write would overflow it.
    """
    if data is None or out is None:
        return 0

    src = _prefix(byte_view(data), length)
    remaining = len(src)

    with OutputBuffer(out) as buf:
        code_idx: Optional[int] = buf.reserve()
        code = 1

        for b in src:
            remaining -= 1
            if b:
                buf.append(b)
                code += 1

            if not b or code == MAX_CODE:
                buf.put(code_idx, code)
                code = 1
                # a full block at end of input needs no trailing code byte
                code_idx = buf.reserve() if (not b or remaining) else None

        if code_idx is not None:
            buf.put(code_idx, code)

        return buf.position


def decode_into(data, out, length: Optional[int] = None) -> int:
    """COBS-decode ``data`` into ``out``. Input must NOT include the delimiter.

    Decoding stops at the first zero code byte, which is consumed but not
    emitted. Returns the number of bytes written, or 0 if ``data`` or ``out``
    is None. Note that 0 is also the length of a valid empty message
    (``b"\\x01"``); callers needing to tell them apart should use
    :func:`decode`.
    """
    if data is None or out is None:
        return 0

    src = _prefix(byte_view(data), length)

    with OutputBuffer(out) as buf:
        code = MAX_CODE
        block = 0

        for b in src:
            if block:
                buf.append(b)
                block -= 1
                continue

            if code != MAX_CODE:
                buf.append(0)  # zero elided by the encoder
            code = b
            if code == DELIMITER:
                log.debug("delimiter code byte, stopping after %d bytes", buf.position)
                break
            block = code - 1

        return buf.position


def encode(data) -> bytes:
    """COBS-encode data and return it as bytes. Does NOT append the delimiter."""
    if data is None:
        raise TypeError("cannot encode None")
    src = byte_view(data)
    out = bytearray(max_encoded_length(len(src)))
    n = encode_into(src, out)
    return bytes(out[:n])


def decode(data) -> bytes:
    """COBS-decode data and return it as bytes. Input must NOT include the delimiter."""
    if data is None:
        raise TypeError("cannot decode None")
    src = byte_view(data)
    out = bytearray(max_decoded_length(len(src)))
    n = decode_into(src, out)
    return bytes(out[:n])
