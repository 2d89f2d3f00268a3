from .cobs import (
    DELIMITER,
    MAX_BLOCK,
    MAX_CODE,
    bound,
    decode,
    decode_into,
    encode,
    encode_into,
    max_decoded_length,
    max_encoded_length,
)
from .buffer import OutputBuffer
from .errors import CapacityError, CobsError

__all__ = [
    "encode",
    "decode",
    "encode_into",
    "decode_into",
    "max_encoded_length",
    "max_decoded_length",
    "bound",
    "OutputBuffer",
    "CobsError",
    "CapacityError",
    "DELIMITER",
    "MAX_BLOCK",
    "MAX_CODE",
]
