import logging

import numpy as np

from sha1.constants import BLOCK_SIZE, LENGTH_FIELD_SIZE, MAX_MESSAGE_BITS
from sha1.errors import AllocationFailure, InputTooLarge

logger = logging.getLogger(__name__)


def padded_length(length: int) -> int:
    """Smallest multiple of 64 that holds the message, the 0x80 marker and the length field."""
    return (length + 1 + LENGTH_FIELD_SIZE + BLOCK_SIZE - 1) & ~(BLOCK_SIZE - 1)


def message_length(message, length: int | None = None) -> int:
    """Validate the caller's message and return the number of bytes to hash."""
    if not isinstance(message, (bytes, bytearray, memoryview)):
        logger.error(f"Unsupported message type: {type(message).__name__}")
        raise TypeError("message must be bytes, bytearray or memoryview")

    available = memoryview(message).nbytes
    if length is None:
        length = available
    elif isinstance(length, bool) or not isinstance(length, int):
        raise TypeError("length must be an integer")

    if length * 8 > MAX_MESSAGE_BITS:
        logger.error(f"Message length {length} exceeds the 64-bit bit-length field")
        raise InputTooLarge(length)
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if length > available:
        raise ValueError(f"length {length} exceeds message size {available}")
    return length


def pad_message(message, length: int | None = None) -> np.ndarray:
    """
    Build the padded buffer for a message.

    Layout: message bytes, a single 0x80 byte, zeros, then the original
    length in bits as a 64-bit big-endian integer in the last 8 bytes.
    The result is a fresh uint8 array whose size is a multiple of 64.
    """
    length = message_length(message, length)
    size = padded_length(length)

    try:
        buffer = np.zeros(size, dtype=np.uint8)
    except MemoryError as e:
        logger.error(f"Memory allocation failure for {size}-byte padded buffer")
        raise AllocationFailure(size) from e

    view = memoryview(message)
    if not view.c_contiguous:
        message = view.tobytes()
    if length:
        buffer[:length] = np.frombuffer(message, dtype=np.uint8, count=length)
    buffer[length] = 0x80
    bit_length = (length * 8).to_bytes(LENGTH_FIELD_SIZE, "big")
    buffer[-LENGTH_FIELD_SIZE:] = np.frombuffer(bit_length, dtype=np.uint8)

    logger.debug(f"Padded {length}-byte message to {size} bytes ({size // BLOCK_SIZE} blocks)")
    return buffer
