import logging
import struct
from typing import Iterator

import numpy as np

from sha1.compression import process_block
from sha1.constants import BLOCK_SIZE, INITIAL_STATE
from sha1.padding import pad_message

logger = logging.getLogger(__name__)


def initial_state() -> list[int]:
    return list(INITIAL_STATE)


def iter_blocks(buffer: np.ndarray) -> Iterator[np.ndarray]:
    for offset in range(0, len(buffer), BLOCK_SIZE):
        yield buffer[offset:offset + BLOCK_SIZE]


def sha1(message, length: int | None = None) -> tuple[int, ...]:
    """
    Compute the SHA-1 digest of the first `length` bytes of `message`
    (the whole message when `length` is omitted).

    Returns the final hash state as five unsigned 32-bit words.
    Raises InputTooLarge or AllocationFailure instead of returning a
    partial digest.
    """
    buffer = pad_message(message, length)
    state = initial_state()

    for block in iter_blocks(buffer):
        process_block(block, state)

    logger.debug(f"Processed {len(buffer) // BLOCK_SIZE} blocks, state: {[hex(h) for h in state]}")
    return tuple(state)


def sha1_bytes(message, length: int | None = None) -> bytes:
    return struct.pack(">5I", *sha1(message, length))


def sha1_hex(message, length: int | None = None) -> str:
    return sha1_bytes(message, length).hex()


def format_digest(words) -> str:
    return " ".join(f"{word:08X}" for word in words)
