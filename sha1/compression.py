import numpy as np

from sha1.constants import BLOCK_SIZE, K0, K1, K2, K3, ROUNDS, SCHEDULE_LENGTH, WORD_MASK


def rotl32(x: int, n: int) -> int:
    return ((x << n) & WORD_MASK) | (x >> (32 - n))


def _rotl1(words: np.ndarray) -> np.ndarray:
    return (words << 1) | (words >> 31)


def _as_block(block) -> np.ndarray:
    if isinstance(block, (bytes, bytearray, memoryview)):
        view = memoryview(block)
        raw = np.frombuffer(view if view.c_contiguous else view.tobytes(), dtype=np.uint8)
    else:
        raw = np.ascontiguousarray(block, dtype=np.uint8)
    if raw.size != BLOCK_SIZE:
        raise ValueError(f"Block must be {BLOCK_SIZE} bytes, got {raw.size}")
    return raw


def expand_schedule(block) -> list[int]:
    """Expand one 64-byte block into the 80-word message schedule."""
    w = np.empty(SCHEDULE_LENGTH, dtype=np.uint32)
    w[:16] = _as_block(block).view(">u4")
    # w[t] only depends on w[t-3] and older, so three words can be derived at once
    for t in range(16, SCHEDULE_LENGTH, 3):
        n = min(3, SCHEDULE_LENGTH - t)
        w[t:t + n] = _rotl1(
            w[t - 3:t - 3 + n] ^ w[t - 8:t - 8 + n] ^ w[t - 14:t - 14 + n] ^ w[t - 16:t - 16 + n]
        )
    return w.tolist()


def _round_mix(t: int, b: int, c: int, d: int) -> tuple[int, int]:
    """Boolean function and round constant for round t."""
    if t < 20:
        return (b & c) | (~b & d), K0
    if t < 40:
        return b ^ c ^ d, K1
    if t < 60:
        return (b & c) | (b & d) | (c & d), K2
    return b ^ c ^ d, K3


def process_block(block, state: list[int]) -> None:
    """Fold one 64-byte block into the five-word hash state, in place."""
    if len(state) != 5:
        raise ValueError(f"Hash state must have 5 words, got {len(state)}")
    w = expand_schedule(block)

    a, b, c, d, e = state
    for t in range(ROUNDS):
        f, k = _round_mix(t, b, c, d)
        a, b, c, d, e = (rotl32(a, 5) + f + e + k + w[t]) & WORD_MASK, a, rotl32(b, 30), c, d

    state[:] = [(h + v) & WORD_MASK for h, v in zip(state, (a, b, c, d, e))]
