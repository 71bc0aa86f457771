import hashlib

import numpy as np
import pytest

from sha1.digest import sha1_bytes
from sha1.errors import AllocationFailure, InputTooLarge
from sha1.padding import message_length, pad_message, padded_length
from sha1 import padding


def expected_padded_length(length):
    return -(-(length + 9) // 64) * 64


@pytest.mark.parametrize("length", range(0, 129))
def test_padded_length_covers_marker_and_length_field(length):
    size = padded_length(length)
    assert size == expected_padded_length(length)
    assert size % 64 == 0
    assert size > length


@pytest.mark.parametrize("length", range(0, 129))
def test_padding_layout(length):
    message = bytes((i * 7 + 3) % 256 for i in range(length))
    buffer = pad_message(message)

    assert buffer.dtype == np.uint8
    assert len(buffer) == padded_length(length)
    assert bytes(buffer[:length]) == message
    assert buffer[length] == 0x80
    assert not buffer[length + 1:-8].any()
    assert int.from_bytes(bytes(buffer[-8:]), "big") == length * 8


class TestBlockBoundary:
    def test_55_bytes_fit_one_block(self):
        assert len(pad_message(b"a" * 55)) == 64

    def test_56_bytes_spill_into_second_block(self):
        assert len(pad_message(b"a" * 56)) == 128

    @pytest.mark.parametrize("length", range(56, 64))
    def test_lengths_near_boundary_get_two_blocks(self, length):
        assert len(pad_message(b"x" * length)) == 128

    def test_64_bytes(self):
        buffer = pad_message(b"y" * 64)
        assert len(buffer) == 128
        assert buffer[64] == 0x80


def test_empty_message():
    buffer = pad_message(b"")
    assert len(buffer) == 64
    assert buffer[0] == 0x80
    assert not buffer[1:].any()


def test_explicit_length_uses_prefix():
    buffer = pad_message(b"abcdef", 3)
    assert bytes(buffer[:4]) == b"abc\x80"
    assert int.from_bytes(bytes(buffer[-8:]), "big") == 24


def test_accepts_bytearray_and_memoryview():
    expected = bytes(pad_message(b"hello"))
    assert bytes(pad_message(bytearray(b"hello"))) == expected
    assert bytes(pad_message(memoryview(b"hello"))) == expected


def test_fresh_buffer_per_call():
    first = pad_message(b"abc")
    second = pad_message(b"abc")
    first[0] = 0
    assert second[0] == ord("a")


def test_rejects_str():
    with pytest.raises(TypeError):
        pad_message("abc")


def test_rejects_non_integer_length():
    with pytest.raises(TypeError):
        message_length(b"abc", 1.5)


@pytest.mark.parametrize("length", [-1, 4])
def test_rejects_out_of_range_length(length):
    with pytest.raises(ValueError):
        message_length(b"abc", length)


def test_input_too_large():
    length = 2 ** 61
    with pytest.raises(InputTooLarge) as info:
        pad_message(b"", length)
    assert info.value.length == length
    assert isinstance(info.value, ValueError)


def test_largest_representable_length_is_accepted_by_check():
    with pytest.raises(ValueError) as info:
        message_length(b"", 2 ** 61 - 1)
    assert not isinstance(info.value, InputTooLarge)


def test_allocation_failure(monkeypatch):
    def fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(padding.np, "zeros", fail)
    with pytest.raises(AllocationFailure) as info:
        pad_message(b"abc")
    assert info.value.size == 64
    assert isinstance(info.value.__cause__, MemoryError)


def test_strided_memoryview_is_copied_before_padding():
    view = memoryview(b"abcdef")[::2]
    buffer = pad_message(view)
    assert bytes(buffer[:4]) == b"ace\x80"
    assert int.from_bytes(bytes(buffer[-8:]), "big") == 24


@pytest.mark.parametrize("data", [b"abcdef", bytes(range(256)) * 3])
def test_strided_memoryview_digest_matches_hashlib(data):
    view = memoryview(data)[::2]
    assert sha1_bytes(view) == hashlib.sha1(bytes(view)).digest()
