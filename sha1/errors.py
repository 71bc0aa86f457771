class SHA1Error(Exception):
    """Base class for failures of a single digest computation."""


class InputTooLarge(SHA1Error, ValueError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Message of {length} bytes ({length * 8} bits) does not fit the 64-bit length field"
        )


class AllocationFailure(SHA1Error, MemoryError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Could not allocate padded buffer of {size} bytes")
