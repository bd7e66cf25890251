"""Growable byte storage with explicit ownership.

A `ByteVector` owns at most one `bytearray`, sized to its capacity. Only the
first `len(vector)` bytes are in use; the rest is spare capacity whose content
is unspecified. Every reallocation creates a fresh `bytearray`, so a view
taken with `data()` keeps referring to the allocation it was taken from.
"""

from typing import Self

from .config import DEFAULT_CONFIG, VectorConfig
from .errors import (
    IntegerOverflowException,
    IntegerUnderflowException,
    OutOfMemoryException,
    fail,
)
from .primitives import Char, Int32, Pointer, UInt32, WChar


class ByteVector:
    _storage: bytearray | None
    _length: int
    _config: VectorConfig

    def __init__(self, data: bytes = b"", config: VectorConfig = DEFAULT_CONFIG):
        self._config = config
        self._storage = None
        self._length = 0
        self.append_bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes, config: VectorConfig = DEFAULT_CONFIG) -> Self:
        return cls(data, config)

    @classmethod
    def from_vector(cls, src: "ByteVector") -> Self:
        return cls(src.data(), src.config)

    @property
    def config(self) -> VectorConfig:
        return self._config

    @property
    def size(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return 0 if self._storage is None else len(self._storage)

    def __len__(self) -> int:
        return self._length

    def empty(self) -> bool:
        return self._length == 0

    def data(self) -> memoryview:
        """View of the bytes in use, valid until the next reallocation"""
        if self._storage is None:
            return memoryview(b"")
        return memoryview(self._storage)[: self._length]

    def to_bytes(self) -> bytes:
        return bytes(self.data())

    def _fill(self, storage: bytearray, start: int, stop: int) -> None:
        if self._config.debug_fill and stop > start:
            storage[start:stop] = bytes([self._config.fill_byte]) * (stop - start)

    def _reallocate(self, capacity: int) -> None:
        # capacity 0 releases the allocation
        size = self._length
        assert capacity >= size
        if capacity == 0:
            self._storage = None
            return

        try:
            storage = bytearray(capacity)
        except MemoryError:
            fail(OutOfMemoryException("out of memory"))
        if size:
            storage[:size] = self._storage[:size]
        self._fill(storage, size, capacity)
        self._storage = storage

    def destroy(self) -> None:
        """Release the allocation. The vector is left empty."""
        if self._storage is not None:
            self._fill(self._storage, 0, len(self._storage))
        self._storage = None
        self._length = 0

    def clear(self) -> None:
        self._length = 0
        if self._storage is not None:
            self._fill(self._storage, 0, len(self._storage))

    def clear_and_free(self) -> None:
        self.destroy()

    def copy_from(self, src: "ByteVector") -> None:
        if self is src:
            return
        self.destroy()
        self.append_bytes(src.data())

    def move_from(self, src: "ByteVector") -> None:
        """Take over `src`'s allocation along with the limits it was grown under"""
        if self is src:
            return
        self.destroy()
        self._storage, self._length = src._storage, src._length
        self._config = src._config
        src._storage, src._length = None, 0

    def swap(self, other: "ByteVector") -> None:
        self._storage, other._storage = other._storage, self._storage
        self._length, other._length = other._length, self._length
        self._config, other._config = other._config, self._config

    def reserve(self, size: int) -> None:
        """Make capacity at least `size` bytes, doubling as needed"""
        old_capacity = self.capacity
        new_capacity = old_capacity or self._config.default_capacity
        while new_capacity < size:
            if new_capacity * 2 > self._config.max_size:
                fail(IntegerOverflowException("integer overflow"))
            new_capacity *= 2

        if new_capacity > old_capacity:
            self._reallocate(new_capacity)

    def resize(self, size: int) -> None:
        """Set the length; bytes exposed by growing are not initialized"""
        if size < 0:
            fail(IntegerUnderflowException("integer underflow"))
        if size > self._length:
            self.reserve(size)
        elif self._storage is not None:
            self._fill(self._storage, size, self._length)
        self._length = size

    def shrink_to_fit(self) -> None:
        capacity = self.capacity
        while capacity and capacity // 2 >= self._length:
            capacity //= 2
        if capacity != self.capacity:
            self._reallocate(capacity)

    def append_bytes(self, data: bytes | memoryview) -> None:
        n = len(data)
        if not n:
            return
        old_size = self._length
        new_size = old_size + n
        if new_size > self._config.max_size:
            fail(IntegerOverflowException("integer overflow"))
        self.resize(new_size)
        self._storage[old_size:new_size] = data

    def append_vector(self, src: "ByteVector") -> None:
        assert self is not src
        self.append_bytes(src.data())

    def remove_last_bytes(self, n: int) -> None:
        if not n:
            return
        if n < 0 or n > self._length:
            fail(IntegerUnderflowException("integer underflow"))
        self.resize(self._length - n)

    def write_byte(self, value: int) -> None:
        self.append_bytes(bytes([value]))

    def write_bytes(self, data: bytes) -> None:
        self.append_bytes(data)

    def push_char(self, value: int) -> None:
        Char(value).serialize(self)

    def push_wchar(self, value: int) -> None:
        WChar(value).serialize(self)

    def push_int(self, value: int) -> None:
        Int32(value).serialize(self)

    def push_unsigned(self, value: int) -> None:
        UInt32(value).serialize(self)

    def push_ptr(self, value: int) -> None:
        Pointer(value).serialize(self)

    def __copy__(self) -> "ByteVector":
        return ByteVector.from_vector(self)

    def __deepcopy__(self, memo: dict) -> "ByteVector":
        return ByteVector.from_vector(self)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteVector):
            return NotImplemented
        return self.data() == other.data()

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"ByteVector({self.to_bytes()!r}, size={self._length}, "
            f"capacity={self.capacity})"
        )
