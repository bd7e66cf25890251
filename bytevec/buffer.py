from typing import Protocol


class Writer(Protocol):
    def write_byte(self, value: int) -> None: ...

    def write_bytes(self, data: bytes) -> None: ...


class NotEnoughBytesException(Exception):
    """A read of `expected` bytes at `offset` found only `actual` left"""

    offset: int
    expected: int
    actual: int

    def __init__(self, offset: int, expected: int, actual: int):
        self.offset = offset
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Reading {expected} bytes at offset {offset}, only {actual} remain"
        )


class Reader(Protocol):
    def read_byte(self) -> int: ...

    def read_bytes(self, n: int) -> bytes: ...


class BufferReader(Reader):
    _buffer: bytes | memoryview
    _index: int

    def __init__(self, buffer: bytes | memoryview, offset: int = 0):
        self._buffer = buffer
        self._index = offset

    def _assert_enough_bytes(self, n: int) -> None:
        if self._index + n > len(self._buffer):
            raise NotEnoughBytesException(
                self._index, n, len(self._buffer) - self._index
            )

    def read_byte(self) -> int:
        self._assert_enough_bytes(1)
        value = self._buffer[self._index]
        self._index += 1
        return value

    def read_bytes(self, n: int) -> bytes:
        self._assert_enough_bytes(n)
        value = bytes(self._buffer[self._index : self._index + n])
        self._index += n
        return value

    def remaining_length(self) -> int:
        return len(self._buffer) - self._index
