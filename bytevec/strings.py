"""Null-terminated narrow and wide strings built on a `ByteVector`.

The terminator is materialized lazily: `concat` keeps exactly one at the end,
and `view` appends one only when it is missing, so a chain of appends never
leaves stray zero elements in the middle of the string.
"""

import logging
import struct
from abc import abstractmethod
from collections.abc import Sequence
from typing import Self

from .config import DEFAULT_CONFIG, VectorConfig
from .errors import IntegerOverflowException, IntegerUnderflowException, fail
from .formatting import render, snprintf
from .primitives import Char, WChar
from .typed import TypedVector
from .vector import ByteVector


class StringBuilder[T: (Char, WChar), S: (bytes, str)](TypedVector[T]):
    @staticmethod
    @abstractmethod
    def encode(literal: S) -> list[int]: ...

    @staticmethod
    @abstractmethod
    def decode(data: bytes) -> S: ...

    @classmethod
    def _literal_units(cls, literal: S) -> list[int]:
        units = cls.encode(literal)
        if 0 in units:
            return units[: units.index(0)]
        return units

    @classmethod
    def from_literal(cls, literal: S, config: VectorConfig = DEFAULT_CONFIG) -> Self:
        string = cls(ByteVector(config=config))
        string._push_units(cls._literal_units(literal) + [0])
        return string

    def _push_units(self, units: Sequence[int]) -> None:
        element = self.element_type()
        self.push_many(element(unit) for unit in units)

    def _terminated(self) -> bool:
        return not self.empty() and self.back().value == 0

    def _strlen(self) -> int:
        for i, element in enumerate(self):
            if element.value == 0:
                return i
        return self.size

    def view(self) -> S:
        """Terminate the string if needed and return its content"""
        if not self._terminated():
            self.push_back(self.element_type()(0))
        return self.decode(bytes(self.data()[: self._strlen() * self.stride()]))

    def shrink_to_content(self) -> None:
        """Drop everything after the first terminator and release spare capacity"""
        if self._strlen() == self.size:
            self.push_back(self.element_type()(0))
        self.resize(self._strlen() + 1)
        self.vector.shrink_to_fit()

    def _concat_units(self, units: Sequence[int]) -> None:
        if self._terminated():
            self.pop_back()
        self._push_units([*units, 0])

    def concat(self, literal: S) -> None:
        self._concat_units(self._literal_units(literal))

    def concat_n(self, literal: S, n: int) -> None:
        if n < 0:
            fail(IntegerUnderflowException("integer underflow"))
        self._concat_units(self._literal_units(literal)[:n])

    def push_char(self, c: S | int) -> None:
        """Append one character, keeping a single trailing terminator"""
        if isinstance(c, int):
            unit = self.element_type().of(c).value
            self._concat_units([unit] if unit else [])
        else:
            assert len(c) <= 1
            self.concat(c)

    @classmethod
    def format(cls, fmt: S, *args, config: VectorConfig = DEFAULT_CONFIG) -> Self:
        units = cls.encode(render(fmt, args))

        string = cls(ByteVector(config=config))
        string.resize(config.default_format_size)
        while True:
            size = string.size
            snprintf(string, units)
            string[size - 1] = string.element_type()(0)
            if string._strlen() < size - 1:
                break

            if size * 2 * cls.stride() > config.max_size:
                fail(IntegerOverflowException("integer overflow"))
            logging.debug(f"Format buffer of {size} elements is too small, doubling")
            string.resize(size * 2)

        string.shrink_to_content()
        return string

    def printf(self, fmt: S, *args) -> None:
        """Replace the content with the formatted text"""
        rendered = self.format(fmt, *args, config=self.vector.config)
        self.vector.move_from(rendered.vector)
        rendered.vector.destroy()

    def append_formatted(self, fmt: S, *args) -> None:
        rendered = self.format(fmt, *args, config=self.vector.config)
        self.concat(rendered.view())
        rendered.vector.destroy()


class CharString(StringBuilder[Char, bytes]):
    @staticmethod
    def element_type() -> type[Char]:
        return Char

    @staticmethod
    def encode(literal: bytes) -> list[int]:
        return list(literal)

    @staticmethod
    def decode(data: bytes) -> bytes:
        return data


class WideString(StringBuilder[WChar, str]):
    """UTF-16 string, one `WChar` per code unit"""

    @staticmethod
    def element_type() -> type[WChar]:
        return WChar

    @staticmethod
    def encode(literal: str) -> list[int]:
        data = literal.encode("utf-16-le", "surrogatepass")
        return list(struct.unpack(f"<{len(data) // 2}H", data))

    @staticmethod
    def decode(data: bytes) -> str:
        return data.decode("utf-16-le", "surrogatepass")
