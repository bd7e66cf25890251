from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Self

from .buffer import Reader, Writer
from .traits import Element


def _deserialize_int(reader: Reader, bits: int, signed: bool) -> int:
    return int.from_bytes(reader.read_bytes(bits // 8), "little", signed=signed)


def _serialize_int(writer: Writer, value: int, bits: int, signed: bool) -> None:
    writer.write_bytes(value.to_bytes(bits // 8, "little", signed=signed))


@dataclass(frozen=True)
class Integer(ABC, Element):
    value: int

    @staticmethod
    @abstractmethod
    def bits() -> int: ...

    @staticmethod
    def signed() -> bool:
        return False

    @classmethod
    def min_value(cls) -> int:
        return -(1 << (cls.bits() - 1)) if cls.signed() else 0

    @classmethod
    def max_value(cls) -> int:
        return (1 << (cls.bits() - 1 if cls.signed() else cls.bits())) - 1

    def __post_init__(self):
        cls = self.__class__
        if self.value < cls.min_value() or self.value > cls.max_value():
            raise ValueError(f"Value {self.value} is out of range for {cls.__name__}")

    @classmethod
    def stride(cls) -> int:
        return cls.bits() // 8

    @classmethod
    def deserialize(cls, reader: Reader) -> Self:
        return cls(_deserialize_int(reader, cls.bits(), cls.signed()))

    def serialize(self, writer: Writer) -> None:
        cls = self.__class__
        _serialize_int(writer, self.value, cls.bits(), cls.signed())


@dataclass(frozen=True)
class UInt8(Integer):
    @staticmethod
    def bits() -> int:
        return 8


@dataclass(frozen=True)
class UInt16(Integer):
    @staticmethod
    def bits() -> int:
        return 16


@dataclass(frozen=True)
class UInt32(Integer):
    @staticmethod
    def bits() -> int:
        return 32


@dataclass(frozen=True)
class UInt64(Integer):
    @staticmethod
    def bits() -> int:
        return 64


@dataclass(frozen=True)
class Int8(Integer):
    @staticmethod
    def bits() -> int:
        return 8

    @staticmethod
    def signed() -> bool:
        return True


@dataclass(frozen=True)
class Int16(Integer):
    @staticmethod
    def bits() -> int:
        return 16

    @staticmethod
    def signed() -> bool:
        return True


@dataclass(frozen=True)
class Int32(Integer):
    @staticmethod
    def bits() -> int:
        return 32

    @staticmethod
    def signed() -> bool:
        return True


@dataclass(frozen=True)
class Int64(Integer):
    @staticmethod
    def bits() -> int:
        return 64

    @staticmethod
    def signed() -> bool:
        return True


@dataclass(frozen=True)
class Char(UInt8):
    """A narrow string element: one byte"""

    @classmethod
    def of(cls, c: bytes | int) -> Self:
        return cls(c if isinstance(c, int) else c[0])


@dataclass(frozen=True)
class WChar(UInt16):
    """A wide string element: one UTF-16 code unit"""

    @classmethod
    def of(cls, c: str | int) -> Self:
        return cls(c if isinstance(c, int) else ord(c))


@dataclass(frozen=True)
class Pointer(UInt32):
    """An address on a 32-bit target"""
