from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from .buffer import BufferReader
from .primitives import (
    Char,
    Int8,
    Int16,
    Int32,
    Int64,
    Pointer,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    WChar,
)
from .traits import Element
from .vector import ByteVector


class TypedVector[T: Element](ABC):
    """Element-count view of a `ByteVector`.

    Holds nothing but the vector it reads and writes. The byte length of the
    vector is expected to be a multiple of the stride while it is used
    through this view.
    """

    vector: ByteVector

    def __init__(self, vector: ByteVector | None = None) -> None:
        self.vector = ByteVector() if vector is None else vector

    @staticmethod
    @abstractmethod
    def element_type() -> type[T]: ...

    @classmethod
    def stride(cls) -> int:
        return cls.element_type().stride()

    @property
    def size(self) -> int:
        return len(self.vector) // self.stride()

    @property
    def capacity(self) -> int:
        return self.vector.capacity // self.stride()

    def __len__(self) -> int:
        return self.size

    def empty(self) -> bool:
        return self.vector.empty()

    def data(self) -> memoryview:
        return self.vector.data()

    def at(self, index: int) -> T:
        assert 0 <= index < self.size, f"index {index} out of range"
        stride = self.stride()
        reader = BufferReader(self.vector.data(), index * stride)
        return self.element_type().deserialize(reader)

    def set(self, index: int, value: T) -> None:
        assert 0 <= index < self.size, f"index {index} out of range"
        stride = self.stride()
        scratch = ByteVector()
        value.serialize(scratch)
        self.vector.data()[index * stride : (index + 1) * stride] = scratch.data()

    def back(self) -> T:
        assert not self.empty()
        return self.at(self.size - 1)

    def push_back(self, value: T) -> None:
        value.serialize(self.vector)

    def push_many(self, values: Iterable[T]) -> None:
        scratch = ByteVector()
        for value in values:
            value.serialize(scratch)
        self.vector.append_vector(scratch)

    def pop_back(self) -> None:
        self.vector.remove_last_bytes(self.stride())

    def resize(self, count: int) -> None:
        self.vector.resize(count * self.stride())

    def reserve_count(self, count: int) -> None:
        self.vector.reserve(count * self.stride())

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[T]:
        for i in range(self.size):
            yield self.at(i)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"


class CharVector(TypedVector[Char]):
    @staticmethod
    def element_type() -> type[Char]:
        return Char


class WCharVector(TypedVector[WChar]):
    @staticmethod
    def element_type() -> type[WChar]:
        return WChar


class Int8Vector(TypedVector[Int8]):
    @staticmethod
    def element_type() -> type[Int8]:
        return Int8


class Int16Vector(TypedVector[Int16]):
    @staticmethod
    def element_type() -> type[Int16]:
        return Int16


class Int32Vector(TypedVector[Int32]):
    @staticmethod
    def element_type() -> type[Int32]:
        return Int32


class Int64Vector(TypedVector[Int64]):
    @staticmethod
    def element_type() -> type[Int64]:
        return Int64


class UInt8Vector(TypedVector[UInt8]):
    @staticmethod
    def element_type() -> type[UInt8]:
        return UInt8


class UInt16Vector(TypedVector[UInt16]):
    @staticmethod
    def element_type() -> type[UInt16]:
        return UInt16


class UInt32Vector(TypedVector[UInt32]):
    @staticmethod
    def element_type() -> type[UInt32]:
        return UInt32


class UInt64Vector(TypedVector[UInt64]):
    @staticmethod
    def element_type() -> type[UInt64]:
        return UInt64


class PointerVector(TypedVector[Pointer]):
    @staticmethod
    def element_type() -> type[Pointer]:
        return Pointer

