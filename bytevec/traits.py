from typing import Protocol, Self

from .buffer import Reader, Writer


class Deserialize(Protocol):
    @classmethod
    def deserialize(cls, reader: Reader) -> Self: ...


class Serialize(Protocol):
    def serialize(self, writer: Writer) -> None: ...


class Element(Deserialize, Serialize, Protocol):
    """A value with a fixed encoded width, storable in a typed vector."""

    value: int

    @classmethod
    def stride(cls) -> int: ...
