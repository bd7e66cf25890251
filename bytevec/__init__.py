from .buffer import BufferReader, NotEnoughBytesException, Reader, Writer
from .config import DEFAULT_CONFIG, VectorConfig
from .errors import (
    FatalVectorException,
    IntegerOverflowException,
    IntegerUnderflowException,
    OutOfMemoryException,
)
from .primitives import (
    Char,
    Int8,
    Int16,
    Int32,
    Int64,
    Integer,
    Pointer,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    WChar,
)
from .strings import CharString, StringBuilder, WideString
from .traits import Element
from .typed import (
    CharVector,
    Int8Vector,
    Int16Vector,
    Int32Vector,
    Int64Vector,
    PointerVector,
    TypedVector,
    UInt8Vector,
    UInt16Vector,
    UInt32Vector,
    UInt64Vector,
    WCharVector,
)
from .vector import ByteVector
