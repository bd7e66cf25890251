import unittest

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
from .vector import ByteVector


class TestUnsigned(unittest.TestCase):
    cases = {
        UInt8(0): b"\x00",
        UInt8(0xFF): b"\xff",
        UInt16(0x1234): b"\x34\x12",
        UInt16(0xFFFF): b"\xff\xff",
        UInt32(0x12345678): b"\x78\x56\x34\x12",
        UInt64(0x123456789ABCDEF0): b"\xf0\xde\xbc\x9a\x78\x56\x34\x12",
    }

    def test_serialize(self):
        for value, expected in self.cases.items():
            with self.subTest(value=value):
                writer = ByteVector()
                value.serialize(writer)
                self.assertEqual(writer.to_bytes(), expected)

    def test_deserialize(self):
        for value, encoded in self.cases.items():
            with self.subTest(value=value):
                reader = BufferReader(encoded)
                self.assertEqual(type(value).deserialize(reader), value)

    def test_out_of_range(self):
        for cls, value in [(UInt8, 0x100), (UInt16, 0x10000), (UInt32, -1)]:
            with self.subTest(cls=cls.__name__, value=value):
                with self.assertRaises(ValueError):
                    cls(value)


class TestSigned(unittest.TestCase):
    cases = {
        Int8(-1): b"\xff",
        Int8(-128): b"\x80",
        Int16(-2): b"\xfe\xff",
        Int32(0x44556677): b"\x77\x66\x55\x44",
        Int64(-1): b"\xff" * 8,
    }

    def test_serialize(self):
        for value, expected in self.cases.items():
            with self.subTest(value=value):
                writer = ByteVector()
                value.serialize(writer)
                self.assertEqual(writer.to_bytes(), expected)

    def test_deserialize(self):
        for value, encoded in self.cases.items():
            with self.subTest(value=value):
                reader = BufferReader(encoded)
                self.assertEqual(type(value).deserialize(reader), value)

    def test_range(self):
        self.assertEqual(Int8.min_value(), -128)
        self.assertEqual(Int8.max_value(), 127)
        with self.assertRaises(ValueError):
            Int8(128)


class TestStride(unittest.TestCase):
    def test_stride(self):
        cases = {Char: 1, WChar: 2, Pointer: 4, Int32: 4, UInt64: 8}
        for cls, stride in cases.items():
            with self.subTest(cls=cls.__name__):
                self.assertEqual(cls.stride(), stride)


class TestCharacters(unittest.TestCase):
    def test_char_of(self):
        self.assertEqual(Char.of(b"a"), Char(0x61))
        self.assertEqual(Char.of(0x61), Char(0x61))

    def test_wchar_of(self):
        self.assertEqual(WChar.of("あ"), WChar(0x3042))
        self.assertEqual(WChar.of(0x41), WChar(0x41))

    def test_distinct_from_base(self):
        self.assertNotEqual(Char(1), UInt8(1))
