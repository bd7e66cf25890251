import unittest

from .buffer import BufferReader, NotEnoughBytesException


class TestBufferReader(unittest.TestCase):
    def test_read_byte(self):
        reader = BufferReader(bytes([1, 2, 3, 4, 5]))

        self.assertEqual(reader.read_byte(), 1)
        self.assertEqual(reader.read_byte(), 2)

    def test_read_bytes(self):
        reader = BufferReader(bytes([1, 2, 3, 4, 5]))

        self.assertEqual(reader.read_bytes(3), bytes([1, 2, 3]))
        self.assertEqual(reader.read_bytes(2), bytes([4, 5]))

    def test_read_bytes_not_enough(self):
        reader = BufferReader(bytes([1, 2, 3, 4, 5]))

        with self.assertRaises(NotEnoughBytesException):
            reader.read_bytes(6)

    def test_offset(self):
        reader = BufferReader(memoryview(bytes([1, 2, 3, 4, 5])), 3)
        self.assertEqual(reader.remaining_length(), 2)
        self.assertEqual(reader.read_bytes(2), bytes([4, 5]))

    def test_not_enough_reports_position(self):
        reader = BufferReader(bytes([1, 2, 3, 4, 5]), 3)

        with self.assertRaises(NotEnoughBytesException) as raised:
            reader.read_bytes(4)
        self.assertEqual(raised.exception.offset, 3)
        self.assertEqual(raised.exception.expected, 4)
        self.assertEqual(raised.exception.actual, 2)
