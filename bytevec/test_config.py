import unittest

from .config import DEFAULT_CONFIG, VectorConfig


class TestVectorConfig(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(DEFAULT_CONFIG.default_capacity, 16)
        self.assertEqual(DEFAULT_CONFIG.default_format_size, 64)
        self.assertEqual(DEFAULT_CONFIG.fill_byte, 0xCD)
        self.assertFalse(DEFAULT_CONFIG.debug_fill)

    def test_invalid(self):
        cases = [
            {"default_capacity": 0},
            {"default_format_size": 1},
            {"max_size": 8},
            {"fill_byte": 0x100},
        ]
        for kwargs in cases:
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    VectorConfig(**kwargs)
