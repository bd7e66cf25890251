import sys
from dataclasses import dataclass
from typing import Final


DEFAULT_CAPACITY: Final[int] = 16
DEFAULT_FORMAT_SIZE: Final[int] = 64
FILL_BYTE: Final[int] = 0xCD


@dataclass(frozen=True)
class VectorConfig:
    default_capacity: int = DEFAULT_CAPACITY
    """Capacity of the first allocation, in bytes"""

    default_format_size: int = DEFAULT_FORMAT_SIZE
    """Initial render buffer of the formatted builders, in elements"""

    max_size: int = sys.maxsize
    """Largest representable size; doubling past it is an overflow"""

    debug_fill: bool = False
    """Fill released and uninitialized bytes with `fill_byte`"""

    fill_byte: int = FILL_BYTE

    def __post_init__(self):
        if self.default_capacity <= 0:
            raise ValueError(f"default_capacity must be positive: {self.default_capacity}")
        if self.default_format_size < 2:
            raise ValueError(
                f"default_format_size must be at least 2: {self.default_format_size}"
            )
        if self.max_size < self.default_capacity:
            raise ValueError(
                f"max_size {self.max_size} is smaller than default_capacity"
            )
        if self.fill_byte < 0 or self.fill_byte > 0xFF:
            raise ValueError(f"fill_byte is out of range: {self.fill_byte}")


DEFAULT_CONFIG: Final[VectorConfig] = VectorConfig()
