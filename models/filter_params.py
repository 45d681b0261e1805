"""Filtering parameters."""

from dataclasses import dataclass
import numpy as np

from models.errors import InvalidSizeError
from utils.constants import MIN_BLOCK_SIZE, MAX_BLOCK_SIZE, DEFAULT_BLOCK_SIZE


@dataclass
class FilterParams:
    """Block DCT filtering parameters."""
    
    block_size: int = DEFAULT_BLOCK_SIZE
    max_block_size: int = MAX_BLOCK_SIZE
    
    def __post_init__(self):
        if self.max_block_size < MIN_BLOCK_SIZE:
            raise InvalidSizeError(
                f"Max block size must be at least {MIN_BLOCK_SIZE}, got {self.max_block_size}"
            )
        if isinstance(self.block_size, bool) or not isinstance(self.block_size, (int, np.integer)):
            raise InvalidSizeError(f"Block size must be an integer, got {self.block_size!r}")
        if not (MIN_BLOCK_SIZE <= self.block_size <= self.max_block_size):
            raise InvalidSizeError(
                f"Block size must be {MIN_BLOCK_SIZE}-{self.max_block_size}, got {self.block_size}"
            )
