"""Block processing: splitting into tiles and merging back."""

import numpy as np
from typing import List, Tuple


def split_into_blocks(
    channel: np.ndarray,
    block_size: int,
    scale: float = 1.0
) -> List[Tuple[int, int, np.ndarray]]:
    """
    Split 2D channel into BxB blocks, row-major from the top-left corner.

    Cells of edge tiles that fall outside the image stay zero.
    """
    h, w = channel.shape
    blocks = []
    for i in range(0, h, block_size):
        for j in range(0, w, block_size):
            tile = channel[i:i+block_size, j:j+block_size]
            block = np.zeros((block_size, block_size), dtype=np.float64)
            block[:tile.shape[0], :tile.shape[1]] = tile * scale
            blocks.append((i, j, block))
    return blocks


def merge_blocks(
    blocks: List[Tuple[int, int, np.ndarray]],
    shape: Tuple[int, int],
    block_size: int,
    scale: float = 1.0
) -> np.ndarray:
    """Merge blocks back into 2D channel, dropping out-of-bounds cells."""
    h, w = shape
    result = np.zeros((h, w), dtype=np.float64)
    for (i, j, block) in blocks:
        end_i = min(i + block_size, h)
        end_j = min(j + block_size, w)
        block_h = end_i - i
        block_w = end_j - j
        result[i:end_i, j:end_j] = block[:block_h, :block_w] / scale
    return result
