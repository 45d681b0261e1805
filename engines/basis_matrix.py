"""Orthonormal DCT-II basis matrix and a per-size cache."""

from typing import Dict
import numpy as np

from models.errors import InvalidSizeError
from utils.constants import MIN_BLOCK_SIZE, MAX_BLOCK_SIZE


def validate_block_size(N: int, max_size: int = MAX_BLOCK_SIZE) -> int:
    """Check N before any matrix work; returns N as a plain int."""
    if isinstance(N, bool) or not isinstance(N, (int, np.integer)):
        raise InvalidSizeError(f"Block size must be an integer, got {N!r}")
    if not (MIN_BLOCK_SIZE <= N <= max_size):
        raise InvalidSizeError(f"Block size must be {MIN_BLOCK_SIZE}-{max_size}, got {N}")
    return int(N)


def create_dct_matrix(N: int) -> np.ndarray:
    """
    Generate the N x N DCT-II basis matrix C.

        C[0, j] = 1 / sqrt(N)
        C[i, j] = sqrt(2 / N) * cos((2j + 1) * i * pi / (2N)),  i > 0

    Rows are orthonormal, so C @ C.T = I and C.T is the inverse operator.
    The returned array is read-only.
    """
    if isinstance(N, bool) or not isinstance(N, (int, np.integer)) or N < 1:
        raise InvalidSizeError(f"Block size must be a positive integer, got {N!r}")
    
    i = np.arange(N).reshape(-1, 1)
    j = np.arange(N).reshape(1, -1)
    C = np.sqrt(2.0 / N) * np.cos((2 * j + 1) * i * np.pi / (2 * N))
    C[0, :] = 1.0 / np.sqrt(N)
    
    C.flags.writeable = False
    return C


class BasisMatrixCache:
    """Memoization table of basis matrices keyed by block size."""
    
    def __init__(self, max_size: int = MAX_BLOCK_SIZE):
        self.max_size = max_size
        self._matrices: Dict[int, np.ndarray] = {}
    
    def get(self, N: int) -> np.ndarray:
        N = validate_block_size(N, self.max_size)
        matrix = self._matrices.get(N)
        if matrix is None:
            matrix = create_dct_matrix(N)
            self._matrices[N] = matrix
        return matrix
    
    def clear(self):
        self._matrices.clear()
    
    def __contains__(self, N) -> bool:
        return N in self._matrices
    
    def __len__(self) -> int:
        return len(self._matrices)
