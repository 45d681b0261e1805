"""Coefficient mask: which DCT coefficients survive reconstruction."""

from typing import Dict, Tuple
import numpy as np

from models.errors import InvalidSizeError, DimensionMismatchError


class CoefficientMask:
    """
    Boolean N x N grid over the DCT coefficients of a block.

    ``mask[row, col]`` addresses ``coeffs[row, col]``: ``row`` is the
    vertical frequency and ``col`` the horizontal frequency of a top-down,
    left-to-right block. True means the coefficient is retained.

    Resizing resets every entry to True; components of different sizes
    are different signals, so prior state is discarded.
    """

    def __init__(self, size: int):
        self._grid = self._all(size, True)

    @classmethod
    def all_on(cls, size: int) -> 'CoefficientMask':
        return cls(size)

    @classmethod
    def all_off(cls, size: int) -> 'CoefficientMask':
        mask = cls(size)
        mask.set_all(False)
        return mask

    @classmethod
    def from_array(cls, array) -> 'CoefficientMask':
        """Build a mask from any square 2D array-like of truthy values."""
        grid = np.asarray(array, dtype=bool)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise DimensionMismatchError(f"Mask must be square 2D, got shape {grid.shape}")
        mask = cls(grid.shape[0])
        mask._grid[:] = grid
        return mask

    @staticmethod
    def _all(size: int, value: bool) -> np.ndarray:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
            raise InvalidSizeError(f"Mask size must be a positive integer, got {size!r}")
        return np.full((int(size), int(size)), value, dtype=bool)

    @property
    def size(self) -> int:
        return self._grid.shape[0]

    def _check_index(self, row: int, col: int):
        n = self.size
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"Coefficient ({row}, {col}) outside {n}x{n} mask")

    def get(self, row: int, col: int) -> bool:
        self._check_index(row, col)
        return bool(self._grid[row, col])

    def set(self, row: int, col: int, value: bool) -> None:
        self._check_index(row, col)
        self._grid[row, col] = bool(value)

    def toggle(self, row: int, col: int) -> bool:
        """Flip one entry and return its new state."""
        self._check_index(row, col)
        self._grid[row, col] = not self._grid[row, col]
        return bool(self._grid[row, col])

    def set_entries(self, entries: Dict[Tuple[int, int], bool]) -> None:
        """Apply several entries at once; nothing changes if any index is invalid."""
        for row, col in entries:
            self._check_index(row, col)
        for (row, col), value in entries.items():
            self._grid[row, col] = bool(value)

    def set_all(self, value: bool) -> None:
        self._grid[:] = bool(value)

    def resize(self, size: int) -> None:
        self._grid = self._all(size, True)

    def retained_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    def as_array(self) -> np.ndarray:
        """Read-only view of the grid."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def copy(self) -> 'CoefficientMask':
        return CoefficientMask.from_array(self._grid)

    def __getitem__(self, index: Tuple[int, int]) -> bool:
        return self.get(*index)

    def __setitem__(self, index: Tuple[int, int], value: bool):
        self.set(index[0], index[1], value)

    def __eq__(self, other):
        if not isinstance(other, CoefficientMask):
            return NotImplemented
        return self._grid.shape == other._grid.shape and bool(np.array_equal(self._grid, other._grid))

    def __repr__(self):
        return f"CoefficientMask(size={self.size}, retained={self.retained_count()})"
