"""Stateful filtering session driven by size, mask and image changes."""

import numpy as np
from typing import Dict, Optional, Tuple

from models.coefficient_mask import CoefficientMask
from models.errors import DimensionMismatchError
from models.filter_params import FilterParams
from engines.basis_matrix import BasisMatrixCache
from engines.basis_renderer import render_all_components
from engines.reconstructor import reconstruct
from utils.constants import MAX_BLOCK_SIZE, DEFAULT_BLOCK_SIZE
from utils.image_io import to_intensity


class DCTFilterSession:
    """
    Owns the basis cache, current block size, coefficient mask and source image.

    Triggers:
    - set_block_size: new basis, mask reset to all-on, new previews, new reconstruction
    - mask updates (single or batched): new reconstruction only
    - set_image: new reconstruction only
    """

    def __init__(self, max_block_size: int = MAX_BLOCK_SIZE,
                 block_size: int = DEFAULT_BLOCK_SIZE,
                 image: Optional[np.ndarray] = None):
        params = FilterParams(block_size=block_size, max_block_size=max_block_size)
        self._max_block_size = params.max_block_size
        self._cache = BasisMatrixCache(params.max_block_size)
        self._image = None
        self._reconstruction = None
        self._block_size = 0
        self._mask = None
        self._components = None
        if image is not None:
            self._image = self._prepare_image(image)
        self.set_block_size(params.block_size)

    # ---- read-only state ----

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def max_block_size(self) -> int:
        return self._max_block_size

    @property
    def basis(self) -> np.ndarray:
        return self._cache.get(self._block_size)

    @property
    def mask(self) -> CoefficientMask:
        return self._mask.copy()

    @property
    def image(self) -> Optional[np.ndarray]:
        return self._image

    @property
    def reconstruction(self) -> Optional[np.ndarray]:
        return self._reconstruction

    @property
    def components(self) -> np.ndarray:
        return self._components

    # ---- triggers ----

    def set_block_size(self, N: int) -> np.ndarray:
        """Switch transform size. Returns the regenerated component previews."""
        FilterParams(block_size=N, max_block_size=self._max_block_size)
        basis = self._cache.get(N)
        self._block_size = int(N)
        self._mask = CoefficientMask.all_on(self._block_size)
        self._components = render_all_components(self._block_size, basis)
        self._refresh()
        return self._components

    def set_image(self, image: np.ndarray) -> Optional[np.ndarray]:
        self._image = self._prepare_image(image)
        return self._refresh()

    def set_mask_entry(self, row: int, col: int, value: bool) -> Optional[np.ndarray]:
        self._mask.set(row, col, value)
        return self._refresh()

    def toggle(self, row: int, col: int) -> Optional[np.ndarray]:
        self._mask.toggle(row, col)
        return self._refresh()

    def set_mask_entries(self, entries: Dict[Tuple[int, int], bool]) -> Optional[np.ndarray]:
        """Apply a batch of mask edits, then reconstruct once."""
        self._mask.set_entries(entries)
        return self._refresh()

    def set_all(self, value: bool) -> Optional[np.ndarray]:
        self._mask.set_all(value)
        return self._refresh()

    def set_mask(self, mask: CoefficientMask) -> Optional[np.ndarray]:
        """Replace the whole mask; it must match the current block size."""
        if mask.size != self._block_size:
            raise DimensionMismatchError(
                f"Mask size {mask.size} does not match block size {self._block_size}"
            )
        self._mask = mask.copy()
        return self._refresh()

    # ---- internals ----

    @staticmethod
    def _prepare_image(image: np.ndarray) -> np.ndarray:
        image = np.asarray(image)
        if image.ndim != 2:
            raise DimensionMismatchError(f"Expected 2D greyscale image, got {image.ndim}D")
        intensity = to_intensity(image).copy()
        intensity.flags.writeable = False
        return intensity

    def _refresh(self) -> Optional[np.ndarray]:
        if self._image is None:
            self._reconstruction = None
        else:
            self._reconstruction = reconstruct(
                self._image, self._block_size, self._mask, self._cache.get(self._block_size)
            )
        return self._reconstruction
