"""Basis image previews for each DCT coefficient."""

import numpy as np
from typing import Optional

from engines.basis_matrix import create_dct_matrix, validate_block_size
from engines.dct_engine import inverse_dct
from models.errors import DimensionMismatchError
from utils.constants import PIXEL_SCALE


def component_pattern(row: int, col: int, basis: np.ndarray) -> np.ndarray:
    """Spatial pattern of a lone impulse of 256*N at coefficient (row, col)."""
    N = basis.shape[0]
    if not (0 <= row < N and 0 <= col < N):
        raise IndexError(f"Coefficient ({row}, {col}) outside {N}x{N} block")
    impulse = np.zeros((N, N), dtype=np.float64)
    impulse[row, col] = PIXEL_SCALE * N
    return inverse_dct(impulse, basis)


def normalize_pattern(pattern: np.ndarray) -> np.ndarray:
    """Min-max normalize to [0, 1]; a flat pattern (the DC term) maps to black."""
    low = pattern.min()
    span = pattern.max() - low
    if np.isclose(span, 0.0, rtol=0.0, atol=1e-9 * max(1.0, abs(low))):
        return np.zeros(pattern.shape, dtype=np.float64)
    return (pattern - low) / span


def render_component(row: int, col: int, N: int, basis: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Render the N x N preview of coefficient (row, col).

    Args:
        row: Vertical frequency index
        col: Horizontal frequency index
        N: Transform size
        basis: Precomputed basis matrix for N (built if omitted)

    Returns:
        N x N float64 image in [0, 1]
    """
    if basis is None:
        basis = create_dct_matrix(validate_block_size(N))
    elif basis.shape != (N, N):
        raise DimensionMismatchError(f"Basis shape {basis.shape} does not match size {N}")
    return normalize_pattern(component_pattern(row, col, basis))


def render_all_components(N: int, basis: Optional[np.ndarray] = None) -> np.ndarray:
    """All N*N previews; ``out[row, col]`` is the preview of coefficient (row, col)."""
    if basis is None:
        basis = create_dct_matrix(validate_block_size(N))
    components = np.zeros((N, N, N, N), dtype=np.float64)
    for row in range(N):
        for col in range(N):
            components[row, col] = render_component(row, col, N, basis)
    return components


def component_mosaic(components: np.ndarray, gap: int = 1) -> np.ndarray:
    """Tile an (N, N, N, N) preview stack into one image with white grid lines."""
    N = components.shape[0]
    cell = N + gap
    size = N * cell + gap
    mosaic = np.ones((size, size), dtype=np.float64)
    for row in range(N):
        for col in range(N):
            y = gap + row * cell
            x = gap + col * cell
            mosaic[y:y + N, x:x + N] = components[row, col]
    return mosaic
