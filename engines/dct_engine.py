"""Forward/inverse 2D block DCT as matrix triple products."""

import numpy as np

from models.errors import DimensionMismatchError


def _check_block(block: np.ndarray, basis: np.ndarray, what: str):
    n = basis.shape[0]
    if block.shape != (n, n):
        raise DimensionMismatchError(
            f"{what} shape {block.shape} does not match {n}x{n} basis"
        )


def forward_dct(block: np.ndarray, basis: np.ndarray) -> np.ndarray:
    """D = C @ P @ C.T"""
    block = np.asarray(block, dtype=np.float64)
    _check_block(block, basis, "Pixel block")
    return basis @ block @ basis.T


def inverse_dct(coeffs: np.ndarray, basis: np.ndarray) -> np.ndarray:
    """P = C.T @ D @ C"""
    coeffs = np.asarray(coeffs, dtype=np.float64)
    _check_block(coeffs, basis, "Coefficient block")
    return basis.T @ coeffs @ basis


def apply_mask(coeffs: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Zero every coefficient whose mask entry is False. Returns a copy."""
    mask = np.asarray(mask, dtype=bool)
    if mask.shape != coeffs.shape:
        raise DimensionMismatchError(
            f"Mask shape {mask.shape} does not match coefficient block {coeffs.shape}"
        )
    masked = np.array(coeffs, dtype=np.float64, copy=True)
    masked[~mask] = 0.0
    return masked


def filter_block(block: np.ndarray, basis: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Forward DCT, mask, inverse DCT."""
    return inverse_dct(apply_mask(forward_dct(block, basis), mask), basis)
