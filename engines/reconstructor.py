"""Masked block-DCT reconstruction of a full greyscale image."""

import numpy as np
from typing import Optional, Tuple, Union

from models.coefficient_mask import CoefficientMask
from models.errors import DimensionMismatchError
from models.reconstruction_result import ReconstructionResult
from engines.basis_matrix import create_dct_matrix, validate_block_size
from engines.block_processor import split_into_blocks, merge_blocks
from engines.dct_engine import filter_block
from utils.constants import PIXEL_SCALE
from utils.image_io import to_intensity
from utils.metrics import compute_psnr_ssim, Timer


def _mask_array(mask: Union[CoefficientMask, np.ndarray], block_size: int) -> np.ndarray:
    grid = mask.as_array() if isinstance(mask, CoefficientMask) else np.asarray(mask, dtype=bool)
    if grid.shape != (block_size, block_size):
        raise DimensionMismatchError(
            f"Mask shape {grid.shape} does not match block size {block_size}"
        )
    return grid


def reconstruct(
    image: np.ndarray,
    block_size: int,
    mask: Union[CoefficientMask, np.ndarray],
    basis: Optional[np.ndarray] = None,
    shape: Optional[Tuple[int, int]] = None
) -> np.ndarray:
    """
    Run the masked DCT round trip over every N x N tile of an image.

    Args:
        image: 2D greyscale image, normalized to [0, 1] (uint8/uint16 accepted)
        block_size: Transform size N
        mask: N x N coefficient mask, True = retained
        basis: Precomputed N x N basis matrix (built if omitted)
        shape: Declared (height, width) of the image, checked if given

    Returns:
        Reconstructed image, same shape, float64, not clipped.
        Partial edge tiles are zero-padded before the transform, so they
        come back darker near the boundary.
    """
    image = np.asarray(image)
    if image.ndim != 2:
        raise DimensionMismatchError(f"Expected 2D greyscale image, got {image.ndim}D")
    if shape is not None and tuple(shape) != image.shape:
        raise DimensionMismatchError(
            f"Image shape {image.shape} does not match declared {tuple(shape)}"
        )
    
    if basis is None:
        N = validate_block_size(block_size)
        basis = create_dct_matrix(N)
    else:
        if basis.shape != (block_size, block_size):
            raise DimensionMismatchError(
                f"Basis shape {basis.shape} does not match block size {block_size}"
            )
        N = validate_block_size(block_size, basis.shape[0])
    grid = _mask_array(mask, N)
    
    intensity = to_intensity(image)
    blocks = split_into_blocks(intensity, N, scale=PIXEL_SCALE)
    filtered = [(i, j, filter_block(block, basis, grid)) for (i, j, block) in blocks]
    return merge_blocks(filtered, intensity.shape, N, scale=PIXEL_SCALE)


def reconstruct_with_stats(
    image: np.ndarray,
    block_size: int,
    mask: Union[CoefficientMask, np.ndarray],
    basis: Optional[np.ndarray] = None
) -> ReconstructionResult:
    """Reconstruct and report quality against the source."""
    timer = Timer()
    reconstructed = timer.measure(reconstruct, image, block_size, mask, basis)
    original = to_intensity(np.asarray(image))
    metrics = compute_psnr_ssim(original, reconstructed)
    grid = _mask_array(mask, block_size)
    
    return ReconstructionResult(
        original_image=original,
        reconstructed_image=reconstructed,
        block_size=block_size,
        retained_coeffs=int(np.count_nonzero(grid)),
        total_coeffs=int(grid.size),
        psnr=metrics['psnr'],
        ssim=metrics['ssim'],
        elapsed_ms=timer.elapsed_ms
    )
