"""Shared utilities."""

from .constants import (
    MIN_BLOCK_SIZE,
    MAX_BLOCK_SIZE,
    DEFAULT_BLOCK_SIZE,
    PIXEL_SCALE,
    LUMA_WEIGHTS,
)
from .metrics import compute_psnr_ssim, Timer
from .test_images import generate_sample_image, SAMPLE_IMAGES
from .image_io import load_image, save_image, to_intensity, to_uint8

__all__ = [
    'MIN_BLOCK_SIZE',
    'MAX_BLOCK_SIZE',
    'DEFAULT_BLOCK_SIZE',
    'PIXEL_SCALE',
    'LUMA_WEIGHTS',
    'compute_psnr_ssim',
    'Timer',
    'generate_sample_image',
    'SAMPLE_IMAGES',
    'load_image',
    'save_image',
    'to_intensity',
    'to_uint8',
]
