"""Reconstruction result with metrics."""

from dataclasses import dataclass
import numpy as np


@dataclass
class ReconstructionResult:
    """Results from a masked block-DCT reconstruction pass."""
    
    original_image: np.ndarray
    reconstructed_image: np.ndarray
    block_size: int
    
    # Mask stats
    retained_coeffs: int
    total_coeffs: int
    
    # Quality metrics
    psnr: float
    ssim: float
    
    # Runtime
    elapsed_ms: float
    
    @property
    def retained_ratio(self) -> float:
        return self.retained_coeffs / self.total_coeffs if self.total_coeffs else 0.0
