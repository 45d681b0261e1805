"""Metrics: PSNR, SSIM, runtime."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict


def compute_psnr_ssim(original: np.ndarray, reconstructed: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM on greyscale images in [0, 1]."""
    original = original.astype(np.float64)
    reconstructed = np.clip(reconstructed.astype(np.float64), 0.0, 1.0)
    
    if np.array_equal(original, reconstructed):
        psnr = float('inf')
    else:
        psnr = peak_signal_noise_ratio(original, reconstructed, data_range=1.0)
    
    # SSIM needs a window no larger than the image (odd, >= 3)
    win = min(7, min(original.shape))
    if win % 2 == 0:
        win -= 1
    if win < 3:
        ssim = 1.0 if np.allclose(original, reconstructed) else 0.0
    else:
        ssim = structural_similarity(original, reconstructed, data_range=1.0, win_size=win)
    
    return {
        'psnr': float(psnr),
        'ssim': float(ssim)
    }


class Timer:
    """Simple timer for reconstruction runtime."""
    
    def __init__(self):
        self.elapsed_ms = 0.0
    
    def measure(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.elapsed_ms = (time.perf_counter() - start) * 1000.0
        return result
