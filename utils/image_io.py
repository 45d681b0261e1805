"""Image I/O using OpenCV, greyscale only."""

from pathlib import Path

import cv2
import numpy as np

from utils.constants import LUMA_WEIGHTS, SUPPORTED_EXTENSIONS


def to_intensity(image: np.ndarray) -> np.ndarray:
    """
    Normalize a greyscale buffer to float64 in [0, 1].

    Unsigned integers are divided by their dtype maximum, booleans map to
    0/1 and floats pass through. Signed integers have no defined full-scale
    value and are rejected.
    """
    if image.dtype == np.bool_:
        return image.astype(np.float64)
    if np.issubdtype(image.dtype, np.unsignedinteger):
        return image.astype(np.float64) / float(np.iinfo(image.dtype).max)
    if np.issubdtype(image.dtype, np.signedinteger):
        raise ValueError(
            f"Signed integer image ({image.dtype}) has no defined range; "
            f"pass unsigned samples or floats in [0, 1]"
        )
    if not np.issubdtype(image.dtype, np.floating):
        raise ValueError(f"Unsupported image dtype: {image.dtype}")
    return image.astype(np.float64, copy=False)


def rgb_to_grey(rgb: np.ndarray) -> np.ndarray:
    """Luma (BT.601): 0.299 R + 0.587 G + 0.114 B."""
    R, G, B = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    wr, wg, wb = LUMA_WEIGHTS
    return wr * R + wg * G + wb * B


def load_image(path: str) -> np.ndarray:
    """Load image as greyscale float64 in [0, 1]."""
    suffix = Path(path).suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported image format: {suffix or path}")
    img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    
    if img.ndim == 3:
        if img.shape[2] == 4:
            img = cv2.cvtColor(img, cv2.COLOR_BGRA2BGR)
        scale = 65535.0 if img.dtype == np.uint16 else 255.0
        rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB).astype(np.float64) / scale
        return np.clip(rgb_to_grey(rgb), 0.0, 1.0)
    return to_intensity(img)


def to_uint8(image: np.ndarray) -> np.ndarray:
    """Clip a [0, 1] intensity image and convert to 8-bit for display."""
    return np.round(np.clip(image, 0.0, 1.0) * 255.0).astype(np.uint8)


def save_image(image: np.ndarray, path: str) -> None:
    """Save greyscale intensity image as 8-bit."""
    if image.ndim != 2:
        raise ValueError(f"Expected 2D greyscale image, got {image.ndim}D")
    if not cv2.imwrite(str(path), to_uint8(image)):
        raise ValueError(f"Could not write image to {path}")
