"""Shared constants for the DCT filtering engine."""

# Supported transform sizes (N for an N x N block)
MIN_BLOCK_SIZE = 1
MAX_BLOCK_SIZE = 32
DEFAULT_BLOCK_SIZE = 4

# Samples are normalized to [0, 1]; blocks are transformed in [0, 256)
PIXEL_SCALE = 256.0

# ITU-R BT.601 luma weights (R, G, B)
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

SUPPORTED_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.bmp', '.tif', '.tiff')
