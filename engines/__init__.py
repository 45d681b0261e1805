"""DCT engines - pure computation, no GUI dependencies."""

from .basis_matrix import create_dct_matrix, validate_block_size, BasisMatrixCache
from .dct_engine import forward_dct, inverse_dct, apply_mask, filter_block
from .block_processor import split_into_blocks, merge_blocks
from .reconstructor import reconstruct, reconstruct_with_stats
from .basis_renderer import (
    component_pattern,
    normalize_pattern,
    render_component,
    render_all_components,
    component_mosaic,
)
from .session import DCTFilterSession

__all__ = [
    'create_dct_matrix',
    'validate_block_size',
    'BasisMatrixCache',
    'forward_dct',
    'inverse_dct',
    'apply_mask',
    'filter_block',
    'split_into_blocks',
    'merge_blocks',
    'reconstruct',
    'reconstruct_with_stats',
    'component_pattern',
    'normalize_pattern',
    'render_component',
    'render_all_components',
    'component_mosaic',
    'DCTFilterSession',
]
