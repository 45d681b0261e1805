"""Data models for filtering parameters, masks and results."""

from .errors import InvalidSizeError, DimensionMismatchError
from .filter_params import FilterParams
from .coefficient_mask import CoefficientMask
from .reconstruction_result import ReconstructionResult

__all__ = [
    'InvalidSizeError',
    'DimensionMismatchError',
    'FilterParams',
    'CoefficientMask',
    'ReconstructionResult',
]
