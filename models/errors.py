"""Engine error types."""


class InvalidSizeError(ValueError):
    """Transform size outside the supported range."""


class DimensionMismatchError(ValueError):
    """Mask, block or image shape does not match what the caller declared."""
