class ZScaleError(Exception):
    """Raised when display bounds or a display image cannot be computed."""

    def __init__(self, message: str):
        super().__init__(message)


class EmptyInputError(ZScaleError):
    """Raised when an image or sample buffer holds no (usable) values."""


class DegenerateFitError(ZScaleError):
    """Raised when the least-squares line fit has no unique solution."""


class IndexOverflowWarning(RuntimeWarning):
    """Emitted when a gamma table index had to be clamped into [0, 255]."""
