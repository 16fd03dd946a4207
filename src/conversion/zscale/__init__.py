from conversion.zscale.data_types import (
    Bounds,
    LineFitResult,
    LowerBound,
    ZScaleParameters,
)
from conversion.zscale.sampler import extract_samples
from conversion.zscale.solver import fit_line
from conversion.zscale.bounds import calc_bounds
from conversion.zscale.gamma import GammaTable, build_gamma_table
from conversion.zscale.intensity import scale
from conversion.zscale.pipeline import scale_image, zscale_bounds

__all__ = (
    "Bounds",
    "LineFitResult",
    "LowerBound",
    "ZScaleParameters",
    "extract_samples",
    "fit_line",
    "calc_bounds",
    "GammaTable",
    "build_gamma_table",
    "scale",
    "scale_image",
    "zscale_bounds",
)
