"""
Scaling pipeline: from a floating point image to an 8-bit display image.

::

    ImageContainer ──> extract_samples ──> calc_bounds ──> scale ──> DisplayImage
                          (sorted)          (fit_line)    (gamma)

Both entry points are railway functions: they return a `returns` `Result` and log
their outcome, so callers decide whether to abort or fall back to another display range.
"""

import numpy as np
from returns.result import safe

from container_models import DisplayImage, ImageContainer
from conversion.zscale.bounds import calc_bounds
from conversion.zscale.data_types import Bounds, LowerBound, ZScaleParameters
from conversion.zscale.gamma import build_gamma_table
from conversion.zscale.intensity import scale
from conversion.zscale.sampler import extract_samples
import settings
from utils.logger import log_railway_function


def _resolve_parameters(parameters: ZScaleParameters | None) -> ZScaleParameters:
    if parameters is None:
        return ZScaleParameters.from_settings(settings.get_settings())
    return parameters


def _display_limits(
    samples: np.ndarray, parameters: ZScaleParameters
) -> tuple[float, float]:
    bounds = calc_bounds(samples, contrast=parameters.contrast)
    match parameters.lower_bound:
        case LowerBound.MEDIAN:
            return float(samples[samples.size // 2]), bounds.max
        case _:
            return bounds.min, bounds.max


@log_railway_function(
    failure_message="Failed to compute zscale display bounds",
)
@safe
def zscale_bounds(
    image: ImageContainer, parameters: ZScaleParameters | None = None
) -> Bounds:
    """
    Compute the zscale display range of an image.

    :param image: The image to sample.
    :param parameters: Tuning parameters, defaults to the configured settings.
    :returns: The display `Bounds` (not guaranteed to be ordered).
    """
    parameters = _resolve_parameters(parameters)
    return calc_bounds(
        extract_samples(image.data, parameters.sample_count),
        contrast=parameters.contrast,
    )


@log_railway_function(
    failure_message="Failed to scale image for display",
    success_message="Successfully scaled image for display",
)
@safe
def scale_image(
    image: ImageContainer, parameters: ZScaleParameters | None = None
) -> DisplayImage:
    """
    Convert a floating point image into an 8-bit grayscale display image.

    The image is sampled, the display range is derived from a zscale fit on the samples,
    and every pixel is stretched to that range and gamma corrected.

    :param image: The image to convert.
    :param parameters: Tuning parameters, defaults to the configured settings.
    :returns: A `DisplayImage` with the same shape as `image`.
    """
    parameters = _resolve_parameters(parameters)
    samples = extract_samples(image.data, parameters.sample_count)
    zmin, zmax = _display_limits(samples, parameters)
    display = DisplayImage(
        data=scale(
            image.data,
            zmin,
            zmax,
            gamma_table=build_gamma_table(parameters.gamma_exponent),
        ),
        shape=image.shape,
    )
    return display.flipped() if parameters.flip else display
