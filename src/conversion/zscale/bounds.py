import numpy as np
from loguru import logger
from numpy.typing import NDArray

from conversion.exceptions import EmptyInputError
from conversion.zscale.data_types import CONTRAST, Bounds
from conversion.zscale.solver import fit_line


def calc_bounds(samples: NDArray[np.float64], contrast: float = CONTRAST) -> Bounds:
    """
    Derive the zscale display range from sorted samples.

    A line is fitted through the samples against their rank. Its slope, divided by
    `contrast`, sets the half-width of the range around the intercept; the result is
    limited to the smallest and largest sample. The bounds are not guaranteed to be ordered.

    :param samples: Samples sorted in ascending order.
    :param contrast: Divisor of the fitted slope. Values <= 0 leave the slope unchanged.
    :returns: The display `Bounds`.
    :raises EmptyInputError: If there are no samples.
    :raises DegenerateFitError: If no line can be fitted through the samples.
    """
    samples = np.asarray(samples, dtype=np.float64)
    if samples.size == 0:
        raise EmptyInputError("Cannot compute display bounds without samples")

    fit = fit_line(samples)
    slope = fit.slope / contrast if contrast > 0 else fit.slope
    half_range = slope * fit.sample_count / 2

    bounds = Bounds(
        min=max(float(samples[0]), fit.intercept - half_range),
        max=min(float(samples[-1]), fit.intercept + half_range),
    )
    logger.debug(f"zscale fit {fit}, bounds {bounds}")
    return bounds
