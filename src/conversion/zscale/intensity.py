import warnings
from typing import Final

import numpy as np
from loguru import logger
from numpy.typing import NDArray

from conversion.exceptions import EmptyInputError, IndexOverflowWarning
from conversion.zscale.gamma import MAX_LEVEL, GammaTable, build_gamma_table


# Narrower ranges would overflow the scale factor
MIN_RANGE: Final[float] = MAX_LEVEL * float(np.finfo(np.float64).tiny)


def _display_range(zmin: float, zmax: float) -> tuple[float, float]:
    """Order inverted bounds and widen an empty or too narrow range by one unit on each side."""
    if zmax < zmin:
        logger.debug(f"Inverted display range [{zmin}, {zmax}], swapping bounds")
        zmin, zmax = zmax, zmin
    if zmax - zmin < MIN_RANGE:
        logger.debug(
            f"Display range [{zmin}, {zmax}] too narrow, widening to [{zmin - 1}, {zmax + 1}]"
        )
        return zmin - 1.0, zmax + 1.0
    return zmin, zmax


def _round_half_away_from_zero(values: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.copysign(np.floor(np.abs(values) + 0.5), values)


def _clamp_levels(levels: NDArray[np.float64]) -> NDArray[np.intp]:
    """Clamp rounded levels into the gamma table index range."""
    overflow = ~((levels >= 0) & (levels <= MAX_LEVEL))
    if overflow.any():
        warnings.warn(
            f"{np.count_nonzero(overflow)} gamma table index(es) outside [0, {MAX_LEVEL}] clamped",
            IndexOverflowWarning,
            stacklevel=3,
        )
    return np.clip(np.nan_to_num(levels, nan=0.0), 0, MAX_LEVEL).astype(np.intp)


def scale(
    image: NDArray[np.float64],
    zmin: float,
    zmax: float,
    gamma_table: GammaTable | None = None,
) -> NDArray[np.uint8]:
    """
    Map raw intensities to gamma corrected 8-bit levels.

    Values are clamped to ``[zmin, zmax]``, stretched linearly to ``[0, 255]``, rounded
    and looked up in the gamma table. An empty range, or one too narrow for a finite scale
    factor, is widened by one unit on each side. NaN pixels become 0. Bounds far from zero
    with a range tiny relative to them can still overflow ``scale_factor * zmin``; the
    affected pixels are clamped with an `IndexOverflowWarning`.

    :param image: Flat buffer with the pixel intensities.
    :param zmin: Lower display limit.
    :param zmax: Upper display limit.
    :param gamma_table: Lookup table for the gamma correction, defaults to exponent 1/2.5.
    :returns: The 8-bit levels, same length as `image`.
    :raises EmptyInputError: If the image is empty.
    """
    image = np.asarray(image, dtype=np.float64)
    if image.size == 0:
        raise EmptyInputError("Cannot scale an empty image")
    if gamma_table is None:
        gamma_table = build_gamma_table()

    lower, upper = _display_range(float(zmin), float(zmax))
    scale_factor = 255.0 / (upper - lower)
    adjust = scale_factor * lower

    missing = np.isnan(image)
    clamped = np.clip(np.where(missing, lower, image), lower, upper)
    levels = _clamp_levels(_round_half_away_from_zero(clamped * scale_factor - adjust))

    scaled = gamma_table.apply(levels)
    scaled[missing] = 0
    return scaled
