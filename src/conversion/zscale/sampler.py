import numpy as np
from loguru import logger
from numpy.typing import NDArray

from conversion.exceptions import EmptyInputError
from conversion.zscale.data_types import SAMPLE_COUNT


def _thin_evenly(samples: NDArray[np.float64], sample_count: int) -> NDArray[np.float64]:
    """Keep `sample_count` values spread evenly over `samples`, first and last included."""
    logger.debug(f"Thinning {samples.size} strided samples to {sample_count}")
    picks = np.linspace(0, samples.size - 1, num=sample_count).round().astype(np.intp)
    return samples[picks]


def _strided_samples(image: NDArray[np.float64], sample_count: int) -> NDArray[np.float64]:
    """Take every `stride`-th pixel, skipping the pixel at index 0."""
    stride = image.size // sample_count
    if stride == 0:
        logger.debug(
            f"Image has fewer pixels ({image.size}) than requested samples ({sample_count}), "
            "sampling the whole image"
        )
        return image.copy()
    samples = image[::stride][1:]
    if samples.size > sample_count:
        return _thin_evenly(samples, sample_count)
    return samples.copy()


def extract_samples(
    image: NDArray[np.float64], sample_count: int = SAMPLE_COUNT
) -> NDArray[np.float64]:
    """
    Draw an evenly spaced subset of pixel values from a flat image buffer, sorted ascending.

    The stride is ``len(image) // sample_count``. Images smaller than `sample_count` are
    sampled completely. Otherwise the first strided pixel (index 0) is left out. When the
    remaining strided pixels outnumber `sample_count`, they are thinned evenly over the whole
    image down to `sample_count` values. Non-finite values are dropped.

    :param image: Flat (row-major) buffer with the pixel intensities.
    :param sample_count: Target number of samples.
    :returns: The sorted samples.
    :raises EmptyInputError: If the image is empty or holds no finite samples.
    """
    image = np.asarray(image, dtype=np.float64).ravel()
    if image.size == 0:
        raise EmptyInputError("Cannot sample an empty image")

    samples = _strided_samples(image, sample_count)
    finite = np.isfinite(samples)
    if not finite.all():
        logger.debug(f"Dropping {np.count_nonzero(~finite)} non-finite samples")
        samples = samples[finite]
    if samples.size == 0:
        raise EmptyInputError("Image contains no finite samples")

    samples.sort()
    return samples
