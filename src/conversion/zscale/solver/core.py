import numpy as np
from numpy.typing import NDArray

from conversion.exceptions import DegenerateFitError
from conversion.zscale.data_types import LineFitResult
from conversion.zscale.solver.design import build_design_matrix
from conversion.zscale.solver.utils import compute_root_mean_square


def fit_line(samples: NDArray[np.float64]) -> LineFitResult:
    """
    Core solver: fits a line through the sample values against their rank.

    Solves ``value = slope * rank + intercept`` in the least-squares sense, where rank is the
    0-based position of each sample in the (sorted) input.

    :param samples: The sorted sample values.
    :return: An instance of `LineFitResult` with the fitted line and the RMS of its residuals.
    :raises DegenerateFitError: If there are no samples, the line is not uniquely determined,
        or the values span more than the floating point range.
    """
    values = np.asarray(samples, dtype=np.float64)
    if values.size == 0:
        raise DegenerateFitError("Cannot fit a line through zero samples")

    # 1. Center the values on the middle sample, so flat sample sets give an exactly flat line
    offset = float(values[values.size // 2])
    centered = values - offset
    if not np.all(np.isfinite(centered)):
        raise DegenerateFitError("Sample values span more than the floating point range")

    # 2. Build the design matrix for the least-squares solver
    design_matrix = build_design_matrix(values.size)

    # 3. Solve (Least Squares)
    coefficients, _, rank, _ = np.linalg.lstsq(design_matrix, centered, rcond=None)
    if rank < design_matrix.shape[1]:
        raise DegenerateFitError(
            f"Line fit is singular for {values.size} sample(s), at least 2 are required"
        )
    if not np.all(np.isfinite(coefficients)):
        raise DegenerateFitError(f"Line fit has non-finite coefficients {coefficients}")

    # 4. Residuals of the fitted line
    residuals = centered - design_matrix @ coefficients
    slope, intercept = coefficients

    return LineFitResult(
        slope=float(slope),
        intercept=float(intercept) + offset,
        sample_count=values.size,
        rms=compute_root_mean_square(residuals),
    )
