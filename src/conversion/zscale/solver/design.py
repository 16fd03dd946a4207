import numpy as np
from numpy.typing import NDArray


def build_design_matrix(num_samples: int) -> NDArray[np.float64]:
    """
    Constructs the least-squares design matrix for a line through ranked samples.

    The first column holds the 0-based rank of each sample, the second column is the
    constant term.
    """
    matrix = np.ones((num_samples, 2), dtype=np.float64)
    matrix[:, 0] = np.arange(num_samples, dtype=np.float64)
    return matrix
