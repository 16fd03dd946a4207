from conversion.zscale.solver.design import build_design_matrix
from conversion.zscale.solver.utils import compute_root_mean_square
from conversion.zscale.solver.core import fit_line

__all__ = (
    "build_design_matrix",
    "compute_root_mean_square",
    "fit_line",
)
