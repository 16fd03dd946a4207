from functools import lru_cache
from typing import Final

import numpy as np
from numpy.typing import NDArray

from conversion.zscale.data_types import GAMMA_EXPONENT

LEVELS: Final[int] = 256
MAX_LEVEL: Final[int] = LEVELS - 1


class GammaTable:
    """
    Read-only lookup table mapping 8-bit input levels to gamma corrected 8-bit levels.

    Entry ``i`` is ``floor(256 * (i / 255) ** exponent)``, saturated at 255.
    """

    __slots__ = ("_exponent", "_table")

    def __init__(self, exponent: float = GAMMA_EXPONENT) -> None:
        if exponent <= 0:
            raise ValueError(f"Gamma exponent must be positive, got {exponent}")
        levels = np.arange(LEVELS, dtype=np.float64) / MAX_LEVEL
        table = np.floor(LEVELS * levels**exponent)
        self._table = np.clip(table, 0, MAX_LEVEL).astype(np.uint8)
        self._table.setflags(write=False)
        self._exponent = exponent

    @property
    def exponent(self) -> float:
        return self._exponent

    @property
    def values(self) -> NDArray[np.uint8]:
        return self._table

    def __len__(self) -> int:
        return LEVELS

    def __getitem__(
        self, index: int | NDArray[np.integer]
    ) -> np.uint8 | NDArray[np.uint8]:
        return self._table[index]

    def __repr__(self) -> str:
        return f"GammaTable(exponent={self._exponent!r})"

    def apply(self, levels: NDArray[np.integer]) -> NDArray[np.uint8]:
        """Look up an array of levels in [0, 255]."""
        return self._table[levels]


@lru_cache
def build_gamma_table(exponent: float = GAMMA_EXPONENT) -> GammaTable:
    """Build (once per exponent) the gamma lookup table."""
    return GammaTable(exponent)
