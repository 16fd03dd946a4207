from __future__ import annotations

from enum import StrEnum, auto
from typing import TYPE_CHECKING, Annotated, Final

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from settings import Settings

SAMPLE_COUNT: Final[int] = 2000
CONTRAST: Final[float] = 0.1
GAMMA_EXPONENT: Final[float] = 1 / 2.5


class LowerBound(StrEnum):
    """
    Source of the lower display limit.

    ZSCALE uses the lower bound of the zscale fit, MEDIAN uses the median sample
    (darker background, as in quick-look viewers).
    """

    ZSCALE = auto()
    MEDIAN = auto()


class LineFitResult(BaseModel):
    """
    Least-squares line through sorted sample values against their rank.

    :param slope: Increase of the sample value per rank.
    :param intercept: Fitted value at rank 0.
    :param sample_count: Number of samples in the fit.
    :param rms: Root mean square of the fit residuals.
    """

    model_config = ConfigDict(frozen=True)

    slope: float
    intercept: float
    sample_count: int
    rms: float


class Bounds(BaseModel):
    """Display range. `min <= max` is not guaranteed."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @property
    def is_degenerate(self) -> bool:
        return self.min == self.max


class ZScaleParameters(BaseModel):
    """
    Tuning parameters of the scaling pipeline.

    :param sample_count: Target number of samples drawn from the image.
    :param contrast: Divides the fitted slope; smaller values widen the display range.
    :param gamma_exponent: Exponent of the gamma curve applied after linear stretching.
    :param lower_bound: Source of the lower display limit.
    :param flip: Reverse the row order of the output image.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sample_count: Annotated[int, Field(gt=0)] = SAMPLE_COUNT
    contrast: float = CONTRAST
    gamma_exponent: Annotated[float, Field(gt=0.0)] = GAMMA_EXPONENT
    lower_bound: LowerBound = LowerBound.ZSCALE
    flip: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> ZScaleParameters:
        return cls(
            sample_count=settings.sample_count,
            contrast=settings.contrast,
            gamma_exponent=settings.gamma_exponent,
            lower_bound=settings.lower_bound,
            flip=settings.flip,
        )
