"""Scaling pipeline settings and configuration."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from conversion.zscale.data_types import (
    CONTRAST,
    GAMMA_EXPONENT,
    SAMPLE_COUNT,
    LowerBound,
)


class Settings(BaseSettings):
    """
    Default tuning parameters of the scaling pipeline.

    Settings can be configured via:

    1. Environment variables (e.g., ZSCALE_CONTRAST=0.25)
    2. .env file in the working directory
    3. Default values defined below

    All settings use the ZSCALE_ prefix for environment variables.

    .. rubric:: Examples

    Widen the display range and use the median as lower limit::

        export ZSCALE_CONTRAST=0.05
        export ZSCALE_LOWER_BOUND=median
    """

    sample_count: Annotated[
        int,
        Field(
            default=SAMPLE_COUNT,
            description="Target number of pixels sampled for the zscale fit",
            gt=0,
        ),
    ]

    contrast: Annotated[
        float,
        Field(
            default=CONTRAST,
            description="Divisor of the fitted slope; values <= 0 leave the slope unchanged",
        ),
    ]

    gamma_exponent: Annotated[
        float,
        Field(
            default=GAMMA_EXPONENT,
            description="Exponent of the gamma curve applied after linear stretching",
            gt=0.0,
        ),
    ]

    lower_bound: Annotated[
        LowerBound,
        Field(
            default=LowerBound.ZSCALE,
            description="Source of the lower display limit",
        ),
    ]

    flip: Annotated[
        bool,
        Field(default=False, description="Reverse the row order of the output"),
    ]

    model_config = SettingsConfigDict(
        env_prefix="ZSCALE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    def log_startup_config(self) -> None:
        """Log the active scaling configuration."""
        logger.info("=" * 60)
        logger.info("Scaling pipeline - Configuration:")
        logger.info(f"  Sample count: {self.sample_count}")
        logger.info(f"  Contrast: {self.contrast}")
        logger.info(f"  Gamma exponent: {self.gamma_exponent:.3f}")
        logger.info(f"  Lower bound: {self.lower_bound}")
        logger.info(f"  Flip: {self.flip}")
        logger.info("=" * 60)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: The settings, read once from the environment.
    """
    return Settings()
