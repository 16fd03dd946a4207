import logging

import numpy as np
import pytest
from loguru import logger

from container_models import ImageContainer
from container_models.base import Pair
from conversion.zscale import ZScaleParameters
from settings import get_settings


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure settings are read from the (monkeypatched) environment in every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def parameters() -> ZScaleParameters:
    return ZScaleParameters()


@pytest.fixture(scope="session")
def sky_array() -> np.ndarray:
    """A 200x150 noisy sky background with a few bright stars."""
    rng = np.random.default_rng(42)
    data = rng.normal(loc=1000.0, scale=20.0, size=(150, 200))
    for row, column in ((20, 30), (75, 100), (120, 160)):
        data[row - 2 : row + 3, column - 2 : column + 3] += 30_000.0
    return data


@pytest.fixture(scope="session")
def sky_image(sky_array: np.ndarray) -> ImageContainer:
    return ImageContainer.from_array(sky_array)


@pytest.fixture(scope="session")
def sky_image_with_nans(sky_array: np.ndarray) -> ImageContainer:
    data = sky_array.copy()
    rng = np.random.default_rng(42)
    data[rng.random(size=data.shape) < 0.1] = np.nan
    return ImageContainer.from_array(data)


@pytest.fixture
def constant_image() -> ImageContainer:
    return ImageContainer(data=np.full(1000, 5.0), shape=Pair(50, 20))


@pytest.fixture
def ramp_image() -> ImageContainer:
    return ImageContainer(data=np.arange(1000, dtype=np.float64), shape=Pair(40, 25))
