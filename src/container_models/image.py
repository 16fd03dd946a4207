"""Image container architecture.

This module defines the data containers used to hand images to and from the
scaling pipeline.

Architecture
------------
::

    +--------------------------------------+
    |           ImageContainer             |
    |--------------------------------------|
    | data   : PixelBuffer (float64, 1D)   |
    | shape  : Shape (width, height)       |
    | height : int (rows)                  |
    | width  : int (columns)               |
    +--------------------------------------+
    | from_array(array) -> cls             |
    | as_2d() -> read-only (H, W) view     |
    | flipped() -> cls                     |
    +--------------------------------------+

    +--------------------------------------+
    |            DisplayImage              |
    |--------------------------------------|
    | data   : DisplayBuffer (uint8, 1D)   |
    | shape  : Shape (width, height)       |
    +--------------------------------------+

- Pixel data is stored flat in row-major order, the logical grid is given by ``shape``.
- Containers are frozen and their arrays are read-only copies of the input.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from pydantic import model_validator

from container_models.base import ConfigBaseModel, DisplayBuffer, Pair, PixelBuffer, Shape


class _FlatImage(ConfigBaseModel):
    data: NDArray
    shape: Shape

    @model_validator(mode="after")
    def _validate_size(self) -> _FlatImage:
        width, height = self.shape
        if width < 0 or height < 0:
            raise ValueError(f"Image dimensions must be non-negative, got {self.shape}")
        if self.shape.product() != self.data.size:
            raise ValueError(
                f"Image of {width}x{height} pixels cannot hold {self.data.size} values"
            )
        return self

    @property
    def width(self) -> int:
        """The image width in pixels."""
        return self.shape.x

    @property
    def height(self) -> int:
        """The image height in pixels."""
        return self.shape.y

    def as_2d(self) -> NDArray:
        """Read-only (height, width) view on the flat pixel buffer."""
        return self.data.reshape(self.height, self.width)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(
            self.data,
            other.data,
            equal_nan=self.data.dtype.kind == "f",
        )


class ImageContainer(_FlatImage):
    """A single-band floating point image, as handed over by a file reader."""

    data: PixelBuffer

    @classmethod
    def from_array(cls, data: NDArray) -> ImageContainer:
        """
        Build a container from a 2D (height, width) array.

        :param data: The image data.
        :returns: An instance of `ImageContainer` holding a flattened copy.
        """
        if data.ndim != 2:
            raise ValueError(f"Expected a 2D array, but got {data.ndim} dimension(s)")
        height, width = data.shape
        return cls(data=data.ravel(), shape=Pair(width, height))

    def flipped(self) -> ImageContainer:
        """Return a new container with the row order reversed."""
        return ImageContainer(data=self.as_2d()[::-1].ravel(), shape=self.shape)


class DisplayImage(_FlatImage):
    """An 8-bit grayscale image ready for encoding or display."""

    data: DisplayBuffer

    def flipped(self) -> DisplayImage:
        """Return a new image with the row order reversed."""
        return DisplayImage(data=self.as_2d()[::-1].ravel(), shape=self.shape)
