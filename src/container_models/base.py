from collections.abc import Sequence
from functools import partial
from typing import Annotated, NamedTuple

from numpy import array, float64, ndarray, number, uint8
from numpy.typing import DTypeLike, NDArray
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, PlainSerializer


class Pair[T](NamedTuple):
    x: T
    y: T

    def product(self) -> T:
        return self.x * self.y


type Shape = Pair[int]  # (width, height)


def serialize_ndarray[T: number](array_: NDArray[T]) -> list[T]:
    """Serialize numpy array to a Python list for JSON serialization."""
    return array_.tolist()


def coerce_to_array[T: number](
    dtype: DTypeLike, value: Sequence[T] | NDArray[T] | None
) -> NDArray[T] | None:
    """
    Coerce input to an owned dtype numpy array.

    Both sequences and arrays are copied, so the container never aliases caller data.
    """
    if isinstance(value, (Sequence, ndarray)):
        try:
            return array(value, dtype=dtype)
        except OverflowError as ofe:
            raise ValueError("Array's value(s) out of range") from ofe
    return value


def validate_shape(n_dims: int, value: NDArray) -> NDArray:
    if (array_dims := len(value.shape)) != n_dims:
        raise ValueError(
            f"Array shape mismatch, expected {n_dims} dimension(s), but got {array_dims}"
        )
    return value


def freeze(value: NDArray) -> NDArray:
    """Mark an array as read-only so containers stay immutable."""
    value.setflags(write=False)
    return value


type FloatArray1D = Annotated[
    NDArray[float64],
    BeforeValidator(partial(coerce_to_array, float64)),
    AfterValidator(partial(validate_shape, 1)),
    AfterValidator(freeze),
    PlainSerializer(serialize_ndarray),
]
type UInt8Array1D = Annotated[
    NDArray[uint8],
    BeforeValidator(partial(coerce_to_array, uint8)),
    AfterValidator(partial(validate_shape, 1)),
    AfterValidator(freeze),
    PlainSerializer(serialize_ndarray),
]

# Semantic context
type PixelBuffer = FloatArray1D  # Shape: (H * W,), row-major
type DisplayBuffer = UInt8Array1D  # Shape: (H * W,), row-major


class ConfigBaseModel(BaseModel):
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
    )
