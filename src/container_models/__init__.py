"""
Immutable data container models for railway-oriented programming pipelines.

These pydantic models carry pixel data into and out of the scaling pipeline. They
are frozen and hold read-only copies of their arrays, so every function in a
pipeline receives unmodified input.
"""

from .image import DisplayImage, ImageContainer


__all__ = ["DisplayImage", "ImageContainer"]
