"""
Conversion of raw scientific images into displayable data.

Subpackages
-----------
zscale
    Sampling, least-squares trend fit, display bounds and the linear-then-gamma
    intensity mapping to 8-bit grayscale.
"""
