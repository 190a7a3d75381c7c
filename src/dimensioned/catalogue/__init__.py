"""Scale catalogue: thermal scales, named constants and lookup by name."""
from dimensioned.catalogue import scales, thermal
from dimensioned.catalogue.registry import (
    SCALES,
    STANDARD_SCALE_NAMES,
    STANDARD_SCALES,
    get_scale,
    scales_for,
)

__all__ = [
    "scales",
    "thermal",
    "SCALES",
    "STANDARD_SCALE_NAMES",
    "STANDARD_SCALES",
    "get_scale",
    "scales_for",
]
