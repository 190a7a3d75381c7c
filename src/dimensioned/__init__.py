"""Dimension-tagged physical quantities with affine unit scales."""
from dimensioned.core import (
    DIMENSIONS,
    Dimension,
    Quantity,
    QuantityScale,
    Scale,
    absolute,
    dimension_by_name,
    maximum,
    minimum,
    standard_scale,
)
from dimensioned.validation.exceptions import DimensionMismatchError, UnknownScaleError

__all__ = [
    "DIMENSIONS",
    "Dimension",
    "Quantity",
    "QuantityScale",
    "Scale",
    "absolute",
    "dimension_by_name",
    "maximum",
    "minimum",
    "standard_scale",
    "DimensionMismatchError",
    "UnknownScaleError",
]
