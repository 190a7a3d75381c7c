"""Core primitives: affine scales, dimension markers and quantities."""
from .dimensions import DIMENSIONS, Dimension, dimension_by_name
from .quantity import Quantity, QuantityScale, absolute, maximum, minimum, standard_scale
from .scale import Scale

__all__ = [
    "DIMENSIONS",
    "Dimension",
    "dimension_by_name",
    "Quantity",
    "QuantityScale",
    "Scale",
    "absolute",
    "maximum",
    "minimum",
    "standard_scale",
]
