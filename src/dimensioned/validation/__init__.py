from dimensioned.validation.exceptions import DimensionMismatchError, UnknownScaleError

__all__ = [
    "DimensionMismatchError",
    "UnknownScaleError",
]
