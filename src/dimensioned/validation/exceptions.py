class DimensionMismatchError(TypeError):
    """
    Raised when quantities or scales of different dimensions are combined,
      e.g. adding a Mass quantity to a Time quantity or rendering a Mass
      quantity through an Energy scale.
    """


class UnknownScaleError(KeyError):
    """
    Raised when a scale name does not resolve to any scale of the catalogue.
    """
