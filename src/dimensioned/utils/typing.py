import logging
from numbers import Real
from typing import Annotated, Any, Callable, TypeAlias

from astropy.units import Quantity as AstropyQuantity
from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator, model_validator

from dimensioned.catalogue.registry import STANDARD_SCALE_NAMES, get_scale
from dimensioned.core.dimensions import Dimension, dimension_by_name
from dimensioned.core.quantity import Quantity, QuantityScale
from dimensioned.utils.unit_compat import from_astropy
from dimensioned.validation.exceptions import DimensionMismatchError, UnknownScaleError

logger = logging.getLogger(__name__)

QuantityInput: TypeAlias = Quantity | AstropyQuantity | dict[str, Any] | float


# below are for pydantic model fields to handle validation
# and serialization of quantities
def quantity_validator(dimension: type[Dimension]) -> Callable[[QuantityInput], Quantity]:
    """
    Build a validator turning user input into a :class:`Quantity` of ``dimension``.

    Accepted inputs:

    - a :class:`Quantity` of the same dimension, returned as is
    - a bare number, taken as the canonical value
    - a dictionary ``{"value": 500, "unit": "GRAMS"}``; the unit is any
      catalogue scale name and defaults to the standard scale
    - an astropy ``Quantity`` in a unit equivalent to the dimension
    """

    def validator(v: QuantityInput) -> Quantity:
        if isinstance(v, Quantity):
            if v.dimension is not dimension:
                raise ValueError(
                    f"Expected a {dimension.__name__} quantity, got {v.dimension.__name__}"
                )
            return v
        if isinstance(v, AstropyQuantity):
            return from_astropy(v, dimension)
        if isinstance(v, dict):
            try:
                val = float(v["value"])
                unit = str(v.get("unit", STANDARD_SCALE_NAMES[dimension]))
            except (KeyError, TypeError, ValueError):
                raise ValueError(f"Invalid input dictionary v: {v}") from None
            try:
                scale = get_scale(unit, dimension)
            except (UnknownScaleError, DimensionMismatchError) as exc:
                raise ValueError(str(exc.args[0])) from None
            logger.debug("Parsed %s %s as %s", val, unit, dimension.__name__)
            return Quantity(val, scale)
        if isinstance(v, Real) and not isinstance(v, bool):
            return Quantity(float(v), dimension)
        raise ValueError(f"Expected a number, dict or Quantity, got {type(v).__name__}")

    return validator


def quantity_serializer(value: Quantity) -> dict[str, float | str]:
    return {"value": value.value, "unit": STANDARD_SCALE_NAMES[value.dimension]}


def QuantityField(dimension: type[Dimension]) -> Any:
    """
    Annotated :class:`Quantity` type for pydantic model fields.

    Models using it need ``arbitrary_types_allowed=True``. Serializes as
    ``{"value": <canonical value>, "unit": <standard scale name>}``::

        MassQuantity = QuantityField(Mass)

        class Tank(BaseModel):
            model_config = ConfigDict(arbitrary_types_allowed=True)
            contents: MassQuantity
    """
    return Annotated[
        Quantity,
        PlainValidator(quantity_validator(dimension)),
        PlainSerializer(quantity_serializer),
    ]


class ScaleDefinition(BaseModel):
    """
    User-defined scale, given either directly or relative to a catalogue scale.

    Direct form: ``dimension`` (marker class name), ``factor`` and ``base``.
    Relative form: ``reference`` (catalogue scale name) and ``times``, the size
    of the new unit in units of the reference, e.g. pounds are
    ``{"reference": "KILOGRAMS", "times": 0.45359237}``.
    """

    dimension: str | None = None
    factor: float | None = None
    base: float = 0.0
    reference: str | None = None
    times: float | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _validate_form(self) -> "ScaleDefinition":
        direct = self.dimension is not None or self.factor is not None
        relative = self.reference is not None or self.times is not None
        if direct == relative:
            raise ValueError(
                "Define a scale either by 'dimension' and 'factor' or by 'reference' and 'times'."
            )
        if direct:
            if self.dimension is None or self.factor is None:
                raise ValueError("A direct scale definition needs both 'dimension' and 'factor'.")
            dimension_by_name(self.dimension)
            if self.factor == 0.0:
                raise ValueError("Scale factor must be non-zero.")
        else:
            if self.reference is None or self.times is None:
                raise ValueError("A relative scale definition needs both 'reference' and 'times'.")
            if self.base != 0.0:
                raise ValueError("A relative scale definition keeps the reference base.")
            try:
                get_scale(self.reference)
            except UnknownScaleError as exc:
                raise ValueError(str(exc.args[0])) from None
            if self.times == 0.0:
                raise ValueError("Scale multiplier must be non-zero.")
        return self

    def to_scale(self) -> QuantityScale:
        if self.reference is not None and self.times is not None:
            return get_scale(self.reference) * self.times
        if self.dimension is None or self.factor is None:
            raise ValueError("A direct scale definition needs both 'dimension' and 'factor'.")
        return QuantityScale.from_factor(dimension_by_name(self.dimension), self.factor, self.base)
