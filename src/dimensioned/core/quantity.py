"""Dimension-tagged quantities and the scales that render them."""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Generic, TypeVar, overload

from dimensioned.core.dimensions import Dimension
from dimensioned.core.scale import Scale, ieee_divide
from dimensioned.validation.exceptions import DimensionMismatchError

U = TypeVar("U", bound=Dimension)
U2 = TypeVar("U2", bound=Dimension)

KILO = 1000.0


def _mismatch(operation: str, left: type[Dimension], right: type[Dimension]) -> DimensionMismatchError:
    return DimensionMismatchError(
        f"Cannot {operation} {left.__name__} and {right.__name__}: dimensions differ."
    )


@dataclass(frozen=True, slots=True)
class QuantityScale(Generic[U]):
    """
    One unit of measurement for the dimension ``U``, e.g. grams for Mass.

    Derived scales are built from existing ones with the arithmetic operators,
    which only ever touch ``factor``:

    - ``scale * k``: a unit ``k`` times larger (``factor / k``)
    - ``scale / k``: a unit ``k`` times smaller (``factor * k``)
    - ``+scale``: kilo- prefix, same as ``scale * 1000``
    - ``-scale``: milli- prefix, same as ``scale / 1000``

    so that ``+(+JOULE)`` is the megajoule scale.

    :var dimension: dimension marker the scale belongs to
    :vartype dimension: type[Dimension]
    :var scale: affine map between canonical and local numerals
    :vartype scale: Scale
    """

    dimension: type[U]
    scale: Scale

    @classmethod
    def from_factor(cls, dimension: type[U], factor: float, base: float = 0.0) -> QuantityScale[U]:
        return cls(dimension, Scale(factor, base))

    @property
    def factor(self) -> float:
        return self.scale.factor

    @property
    def base(self) -> float:
        return self.scale.base

    def map(self, value: float) -> float:
        """Render a canonical value as a numeral of this scale."""
        return self.scale.map(value)

    def unmap(self, value: float) -> float:
        """Bring a numeral of this scale back to the canonical value."""
        return self.scale.unmap(value)

    def __mul__(self, amplify: float) -> QuantityScale[U]:
        if not isinstance(amplify, Real):
            return NotImplemented
        return QuantityScale(
            self.dimension, Scale(ieee_divide(self.scale.factor, amplify), self.scale.base)
        )

    def __truediv__(self, reduce: float) -> QuantityScale[U]:
        if not isinstance(reduce, Real):
            return NotImplemented
        return QuantityScale(self.dimension, Scale(self.scale.factor * reduce, self.scale.base))

    def __pos__(self) -> QuantityScale[U]:
        return self * KILO

    def __neg__(self) -> QuantityScale[U]:
        return self / KILO


def standard_scale(dimension: type[U], factor: float = 1.0, base: float = 0.0) -> QuantityScale[U]:
    """Standard scale of ``dimension`` (factor 1, base 0 unless overridden)."""
    return QuantityScale.from_factor(dimension, factor, base)


def _total_compare(a: float, b: float) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    a_nan, b_nan = math.isnan(a), math.isnan(b)
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)
    # -0.0 orders before 0.0
    return int(math.copysign(1.0, a) > 0) - int(math.copysign(1.0, b) > 0)


class Quantity(Generic[U]):
    """
    A physical quantity: a real number tagged with its dimension ``U``.

    The value is always held in the standard scale of the dimension, so
    arithmetic between quantities is plain float arithmetic. Only the scale
    used at construction (``Quantity(5.0, KILOGRAMS)``) or at rendering
    (``q.to_value(GRAMS)``) ever sees another numeral convention.

    Passing a dimension marker instead of a scale (``Quantity(5.0, Mass)``)
    takes the value as already canonical.

    Mixing dimensions raises :class:`DimensionMismatchError`; static checkers
    flag the same mistakes through the generic parameter.
    """

    __slots__ = ("_value", "_dimension")

    _value: float
    _dimension: type[U]

    @overload
    def __init__(self, value: float, unit: QuantityScale[U]) -> None: ...
    @overload
    def __init__(self, value: float, unit: type[U]) -> None: ...

    def __init__(self, value: float, unit: QuantityScale[U] | type[U]) -> None:
        if isinstance(unit, QuantityScale):
            dimension = unit.dimension
            value = unit.unmap(value)
        elif isinstance(unit, type) and issubclass(unit, Dimension):
            dimension = unit
        else:
            raise TypeError(f"Expected a QuantityScale or a Dimension marker, got {unit!r}")
        object.__setattr__(self, "_value", float(value))
        object.__setattr__(self, "_dimension", dimension)

    def _derive(self, value: float) -> Quantity[U]:
        out = object.__new__(Quantity)
        object.__setattr__(out, "_value", value)
        object.__setattr__(out, "_dimension", self._dimension)
        return out

    def _require_same_dimension(self, other: Quantity[Any], operation: str) -> None:
        if other._dimension is not self._dimension:
            raise _mismatch(operation, self._dimension, other._dimension)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"Quantity is immutable; cannot set '{key}'.")

    @property
    def value(self) -> float:
        """The canonical numeral; the one way out to a bare number."""
        return self._value

    @property
    def dimension(self) -> type[U]:
        return self._dimension

    @property
    def is_zero(self) -> bool:
        return self._value == 0.0

    def to_value(self, scale: QuantityScale[U]) -> float:
        """Render this quantity as a numeral of ``scale``."""
        if scale.dimension is not self._dimension:
            raise _mismatch("map", self._dimension, scale.dimension)
        return scale.map(self._value)

    def unchecked_reparam(self, dimension: type[U2], factor: float = 1.0) -> Quantity[U2]:
        """
        Reinterpret ``value * factor`` as a quantity of ``dimension``.

        Nothing is validated. This exists for dimensional identities the type
        tags cannot express (an energy-per-mass derived by hand, say) and the
        caller owns their correctness.
        """
        return Quantity(self._value * factor, dimension)

    def compare_to(self, other: Quantity[U] | float) -> int:
        """
        Three-way comparison of canonical values, returning -1, 0 or 1.

        Unlike the rich comparisons this is a total order: NaN sorts after
        every number and -0.0 before 0.0.
        """
        other_value = self._comparable(other)
        if other_value is None:
            raise TypeError(f"Cannot compare Quantity with {type(other).__name__}")
        return _total_compare(self._value, other_value)

    def _comparable(self, other: object) -> float | None:
        if isinstance(other, Quantity):
            self._require_same_dimension(other, "compare")
            return other._value
        if isinstance(other, Real):
            return float(other)
        return None

    def __pos__(self) -> Quantity[U]:
        return self._derive(+self._value)

    def __neg__(self) -> Quantity[U]:
        return self._derive(-self._value)

    def __abs__(self) -> Quantity[U]:
        return self._derive(abs(self._value))

    def __add__(self, other: Quantity[U]) -> Quantity[U]:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_dimension(other, "add")
        return self._derive(self._value + other._value)

    def __sub__(self, other: Quantity[U]) -> Quantity[U]:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_dimension(other, "subtract")
        return self._derive(self._value - other._value)

    def __mul__(self, scalar: float) -> Quantity[U]:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._derive(self._value * scalar)

    __rmul__ = __mul__

    @overload
    def __truediv__(self, other: Quantity[U]) -> float: ...
    @overload
    def __truediv__(self, other: float) -> Quantity[U]: ...

    def __truediv__(self, other: Quantity[U] | float) -> Quantity[U] | float:
        if isinstance(other, Quantity):
            # same dimension cancels out, leaving a bare ratio
            self._require_same_dimension(other, "divide")
            return ieee_divide(self._value, other._value)
        if isinstance(other, Real):
            return self._derive(ieee_divide(self._value, other))
        return NotImplemented

    def __lt__(self, other: Quantity[U] | float) -> bool:
        other_value = self._comparable(other)
        if other_value is None:
            return NotImplemented
        return self._value < other_value

    def __le__(self, other: Quantity[U] | float) -> bool:
        other_value = self._comparable(other)
        if other_value is None:
            return NotImplemented
        return self._value <= other_value

    def __gt__(self, other: Quantity[U] | float) -> bool:
        other_value = self._comparable(other)
        if other_value is None:
            return NotImplemented
        return self._value > other_value

    def __ge__(self, other: Quantity[U] | float) -> bool:
        other_value = self._comparable(other)
        if other_value is None:
            return NotImplemented
        return self._value >= other_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._dimension is other._dimension and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._dimension, self._value))

    def __reduce__(self) -> tuple[Any, ...]:
        return (Quantity, (self._value, self._dimension))

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Quantity({self._value!r}, {self._dimension.__name__})"


def minimum(a: Quantity[U], b: Quantity[U]) -> Quantity[U]:
    """Smaller of two quantities; NaN propagates and -0.0 is smaller than 0.0."""
    a._require_same_dimension(b, "compare")
    if math.isnan(a.value) or math.isnan(b.value):
        return a._derive(math.nan)
    return a if _total_compare(a.value, b.value) <= 0 else b


def maximum(a: Quantity[U], b: Quantity[U]) -> Quantity[U]:
    """Larger of two quantities; NaN propagates and 0.0 is larger than -0.0."""
    a._require_same_dimension(b, "compare")
    if math.isnan(a.value) or math.isnan(b.value):
        return a._derive(math.nan)
    return a if _total_compare(a.value, b.value) >= 0 else b


def absolute(q: Quantity[U]) -> Quantity[U]:
    return abs(q)
