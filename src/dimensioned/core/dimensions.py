"""Dimension markers.

Each marker is a class used purely as a tag: as a type argument
(``Quantity[Mass]``) for static checking, and as the dimension carried at run
time by every quantity and scale. Markers are never instantiated.
"""
from __future__ import annotations

from typing import Any


class Dimension:
    """Base class of every dimension marker."""

    def __new__(cls, *args: Any, **kwargs: Any) -> "Dimension":
        raise TypeError(f"{cls.__name__} is a dimension marker and cannot be instantiated.")


class Mass(Dimension):
    """kilogram"""


class MolecularWeight(Dimension):
    """kilogram per mole"""


class Time(Dimension):
    """second"""


class Distance(Dimension):
    """meter"""


class Velocity(Dimension):
    """meter per second"""


class Energy(Dimension):
    """joule"""


class Radioactivity(Dimension):
    """becquerel"""


class RadiationAbsorbedDose(Dimension):
    """gray"""


class RadiationDoseEquivalent(Dimension):
    """sievert"""


class RadiationExposure(Dimension):
    """coulomb per kilogram"""


class ArealDensity(Dimension):
    """kilogram per square meter"""


class ReciprocalDistance(Dimension):
    """reciprocal meter"""


class ReciprocalArealDensity(Dimension):
    """square meter per kilogram"""


class Density(Dimension):
    """kilogram per cubic meter"""


class Substance(Dimension):
    """mole"""


class Area(Dimension):
    """square meter"""


class Volume(Dimension):
    """cubic meter"""


class Temperature(Dimension):
    """kelvin"""


class MolarConcentration(Dimension):
    """mole per cubic meter"""


class SpecificHeatCapacity(Dimension):
    """joule per kilogram kelvin"""


class HeatCapacity(Dimension):
    """joule per kelvin"""


class ThermalConductivity(Dimension):
    """watt per meter kelvin"""


class Pressure(Dimension):
    """pascal"""


DIMENSIONS: tuple[type[Dimension], ...] = (
    Mass,
    MolecularWeight,
    Time,
    Distance,
    Velocity,
    Energy,
    Radioactivity,
    RadiationAbsorbedDose,
    RadiationDoseEquivalent,
    RadiationExposure,
    ArealDensity,
    ReciprocalDistance,
    ReciprocalArealDensity,
    Density,
    Substance,
    Area,
    Volume,
    Temperature,
    MolarConcentration,
    SpecificHeatCapacity,
    HeatCapacity,
    ThermalConductivity,
    Pressure,
)

_DIMENSIONS_BY_NAME: dict[str, type[Dimension]] = {d.__name__: d for d in DIMENSIONS}


def dimension_by_name(name: str) -> type[Dimension]:
    """Resolve a dimension marker from its class name, e.g. ``"Mass"``."""
    try:
        return _DIMENSIONS_BY_NAME[name.strip()]
    except KeyError:
        raise ValueError(f"Unknown dimension '{name}'.") from None
