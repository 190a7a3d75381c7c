"""Conversion between quantities and ``astropy`` quantities.

``astropy`` does not distinguish gray from sievert (both are J/kg), so the
target dimension is always given explicitly when converting from astropy.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

import numpy as np
from astropy.units import Quantity as AstropyQuantity
from astropy.units import Unit, UnitBase, temperature

from dimensioned.core.dimensions import (
    Area,
    ArealDensity,
    Density,
    Dimension,
    Distance,
    Energy,
    HeatCapacity,
    Mass,
    MolarConcentration,
    MolecularWeight,
    Pressure,
    RadiationAbsorbedDose,
    RadiationDoseEquivalent,
    RadiationExposure,
    Radioactivity,
    ReciprocalArealDensity,
    ReciprocalDistance,
    SpecificHeatCapacity,
    Substance,
    Temperature,
    ThermalConductivity,
    Time,
    Velocity,
    Volume,
)
from dimensioned.core.quantity import Quantity, U

logger = logging.getLogger(__name__)

ASTROPY_UNITS: Mapping[type[Dimension], UnitBase] = MappingProxyType(
    {
        Mass: Unit("kg"),
        MolecularWeight: Unit("kg / mol"),
        Time: Unit("s"),
        Distance: Unit("m"),
        Velocity: Unit("m / s"),
        Energy: Unit("J"),
        Radioactivity: Unit("Bq"),
        RadiationAbsorbedDose: Unit("J / kg"),
        RadiationDoseEquivalent: Unit("J / kg"),
        RadiationExposure: Unit("C / kg"),
        ArealDensity: Unit("kg / m2"),
        ReciprocalDistance: Unit("1 / m"),
        ReciprocalArealDensity: Unit("m2 / kg"),
        Density: Unit("kg / m3"),
        Substance: Unit("mol"),
        Area: Unit("m2"),
        Volume: Unit("m3"),
        Temperature: Unit("K"),
        MolarConcentration: Unit("mol / m3"),
        SpecificHeatCapacity: Unit("J / (kg K)"),
        HeatCapacity: Unit("J / K"),
        ThermalConductivity: Unit("W / (m K)"),
        Pressure: Unit("Pa"),
    }
)
"""Canonical astropy unit of every dimension."""


def to_astropy(quantity: Quantity[U]) -> AstropyQuantity:
    """Express ``quantity`` as an astropy quantity in its canonical unit."""
    return AstropyQuantity(quantity.value, ASTROPY_UNITS[quantity.dimension])


def from_astropy(value: AstropyQuantity, dimension: type[U]) -> Quantity[U]:
    """
    Convert a scalar astropy quantity to a :class:`Quantity` of ``dimension``.

    :param value: scalar astropy quantity in any unit equivalent to the
        dimension's canonical unit (temperatures may use degC or degF)
    :param dimension: dimension marker of the result
    :raises ValueError: ``value`` is not a scalar
    :raises astropy.units.UnitsError: the units are not equivalent
    """
    if not np.isscalar(value.value):
        raise ValueError(f"Expected a scalar Quantity, got {value}")
    target = ASTROPY_UNITS[dimension]
    equivalencies = temperature() if dimension is Temperature else []
    canonical = float(value.to_value(target, equivalencies=equivalencies))
    logger.debug("Converted %s to %s %s", value, canonical, target)
    return Quantity(canonical, dimension)
