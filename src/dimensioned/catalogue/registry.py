"""Lookup of catalogue scales by name."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from dimensioned.catalogue import scales
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
from dimensioned.core.quantity import QuantityScale
from dimensioned.validation.exceptions import DimensionMismatchError, UnknownScaleError

logger = logging.getLogger(__name__)

SCALES: Mapping[str, QuantityScale] = MappingProxyType(
    {
        name: value
        for name, value in vars(scales).items()
        if name.isupper() and isinstance(value, QuantityScale)
    }
)
"""Every catalogue scale by its constant name."""

STANDARD_SCALE_NAMES: Mapping[type[Dimension], str] = MappingProxyType(
    {
        Mass: "KILOGRAMS",
        MolecularWeight: "KG_PER_MOLE",
        Time: "SECOND",
        Distance: "METER",
        Velocity: "M_PER_S",
        Energy: "JOULE",
        Radioactivity: "BECQUEREL",
        RadiationAbsorbedDose: "GRAY",
        RadiationDoseEquivalent: "SIEVERT",
        RadiationExposure: "COULOMB_PER_KG",
        ArealDensity: "KG_PER_M2",
        ReciprocalDistance: "RECIP_METER",
        ReciprocalArealDensity: "M2_PER_KG",
        Density: "KG_PER_M3",
        Substance: "MOLE",
        Area: "M2",
        Volume: "M3",
        Temperature: "KELVIN",
        MolarConcentration: "MOLE_PER_M3",
        SpecificHeatCapacity: "J_PER_KG_K",
        HeatCapacity: "J_PER_K",
        ThermalConductivity: "W_PER_M_K",
        Pressure: "PASCAL",
    }
)

STANDARD_SCALES: Mapping[type[Dimension], QuantityScale] = MappingProxyType(
    {dimension: SCALES[name] for dimension, name in STANDARD_SCALE_NAMES.items()}
)


def get_scale(name: str, dimension: type[Dimension] | None = None) -> QuantityScale:
    """
    Resolve a catalogue scale by name, case-insensitively.

    :param name: constant name such as ``"GRAMS"`` or ``"kw_hours"``
    :param dimension: when given, the scale must belong to this dimension
    :raises UnknownScaleError: no scale with that name exists
    :raises DimensionMismatchError: the scale belongs to another dimension
    """
    key = name.strip().upper()
    try:
        scale = SCALES[key]
    except KeyError:
        raise UnknownScaleError(f"Unknown scale '{name}'.") from None
    if dimension is not None and scale.dimension is not dimension:
        raise DimensionMismatchError(
            f"Scale '{key}' measures {scale.dimension.__name__}, expected {dimension.__name__}."
        )
    logger.debug("Resolved scale '%s' -> %s", name, scale)
    return scale


def scales_for(dimension: type[Dimension]) -> dict[str, QuantityScale]:
    """All catalogue scales of ``dimension`` by name."""
    return {name: scale for name, scale in SCALES.items() if scale.dimension is dimension}
