"""Named scale constants.

Every dimension gets one standard scale; all other scales are derived from it
with the scale operators (``+`` kilo, ``-`` milli, ``* k`` a unit ``k`` times
larger, ``/ k`` a unit ``k`` times smaller).
"""
from __future__ import annotations

from dimensioned.catalogue import thermal
from dimensioned.core.dimensions import (
    Area,
    ArealDensity,
    Density,
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
from dimensioned.core.quantity import QuantityScale, standard_scale

ELECTRON_VOLT_J = 1.602176634e-19
CURIE_BQ = 3.7e10
ROENTGEN_C_PER_KG = 2.58e-4
STANDARD_ATMOSPHERE_PA = 101325.0

KILOGRAMS = standard_scale(Mass)
GRAMS = -KILOGRAMS

SECOND = standard_scale(Time)
MILLISECONDS = -SECOND
MICROSECONDS = -MILLISECONDS
NANOSECONDS = -MICROSECONDS
MINUTES = SECOND * 60.0
HOURS = MINUTES * 60.0
DAYS = HOURS * 24.0

METER = standard_scale(Distance)
KILOMETERS = +METER
CENTIMETERS = METER / 100.0
MILLIMETERS = -METER

JOULE = standard_scale(Energy)
KILOJOULES = +JOULE
MEGAJOULES = +KILOJOULES
GIGAJOULES = +MEGAJOULES
WATT_SECONDS = QuantityScale.from_factor(Energy, JOULE.factor, 0.0)
WATT_MINUTES = WATT_SECONDS * 60.0
WATT_HOURS = WATT_MINUTES * 60.0
KW_HOURS = WATT_HOURS * 1000.0

# prefixed electronvolts use the exact joule values instead of chaining +,
# which would accumulate rounding from the reciprocal
ELECTRON_VOLT = JOULE * ELECTRON_VOLT_J
KILO_ELECTRON_VOLT = JOULE * 1.602176634e-16
MEGA_ELECTRON_VOLT = JOULE * 1.602176634e-13
GIGA_ELECTRON_VOLT = JOULE * 1.602176634e-10
TERA_ELECTRON_VOLT = JOULE * 1.602176634e-7

BECQUEREL = standard_scale(Radioactivity)
KILOBECQUERELS = +BECQUEREL
MEGABECQUERELS = +KILOBECQUERELS
GIGABECQUERELS = +MEGABECQUERELS
TERABECQUERELS = +GIGABECQUERELS
CURIE = GIGABECQUERELS * 37.0
MILLICURIES = MEGABECQUERELS * 37.0
MICROCURIES = KILOBECQUERELS * 37.0
NANOCURIES = BECQUEREL * 37.0
KILOCURIES = +CURIE
MEGACURIES = +KILOCURIES
GIGACURIES = +MEGACURIES

GRAY = standard_scale(RadiationAbsorbedDose)
RAD = GRAY / 100.0

SIEVERT = standard_scale(RadiationDoseEquivalent)
MILLISIEVERTS = -SIEVERT
MICROSIEVERTS = -MILLISIEVERTS
REM = SIEVERT / 100.0
MILLIREM = -REM
MICROREM = -MILLIREM

COULOMB_PER_KG = standard_scale(RadiationExposure)
ROENTGEN = COULOMB_PER_KG * ROENTGEN_C_PER_KG

RECIP_METER = standard_scale(ReciprocalDistance)
RECIP_CENTIMETERS = RECIP_METER * 100.0

KG_PER_M2 = standard_scale(ArealDensity)
G_PER_CM2 = KG_PER_M2 * 10.0

KG_PER_M3 = standard_scale(Density)
G_PER_CM3 = KG_PER_M3 * 1000.0
G_PER_L = KG_PER_M3

M2_PER_KG = standard_scale(ReciprocalArealDensity)
CM2_PER_G = M2_PER_KG / 10.0

M_PER_S = standard_scale(Velocity)
KM_PER_S = +M_PER_S

MOLE = standard_scale(Substance)

MOLE_PER_M3 = standard_scale(MolarConcentration)

M2 = standard_scale(Area)

M3 = standard_scale(Volume)
LITERS = M3 / 1000.0
MILLILITERS = -LITERS

KELVIN = QuantityScale(Temperature, thermal.KELVIN)
CELSIUS = QuantityScale(Temperature, thermal.CELSIUS)
RANKINE = QuantityScale(Temperature, thermal.RANKINE)
FAHRENHEIT = QuantityScale(Temperature, thermal.FAHRENHEIT)

J_PER_KG_K = standard_scale(SpecificHeatCapacity)
J_PER_G_K = +J_PER_KG_K
KJ_PER_KG_K = +J_PER_KG_K

J_PER_K = standard_scale(HeatCapacity)

W_PER_M_K = standard_scale(ThermalConductivity)
MILLIWATTS_PER_M_K = -W_PER_M_K

KG_PER_MOLE = standard_scale(MolecularWeight)
G_PER_MOLE = -KG_PER_MOLE

PASCAL = standard_scale(Pressure)
KILOPASCALS = +PASCAL
BAR = PASCAL * 1.0e5
ATMOSPHERES = PASCAL * STANDARD_ATMOSPHERE_PA
