"""Temperature scales over kelvin as the canonical unit."""
from __future__ import annotations

from dimensioned.core.scale import Scale

CELSIUS_OFFSET = 273.15
"""Kelvin reading of 0 degrees Celsius."""

RANKINE_PER_KELVIN = 1.8
FAHRENHEIT_OFFSET = 459.67
"""Rankine reading of 0 degrees Fahrenheit."""

KELVIN = Scale(1.0, 0.0)
CELSIUS = Scale(1.0, -CELSIUS_OFFSET)
RANKINE = Scale(RANKINE_PER_KELVIN, 0.0)
FAHRENHEIT = Scale(RANKINE_PER_KELVIN, -FAHRENHEIT_OFFSET)
