"""Affine scale primitive shared by every unit conversion."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def ieee_divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf/nan on a zero denominator instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


@dataclass(frozen=True, slots=True)
class Scale:
    """
    Affine map between a canonical numeral and a local numeral.

    ``map`` takes a canonical value to the local numeral, ``value * factor + base``,
    and ``unmap`` takes it back. ``factor`` is the number of local units per
    canonical unit and must be non-zero; a zero factor is not checked and
    ``unmap`` then returns infinity or NaN.

    :var factor: local units per canonical unit
    :vartype factor: float
    :var base: local numeral of the canonical zero
    :vartype base: float
    """

    factor: float
    base: float = 0.0

    def map(self, value: float) -> float:
        """canonical -> local"""
        return value * self.factor + self.base

    def unmap(self, value: float) -> float:
        """local -> canonical"""
        return ieee_divide(value - self.base, self.factor)
