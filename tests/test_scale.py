import math

import pytest

from dimensioned.catalogue import thermal
from dimensioned.core.scale import Scale


def test_map_applies_factor_then_base() -> None:
    scale = Scale(2.0, 3.0)

    assert scale.map(5.0) == 13.0
    assert scale.unmap(13.0) == 5.0


def test_default_base_is_zero() -> None:
    assert Scale(1000.0).base == 0.0
    assert Scale(1000.0).map(0.25) == 250.0


def test_scale_is_immutable_value() -> None:
    scale = Scale(1.0, -273.15)

    with pytest.raises(AttributeError):
        scale.factor = 2.0  # type: ignore[misc]
    assert scale == Scale(1.0, -273.15)
    assert hash(scale) == hash(Scale(1.0, -273.15))


def test_zero_factor_is_not_guarded() -> None:
    scale = Scale(0.0)

    assert scale.map(10.0) == 0.0
    assert scale.unmap(1.0) == math.inf
    assert scale.unmap(-1.0) == -math.inf
    assert math.isnan(scale.unmap(0.0))


@pytest.mark.parametrize(
    ("scale", "kelvin", "expected"),
    [
        (thermal.KELVIN, 300.0, 300.0),
        (thermal.CELSIUS, 273.15, 0.0),
        (thermal.CELSIUS, 373.15, 100.0),
        (thermal.RANKINE, 100.0, 180.0),
        (thermal.FAHRENHEIT, 273.15, 32.0),
        (thermal.FAHRENHEIT, 373.15, 212.0),
    ],
)
def test_thermal_scales_render_kelvin(scale: Scale, kelvin: float, expected: float) -> None:
    assert scale.map(kelvin) == pytest.approx(expected)
    assert scale.unmap(expected) == pytest.approx(kelvin)
