import pytest
from astropy.units import Unit

from dimensioned.catalogue import STANDARD_SCALES, scales
from dimensioned.catalogue.scales import (
    ATMOSPHERES,
    BECQUEREL,
    CELSIUS,
    CURIE,
    ELECTRON_VOLT,
    GIGABECQUERELS,
    GRAMS,
    JOULE,
    KELVIN,
    KILOGRAMS,
    KW_HOURS,
    PASCAL,
    RAD,
    REM,
    ROENTGEN,
    SIEVERT,
    GRAY,
    COULOMB_PER_KG,
    WATT_SECONDS,
)
from dimensioned.core import DIMENSIONS, Quantity, QuantityScale
from dimensioned.utils.unit_compat import ASTROPY_UNITS


def test_every_dimension_has_a_standard_scale() -> None:
    assert set(STANDARD_SCALES) == set(DIMENSIONS)
    for dimension, scale in STANDARD_SCALES.items():
        assert scale.dimension is dimension
        assert scale.factor == 1.0
        assert scale.base == 0.0


def test_catalogue_scales_have_non_zero_factors(catalogue_scale: QuantityScale) -> None:
    assert catalogue_scale.factor != 0.0
    assert catalogue_scale.dimension in STANDARD_SCALES


def test_kilograms_render_as_grams() -> None:
    q = Quantity(5.0, KILOGRAMS)

    assert q.value == 5.0
    assert q.to_value(GRAMS) == 5000.0


def test_celsius_offset() -> None:
    assert Quantity(0.0, CELSIUS).to_value(KELVIN) == 273.15
    assert CELSIUS.base == -273.15


def test_curie_is_37_gigabecquerels() -> None:
    assert CURIE == GIGABECQUERELS * 37.0
    assert CURIE.factor == GIGABECQUERELS.factor / 37.0
    assert Quantity(1.0, CURIE).to_value(BECQUEREL) == pytest.approx(3.7e10, rel=1e-12)


def test_watt_seconds_are_joules() -> None:
    assert WATT_SECONDS == JOULE
    assert Quantity(1.0, KW_HOURS).value == pytest.approx(3.6e6, rel=1e-12)


def test_legacy_radiation_units() -> None:
    assert Quantity(100.0, RAD).to_value(GRAY) == pytest.approx(1.0)
    assert Quantity(100.0, REM).to_value(SIEVERT) == pytest.approx(1.0)
    assert Quantity(1.0, ROENTGEN).to_value(COULOMB_PER_KG) == pytest.approx(2.58e-4, rel=1e-12)


def test_atmosphere() -> None:
    assert Quantity(1.0, ATMOSPHERES).to_value(PASCAL) == pytest.approx(101325.0, rel=1e-12)
    assert Quantity(101325.0, PASCAL).to_value(ATMOSPHERES) == pytest.approx(1.0, rel=1e-12)


def test_electron_volt_is_exact_si_value() -> None:
    assert Quantity(1.0, ELECTRON_VOLT).value == pytest.approx(1.602176634e-19, rel=1e-15)


@pytest.mark.parametrize(
    ("name", "astropy_unit"),
    [
        ("GRAMS", "g"),
        ("MILLISECONDS", "ms"),
        ("MICROSECONDS", "us"),
        ("NANOSECONDS", "ns"),
        ("MINUTES", "min"),
        ("HOURS", "h"),
        ("DAYS", "d"),
        ("KILOMETERS", "km"),
        ("CENTIMETERS", "cm"),
        ("MILLIMETERS", "mm"),
        ("KILOJOULES", "kJ"),
        ("MEGAJOULES", "MJ"),
        ("GIGAJOULES", "GJ"),
        ("WATT_HOURS", "W h"),
        ("KW_HOURS", "kW h"),
        ("ELECTRON_VOLT", "eV"),
        ("KILO_ELECTRON_VOLT", "keV"),
        ("MEGA_ELECTRON_VOLT", "MeV"),
        ("GIGA_ELECTRON_VOLT", "GeV"),
        ("TERA_ELECTRON_VOLT", "TeV"),
        ("CURIE", "Ci"),
        ("MILLISIEVERTS", "mJ / kg"),
        ("RECIP_CENTIMETERS", "1 / cm"),
        ("G_PER_CM2", "g / cm2"),
        ("G_PER_CM3", "g / cm3"),
        ("G_PER_L", "g / l"),
        ("CM2_PER_G", "cm2 / g"),
        ("KM_PER_S", "km / s"),
        ("LITERS", "l"),
        ("MILLILITERS", "ml"),
        ("J_PER_G_K", "J / (g K)"),
        ("KJ_PER_KG_K", "kJ / (kg K)"),
        ("MILLIWATTS_PER_M_K", "mW / (m K)"),
        ("G_PER_MOLE", "g / mol"),
        ("KILOPASCALS", "kPa"),
        ("BAR", "bar"),
    ],
)
def test_scale_matches_astropy_definition(name: str, astropy_unit: str) -> None:
    scale = getattr(scales, name)
    expected = Unit(astropy_unit).to(ASTROPY_UNITS[scale.dimension])

    assert Quantity(1.0, scale).value == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize(
    ("name", "becquerels"),
    [
        ("KILOBECQUERELS", 1e3),
        ("MEGABECQUERELS", 1e6),
        ("TERABECQUERELS", 1e12),
        ("NANOCURIES", 37.0),
        ("MICROCURIES", 3.7e4),
        ("MILLICURIES", 3.7e7),
        ("KILOCURIES", 3.7e13),
        ("MEGACURIES", 3.7e16),
        ("GIGACURIES", 3.7e19),
    ],
)
def test_radioactivity_prefixes(name: str, becquerels: float) -> None:
    assert Quantity(1.0, getattr(scales, name)).to_value(BECQUEREL) == pytest.approx(becquerels, rel=1e-12)
