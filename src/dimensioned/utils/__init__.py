from dimensioned.utils.typing import QuantityField, ScaleDefinition, quantity_validator
from dimensioned.utils.unit_compat import ASTROPY_UNITS, from_astropy, to_astropy

__all__ = [
    "QuantityField",
    "ScaleDefinition",
    "quantity_validator",
    "ASTROPY_UNITS",
    "from_astropy",
    "to_astropy",
]
