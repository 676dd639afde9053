# brew_units/__init__.py

"""
Brewing units for pint

    import brew_units
    ureg = brew_units.initialize()
    Q_ = ureg.Quantity

    Q_(42, "gal").to("bbl")                                   # 1 bbl
    brew_units.convert("sg", Q_(10, "°P"), brew_units.Brewing())
"""

from .dimensions import (
    BITTERNESS,
    COLOR,
    DENSITY,
    DIASTATIC_POWER,
    DIMENSIONLESS,
    SUGAR_CONTENT,
    VOLUME,
    DimensionDeclaration,
    dimension_name,
)
from .errors import (
    BrewUnitsError,
    DeclarationError,
    DimensionMismatchError,
    DuplicateUnitError,
    EquivalenceError,
    MalformedUnitError,
    MissingEquivalenceError,
    RegistryNotInitializedError,
    UndeclaredParentError,
    UnsupportedEquivalenceError,
)
from .config import Settings, load_settings
from .formulas import gu_to_plato, plato_to_gu
from .registry import build_registry, get_registry, initialize, registered_symbols
from .scales import compare, is_less, linear_magnitude
from .equivalences import Brewing, DensityConcentration, SugarGravity, convert, resolve_equivalence

__all__ = [
    "BITTERNESS",
    "COLOR",
    "DENSITY",
    "DIASTATIC_POWER",
    "DIMENSIONLESS",
    "SUGAR_CONTENT",
    "VOLUME",
    "DimensionDeclaration",
    "dimension_name",
    "BrewUnitsError",
    "DeclarationError",
    "DimensionMismatchError",
    "DuplicateUnitError",
    "EquivalenceError",
    "MalformedUnitError",
    "MissingEquivalenceError",
    "RegistryNotInitializedError",
    "UndeclaredParentError",
    "UnsupportedEquivalenceError",
    "Settings",
    "load_settings",
    "gu_to_plato",
    "plato_to_gu",
    "build_registry",
    "get_registry",
    "initialize",
    "registered_symbols",
    "compare",
    "is_less",
    "linear_magnitude",
    "Brewing",
    "DensityConcentration",
    "SugarGravity",
    "convert",
    "resolve_equivalence",
]
