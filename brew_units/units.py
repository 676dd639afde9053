# brew_units/units.py

"""
The unit table

HOST_* is the small slice of SI the brewing units hang off (length, mass,
time, litre, percent). BREWING_UNITS is the brewing set proper. Order matters:
a parent is always declared before its children.

Pint rewrites "°" to "degree" while parsing, so every ° symbol has a
degreeX alias. pH⁺ can be displayed but not typed; parse it as pwrH.
"""

from fractions import Fraction
from typing import List, Tuple

from .declarations import AffineDirection, AffineUnit, LinearUnit, LogarithmicUnit, ReferenceUnit, UnitDeclaration
from .dimensions import (
    BITTERNESS,
    COLOR,
    DIASTATIC_POWER,
    DIMENSIONLESS,
    LENGTH,
    MASS,
    SUGAR_CONTENT,
    TIME,
    VOLUME,
)

# ==================== HOST ====================

HOST_PREFIXES: List[str] = [
    "micro- = 1e-6 = µ- = u-",
    "milli- = 1e-3 = m-",
    "centi- = 1e-2 = c-",
    "deci- = 1e-1 = d-",
    "kilo- = 1e3 = k-",
]

HOST_UNITS: List[UnitDeclaration] = [
    ReferenceUnit(name="meter", symbol="m", aliases=("metre",), dimension=LENGTH),
    ReferenceUnit(name="gram", symbol="g", dimension=MASS),
    ReferenceUnit(name="second", symbol="s", aliases=("sec",), dimension=TIME),
    LinearUnit(name="minute", symbol="min", parent_unit="second", factor=60, dimension=TIME),
    LinearUnit(name="hour", symbol="h", aliases=("hr",), parent_unit="minute", factor=60, dimension=TIME),
    LinearUnit(name="day", symbol="d", parent_unit="hour", factor=24, dimension=TIME),
    LinearUnit(name="week", symbol="wk", parent_unit="day", factor=7, dimension=TIME),
    LinearUnit(name="inch", symbol="inch", parent_unit="meter", factor=Fraction("0.0254"), dimension=LENGTH),
    LinearUnit(
        name="liter", symbol="L", aliases=("l", "litre"),
        parent_unit="meter", parent_power=3, factor=Fraction(1, 1000), dimension=VOLUME,
    ),
    LinearUnit(name="percent", symbol="%", aliases=("pct",), factor=Fraction(1, 100), dimension=DIMENSIONLESS),
    LinearUnit(name="permille", symbol="‰", factor=Fraction(1, 1000), dimension=DIMENSIONLESS),
]

# ==================== BREWING ====================

US_VOLUMES: List[UnitDeclaration] = [
    LinearUnit(name="gallon", symbol="gal", parent_unit="inch", parent_power=3, factor=231, dimension=VOLUME),
    LinearUnit(name="quart", symbol="qt", parent_unit="gallon", factor=Fraction(1, 4), dimension=VOLUME),
    LinearUnit(name="pint", symbol="pt", parent_unit="quart", factor=Fraction(1, 2), dimension=VOLUME),
    LinearUnit(name="cup", symbol="cup", parent_unit="pint", factor=Fraction(1, 2), dimension=VOLUME),
    LinearUnit(name="fluid_ounce", symbol="floz", parent_unit="pint", factor=Fraction(1, 16), dimension=VOLUME),
    LinearUnit(name="tablespoon", symbol="tbsp", parent_unit="fluid_ounce", factor=Fraction(1, 2), dimension=VOLUME),
    LinearUnit(name="teaspoon", symbol="tsp", parent_unit="tablespoon", factor=Fraction(1, 3), dimension=VOLUME),
    LinearUnit(name="barrel", symbol="bbl", parent_unit="gallon", factor=42, dimension=VOLUME),
]

IMPERIAL_VOLUMES: List[UnitDeclaration] = [
    LinearUnit(
        name="imperial_fluid_ounce", symbol="ifloz",
        parent_unit="liter", factor=Fraction("0.0284130625"), dimension=VOLUME,
    ),
    LinearUnit(name="gill", symbol="gi", parent_unit="imperial_fluid_ounce", factor=5, dimension=VOLUME),
    LinearUnit(name="imperial_pint", symbol="ipt", parent_unit="imperial_fluid_ounce", factor=20, dimension=VOLUME),
    LinearUnit(name="imperial_quart", symbol="iqt", parent_unit="imperial_pint", factor=2, dimension=VOLUME),
    LinearUnit(name="imperial_gallon", symbol="igal", parent_unit="imperial_pint", factor=8, dimension=VOLUME),
    LinearUnit(name="imperial_barrel", symbol="ibbl", parent_unit="imperial_gallon", factor=36, dimension=VOLUME),
]

SUGAR_UNITS: List[UnitDeclaration] = [
    ReferenceUnit(name="degree_Plato", symbol="°P", aliases=("degreeP", "plato"), dimension=SUGAR_CONTENT),
    LinearUnit(name="Brix", symbol="Brix", parent_unit="degree_Plato", factor=1, dimension=SUGAR_CONTENT),
    LinearUnit(name="Balling", symbol="Balling", parent_unit="degree_Plato", factor=1, dimension=SUGAR_CONTENT),
    LinearUnit(name="specific_gravity", symbol="sg", factor=1, dimension=DIMENSIONLESS),
    # gu = 1000 * (sg - 1), i.e. permille shifted down by 1000
    AffineUnit(
        name="gravity_unit", symbol="gu", aliases=("gp", "gravity_point"),
        parent_unit="permille", scale=1, offset=-1000, direction=AffineDirection.FROM_PARENT,
        dimension=DIMENSIONLESS,
    ),
]

DIASTATIC_POWER_UNITS: List[UnitDeclaration] = [
    ReferenceUnit(
        name="degree_Lintner", symbol="°Lintner", aliases=("Lintner", "degreeLintner"),
        dimension=DIASTATIC_POWER,
    ),
    LinearUnit(name="WK_aux", symbol="WK_aux", parent_unit="degree_Lintner", factor=Fraction(10, 35), dimension=DIASTATIC_POWER),
    # WK_aux = °WK + 16
    AffineUnit(
        name="degree_Windisch_Kolbach", symbol="°WK", aliases=("degreeWK",),
        parent_unit="WK_aux", scale=1, offset=16, dimension=DIASTATIC_POWER,
    ),
]

COLOR_UNITS: List[UnitDeclaration] = [
    ReferenceUnit(name="SRM", symbol="SRM", aliases=("srm",), dimension=COLOR),
    # SRM = 1.3546 * °L - 0.76
    AffineUnit(
        name="degree_Lovibond", symbol="°L", aliases=("Lovi", "degreeL"),
        parent_unit="SRM", scale=Fraction("1.3546"), offset=Fraction("-0.76"), dimension=COLOR,
    ),
    LinearUnit(name="EBC", symbol="EBC", aliases=("ebc",), parent_unit="SRM", factor=Fraction(100, 197), dimension=COLOR),
]

BITTERNESS_UNITS: List[UnitDeclaration] = [
    ReferenceUnit(name="IBU", symbol="IBU", dimension=BITTERNESS),
]

CONCENTRATION_UNITS: List[UnitDeclaration] = [
    LinearUnit(name="parts_per_million", symbol="ppm", factor=Fraction(1, 10 ** 6), dimension=DIMENSIONLESS),
    LinearUnit(name="parts_per_billion", symbol="ppb", factor=Fraction(1, 10 ** 9), dimension=DIMENSIONLESS),
    LinearUnit(name="parts_per_trillion", symbol="ppt", factor=Fraction(1, 10 ** 12), dimension=DIMENSIONLESS),
    LogarithmicUnit(
        name="powerofHydrogen", symbol="pH⁺", aliases=("pwrH",),
        base=10.0, multiplier=10.0, dimension=DIMENSIONLESS,
    ),
]

BREWING_UNITS: List[UnitDeclaration] = (
    US_VOLUMES
    + IMPERIAL_VOLUMES
    + SUGAR_UNITS
    + DIASTATIC_POWER_UNITS
    + COLOR_UNITS
    + BITTERNESS_UNITS
    + CONCENTRATION_UNITS
)

# Symbols callers are expected to use; WK_aux only anchors the °WK offset.
EXPOSED_SYMBOLS: Tuple[str, ...] = (
    "gal", "qt", "pt", "cup", "floz", "tbsp", "tsp", "bbl",
    "igal", "ipt", "iqt", "ifloz", "gi", "ibbl",
    "°P", "Brix", "Balling", "sg", "gu",
    "°Lintner", "°WK",
    "SRM", "°L", "EBC",
    "IBU",
    "ppm", "ppb", "ppt",
    "pH⁺",
)
