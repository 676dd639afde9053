# brew_units/dimensions.py

"""
Dimension declarations

A dimension is a pint UnitsContainer of bracketed dimension symbols, so
products and integer powers stay structural: COLOR * COLOR == COLOR ** 2.
"""

from typing import Dict, List

from pint.util import UnitsContainer
from pydantic import BaseModel, ConfigDict, field_validator


class DimensionDeclaration(BaseModel):
    """A base dimension with its display name"""
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Symbols look like '[color]'"""
        if not (v.startswith("[") and v.endswith("]") and v[1:-1].isidentifier()):
            raise ValueError(f"Dimension symbol must be a bracketed identifier, got '{v}'")
        return v

    @property
    def dimensionality(self) -> UnitsContainer:
        return UnitsContainer({self.symbol: 1})


# ==================== HOST DIMENSIONS ====================

LENGTH_DIMENSION = DimensionDeclaration(symbol="[length]", name="Length")
MASS_DIMENSION = DimensionDeclaration(symbol="[mass]", name="Mass")
TIME_DIMENSION = DimensionDeclaration(symbol="[time]", name="Time")

HOST_DIMENSIONS: List[DimensionDeclaration] = [LENGTH_DIMENSION, MASS_DIMENSION, TIME_DIMENSION]

# ==================== BREWING DIMENSIONS ====================

COLOR_DIMENSION = DimensionDeclaration(symbol="[color]", name="Color")
DIASTATIC_POWER_DIMENSION = DimensionDeclaration(symbol="[diastatic_power]", name="DiastaticPower")
BITTERNESS_DIMENSION = DimensionDeclaration(symbol="[bitterness]", name="Bitterness")
SUGAR_CONTENT_DIMENSION = DimensionDeclaration(symbol="[sugar_content]", name="SugarContent")

BREWING_DIMENSIONS: List[DimensionDeclaration] = [
    COLOR_DIMENSION,
    DIASTATIC_POWER_DIMENSION,
    BITTERNESS_DIMENSION,
    SUGAR_CONTENT_DIMENSION,
]

# ==================== DIMENSIONALITIES ====================

DIMENSIONLESS = UnitsContainer()
LENGTH = LENGTH_DIMENSION.dimensionality
MASS = MASS_DIMENSION.dimensionality
TIME = TIME_DIMENSION.dimensionality
VOLUME = LENGTH ** 3
DENSITY = MASS / VOLUME

COLOR = COLOR_DIMENSION.dimensionality
DIASTATIC_POWER = DIASTATIC_POWER_DIMENSION.dimensionality
BITTERNESS = BITTERNESS_DIMENSION.dimensionality
SUGAR_CONTENT = SUGAR_CONTENT_DIMENSION.dimensionality

_DISPLAY_NAMES: Dict[UnitsContainer, str] = {
    d.dimensionality: d.name for d in HOST_DIMENSIONS + BREWING_DIMENSIONS
}
_DISPLAY_NAMES.update({
    DIMENSIONLESS: "dimensionless",
    VOLUME: "Volume",
    DENSITY: "Density",
})


def dimension_name(dimensionality: UnitsContainer) -> str:
    """Display name for a dimensionality, falling back to pint's rendering."""
    try:
        return _DISPLAY_NAMES[dimensionality]
    except KeyError:
        return str(dimensionality)
