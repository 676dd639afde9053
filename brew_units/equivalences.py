# brew_units/equivalences.py

"""
Equivalence Resolver

Conversions between dimension families that are not linearly related. They
only happen when the caller passes an equivalence explicitly:

    convert("sg", Q_(10, "°P"), Brewing())

Dispatch is a closed table keyed on (source kind, target kind):

    Dimensionless -> Density        value * 1 kg/L
    Density       -> Dimensionless  value * 1 L/kg
    Dimensionless -> SugarContent   gu_to_plato(value in gu)
    SugarContent  -> Dimensionless  plato_to_gu(value in °P), in gu

The 1 kg/L factor assumes a water-like reference density. It is not
generalised to other liquids.

Each rule lands in its natural unit (kg/L, °P, gu); convert() rescales the
result to the requested unit with ordinary pint conversion, so
°P -> sg goes Plato -> gu by formula and gu -> sg through the affine unit.
"""

import logging
from enum import Enum
from typing import Callable, ClassVar, Dict, FrozenSet, Optional, Tuple

from pint.errors import DimensionalityError
from pint.util import UnitsContainer
from pydantic import BaseModel, ConfigDict

from .dimensions import DENSITY, DIMENSIONLESS, SUGAR_CONTENT
from .errors import MissingEquivalenceError, UnsupportedEquivalenceError
from .formulas import gu_to_plato, plato_to_gu
from .registry import get_registry

logger = logging.getLogger(__name__)


class DimensionKind(str, Enum):
    """Dimension families the resolver knows about"""
    DIMENSIONLESS = "DIMENSIONLESS"
    DENSITY = "DENSITY"
    SUGAR_CONTENT = "SUGAR_CONTENT"


_KINDS: Dict[UnitsContainer, DimensionKind] = {
    DIMENSIONLESS: DimensionKind.DIMENSIONLESS,
    DENSITY: DimensionKind.DENSITY,
    SUGAR_CONTENT: DimensionKind.SUGAR_CONTENT,
}


def classify_dimension(dimensionality: UnitsContainer) -> Optional[DimensionKind]:
    return _KINDS.get(dimensionality)


Pair = Tuple[DimensionKind, DimensionKind]


# ==================== RULES ====================

def _concentration_to_density(quantity, ureg):
    return ureg.Quantity(quantity.to("dimensionless").magnitude, "kg/L")


def _density_to_concentration(quantity, ureg):
    return quantity * ureg.Quantity(1, "L/kg")


def _gravity_to_plato(quantity, ureg):
    return ureg.Quantity(gu_to_plato(quantity.to("gravity_unit").magnitude), "degree_Plato")


def _plato_to_gravity(quantity, ureg):
    return ureg.Quantity(plato_to_gu(quantity.to("degree_Plato").magnitude), "gravity_unit")


RULES: Dict[Pair, Callable] = {
    (DimensionKind.DIMENSIONLESS, DimensionKind.DENSITY): _concentration_to_density,
    (DimensionKind.DENSITY, DimensionKind.DIMENSIONLESS): _density_to_concentration,
    (DimensionKind.DIMENSIONLESS, DimensionKind.SUGAR_CONTENT): _gravity_to_plato,
    (DimensionKind.SUGAR_CONTENT, DimensionKind.DIMENSIONLESS): _plato_to_gravity,
}


# ==================== EQUIVALENCES ====================

class Equivalence(BaseModel):
    """Stateless opt-in token for a set of dimension pairs"""
    model_config = ConfigDict(frozen=True)

    pairs: ClassVar[FrozenSet[Pair]] = frozenset()

    @property
    def name(self) -> str:
        return type(self).__name__

    def covers(self, pair: Pair) -> bool:
        return pair in self.pairs

    def __str__(self) -> str:
        return f"{self.name}()"


class DensityConcentration(Equivalence):
    """Dimensionless concentration <-> density, assuming 1 kg/L"""
    pairs: ClassVar[FrozenSet[Pair]] = frozenset({
        (DimensionKind.DIMENSIONLESS, DimensionKind.DENSITY),
        (DimensionKind.DENSITY, DimensionKind.DIMENSIONLESS),
    })


class SugarGravity(Equivalence):
    """Gravity (sg, gu) <-> sugar content (°P)"""
    pairs: ClassVar[FrozenSet[Pair]] = frozenset({
        (DimensionKind.DIMENSIONLESS, DimensionKind.SUGAR_CONTENT),
        (DimensionKind.SUGAR_CONTENT, DimensionKind.DIMENSIONLESS),
    })


class Brewing(Equivalence):
    """Every brewing equivalence"""
    pairs: ClassVar[FrozenSet[Pair]] = DensityConcentration.pairs | SugarGravity.pairs


# ==================== RESOLVER ====================

def resolve_equivalence(
    target_dimension: UnitsContainer,
    source_quantity,
    equivalence: Optional[Equivalence],
):
    """
    Apply the rule for (source dimension, target dimension).

    Returns the result in the rule's natural unit. Raises
    MissingEquivalenceError when no equivalence is given, and
    UnsupportedEquivalenceError when the pair is not in the table or the
    equivalence does not cover it.
    """
    ureg = get_registry()
    source_dimension = source_quantity.dimensionality

    if equivalence is None:
        raise MissingEquivalenceError(source_dimension, target_dimension)

    source_kind = classify_dimension(source_dimension)
    target_kind = classify_dimension(target_dimension)
    pair = (source_kind, target_kind)

    rule = RULES.get(pair)
    if rule is None or not equivalence.covers(pair):
        raise UnsupportedEquivalenceError(str(equivalence), source_dimension, target_dimension)

    logger.debug(f"{equivalence}: {source_kind.value} -> {target_kind.value} for {source_quantity}")
    return rule(source_quantity, ureg)


def convert(target, quantity, equivalence: Optional[Equivalence] = None):
    """
    Convert `quantity` to `target` units.

    Same-family conversions are plain pint conversions. Crossing families
    needs an equivalence; without one this raises MissingEquivalenceError
    rather than guessing.
    """
    try:
        return quantity.to(target)
    except DimensionalityError as e:
        ureg = get_registry()
        source_dimension = quantity.dimensionality
        target_dimension = ureg.get_dimensionality(target)

        # Same dimension but still failing: offset unit misuse, not a family crossing
        if source_dimension == target_dimension:
            raise

        if equivalence is None:
            raise MissingEquivalenceError(source_dimension, target_dimension) from e

        return resolve_equivalence(target_dimension, quantity, equivalence).to(target)
