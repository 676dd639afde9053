# brew_units/declarations.py

"""
Unit declarations - the closed set of unit relations

Every unit is one of:
- ReferenceUnit: scale 1.0 of its dimension (a pint base unit)
- LinearUnit: exact multiple of a parent unit, or of the pure number
- AffineUnit: scale plus offset relative to a parent unit
- LogarithmicUnit: multiplier * log_base(linear / parent)

validate_parameters() checks a declaration in isolation. How declarations
relate to each other is UnitTable's job (registry.py). to_definition() hands
pint a definition object, so no unit string is parsed at declaration time.

INVARIANT: a declaration never talks to a registry. Building the pint
definition is pure.
"""

import math
from enum import Enum
from fractions import Fraction
from typing import ClassVar, Optional, Tuple, Union

from pint.facets.nonmultiplicative.definitions import LogarithmicConverter, OffsetConverter
from pint.facets.plain import ScaleConverter, UnitDefinition
from pint.util import UnitsContainer
from pydantic import BaseModel, ConfigDict

from .dimensions import DIMENSIONLESS
from .errors import MalformedUnitError

Number = Union[int, Fraction, float]


class UnitKind(str, Enum):
    """Unit relation kinds"""
    REFERENCE = "REFERENCE"
    LINEAR = "LINEAR"
    AFFINE = "AFFINE"
    LOGARITHMIC = "LOGARITHMIC"


class AffineDirection(str, Enum):
    """Which side of the affine map the declared unit sits on"""
    TO_PARENT = "TO_PARENT"        # parent = scale * unit + offset
    FROM_PARENT = "FROM_PARENT"    # unit = scale * parent + offset


def _number(value: Number, non_int_type: type) -> Number:
    """Coerce a declared factor to the registry's numeric type."""
    if isinstance(value, int):
        return value
    if non_int_type is Fraction:
        # Floats go through their repr so 1.97 stays 197/100.
        return Fraction(str(value)) if isinstance(value, float) else value
    return non_int_type(value)


def _is_finite_nonzero(value: Number) -> bool:
    return value != 0 and math.isfinite(value)


# ==================== BASE DECLARATION ====================

class UnitDeclaration(BaseModel):
    """Fields shared by every unit relation"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ClassVar[UnitKind]

    name: str
    symbol: str
    aliases: Tuple[str, ...] = ()
    dimension: UnitsContainer

    @property
    def parent(self) -> Optional[str]:
        return None

    @property
    def keys(self) -> Tuple[str, ...]:
        """Every string pint will register this unit under"""
        keys = [self.name]
        if self.symbol != self.name:
            keys.append(self.symbol)
        keys.extend(self.aliases)
        return tuple(keys)

    def validate_parameters(self) -> None:
        if not self.name.isidentifier():
            raise MalformedUnitError(self.name, "name must be a valid identifier")
        for key in (self.symbol,) + self.aliases:
            if not key or key.strip() != key or " " in key:
                raise MalformedUnitError(self.name, f"symbol or alias '{key}' must be non-empty without spaces")
        if len(set(self.keys)) != len(self.keys):
            raise MalformedUnitError(self.name, "symbol and aliases repeat each other")

    def converter(self, non_int_type: type):
        """pint converter from this unit to its reference. Subclasses must override."""
        raise NotImplementedError

    def reference(self, non_int_type: type) -> UnitsContainer:
        """Units this unit is defined against. Subclasses must override."""
        raise NotImplementedError

    def to_definition(self, non_int_type: type = Fraction) -> UnitDefinition:
        """Build the pint definition for this unit."""
        return UnitDefinition(
            self.name,
            self.symbol if self.symbol != self.name else None,
            self.aliases,
            self.converter(non_int_type),
            self.reference(non_int_type),
        )


# ==================== RELATIONS ====================

class ReferenceUnit(UnitDeclaration):
    """Canonical 1.0 scale of a base dimension"""
    kind: ClassVar[UnitKind] = UnitKind.REFERENCE

    def converter(self, non_int_type: type):
        return ScaleConverter(1)

    def reference(self, non_int_type: type) -> UnitsContainer:
        return UnitsContainer(dict(self.dimension.items()), non_int_type=non_int_type)


class LinearUnit(UnitDeclaration):
    """unit = factor * parent ** parent_power (parent None: the pure number)"""
    kind: ClassVar[UnitKind] = UnitKind.LINEAR

    parent_unit: Optional[str] = None
    parent_power: int = 1
    factor: Number = 1

    @property
    def parent(self) -> Optional[str]:
        return self.parent_unit

    def validate_parameters(self) -> None:
        super().validate_parameters()
        if not _is_finite_nonzero(self.factor):
            raise MalformedUnitError(self.name, f"factor must be finite and non-zero, got {self.factor}")
        if self.parent_power == 0:
            raise MalformedUnitError(self.name, "parent_power must be non-zero")
        if self.parent_unit is None and self.parent_power != 1:
            raise MalformedUnitError(self.name, "parent_power needs a parent unit")

    def converter(self, non_int_type: type):
        return ScaleConverter(_number(self.factor, non_int_type))

    def reference(self, non_int_type: type) -> UnitsContainer:
        if self.parent_unit is None:
            return UnitsContainer(non_int_type=non_int_type)
        return UnitsContainer({self.parent_unit: self.parent_power}, non_int_type=non_int_type)


class AffineUnit(UnitDeclaration):
    """Scale and offset relative to a parent, direction explicit"""
    kind: ClassVar[UnitKind] = UnitKind.AFFINE

    parent_unit: str
    scale: Number = 1
    offset: Number = 0
    direction: AffineDirection = AffineDirection.TO_PARENT

    @property
    def parent(self) -> Optional[str]:
        return self.parent_unit

    def validate_parameters(self) -> None:
        super().validate_parameters()
        if not _is_finite_nonzero(self.scale):
            raise MalformedUnitError(self.name, f"scale must be finite and non-zero, got {self.scale}")
        if not math.isfinite(self.offset):
            raise MalformedUnitError(self.name, f"offset must be finite, got {self.offset}")

    def to_parent_terms(self, non_int_type: type) -> Tuple[Number, Number]:
        """(scale, offset) such that parent = scale * unit + offset"""
        scale = _number(self.scale, non_int_type)
        offset = _number(self.offset, non_int_type)
        if self.direction == AffineDirection.TO_PARENT:
            return scale, offset
        # unit = s * parent + o  =>  parent = unit / s - o / s
        scale = Fraction(scale) if non_int_type is Fraction else float(scale)
        return 1 / scale, -offset / scale

    def converter(self, non_int_type: type):
        scale, offset = self.to_parent_terms(non_int_type)
        return OffsetConverter(scale, offset)

    def reference(self, non_int_type: type) -> UnitsContainer:
        return UnitsContainer({self.parent_unit: 1}, non_int_type=non_int_type)


class LogarithmicUnit(UnitDeclaration):
    """value = multiplier * log_base(linear / parent)"""
    kind: ClassVar[UnitKind] = UnitKind.LOGARITHMIC

    parent_unit: Optional[str] = None
    base: float = 10.0
    multiplier: float = 1.0

    @property
    def parent(self) -> Optional[str]:
        return self.parent_unit

    def validate_parameters(self) -> None:
        super().validate_parameters()
        if not (math.isfinite(self.base) and self.base > 0 and self.base != 1):
            raise MalformedUnitError(self.name, f"logarithm base must be positive and not 1, got {self.base}")
        if not _is_finite_nonzero(self.multiplier):
            raise MalformedUnitError(self.name, f"multiplier must be finite and non-zero, got {self.multiplier}")

    def converter(self, non_int_type: type):
        # log/exp run on floats whatever the registry's numeric type
        return LogarithmicConverter(1.0, float(self.base), float(self.multiplier))

    def reference(self, non_int_type: type) -> UnitsContainer:
        if self.parent_unit is None:
            return UnitsContainer(non_int_type=non_int_type)
        return UnitsContainer({self.parent_unit: 1}, non_int_type=non_int_type)


def parent_dimension(declaration: UnitDeclaration, parent_dim: Optional[UnitsContainer]) -> UnitsContainer:
    """Dimension a declaration inherits from its parent."""
    if parent_dim is None:
        parent_dim = DIMENSIONLESS
    if isinstance(declaration, LinearUnit):
        return parent_dim ** declaration.parent_power
    return parent_dim
