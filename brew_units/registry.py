# brew_units/registry.py

"""
Unit/Dimension Registry

This module is responsible for:
- Validating unit declarations as a table (duplicates, parents, dimensions)
- Building a pint UnitRegistry that knows only the declared units
- The explicit, run-once initialize() step and read access afterwards

This module MUST NOT:
- Parse unit strings to define units
- Redefine or overwrite a registered name
- Register anything lazily on first use

INVARIANTS (ENFORCED):
1) A parent is declared before its children, so cycles cannot be expressed
2) Every dimension has exactly one reference unit
3) A unit's declared dimension equals its parent's dimension (to the declared power)
4) Names, symbols and aliases are unique across the whole table
5) initialize() registers once per process; later calls return the same registry
"""

import logging
import threading
from fractions import Fraction
from typing import Dict, Iterable, Iterator, Optional, Sequence

import pint
from pint.errors import RedefinitionError
from pint.util import UnitsContainer

from .config import Settings, configure_logging, load_settings
from .declarations import UnitDeclaration, UnitKind, parent_dimension
from .dimensions import BREWING_DIMENSIONS, HOST_DIMENSIONS, DimensionDeclaration, dimension_name
from .errors import (
    DimensionMismatchError,
    DuplicateUnitError,
    RegistryNotInitializedError,
    UndeclaredParentError,
)
from .units import BREWING_UNITS, EXPOSED_SYMBOLS, HOST_PREFIXES, HOST_UNITS

logger = logging.getLogger(__name__)


# ==================== UNIT TABLE ====================

class UnitTable:
    """
    Ordered, validated set of unit declarations.

    Validation happens in add(), so a bad table fails before pint sees any of
    it. apply() then defines every declaration on a registry in order.
    """

    def __init__(self, dimensions: Sequence[DimensionDeclaration]):
        self._dimensions: Dict[UnitsContainer, DimensionDeclaration] = {
            d.dimensionality: d for d in dimensions
        }
        self._declarations: Dict[str, UnitDeclaration] = {}
        self._owners: Dict[str, str] = {}
        self._references: Dict[UnitsContainer, str] = {}

    def __len__(self) -> int:
        return len(self._declarations)

    def __iter__(self) -> Iterator[UnitDeclaration]:
        return iter(self._declarations.values())

    def __contains__(self, name: str) -> bool:
        return name in self._declarations

    def __getitem__(self, name: str) -> UnitDeclaration:
        return self._declarations[name]

    def add(self, declaration: UnitDeclaration) -> None:
        """Validate one declaration against the table and append it."""
        declaration.validate_parameters()

        for key in declaration.keys:
            if key in self._owners:
                raise DuplicateUnitError(declaration.name, key, self._owners[key])

        if declaration.kind == UnitKind.REFERENCE:
            self._check_reference(declaration)
        else:
            self._check_parent(declaration)

        self._declarations[declaration.name] = declaration
        for key in declaration.keys:
            self._owners[key] = declaration.name

    def extend(self, declarations: Iterable[UnitDeclaration]) -> None:
        for declaration in declarations:
            self.add(declaration)

    def _check_reference(self, declaration: UnitDeclaration) -> None:
        dimension = declaration.dimension
        if dimension not in self._dimensions:
            raise DimensionMismatchError(
                declaration.name, dimension, None,
                reason=f"is a reference unit for undeclared dimension {dimension_name(dimension)}",
            )
        if dimension in self._references:
            raise DimensionMismatchError(
                declaration.name, dimension, None,
                reason=(
                    f"is a second reference unit for {dimension_name(dimension)} "
                    f"(already '{self._references[dimension]}')"
                ),
            )
        self._references[dimension] = declaration.name

    def _check_parent(self, declaration: UnitDeclaration) -> None:
        parent = declaration.parent
        parent_dim: Optional[UnitsContainer] = None
        if parent is not None:
            if parent not in self._declarations:
                raise UndeclaredParentError(declaration.name, parent)
            parent_dim = self._declarations[parent].dimension

        derived = parent_dimension(declaration, parent_dim)
        if derived != declaration.dimension:
            raise DimensionMismatchError(declaration.name, declaration.dimension, derived)

    def apply(self, ureg: pint.UnitRegistry) -> None:
        """Define every declaration on the registry, in order."""
        for declaration in self:
            try:
                ureg.define(declaration.to_definition(ureg.non_int_type))
            except RedefinitionError as e:
                raise DuplicateUnitError(declaration.name, e.name) from e
            logger.debug(f"Defined {declaration.kind.value.lower()} unit '{declaration.name}' ({declaration.symbol})")


def build_table(declarations: Optional[Iterable[UnitDeclaration]] = None) -> UnitTable:
    """Host units followed by the given (default: brewing) declarations."""
    table = UnitTable(HOST_DIMENSIONS + BREWING_DIMENSIONS)
    table.extend(HOST_UNITS)
    table.extend(BREWING_UNITS if declarations is None else declarations)
    return table


def build_registry(
    declarations: Optional[Iterable[UnitDeclaration]] = None,
    exact: bool = True,
) -> pint.UnitRegistry:
    """
    Build a fresh registry holding the host units plus `declarations`.

    Starts from an empty pint registry so the brewing table owns gal, bbl,
    ppm and friends outright. exact=True makes pint carry Fraction factors,
    so rational chains (42 gal == 1 bbl) convert without rounding.
    """
    # Step 1: validate everything before touching pint
    table = build_table(declarations)

    # Step 2: empty registry, duplicates raise instead of overwriting
    ureg = pint.UnitRegistry(
        None,
        on_redefinition="raise",
        non_int_type=Fraction if exact else float,
    )

    # Step 3: prefixes, then units in declaration order
    for prefix in HOST_PREFIXES:
        ureg.define(prefix)
    table.apply(ureg)

    return ureg


# ==================== PROCESS REGISTRY ====================

_registry: Optional[pint.UnitRegistry] = None
_lock = threading.Lock()


def initialize(settings: Optional[Settings] = None) -> pint.UnitRegistry:
    """
    Register the brewing units for this process. Call once at startup.

    Safe to call from several threads; only the first call builds the
    registry, every call returns it.
    """
    global _registry

    with _lock:
        if _registry is not None:
            return _registry

        settings = settings or load_settings()
        configure_logging(settings)

        ureg = build_registry(exact=settings.exact)
        ureg.formatter.default_format = settings.default_format
        pint.set_application_registry(ureg)

        _registry = ureg
        logger.info(
            f"Brewing unit registry initialized ({len(BREWING_UNITS)} brewing units, "
            f"{'exact' if settings.exact else 'float'} arithmetic)"
        )
        return _registry


def get_registry() -> pint.UnitRegistry:
    """The registry built by initialize()."""
    if _registry is None:
        raise RegistryNotInitializedError()
    return _registry


def registered_symbols() -> Dict[str, str]:
    """Map each exposed brewing symbol to its unit name."""
    by_symbol = {d.symbol: d.name for d in BREWING_UNITS}
    return {symbol: by_symbol[symbol] for symbol in EXPOSED_SYMBOLS}