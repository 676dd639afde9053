# brew_units/errors.py

"""
Error hierarchy for brew_units

Two families:
- DeclarationError: the unit table rejected a declaration. Raised while the
  registry is being built, fatal to start-up.
- EquivalenceError: a conversion crossed dimension families and could not be
  resolved. Raised at call time, recoverable by the caller.

Every error carries a machine-readable error_code. Host-level misuse (unknown
unit strings, offset arithmetic) keeps raising pint's own errors.
"""

from typing import Optional

from pint.util import UnitsContainer

from .dimensions import dimension_name


# ==================== BASE ====================

class BrewUnitsError(Exception):
    """Base brew_units error"""
    def __init__(self, error_code: str, message: str, severity: str = "HARD_ERROR"):
        self.error_code = error_code
        self.message = message
        self.severity = severity
        super().__init__(self.message)


class RegistryNotInitializedError(BrewUnitsError):
    """Registry used before initialize()"""
    def __init__(self):
        super().__init__(
            "REGISTRY_NOT_INITIALIZED",
            "The brewing unit registry has not been initialized. Call brew_units.initialize() at startup.",
        )


# ==================== DECLARATION ERRORS ====================

class DeclarationError(BrewUnitsError):
    """Unit declaration rejected by the unit table"""
    def __init__(self, error_code: str, unit: str, message: str):
        self.unit = unit
        super().__init__(error_code, message, severity="FATAL")


class DuplicateUnitError(DeclarationError):
    """Name, symbol or alias already taken"""
    def __init__(self, unit: str, key: str, owner: Optional[str] = None):
        self.key = key
        self.owner = owner
        taken_by = f" by unit '{owner}'" if owner else ""
        super().__init__(
            "DUPLICATE_UNIT",
            unit,
            f"Cannot declare unit '{unit}': '{key}' is already registered{taken_by}.",
        )


class UndeclaredParentError(DeclarationError):
    """Parent unit not declared before its child"""
    def __init__(self, unit: str, parent: str):
        self.parent = parent
        super().__init__(
            "UNDECLARED_PARENT",
            unit,
            f"Unit '{unit}' refers to parent '{parent}', which has not been declared.",
        )


class DimensionMismatchError(DeclarationError):
    """Declared dimension disagrees with the parent chain"""
    def __init__(self, unit: str, declared: UnitsContainer, derived: Optional[UnitsContainer], reason: str = ""):
        self.declared = declared
        self.derived = derived
        if derived is not None:
            detail = (
                f"declared as {dimension_name(declared)} but its parent resolves to {dimension_name(derived)}"
            )
        else:
            detail = reason
        super().__init__(
            "DIMENSION_MISMATCH",
            unit,
            f"Unit '{unit}' {detail}.",
        )


class MalformedUnitError(DeclarationError):
    """Invalid scale, offset, base or naming parameters"""
    def __init__(self, unit: str, reason: str):
        self.reason = reason
        super().__init__(
            "MALFORMED_UNIT",
            unit,
            f"Unit '{unit}' is malformed: {reason}.",
        )


# ==================== EQUIVALENCE ERRORS ====================

class EquivalenceError(BrewUnitsError):
    """Cross-dimension conversion could not be resolved"""
    def __init__(
        self,
        error_code: str,
        message: str,
        equivalence: Optional[str],
        source_dimension: UnitsContainer,
        target_dimension: UnitsContainer,
    ):
        self.equivalence = equivalence
        self.source_dimension = source_dimension
        self.target_dimension = target_dimension
        super().__init__(error_code, message, severity="RECOVERABLE")


class UnsupportedEquivalenceError(EquivalenceError):
    """Dimension pair not covered by the equivalence"""
    def __init__(self, equivalence: str, source_dimension: UnitsContainer, target_dimension: UnitsContainer):
        super().__init__(
            "UNSUPPORTED_EQUIVALENCE",
            f"{equivalence} does not define conversion from "
            f"{dimension_name(source_dimension)} to {dimension_name(target_dimension)}",
            equivalence,
            source_dimension,
            target_dimension,
        )


class MissingEquivalenceError(EquivalenceError):
    """Dimension families differ and no equivalence was supplied"""
    def __init__(self, source_dimension: UnitsContainer, target_dimension: UnitsContainer):
        super().__init__(
            "MISSING_EQUIVALENCE",
            f"Cannot convert from {dimension_name(source_dimension)} to {dimension_name(target_dimension)} "
            f"without an equivalence. Pass one explicitly, e.g. Brewing().",
            None,
            source_dimension,
            target_dimension,
        )
