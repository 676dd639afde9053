# tests/test_registry.py

"""
Unit tests for the unit table and registry lifecycle

Tests cover:
- Duplicate name / symbol / alias → DUPLICATE_UNIT
- Undeclared parent → UNDECLARED_PARENT
- Parent dimension mismatch, orphan or doubled reference → DIMENSION_MISMATCH
- Failures happen before any conversion (fresh build_registry)
- Collision with pint's generated delta_ units is surfaced as DUPLICATE_UNIT
- initialize() is run-once, also under concurrent callers
- get_registry() before initialize()
- Exposed symbol set
"""

import threading
from fractions import Fraction

import pytest

import brew_units.registry as registry_module
from brew_units.declarations import LinearUnit, ReferenceUnit
from brew_units.dimensions import (
    BREWING_DIMENSIONS,
    COLOR,
    DIMENSIONLESS,
    HOST_DIMENSIONS,
    SUGAR_CONTENT,
    VOLUME,
    DimensionDeclaration,
)
from brew_units.errors import (
    DimensionMismatchError,
    DuplicateUnitError,
    MalformedUnitError,
    RegistryNotInitializedError,
    UndeclaredParentError,
)
from brew_units.registry import (
    UnitTable,
    build_registry,
    build_table,
    get_registry,
    initialize,
    registered_symbols,
)
from brew_units.units import BREWING_UNITS, HOST_UNITS


@pytest.fixture
def table():
    """Table holding the host units only"""
    t = UnitTable(HOST_DIMENSIONS + BREWING_DIMENSIONS)
    t.extend(HOST_UNITS)
    return t


class TestUnitTable:
    """Test declaration-time validation"""

    def test_full_table_builds(self):
        t = build_table()
        assert len(t) == len(HOST_UNITS) + len(BREWING_UNITS)
        assert "gallon" in t
        assert t["barrel"].parent == "gallon"

    def test_duplicate_name(self, table):
        table.add(LinearUnit(name="gallon", symbol="gal", parent_unit="liter", factor=Fraction("3.785411784"), dimension=VOLUME))
        with pytest.raises(DuplicateUnitError) as exc_info:
            table.add(LinearUnit(name="gallon", symbol="USgal", parent_unit="liter", factor=4, dimension=VOLUME))

        assert exc_info.value.error_code == "DUPLICATE_UNIT"
        assert exc_info.value.key == "gallon"

    def test_duplicate_symbol(self, table):
        table.add(LinearUnit(name="gallon", symbol="gal", parent_unit="liter", factor=4, dimension=VOLUME))
        with pytest.raises(DuplicateUnitError) as exc_info:
            table.add(LinearUnit(name="other_gallon", symbol="gal", parent_unit="liter", factor=4, dimension=VOLUME))

        assert exc_info.value.owner == "gallon"

    def test_alias_clashes_with_host_symbol(self, table):
        """Test alias 'L' is already the liter symbol"""
        with pytest.raises(DuplicateUnitError) as exc_info:
            table.add(ReferenceUnit(name="degree_Lovibond", symbol="°L", aliases=("L",), dimension=COLOR))

        assert exc_info.value.owner == "liter"

    def test_undeclared_parent(self, table):
        with pytest.raises(UndeclaredParentError) as exc_info:
            table.add(LinearUnit(name="barrel", symbol="bbl", parent_unit="gallon", factor=42, dimension=VOLUME))

        assert exc_info.value.error_code == "UNDECLARED_PARENT"
        assert exc_info.value.parent == "gallon"

    def test_child_before_parent_rejected(self, table):
        """Test declaration order rules out forward references and cycles"""
        a = LinearUnit(name="unit_a", symbol="ua", parent_unit="unit_b", factor=2, dimension=VOLUME)
        b = LinearUnit(name="unit_b", symbol="ub", parent_unit="unit_a", factor=Fraction(1, 2), dimension=VOLUME)
        with pytest.raises(UndeclaredParentError):
            table.extend([a, b])

    def test_dimension_mismatch(self, table):
        """Test a volume declared against a dimensionless parent"""
        with pytest.raises(DimensionMismatchError) as exc_info:
            table.add(LinearUnit(name="bad_cup", symbol="bcup", parent_unit="percent", factor=3, dimension=VOLUME))

        assert exc_info.value.error_code == "DIMENSION_MISMATCH"
        assert "Volume" in exc_info.value.message
        assert "dimensionless" in exc_info.value.message

    def test_parent_power_counts(self, table):
        """Test inch**3 is a volume, inch**2 is not"""
        table.add(LinearUnit(name="gallon", symbol="gal", parent_unit="inch", parent_power=3, factor=231, dimension=VOLUME))
        with pytest.raises(DimensionMismatchError):
            table.add(LinearUnit(name="flat_gallon", symbol="fgal", parent_unit="inch", parent_power=2, factor=231, dimension=VOLUME))

    def test_reference_for_undeclared_dimension(self, table):
        with pytest.raises(DimensionMismatchError):
            table.add(ReferenceUnit(name="head", symbol="hd", dimension=DimensionDeclaration(symbol="[foam]", name="Foam").dimensionality))

    def test_second_reference_unit(self, table):
        table.add(ReferenceUnit(name="degree_Plato", symbol="°P", dimension=SUGAR_CONTENT))
        with pytest.raises(DimensionMismatchError):
            table.add(ReferenceUnit(name="Brix", symbol="Brix", dimension=SUGAR_CONTENT))

    def test_malformed_surfaces_from_table(self, table):
        with pytest.raises(MalformedUnitError):
            table.add(LinearUnit(name="nothing", symbol="nil", factor=0, dimension=DIMENSIONLESS))


class TestBuildRegistry:
    """Test fresh registries"""

    def test_duplicate_symbol_fails_before_conversion(self):
        extra = LinearUnit(name="US_gallon", symbol="gal", parent_unit="liter", factor=4, dimension=VOLUME)
        with pytest.raises(DuplicateUnitError):
            build_registry(BREWING_UNITS + [extra])

    def test_undeclared_parent_fails_before_conversion(self):
        orphan = LinearUnit(name="firkin", symbol="fir", parent_unit="kilderkin", factor=Fraction(1, 2), dimension=VOLUME)
        with pytest.raises(UndeclaredParentError):
            build_registry(BREWING_UNITS + [orphan])

    def test_generated_delta_unit_collision(self):
        """Test pint's own redefinition error is reported as a duplicate"""
        clash = LinearUnit(name="delta_gravity_unit", symbol="dgu", factor=1, dimension=DIMENSIONLESS)
        with pytest.raises(DuplicateUnitError) as exc_info:
            build_registry(BREWING_UNITS + [clash])

        assert exc_info.value.key == "delta_gravity_unit"

    def test_fresh_registries_are_independent(self, ureg):
        other = build_registry()
        assert other is not ureg
        assert other.Quantity(42, "gal").to("bbl").magnitude == 1

    def test_float_registry(self):
        ureg = build_registry(exact=False)
        result = ureg.Quantity(10, "SRM").to("EBC")
        assert isinstance(result.magnitude, float)
        assert result.magnitude == pytest.approx(19.7)

    def test_host_units_only(self):
        ureg = build_registry([])
        assert ureg.Quantity(1, "L").to("mL").magnitude == 1000


class TestInitialize:
    """Test the run-once lifecycle"""

    def test_returns_same_registry(self, ureg):
        assert initialize() is ureg
        assert get_registry() is ureg

    def test_concurrent_callers_share_registry(self, ureg):
        results = []

        def worker():
            results.append(initialize())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is ureg for r in results)

    def test_get_registry_before_initialize(self, monkeypatch):
        monkeypatch.setattr(registry_module, "_registry", None)
        with pytest.raises(RegistryNotInitializedError) as exc_info:
            get_registry()

        assert exc_info.value.error_code == "REGISTRY_NOT_INITIALIZED"

    def test_default_format(self, ureg):
        assert ureg.formatter.default_format == "~P"


class TestRegisteredSymbols:
    """Test exposed symbol table"""

    def test_symbol_set(self):
        symbols = registered_symbols()
        assert len(symbols) == 29
        assert symbols["bbl"] == "barrel"
        assert symbols["°WK"] == "degree_Windisch_Kolbach"
        assert symbols["pH⁺"] == "powerofHydrogen"
        assert "WK_aux" not in symbols

    def test_every_symbol_is_registered(self, ureg):
        for name in registered_symbols().values():
            assert name in ureg
