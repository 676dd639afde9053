# tests/test_dimensions.py

"""
Unit tests for dimension declarations

Tests cover:
- D * D == D ** 2 structurally for every brewing dimension
- Brewing dimensions are distinct from each other and from host dimensions
- Symbol validation
- Display names used in error messages
"""

import pytest
from pydantic import ValidationError

from brew_units.dimensions import (
    BREWING_DIMENSIONS,
    COLOR,
    DENSITY,
    DIMENSIONLESS,
    HOST_DIMENSIONS,
    MASS,
    SUGAR_CONTENT,
    VOLUME,
    DimensionDeclaration,
    dimension_name,
)


class TestDimensionAlgebra:
    """Test structural dimension identity"""

    @pytest.mark.parametrize("declaration", BREWING_DIMENSIONS, ids=lambda d: d.name)
    def test_square_is_structural(self, declaration):
        """Test D*D equals D**2"""
        d = declaration.dimensionality
        assert d * d == d ** 2
        assert d * d != d

    def test_dimensions_are_distinct(self):
        """Test no two declared dimensions coincide"""
        all_dims = [d.dimensionality for d in HOST_DIMENSIONS + BREWING_DIMENSIONS]
        assert len(set(all_dims)) == len(all_dims)

    def test_density_is_mass_per_volume(self):
        """Test derived density dimension"""
        assert DENSITY * VOLUME == MASS

    def test_dimensionless_is_empty(self):
        """Test dimensionless has no components"""
        assert dict(DIMENSIONLESS.items()) == {}


class TestDimensionDeclaration:
    """Test declaration validation"""

    def test_valid_symbol(self):
        """Test bracketed identifier accepted"""
        d = DimensionDeclaration(symbol="[foam]", name="Foam")
        assert d.dimensionality == d.dimensionality ** 1

    def test_unbracketed_symbol_rejected(self):
        """Test bare symbol rejected"""
        with pytest.raises(ValidationError):
            DimensionDeclaration(symbol="foam", name="Foam")

    def test_non_identifier_symbol_rejected(self):
        """Test spaces inside brackets rejected"""
        with pytest.raises(ValidationError):
            DimensionDeclaration(symbol="[foam head]", name="Foam")


class TestDimensionName:
    """Test display names"""

    def test_brewing_names(self):
        assert dimension_name(COLOR) == "Color"
        assert dimension_name(SUGAR_CONTENT) == "SugarContent"

    def test_derived_names(self):
        assert dimension_name(DIMENSIONLESS) == "dimensionless"
        assert dimension_name(DENSITY) == "Density"

    def test_unnamed_falls_back_to_pint(self):
        """Test unnamed dimension renders its components"""
        assert "[color]" in dimension_name(COLOR ** 2)
