# brew_units/scales.py

"""
Ordering through the linear reference

Logarithmic and affine magnitudes are display values. Comparing two of them
directly is only right when they share a unit; these helpers always compare
the root-unit (linear) magnitudes instead.
"""

from pint.errors import DimensionalityError


def linear_magnitude(quantity):
    """Magnitude of `quantity` expressed in root units."""
    return quantity.to_root_units().magnitude


def compare(a, b) -> int:
    """-1, 0 or 1 as `a` is smaller than, equal to or larger than `b`."""
    if a.dimensionality != b.dimensionality:
        raise DimensionalityError(a.units, b.units, a.dimensionality, b.dimensionality)

    left = linear_magnitude(a)
    right = linear_magnitude(b)
    return int(left > right) - int(left < right)


def is_less(a, b) -> bool:
    return compare(a, b) < 0
