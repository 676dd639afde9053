# brew_units/formulas.py

"""
Empirical Plato <-> gravity unit relation

sg relates to °P through a quadratic fit, not a rescaling:

    °P = 0.25802 * gu - 0.00020535 * gu²       (gu = 1000 * (sg - 1))

plato_to_gu is the smaller root of that quadratic. Beyond roughly 81 °P the
discriminant goes negative; plato_to_gu then returns the vertex value
PLATO_VERTEX_GU. That value has no physical meaning, it only keeps the
function total.
"""

import logging
import math

logger = logging.getLogger(__name__)

LINEAR_COEFFICIENT = 0.25802
QUADRATIC_COEFFICIENT = 0.00020535

PLATO_VERTEX_GU = 628.2444606768931      # 0.25802 / 0.00020535 / 2
INVERSE_QUADRATIC = 4869.734599464329    # 1 / 0.00020535


def gu_to_plato(gu):
    """Gravity units to degrees Plato."""
    return LINEAR_COEFFICIENT * gu - QUADRATIC_COEFFICIENT * gu ** 2


def plato_to_gu(plato):
    """Degrees Plato to gravity units."""
    e = PLATO_VERTEX_GU
    g = INVERSE_QUADRATIC
    d = e ** 2 - g * plato
    if d >= 0:
        return e - math.sqrt(d)

    logger.debug(f"plato_to_gu({plato}) is outside the fitted range, returning {e}")
    return e
