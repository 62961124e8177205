"""
Scalar helpers shared by the vector, matrix and quaternion modules.
"""

import math
import numpy as np

from .config import DEFAULTS

EPSILON = DEFAULTS.epsilon


def clamp(value, lo, hi):
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


def approx_equal(a, b, epsilon=EPSILON):
    """True if a and b differ by less than epsilon (scalars or on every component)."""
    diff = np.abs(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64))
    return bool(np.all(diff < epsilon))


def random_point_in_circle(radius, rng=None):
    """
    Uniformly sample a point inside a circle centred on the origin.

    The radial distance is the sum of two uniforms folded back into [0, 1],
    which gives the triangular density a uniform disc needs without a sqrt.

    Args:
        radius: Circle radius.
        rng: numpy Generator to draw from. A fresh default_rng() when omitted.

    Returns:
        A 2-component float64 array.
    """
    if rng is None:
        rng = np.random.default_rng()
    t = 2.0 * math.pi * rng.random()
    u = rng.random() + rng.random()
    r = 2.0 - u if u > 1.0 else u
    return np.array([r * math.cos(t) * radius, r * math.sin(t) * radius], dtype=np.float64)


# ============================================================================
# String formatting
# ============================================================================

def round_half_up(value, precision=0):
    """
    Round to `precision` decimals with halves going towards +infinity.

    Done in float64, so a scaled value that overflows rounds to inf instead
    of raising.
    """
    with np.errstate(over='ignore', invalid='ignore'):
        m = np.float64(10.0) ** precision
        return float(np.floor(np.float64(value) * m + 0.5) / m)


def format_component(value, precision=0):
    """
    Render one rounded component.

    Whole numbers below 1e21 print without a fraction; larger ones and
    non-finite results keep Python's float repr (1e+21, inf, nan).
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    rounded = round_half_up(value, precision)
    if rounded.is_integer() and abs(rounded) < 1e21:
        return str(int(rounded))
    return repr(rounded)


def format_components(values, precision=None):
    """Render a value as "[a, b, ...]" with every component rounded."""
    if precision is None:
        precision = DEFAULTS.string_precision
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return "[" + ", ".join(format_component(v, precision) for v in values) + "]"
