"""
2D vector math on float64 numpy arrays.

Same calling convention as vec3: the first argument is the caller-owned
result, which may be one of the inputs.
"""
import math
import numpy as np

from . import vec3, vec4
from .config import DEFAULTS
from .misc import format_components

Vec2 = np.ndarray


def create(x=0.0, y=0.0):
    """Create a new vector."""
    return np.array((x, y), dtype=np.float64)


def clone(result, a):
    result[0], result[1] = a[0], a[1]


def set(result, x=0.0, y=0.0):
    result[0] = x
    result[1] = y


def equal(a, b):
    return bool(a[0] == b[0] and a[1] == b[1])


def dot(a, b):
    return a[0] * b[0] + a[1] * b[1]


def invert(result, a):
    np.negative(a, out=result)


def normalise(result, a):
    """Scale a to unit length. (0, 0) normalises to (0, 0)."""
    mag = length(a)
    if mag == 0.0:
        result.fill(0.0)
    else:
        np.divide(a, mag, out=result)


def scale(result, a, b):
    np.multiply(a, b, out=result)


def add(result, a, b):
    np.add(a, b, out=result)


def sub(result, a, b):
    np.subtract(a, b, out=result)


def mul(result, a, scalar):
    np.multiply(a, scalar, out=result)


def average(result, *vs):
    if not vs:
        raise ValueError("average needs at least one vector")
    acc = np.zeros(2, dtype=np.float64)
    for v in vs:
        acc += v
    np.multiply(acc, 1.0 / len(vs), out=result)


def rotate(result, a, angle):
    """Rotate counter-clockwise by angle radians."""
    s = math.sin(angle)
    c = math.cos(angle)
    x = a[0] * c - a[1] * s
    y = a[0] * s + a[1] * c
    result[0] = x
    result[1] = y


def lerp(result, a, b, t):
    ax, ay = a[0], a[1]
    result[0] = ax + (b[0] - ax) * t
    result[1] = ay + (b[1] - ay) * t


def is_zero(a):
    return bool(a[0] == 0 and a[1] == 0)


def length(a):
    return math.sqrt(length_squared(a))


def length_squared(a):
    return a[0] * a[0] + a[1] * a[1]


def distance(a, b):
    return math.sqrt(distance_squared(a, b))


def distance_squared(a, b):
    dx, dy = a[0] - b[0], a[1] - b[1]
    return dx * dx + dy * dy


def to_float32_array(a):
    return np.array((a[0], a[1]), dtype=np.float32)


# The 2D plane maps onto the 3D ground plane: y becomes z, height is 0.
def xyz(a):
    return vec3.create(a[0], 0.0, a[1])


def xyzw(a):
    return vec4.create(a[0], 0.0, a[1], 1.0)


def to_string(a, precision=DEFAULTS.string_precision):
    return format_components((a[0], a[1]), precision)
