"""
3D vector math on float64 numpy arrays.

A Vec3 is a length-3 ndarray (x, y, z). Every operation writes into a
caller-owned `result` and never allocates persistent state, so vectors can be
reused across frames:

    v = vec3.create(1, 2, 3)
    vec3.normalise(v, v)          # in place, result may alias an input
    vec3.cross(n, edge_a, edge_b)

Read-only inputs may be any indexable of floats (tuple, list, ndarray).
"""
import math
import numpy as np

from . import vec2, vec4
from .config import DEFAULTS
from .misc import format_components

Vec3 = np.ndarray


def create(x=0.0, y=0.0, z=0.0):
    """Create a new vector."""
    return np.array((x, y, z), dtype=np.float64)


def clone(result, a):
    """Copy a into result."""
    result[0], result[1], result[2] = a[0], a[1], a[2]


def set(result, x=0.0, y=0.0, z=0.0):
    result[0] = x
    result[1] = y
    result[2] = z


def equal(a, b):
    """Exact componentwise equality."""
    return bool(a[0] == b[0] and a[1] == b[1] and a[2] == b[2])


def dot(a, b):
    """Dot product."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(result, a, b):
    """Cross product a x b."""
    ax, ay, az = a[0], a[1], a[2]
    bx, by, bz = b[0], b[1], b[2]
    result[0] = ay * bz - az * by
    result[1] = az * bx - ax * bz
    result[2] = ax * by - ay * bx


def invert(result, a):
    """Negate every component."""
    np.negative(a, out=result)


def normalise(result, a):
    """Scale a to unit length. A zero vector normalises to the zero vector."""
    mag = length(a)
    if mag == 0.0:
        result.fill(0.0)
    else:
        np.divide(a, mag, out=result)


def scale(result, a, b):
    """Componentwise product."""
    np.multiply(a, b, out=result)


def add(result, a, b):
    np.add(a, b, out=result)


def sub(result, a, b):
    np.subtract(a, b, out=result)


def mul(result, a, scalar):
    """Multiply by a scalar."""
    np.multiply(a, scalar, out=result)


def average(result, *vs):
    """Arithmetic mean of one or more vectors."""
    if not vs:
        raise ValueError("average needs at least one vector")
    acc = np.zeros(3, dtype=np.float64)
    for v in vs:
        acc += v
    np.multiply(acc, 1.0 / len(vs), out=result)


# ============================================================================
# Rotation about the world axes (radians, right-handed)
# ============================================================================

def rotate_x(result, a, angle):
    s = math.sin(angle)
    c = math.cos(angle)
    x = a[0]
    y = a[1] * c - a[2] * s
    z = a[1] * s + a[2] * c
    result[0] = x
    result[1] = y
    result[2] = z


def rotate_y(result, a, angle):
    s = math.sin(angle)
    c = math.cos(angle)
    x = a[2] * s + a[0] * c
    y = a[1]
    z = a[2] * c - a[0] * s
    result[0] = x
    result[1] = y
    result[2] = z


def rotate_z(result, a, angle):
    s = math.sin(angle)
    c = math.cos(angle)
    x = a[0] * c - a[1] * s
    y = a[0] * s + a[1] * c
    z = a[2]
    result[0] = x
    result[1] = y
    result[2] = z


def lerp(result, a, b, t):
    """Linear interpolation, a + (b - a) * t. t is not clamped."""
    ax, ay, az = a[0], a[1], a[2]
    result[0] = ax + (b[0] - ax) * t
    result[1] = ay + (b[1] - ay) * t
    result[2] = az + (b[2] - az) * t


# ============================================================================
# Measures
# ============================================================================

def is_zero(a):
    return bool(a[0] == 0 and a[1] == 0 and a[2] == 0)


def length(a):
    """Vector length/magnitude."""
    return math.sqrt(length_squared(a))


def length_squared(a):
    """Squared length (avoids sqrt)."""
    return a[0] * a[0] + a[1] * a[1] + a[2] * a[2]


def distance(a, b):
    """Distance between two points."""
    return math.sqrt(distance_squared(a, b))


def distance_squared(a, b):
    """Squared distance."""
    dx, dy, dz = a[0] - b[0], a[1] - b[1], a[2] - b[2]
    return dx * dx + dy * dy + dz * dz


# ============================================================================
# Conversion
# ============================================================================

def to_float32_array(a):
    """Packed float32 copy, e.g. for a GPU upload."""
    return np.array((a[0], a[1], a[2]), dtype=np.float32)


def xz(a):
    """Drop the y component, giving the ground-plane vec2 (x, z)."""
    return vec2.create(a[0], a[2])


def xyzw(a):
    """Promote to a homogeneous point (x, y, z, 1)."""
    return vec4.create(a[0], a[1], a[2], 1.0)


def to_string(a, precision=DEFAULTS.string_precision):
    return format_components((a[0], a[1], a[2]), precision)
