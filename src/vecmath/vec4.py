"""
4D vector math on float64 numpy arrays.

A Vec4 is (x, y, z, w). Used as a homogeneous point, w starts at 1, which is
why create() and set() default w to 1 while everything else defaults to 0.

The axis rotations treat the vector as a 3D point plus w: they reuse the vec3
rotations, which only write (x, y, z), so w is never touched.
"""
import math
import numpy as np

from . import vec3
from .config import DEFAULTS
from .misc import format_components

Vec4 = np.ndarray


def create(x=0.0, y=0.0, z=0.0, w=1.0):
    return np.array((x, y, z, w), dtype=np.float64)


def clone(result, a):
    result[0], result[1], result[2], result[3] = a[0], a[1], a[2], a[3]


def set(result, x=0.0, y=0.0, z=0.0, w=1.0):
    result[0] = x
    result[1] = y
    result[2] = z
    result[3] = w


def equal(a, b):
    return bool(a[0] == b[0] and a[1] == b[1] and a[2] == b[2] and a[3] == b[3])


def dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]


def invert(result, a):
    np.negative(a, out=result)


def normalise(result, a):
    """Scale a to unit length over all four components; zero stays zero."""
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
    """Mean of all four components, w included."""
    if not vs:
        raise ValueError("average needs at least one vector")
    acc = np.zeros(4, dtype=np.float64)
    for v in vs:
        acc += v
    np.multiply(acc, 1.0 / len(vs), out=result)


def rotate(result, a, angle):
    """Axis-less rotation has no meaning for a 4D vector."""
    raise NotImplementedError("Vec4 rotation is not implemented, use rotate_x/rotate_y/rotate_z")


def rotate_x(result, a, angle):
    vec3.rotate_x(result, a, angle)


def rotate_y(result, a, angle):
    vec3.rotate_y(result, a, angle)


def rotate_z(result, a, angle):
    vec3.rotate_z(result, a, angle)


def lerp(result, a, b, t):
    ax, ay, az, aw = a[0], a[1], a[2], a[3]
    result[0] = ax + (b[0] - ax) * t
    result[1] = ay + (b[1] - ay) * t
    result[2] = az + (b[2] - az) * t
    result[3] = aw + (b[3] - aw) * t


def is_zero(a):
    return bool(a[0] == 0 and a[1] == 0 and a[2] == 0 and a[3] == 0)


def length(a):
    return math.sqrt(length_squared(a))


def length_squared(a):
    return a[0] * a[0] + a[1] * a[1] + a[2] * a[2] + a[3] * a[3]


def distance(a, b):
    return math.sqrt(distance_squared(a, b))


def distance_squared(a, b):
    dx, dy, dz, dw = a[0] - b[0], a[1] - b[1], a[2] - b[2], a[3] - b[3]
    return dx * dx + dy * dy + dz * dz + dw * dw


def to_float32_array(a):
    return np.array((a[0], a[1], a[2], a[3]), dtype=np.float32)


def xyz(a):
    """Drop w. No homogeneous divide is applied."""
    return vec3.create(a[0], a[1], a[2])


def to_string(a, precision=DEFAULTS.string_precision):
    return format_components((a[0], a[1], a[2], a[3]), precision)
