"""
3x3 matrices for 2D homogeneous transforms.

Storage is a flat, column-major float64 array of 9 values: element
(row, col) lives at index 3 * col + row, so indices 6 and 7 hold the
translation. create() returns the identity.

translate/scale/rotate modify a matrix in its own local frame: the new
transform applies the modification first and then whatever `a` did.
"""
import math
import numpy as np

from .config import DEFAULTS
from .misc import format_components

Mat3 = np.ndarray

_IDENTITY_3x3 = (
    1.0, 0.0, 0.0,
    0.0, 1.0, 0.0,
    0.0, 0.0, 1.0,
)


def create():
    """Create a new identity matrix."""
    return np.array(_IDENTITY_3x3, dtype=np.float64)


def clone(result, a):
    result[:] = a


def set(result, *values):
    """Overwrite elements in storage order; values past the ninth are ignored."""
    for i, value in enumerate(values[:9]):
        result[i] = value


def identity(result):
    result[:] = _IDENTITY_3x3


def mul(result, a, b):
    """
    Matrix product a * b.

    With column vectors the returned matrix applies b first, then a.
    The product is computed into a temporary, so result may alias a or b.
    """
    # reshape() of column-major storage gives the transpose, hence b @ a
    product = np.reshape(b, (3, 3)) @ np.reshape(a, (3, 3))
    result[:] = product.reshape(9)


def translate(result, a, v):
    """Translate by v expressed in a's local frame."""
    tx = a[0] * v[0] + a[3] * v[1] + a[6]
    ty = a[1] * v[0] + a[4] * v[1] + a[7]
    tw = a[2] * v[0] + a[5] * v[1] + a[8]
    if result is not a:
        result[:] = a
    result[6] = tx
    result[7] = ty
    result[8] = tw


def scale(result, a, v):
    """Scale the x and y basis columns by v."""
    sx, sy = v[0], v[1]
    m = np.array(a, dtype=np.float64)
    m[0:3] *= sx
    m[3:6] *= sy
    result[:] = m


def rotate(result, a, angle):
    """Rotate the x/y basis columns counter-clockwise by angle radians."""
    s = math.sin(angle)
    c = math.cos(angle)
    a0, a1, a2 = a[0], a[1], a[2]
    a3, a4, a5 = a[3], a[4], a[5]
    a6, a7, a8 = a[6], a[7], a[8]

    result[0] = a0 * c + a3 * s
    result[1] = a1 * c + a4 * s
    result[2] = a2 * c + a5 * s
    result[3] = a3 * c - a0 * s
    result[4] = a4 * c - a1 * s
    result[5] = a5 * c - a2 * s
    result[6] = a6
    result[7] = a7
    result[8] = a8


def apply(result, a, p):
    """
    Transform the 2D point p by a, including the homogeneous divide.

    w is not guarded: a degenerate projective matrix gives inf/nan under
    numpy float rules (with a numpy RuntimeWarning), never an exception.
    """
    x, y = p[0], p[1]
    w = np.float64(a[2] * x + a[5] * y + a[8])
    result[0] = (a[0] * x + a[3] * y + a[6]) / w
    result[1] = (a[1] * x + a[4] * y + a[7]) / w


def transpose(result, a):
    result[:] = np.reshape(a, (3, 3)).T.flatten()


def to_float32_array(a):
    """Column-major float32 copy."""
    return np.array(a, dtype=np.float32)


def to_string(a, precision=DEFAULTS.string_precision):
    return format_components(a, precision)
