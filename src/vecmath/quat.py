"""
Quaternions (x, y, z, w) for representing rotations.

A quaternion represents a rotation when it has unit length. Nothing here
normalises implicitly except slerp, which works on normalised copies of its
inputs; to_mat4 and invert take the quaternion as given.
"""
import math
import numpy as np

from . import mat4
from .config import DEFAULTS
from .misc import clamp, format_components

Quat = np.ndarray


def create(x=0.0, y=0.0, z=0.0, w=1.0):
    """Create a new quaternion, the identity rotation by default."""
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


def invert(result, a):
    """Multiplicative inverse: conjugate / |a|^2. A zero quaternion inverts to zero."""
    d = dot(a, a)
    if d == 0:
        set(result, 0.0, 0.0, 0.0, 0.0)
        return
    x, y, z, w = a[0], a[1], a[2], a[3]
    result[0] = -x / d
    result[1] = -y / d
    result[2] = -z / d
    result[3] = w / d


def conjugate(result, a):
    x, y, z, w = a[0], a[1], a[2], a[3]
    result[0] = -x
    result[1] = -y
    result[2] = -z
    result[3] = w


def normalise(result, a):
    """Scale to unit length. A zero quaternion stays zero."""
    mag = math.sqrt(dot(a, a))
    if mag == 0.0:
        result.fill(0.0)
    else:
        np.divide(a, mag, out=result)


def add(result, a, b):
    np.add(a, b, out=result)


def sub(result, a, b):
    np.subtract(a, b, out=result)


def mul(result, a, scalar):
    """Multiply every component by a scalar (see multiply() for the quaternion product)."""
    np.multiply(a, scalar, out=result)


def multiply(result, a, b):
    """Hamilton product a * b: the rotation b followed by a."""
    ax, ay, az, aw = a[0], a[1], a[2], a[3]
    bx, by, bz, bw = b[0], b[1], b[2], b[3]
    result[0] = aw * bx + ax * bw + ay * bz - az * by
    result[1] = aw * by - ax * bz + ay * bw + az * bx
    result[2] = aw * bz + ax * by - ay * bx + az * bw
    result[3] = aw * bw - ax * bx - ay * by - az * bz


def dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]


def from_axis_angle(result, axis, angle):
    """
    Rotation of angle radians about axis.

    The axis is normalised here; a zero axis gives the identity rotation.
    """
    ax, ay, az = axis[0], axis[1], axis[2]
    axis_len = math.sqrt(ax * ax + ay * ay + az * az)
    if axis_len == 0.0:
        set(result)
        return
    s = math.sin(angle / 2.0) / axis_len
    result[0] = ax * s
    result[1] = ay * s
    result[2] = az * s
    result[3] = math.cos(angle / 2.0)


def slerp(result, a, b, t, threshold=DEFAULTS.slerp_fallback_threshold):
    """
    Spherical linear interpolation from a (t=0) to b (t=1).

    Both inputs are normalised into temporaries, so the caller's a and b are
    never modified and result may alias either. If the quaternions lie in
    opposite hemispheres b is negated so the shorter arc is taken. t is not
    clamped.

    When sin(theta0) falls below `threshold` (the endpoints are the same
    rotation, or numerically indistinguishable) the spherical weights are
    undefined and the normalised endpoints are blended linearly instead.
    """
    temp_a = create()
    temp_b = create()
    normalise(temp_a, a)
    normalise(temp_b, b)

    cos_theta0 = dot(temp_a, temp_b)

    # Opposite handedness: flip one end so slerp takes the short path.
    if cos_theta0 < 0:
        mul(temp_b, temp_b, -1.0)
        cos_theta0 = -cos_theta0

    cos_theta0 = clamp(cos_theta0, -1.0, 1.0)
    theta0 = math.acos(cos_theta0)
    sin_theta0 = math.sin(theta0)

    if sin_theta0 < threshold:
        np.add(temp_a, (temp_b - temp_a) * t, out=result)
        return

    theta = theta0 * t
    s0 = math.cos(theta) - cos_theta0 * math.sin(theta) / sin_theta0
    s1 = math.sin(theta) / sin_theta0

    mul(temp_a, temp_a, s0)
    mul(temp_b, temp_b, s1)
    add(result, temp_a, temp_b)


def is_zero(a):
    return bool(a[0] == 0 and a[1] == 0 and a[2] == 0 and a[3] == 0)


def to_mat4(result, a):
    """
    Write the rotation matrix of a into result (a mat4).

    a is expected to be unit length; a non-unit quaternion yields a scaled,
    skewed matrix rather than a rotation.
    """
    x, y, z, w = a[0], a[1], a[2], a[3]
    xx = x * x
    xy = x * y
    xz = x * z
    xw = x * w
    yy = y * y
    yz = y * z
    yw = y * w
    zz = z * z
    zw = z * w

    mat4.set(
        result,
        1.0 - 2.0 * (yy + zz), 2.0 * (xy + zw), 2.0 * (xz - yw), 0.0,
        2.0 * (xy - zw), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + xw), 0.0,
        2.0 * (xz + yw), 2.0 * (yz - xw), 1.0 - 2.0 * (xx + yy), 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def to_float32_array(a):
    return np.array((a[0], a[1], a[2], a[3]), dtype=np.float32)


def to_string(a, precision=DEFAULTS.string_precision):
    return format_components((a[0], a[1], a[2], a[3]), precision)
