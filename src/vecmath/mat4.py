"""
4x4 matrices for 3D transforms and camera matrices.

Storage is a flat, column-major float64 array of 16 values: element
(row, col) lives at index 4 * col + row, so indices 12..14 hold the
translation and 3, 7, 11, 15 form the bottom (homogeneous) row.

Conventions match mat3: mul(result, a, b) is the product a * b, and
translate/scale/rotate_* modify a matrix in its own local frame. Every
function snapshots its operands first, so result may alias any input.

Camera builders:
    mat4.perspective(proj, math.pi / 2, width / height)
    mat4.look_at(view, eye, target, (0, 1, 0))
    mat4.mul(view_proj, proj, view)
"""
import math
import warnings
import numpy as np

from .config import DEFAULTS
from .misc import EPSILON, format_components

Mat4 = np.ndarray

_IDENTITY_4x4 = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def create():
    """Create a new identity matrix."""
    return np.array(_IDENTITY_4x4, dtype=np.float64)


def clone(result, a):
    result[:] = a


def set(result, *values):
    """Overwrite elements in storage order; values past the sixteenth are ignored."""
    for i, value in enumerate(values[:16]):
        result[i] = value


def identity(result):
    result[:] = _IDENTITY_4x4


# ============================================================================
# Projection and view
# ============================================================================

def ortho(result, width, height, depth):
    """
    Orthographic projection of the box [0, width] x [0, height] x [0, depth].

    The origin corner maps to -1 on every axis and the far corner to +1.
    Only this box-from-origin form is supported, not left/right/bottom/top.
    A zero extent gives inf under numpy float rules rather than raising.
    """
    result[:] = 0.0
    result[0] = 2.0 / np.float64(width)
    result[5] = 2.0 / np.float64(height)
    result[10] = 2.0 / np.float64(depth)
    result[12] = -1.0
    result[13] = -1.0
    result[14] = -1.0
    result[15] = 1.0


def perspective(result, fov, aspect, near=DEFAULTS.near, far=DEFAULTS.far):
    """
    Right-handed perspective projection.

    Args:
        result: Matrix to write.
        fov: Vertical field of view in radians.
        aspect: Viewport width / height.
        near, far: Clip plane distances. An infinite far plane is not special-cased.

    Degenerate input (fov or aspect of 0, near == far) is not guarded and
    gives inf/nan entries, like apply().
    """
    f = 1.0 / np.float64(math.tan(fov / 2.0))
    nf = np.float64(near - far)
    result[:] = 0.0
    result[0] = f / np.float64(aspect)
    result[5] = f
    result[10] = (far + near) / nf
    result[11] = -1.0
    result[14] = (2.0 * far * near) / nf


def look_at(result, viewer, target, up):
    """
    View matrix for a camera at viewer looking towards target.

    A viewer within EPSILON of the target on every axis (tested per axis, not
    by distance) produces the identity. If up is parallel to the view
    direction the right and up basis vectors collapse to zero rather than NaN.

    Returns:
        result, for chaining.
    """
    eyex, eyey, eyez = viewer[0], viewer[1], viewer[2]
    upx, upy, upz = up[0], up[1], up[2]
    centerx, centery, centerz = target[0], target[1], target[2]

    if (abs(eyex - centerx) < EPSILON and
            abs(eyey - centery) < EPSILON and
            abs(eyez - centerz) < EPSILON):
        identity(result)
        return result

    # forward: from target back to the eye
    z0 = eyex - centerx
    z1 = eyey - centery
    z2 = eyez - centerz
    inv_len = 1.0 / math.sqrt(z0 * z0 + z1 * z1 + z2 * z2)
    z0 *= inv_len
    z1 *= inv_len
    z2 *= inv_len

    # right = up x forward
    x0 = upy * z2 - upz * z1
    x1 = upz * z0 - upx * z2
    x2 = upx * z1 - upy * z0
    mag = math.sqrt(x0 * x0 + x1 * x1 + x2 * x2)
    if not mag > 0.0:
        x0 = x1 = x2 = 0.0
    else:
        inv_len = 1.0 / mag
        x0 *= inv_len
        x1 *= inv_len
        x2 *= inv_len

    # true up = forward x right
    y0 = z1 * x2 - z2 * x1
    y1 = z2 * x0 - z0 * x2
    y2 = z0 * x1 - z1 * x0
    mag = math.sqrt(y0 * y0 + y1 * y1 + y2 * y2)
    if not mag > 0.0:
        y0 = y1 = y2 = 0.0
    else:
        inv_len = 1.0 / mag
        y0 *= inv_len
        y1 *= inv_len
        y2 *= inv_len

    result[0] = x0
    result[1] = y0
    result[2] = z0
    result[3] = 0.0
    result[4] = x1
    result[5] = y1
    result[6] = z1
    result[7] = 0.0
    result[8] = x2
    result[9] = y2
    result[10] = z2
    result[11] = 0.0
    result[12] = -(x0 * eyex + x1 * eyey + x2 * eyez)
    result[13] = -(y0 * eyex + y1 * eyey + y2 * eyez)
    result[14] = -(z0 * eyex + z1 * eyey + z2 * eyez)
    result[15] = 1.0
    return result


# ============================================================================
# Composition
# ============================================================================

def mul(result, a, b):
    """
    Matrix product a * b (b applied to a point first, then a).

    Computed into a temporary, so result may alias a or b.
    """
    # reshape() of column-major storage gives the transpose, hence b @ a
    product = np.reshape(b, (4, 4)) @ np.reshape(a, (4, 4))
    result[:] = product.reshape(16)


def translate(result, a, v):
    """Translate by v expressed in a's local frame."""
    vx, vy, vz = v[0], v[1], v[2]
    t0 = a[0] * vx + a[4] * vy + a[8] * vz + a[12]
    t1 = a[1] * vx + a[5] * vy + a[9] * vz + a[13]
    t2 = a[2] * vx + a[6] * vy + a[10] * vz + a[14]
    t3 = a[3] * vx + a[7] * vy + a[11] * vz + a[15]
    if result is not a:
        result[:] = a
    result[12] = t0
    result[13] = t1
    result[14] = t2
    result[15] = t3


def scale(result, a, v):
    """Scale the x, y and z basis columns by v; the translation column is kept."""
    m = np.array(a, dtype=np.float64)
    m[0:4] *= v[0]
    m[4:8] *= v[1]
    m[8:12] *= v[2]
    result[:] = m


def rotate_x(result, a, angle):
    """Rotate about the local x axis by angle radians."""
    s = math.sin(angle)
    c = math.cos(angle)
    m = np.array(a, dtype=np.float64)
    col_y = m[4:8].copy()
    col_z = m[8:12].copy()
    m[4:8] = col_y * c + col_z * s
    m[8:12] = col_z * c - col_y * s
    result[:] = m


def rotate_y(result, a, angle):
    """Rotate about the local y axis by angle radians."""
    s = math.sin(angle)
    c = math.cos(angle)
    m = np.array(a, dtype=np.float64)
    col_x = m[0:4].copy()
    col_z = m[8:12].copy()
    m[0:4] = col_x * c - col_z * s
    m[8:12] = col_x * s + col_z * c
    result[:] = m


def rotate_z(result, a, angle):
    """Rotate about the local z axis by angle radians."""
    s = math.sin(angle)
    c = math.cos(angle)
    m = np.array(a, dtype=np.float64)
    col_x = m[0:4].copy()
    col_y = m[4:8].copy()
    m[0:4] = col_x * c + col_y * s
    m[4:8] = col_y * c - col_x * s
    result[:] = m


def apply(result, a, p):
    """
    Transform the 3D point p by a, including the homogeneous divide.

    w is not guarded: a point on the projection plane (w == 0) gives inf/nan
    under numpy float rules (with a numpy RuntimeWarning).
    """
    x, y, z = p[0], p[1], p[2]
    w = np.float64(a[3] * x + a[7] * y + a[11] * z + a[15])
    result[0] = (a[0] * x + a[4] * y + a[8] * z + a[12]) / w
    result[1] = (a[1] * x + a[5] * y + a[9] * z + a[13]) / w
    result[2] = (a[2] * x + a[6] * y + a[10] * z + a[14]) / w


# ============================================================================
# Linear algebra
# ============================================================================

def transpose(result, a):
    result[:] = np.reshape(a, (4, 4)).T.flatten()


def determinant(a):
    """Determinant (the column-major layout does not change it)."""
    return float(np.linalg.det(np.reshape(a, (4, 4))))


def invert(result, a, tolerance=DEFAULTS.singular_tolerance):
    """
    Invert a into result.

    Returns:
        True on success. For a singular matrix (|det| < tolerance) result is
        set to the identity, a RuntimeWarning is issued and False returned.
    """
    m = np.array(a, dtype=np.float64).reshape(4, 4)
    if abs(np.linalg.det(m)) < tolerance:
        warnings.warn("Matrix is singular, using identity as its inverse", RuntimeWarning, stacklevel=2)
        identity(result)
        return False
    # inverse of the transpose is the transpose of the inverse
    result[:] = np.linalg.inv(m).reshape(16)
    return True


def to_float32_array(a):
    """Column-major float32 copy, ready for a uniform upload."""
    return np.array(a, dtype=np.float32)


def to_string(a, precision=DEFAULTS.string_precision):
    return format_components(a, precision)
