"""vecmath - fixed-size vector, matrix and quaternion math for graphics and simulation."""

__version__ = "0.1.0"

from . import vec2, vec3, vec4, mat3, mat4, quat
from .vec2 import Vec2
from .vec3 import Vec3
from .vec4 import Vec4
from .mat3 import Mat3
from .mat4 import Mat4
from .quat import Quat
from .config import DEFAULTS, MathDefaults
from .misc import EPSILON, clamp, approx_equal, random_point_in_circle


__all__ = [
    'vec2', 'vec3', 'vec4', 'mat3', 'mat4', 'quat',
    'Vec2', 'Vec3', 'Vec4', 'Mat3', 'Mat4', 'Quat',
    'DEFAULTS', 'MathDefaults',
    'EPSILON', 'clamp', 'approx_equal', 'random_point_in_circle',
]
