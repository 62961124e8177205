"""
Default numeric settings for vecmath.

Every operation that takes a tolerance, a print precision or a camera plane
default reads it from here, so the values live in one place.

Usage:
    from vecmath.config import DEFAULTS, MathDefaults

    DEFAULTS.epsilon                         # 1e-06
    strict = MathDefaults(epsilon=1e-9)      # a custom set for local use
"""

from dataclasses import dataclass


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class MathDefaults:
    """
    Numeric defaults shared by the vector, matrix and quaternion modules.

    Attributes:
        epsilon: Per-axis tolerance used by look_at to detect a viewer that
            sits on its target, and by approx_equal.

        singular_tolerance: Determinant magnitude below which mat4.invert
            treats a matrix as singular.

        slerp_fallback_threshold: When sin(theta0) in slerp drops below this,
            the endpoints are blended linearly instead.

        string_precision: Decimal places used by the to_string functions.

        near, far: Clip planes used by mat4.perspective when none are given.
    """
    epsilon: float = 1e-6
    singular_tolerance: float = 1e-10
    slerp_fallback_threshold: float = 1e-6
    string_precision: int = 0
    near: float = 0.1
    far: float = 1000.0


DEFAULTS = MathDefaults()
