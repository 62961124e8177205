"""
Unit tests for the vec2, vec3 and vec4 modules.

Tests cover construction defaults, normalisation (including the zero-vector
fallback), geometric operations (cross, axis rotations, lerp, average),
measures, conversions between dimensions and string/float32 export.
"""

import math
import unittest
import numpy as np
from vecmath import vec2, vec3, vec4
from test_fixtures import assert_values_close


class VectorConstructionTests(unittest.TestCase):
    """Tests for create/set/clone/equal"""

    def testCreateDefaults(self):
        """Test default components, with w defaulting to 1 for vec4"""
        assert_values_close(self, vec2.create(), [0, 0])
        assert_values_close(self, vec3.create(), [0, 0, 0])
        assert_values_close(self, vec4.create(), [0, 0, 0, 1])
        self.assertEqual(vec3.create(1, 2, 3).dtype, np.float64)

    def testSetAndClone(self):
        """Test set overwrites every component and clone copies"""
        v = vec4.create(5, 6, 7, 8)
        vec4.set(v, 1, 2)
        assert_values_close(self, v, [1, 2, 0, 1],
                            msg="Unspecified components should reset to their defaults")

        copy = vec3.create()
        vec3.clone(copy, (4, 5, 6))
        assert_values_close(self, copy, [4, 5, 6])

    def testEqual(self):
        """Test exact equality"""
        self.assertTrue(vec3.equal(vec3.create(1, 2, 3), (1, 2, 3)))
        self.assertFalse(vec3.equal(vec3.create(1, 2, 3), (1, 2, 3.0000001)))
        self.assertTrue(vec2.equal((0, 1), vec2.create(0, 1)))
        self.assertFalse(vec4.equal(vec4.create(), vec4.create(0, 0, 0, 0)))


class VectorNormaliseTests(unittest.TestCase):
    """Tests for normalise and its zero-length fallback"""

    def testNormalise(self):
        """Test normalisation produces a unit vector in the same direction"""
        result = vec3.create()
        vec3.normalise(result, (3, 4, 0))
        assert_values_close(self, result, [0.6, 0.8, 0])
        self.assertAlmostEqual(vec3.length(result), 1.0)

    def testNormaliseIsIdempotent(self):
        """Test normalising twice gives the same vector"""
        once = vec4.create()
        twice = vec4.create()
        vec4.normalise(once, (1, -2, 3, 4))
        vec4.normalise(twice, once)
        assert_values_close(self, twice, once)
        self.assertAlmostEqual(vec4.length(twice), 1.0)

    def testNormaliseZeroVector(self):
        """Test a zero vector normalises to zero rather than NaN"""
        result = vec2.create(9, 9)
        vec2.normalise(result, vec2.create(0, 0))
        assert_values_close(self, result, [0, 0])
        self.assertFalse(np.isnan(result).any())

        result = vec3.create(1, 1, 1)
        vec3.normalise(result, (0, 0, 0))
        assert_values_close(self, result, [0, 0, 0])

        result = vec4.create()
        vec4.normalise(result, (0, 0, 0, 0))
        assert_values_close(self, result, [0, 0, 0, 0])

    def testNormaliseInPlace(self):
        """Test result may be the input"""
        v = vec2.create(0, -5)
        vec2.normalise(v, v)
        assert_values_close(self, v, [0, -1])


class VectorArithmeticTests(unittest.TestCase):
    """Tests for componentwise arithmetic"""

    def testAddSubScaleMul(self):
        """Test componentwise add/sub/scale and scalar mul"""
        a = vec3.create(1, 2, 3)
        b = vec3.create(4, 5, 6)
        result = vec3.create()

        vec3.add(result, a, b)
        assert_values_close(self, result, [5, 7, 9])
        vec3.sub(result, a, b)
        assert_values_close(self, result, [-3, -3, -3])
        vec3.scale(result, a, b)
        assert_values_close(self, result, [4, 10, 18])
        vec3.mul(result, a, 2)
        assert_values_close(self, result, [2, 4, 6])

    def testInvert(self):
        """Test invert negates every component"""
        v = vec4.create(1, -2, 3, 1)
        vec4.invert(v, v)
        assert_values_close(self, v, [-1, 2, -3, -1])

    def testDot(self):
        """Test dot products"""
        self.assertEqual(vec2.dot((1, 2), (3, 4)), 11)
        self.assertEqual(vec3.dot((1, 2, 3), (4, 5, 6)), 32)
        self.assertEqual(vec4.dot((1, 2, 3, 4), (1, 1, 1, 1)), 10)

    def testAverage(self):
        """Test average of several vectors"""
        result = vec2.create()
        vec2.average(result, (0, 0), (2, 4), (4, 2))
        assert_values_close(self, result, [2, 2])

        result = vec4.create()
        vec4.average(result, (2, 0, 0, 1), (0, 2, 0, 1))
        assert_values_close(self, result, [1, 1, 0, 1])

    def testAverageAliasedResult(self):
        """Test the result may be one of the averaged vectors"""
        a = vec3.create(2, 2, 2)
        vec3.average(a, a, (4, 6, 8))
        assert_values_close(self, a, [3, 4, 5])

    def testAverageRequiresVectors(self):
        """Test average with no vectors raises"""
        with self.assertRaises(ValueError):
            vec3.average(vec3.create())

    def testLerp(self):
        """Test lerp including extrapolation past t=1"""
        result = vec3.create()
        vec3.lerp(result, (0, 0, 0), (2, 4, 6), 0.5)
        assert_values_close(self, result, [1, 2, 3])
        vec3.lerp(result, (0, 0, 0), (2, 4, 6), 2.0)
        assert_values_close(self, result, [4, 8, 12])

        result = vec4.create()
        vec4.lerp(result, (0, 0, 0, 0), (1, 1, 1, 1), 0.25)
        assert_values_close(self, result, [0.25, 0.25, 0.25, 0.25])


class VectorGeometryTests(unittest.TestCase):
    """Tests for cross products and rotations"""

    def testCrossProduct(self):
        """Test right-handed cross product"""
        result = vec3.create()
        vec3.cross(result, (1, 0, 0), (0, 1, 0))
        assert_values_close(self, result, [0, 0, 1])
        vec3.cross(result, (0, 1, 0), (1, 0, 0))
        assert_values_close(self, result, [0, 0, -1])

    def testCrossProductAliased(self):
        """Test cross product with result aliasing the first operand"""
        a = vec3.create(2, 3, 4)
        b = vec3.create(5, 6, 7)
        expected = vec3.create()
        vec3.cross(expected, a, b)
        vec3.cross(a, a, b)
        assert_values_close(self, a, expected)
        assert_values_close(self, a, np.cross([2, 3, 4], [5, 6, 7]))

    def testRotateAxes(self):
        """Test quarter turns about each world axis"""
        result = vec3.create()
        vec3.rotate_x(result, (0, 1, 0), math.pi / 2)
        assert_values_close(self, result, [0, 0, 1])
        vec3.rotate_y(result, (0, 0, 1), math.pi / 2)
        assert_values_close(self, result, [1, 0, 0])
        vec3.rotate_z(result, (1, 0, 0), math.pi / 2)
        assert_values_close(self, result, [0, 1, 0])

    def testRotateInPlace(self):
        """Test rotating a vector in place reads all components first"""
        v = vec3.create(1, 1, 0)
        vec3.rotate_z(v, v, math.pi)
        assert_values_close(self, v, [-1, -1, 0])

    def testRotate2D(self):
        """Test counter-clockwise 2D rotation"""
        v = vec2.create(1, 0)
        vec2.rotate(v, v, math.pi / 2)
        assert_values_close(self, v, [0, 1])

    def testVec4RotateKeepsW(self):
        """Test the vec4 axis rotations leave w alone"""
        v = vec4.create(0, 1, 0, 7)
        vec4.rotate_x(v, v, math.pi / 2)
        assert_values_close(self, v, [0, 0, 1, 7])

        result = vec4.create(0, 0, 0, 3)
        vec4.rotate_z(result, (1, 0, 0, 1), math.pi / 2)
        assert_values_close(self, result, [0, 1, 0, 3],
                            msg="w of the result should not be written")

        vec4.rotate_y(result, (0, 0, 1, 1), math.pi / 2)
        assert_values_close(self, result, [1, 0, 0, 3])

    def testVec4RotateMatchesVec3(self):
        """Test the vec4 axis rotations agree with vec3 on x, y and z"""
        for name in ("rotate_x", "rotate_y", "rotate_z"):
            expected = vec3.create()
            getattr(vec3, name)(expected, (1, -2, 3), 0.4)
            actual = vec4.create(0, 0, 0, -5)
            getattr(vec4, name)(actual, (1, -2, 3, 9), 0.4)
            assert_values_close(self, actual, list(expected) + [-5], msg=name)

    def testVec4RotateNotImplemented(self):
        """Test axis-less vec4 rotation fails loudly"""
        v = vec4.create(1, 2, 3, 1)
        with self.assertRaises(NotImplementedError):
            vec4.rotate(v, v, 1.0)
        assert_values_close(self, v, [1, 2, 3, 1])


class VectorMeasureTests(unittest.TestCase):
    """Tests for length/distance and is_zero"""

    def testLength(self):
        self.assertEqual(vec3.length_squared((1, 2, 2)), 9)
        self.assertEqual(vec3.length((1, 2, 2)), 3.0)
        self.assertEqual(vec2.length((3, 4)), 5.0)
        self.assertEqual(vec4.length((1, 1, 1, 1)), 2.0)

    def testDistance(self):
        self.assertEqual(vec3.distance((1, 1, 1), (2, 3, 3)), 3.0)
        self.assertEqual(vec3.distance_squared((1, 1, 1), (2, 3, 3)), 9)
        self.assertEqual(vec2.distance((0, 0), (3, 4)), 5.0)
        self.assertEqual(vec4.distance_squared((0, 0, 0, 0), (1, 1, 1, 1)), 4)

    def testIsZero(self):
        self.assertTrue(vec2.is_zero(vec2.create()))
        self.assertTrue(vec3.is_zero(vec3.create()))
        self.assertFalse(vec4.is_zero(vec4.create()))
        self.assertTrue(vec4.is_zero(vec4.create(0, 0, 0, 0)))


class VectorConversionTests(unittest.TestCase):
    """Tests for dimension conversion and export"""

    def testDimensionConversions(self):
        """Test the 2D plane maps to the 3D ground plane and back"""
        assert_values_close(self, vec2.xyz((1, 2)), [1, 0, 2])
        assert_values_close(self, vec2.xyzw((1, 2)), [1, 0, 2, 1])
        assert_values_close(self, vec3.xz((1, 2, 3)), [1, 3])
        assert_values_close(self, vec3.xyzw((1, 2, 3)), [1, 2, 3, 1])
        assert_values_close(self, vec4.xyz((1, 2, 3, 4)), [1, 2, 3])

    def testToFloat32Array(self):
        """Test float32 export keeps component order"""
        packed = vec3.to_float32_array(vec3.create(1.5, 2.5, 3.5))
        self.assertEqual(packed.dtype, np.float32)
        self.assertEqual(packed.tolist(), [1.5, 2.5, 3.5])
        self.assertEqual(vec2.to_float32_array((1, 2)).tolist(), [1.0, 2.0])
        self.assertEqual(vec4.to_float32_array(vec4.create()).tolist(), [0.0, 0.0, 0.0, 1.0])

    def testToString(self):
        """Test string formatting with default and explicit precision"""
        v = vec3.create(1.234, -5.5, 2)
        self.assertEqual(vec3.to_string(v), "[1, -5, 2]")
        self.assertEqual(vec3.to_string(v, 2), "[1.23, -5.5, 2]")
        self.assertEqual(vec2.to_string(vec2.create(0.5, 1.49)), "[1, 1]")
        self.assertEqual(vec4.to_string(vec4.create()), "[0, 0, 0, 1]")

    def testToStringNegativePrecision(self):
        with self.assertRaises(ValueError):
            vec3.to_string(vec3.create(), -1)


if __name__ == '__main__':
    unittest.main()
