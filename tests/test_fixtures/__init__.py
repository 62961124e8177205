"""Test fixtures and utilities for vecmath testing.

- assertions: Custom assertion functions (assert_values_close, assert_transforms_point)
"""

from .assertions import assert_values_close, assert_transforms_point

__all__ = [
    'assert_values_close',
    'assert_transforms_point',
]
