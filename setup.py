"""
Setup script for vecmath.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[test]"   # With test dependencies
"""

from setuptools import setup, find_packages


setup(
    name='vecmath',
    version='0.1.0',
    description='Fixed-size vector, matrix and quaternion math for graphics and simulation',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
