"""
Pytest configuration for vecmath tests.
Adds src/ (the package) and tests/ (shared fixtures) to sys.path so the
suite runs from a plain checkout as well as from an editable install.
"""
import sys
from pathlib import Path

_tests_path = Path(__file__).parent
_src_path = _tests_path.parent / "src"
for path in (_src_path, _tests_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
