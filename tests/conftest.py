"""
Pytest configuration for wireframe_pipeline tests.
Adds the repository root to sys.path so the package imports without installation.
"""
import sys
from pathlib import Path

import pytest

root = Path(__file__).parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))


@pytest.fixture
def cube_descriptor():
    """Unit-test scene: a 2x2x2 cube at the origin seen from z = 5."""
    return {
        "view": {
            "prp": [0, 0, 5],
            "srp": [0, 0, 0],
            "vup": [0, 1, 0],
            "clip": [-1, 1, -1, 1, 1, 50],
        },
        "models": [
            {"type": "cube", "center": [0, 0, 0], "width": 2, "height": 2, "depth": 2},
        ],
    }
