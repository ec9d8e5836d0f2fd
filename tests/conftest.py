import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vectorgeometry import VectorGeometryCore


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts and ends with default kernel settings"""
    VectorGeometryCore.reset()
    yield
    VectorGeometryCore.reset()
