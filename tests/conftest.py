import sys
import os

import pytest

# Make the shared sample tables importable from the test subpackages
tests_root = os.path.dirname(os.path.abspath(__file__))
if tests_root not in sys.path:
    sys.path.insert(0, tests_root)

from chromakit.config import set_color_mode
from chromakit.types.color_types import ColorMode


@pytest.fixture(autouse=True)
def rgb_color_mode():
    """Every test starts and ends in RGB mode; the mode is process-wide."""
    set_color_mode(ColorMode.RGB)
    yield
    set_color_mode(ColorMode.RGB)
