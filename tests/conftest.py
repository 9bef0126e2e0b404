import sys
import os

import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from chromalite import Color


@pytest.fixture
def orange() -> Color:
    """#ffaa44, seeded in RGB."""
    return Color.parse("#ffaa44")


@pytest.fixture
def translucent_black() -> Color:
    """Black at alpha 128/255 with no background attached."""
    return Color.parse("#00000080")
