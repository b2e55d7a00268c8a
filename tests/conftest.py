import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from wurfl_handsets.handsets import Handset  # noqa: E402


@pytest.fixture
def generic():
    root = Handset("generic", "")
    root.set("color", "no")
    return root


@pytest.fixture
def colorphone(generic):
    child = Handset("colorphone", "ColorPhone/1.0", fallback=generic)
    child.set("color", "yes")
    child.set("screen", "128x160")
    return child
