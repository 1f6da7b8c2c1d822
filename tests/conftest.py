"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path when running pytest without installing the package
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from greatcircle.models import Coord  # noqa: E402


@pytest.fixture
def austin():
    return Coord(lat=30.2672, lon=-97.7431)


@pytest.fixture
def palo_alto():
    return Coord(lat=37.4419, lon=-122.1430)


@pytest.fixture
def north_pole():
    return Coord(lat=90.0, lon=0.0)


@pytest.fixture
def south_pole():
    return Coord(lat=-90.0, lon=0.0)
