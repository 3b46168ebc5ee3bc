"""
Shared test configuration, fixtures, and markers for tilecrs tests.
"""

import pytest

from tilecrs.profiles.ellipsoidal import EllipsoidalMercatorCrsProfile
from tilecrs.profiles.geodetic import GlobalGeodeticCrsProfile
from tilecrs.profiles.spherical import SphericalMercatorCrsProfile
from tilecrs.tiles import TileOrigin
from tilecrs.types import BoundingBox, TileMatrixDimensions


def pytest_configure(config):
    """Configure test markers."""
    config.addinivalue_line("markers", "property: marks property-based tests")
    config.addinivalue_line("markers", "unit: marks unit tests (fast, pure logic)")
    config.addinivalue_line("markers", "oracle: marks tests checked against pyproj")


@pytest.fixture
def geodetic_profile():
    return GlobalGeodeticCrsProfile()


@pytest.fixture
def spherical_profile():
    return SphericalMercatorCrsProfile()


@pytest.fixture
def ellipsoidal_profile():
    return EllipsoidalMercatorCrsProfile()


@pytest.fixture
def world_bounds():
    """Geodetic world extent."""
    return BoundingBox(min_x=-180.0, min_y=-90.0, max_x=180.0, max_y=90.0)


@pytest.fixture
def two_by_one():
    """Matrix dimensions of the geodetic level 0 pyramid."""
    return TileMatrixDimensions(width=2, height=1)


@pytest.fixture(params=list(TileOrigin), ids=lambda origin: origin.name)
def origin(request):
    """Every tile origin."""
    return request.param

