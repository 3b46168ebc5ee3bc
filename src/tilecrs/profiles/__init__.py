"""Coordinate reference system profiles and the registry that resolves them."""

from . import proportional
from .config import TileMatrixSetConfig
from .ellipsoidal import WORLD_MERCATOR_CRS, EllipsoidalMercatorCrsProfile
from .geodetic import GLOBAL_GEODETIC_CRS, GlobalGeodeticCrsProfile
from .registry import (
    create_profile,
    create_profile_for,
    get_supported_coordinate_reference_systems,
    profile_registry,
)
from .spherical import SPHERICAL_MERCATOR_CRS, SphericalMercatorCrsProfile

__all__ = [
    "proportional",
    "TileMatrixSetConfig",
    "EllipsoidalMercatorCrsProfile",
    "GlobalGeodeticCrsProfile",
    "SphericalMercatorCrsProfile",
    "GLOBAL_GEODETIC_CRS",
    "SPHERICAL_MERCATOR_CRS",
    "WORLD_MERCATOR_CRS",
    "create_profile",
    "create_profile_for",
    "get_supported_coordinate_reference_systems",
    "profile_registry",
]
