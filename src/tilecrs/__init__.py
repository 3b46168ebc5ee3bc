"""TileCrs - tile addressing and projection helpers for the common web map reference systems."""

from ._version import __version__

from .api import crs_to_tile, lookup_profile, parse_bbox, parse_dimensions, tile_to_crs, to_global_geodetic
from .errors import InvalidArgumentError, NotSupportedError, NumericNonConvergenceError, TileCrsError
from .profiles import (
    EllipsoidalMercatorCrsProfile,
    GlobalGeodeticCrsProfile,
    SphericalMercatorCrsProfile,
    TileMatrixSetConfig,
    create_profile,
    create_profile_for,
    get_supported_coordinate_reference_systems,
)
from .tiles import TileOrigin, TileScheme, ZoomTimesTwo
from .types import (
    BBoxTuple,
    BoundingBox,
    ConversionResult,
    Coordinate,
    CoordinateReferenceSystem,
    CrsCoordinate,
    ErrorKind,
    ProfileKind,
    TileMatrixDimensions,
)
from .typing import CrsProfile

__all__ = [
    "__version__",
    "crs_to_tile",
    "lookup_profile",
    "parse_bbox",
    "parse_dimensions",
    "tile_to_crs",
    "to_global_geodetic",
    "InvalidArgumentError",
    "NotSupportedError",
    "NumericNonConvergenceError",
    "TileCrsError",
    "EllipsoidalMercatorCrsProfile",
    "GlobalGeodeticCrsProfile",
    "SphericalMercatorCrsProfile",
    "TileMatrixSetConfig",
    "create_profile",
    "create_profile_for",
    "get_supported_coordinate_reference_systems",
    "TileOrigin",
    "TileScheme",
    "ZoomTimesTwo",
    "BBoxTuple",
    "BoundingBox",
    "ConversionResult",
    "Coordinate",
    "CoordinateReferenceSystem",
    "CrsCoordinate",
    "ErrorKind",
    "ProfileKind",
    "TileMatrixDimensions",
    "CrsProfile",
]
