"""Spherical ("Web" or "Pseudo") Mercator profile, EPSG:3857."""

from __future__ import annotations

import math

from ..errors import InvalidArgumentError
from ..tiles import TileOrigin
from ..types import BoundingBox, Coordinate, CoordinateReferenceSystem, CrsCoordinate, ProfileKind, TileMatrixDimensions
from . import proportional

# WGS84 semi-major axis, metres. The sphere uses it as its radius.
EARTH_EQUATORIAL_RADIUS = 6378137.0

EARTH_EQUATORIAL_CIRCUMFERENCE = 2.0 * math.pi * EARTH_EQUATORIAL_RADIUS

SPHERICAL_MERCATOR_CRS = CoordinateReferenceSystem(authority="EPSG", identifier=3857)

SPHERICAL_MERCATOR_BOUNDS = BoundingBox(
    min_x=-math.pi * EARTH_EQUATORIAL_RADIUS,
    min_y=-math.pi * EARTH_EQUATORIAL_RADIUS,
    max_x=math.pi * EARTH_EQUATORIAL_RADIUS,
    max_y=math.pi * EARTH_EQUATORIAL_RADIUS,
)

SPHERICAL_MERCATOR_WKT = (
    'PROJCS["WGS 84 / Pseudo-Mercator",GEOGCS["WGS 84",DATUM["WGS_1984",SPHEROID["WGS 84",6378137,298.257223563,'
    'AUTHORITY["EPSG","7030"]],AUTHORITY["EPSG","6326"]],PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],'
    'UNIT["degree",0.0174532925199433,AUTHORITY["EPSG","9122"]],AUTHORITY["EPSG","4326"]],'
    'PROJECTION["Mercator_1SP"],PARAMETER["central_meridian",0],PARAMETER["scale_factor",1],'
    'PARAMETER["false_easting",0],PARAMETER["false_northing",0],UNIT["metre",1,AUTHORITY["EPSG","9001"]],'
    'AXIS["X",EAST],AXIS["Y",NORTH],AUTHORITY["EPSG","3857"]]'
)


class SphericalMercatorCrsProfile:
    """
    Mercator projection of WGS84 coordinates onto a sphere.

    The projected world is a square of side 2πa metres, so tile addressing is a
    linear subdivision of the bounds.
    """

    kind = ProfileKind.SPHERICAL_MERCATOR

    @property
    def bounds(self) -> BoundingBox:
        return SPHERICAL_MERCATOR_BOUNDS

    @property
    def coordinate_reference_system(self) -> CoordinateReferenceSystem:
        return SPHERICAL_MERCATOR_CRS

    @property
    def name(self) -> str:
        return "Web Mercator"

    @property
    def well_known_text(self) -> str:
        return SPHERICAL_MERCATOR_WKT

    @property
    def description(self) -> str:
        return (
            "Projection used in many popular web mapping applications (Google/Bing/OpenStreetMap/etc). "
            "Sometimes known as EPSG:900913."
        )

    @property
    def precision(self) -> int:
        return 2

    def crs_to_tile_coordinate(
        self,
        coordinate: CrsCoordinate,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> Coordinate[int]:
        return proportional.crs_to_tile_coordinate(SPHERICAL_MERCATOR_CRS, coordinate, bounds, dimensions, origin)

    def tile_to_crs_coordinate(
        self,
        column: int,
        row: int,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> CrsCoordinate:
        return proportional.tile_to_crs_coordinate(SPHERICAL_MERCATOR_CRS, column, row, bounds, dimensions, origin)

    def tile_bounds(
        self,
        column: int,
        row: int,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> BoundingBox:
        return proportional.tile_bounds(column, row, bounds, dimensions, origin)

    def to_global_geodetic(self, coordinate: Coordinate) -> Coordinate[float]:
        """
        Metres to degrees.

        Latitude uses USGS Professional Paper 1395, eq. 7-4:
        ``lat = pi/2 - 2 * atan(exp(-y / R))``.
        """
        if coordinate is None:
            raise InvalidArgumentError("Coordinate may not be null")
        return Coordinate[float](
            x=math.degrees(coordinate.x / EARTH_EQUATORIAL_RADIUS),
            y=math.degrees(math.pi / 2 - 2 * math.atan(math.exp(-coordinate.y / EARTH_EQUATORIAL_RADIUS))),
        )

    def from_global_geodetic(self, coordinate: Coordinate) -> Coordinate[float]:
        """Degrees to metres (USGS PP 1395, eq. 7-1 and 7-2)."""
        if coordinate is None:
            raise InvalidArgumentError("Coordinate may not be null")
        if not -90.0 < coordinate.y < 90.0:
            raise InvalidArgumentError(f"Latitude {coordinate.y} must lie strictly between -90 and 90 degrees")

        latitude = math.radians(coordinate.y)
        return Coordinate[float](
            x=EARTH_EQUATORIAL_RADIUS * math.radians(coordinate.x),
            y=EARTH_EQUATORIAL_RADIUS * math.log(math.tan(math.pi / 4 + latitude / 2)),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.coordinate_reference_system})"
