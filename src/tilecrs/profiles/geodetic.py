"""Global geodetic (WGS84 longitude/latitude, EPSG:4326) profile."""

from __future__ import annotations

from ..errors import InvalidArgumentError
from ..tiles import TileOrigin
from ..types import BoundingBox, Coordinate, CoordinateReferenceSystem, CrsCoordinate, ProfileKind, TileMatrixDimensions
from . import proportional

GLOBAL_GEODETIC_CRS = CoordinateReferenceSystem(authority="EPSG", identifier=4326)

GLOBAL_GEODETIC_BOUNDS = BoundingBox(min_x=-180.0, min_y=-90.0, max_x=180.0, max_y=90.0)

GLOBAL_GEODETIC_WKT = (
    'GEOGCS["WGS 84",DATUM["WGS_1984",SPHEROID["WGS 84",6378137,298.257223563,AUTHORITY["EPSG","7030"]],'
    'AUTHORITY["EPSG","6326"]],PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],'
    'UNIT["degree",0.01745329251994328,AUTHORITY["EPSG","9122"]],AUTHORITY["EPSG","4326"]]'
)


class GlobalGeodeticCrsProfile:
    """Unprojected longitude/latitude in degrees; tiles subdivide the bounds linearly."""

    kind = ProfileKind.GLOBAL_GEODETIC

    @property
    def bounds(self) -> BoundingBox:
        return GLOBAL_GEODETIC_BOUNDS

    @property
    def coordinate_reference_system(self) -> CoordinateReferenceSystem:
        return GLOBAL_GEODETIC_CRS

    @property
    def name(self) -> str:
        return "World Geodetic System (WGS) 1984"

    @property
    def well_known_text(self) -> str:
        return GLOBAL_GEODETIC_WKT

    @property
    def description(self) -> str:
        return "World Geodetic System 1984"

    @property
    def precision(self) -> int:
        return 7

    def crs_to_tile_coordinate(
        self,
        coordinate: CrsCoordinate,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> Coordinate[int]:
        return proportional.crs_to_tile_coordinate(GLOBAL_GEODETIC_CRS, coordinate, bounds, dimensions, origin)

    def tile_to_crs_coordinate(
        self,
        column: int,
        row: int,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> CrsCoordinate:
        return proportional.tile_to_crs_coordinate(GLOBAL_GEODETIC_CRS, column, row, bounds, dimensions, origin)

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
        if coordinate is None:
            raise InvalidArgumentError("Coordinate may not be null")
        return Coordinate[float](x=coordinate.x, y=coordinate.y)

    def from_global_geodetic(self, coordinate: Coordinate) -> Coordinate[float]:
        return self.to_global_geodetic(coordinate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.coordinate_reference_system})"
