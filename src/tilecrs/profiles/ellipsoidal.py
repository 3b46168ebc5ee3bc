"""
Ellipsoidal ("World") Mercator profile, EPSG:3395.

Unlike the spherical variant, the projection accounts for the flattening of the
WGS84 ellipsoid. The forward projection is closed form. The inverse has no closed
form for latitude and is solved by fixed point iteration.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..errors import InvalidArgumentError, NumericNonConvergenceError
from ..tiles import TileOrigin
from ..types import BoundingBox, Coordinate, CoordinateReferenceSystem, CrsCoordinate, ProfileKind, TileMatrixDimensions
from . import proportional

logger = logging.getLogger(__name__)

# WGS84 spheroid
UNSCALED_EARTH_EQUATORIAL_RADIUS = 6378137.0
INVERSE_FLATTENING = 298.257223563
FLATTENING = 1.0 / INVERSE_FLATTENING

# b = a - a / (1/f)
UNSCALED_EARTH_POLAR_RADIUS = UNSCALED_EARTH_EQUATORIAL_RADIUS * (1.0 - FLATTENING)

# e^2 = f(2 - f)
ECCENTRICITY = math.sqrt(FLATTENING * (2.0 - FLATTENING))

CONVERGENCE_TOLERANCE = 1e-8
DEFAULT_MAXIMUM_ITERATIONS = 100

WORLD_MERCATOR_CRS = CoordinateReferenceSystem(authority="EPSG", identifier=3395)

WORLD_MERCATOR_WKT = (
    'PROJCS["WGS 84 / World Mercator",GEOGCS["WGS 84",DATUM["WGS_1984",SPHEROID["WGS 84",6378137,298.257223563,'
    'AUTHORITY["EPSG","7030"]],AUTHORITY["EPSG","6326"]],PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],'
    'UNIT["degree",0.01745329251994328,AUTHORITY["EPSG","9122"]],AUTHORITY["EPSG","4326"]],'
    'UNIT["metre",1,AUTHORITY["EPSG","9001"]],PROJECTION["Mercator_1SP"],PARAMETER["central_meridian",0],'
    'PARAMETER["scale_factor",1],PARAMETER["false_easting",0],PARAMETER["false_northing",0],'
    'AUTHORITY["EPSG","3395"],AXIS["Easting",EAST],AXIS["Northing",NORTH]]'
)


class EllipsoidalMercatorCrsProfile:
    """
    Mercator projection of the WGS84 ellipsoid.

    Args:
        scale_factor: Uniform scale applied to the equatorial radius, for the
            scaled world Mercator variants. 1.0 is plain EPSG:3395.
        coordinate_reference_system: Reference system of this variant.
        maximum_iterations: Cap on the latitude iteration of the inverse projection.
    """

    kind = ProfileKind.ELLIPSOIDAL_MERCATOR

    def __init__(
        self,
        scale_factor: float = 1.0,
        coordinate_reference_system: Optional[CoordinateReferenceSystem] = None,
        maximum_iterations: int = DEFAULT_MAXIMUM_ITERATIONS,
    ) -> None:
        if not scale_factor > 0.0:
            raise InvalidArgumentError("Equatorial radius scale factor must be positive")
        if maximum_iterations < 1:
            raise InvalidArgumentError("Maximum iteration count must be at least 1")

        self._scale_factor = scale_factor
        self._crs = coordinate_reference_system or WORLD_MERCATOR_CRS
        self._maximum_iterations = maximum_iterations
        self._radius = UNSCALED_EARTH_EQUATORIAL_RADIUS * scale_factor

        # A square level-0 tile needs the y extent to match x: +/- pi * R.
        self._bounds = BoundingBox(
            min_x=-math.pi * self._radius,
            min_y=-math.pi * self._radius,
            max_x=math.pi * self._radius,
            max_y=math.pi * self._radius,
        )

    @property
    def scale_factor(self) -> float:
        return self._scale_factor

    @property
    def radius(self) -> float:
        """Scaled equatorial radius, in metres."""
        return self._radius

    @property
    def maximum_iterations(self) -> int:
        return self._maximum_iterations

    @property
    def bounds(self) -> BoundingBox:
        return self._bounds

    @property
    def coordinate_reference_system(self) -> CoordinateReferenceSystem:
        return self._crs

    @property
    def name(self) -> str:
        return "World Mercator"

    @property
    def well_known_text(self) -> str:
        return WORLD_MERCATOR_WKT

    @property
    def description(self) -> str:
        return "World (Ellipsoidal) Mercator"

    @property
    def precision(self) -> int:
        return 2

    # ------------------------------------------------------------------
    # Tile addressing
    # ------------------------------------------------------------------
    def crs_to_tile_coordinate(
        self,
        coordinate: CrsCoordinate,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> Coordinate[int]:
        return proportional.crs_to_tile_coordinate(self._crs, coordinate, bounds, dimensions, origin)

    def tile_to_crs_coordinate(
        self,
        column: int,
        row: int,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> CrsCoordinate:
        return proportional.tile_to_crs_coordinate(self._crs, column, row, bounds, dimensions, origin)

    def tile_bounds(
        self,
        column: int,
        row: int,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> BoundingBox:
        return proportional.tile_bounds(column, row, bounds, dimensions, origin)

    # ------------------------------------------------------------------
    # Projection
    # ------------------------------------------------------------------
    def from_global_geodetic(self, coordinate: Coordinate) -> Coordinate[float]:
        """
        WGS84 degrees to World Mercator metres.

        ``x = R * lon``, ``y = R * atanh(sin(lat)) - R * e * atanh(e * sin(lat))``

        Stopgap in lieu of a general transformation mechanism; only WGS84
        degrees are accepted.

        Raises:
            InvalidArgumentError: If the coordinate is missing or at/beyond a pole
        """
        if coordinate is None:
            raise InvalidArgumentError("Coordinate may not be null")
        if not -90.0 < coordinate.y < 90.0:
            raise InvalidArgumentError(f"Latitude {coordinate.y} must lie strictly between -90 and 90 degrees")

        longitude = math.radians(coordinate.x)
        sin_latitude = math.sin(math.radians(coordinate.y))

        return Coordinate[float](
            x=self._radius * longitude,
            y=self._radius * math.atanh(sin_latitude) - self._radius * ECCENTRICITY * math.atanh(ECCENTRICITY * sin_latitude),
        )

    def to_global_geodetic(self, coordinate: Coordinate) -> Coordinate[float]:
        """
        World Mercator metres to WGS84 degrees.

        Longitude is ``x / R`` with the scaled radius ``R = a * scale_factor``
        rather than the unscaled ``a``, so the inverse matches
        :meth:`from_global_geodetic` for scaled variants. With the default
        scale factor of 1.0 the two are identical.

        Raises:
            InvalidArgumentError: If the coordinate is missing
            NumericNonConvergenceError: If the latitude iteration hits its cap
        """
        if coordinate is None:
            raise InvalidArgumentError("Coordinate may not be null")

        return Coordinate[float](
            x=math.degrees(coordinate.x / self._radius),
            y=math.degrees(self._latitude(coordinate.y)),
        )

    def _latitude(self, meters: float) -> float:
        """
        Latitude in radians for a northing, by the recursion

            s(1)   = tanh(y/R)
            s(n+1) = tanh(y/R + e * atanh(e * s(n)))

        stopping once successive terms differ by less than 1e-8; then
        latitude = asin(s).
        """
        ratio = meters / self._radius
        previous = math.tanh(ratio)
        residual = math.inf

        for iteration in range(1, self._maximum_iterations + 1):
            current = math.tanh(ratio + ECCENTRICITY * math.atanh(ECCENTRICITY * previous))
            residual = abs(current - previous)
            if residual < CONVERGENCE_TOLERANCE:
                logger.debug(f"Latitude iteration for y={meters} converged after {iteration} step(s)")
                return math.asin(current)
            previous = current

        logger.error(
            f"Latitude iteration for y={meters} did not converge within {self._maximum_iterations} steps (residual {residual})"
        )
        raise NumericNonConvergenceError(
            f"Inverse World Mercator latitude did not converge within {self._maximum_iterations} iterations",
            iterations=self._maximum_iterations,
            residual=residual,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._crs}, scale_factor={self._scale_factor})"
