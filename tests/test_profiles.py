"""
Tests for the geodetic and spherical Mercator profiles and the linear tile
addressing they share.
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tilecrs.errors import InvalidArgumentError
from tilecrs.profiles import proportional
from tilecrs.profiles.geodetic import GLOBAL_GEODETIC_CRS, GlobalGeodeticCrsProfile
from tilecrs.profiles.spherical import (
    EARTH_EQUATORIAL_RADIUS,
    SPHERICAL_MERCATOR_CRS,
    SphericalMercatorCrsProfile,
)
from tilecrs.tiles import TileOrigin
from tilecrs.types import (
    BoundingBox,
    Coordinate,
    CoordinateReferenceSystem,
    CrsCoordinate,
    ProfileKind,
    TileMatrixDimensions,
)
from tilecrs.typing import CrsProfile


def geodetic(x, y):
    return CrsCoordinate(x=x, y=y, crs=GLOBAL_GEODETIC_CRS)


class TestGlobalGeodeticProfile:
    """Test the EPSG:4326 profile."""

    def test_metadata(self, geodetic_profile):
        assert isinstance(geodetic_profile, CrsProfile)
        assert geodetic_profile.kind is ProfileKind.GLOBAL_GEODETIC
        assert geodetic_profile.coordinate_reference_system == CoordinateReferenceSystem(authority="EPSG", identifier=4326)
        assert geodetic_profile.bounds == BoundingBox(min_x=-180, min_y=-90, max_x=180, max_y=90)
        assert geodetic_profile.name == "World Geodetic System (WGS) 1984"
        assert geodetic_profile.description == "World Geodetic System 1984"
        assert geodetic_profile.precision == 7
        assert geodetic_profile.well_known_text.startswith('GEOGCS["WGS 84"')
        assert geodetic_profile.well_known_text.endswith('AUTHORITY["EPSG","4326"]]')

    def test_level_zero_pyramid(self, geodetic_profile, world_bounds, two_by_one):
        """The prime meridian/equator falls in the eastern tile; its corner is (0, 90)."""
        tile = geodetic_profile.crs_to_tile_coordinate(geodetic(0.0, 0.0), world_bounds, two_by_one, TileOrigin.UPPER_LEFT)

        assert tile == Coordinate[int](x=1, y=0)

        corner = geodetic_profile.tile_to_crs_coordinate(1, 0, world_bounds, two_by_one, TileOrigin.UPPER_LEFT)

        assert corner.to_coordinate() == Coordinate[float](x=0.0, y=90.0)
        assert corner.crs == GLOBAL_GEODETIC_CRS

        print(f"✅ (0, 0) is in tile {tile}, whose corner is {corner}")

    def test_lower_left_numbering(self, geodetic_profile, world_bounds):
        dimensions = TileMatrixDimensions(width=4, height=2)

        tile = geodetic_profile.crs_to_tile_coordinate(geodetic(-100.0, 45.0), world_bounds, dimensions, TileOrigin.LOWER_LEFT)

        assert tile == Coordinate[int](x=0, y=1)

    def test_shared_edge_belongs_to_one_tile(self, geodetic_profile, world_bounds):
        """A point on a tile boundary goes to the tile further from the origin."""
        dimensions = TileMatrixDimensions(width=4, height=2)

        tile = geodetic_profile.crs_to_tile_coordinate(geodetic(-90.0, 0.0), world_bounds, dimensions, TileOrigin.UPPER_LEFT)

        assert tile == Coordinate[int](x=1, y=1)

    def test_far_edges_are_outside(self, geodetic_profile, world_bounds, two_by_one):
        with pytest.raises(InvalidArgumentError, match="outside"):
            geodetic_profile.crs_to_tile_coordinate(geodetic(180.0, 0.0), world_bounds, two_by_one, TileOrigin.UPPER_LEFT)
        with pytest.raises(InvalidArgumentError, match="outside"):
            geodetic_profile.crs_to_tile_coordinate(geodetic(0.0, -90.0), world_bounds, two_by_one, TileOrigin.UPPER_LEFT)

    def test_just_inside_far_edges(self, geodetic_profile, world_bounds, two_by_one, origin):
        """A point a hair inside the far corner maps to the last tile, not one past it."""
        x = world_bounds.min_x + 1e-8 if origin.horizontal else world_bounds.max_x - 1e-8
        y = world_bounds.min_y + 1e-8 if origin.vertical else world_bounds.max_y - 1e-8

        tile = geodetic_profile.crs_to_tile_coordinate(geodetic(x, y), world_bounds, two_by_one, origin)

        assert tile == Coordinate[int](x=1, y=0)
        assert two_by_one.contains(tile.x, tile.y)

    def test_near_edges_are_inside(self, geodetic_profile, world_bounds, two_by_one):
        tile = geodetic_profile.crs_to_tile_coordinate(geodetic(-180.0, 90.0), world_bounds, two_by_one, TileOrigin.UPPER_LEFT)

        assert tile == Coordinate[int](x=0, y=0)

    def test_mismatched_crs(self, geodetic_profile, world_bounds, two_by_one):
        coordinate = CrsCoordinate(x=0.0, y=0.0, crs=SPHERICAL_MERCATOR_CRS)

        with pytest.raises(InvalidArgumentError, match="does not match"):
            geodetic_profile.crs_to_tile_coordinate(coordinate, world_bounds, two_by_one, TileOrigin.UPPER_LEFT)

    def test_missing_arguments(self, geodetic_profile, world_bounds, two_by_one):
        with pytest.raises(InvalidArgumentError):
            geodetic_profile.crs_to_tile_coordinate(None, world_bounds, two_by_one, TileOrigin.UPPER_LEFT)
        with pytest.raises(InvalidArgumentError):
            geodetic_profile.crs_to_tile_coordinate(geodetic(0, 0), None, two_by_one, TileOrigin.UPPER_LEFT)
        with pytest.raises(InvalidArgumentError):
            geodetic_profile.crs_to_tile_coordinate(geodetic(0, 0), world_bounds, None, TileOrigin.UPPER_LEFT)
        with pytest.raises(InvalidArgumentError):
            geodetic_profile.crs_to_tile_coordinate(geodetic(0, 0), world_bounds, two_by_one, None)

    def test_identity_projection(self, geodetic_profile):
        coordinate = Coordinate[float](x=12.5, y=-45.25)

        assert geodetic_profile.to_global_geodetic(coordinate) == coordinate
        assert geodetic_profile.from_global_geodetic(coordinate) == coordinate

        with pytest.raises(InvalidArgumentError):
            geodetic_profile.to_global_geodetic(None)


class TestTileToCrsCoordinate:
    """Test tile corners for every origin."""

    def test_corner_per_origin(self, geodetic_profile, world_bounds):
        dimensions = TileMatrixDimensions(width=4, height=2)

        corners = {
            origin: geodetic_profile.tile_to_crs_coordinate(0, 0, world_bounds, dimensions, origin).to_coordinate()
            for origin in TileOrigin
        }

        assert corners[TileOrigin.UPPER_LEFT] == Coordinate[float](x=-180, y=90)
        assert corners[TileOrigin.LOWER_LEFT] == Coordinate[float](x=-180, y=-90)
        assert corners[TileOrigin.UPPER_RIGHT] == Coordinate[float](x=180, y=90)
        assert corners[TileOrigin.LOWER_RIGHT] == Coordinate[float](x=180, y=-90)

    def test_one_past_the_edge(self, geodetic_profile, world_bounds, two_by_one):
        """Column/row one past the matrix give the far corner of the last tile."""
        corner = geodetic_profile.tile_to_crs_coordinate(2, 1, world_bounds, two_by_one, TileOrigin.UPPER_LEFT)

        assert corner.to_coordinate() == Coordinate[float](x=180, y=-90)

    @pytest.mark.parametrize("column, row", [(-1, 0), (0, -1)])
    def test_negative_rejected(self, geodetic_profile, world_bounds, two_by_one, column, row):
        with pytest.raises(InvalidArgumentError):
            geodetic_profile.tile_to_crs_coordinate(column, row, world_bounds, two_by_one, TileOrigin.UPPER_LEFT)

    def test_tile_bounds(self, geodetic_profile, world_bounds, two_by_one):
        bounds = geodetic_profile.tile_bounds(1, 0, world_bounds, two_by_one, TileOrigin.UPPER_LEFT)

        assert bounds == BoundingBox(min_x=0, min_y=-90, max_x=180, max_y=90)

        with pytest.raises(InvalidArgumentError):
            geodetic_profile.tile_bounds(2, 0, world_bounds, two_by_one, TileOrigin.UPPER_LEFT)

    @pytest.mark.property
    @given(
        x=st.floats(min_value=-180.0, max_value=179.999, allow_nan=False),
        y=st.floats(min_value=-89.999, max_value=90.0, allow_nan=False),
        zoom=st.integers(min_value=0, max_value=12),
    )
    def test_coordinate_lies_in_its_tile(self, x, y, zoom):
        """The tile found for a coordinate has bounds that contain it."""
        profile = GlobalGeodeticCrsProfile()
        bounds = profile.bounds
        dimensions = TileMatrixDimensions(width=2 * 2**zoom, height=2**zoom)

        tile = profile.crs_to_tile_coordinate(geodetic(x, y), bounds, dimensions, TileOrigin.UPPER_LEFT)
        extent = profile.tile_bounds(tile.x, tile.y, bounds, dimensions, TileOrigin.UPPER_LEFT)

        tolerance = 1e-6
        assert extent.min_x - tolerance <= x <= extent.max_x + tolerance
        assert extent.min_y - tolerance <= y <= extent.max_y + tolerance

    @pytest.mark.property
    @given(
        column=st.integers(min_value=0, max_value=2**10 - 1),
        row=st.integers(min_value=0, max_value=2**10 - 1),
        origin=st.sampled_from(list(TileOrigin)),
    )
    def test_corner_maps_back_to_tile(self, column, row, origin):
        """The origin corner of a tile is inside that same tile."""
        bounds = BoundingBox(min_x=-180, min_y=-90, max_x=180, max_y=90)
        dimensions = TileMatrixDimensions(width=2**10, height=2**10)

        corner = proportional.tile_to_crs_coordinate(GLOBAL_GEODETIC_CRS, column, row, bounds, dimensions, origin)
        tile = proportional.crs_to_tile_coordinate(GLOBAL_GEODETIC_CRS, corner, bounds, dimensions, origin)

        assert tile == Coordinate[int](x=column, y=row)


class TestSphericalMercatorProfile:
    """Test the EPSG:3857 profile."""

    def test_metadata(self, spherical_profile):
        half_width = math.pi * EARTH_EQUATORIAL_RADIUS

        assert isinstance(spherical_profile, CrsProfile)
        assert spherical_profile.kind is ProfileKind.SPHERICAL_MERCATOR
        assert spherical_profile.coordinate_reference_system == SPHERICAL_MERCATOR_CRS
        assert spherical_profile.bounds == BoundingBox(
            min_x=-half_width, min_y=-half_width, max_x=half_width, max_y=half_width
        )
        assert spherical_profile.name == "Web Mercator"
        assert "EPSG:900913" in spherical_profile.description
        assert spherical_profile.precision == 2
        assert 'PROJCS["WGS 84 / Pseudo-Mercator"' in spherical_profile.well_known_text

    def test_origin_projects_to_origin(self, spherical_profile):
        projected = spherical_profile.from_global_geodetic(Coordinate[float](x=0.0, y=0.0))

        assert projected.x == 0.0
        assert projected.y == pytest.approx(0.0, abs=1e-9)

    def test_antimeridian(self, spherical_profile):
        projected = spherical_profile.from_global_geodetic(Coordinate[float](x=180.0, y=0.0))

        assert projected.x == pytest.approx(math.pi * EARTH_EQUATORIAL_RADIUS)

    def test_maximum_latitude_maps_to_square(self, spherical_profile):
        """The latitude where y == pi * R is about 85.0511 degrees."""
        geographic = spherical_profile.to_global_geodetic(
            Coordinate[float](x=0.0, y=math.pi * EARTH_EQUATORIAL_RADIUS)
        )

        assert geographic.y == pytest.approx(85.0511287798, abs=1e-9)

    def test_poles_rejected(self, spherical_profile):
        with pytest.raises(InvalidArgumentError):
            spherical_profile.from_global_geodetic(Coordinate[float](x=0.0, y=90.0))
        with pytest.raises(InvalidArgumentError):
            spherical_profile.from_global_geodetic(Coordinate[float](x=0.0, y=-90.0))

    @pytest.mark.property
    @given(
        lon=st.floats(min_value=-180.0, max_value=180.0, allow_nan=False),
        lat=st.floats(min_value=-85.0, max_value=85.0, allow_nan=False),
    )
    def test_projection_round_trip(self, lon, lat):
        profile = SphericalMercatorCrsProfile()

        geographic = profile.to_global_geodetic(profile.from_global_geodetic(Coordinate[float](x=lon, y=lat)))

        assert geographic.x == pytest.approx(lon, abs=1e-9)
        assert geographic.y == pytest.approx(lat, abs=1e-9)

    def test_tile_addressing(self, spherical_profile):
        """Level 1 web map tiles: the north-east quadrant is tile (1, 0)."""
        bounds = spherical_profile.bounds
        dimensions = TileMatrixDimensions(width=2, height=2)
        coordinate = CrsCoordinate(x=1000.0, y=1000.0, crs=SPHERICAL_MERCATOR_CRS)

        tile = spherical_profile.crs_to_tile_coordinate(coordinate, bounds, dimensions, TileOrigin.UPPER_LEFT)

        assert tile == Coordinate[int](x=1, y=0)

        corner = spherical_profile.tile_to_crs_coordinate(1, 0, bounds, dimensions, TileOrigin.UPPER_LEFT)

        assert corner.x == pytest.approx(0.0, abs=1e-6)
        assert corner.y == pytest.approx(bounds.max_y)

        print(f"✅ Web Mercator tile (1, 0) starts at {corner}")
