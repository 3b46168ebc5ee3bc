"""
Linear tile addressing shared by the profiles whose tile grid is a plain
subdivision of their bounds.

These are free functions rather than methods: each profile passes in its own
reference system and delegates.
"""

from __future__ import annotations

from ..core import bounds_corner, contains, quantized_floor, tile_size
from ..errors import InvalidArgumentError
from ..tiles import TileOrigin
from ..types import BoundingBox, Coordinate, CoordinateReferenceSystem, CrsCoordinate, TileMatrixDimensions

__all__ = [
    "crs_to_tile_coordinate",
    "tile_to_crs_coordinate",
    "tile_bounds",
]


def crs_to_tile_coordinate(
    profile_crs: CoordinateReferenceSystem,
    coordinate: CrsCoordinate,
    bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin,
) -> Coordinate[int]:
    """
    Find the tile that contains ``coordinate``.

    Args:
        profile_crs: Reference system of the calling profile
        coordinate: Coordinate to locate; must be expressed in ``profile_crs``
        bounds: Extent covered by the tile matrix
        dimensions: Tile matrix width and height
        origin: Corner numbered as tile (0, 0)

    Returns:
        Tile address with x as the column and y as the row

    Raises:
        InvalidArgumentError: If an argument is missing, the reference systems
            differ, or the coordinate is outside ``bounds``
    """
    if coordinate is None:
        raise InvalidArgumentError("Coordinate may not be null")
    if bounds is None:
        raise InvalidArgumentError("Bounds may not be null")
    if dimensions is None:
        raise InvalidArgumentError("Tile matrix dimensions may not be null")
    if origin is None:
        raise InvalidArgumentError("Origin may not be null")

    if getattr(coordinate, "crs", None) != profile_crs:
        raise InvalidArgumentError(
            "Coordinate's coordinate reference system does not match the tile profile's coordinate reference system"
        )

    if not contains(bounds, coordinate, origin):
        raise InvalidArgumentError(f"Coordinate {coordinate} is outside the bounds {bounds.to_tuple()}")

    corner = bounds_corner(bounds, origin)
    tile_width, tile_height = tile_size(bounds, dimensions)

    normalized_x = abs(coordinate.x - corner.x)
    normalized_y = abs(coordinate.y - corner.y)

    # Snapping can land a point just inside the far edge on the edge itself.
    return Coordinate[int](
        x=min(quantized_floor(normalized_x / tile_width), dimensions.width - 1),
        y=min(quantized_floor(normalized_y / tile_height), dimensions.height - 1),
    )


def tile_to_crs_coordinate(
    profile_crs: CoordinateReferenceSystem,
    column: int,
    row: int,
    bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin,
) -> CrsCoordinate:
    """
    Coordinate of the corner of tile (column, row) nearest ``origin``'s corner.

    ``column`` and ``row`` may be one past the last tile so that a caller can
    find the far corner of the last tile in a row or column.

    Raises:
        InvalidArgumentError: If an argument is missing or column/row is negative
    """
    if bounds is None:
        raise InvalidArgumentError("Bounds may not be null")
    if dimensions is None:
        raise InvalidArgumentError("Tile matrix dimensions may not be null")
    if origin is None:
        raise InvalidArgumentError("Origin may not be null")
    if column is None or column < 0:
        raise InvalidArgumentError("Column must be 0 or greater")
    if row is None or row < 0:
        raise InvalidArgumentError("Row must be 0 or greater")

    tile_width, tile_height = tile_size(bounds, dimensions)
    tile_coordinate = origin.transform(TileOrigin.LOWER_LEFT, Coordinate[int](x=column, y=row), dimensions)
    bottom_left = bounds.bottom_left

    return CrsCoordinate(
        x=bottom_left.x + (tile_coordinate.x + origin.horizontal) * tile_width,
        y=bottom_left.y + (tile_coordinate.y + origin.vertical) * tile_height,
        crs=profile_crs,
    )


def tile_bounds(
    column: int,
    row: int,
    bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin,
) -> BoundingBox:
    """
    Full extent of tile (column, row).

    Raises:
        InvalidArgumentError: If an argument is missing or the tile is not in the matrix
    """
    if bounds is None:
        raise InvalidArgumentError("Bounds may not be null")
    if dimensions is None:
        raise InvalidArgumentError("Tile matrix dimensions may not be null")
    if origin is None:
        raise InvalidArgumentError("Origin may not be null")
    if not dimensions.contains(column, row):
        raise InvalidArgumentError(
            f"Tile ({column}, {row}) is not within the {dimensions.width}x{dimensions.height} tile matrix"
        )

    tile_width, tile_height = tile_size(bounds, dimensions)
    lower_left = origin.transform(TileOrigin.LOWER_LEFT, Coordinate[int](x=column, y=row), dimensions)

    min_x = bounds.min_x + lower_left.x * tile_width
    min_y = bounds.min_y + lower_left.y * tile_height

    return BoundingBox(
        min_x=min_x,
        min_y=min_y,
        max_x=min_x + tile_width,
        max_y=min_y + tile_height,
    )
