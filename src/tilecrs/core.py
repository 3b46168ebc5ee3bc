"""
Bounds and containment helpers shared by every profile.
"""

import math
from typing import Tuple

from .errors import InvalidArgumentError
from .tiles import TileOrigin
from .types import BoundingBox, Coordinate, TileMatrixDimensions

# Tile index ratios are snapped to this many parts per unit before flooring.
QUANTIZATION_SCALE = 1e9


def contains(bounds: BoundingBox, coordinate: Coordinate, origin: TileOrigin) -> bool:
    """
    Origin-aware containment test.

    A coordinate on an edge that touches the origin's corner is inside; a
    coordinate on either edge opposite that corner is outside. Tiles are
    therefore half-open intervals and a point on a shared tile boundary
    belongs to exactly one tile.

    Args:
        bounds: Bounding box of the tile matrix
        coordinate: Coordinate being tested
        origin: Origin the tiles are numbered from

    Returns:
        True if the coordinate falls within the bounds under the origin's edge rule

    Raises:
        InvalidArgumentError: If any argument is missing
    """
    if bounds is None:
        raise InvalidArgumentError("Bounding box may not be null")
    if coordinate is None:
        raise InvalidArgumentError("Coordinate may not be null")
    if origin is None:
        raise InvalidArgumentError("Origin may not be null")

    far_x = bounds.min_x if origin.horizontal else bounds.max_x
    far_y = bounds.min_y if origin.vertical else bounds.max_y

    on_far_edge = coordinate.x == far_x or coordinate.y == far_y

    return not on_far_edge and bounds.contains(coordinate)


def bounds_corner(bounds: BoundingBox, origin: TileOrigin) -> Coordinate[float]:
    """Corner of ``bounds`` numbered as tile (0, 0) under ``origin``."""
    if origin is None:
        raise InvalidArgumentError("Origin may not be null")
    return origin.corner_of(bounds)


def tile_size(bounds: BoundingBox, dimensions: TileMatrixDimensions) -> Tuple[float, float]:
    """Width and height of a single tile, in the units of ``bounds``."""
    return bounds.width / dimensions.width, bounds.height / dimensions.height


def quantized_floor(ratio: float) -> int:
    """
    Floor ``ratio`` after snapping it to the nearest billionth.

    A coordinate that lies exactly on a tile boundary can produce a ratio such
    as 2.9999999999999996 after floating point subtraction and division; the
    snap brings it back to 3.0 so the coordinate lands in the tile it belongs to.
    """
    return math.floor(round(ratio * QUANTIZATION_SCALE) / QUANTIZATION_SCALE)


def round_coordinate(coordinate: Coordinate, precision: int) -> Coordinate[float]:
    """Round both components to ``precision`` decimal places."""
    return Coordinate[float](x=round(coordinate.x, precision), y=round(coordinate.y, precision))


def coordinates_equal(first: Coordinate, second: Coordinate, precision: int) -> bool:
    """Compare two coordinates to ``precision`` decimal places."""
    tolerance = 10.0 ** -precision
    return abs(first.x - second.x) < tolerance and abs(first.y - second.y) < tolerance
