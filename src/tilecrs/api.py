"""
High-level, non-raising API for tilecrs.

The profile methods raise :mod:`tilecrs.errors` exceptions. The functions here
wrap them and report failures as a :class:`~tilecrs.types.ConversionResult`
instead, so callers can branch on the failure category without ``try`` blocks.
"""

import logging
from typing import Any, Callable, Tuple, Union

from pydantic import ValidationError

from .errors import InvalidArgumentError, NotSupportedError, NumericNonConvergenceError
from .profiles.registry import create_profile
from .tiles import TileOrigin
from .types import BBoxTuple, BoundingBox, Coordinate, CrsCoordinate, ConversionResult, ErrorKind, TileMatrixDimensions
from .typing import CrsProfile

logger = logging.getLogger(__name__)


def parse_bbox(bbox: Union[BBoxTuple, BoundingBox]) -> BoundingBox:
    """
    Parse a bounding box from various input formats.

    Args:
        bbox: Bounding box as tuple (min_x, min_y, max_x, max_y) or BoundingBox object

    Returns:
        BoundingBox object

    Raises:
        InvalidArgumentError: If the input is neither form, or min exceeds max
    """
    if isinstance(bbox, BoundingBox):
        return bbox
    elif isinstance(bbox, (tuple, list)) and len(bbox) == 4:
        try:
            return BoundingBox.from_tuple(tuple(bbox))
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid bbox values: {bbox}", cause=exc) from exc
    else:
        raise InvalidArgumentError(f"Invalid bbox format: {bbox}. Expected tuple (min_x, min_y, max_x, max_y) or BoundingBox")


def parse_dimensions(dimensions: Union[Tuple[int, int], TileMatrixDimensions]) -> TileMatrixDimensions:
    """Accept a TileMatrixDimensions or a (width, height) tuple."""
    if isinstance(dimensions, TileMatrixDimensions):
        return dimensions
    elif isinstance(dimensions, (tuple, list)) and len(dimensions) == 2:
        try:
            return TileMatrixDimensions(width=dimensions[0], height=dimensions[1])
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid tile matrix dimensions: {dimensions}", cause=exc) from exc
    else:
        raise InvalidArgumentError(f"Invalid dimensions format: {dimensions}. Expected tuple (width, height) or TileMatrixDimensions")


def _attempt(operation: Callable[[], Any], description: str) -> ConversionResult:
    details = None
    try:
        return ConversionResult.ok(operation())
    except InvalidArgumentError as exc:
        kind = ErrorKind.INVALID_ARGUMENT
        message = str(exc)
    except NotSupportedError as exc:
        kind = ErrorKind.NOT_SUPPORTED
        message = str(exc)
    except NumericNonConvergenceError as exc:
        kind = ErrorKind.NUMERIC_NON_CONVERGENCE
        message = str(exc)
        details = {"iterations": exc.iterations, "residual": exc.residual}
    except ValidationError as exc:
        kind = ErrorKind.INVALID_ARGUMENT
        message = str(exc)

    logger.warning(f"{description} failed ({kind.value}): {message}")
    return ConversionResult.failure(kind, message, details)


def _resolve(profile: Union[CrsProfile, CrsCoordinate]) -> CrsProfile:
    if isinstance(profile, CrsCoordinate):
        return create_profile(profile.crs.authority, profile.crs.identifier)
    if profile is None:
        raise InvalidArgumentError("Profile may not be null")
    if not isinstance(profile, CrsProfile):
        raise InvalidArgumentError(
            f"Expected a CRS profile or a coordinate tagged with its reference system, got {type(profile).__name__}"
        )
    return profile


def lookup_profile(authority: str, identifier: int) -> ConversionResult:
    """
    Resolve a profile without raising.

    Returns:
        ConversionResult whose value is the shared profile instance
    """
    return _attempt(lambda: create_profile(authority, identifier), f"Profile lookup for {authority}:{identifier}")


def crs_to_tile(
    coordinate: CrsCoordinate,
    bounds: Union[BBoxTuple, BoundingBox],
    dimensions: Union[Tuple[int, int], TileMatrixDimensions],
    origin: TileOrigin = TileOrigin.UPPER_LEFT,
    profile: CrsProfile = None,
) -> ConversionResult:
    """
    Locate the tile containing ``coordinate``.

    Args:
        coordinate: Coordinate to locate
        bounds: Extent of the tile matrix, as a BoundingBox or (min_x, min_y, max_x, max_y)
        dimensions: Tile matrix dimensions, or a (width, height) tuple
        origin: Tile numbering origin (default: upper left)
        profile: Profile to convert with; looked up from the coordinate's CRS when omitted

    Returns:
        ConversionResult whose value is a ``Coordinate[int]`` (column, row)
    """
    def operation():
        resolved = _resolve(profile if profile is not None else coordinate)
        return resolved.crs_to_tile_coordinate(coordinate, parse_bbox(bounds), parse_dimensions(dimensions), origin)

    return _attempt(operation, "CRS to tile conversion")


def tile_to_crs(
    profile: CrsProfile,
    column: int,
    row: int,
    bounds: Union[BBoxTuple, BoundingBox],
    dimensions: Union[Tuple[int, int], TileMatrixDimensions],
    origin: TileOrigin = TileOrigin.UPPER_LEFT,
) -> ConversionResult:
    """
    Coordinate of the origin corner of a tile.

    Returns:
        ConversionResult whose value is a ``CrsCoordinate``
    """
    return _attempt(
        lambda: _resolve(profile).tile_to_crs_coordinate(column, row, parse_bbox(bounds), parse_dimensions(dimensions), origin),
        "Tile to CRS conversion",
    )


def to_global_geodetic(coordinate: CrsCoordinate) -> ConversionResult:
    """
    Convert a tagged coordinate to WGS84 degrees using its CRS's profile.

    Returns:
        ConversionResult whose value is a ``Coordinate[float]`` (longitude, latitude)
    """
    def operation() -> Coordinate:
        if coordinate is None:
            raise InvalidArgumentError("Coordinate may not be null")
        return _resolve(coordinate).to_global_geodetic(coordinate)

    return _attempt(operation, "Conversion to global geodetic")
