"""
Tile matrix addressing: origin conventions and zoom level tile schemes.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict

from .errors import InvalidArgumentError
from .types import BoundingBox, Coordinate, TileMatrixDimensions

logger = logging.getLogger(__name__)

_MAX_TILE_INDEX = 2**31 - 1


class TileOrigin(Enum):
    """
    Which corner of a tile matrix holds tile (0, 0).

    ``horizontal`` is 0 when column 0 is the left edge and 1 when it is the
    right edge; ``vertical`` is 0 when row 0 is the bottom edge and 1 when it
    is the top edge.
    """

    LOWER_LEFT = (0, 0)
    LOWER_RIGHT = (1, 0)
    UPPER_LEFT = (0, 1)
    UPPER_RIGHT = (1, 1)

    def __init__(self, horizontal: int, vertical: int):
        self.horizontal = horizontal
        self.vertical = vertical

    def transform(
        self,
        target: "TileOrigin",
        tile_coordinate: Coordinate,
        dimensions: TileMatrixDimensions,
    ) -> Coordinate[int]:
        """
        Re-express a tile address numbered from this origin in ``target``'s numbering.

        Args:
            target: Origin the address is converted to
            tile_coordinate: Tile address with x as the column and y as the row
            dimensions: Size of the tile matrix the address belongs to

        Returns:
            The same tile's address under ``target``

        Raises:
            InvalidArgumentError: If any argument is missing
        """
        if target is None:
            raise InvalidArgumentError("Requested tile origin may not be null")
        if tile_coordinate is None:
            raise InvalidArgumentError("Tile coordinate may not be null")
        if dimensions is None:
            raise InvalidArgumentError("Tile matrix dimensions may not be null")

        return Coordinate[int](
            x=self.transform_horizontal(target, int(tile_coordinate.x), dimensions.width),
            y=self.transform_vertical(target, int(tile_coordinate.y), dimensions.height),
        )

    def transform_horizontal(self, target: "TileOrigin", column: int, matrix_width: int) -> int:
        return _flip(self.horizontal, target.horizontal, column, matrix_width)

    def transform_vertical(self, target: "TileOrigin", row: int, matrix_height: int) -> int:
        return _flip(self.vertical, target.vertical, row, matrix_height)

    def corner_of(self, bounds: BoundingBox) -> Coordinate[float]:
        """The corner of ``bounds`` that this origin numbers from."""
        if bounds is None:
            raise InvalidArgumentError("Bounding box may not be null")
        return Coordinate[float](
            x=bounds.max_x if self.horizontal else bounds.min_x,
            y=bounds.max_y if self.vertical else bounds.min_y,
        )


def _flip(from_direction: int, to_direction: int, index: int, extent: int) -> int:
    if from_direction == to_direction:
        return index
    return extent - 1 - index


class TileScheme(ABC):
    """Maps zoom levels to tile matrix dimensions."""

    def __init__(self, minimum_zoom: int, maximum_zoom: int, origin: TileOrigin = TileOrigin.UPPER_LEFT) -> None:
        if minimum_zoom < 0:
            raise InvalidArgumentError("Minimum zoom level must be at least 0")
        if maximum_zoom < 0:
            raise InvalidArgumentError("Maximum zoom level must be at least 0")
        if minimum_zoom > maximum_zoom:
            raise InvalidArgumentError("Minimum zoom level must be less than or equal to the maximum")
        if origin is None:
            raise InvalidArgumentError("Tile origin may not be null")

        self.minimum_zoom = minimum_zoom
        self.maximum_zoom = maximum_zoom
        self.origin = origin

    @abstractmethod
    def dimensions(self, zoom_level: int) -> TileMatrixDimensions:
        """Tile matrix dimensions at ``zoom_level``."""

    def zoom_levels(self) -> range:
        return range(self.minimum_zoom, self.maximum_zoom + 1)

    def _check_zoom(self, zoom_level: int) -> None:
        if zoom_level < self.minimum_zoom or zoom_level > self.maximum_zoom:
            raise InvalidArgumentError(
                f"Zoom level must be in the range [{self.minimum_zoom}, {self.maximum_zoom}]"
            )


class ZoomTimesTwo(TileScheme):
    """Tile scheme whose matrix doubles in width and height at every zoom level."""

    def __init__(
        self,
        minimum_zoom: int,
        maximum_zoom: int,
        base_width: int,
        base_height: int,
        origin: TileOrigin = TileOrigin.UPPER_LEFT,
    ) -> None:
        super().__init__(minimum_zoom, maximum_zoom, origin)

        if base_width < 1:
            raise InvalidArgumentError("The initial width must be greater than 0")
        if base_height < 1:
            raise InvalidArgumentError("The initial height must be greater than 0")

        levels = maximum_zoom - minimum_zoom
        if base_width * 2**levels - 1 > _MAX_TILE_INDEX:
            raise InvalidArgumentError(
                "This combination of initial width and maximum zoom level will cause an integer overflow for tile numbering"
            )
        if base_height * 2**levels - 1 > _MAX_TILE_INDEX:
            raise InvalidArgumentError(
                "This combination of initial height and maximum zoom level will cause an integer overflow for tile numbering"
            )

        self.base_width = base_width
        self.base_height = base_height
        self._dimensions: Dict[int, TileMatrixDimensions] = {
            zoom: TileMatrixDimensions(
                width=base_width * 2 ** (zoom - minimum_zoom),
                height=base_height * 2 ** (zoom - minimum_zoom),
            )
            for zoom in self.zoom_levels()
        }
        logger.debug(f"Built zoom-times-two scheme for zoom levels {minimum_zoom}-{maximum_zoom} from {base_width}x{base_height}")

    def dimensions(self, zoom_level: int) -> TileMatrixDimensions:
        self._check_zoom(zoom_level)
        return self._dimensions[zoom_level]
