"""Configuration helpers for describing a tile matrix set."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..errors import InvalidArgumentError
from ..tiles import TileOrigin, ZoomTimesTwo
from ..types import BoundingBox, CoordinateReferenceSystem, TileMatrixDimensions
from ..typing import CrsProfile
from .registry import create_profile_for


@lru_cache(maxsize=64)
def _zoom_times_two(
    minimum_zoom: int, maximum_zoom: int, base_width: int, base_height: int, origin: TileOrigin
) -> ZoomTimesTwo:
    return ZoomTimesTwo(minimum_zoom, maximum_zoom, base_width, base_height, origin)


class TileMatrixSetConfig(BaseModel):
    """Serializable description of a tile pyramid: reference system, extent, origin and zoom range."""

    authority: str = Field(default="EPSG", description="Authority of the tile set's reference system")
    identifier: int = Field(..., description="Identifier of the tile set's reference system")
    bounds: Optional[BoundingBox] = Field(
        None, description="Extent of the tile matrix set; defaults to the profile's world bounds"
    )
    origin: TileOrigin = Field(default=TileOrigin.UPPER_LEFT, description="Corner numbered as tile (0, 0)")
    minimum_zoom: int = Field(default=0, description="Lowest zoom level")
    maximum_zoom: int = Field(default=0, description="Highest zoom level")
    base_matrix_width: int = Field(default=1, description="Tile matrix width at the minimum zoom level")
    base_matrix_height: int = Field(default=1, description="Tile matrix height at the minimum zoom level")

    model_config = ConfigDict(frozen=True)

    @field_validator("origin", mode="before")
    @classmethod
    def parse_origin(cls, origin: Any) -> Any:
        """Accept member names such as "upper_left" as well as members."""
        if isinstance(origin, str):
            try:
                return TileOrigin[origin.upper()]
            except KeyError as exc:
                raise InvalidArgumentError(f"Unknown tile origin: {origin}") from exc
        if isinstance(origin, list):
            return tuple(origin)
        return origin

    @model_validator(mode="after")
    def validate_zoom_range(self):
        if self.minimum_zoom < 0 or self.maximum_zoom < 0:
            raise InvalidArgumentError("Zoom levels must be at least 0")
        if self.minimum_zoom > self.maximum_zoom:
            raise InvalidArgumentError("Minimum zoom level must be less than or equal to the maximum")
        return self

    @property
    def coordinate_reference_system(self) -> CoordinateReferenceSystem:
        return CoordinateReferenceSystem(authority=self.authority, identifier=self.identifier)

    def build_profile(self) -> CrsProfile:
        """Resolve the configured reference system to its registered profile."""

        return create_profile_for(self.coordinate_reference_system)

    def build_scheme(self) -> ZoomTimesTwo:
        """
        Zoom-times-two tile scheme for the configured zoom range.

        Configs with the same zoom range, base matrix and origin share one scheme.
        """

        return _zoom_times_two(
            self.minimum_zoom,
            self.maximum_zoom,
            self.base_matrix_width,
            self.base_matrix_height,
            self.origin,
        )

    def resolved_bounds(self) -> BoundingBox:
        return self.bounds if self.bounds is not None else self.build_profile().bounds

    def dimensions(self, zoom_level: int) -> TileMatrixDimensions:
        return self.build_scheme().dimensions(zoom_level)
