"""Type aliases and protocols for tilecrs."""

from typing import TYPE_CHECKING, Protocol, Tuple, TypeAlias, runtime_checkable

# Type aliases for better user experience
TileAddress: TypeAlias = Tuple[int, int]  # (column, row)
CoordinateTuple: TypeAlias = Tuple[float, float]  # (x, y)


@runtime_checkable
class CrsProfile(Protocol):
    """Capability shared by every projection profile."""

    @property
    def kind(self) -> "ProfileKind":
        ...

    @property
    def bounds(self) -> "BoundingBox":
        """World extent of the profile in its native units."""
        ...

    @property
    def coordinate_reference_system(self) -> "CoordinateReferenceSystem":
        ...

    @property
    def name(self) -> str:
        ...

    @property
    def well_known_text(self) -> str:
        ...

    @property
    def description(self) -> str:
        ...

    @property
    def precision(self) -> int:
        """Decimal places that are significant when comparing coordinates."""
        ...

    def crs_to_tile_coordinate(
        self,
        coordinate: "CrsCoordinate",
        bounds: "BoundingBox",
        dimensions: "TileMatrixDimensions",
        origin: "TileOrigin",
    ) -> "Coordinate[int]":
        """Tile address containing ``coordinate``."""
        ...

    def tile_to_crs_coordinate(
        self,
        column: int,
        row: int,
        bounds: "BoundingBox",
        dimensions: "TileMatrixDimensions",
        origin: "TileOrigin",
    ) -> "CrsCoordinate":
        """Coordinate of the origin corner of tile (column, row)."""
        ...

    def tile_bounds(
        self,
        column: int,
        row: int,
        bounds: "BoundingBox",
        dimensions: "TileMatrixDimensions",
        origin: "TileOrigin",
    ) -> "BoundingBox":
        """Extent of tile (column, row)."""
        ...

    def to_global_geodetic(self, coordinate: "Coordinate") -> "Coordinate[float]":
        """Native coordinate to WGS84 longitude/latitude degrees."""
        ...

    def from_global_geodetic(self, coordinate: "Coordinate") -> "Coordinate[float]":
        """WGS84 longitude/latitude degrees to a native coordinate."""
        ...


# Import types that are used in protocols
if TYPE_CHECKING:
    from .tiles import TileOrigin
    from .types import BoundingBox, Coordinate, CoordinateReferenceSystem, CrsCoordinate, ProfileKind, TileMatrixDimensions
