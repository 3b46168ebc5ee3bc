"""
Value types shared by the tile addressing engine.

Every model here is a frozen pydantic model: once constructed it cannot be
mutated, it hashes by value and it is safe to share between threads.
"""

from enum import Enum
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidArgumentError, NotSupportedError, NumericNonConvergenceError, TileCrsError

T = TypeVar("T")

BBoxTuple = Tuple[float, float, float, float]


class Coordinate(BaseModel, Generic[T]):
    """A two dimensional point in some unit space."""

    x: T = Field(..., description="Horizontal component")
    y: T = Field(..., description="Vertical component")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class CoordinateReferenceSystem(BaseModel):
    """
    Identity of a coordinate reference system.

    Two reference systems are equal when their authority and identifier match;
    the optional human readable name plays no part in equality or hashing.
    The authority is stored upper-cased, so ``epsg`` and ``EPSG`` name the
    same authority.
    """

    authority: str = Field(..., description="Defining authority, e.g. EPSG")
    identifier: int = Field(..., description="Identifier assigned by the authority")
    name: Optional[str] = Field(None, description="Optional descriptive name")

    model_config = ConfigDict(frozen=True)

    @field_validator("authority", mode="before")
    @classmethod
    def normalize_authority(cls, authority: Any) -> str:
        if not isinstance(authority, str) or not authority:
            raise InvalidArgumentError("Authority string may not be null or empty")
        return authority.upper()

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: Optional[str]) -> Optional[str]:
        if name is not None and not name:
            raise InvalidArgumentError("A non-null name may not be empty")
        return name

    @classmethod
    def from_string(cls, crs: str) -> "CoordinateReferenceSystem":
        """
        Create a reference system from an ``AUTHORITY:IDENTIFIER`` string.

        Args:
            crs: String such as "EPSG:4326"

        Returns:
            CoordinateReferenceSystem
        """
        authority, separator, identifier = crs.partition(":")
        if not separator or not identifier.strip().lstrip("-").isdigit():
            raise InvalidArgumentError(f"Invalid CRS format: {crs}. Expected AUTHORITY:IDENTIFIER")
        return cls(authority=authority.strip(), identifier=int(identifier))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateReferenceSystem):
            return NotImplemented
        return self.authority == other.authority and self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash((self.authority, self.identifier))

    def __lt__(self, other: "CoordinateReferenceSystem") -> bool:
        if not isinstance(other, CoordinateReferenceSystem):
            return NotImplemented
        return (self.authority, self.identifier) < (other.authority, other.identifier)

    def __str__(self) -> str:
        short_name = f"{self.authority}:{self.identifier}"
        if self.name is None:
            return short_name
        return f"{short_name} - {self.name}"


class CrsCoordinate(Coordinate[float]):
    """A coordinate tagged with the reference system it is expressed in."""

    crs: CoordinateReferenceSystem = Field(..., description="Reference system of x and y")

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate, crs: CoordinateReferenceSystem) -> "CrsCoordinate":
        return cls(x=coordinate.x, y=coordinate.y, crs=crs)

    def to_coordinate(self) -> Coordinate[float]:
        """Drop the reference system tag."""
        return Coordinate[float](x=self.x, y=self.y)


class BoundingBox(BaseModel):
    """Axis aligned rectangle. Degenerate (zero width or height) boxes are allowed."""

    min_x: float = Field(..., description="Minimum X coordinate")
    min_y: float = Field(..., description="Minimum Y coordinate")
    max_x: float = Field(..., description="Maximum X coordinate")
    max_y: float = Field(..., description="Maximum Y coordinate")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_coordinates(self):
        """Validate that min coordinates do not exceed max coordinates."""
        if self.min_x > self.max_x:
            raise InvalidArgumentError("min_x may not be greater than max_x")
        if self.min_y > self.max_y:
            raise InvalidArgumentError("min_y may not be greater than max_y")
        return self

    @classmethod
    def from_tuple(cls, bbox: BBoxTuple) -> "BoundingBox":
        """Create BoundingBox from a (min_x, min_y, max_x, max_y) tuple."""
        return cls(min_x=bbox[0], min_y=bbox[1], max_x=bbox[2], max_y=bbox[3])

    def to_tuple(self) -> BBoxTuple:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Coordinate[float]:
        return Coordinate[float](x=(self.max_x + self.min_x) / 2.0, y=(self.max_y + self.min_y) / 2.0)

    @property
    def min(self) -> Coordinate[float]:
        return Coordinate[float](x=self.min_x, y=self.min_y)

    @property
    def max(self) -> Coordinate[float]:
        return Coordinate[float](x=self.max_x, y=self.max_y)

    @property
    def top_left(self) -> Coordinate[float]:
        return Coordinate[float](x=self.min_x, y=self.max_y)

    @property
    def top_right(self) -> Coordinate[float]:
        return self.max

    @property
    def bottom_left(self) -> Coordinate[float]:
        return self.min

    @property
    def bottom_right(self) -> Coordinate[float]:
        return Coordinate[float](x=self.max_x, y=self.min_y)

    def contains(self, point: Coordinate) -> bool:
        """Closed containment test: points on any edge are inside."""
        return self.min_y <= point.y <= self.max_y and self.min_x <= point.x <= self.max_x

    def intersects(self, other: "BoundingBox") -> bool:
        """Check if this bounding box intersects with another."""
        return self.min_x < other.max_x and self.max_x > other.min_x and self.min_y < other.max_y and self.max_y > other.min_y


class TileMatrixDimensions(BaseModel):
    """Number of tiles across and down a tile matrix at one zoom level."""

    width: int = Field(..., description="Tile count along the x axis")
    height: int = Field(..., description="Tile count along the y axis")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_dimensions(self):
        if self.width < 1:
            raise InvalidArgumentError("Tile matrix width must be greater than 0")
        if self.height < 1:
            raise InvalidArgumentError("Tile matrix height must be greater than 0")
        return self

    def contains(self, column: int, row: int) -> bool:
        """True when (column, row) addresses a tile inside this matrix."""
        return 0 <= column < self.width and 0 <= row < self.height


class ProfileKind(str, Enum):
    """The closed set of supported projection profiles."""
    GLOBAL_GEODETIC = "GlobalGeodetic"
    SPHERICAL_MERCATOR = "SphericalMercator"
    ELLIPSOIDAL_MERCATOR = "EllipsoidalMercator"


class ErrorKind(str, Enum):
    """Failure categories reported by :class:`ConversionResult`."""
    INVALID_ARGUMENT = "InvalidArgument"
    NOT_SUPPORTED = "NotSupported"
    NUMERIC_NON_CONVERGENCE = "NumericNonConvergence"


class ConversionResult(BaseModel):
    """Outcome of a conversion: either a value or a categorised failure."""

    success: bool = Field(..., description="True if the conversion succeeded")
    value: Optional[Any] = Field(None, description="Converted value when successful")
    error_kind: Optional[ErrorKind] = Field(None, description="Failure category when unsuccessful")
    error_message: Optional[str] = Field(None, description="Error message if the conversion failed")
    error_details: Optional[Dict[str, Any]] = Field(
        None, description="Structured failure detail, e.g. iteration count and residual of a non-converged projection"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_outcome(self):
        if self.success and self.error_kind is not None:
            raise ValueError("A successful result may not carry an error kind")
        if not self.success and self.error_kind is None:
            raise ValueError("A failed result must carry an error kind")
        return self

    @classmethod
    def ok(cls, value: Any) -> "ConversionResult":
        return cls(success=True, value=value)

    @classmethod
    def failure(
        cls, error_kind: ErrorKind, error_message: str, error_details: Optional[Dict[str, Any]] = None
    ) -> "ConversionResult":
        return cls(success=False, error_kind=error_kind, error_message=error_message, error_details=error_details)

    def raise_for_error(self) -> None:
        """Re-raise the failure as the matching exception; no-op on success."""
        if self.success:
            return
        error_type = _ERROR_TYPES.get(self.error_kind, TileCrsError)
        if error_type is NumericNonConvergenceError:
            details = self.error_details or {}
            raise NumericNonConvergenceError(
                self.error_message or "", iterations=details.get("iterations"), residual=details.get("residual")
            )
        raise error_type(self.error_message or "")

    def unwrap(self) -> Any:
        """Return the value, raising the matching exception on failure."""
        self.raise_for_error()
        return self.value


_ERROR_TYPES = {
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorKind.NOT_SUPPORTED: NotSupportedError,
    ErrorKind.NUMERIC_NON_CONVERGENCE: NumericNonConvergenceError,
}
