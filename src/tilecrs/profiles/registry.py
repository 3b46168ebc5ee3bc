"""Registry resolving coordinate reference systems to shared profile instances."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional

from ..errors import InvalidArgumentError, NotSupportedError
from ..types import CoordinateReferenceSystem
from ..typing import CrsProfile
from .ellipsoidal import WORLD_MERCATOR_CRS, EllipsoidalMercatorCrsProfile
from .geodetic import GLOBAL_GEODETIC_CRS, GlobalGeodeticCrsProfile
from .spherical import SPHERICAL_MERCATOR_CRS, SphericalMercatorCrsProfile

__all__ = [
    "profile_registry",
    "create_profile",
    "create_profile_for",
    "get_supported_coordinate_reference_systems",
]

logger = logging.getLogger(__name__)

# Identifiers that predate EPSG:3857 but name the same projection.
SPHERICAL_MERCATOR_ALIASES = (
    CoordinateReferenceSystem(authority="EPSG", identifier=3785),
    CoordinateReferenceSystem(authority="EPSG", identifier=900913),
)

_PROFILE_REGISTRY: Optional[Mapping[CoordinateReferenceSystem, CrsProfile]] = None
_REGISTRY_LOCK = threading.Lock()


def _build_registry() -> Mapping[CoordinateReferenceSystem, CrsProfile]:
    geodetic = GlobalGeodeticCrsProfile()
    spherical = SphericalMercatorCrsProfile()
    ellipsoidal = EllipsoidalMercatorCrsProfile()

    entries: Dict[CoordinateReferenceSystem, CrsProfile] = {
        GLOBAL_GEODETIC_CRS: geodetic,
        SPHERICAL_MERCATOR_CRS: spherical,
        WORLD_MERCATOR_CRS: ellipsoidal,
    }
    for alias in SPHERICAL_MERCATOR_ALIASES:
        entries[alias] = spherical

    logger.debug(f"Built CRS profile registry with {len(entries)} entries: {sorted(entries)}")
    return MappingProxyType(entries)


def profile_registry() -> Mapping[CoordinateReferenceSystem, CrsProfile]:
    """The process-wide, read-only registry. Built on first access."""

    global _PROFILE_REGISTRY
    if _PROFILE_REGISTRY is None:
        with _REGISTRY_LOCK:
            if _PROFILE_REGISTRY is None:
                _PROFILE_REGISTRY = _build_registry()
    return _PROFILE_REGISTRY


def create_profile(authority: str, identifier: int) -> CrsProfile:
    """
    Look up the profile for an (authority, identifier) pair.

    Args:
        authority: Defining authority, e.g. "EPSG" (case insensitive)
        identifier: Identifier assigned by the authority

    Returns:
        The shared profile instance; aliases resolve to the same object

    Raises:
        InvalidArgumentError: If the authority is missing or empty
        NotSupportedError: If no profile is registered for the pair
    """
    if identifier is None:
        raise InvalidArgumentError("Identifier may not be null")

    return create_profile_for(CoordinateReferenceSystem(authority=authority, identifier=identifier))


def create_profile_for(crs: CoordinateReferenceSystem) -> CrsProfile:
    """Look up the profile registered for ``crs``."""

    if crs is None:
        raise InvalidArgumentError("Coordinate reference system may not be null")

    try:
        return profile_registry()[crs]
    except KeyError as exc:
        raise NotSupportedError(f"Coordinate reference system {crs} is not supported", cause=exc) from exc


def get_supported_coordinate_reference_systems() -> FrozenSet[CoordinateReferenceSystem]:
    """Every reference system, aliases included, that has a registered profile."""

    return frozenset(profile_registry())
