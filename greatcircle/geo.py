"""
Great-circle math on a perfect sphere.

Coordinates are converted to unit vectors and the central angle between two of
them is taken as atan2(|a x b|, a . b), which keeps full precision for
near-identical and near-antipodal points where acos(a . b) does not.
"""
import logging
import math
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from greatcircle.models import Coord

logger = logging.getLogger(__name__)

# Mean Earth radius in each output unit. 1 NM = 1852 m exactly.
EARTH_RADIUS_MI = 3958.8
EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_NM = 3440.1

LAT_MIN, LAT_MAX = -90.0, 90.0
LON_MIN, LON_MAX = -180.0, 180.0


class SpherePoint(NamedTuple):
    x: float
    y: float
    z: float


def check_latitude(lat: float) -> float:
    """Return lat unchanged, or raise ValueError if it is not a finite value in [-90, 90]."""
    if not math.isfinite(lat):
        raise ValueError(f"lat must be a finite number, got {lat}")
    if not (LAT_MIN <= lat <= LAT_MAX):
        raise ValueError(f"lat must be between {LAT_MIN} and {LAT_MAX}")
    return lat


def wrap_longitude(lon: float) -> float:
    """
    Return lon in degrees, wrapped into [-180, 180) when it lies outside [-180, 180].
    Values already in range (including 180) are returned as given.
    """
    if not math.isfinite(lon):
        raise ValueError(f"lon must be a finite number, got {lon}")
    if LON_MIN <= lon <= LON_MAX:
        return lon
    wrapped = (lon + 180.0) % 360.0 - 180.0
    logger.debug("wrapped longitude %s -> %s", lon, wrapped)
    return wrapped


def to_sphere_point(lat: float, lon: float) -> SpherePoint:
    """
    Convert latitude/longitude in degrees to a point on the unit sphere.
    Both poles map to (0, 0, +/-1) whatever the longitude.
    """
    lat = check_latitude(lat)
    lon = wrap_longitude(lon)
    if lat == LAT_MAX:
        return SpherePoint(0.0, 0.0, 1.0)
    if lat == LAT_MIN:
        return SpherePoint(0.0, 0.0, -1.0)
    phi = math.radians(lat)
    lam = math.radians(lon)
    cos_phi = math.cos(phi)
    return SpherePoint(cos_phi * math.cos(lam), cos_phi * math.sin(lam), math.sin(phi))


def normalize(coord: "Coord") -> SpherePoint:
    """Return the unit-sphere point of a Coord."""
    return _as_point(coord)


def _as_point(value: "Coord | SpherePoint") -> SpherePoint:
    if isinstance(value, SpherePoint):
        return value
    point = getattr(value, "point", None)
    if isinstance(point, SpherePoint):
        return point
    raise TypeError(f"expected a Coord or SpherePoint, got {type(value).__name__}")


def angular_separation(a: "Coord | SpherePoint", b: "Coord | SpherePoint") -> float:
    """Central angle between two Coords or SpherePoints, in radians within [0, pi]."""
    p = _as_point(a)
    q = _as_point(b)
    cx = p.y * q.z - p.z * q.y
    cy = p.z * q.x - p.x * q.z
    cz = p.x * q.y - p.y * q.x
    dot = p.x * q.x + p.y * q.y + p.z * q.z
    return math.atan2(math.hypot(cx, cy, cz), dot)


def angular_separation_degrees(a: "Coord | SpherePoint", b: "Coord | SpherePoint") -> float:
    return math.degrees(angular_separation(a, b))


def distance(a: "Coord | SpherePoint", b: "Coord | SpherePoint", radius: float) -> float:
    """
    Great-circle arc length between a and b on a sphere of the given radius.
    The result is in whatever unit the radius is expressed in.
    """
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError(f"radius must be a positive finite number, got {radius}")
    return angular_separation(a, b) * radius


def distance_mi(a: "Coord | SpherePoint", b: "Coord | SpherePoint") -> float:
    """Distance over the Earth's surface in statute miles."""
    return distance(a, b, EARTH_RADIUS_MI)


def distance_km(a: "Coord | SpherePoint", b: "Coord | SpherePoint") -> float:
    """Distance over the Earth's surface in kilometers."""
    return distance(a, b, EARTH_RADIUS_KM)


def distance_nm(a: "Coord | SpherePoint", b: "Coord | SpherePoint") -> float:
    """Distance over the Earth's surface in nautical miles."""
    return distance(a, b, EARTH_RADIUS_NM)


def nm_to_mi(nm: float) -> float:
    return nm * EARTH_RADIUS_MI / EARTH_RADIUS_NM


def nm_to_km(nm: float) -> float:
    return nm * EARTH_RADIUS_KM / EARTH_RADIUS_NM


def km_to_nm(km: float) -> float:
    return km * EARTH_RADIUS_NM / EARTH_RADIUS_KM
