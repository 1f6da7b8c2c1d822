from greatcircle.bodies import SOLAR_SYSTEM, Body, distance_on, get_body
from greatcircle.geo import (
    EARTH_RADIUS_KM,
    EARTH_RADIUS_MI,
    EARTH_RADIUS_NM,
    SpherePoint,
    angular_separation,
    angular_separation_degrees,
    distance,
    distance_km,
    distance_mi,
    distance_nm,
    km_to_nm,
    nm_to_km,
    nm_to_mi,
    normalize,
    to_sphere_point,
)
from greatcircle.models import Coord, antipode
from greatcircle.settings import Settings, configure_logging, get_settings

__all__ = [
    "Body",
    "Coord",
    "EARTH_RADIUS_KM",
    "EARTH_RADIUS_MI",
    "EARTH_RADIUS_NM",
    "SOLAR_SYSTEM",
    "Settings",
    "SpherePoint",
    "angular_separation",
    "angular_separation_degrees",
    "antipode",
    "configure_logging",
    "distance",
    "distance_km",
    "distance_mi",
    "distance_nm",
    "distance_on",
    "get_body",
    "get_settings",
    "km_to_nm",
    "nm_to_km",
    "nm_to_mi",
    "normalize",
    "to_sphere_point",
]
