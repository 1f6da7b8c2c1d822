"""
Mean radii of solar-system bodies, for great-circle distances off Earth.
"""
from typing import TYPE_CHECKING, NamedTuple

from greatcircle.geo import SpherePoint, distance, km_to_nm, nm_to_mi

if TYPE_CHECKING:
    from greatcircle.models import Coord


class Body(NamedTuple):
    name: str
    radius_km: float

    @property
    def radius_nm(self) -> float:
        return km_to_nm(self.radius_km)

    @property
    def radius_mi(self) -> float:
        return nm_to_mi(self.radius_nm)


SOLAR_SYSTEM: tuple[Body, ...] = (
    Body("the Sun", 695700),
    Body("the Moon", 1737),
    Body("Mercury", 2440),
    Body("Venus", 6051),
    Body("Earth", 6371),
    Body("Mars", 3390),
    Body("Jupiter", 69910),
    Body("Saturn", 58230),
    Body("Uranus", 25360),
    Body("Neptune", 24620),
    Body("the unit sphere", 1),
)

UNITS = ("km", "mi", "nm")


def _key(name: str) -> str:
    key = name.strip().lower()
    if key.startswith("the "):
        key = key[4:]
    return key


_BY_NAME = {_key(b.name): b for b in SOLAR_SYSTEM}


def get_body(name: str) -> Body:
    """Look up a body by name, e.g. "Moon", "the moon" or "SATURN". Raises KeyError if unknown."""
    try:
        return _BY_NAME[_key(name)]
    except KeyError:
        raise KeyError(f"unknown body: {name!r}") from None


def distance_on(
    body: Body,
    a: "Coord | SpherePoint",
    b: "Coord | SpherePoint",
    unit: str = "km",
) -> float:
    """Great-circle distance between a and b on the surface of body, in km, mi or nm."""
    if unit == "km":
        radius = body.radius_km
    elif unit == "mi":
        radius = body.radius_mi
    elif unit == "nm":
        radius = body.radius_nm
    else:
        raise ValueError(f"unit must be one of {', '.join(UNITS)}")
    return distance(a, b, radius)
