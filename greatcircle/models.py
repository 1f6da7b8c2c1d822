"""Pydantic models for geographic coordinates."""
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from greatcircle.geo import SpherePoint, check_latitude, to_sphere_point, wrap_longitude


class Coord(BaseModel):
    """
    A lat/lon coordinate in degrees, +N/+E and -S/-W.

    Latitude outside [-90, 90] is rejected; longitude outside [-180, 180] is
    wrapped. The unit-sphere point is computed once at construction. The model
    is frozen, and model_copy re-validates any update, so the two always agree.
    """

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float
    _point: SpherePoint = PrivateAttr()

    @field_validator("lat")
    @classmethod
    def check_lat(cls, v: float) -> float:
        return check_latitude(v)

    @field_validator("lon")
    @classmethod
    def check_lon(cls, v: float) -> float:
        return wrap_longitude(v)

    def model_post_init(self, __context: Any) -> None:
        self._point = to_sphere_point(self.lat, self.lon)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> "Coord":
        if not update:
            return super().model_copy(deep=deep)
        return type(self)(**{**self.model_dump(), **update})

    @property
    def point(self) -> SpherePoint:
        return self._point

    @classmethod
    def from_tuple(cls, lat_lon: tuple[float, float]) -> "Coord":
        lat, lon = lat_lon
        return cls(lat=lat, lon=lon)

    def __str__(self) -> str:
        return f"[{self.lat:.7f}, {self.lon:.7f}]"


def antipode(coord: Coord) -> Coord:
    """The point diametrically opposite coord."""
    return Coord(lat=-coord.lat, lon=wrap_longitude(coord.lon + 180.0))
