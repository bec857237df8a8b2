from __future__ import annotations

import math
from dataclasses import dataclass
from typing import *

if TYPE_CHECKING:
    from ocgeo.geocode.misc import LatLng, LatLngBounds


@dataclass(frozen=True)
class DegreeCoords:
    """A coordinate expressed in degrees, minutes and seconds.

    The sign is carried on `degrees`; `minutes` and `seconds` are never negative.
    Since `degrees` is an int, a value in (-1, 0) has `degrees == 0`: `negative`
    keeps the sign for that case, and is set for every negative input."""

    degrees: int
    minutes: int
    seconds: float
    negative: bool = False

    def __str__(self) -> str:
        sign = "-" if self.negative and self.degrees == 0 else ""
        return f"{sign}{self.degrees}°{self.minutes}'{self.seconds:.2f}\""


def is_valid_latlng(coords: LatLng | None) -> bool:
    """True iff latitude is in [-90, 90] and longitude in [-180, 180], bounds included."""
    if coords is None:
        return False

    return -90.0 <= coords.lat <= 90.0 and -180.0 <= coords.lng <= 180.0


def is_valid_bounds(bounds: LatLngBounds | None) -> bool:
    if bounds is None:
        return False

    return is_valid_latlng(bounds.northeast) and is_valid_latlng(bounds.southwest)


def decimal_to_degrees(decimal: float) -> DegreeCoords:
    """Converts decimal degrees to degrees, minutes and seconds.

    Args:
        decimal (float): The coordinate, in decimal degrees.

    Examples:
        >>> decimal_to_degrees(-10.1245839)
        DegreeCoords(degrees=-10, minutes=7, seconds=28.502..., negative=True)
    """
    negative = decimal < 0
    value = abs(decimal)

    degrees = math.floor(value)
    minutes = math.floor((value - degrees) * 60)
    seconds = 3600 * (value - degrees) - 60 * minutes

    return DegreeCoords(
        degrees=-degrees if negative else degrees,
        minutes=minutes,
        seconds=seconds,
        negative=negative,
    )


def degrees_to_decimal(coords: DegreeCoords) -> float:
    """Inverse of `decimal_to_degrees`."""
    negative = coords.degrees < 0 or coords.negative
    sign = -1 if negative else 1

    return sign * (abs(coords.degrees) + coords.minutes / 60 + coords.seconds / 3600)
