from __future__ import annotations

import typing
from typing import *

if TYPE_CHECKING:

    @typing.type_check_only
    class StatusJSON(TypedDict):
        code: int
        message: str

    @typing.type_check_only
    class RateJSON(TypedDict):
        limit: int
        remaining: int
        reset: int

    @typing.type_check_only
    class LatLngJSON(TypedDict):
        lat: float
        lng: float

    @typing.type_check_only
    class BoundsJSON(TypedDict):
        northeast: LatLngJSON
        southwest: LatLngJSON

    @typing.type_check_only
    class TimezoneJSON(TypedDict, total=False):
        name: str
        now_in_dst: int
        offset_sec: int
        offset_string: str
        short_name: str

    @typing.type_check_only
    class RoadInfoJSON(TypedDict, total=False):
        drive_on: str
        road: str
        road_type: str
        speed_in: str

    @typing.type_check_only
    class CurrencyJSON(TypedDict, total=False):
        alternate_symbols: list[str]
        decimal_mark: str
        html_entity: str
        iso_code: str
        iso_numeric: str
        name: str
        smallest_denomination: int
        subunit: str
        subunit_to_unit: int
        symbol: str
        symbol_first: int
        thousands_separator: str

    @typing.type_check_only
    class What3WordsJSON(TypedDict):
        words: str

    @typing.type_check_only
    class AnnotationsJSON(TypedDict, total=False):
        callingcode: int
        currency: CurrencyJSON
        geohash: str
        roadinfo: RoadInfoJSON
        timezone: TimezoneJSON
        what3words: What3WordsJSON

    @typing.type_check_only
    class ResultJSON(TypedDict, total=False):
        annotations: AnnotationsJSON
        bounds: BoundsJSON
        components: dict[str, Any]
        confidence: int
        formatted: str
        geometry: LatLngJSON

    @typing.type_check_only
    class ResponseJSON(TypedDict, total=False):
        rate: RateJSON
        results: list[ResultJSON]
        status: StatusJSON
        total_results: int
