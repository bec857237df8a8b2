from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import *

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ocgeo.utils import json_path
from ocgeo.utils.coords import is_valid_bounds, is_valid_latlng
from ocgeo.utils.http import raise_for_status
from ocgeo.utils.misc import StatusCode

COUNTRYCODE_RE = re.compile(r"[a-z]{2}(,[a-z]{2})*")


@dataclass(frozen=True)
class LatLng:
    """A WGS 84 point, in decimal degrees."""

    lat: float
    lng: float

    def is_valid(self) -> bool:
        return is_valid_latlng(self)


# Out-of-range point standing in for "no coordinates" where a value is required.
INVALID_LATLNG = LatLng(lat=-91.0, lng=-181.0)


@dataclass(frozen=True)
class LatLngBounds:
    """A bounding box, given by its north-east and south-west corners."""

    northeast: LatLng
    southwest: LatLng

    def is_valid(self) -> bool:
        return is_valid_bounds(self)


INVALID_BOUNDS = LatLngBounds(northeast=INVALID_LATLNG, southwest=INVALID_LATLNG)


@dataclass(frozen=True)
class Status:
    code: int
    message: str = ""


@dataclass(frozen=True)
class RateInfo:
    """Quota information; only sent for metered (e.g. free trial) accounts."""

    limit: int = 0
    remaining: int = 0
    # UNIX timestamp at which the quota resets.
    reset: int = 0


@dataclass(frozen=True)
class Timezone:
    name: str = ""
    short_name: str = ""
    offset_string: str = ""
    offset_sec: int = 0
    now_in_dst: bool = False


@dataclass(frozen=True)
class RoadInfo:
    # "left" or "right".
    drive_on: str = ""
    road: str = ""
    road_type: str = ""
    # "km/h" or "mph".
    speed_in: str = ""


@dataclass(frozen=True)
class Currency:
    iso_code: str = ""
    name: str = ""
    symbol: str = ""
    subunit: str = ""
    decimal_mark: str = ""
    thousands_separator: str = ""
    html_entity: str = ""
    iso_numeric: str = ""
    subunit_to_unit: int = 0
    smallest_denomination: int = 0
    symbol_first: bool = False
    alternate_symbols: tuple[str, ...] = ()


# Maps each Components attribute to its key in the response's "components" object.
COMPONENT_KEYS: dict[str, str] = {
    "iso_alpha2": "ISO_3166-1_alpha-2",
    "iso_alpha3": "ISO_3166-1_alpha-3",
    "type": "_type",
    "category": "_category",
    "city": "city",
    "city_district": "city_district",
    "continent": "continent",
    "country": "country",
    "country_code": "country_code",
    "county": "county",
    "hamlet": "hamlet",
    "house_number": "house_number",
    "municipality": "municipality",
    "neighbourhood": "neighbourhood",
    "political_union": "political_union",
    "postcode": "postcode",
    "road": "road",
    "state": "state",
    "state_code": "state_code",
    "state_district": "state_district",
    "suburb": "suburb",
    "town": "town",
    "village": "village",
}


@dataclass(frozen=True)
class Components:
    """The structured address of a result. Fields the service did not send are empty strings."""

    iso_alpha2: str = ""
    iso_alpha3: str = ""
    type: str = ""
    category: str = ""
    city: str = ""
    city_district: str = ""
    continent: str = ""
    country: str = ""
    country_code: str = ""
    county: str = ""
    hamlet: str = ""
    house_number: str = ""
    municipality: str = ""
    neighbourhood: str = ""
    political_union: str = ""
    postcode: str = ""
    road: str = ""
    state: str = ""
    state_code: str = ""
    state_district: str = ""
    suburb: str = ""
    town: str = ""
    village: str = ""


@dataclass
class Result:
    """A single match, in the order ranked by the service.

    Fields not promoted to attributes can be read from the result's raw JSON
    with `get`, `get_str`, `get_int`, `get_float` and `get_bool`, e.g.:
    >>> result.get_str("annotations.currency.alternate_symbols.0")

    The raw JSON is borrowed from the owning `Response`; once it is released,
    every lookup reports a miss.
    """

    confidence: int = 0
    formatted: str = ""
    bounds: LatLngBounds | None = None
    geometry: LatLng = INVALID_LATLNG
    components: Components = field(default_factory=Components)

    timezone: Timezone | None = None
    roadinfo: RoadInfo | None = None
    currency: Currency | None = None
    callingcode: int = 0
    geohash: str = ""
    what3words: str = ""

    index: int = field(default=-1, repr=False)
    owner: Response | None = field(default=None, repr=False, compare=False)

    @property
    def raw(self) -> dict[str, Any] | None:
        if self.owner is None or self.owner.raw is None:
            return None

        node, ok = json_path.lookup(self.owner.raw, f"results.{self.index}")
        return node if ok else None

    def lookup(self, path: str) -> tuple[Any, bool]:
        return json_path.lookup(self.raw, path)

    def get(self, path: str, default: Any = None) -> Any:
        return json_path.get(self.raw, path, default)

    def get_str(self, path: str) -> str | None:
        return json_path.get_str(self.raw, path)

    def get_int(self, path: str) -> int | None:
        return json_path.get_int(self.raw, path)

    def get_float(self, path: str) -> float | None:
        return json_path.get_float(self.raw, path)

    def get_bool(self, path: str) -> bool | None:
        return json_path.get_bool(self.raw, path)


@dataclass
class Response:
    """The decoded answer to one forward or reverse request.

    The response owns the parsed JSON it was decoded from; call `release` (or use it
    as a context manager) to drop it along with every result. Releasing twice is harmless.

    A response whose status is not OK is still a well-formed response: check `ok`
    (or call `raise_for_status`) before trusting `results`.
    """

    status: Status
    rate: RateInfo | None = None
    total_results: int = 0
    results: list[Result] = field(default_factory=list)
    url: str = ""
    raw: dict[str, Any] | None = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.status.code == StatusCode.OK

    def raise_for_status(self) -> None:
        raise_for_status(self.status.code, self.status.message)

    def release(self) -> None:
        for result in self.results:
            result.owner = None

        self.results = []
        self.raw = None

    def __enter__(self) -> Response:
        return self

    def __exit__(self, *args: Any) -> None:
        self.release()

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)


class Params(BaseModel):
    """Optional request parameters. Unset (None) fields are left out of the request.

    `no_annotations` is the exception: it is always sent, as the service's own
    default (annotations on) differs from this library's (annotations off).

    Args:
        abbrv (bool, optional): Attempt to abbreviate and shorten the formatted string.
        bounds (LatLngBounds, optional): Restrict results to this bounding box.
        countrycode (str, optional): Forward only. Restrict results to one or more
            ISO 3166-1 alpha-2 countries, comma separated, e.g. "gb" or "fr,be".
        language (str, optional): IETF language code (e.g. "es", "pt-BR"), or "native".
        limit (int, optional): Maximum number of results, 1-100. The service defaults to 10.
        min_confidence (int, optional): Only return results with at least this confidence, 1-10.
        no_annotations (bool): Leave annotations out of the results. Defaults to True.
        no_dedupe (bool, optional): Do not deduplicate results.
        no_record (bool, optional): Ask the service not to log the query.
        pretty (bool, optional): Pretty-print the JSON body.
        proximity (LatLng, optional): Forward only. Bias results towards this point.
        roadinfo (bool, optional): Forward only. Match the nearest road rather than an address.
    """

    model_config = ConfigDict(validate_assignment=True)

    abbrv: bool | None = None
    bounds: LatLngBounds | None = None
    countrycode: str | None = None
    language: str | None = None
    limit: int | None = Field(default=None, ge=1, le=100)
    min_confidence: int | None = Field(default=None, ge=1, le=10)
    no_annotations: bool = True
    no_dedupe: bool | None = None
    no_record: bool | None = None
    pretty: bool | None = None
    proximity: LatLng | None = None
    roadinfo: bool | None = None

    @field_validator("countrycode")
    @classmethod
    def _normalize_countrycode(cls, v: str | None) -> str | None:
        if v is None:
            return v

        v = ",".join(code.strip() for code in v.lower().split(","))
        if COUNTRYCODE_RE.fullmatch(v) is None:
            raise ValueError(
                f"countrycode must be comma separated ISO 3166-1 alpha-2 codes, got {v!r}"
            )

        return v

    @classmethod
    def defaults(cls) -> Params:
        """Every scalar unset; coordinates set to the invalid sentinel, so they are not sent."""
        return cls(proximity=INVALID_LATLNG, bounds=INVALID_BOUNDS)
