from __future__ import annotations

from collections.abc import Mapping
from typing import *

from loguru import logger

from ocgeo.utils.http import MalformedResponseError
from ocgeo.utils.json_path import get_bool, get_float, get_int, get_str, lookup

from .misc import (
    COMPONENT_KEYS,
    INVALID_LATLNG,
    Components,
    Currency,
    LatLng,
    LatLngBounds,
    RateInfo,
    Response,
    Result,
    RoadInfo,
    Status,
    Timezone,
)

if TYPE_CHECKING:
    from ocgeo._types.geocode import ResponseJSON, ResultJSON


def _object(node: Any, key: str) -> Mapping[str, Any] | None:
    """The object under `key`, or None if it is absent, null, or not an object."""
    value, ok = lookup(node, key)
    return value if ok and isinstance(value, Mapping) else None


def _str(node: Any, key: str) -> str:
    return get_str(node, key) or ""


def _int(node: Any, key: str) -> int:
    return get_int(node, key) or 0


def _bool(node: Any, key: str) -> bool:
    return get_bool(node, key) or False


def decode_latlng(node: Any, name: str) -> LatLng:
    lat, lng = get_float(node, "lat"), get_float(node, "lng")

    if lat is None or lng is None:
        raise MalformedResponseError(f"'{name}' must have numeric 'lat' and 'lng' fields.")

    return LatLng(lat=lat, lng=lng)


def decode_bounds(node: Any) -> LatLngBounds:
    return LatLngBounds(
        northeast=decode_latlng(_object(node, "northeast"), "bounds.northeast"),
        southwest=decode_latlng(_object(node, "southwest"), "bounds.southwest"),
    )


def decode_status(tree: Any) -> Status:
    status = _object(tree, "status")
    code = get_int(status, "code")

    if status is None or code is None:
        raise MalformedResponseError("Response is missing 'status.code'.")

    return Status(code=code, message=_str(status, "message"))


def decode_rate(tree: Any) -> RateInfo | None:
    if (rate := _object(tree, "rate")) is None:
        return None

    return RateInfo(
        limit=_int(rate, "limit"),
        remaining=_int(rate, "remaining"),
        reset=_int(rate, "reset"),
    )


def decode_total_results(tree: Any) -> int:
    value, ok = lookup(tree, "total_results")

    if not ok:
        raise MalformedResponseError("Response is missing 'total_results'.")
    elif value is None:
        return 0

    if (total := get_int(tree, "total_results")) is None:
        raise MalformedResponseError(f"'total_results' must be an integer, got {value!r}.")

    return total


def decode_components(node: Mapping[str, Any]) -> Components:
    return Components(**{attr: _str(node, key) for attr, key in COMPONENT_KEYS.items()})


def decode_timezone(node: Mapping[str, Any]) -> Timezone:
    return Timezone(
        name=_str(node, "name"),
        short_name=_str(node, "short_name"),
        offset_string=_str(node, "offset_string"),
        offset_sec=_int(node, "offset_sec"),
        now_in_dst=_bool(node, "now_in_dst"),
    )


def decode_roadinfo(node: Mapping[str, Any]) -> RoadInfo:
    return RoadInfo(
        drive_on=_str(node, "drive_on"),
        road=_str(node, "road"),
        road_type=_str(node, "road_type"),
        speed_in=_str(node, "speed_in"),
    )


def decode_currency(node: Mapping[str, Any]) -> Currency:
    alternate_symbols = node.get("alternate_symbols")
    if not isinstance(alternate_symbols, list):
        alternate_symbols = []

    return Currency(
        iso_code=_str(node, "iso_code"),
        name=_str(node, "name"),
        symbol=_str(node, "symbol"),
        subunit=_str(node, "subunit"),
        decimal_mark=_str(node, "decimal_mark"),
        thousands_separator=_str(node, "thousands_separator"),
        html_entity=_str(node, "html_entity"),
        iso_numeric=_str(node, "iso_numeric"),
        subunit_to_unit=_int(node, "subunit_to_unit"),
        smallest_denomination=_int(node, "smallest_denomination"),
        symbol_first=_bool(node, "symbol_first"),
        alternate_symbols=tuple(s for s in alternate_symbols if isinstance(s, str)),
    )


def decode_result(node: ResultJSON | Any, index: int, owner: Response | None = None) -> Result:
    """Decodes the `index`-th element of the response's "results" array.

    Absent "bounds" leave `Result.bounds` as None; absent "geometry" leaves
    `Result.geometry` as the invalid sentinel. "components" is required.
    """
    if not isinstance(node, Mapping):
        raise MalformedResponseError(f"results.{index} must be an object.")

    if (components := _object(node, "components")) is None:
        raise MalformedResponseError(f"results.{index} is missing 'components'.")

    bounds = _object(node, "bounds")
    geometry = _object(node, "geometry")

    result = Result(
        confidence=_int(node, "confidence"),
        formatted=_str(node, "formatted"),
        bounds=decode_bounds(bounds) if bounds is not None else None,
        geometry=decode_latlng(geometry, "geometry") if geometry is not None else INVALID_LATLNG,
        components=decode_components(components),
        index=index,
        owner=owner,
    )

    if (annotations := _object(node, "annotations")) is not None:
        if (timezone := _object(annotations, "timezone")) is not None:
            result.timezone = decode_timezone(timezone)
        if (roadinfo := _object(annotations, "roadinfo")) is not None:
            result.roadinfo = decode_roadinfo(roadinfo)
        if (currency := _object(annotations, "currency")) is not None:
            result.currency = decode_currency(currency)

        result.callingcode = _int(annotations, "callingcode")
        result.geohash = _str(annotations, "geohash")
        result.what3words = _str(annotations, "what3words.words")

    return result


def decode_response(tree: ResponseJSON | Any, url: str = "") -> Response:
    """Decodes a parsed response body into a `Response`, which takes ownership of `tree`.

    Args:
        tree: The parsed JSON body.
        url (str, optional): The request URL, kept for diagnostics.

    Raises:
        MalformedResponseError: if "status" or "total_results" is missing, or
            results are expected and "results" (or a result's "components") is missing.
    """
    if not isinstance(tree, Mapping):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(tree).__name__}."
        )

    response = Response(
        status=decode_status(tree),
        rate=decode_rate(tree),
        total_results=decode_total_results(tree),
        url=url,
        raw=dict(tree),
    )

    if not response.ok:
        logger.warning(
            f"Service returned status {response.status.code}: {response.status.message}"
        )

    if response.total_results <= 0:
        return response

    results, ok = lookup(tree, "results")
    if not ok or not isinstance(results, list):
        raise MalformedResponseError(
            f"Response reports {response.total_results} results but has no 'results' array."
        )

    response.results = [
        decode_result(node, index=i, owner=response) for i, node in enumerate(results)
    ]

    return response
