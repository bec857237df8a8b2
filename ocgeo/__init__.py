from .geocode import (
    INVALID_BOUNDS,
    INVALID_LATLNG,
    Components,
    Currency,
    Geocode,
    LatLng,
    LatLngBounds,
    Params,
    RateInfo,
    Response,
    Result,
    RoadInfo,
    Status,
    Timezone,
    build_url,
    decode_response,
    reverse_query,
)
from .utils import (
    VERSION,
    DegreeCoords,
    MalformedResponseError,
    OpenCageException,
    RequestFailedError,
    StatusCode,
    decimal_to_degrees,
    degrees_to_decimal,
    is_valid_bounds,
    is_valid_latlng,
)

__version__ = VERSION
