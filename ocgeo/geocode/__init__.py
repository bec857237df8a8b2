from .decode import decode_response
from .geocode import Geocode
from .misc import (
    INVALID_BOUNDS,
    INVALID_LATLNG,
    Components,
    Currency,
    LatLng,
    LatLngBounds,
    Params,
    RateInfo,
    Response,
    Result,
    RoadInfo,
    Status,
    Timezone,
)
from .request import build_url, reverse_query
