from .coords import (
    DegreeCoords,
    decimal_to_degrees,
    degrees_to_decimal,
    is_valid_bounds,
    is_valid_latlng,
)
from .http import (
    AuthenticationError,
    ForbiddenError,
    InvalidRequestError,
    MalformedResponseError,
    OpenCageException,
    QuotaExceededError,
    RateLimitExceededError,
    RequestFailedError,
    http_get,
    raise_for_status,
)
from .misc import (
    API_KEY_ENV_VAR,
    API_URL,
    API_URL_ENV_VAR,
    COORD_PRECISION,
    DEFAULT_TIMEOUT,
    USER_AGENT,
    VERSION,
    StatusCode,
)
