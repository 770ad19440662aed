from .errors import (
    FETCH_ERRORS,
    as_fetch_error,
    SportsDataError,
    DataUnavailableError,
    MalformedResponseError,
    APIError,
    RateLimitError,
    ServerError,
    ClientError,
)

__all__ = [
    'FETCH_ERRORS',
    'as_fetch_error',
    # Data errors
    'SportsDataError',
    'DataUnavailableError',
    'MalformedResponseError',
    # HTTP errors
    'APIError',
    'RateLimitError',
    'ServerError',
    'ClientError',
]
