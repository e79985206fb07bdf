from plane_cli.exceptions.api import (
    ApiError,
    InvalidResponseError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from plane_cli.exceptions.config import (
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
    MissingSettingError,
)
from plane_cli.exceptions.core import PlaneCliError, log_exception
from plane_cli.exceptions.usage import UsageError

__all__ = [
    'ApiError',
    'ConfigError',
    'ConfigParseError',
    'ConfigValidationError',
    'InvalidResponseError',
    'MissingSettingError',
    'NotFoundError',
    'PlaneCliError',
    'RateLimitedError',
    'ServerError',
    'TransportError',
    'UnauthorizedError',
    'UnexpectedStatusError',
    'UsageError',
    'log_exception',
]
