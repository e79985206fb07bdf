from pathlib import Path

from plane_cli.exceptions.core import PlaneCliError


class ConfigError(PlaneCliError):
    """Base class for configuration-related errors."""

    log_category = 'config_error'


class ConfigParseError(ConfigError):
    """A config file exists but is not a valid settings document."""

    log_category = 'config_parse_failed'

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f'invalid config file {path}: {reason}')
        self.path = path
        self.reason = reason


class ConfigValidationError(ConfigError):
    """Merged settings failed validation (e.g. a non-positive timeout)."""

    log_category = 'config_validation_failed'


class MissingSettingError(ConfigError):
    """A setting required by the requested command was never provided."""

    log_category = 'missing_setting'
