from .loader import load_settings_file
from .models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, CliOverrides, Settings, SettingsFile
from .resolution import (
    ENV_FIELDS,
    HOME_ENV_VAR,
    home_dir,
    load_settings,
    resolve_settings,
    settings_paths,
)

__all__ = [
    # Models
    'DEFAULT_BASE_URL',
    'DEFAULT_TIMEOUT',
    'CliOverrides',
    'Settings',
    'SettingsFile',
    # Loader
    'load_settings_file',
    # Resolution
    'ENV_FIELDS',
    'HOME_ENV_VAR',
    'home_dir',
    'load_settings',
    'resolve_settings',
    'settings_paths',
]
