import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from hotlog import get_logger
from pydantic import ValidationError

from plane_cli.config.loader import load_settings_file
from plane_cli.config.models import CliOverrides, Settings
from plane_cli.exceptions import ConfigValidationError

logger = get_logger(__name__)

HOME_ENV_VAR = 'PLANE_CLI_HOME'

# Environment variable -> settings field
ENV_FIELDS: dict[str, str] = {
    'PLANE_CLI_API_KEY': 'api_key',
    'PLANE_CLI_BASE_URL': 'base_url',
    'PLANE_CLI_WORKSPACE': 'workspace',
    'PLANE_CLI_TIMEOUT': 'timeout',
}


def home_dir(environ: Mapping[str, str]) -> Path:
    """Return the directory holding ``config/settings*.json``.

    ``PLANE_CLI_HOME`` when set, otherwise the current working directory.
    """
    override = environ.get(HOME_ENV_VAR)
    if override is not None:
        return Path(override)
    return Path.cwd()


def settings_paths(home: Path) -> tuple[Path, Path]:
    """Return the (base, local) settings file paths under *home*."""
    config_dir = home / 'config'
    return config_dir / 'settings.json', config_dir / 'settings.local.json'


def resolve_settings(
    *,
    defaults: Settings,
    base_file: Path,
    local_file: Path,
    environ: Mapping[str, str],
    overrides: CliOverrides,
) -> Settings:
    """Merge every configuration layer into one immutable Settings value.

    Precedence, lowest to highest:
    defaults -> base_file -> local_file -> environment -> command line.
    Each layer only replaces the fields it actually defines.

    Args:
        defaults: Built-in default settings
        base_file: Path to config/settings.json (may not exist)
        local_file: Path to config/settings.local.json (may not exist)
        environ: Environment mapping (usually os.environ)
        overrides: Values from global command-line flags

    Returns:
        The validated effective settings

    Raises:
        ConfigParseError: If either settings file is malformed
        ConfigValidationError: If the merged values are invalid
    """
    merged: dict[str, Any] = defaults.model_dump()
    merged.update(load_settings_file(base_file))
    merged.update(load_settings_file(local_file))
    merged.update(_environment_layer(environ))
    merged.update(overrides.model_dump(exclude_none=True))

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        fields = ', '.join(str(item['loc'][0]) for item in e.errors())
        msg = f'invalid settings value for: {fields}'
        raise ConfigValidationError(msg) from e

    logger.debug(
        'settings_resolved',
        base_url=settings.base_url,
        workspace=settings.workspace,
        timeout=settings.timeout,
        json_mode=settings.json_mode,
        api_key_set=settings.api_key is not None,
    )
    return settings


def load_settings(
    overrides: CliOverrides,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve settings from the standard locations for this process."""
    env = os.environ if environ is None else environ
    base_file, local_file = settings_paths(home_dir(env))
    return resolve_settings(
        defaults=Settings(),
        base_file=base_file,
        local_file=local_file,
        environ=env,
        overrides=overrides,
    )


def _environment_layer(environ: Mapping[str, str]) -> dict[str, Any]:
    layer: dict[str, Any] = {}
    for var, field in ENV_FIELDS.items():
        value = environ.get(var)
        if value is None:
            continue
        if field == 'timeout':
            timeout = _parse_timeout(value)
            if timeout is None:
                logger.debug('ignored_invalid_env_timeout', variable=var, value=value)
                continue
            layer[field] = timeout
        else:
            layer[field] = value
    return layer


def _parse_timeout(value: str) -> int | None:
    try:
        timeout = int(value.strip())
    except ValueError:
        return None
    return timeout if timeout > 0 else None
