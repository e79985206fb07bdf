import json
from pathlib import Path
from typing import Any

from hotlog import get_logger
from pydantic import ValidationError

from plane_cli.config.models import SettingsFile
from plane_cli.exceptions import ConfigParseError

logger = get_logger(__name__)


def load_settings_file(path: Path) -> dict[str, Any]:
    """Load the keys present in a JSON settings file.

    Args:
        path: Path to the settings file.

    Returns:
        Mapping of the settings keys present in the file. Empty when the file
        does not exist.

    Raises:
        ConfigParseError: If the file is not UTF-8, is not a JSON object or a
            value has the wrong type.
    """
    try:
        text = path.read_text(encoding='utf-8')
    except FileNotFoundError:
        logger.debug('settings_file_missing', file=str(path))
        return {}
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, f'invalid UTF-8 ({e.reason})') from e
    except OSError as e:
        raise ConfigParseError(path, f'could not read file ({e.strerror})') from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, f'invalid JSON ({e})') from e

    if not isinstance(data, dict):
        raise ConfigParseError(path, 'top-level value must be an object')

    try:
        overlay = SettingsFile.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(path, _describe_validation_error(e)) from e

    present = overlay.model_dump(exclude_unset=True)
    logger.debug('settings_file_loaded', file=str(path), keys=sorted(present))
    return present


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = '.'.join(str(p) for p in item['loc'])
        parts.append(f'{location}: {item["msg"]}')
    return '; '.join(parts)
