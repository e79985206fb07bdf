from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = 'https://api.plane.so'
DEFAULT_TIMEOUT = 30


class Settings(BaseModel):
    """Effective settings for a single invocation.

    Built once by resolve_settings() from defaults, the two config files, the
    environment and the command line, then passed to the API client and the
    renderer. Instances are immutable.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(
        default=None,
        description='Plane API key, sent as the X-API-Key header',
        repr=False,
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=1,
        description='Root URL of the Plane instance (without /api/v1)',
    )
    workspace: str | None = Field(
        default=None,
        description='Workspace slug used to scope every endpoint',
    )
    timeout: int = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description='Request timeout in seconds',
    )
    json_mode: bool = Field(
        default=False,
        description='Emit raw JSON instead of tables',
    )


class SettingsFile(BaseModel):
    """Keys accepted in config/settings.json and config/settings.local.json.

    Every key is optional; only the keys actually present in a file overlay
    the accumulated settings. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra='ignore')

    base_url: str | None = Field(default=None, description='Plane API base URL')
    api_key: str | None = Field(default=None, description='Plane API key')
    workspace: str | None = Field(default=None, description='Default workspace slug')
    timeout: int | None = Field(default=None, description='Request timeout in seconds')


class CliOverrides(BaseModel):
    """Values supplied by global command-line flags.

    None means the flag was not given. An empty string is a value and is
    passed through.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    base_url: str | None = None
    workspace: str | None = None
    timeout: int | None = None
    json_mode: bool | None = None
