from plane_cli.exceptions.core import PlaneCliError


class UsageError(PlaneCliError):
    """Command-line input is missing or invalid (raised before any I/O)."""

    log_category = 'usage_error'
